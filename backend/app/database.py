"""
Configuration de la connexion à la base de données.
Utilise SQLAlchemy avec un moteur synchrone (PostgreSQL en production).

pool_pre_ping teste chaque connexion du pool avant usage : une connexion
coupée côté serveur (redémarrage, timeout d'inactivité) est remplacée
au lieu de faire échouer la requête suivante en StorageError.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dépendance FastAPI — fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
