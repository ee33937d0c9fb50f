"""
Configuration partagée pour tous les tests.
- `client` : BDD mockée, aucune connexion réelle à PostgreSQL.
- `db_session` : base SQLite en mémoire pour tester les vraies requêtes.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from unittest.mock import MagicMock

from app.database import Base, get_db
from app.main import app


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sqlite_engine():
    """Moteur SQLite en mémoire partagé entre threads (TestClient)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(sqlite_engine):
    """Session SQLAlchemy sur la base SQLite de test."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_client(db_session):
    """Client HTTP branché sur la base SQLite (scénarios de bout en bout)."""
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
