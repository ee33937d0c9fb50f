"""
Modèle SQLAlchemy pour la table students.

Visibilité d'un élève = deux booléens indépendants :
- active  : modifiable librement tant que l'élève n'est pas supprimé ;
- deleted : suppression logique, état terminal (active forcé à False).
id et les deux horodatages sont attribués par la base.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func, text

from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    email = Column(String(255), nullable=False)
    active = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    deleted = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<Student id={self.id} name={self.name!r} active={self.active} deleted={self.deleted}>"
