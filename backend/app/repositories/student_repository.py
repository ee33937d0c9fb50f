"""
Accès aux données des élèves.

Seul endroit où les requêtes sur la table students sont construites :
toute lecture, recherche et mise à jour exclut les élèves supprimés
(deleted = true), à l'exception de la suppression logique elle-même.
"""

import logging
from typing import NoReturn, Optional

from sqlalchemy import Select, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import StorageError
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentFilter, StudentUpdate

logger = logging.getLogger(__name__)


class StudentRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all_active(self) -> list[Student]:
        """Élèves actifs et non supprimés, triés par id croissant."""
        query = (
            select(Student)
            .where(Student.active.is_(True), Student.deleted.is_(False))
            .order_by(Student.id.asc())
        )
        return self._fetch_all(query)

    def find_with_filters(self, filters: StudentFilter) -> list[Student]:
        """
        Élèves non supprimés correspondant à tous les critères fournis.

        - name  : sous-chaîne, insensible à la casse
        - age   : égalité
        - email : sous-chaîne
        - active: égalité (uniquement si la valeur a été reconnue)

        Sans critère, retourne tous les élèves non supprimés, actifs ou non.
        """
        conditions = [Student.deleted.is_(False)]

        if filters.name is not None:
            conditions.append(Student.name.icontains(filters.name, autoescape=True))
        if filters.age is not None:
            conditions.append(Student.age == filters.age)
        if filters.email is not None:
            conditions.append(Student.email.contains(filters.email, autoescape=True))
        if filters.active is not None:
            conditions.append(Student.active.is_(filters.active))

        query = select(Student).where(*conditions).order_by(Student.id.asc())
        return self._fetch_all(query)

    def find_by_id(self, student_id: int) -> Optional[Student]:
        """Retourne l'élève non supprimé correspondant, ou None."""
        query = select(Student).where(Student.id == student_id, Student.deleted.is_(False))
        try:
            return self.db.execute(query).scalar_one_or_none()
        except SQLAlchemyError as exc:
            self._fail("lecture de l'élève %s" % student_id, exc)

    def create(self, data: StudentCreate) -> Student:
        """Insère un élève ; id, created_at et updated_at sont fixés par la base."""
        student = Student(**data.model_dump())
        self.db.add(student)
        try:
            self.db.commit()
            self.db.refresh(student)
        except SQLAlchemyError as exc:
            self._fail("création d'un élève", exc)
        return student

    def update_by_id(self, student_id: int, data: StudentUpdate) -> Optional[Student]:
        """
        Met à jour les champs fournis d'un élève non supprimé, en une seule requête.
        Les champs absents ne sont pas modifiés ; updated_at est rafraîchi par la base.
        Retourne l'élève rechargé, ou None si aucune ligne ne correspond.
        """
        values = data.model_dump(exclude_unset=True)
        if not values:
            return self.find_by_id(student_id)

        statement = (
            update(Student)
            .where(Student.id == student_id, Student.deleted.is_(False))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(statement)
            self.db.commit()
        except SQLAlchemyError as exc:
            self._fail("mise à jour de l'élève %s" % student_id, exc)

        if result.rowcount == 0:
            return None
        return self.find_by_id(student_id)

    def soft_delete_by_id(self, student_id: int) -> bool:
        """
        Suppression logique : deleted = true et active = false.
        Correspondance sur l'id seul, donc idempotent sur un élève déjà supprimé.
        Retourne True si une ligne a été touchée.
        """
        statement = (
            update(Student)
            .where(Student.id == student_id)
            .values(deleted=True, active=False)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(statement)
            self.db.commit()
        except SQLAlchemyError as exc:
            self._fail("suppression de l'élève %s" % student_id, exc)
        return result.rowcount > 0

    def _fetch_all(self, query: Select) -> list[Student]:
        try:
            return list(self.db.execute(query).scalars().all())
        except SQLAlchemyError as exc:
            self._fail("recherche d'élèves", exc)

    def _fail(self, action: str, exc: SQLAlchemyError) -> NoReturn:
        """Annule la transaction en cours et relève l'erreur en StorageError."""
        self.db.rollback()
        logger.error("Erreur base de données lors de la %s : %s", action, exc)
        raise StorageError(f"Erreur base de données lors de la {action}.") from exc
