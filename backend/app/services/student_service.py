"""
Service métier pour les élèves.

Point d'entrée stable pour les routers et les tests : chaque opération
délègue au repository sans transformer ni les entrées ni les résultats.
Les préoccupations transverses (journalisation, validation) se greffent ici
sans toucher aux requêtes.
"""

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.student import Student
from app.repositories.student_repository import StudentRepository
from app.schemas.student import StudentCreate, StudentFilter, StudentUpdate

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, repository: StudentRepository):
        self.repository = repository

    def get_all_active(self) -> list[Student]:
        return self.repository.find_all_active()

    def get_with_filters(self, filters: StudentFilter) -> list[Student]:
        return self.repository.find_with_filters(filters)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.repository.find_by_id(student_id)

    def create(self, data: StudentCreate) -> Student:
        student = self.repository.create(data)
        logger.info("Élève créé : %s (id=%s)", student.name, student.id)
        return student

    def update_by_id(self, student_id: int, data: StudentUpdate) -> Optional[Student]:
        student = self.repository.update_by_id(student_id, data)
        if student is not None:
            logger.info("Élève %s mis à jour (%s)", student_id, ", ".join(sorted(data.model_fields_set)))
        return student

    def soft_delete_by_id(self, student_id: int) -> bool:
        deleted = self.repository.soft_delete_by_id(student_id)
        if deleted:
            logger.info("Élève %s supprimé (suppression logique)", student_id)
        return deleted


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    """Dépendance FastAPI — service branché sur la session de la requête."""
    return StudentService(StudentRepository(db))
