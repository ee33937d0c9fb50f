from app.repositories.student_repository import StudentRepository

__all__ = ["StudentRepository"]
