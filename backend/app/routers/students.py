"""
Router pour les élèves.
Création (POST /api/v1/students)
Recherche filtrée (GET /api/v1/students?name=&age=&email=&active=)
Élèves actifs (GET /api/v1/students/active)
Détail, mise à jour, suppression logique (GET/PUT/DELETE /api/v1/students/{id})
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.schemas.student import StudentCreate, StudentFilter, StudentResponse, StudentUpdate
from app.services.student_service import StudentService, get_student_service

router = APIRouter(prefix="/api/v1/students", tags=["Élèves"])

NOT_FOUND = "Élève introuvable."


@router.post("", response_model=StudentResponse, status_code=201, summary="Créer un élève")
def create_student(data: StudentCreate, service: StudentService = Depends(get_student_service)):
    """Crée un élève ; l'id et les horodatages sont attribués par la base."""
    return service.create(data)


@router.get("", response_model=List[StudentResponse], summary="Rechercher des élèves")
def list_students(
    name: Optional[str] = Query(None, description="Sous-chaîne du nom (insensible à la casse)"),
    age: Optional[int] = Query(None, description="Âge exact"),
    email: Optional[str] = Query(None, description="Sous-chaîne de l'email"),
    active: Optional[str] = Query(None, description="1 ou 0 ; toute autre valeur est ignorée"),
    service: StudentService = Depends(get_student_service),
):
    """
    Retourne les élèves non supprimés correspondant à tous les filtres fournis,
    triés par id croissant. Un nom ou un email vide n'est pas appliqué.
    """
    filters = StudentFilter(
        name=name or None,
        age=age,
        email=email or None,
        active=active,
    )
    return service.get_with_filters(filters)


@router.get("/active", response_model=List[StudentResponse], summary="Lister les élèves actifs")
def list_active_students(service: StudentService = Depends(get_student_service)):
    """Retourne les élèves actifs et non supprimés, triés par id croissant."""
    return service.get_all_active()


@router.get("/{student_id}", response_model=StudentResponse, summary="Détail d'un élève")
def get_student(student_id: int, service: StudentService = Depends(get_student_service)):
    student = service.get_by_id(student_id)
    if student is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return student


@router.put("/{student_id}", response_model=StudentResponse, summary="Modifier un élève")
def update_student(
    student_id: int,
    data: StudentUpdate,
    service: StudentService = Depends(get_student_service),
):
    """Met à jour les champs fournis d'un élève. Les champs absents ne sont pas modifiés."""
    student = service.update_by_id(student_id, data)
    if student is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return student


@router.delete("/{student_id}", summary="Supprimer un élève")
def delete_student(student_id: int, service: StudentService = Depends(get_student_service)):
    """
    Suppression logique (deleted = true, active = false).
    L'élève reste en base mais n'apparaît plus dans aucune lecture.
    """
    if not service.soft_delete_by_id(student_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return {"success": True}
