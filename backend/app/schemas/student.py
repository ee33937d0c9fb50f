"""
Schémas Pydantic pour les élèves.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, EmailStr, field_validator

# Seules valeurs reconnues pour le filtre `active` (query string ou JSON)
_ACTIVE_VALUES = {"1": True, "0": False}


class StudentCreate(BaseModel):
    """Schéma de création d'un élève (POST /students)."""
    name: str
    age: int
    email: EmailStr
    active: bool = True

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom ne peut pas être vide.")
        return v.strip()

    @field_validator("age")
    @classmethod
    def age_positive(cls, v: int) -> int:
        if v < 0:
            raise ValueError("L'âge doit être positif.")
        return v


class StudentUpdate(BaseModel):
    """Schéma de mise à jour partielle d'un élève (PUT /students/{id})."""
    name: Optional[str] = None
    age: Optional[int] = None
    email: Optional[EmailStr] = None
    active: Optional[bool] = None

    @field_validator("name", "age", "email", "active", mode="before")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        # Un champ omis reste inchangé ; un champ envoyé à null est refusé (colonnes NOT NULL)
        if v is None:
            raise ValueError("Le champ ne peut pas être null.")
        return v

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le nom ne peut pas être vide.")
        return v.strip() if v else v

    @field_validator("age")
    @classmethod
    def age_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("L'âge doit être positif.")
        return v


class StudentFilter(BaseModel):
    """
    Critères de recherche, tous optionnels et combinés par ET.

    `active` est volontairement tolérant : toute valeur autre que vrai/faux
    (True/False, 1/0, "1"/"0") est ignorée au lieu de lever une erreur.
    """
    name: Optional[str] = None
    age: Optional[int] = None
    email: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("active", mode="before")
    @classmethod
    def lenient_active(cls, v: Any) -> Optional[bool]:
        if isinstance(v, bool):
            return v
        if isinstance(v, int):
            return _ACTIVE_VALUES.get(str(v))
        if isinstance(v, str):
            return _ACTIVE_VALUES.get(v.strip())
        return None


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève."""
    id: int
    name: str
    age: int
    email: str
    active: bool
    deleted: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
