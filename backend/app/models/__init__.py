# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant create_all et avant le chargement des routers.

from app.models.student import Student  # noqa: F401
