"""
Exceptions applicatives.
"""


class StorageError(RuntimeError):
    """
    Échec de la couche de persistance (connexion, contrainte, timeout).

    Enveloppe l'exception SQLAlchemy d'origine (disponible via __cause__)
    pour que les appelants ne dépendent pas du moteur de base de données.
    """
