"""
Exceptions métier de MediaTek.

Toutes les erreurs levées par le domaine et la couche web dérivent
de MediatekError, ce qui permet aux gestionnaires d'exceptions de
l'application de les intercepter de façon uniforme.
"""


class MediatekError(Exception):
    """Erreur de base de l'application."""


class InvalidQueryError(MediatekError):
    """
    Champ, relation ou sens de tri non autorisé pour une requête de listing.

    Levée AVANT toute construction de requête SQL : les noms fournis
    dans l'URL ne sont jamais transmis tels quels à la couche de stockage.
    """

    def __init__(self, message: str, field: str = "", relation: str = "") -> None:
        super().__init__(message)
        self.field = field
        self.relation = relation


class LoginRequiredError(MediatekError):
    """Aucun utilisateur authentifié pour une route protégée."""


class AccessDeniedError(MediatekError):
    """L'utilisateur authentifié ne possède pas le rôle requis."""

    def __init__(self, role: str) -> None:
        super().__init__(f"Rôle requis : {role}")
        self.role = role


class EntityNotFoundError(MediatekError):
    """Entité demandée par une page publique absente de la base."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} introuvable (id={entity_id})")
        self.entity = entity
        self.entity_id = entity_id
