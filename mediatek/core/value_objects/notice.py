"""
Message transitoire (flash) affiché à l'utilisateur.

Le message est une valeur explicite retournée par les routes et transmise
à la construction de la réponse, plutôt qu'un état global mutable.
"""

from dataclasses import asdict, dataclass
from enum import Enum


class NoticeKind(str, Enum):
    """Type de message, utilisé comme classe CSS dans les templates."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """
    Message à afficher une seule fois, à la requête suivante.

    Attributs :
        kind : Type de message (success, warning, error)
        message : Texte affiché à l'utilisateur
    """

    kind: NoticeKind
    message: str

    @classmethod
    def success(cls, message: str) -> "Notice":
        return cls(NoticeKind.SUCCESS, message)

    @classmethod
    def warning(cls, message: str) -> "Notice":
        return cls(NoticeKind.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "Notice":
        return cls(NoticeKind.ERROR, message)

    def to_dict(self) -> dict[str, str]:
        """Forme sérialisable, stockée dans la session le temps d'une redirection."""
        data = asdict(self)
        data["kind"] = self.kind.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "Notice":
        return cls(NoticeKind(data["kind"]), data["message"])
