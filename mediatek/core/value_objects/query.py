"""
Objets valeur pour la construction des requêtes de listing.

Les routes de tri et de recherche reçoivent des noms de champ et de relation
depuis l'URL. Ils sont convertis en FieldRef puis résolus contre la liste
blanche de chaque repository : aucun nom brut n'atteint la couche SQL.
"""

from dataclasses import dataclass
from enum import Enum

from mediatek.core.exceptions import InvalidQueryError


class SortDirection(str, Enum):
    """Sens de tri, sensible à la casse comme dans les URLs (ASC / DESC)."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str) -> "SortDirection":
        """
        Convertit la valeur issue de l'URL en SortDirection.

        Raises :
            InvalidQueryError : si la valeur n'est ni "ASC" ni "DESC"
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidQueryError(f"Sens de tri inconnu : {value!r}") from None


@dataclass(frozen=True)
class FieldRef:
    """
    Référence vers un champ, éventuellement porté par une entité liée.

    Attributs :
        field : Nom du champ (ex: "title", "name", "nb_formations")
        relation : Nom de la relation à joindre, "" pour l'entité principale
    """

    field: str
    relation: str = ""

    def __str__(self) -> str:
        if self.relation:
            return f"{self.relation}.{self.field}"
        return self.field
