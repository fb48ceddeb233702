"""
Implementation SQLModel du repository Categorie.

Listing, tri, recherche, controle de doublon et persistance des categories.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import select

from mediatek.core.ports.repositories import ICategorieRepository
from mediatek.core.value_objects import FieldRef, SortDirection
from mediatek.infrastructure.persistence.models import Categorie, Formation, Playlist
from mediatek.infrastructure.persistence.repositories.base import (
    COUNT_FIELD,
    SQLModelCatalogRepository,
)


class SQLModelCategorieRepository(SQLModelCatalogRepository[Categorie], ICategorieRepository):
    """
    Repository SQLModel pour les categories.

    La recherche croisee passe par les formations rattachees
    (categories -> formations) : "title" + relation "formations"
    retourne les categories ayant au moins une formation dont le titre
    contient la valeur.
    """

    model = Categorie
    sortable = {
        FieldRef("name"): Categorie.name,
    }
    searchable = {
        FieldRef("name"): Categorie.name,
        FieldRef("title", "formations"): Formation.title,
    }
    joins = {
        "formations": (Categorie.formations,),
    }
    default_order = (Categorie.name.asc(), Categorie.id.asc())
    count_field = COUNT_FIELD

    def find_all_order_by_name(self, direction: str) -> list[Categorie]:
        """Toutes les categories triees par nom."""
        return self.find_all_order_by("name", direction)

    def find_all_order_by_formations_count(self, direction: str) -> list[Categorie]:
        """Toutes les categories triees par nombre de formations."""
        return self._find_all_order_by_count(SortDirection.parse(direction))

    def find_all_for_one_playlist(self, playlist_id: int) -> list[Categorie]:
        """Categories distinctes des formations d'une playlist, par nom croissant."""
        statement = (
            select(Categorie)
            .join(Categorie.formations)
            .join(Formation.playlist)
            .where(Playlist.id == playlist_id)
            .order_by(Categorie.name.asc(), Categorie.id.asc())
        )
        return self._unique(self._session.exec(statement).all())

    def find_one_by_name(self, name: str) -> Optional[Categorie]:
        """
        Recherche une categorie par nom sans tenir compte de la casse.

        La valeur n'est pas nettoyee des espaces : seul l'ajout applique trim.
        """
        statement = select(Categorie).where(func.lower(Categorie.name) == name.lower())
        return self._session.exec(statement).first()

    def find_by_ids(self, ids: list[int]) -> list[Categorie]:
        """Categories dont l'ID figure dans la liste, par nom croissant."""
        if not ids:
            return []
        statement = (
            select(Categorie).where(Categorie.id.in_(ids)).order_by(*self.default_order)
        )
        return list(self._session.exec(statement).all())
