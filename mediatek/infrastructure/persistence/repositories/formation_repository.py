"""
Implementation SQLModel du repository Formation.

Listing, tri, recherche et persistance des formations.
"""

from sqlmodel import select

from mediatek.core.ports.repositories import IFormationRepository
from mediatek.core.value_objects import FieldRef
from mediatek.infrastructure.persistence.models import Categorie, Formation, Playlist
from mediatek.infrastructure.persistence.repositories.base import SQLModelCatalogRepository


class SQLModelFormationRepository(SQLModelCatalogRepository[Formation], IFormationRepository):
    """
    Repository SQLModel pour les formations.

    Tri possible sur le titre, la date de parution, le nom de la playlist
    ou le nom des categories ; recherche sur le titre, la description,
    le nom de la playlist ou le nom des categories, et filtre exact par
    identifiant de categorie. Les resultats de recherche sont ordonnes
    de la plus recente a la plus ancienne.
    """

    model = Formation
    sortable = {
        FieldRef("title"): Formation.title,
        FieldRef("published_at"): Formation.published_at,
        FieldRef("name", "playlist"): Playlist.name,
        FieldRef("name", "categories"): Categorie.name,
    }
    searchable = {
        FieldRef("title"): Formation.title,
        FieldRef("description"): Formation.description,
        FieldRef("name", "playlist"): Playlist.name,
        FieldRef("name", "categories"): Categorie.name,
        FieldRef("id", "categories"): Categorie.id,
    }
    exact_search = frozenset({FieldRef("id", "categories")})
    joins = {
        "playlist": (Formation.playlist,),
        "categories": (Formation.categories,),
    }
    default_order = (Formation.published_at.desc(), Formation.id.desc())

    def find_all_lasted(self, count: int) -> list[Formation]:
        """Retourne les `count` formations les plus recentes."""
        statement = select(Formation).order_by(*self.default_order).limit(count)
        return list(self._session.exec(statement).all())

    def find_all_for_one_playlist(self, playlist_id: int) -> list[Formation]:
        """Formations d'une playlist, par date de parution croissante."""
        statement = (
            select(Formation)
            .join(Formation.playlist)
            .where(Playlist.id == playlist_id)
            .order_by(Formation.published_at.asc(), Formation.id.asc())
        )
        return list(self._session.exec(statement).all())
