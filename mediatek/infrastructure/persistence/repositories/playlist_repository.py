"""
Implementation SQLModel du repository Playlist.

Listing, tri (nom, nombre de formations), recherche et persistance des playlists.
"""

from mediatek.core.ports.repositories import IPlaylistRepository
from mediatek.core.value_objects import FieldRef, SortDirection
from mediatek.infrastructure.persistence.models import Categorie, Formation, Playlist
from mediatek.infrastructure.persistence.repositories.base import (
    COUNT_FIELD,
    SQLModelCatalogRepository,
)


class SQLModelPlaylistRepository(SQLModelCatalogRepository[Playlist], IPlaylistRepository):
    """
    Repository SQLModel pour les playlists.

    La recherche par categorie passe par les formations de la playlist
    (playlists -> formations -> categories), par nom ou par identifiant exact.
    """

    model = Playlist
    sortable = {
        FieldRef("name"): Playlist.name,
    }
    searchable = {
        FieldRef("name"): Playlist.name,
        FieldRef("description"): Playlist.description,
        FieldRef("name", "categories"): Categorie.name,
        FieldRef("id", "categories"): Categorie.id,
    }
    exact_search = frozenset({FieldRef("id", "categories")})
    joins = {
        "categories": (Playlist.formations, Formation.categories),
    }
    default_order = (Playlist.name.asc(), Playlist.id.asc())
    count_field = COUNT_FIELD

    def find_all_order_by_name(self, direction: str) -> list[Playlist]:
        """Toutes les playlists triees par nom."""
        return self.find_all_order_by("name", direction)

    def find_all_order_by_formations_count(self, direction: str) -> list[Playlist]:
        """Toutes les playlists triees par nombre de formations."""
        return self._find_all_order_by_count(SortDirection.parse(direction))
