"""
Interfaces ports pour les repositories.

Les trois repositories de listing (formations, playlists, catégories)
partagent le même contrat de tri et de recherche :

- find_all_order_by(field, direction, relation="") : tri sur un champ de
  l'entité ou, si relation est fournie, sur un champ de l'entité liée
- find_by_contain_value(field, value, relation="") : recherche "contient" ;
  une valeur vide renvoie le listing par défaut
- add / remove : persistance d'une entité puis commit

Les noms de champ et de relation sont validés contre une liste blanche
par chaque implémentation (InvalidQueryError sinon).
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from mediatek.infrastructure.persistence.models import (
        Categorie,
        Formation,
        Playlist,
        User,
    )

T = TypeVar("T")


class ICatalogRepository(ABC, Generic[T]):
    """
    Contrat commun des repositories de listing.

    Définit les opérations de tri, de recherche et de persistance
    partagées par les formations, playlists et catégories.
    """

    @abstractmethod
    def find(self, entity_id: int) -> Optional[T]:
        """Récupère une entité par son ID, None si absente."""
        ...

    @abstractmethod
    def find_all(self) -> list[T]:
        """Liste toutes les entités dans l'ordre par défaut."""
        ...

    @abstractmethod
    def find_all_order_by(self, field: str, direction: str, relation: str = "") -> list[T]:
        """Liste toutes les entités triées sur le champ demandé."""
        ...

    @abstractmethod
    def find_by_contain_value(self, field: str, value: str, relation: str = "") -> list[T]:
        """Liste les entités dont le champ contient la valeur."""
        ...

    @abstractmethod
    def add(self, entity: T) -> T:
        """Persiste l'entité (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def remove(self, entity: T) -> None:
        """Supprime l'entité."""
        ...


class IFormationRepository(ICatalogRepository["Formation"]):
    """Interface de stockage des formations."""

    @abstractmethod
    def find_all_lasted(self, count: int) -> list["Formation"]:
        """Les `count` formations les plus récentes."""
        ...

    @abstractmethod
    def find_all_for_one_playlist(self, playlist_id: int) -> list["Formation"]:
        """Formations d'une playlist, de la plus ancienne à la plus récente."""
        ...


class IPlaylistRepository(ICatalogRepository["Playlist"]):
    """Interface de stockage des playlists."""

    @abstractmethod
    def find_all_order_by_name(self, direction: str) -> list["Playlist"]:
        ...

    @abstractmethod
    def find_all_order_by_formations_count(self, direction: str) -> list["Playlist"]:
        ...


class ICategorieRepository(ICatalogRepository["Categorie"]):
    """Interface de stockage des catégories."""

    @abstractmethod
    def find_all_order_by_name(self, direction: str) -> list["Categorie"]:
        ...

    @abstractmethod
    def find_all_order_by_formations_count(self, direction: str) -> list["Categorie"]:
        ...

    @abstractmethod
    def find_all_for_one_playlist(self, playlist_id: int) -> list["Categorie"]:
        """Catégories distinctes des formations d'une playlist, par nom."""
        ...

    @abstractmethod
    def find_one_by_name(self, name: str) -> Optional["Categorie"]:
        """Catégorie portant ce nom, sans tenir compte de la casse."""
        ...

    @abstractmethod
    def find_by_ids(self, ids: list[int]) -> list["Categorie"]:
        ...


class IUserRepository(ABC):
    """Interface de stockage des comptes d'administration."""

    @abstractmethod
    def find(self, user_id: int) -> Optional["User"]:
        ...

    @abstractmethod
    def find_by_username(self, username: str) -> Optional["User"]:
        ...

    @abstractmethod
    def add(self, user: "User") -> "User":
        ...
