"""
Modeles SQLModel pour la base de donnees MediaTek.

Ces modeles representent les tables de la base de donnees et portent aussi
les proprietes derivees utilisees par les templates (nombre de formations,
categories d'une playlist, miniatures YouTube).

Tables:
- formations: Formations (videos) avec date de parution et identifiant YouTube
- playlists: Regroupements de formations
- categories: Etiquettes appliquees aux formations
- formation_categorie: Table de liaison formations <-> categories
- users: Comptes d'administration

Relations:
- Formation -> Playlist : plusieurs-a-un, la formation porte la cle etrangere
  (ON DELETE RESTRICT : une playlist non vide ne peut pas etre supprimee)
- Formation <-> Categorie : plusieurs-a-plusieurs via formation_categorie,
  ecrite depuis la formation, lisible des deux cotes
"""

from datetime import date
from typing import Optional

from sqlalchemy import JSON, Column, ForeignKey, Integer
from sqlmodel import Field, Relationship, SQLModel

YOUTUBE_THUMBNAIL_URL = "https://i.ytimg.com/vi/"

ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"


class FormationCategorieLink(SQLModel, table=True):
    """Table de liaison entre formations et categories."""

    __tablename__ = "formation_categorie"

    formation_id: int | None = Field(
        default=None, foreign_key="formations.id", primary_key=True
    )
    categorie_id: int | None = Field(
        default=None, foreign_key="categories.id", primary_key=True
    )


class Playlist(SQLModel, table=True):
    """
    Modele representant une playlist (groupe ordonne de formations).

    La suppression d'une playlist contenant des formations est refusee :
    la relation est en passive_deletes="all" pour que l'ORM ne mette jamais
    playlist_id a NULL, la contrainte RESTRICT fait le reste.
    """

    __tablename__ = "playlists"

    id: int | None = Field(default=None, primary_key=True)
    name: str | None = Field(default=None, max_length=100, index=True)
    description: str | None = None

    formations: list["Formation"] = Relationship(
        back_populates="playlist",
        sa_relationship_kwargs={"passive_deletes": "all"},
    )

    @property
    def formations_count(self) -> int:
        """Nombre de formations de la playlist."""
        return len(self.formations)

    @property
    def categories_playlist(self) -> list[str]:
        """
        Noms distincts des categories des formations de la playlist.

        L'ordre est celui de premiere apparition : formations dans l'ordre
        de la collection, puis categories de chaque formation.
        """
        names: list[str] = []
        for formation in self.formations:
            for categorie in formation.categories:
                if categorie.name not in names:
                    names.append(categorie.name)
        return names


class Categorie(SQLModel, table=True):
    """
    Modele representant une categorie de formations.

    L'unicite du nom est verifiee sans tenir compte de la casse a l'ajout ;
    l'index unique protege en plus contre les doublons exacts concurrents.
    """

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)
    name: str | None = Field(default=None, max_length=50, unique=True)

    formations: list["Formation"] = Relationship(
        back_populates="categories", link_model=FormationCategorieLink
    )

    @property
    def formations_count(self) -> int:
        """Nombre de formations rattachees a la categorie."""
        return len(self.formations)


class Formation(SQLModel, table=True):
    """
    Modele representant une formation (video de formation).

    La date de parution ne peut pas etre posterieure a aujourd'hui ;
    la regle est appliquee par le formulaire d'administration.
    """

    __tablename__ = "formations"

    id: int | None = Field(default=None, primary_key=True)
    published_at: date | None = Field(default=None, index=True)
    title: str | None = Field(default=None, max_length=100, index=True)
    description: str | None = None
    video_id: str | None = Field(default=None, max_length=20)
    playlist_id: int | None = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("playlists.id", ondelete="RESTRICT"),
            nullable=True,
            index=True,
        ),
    )

    playlist: Optional[Playlist] = Relationship(back_populates="formations")
    categories: list[Categorie] = Relationship(
        back_populates="formations", link_model=FormationCategorieLink
    )

    @property
    def published_at_string(self) -> str:
        """Date de parution au format jj/mm/aaaa, chaine vide si absente."""
        if self.published_at is None:
            return ""
        return self.published_at.strftime("%d/%m/%Y")

    @property
    def miniature(self) -> str | None:
        """URL de la miniature YouTube (petite taille)."""
        if not self.video_id:
            return None
        return f"{YOUTUBE_THUMBNAIL_URL}{self.video_id}/default.jpg"

    @property
    def picture(self) -> str | None:
        """URL de l'image YouTube haute qualite."""
        if not self.video_id:
            return None
        return f"{YOUTUBE_THUMBNAIL_URL}{self.video_id}/hqdefault.jpg"


class User(SQLModel, table=True):
    """
    Modele representant un compte d'administration.

    Le mot de passe est stocke uniquement sous forme de hash bcrypt.
    Les roles sont serialises en JSON ; ROLE_USER est toujours implicite.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=180, unique=True, index=True)
    password: str
    roles: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    def get_roles(self) -> list[str]:
        """Roles de l'utilisateur, ROLE_USER inclus, sans doublon."""
        roles = list(self.roles or [])
        roles.append(ROLE_USER)
        return list(dict.fromkeys(roles))

    def has_role(self, role: str) -> bool:
        return role in self.get_roles()
