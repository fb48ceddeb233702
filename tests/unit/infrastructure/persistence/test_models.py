"""
Tests pour les modeles SQLModel de persistance.

Verifie les proprietes derivees utilisees par les templates.
"""

from datetime import date

from mediatek.infrastructure.persistence.models import (
    ROLE_ADMIN,
    ROLE_USER,
    Categorie,
    Formation,
    Playlist,
    User,
)


class TestFormationModel:
    """Tests pour les proprietes derivees de Formation."""

    def test_published_at_string(self):
        """La date est formatee en jj/mm/aaaa."""
        formation = Formation(title="Test", published_at=date(2021, 1, 4))
        assert formation.published_at_string == "04/01/2021"

    def test_published_at_string_sans_date(self):
        assert Formation(title="Test").published_at_string == ""

    def test_miniature_et_picture(self):
        formation = Formation(title="Test", video_id="abc123")
        assert formation.miniature == "https://i.ytimg.com/vi/abc123/default.jpg"
        assert formation.picture == "https://i.ytimg.com/vi/abc123/hqdefault.jpg"

    def test_miniature_sans_video(self):
        formation = Formation(title="Test")
        assert formation.miniature is None
        assert formation.picture is None


class TestPlaylistModel:
    """Tests pour les proprietes derivees de Playlist."""

    def test_playlist_vide(self):
        playlist = Playlist(name="Vide")
        assert playlist.formations_count == 0
        assert playlist.categories_playlist == []

    def test_categories_playlist_distinctes_ordre_de_premiere_apparition(self):
        """Parcours des formations puis de leurs categories, sans doublon."""
        uml = Categorie(name="UML")
        java = Categorie(name="Java")
        poo = Categorie(name="POO")
        playlist = Playlist(
            name="Cours",
            formations=[
                Formation(title="F1", categories=[uml, java]),
                Formation(title="F2", categories=[java, poo]),
            ],
        )
        assert playlist.formations_count == 2
        assert playlist.categories_playlist == ["UML", "Java", "POO"]


class TestUserModel:
    def test_role_user_toujours_present(self):
        user = User(username="admin", password="x", roles=[ROLE_ADMIN])
        assert user.get_roles() == [ROLE_ADMIN, ROLE_USER]
        assert user.has_role(ROLE_ADMIN)

    def test_roles_sans_doublon(self):
        user = User(username="bob", password="x", roles=[ROLE_USER])
        assert user.get_roles() == [ROLE_USER]
        assert not user.has_role(ROLE_ADMIN)
