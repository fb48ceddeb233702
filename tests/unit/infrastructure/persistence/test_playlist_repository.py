"""Tests du repository SQLModel des playlists."""

import pytest
from sqlalchemy.exc import IntegrityError

from mediatek.core.exceptions import InvalidQueryError
from mediatek.infrastructure.persistence.models import Playlist


def _names(playlists: list[Playlist]) -> list[str]:
    return [p.name for p in playlists]


class TestPlaylistOrder:
    """Tri par nom et par nombre de formations."""

    def test_listing_par_defaut_par_nom(self, playlist_repo, catalog):
        assert _names(playlist_repo.find_all()) == [
            "Cours UML",
            "Playlist vide",
            "Python pour debutants",
        ]

    def test_tri_par_nom_decroissant(self, playlist_repo, catalog):
        assert _names(playlist_repo.find_all_order_by_name("DESC")) == [
            "Python pour debutants",
            "Playlist vide",
            "Cours UML",
        ]

    def test_tri_par_nombre_de_formations(self, playlist_repo, catalog):
        """Une playlist vide compte 0 formation et vient en premier en ASC."""
        result = playlist_repo.find_all_order_by("nb_formations", "ASC")
        assert _names(result) == ["Playlist vide", "Python pour debutants", "Cours UML"]
        assert [p.formations_count for p in result] == [0, 1, 2]

    def test_tri_par_nombre_de_formations_decroissant(self, playlist_repo, catalog):
        result = playlist_repo.find_all_order_by_formations_count("DESC")
        assert _names(result) == ["Cours UML", "Python pour debutants", "Playlist vide"]

    def test_tri_champ_non_autorise(self, playlist_repo, catalog):
        with pytest.raises(InvalidQueryError):
            playlist_repo.find_all_order_by("description", "ASC")


class TestPlaylistSearch:
    def test_recherche_par_nom(self, playlist_repo, catalog):
        assert _names(playlist_repo.find_by_contain_value("name", "Python")) == [
            "Python pour debutants"
        ]

    def test_recherche_par_categorie_via_les_formations(self, playlist_repo, catalog):
        """La jointure passe par les formations puis leurs categories."""
        result = playlist_repo.find_by_contain_value("name", "UML", "categories")
        assert _names(result) == ["Cours UML"]

    def test_valeur_vide(self, playlist_repo, catalog):
        assert playlist_repo.find_by_contain_value("name", "") == playlist_repo.find_all()

    def test_filtre_exact_par_identifiant_de_categorie(self, playlist_repo, javascript_catalog):
        """Le filtre par identifiant ignore "JavaScript" quand "Java" est choisie."""
        java = javascript_catalog["categories"]["Java"]
        result = playlist_repo.find_by_contain_value("id", str(java.id), "categories")
        assert _names(result) == ["Cours UML"]

    def test_identifiant_de_categorie_non_numerique(self, playlist_repo, catalog):
        with pytest.raises(InvalidQueryError):
            playlist_repo.find_by_contain_value("id", "x", "categories")


class TestPlaylistDerivedProperties:
    def test_categories_playlist_ordre_de_premiere_apparition(self, playlist_repo, catalog):
        playlist = playlist_repo.find(catalog["playlists"]["uml"].id)
        assert set(playlist.categories_playlist) == {"UML", "Java"}
        assert len(playlist.categories_playlist) == 2


class TestPlaylistRemove:
    def test_suppression_playlist_vide(self, playlist_repo, catalog):
        playlist_repo.remove(catalog["playlists"]["vide"])
        assert playlist_repo.count() == 2

    def test_suppression_playlist_non_vide_refusee_par_la_base(self, playlist_repo, catalog):
        """La contrainte RESTRICT empeche de detacher les formations."""
        with pytest.raises(IntegrityError):
            playlist_repo.remove(catalog["playlists"]["uml"])
        assert playlist_repo.find(catalog["playlists"]["uml"].id) is not None
