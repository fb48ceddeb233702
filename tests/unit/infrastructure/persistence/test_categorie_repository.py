"""Tests du repository SQLModel des categories."""

import pytest
from sqlalchemy.exc import IntegrityError

from mediatek.core.exceptions import InvalidQueryError
from mediatek.infrastructure.persistence.models import Categorie


def _names(categories: list[Categorie]) -> list[str]:
    return [c.name for c in categories]


class TestCategorieOrder:
    def test_tri_par_nom(self, categorie_repo, catalog):
        assert _names(categorie_repo.find_all_order_by_name("ASC")) == [
            "Java",
            "Python",
            "SQL",
            "UML",
        ]

    def test_tri_par_nombre_de_formations_egalite_par_nom(self, categorie_repo, catalog):
        """A nombre egal (Java, Python), le nom departage."""
        result = categorie_repo.find_all_order_by("nb_formations", "ASC")
        assert _names(result) == ["SQL", "Java", "Python", "UML"]

    def test_sens_invalide(self, categorie_repo, catalog):
        with pytest.raises(InvalidQueryError):
            categorie_repo.find_all_order_by_formations_count("up")


class TestCategorieSearch:
    def test_recherche_par_titre_de_formation(self, categorie_repo, catalog):
        result = categorie_repo.find_by_contain_value("title", "ZZZ", "formations")
        assert _names(result) == ["Java", "UML"]

    def test_recherche_par_nom(self, categorie_repo, catalog):
        assert _names(categorie_repo.find_by_contain_value("name", "SQ")) == ["SQL"]

    def test_relation_non_autorisee(self, categorie_repo, catalog):
        with pytest.raises(InvalidQueryError):
            categorie_repo.find_by_contain_value("name", "x", "playlist")


class TestCategorieLookup:
    def test_categories_d_une_playlist(self, categorie_repo, catalog):
        """Categories distinctes des formations de la playlist, par nom."""
        result = categorie_repo.find_all_for_one_playlist(catalog["playlists"]["uml"].id)
        assert _names(result) == ["Java", "UML"]

    def test_find_one_by_name_ignore_la_casse(self, categorie_repo, catalog):
        found = categorie_repo.find_one_by_name("uml")
        assert found is not None
        assert found.name == "UML"

    def test_find_one_by_name_ne_supprime_pas_les_espaces(self, categorie_repo, catalog):
        """Le nettoyage des espaces est fait a l'ajout, pas a la recherche."""
        assert categorie_repo.find_one_by_name(" UML ") is None

    def test_find_by_ids(self, categorie_repo, catalog):
        ids = [catalog["categories"]["UML"].id, catalog["categories"]["Java"].id]
        assert _names(categorie_repo.find_by_ids(ids)) == ["Java", "UML"]
        assert categorie_repo.find_by_ids([]) == []


class TestCategoriePersistence:
    def test_add_puis_find(self, categorie_repo, catalog):
        categorie = categorie_repo.add(Categorie(name="Android"))
        assert categorie_repo.find(categorie.id).name == "Android"

    def test_doublon_exact_refuse_par_l_index_unique(self, categorie_repo, catalog):
        with pytest.raises(IntegrityError):
            categorie_repo.add(Categorie(name="Java"))
        assert len(categorie_repo.find_all()) == 4
