"""Tests des jetons CSRF de suppression."""

from mediatek.web.csrf import CsrfTokenManager, build_token_id


class TestCsrfTokenManager:
    def setup_method(self):
        self.manager = CsrfTokenManager("secret-de-test")

    def test_identifiant_d_action(self):
        assert build_token_id("supprimer", "categorie", 3) == "supprimer_categorie_3"

    def test_jeton_valide(self):
        token = self.manager.generate_token("supprimer_categorie_3", 1)
        assert self.manager.is_token_valid("supprimer_categorie_3", 1, token)

    def test_jeton_d_une_autre_entite(self):
        token = self.manager.generate_token("supprimer_categorie_3", 1)
        assert not self.manager.is_token_valid("supprimer_categorie_4", 1, token)

    def test_jeton_d_un_autre_utilisateur(self):
        token = self.manager.generate_token("supprimer_categorie_3", 1)
        assert not self.manager.is_token_valid("supprimer_categorie_3", 2, token)

    def test_jeton_altere_ou_absent(self):
        token = self.manager.generate_token("supprimer_playlist_1", 1)
        assert not self.manager.is_token_valid("supprimer_playlist_1", 1, token + "x")
        assert not self.manager.is_token_valid("supprimer_playlist_1", 1, "")
        assert not self.manager.is_token_valid("supprimer_playlist_1", 1, None)

    def test_jeton_signe_avec_une_autre_cle(self):
        token = CsrfTokenManager("autre-cle").generate_token("supprimer_playlist_1", 1)
        assert not self.manager.is_token_valid("supprimer_playlist_1", 1, token)

    def test_jeton_expire(self):
        manager = CsrfTokenManager("secret-de-test", max_age=-1)
        token = manager.generate_token("supprimer_formation_1", 1)
        assert not manager.is_token_valid("supprimer_formation_1", 1, token)
