"""Tests du hachage des mots de passe."""

from mediatek.infrastructure.security import hash_password, verify_password


class TestHashing:
    def test_hash_puis_verification(self):
        hashed = hash_password("motdepasse", rounds=4)
        assert hashed != "motdepasse"
        assert verify_password("motdepasse", hashed)

    def test_mauvais_mot_de_passe(self):
        hashed = hash_password("motdepasse", rounds=4)
        assert not verify_password("autre", hashed)

    def test_hash_illisible(self):
        """Un hash invalide ne leve pas d'exception."""
        assert verify_password("motdepasse", "pas-un-hash") is False
