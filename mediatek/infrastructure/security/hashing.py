"""Fonctions de hachage des mots de passe (bcrypt, one-way)."""

import bcrypt

# Coût computationnel (plus = plus sécurisé mais plus lent)
BCRYPT_ROUNDS = 12


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash un mot de passe avec bcrypt.

    Args:
        password: Mot de passe en clair
        rounds: Coût bcrypt (log2 du nombre d'itérations)

    Returns:
        Hash bcrypt du mot de passe
    """
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Vérifie qu'un mot de passe correspond à son hash.

    Returns:
        True si le mot de passe correspond, False sinon (hash illisible compris)
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False
