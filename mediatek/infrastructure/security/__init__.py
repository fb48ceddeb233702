"""
Securite : hachage des mots de passe.

- hashing.py : hash_password / verify_password (bcrypt)
"""

from mediatek.infrastructure.security.hashing import hash_password, verify_password

__all__ = ["hash_password", "verify_password"]
