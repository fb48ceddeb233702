"""
Jetons CSRF des actions de suppression.

Chaque jeton est signé (itsdangerous) pour un identifiant d'action de la forme
"<action>_<type d'entité>_<id>" (ex: "supprimer_categorie_3") et pour
l'utilisateur connecté. Il expire après `max_age` secondes.
"""

from typing import Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from loguru import logger

CSRF_FIELD_NAME = "_token"
_SALT = "mediatek-csrf"


def build_token_id(action: str, entity_type: str, entity_id: int) -> str:
    """Identifiant d'action d'un jeton CSRF."""
    return f"{action}_{entity_type}_{entity_id}"


class CsrfTokenManager:
    """Émet et vérifie les jetons CSRF liés à une action et à un utilisateur."""

    def __init__(self, secret_key: str, max_age: int = 3600) -> None:
        self._serializer = URLSafeTimedSerializer(secret_key, salt=_SALT)
        self._max_age = max_age

    def generate_token(self, token_id: str, user_id: Optional[int]) -> str:
        return self._serializer.dumps([token_id, user_id])

    def is_token_valid(self, token_id: str, user_id: Optional[int], token: Optional[str]) -> bool:
        """Vrai si le jeton est intact, non expiré et émis pour cette action et cet utilisateur."""
        if not token:
            return False
        try:
            payload = self._serializer.loads(token, max_age=self._max_age)
        except SignatureExpired:
            logger.info("Jeton CSRF expire", token_id=token_id)
            return False
        except BadSignature:
            logger.warning("Jeton CSRF invalide", token_id=token_id)
            return False
        return payload == [token_id, user_id]
