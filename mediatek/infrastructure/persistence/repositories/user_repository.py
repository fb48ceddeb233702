"""
Implementation SQLModel du repository User.

Recherche et enregistrement des comptes d'administration.
"""

from typing import Optional

from sqlmodel import Session, select

from mediatek.core.ports.repositories import IUserRepository
from mediatek.infrastructure.persistence.models import User


class SQLModelUserRepository(IUserRepository):
    """Repository SQLModel pour les comptes utilisateurs."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find(self, user_id: int) -> Optional[User]:
        """Recupere un utilisateur par son ID."""
        return self._session.get(User, user_id)

    def find_by_username(self, username: str) -> Optional[User]:
        """Recupere un utilisateur par son identifiant de connexion."""
        statement = select(User).where(User.username == username)
        return self._session.exec(statement).first()

    def add(self, user: User) -> User:
        """Sauvegarde un utilisateur."""
        self._session.add(user)
        self._session.commit()
        self._session.refresh(user)
        return user
