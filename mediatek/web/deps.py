"""
Dépendances partagées de l'application web.

Fournit :
- les templates Jinja2 utilisées par toutes les routes
- la session SQLModel de la requête et les repositories construits dessus
- l'utilisateur connecté et la garde des routes d'administration
- les messages transitoires (notices) conservés le temps d'une redirection
"""

import tomllib
from collections.abc import Generator
from pathlib import Path
from typing import Optional

from fastapi import Depends, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlmodel import Session

from ..core.exceptions import AccessDeniedError, LoginRequiredError
from ..core.value_objects import Notice
from ..infrastructure.persistence.database import get_session
from ..infrastructure.persistence.models import ROLE_ADMIN, User
from ..infrastructure.persistence.repositories import (
    SQLModelCategorieRepository,
    SQLModelFormationRepository,
    SQLModelPlaylistRepository,
    SQLModelUserRepository,
)

_WEB_DIR = Path(__file__).parent
_PROJECT_ROOT = _WEB_DIR.parent.parent

SESSION_USER_KEY = "user_id"
SESSION_USERNAME_KEY = "username"
SESSION_NOTICES_KEY = "_notices"

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version lue depuis pyproject.toml, disponible dans tous les templates
with open(_PROJECT_ROOT / "pyproject.toml", "rb") as f:
    _pyproject = tomllib.load(f)
templates.env.globals["app_version"] = f"MediaTek v{_pyproject['project']['version']}"


# ----------------------------------------------------------------------
# Session BDD et repositories
# ----------------------------------------------------------------------


def get_db_session() -> Generator[Session, None, None]:
    """Session SQLModel partagée par toutes les dépendances d'une requête."""
    yield from get_session()


def get_formation_repository(
    session: Session = Depends(get_db_session),
) -> SQLModelFormationRepository:
    return SQLModelFormationRepository(session)


def get_playlist_repository(
    session: Session = Depends(get_db_session),
) -> SQLModelPlaylistRepository:
    return SQLModelPlaylistRepository(session)


def get_categorie_repository(
    session: Session = Depends(get_db_session),
) -> SQLModelCategorieRepository:
    return SQLModelCategorieRepository(session)


def get_user_repository(
    session: Session = Depends(get_db_session),
) -> SQLModelUserRepository:
    return SQLModelUserRepository(session)


# ----------------------------------------------------------------------
# Authentification
# ----------------------------------------------------------------------


def get_current_user(
    request: Request,
    users: SQLModelUserRepository = Depends(get_user_repository),
) -> Optional[User]:
    """Utilisateur connecté d'après la session, None si anonyme."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    return users.find(user_id)


def require_admin(user: Optional[User] = Depends(get_current_user)) -> User:
    """
    Garde des routes d'administration, évaluée avant le code de la route.

    Raises :
        LoginRequiredError : aucun utilisateur connecté
        AccessDeniedError : l'utilisateur n'a pas ROLE_ADMIN
    """
    if user is None:
        raise LoginRequiredError("Authentification requise")
    if not user.has_role(ROLE_ADMIN):
        raise AccessDeniedError(ROLE_ADMIN)
    return user


# ----------------------------------------------------------------------
# Messages transitoires et CSRF
# ----------------------------------------------------------------------


def redirect_with_notice(
    request: Request, url: str, notice: Optional[Notice] = None
) -> RedirectResponse:
    """
    Redirection 303 (redirect-after-post) accompagnée d'un message.

    Le message est conservé dans la session jusqu'au prochain rendu.
    """
    if notice is not None:
        notices = request.session.get(SESSION_NOTICES_KEY, [])
        notices.append(notice.to_dict())
        request.session[SESSION_NOTICES_KEY] = notices
    return RedirectResponse(url=url, status_code=303)


def pop_notices(request: Request) -> list[Notice]:
    """Retire et retourne les messages en attente (affichés une seule fois)."""
    return [Notice.from_dict(data) for data in request.session.pop(SESSION_NOTICES_KEY, [])]


def csrf_token(request: Request, token_id: str) -> str:
    """Jeton CSRF pour l'action `token_id` et l'utilisateur connecté."""
    return request.app.state.csrf.generate_token(
        token_id, request.session.get(SESSION_USER_KEY)
    )


templates.env.globals["get_notices"] = pop_notices
templates.env.globals["csrf_token"] = csrf_token
