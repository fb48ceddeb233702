"""
Routes d'authentification : formulaire de connexion et déconnexion.

La session (cookie signé) conserve l'identifiant et le nom de l'utilisateur.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from loguru import logger

from ...core.value_objects import Notice
from ...infrastructure.persistence.models import ROLE_ADMIN, User
from ...infrastructure.persistence.repositories import SQLModelUserRepository
from ...infrastructure.security import verify_password
from ..deps import (
    SESSION_USER_KEY,
    SESSION_USERNAME_KEY,
    get_current_user,
    get_user_repository,
    redirect_with_notice,
    templates,
)
from ..forms import LoginForm, bind_form

router = APIRouter()

LOGIN_ERROR = "Identifiants invalides."
ADMIN_HOME = "/admin/formations"


def _render_login(request: Request, last_username: str = "", error: str = "", status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "login/index.html",
        {"last_username": last_username, "error": error},
        status_code=status_code,
    )


@router.get("/login")
async def login_page(
    request: Request,
    user: Optional[User] = Depends(get_current_user),
):
    """Formulaire de connexion (un administrateur déjà connecté va au back-office)."""
    if user is not None and user.has_role(ROLE_ADMIN):
        return RedirectResponse(url=ADMIN_HOME, status_code=303)
    return _render_login(request)


@router.post("/login")
async def login(
    request: Request,
    users: SQLModelUserRepository = Depends(get_user_repository),
):
    form_data = await request.form()
    username = str(form_data.get("username", ""))
    form, _ = bind_form(
        LoginForm, {"username": username, "password": form_data.get("password", "")}
    )
    if form is None:
        return _render_login(request, username, LOGIN_ERROR)

    user = users.find_by_username(form.username)
    if user is None or not verify_password(form.password, user.password):
        logger.warning("Echec de connexion", username=form.username)
        return _render_login(request, form.username, LOGIN_ERROR)

    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id
    request.session[SESSION_USERNAME_KEY] = user.username
    logger.info("Connexion", username=user.username)
    return RedirectResponse(url=ADMIN_HOME, status_code=303)


@router.post("/logout")
async def logout(request: Request):
    """Termine la session et revient à l'accueil."""
    username = request.session.get(SESSION_USERNAME_KEY)
    request.session.clear()
    if username:
        logger.info("Deconnexion", username=username)
    return redirect_with_notice(request, "/", Notice.success("Vous êtes déconnecté."))
