"""
Application FastAPI de MediaTek.

Initialise l'application web avec le Container DI, la session signée
(cookie) et le gestionnaire de jetons CSRF, enregistre les gestionnaires
d'exceptions métier et monte les routes publiques et d'administration.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import RedirectResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from ..container import Container
from ..core.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    InvalidQueryError,
    LoginRequiredError,
)
from .csrf import CsrfTokenManager
from .deps import templates
from .routes.admin import router as admin_router
from .routes.auth import router as auth_router
from .routes.formations import router as formations_router
from .routes.home import router as home_router
from .routes.playlists import router as playlists_router

container = Container()
settings = container.config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Crée les tables au démarrage."""
    container.database.init()
    if settings.uses_default_secret:
        logger.warning("Clé secrète par défaut utilisée, définir MEDIATEK_SECRET_KEY")
    app.state.container = container
    yield


app = FastAPI(title="MediaTek", lifespan=lifespan)
app.state.csrf = CsrfTokenManager(settings.secret_key, max_age=settings.csrf_token_max_age)
app.state.home_latest_count = settings.home_latest_count

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie="mediatek_session",
    same_site="lax",
)


# ----------------------------------------------------------------------
# Gestionnaires d'exceptions
# ----------------------------------------------------------------------


@app.exception_handler(InvalidQueryError)
async def invalid_query_handler(request: Request, exc: InvalidQueryError):
    """Tri ou recherche sur un champ non autorisé : 400."""
    logger.info("Requete de listing refusee", path=request.url.path, field=exc.field, relation=exc.relation)
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Requête invalide", "message": str(exc)},
        status_code=400,
    )


@app.exception_handler(EntityNotFoundError)
async def not_found_handler(request: Request, exc: EntityNotFoundError):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"message": str(exc)},
        status_code=404,
    )


@app.exception_handler(StarletteHTTPException)
async def page_not_found_handler(request: Request, exc: StarletteHTTPException):
    """URL sans route correspondante (dont un identifiant non numérique) : page 404."""
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"message": "La page demandée est introuvable."},
        status_code=404,
    )


@app.exception_handler(LoginRequiredError)
async def login_required_handler(request: Request, exc: LoginRequiredError):
    return RedirectResponse(url="/login", status_code=303)


@app.exception_handler(AccessDeniedError)
async def access_denied_handler(request: Request, exc: AccessDeniedError):
    logger.warning("Acces refuse", path=request.url.path, role=exc.role)
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Accès refusé", "message": "Vous n'avez pas les droits nécessaires pour accéder à cette page."},
        status_code=403,
    )


# Routes
app.include_router(home_router)
app.include_router(formations_router)
app.include_router(playlists_router)
app.include_router(auth_router)
app.include_router(admin_router)
