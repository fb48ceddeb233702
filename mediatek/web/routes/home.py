"""
Routes de la page d'accueil et des conditions générales d'utilisation.

L'accueil présente les dernières formations publiées.
"""

from fastapi import APIRouter, Depends, Request

from ...infrastructure.persistence.repositories import SQLModelFormationRepository
from ..deps import get_formation_repository, templates

router = APIRouter()


@router.get("/")
async def home(
    request: Request,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
):
    """Page d'accueil avec les formations les plus récentes."""
    latest = formations.find_all_lasted(request.app.state.home_latest_count)
    return templates.TemplateResponse(request, "pages/home.html", {"formations": latest})


@router.get("/cgu")
async def cgu(request: Request):
    return templates.TemplateResponse(request, "pages/cgu.html", {})
