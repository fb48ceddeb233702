"""
Routes publiques des formations : listing, tri, recherche et détail.

Le tri et la recherche acceptent une relation optionnelle en fin d'URL
(playlist, categories) ; les noms sont validés par le repository.
"""

from fastapi import APIRouter, Depends, Request

from ...core.exceptions import EntityNotFoundError
from ...infrastructure.persistence.repositories import (
    SQLModelCategorieRepository,
    SQLModelFormationRepository,
)
from ..deps import get_categorie_repository, get_formation_repository, templates
from .helpers import read_search_value

router = APIRouter(prefix="/formations")

TEMPLATE_FORMATIONS = "pages/formations.html"


def _render_listing(request: Request, formations, categories, valeur: str = "", table: str = ""):
    return templates.TemplateResponse(
        request,
        TEMPLATE_FORMATIONS,
        {
            "formations": formations,
            "categories": categories,
            "valeur": valeur,
            "table": table,
        },
    )


@router.get("")
async def formations_index(
    request: Request,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """Toutes les formations, de la plus récente à la plus ancienne."""
    return _render_listing(request, formations.find_all(), categories.find_all())


@router.get("/tri/{field}/{order}")
@router.get("/tri/{field}/{order}/{relation}")
async def formations_sort(
    request: Request,
    field: str,
    order: str,
    relation: str = "",
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    return _render_listing(
        request,
        formations.find_all_order_by(field, order, relation),
        categories.find_all(),
    )


@router.api_route("/recherche/{field}", methods=["GET", "POST"])
@router.api_route("/recherche/{field}/{relation}", methods=["GET", "POST"])
async def formations_search(
    request: Request,
    field: str,
    relation: str = "",
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """Formations dont le champ contient la valeur recherchée."""
    valeur = await read_search_value(request)
    return _render_listing(
        request,
        formations.find_by_contain_value(field, valeur, relation),
        categories.find_all(),
        valeur=valeur,
        table=relation,
    )


@router.get("/{formation_id:int}")
async def formation_detail(
    request: Request,
    formation_id: int,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
):
    formation = formations.find(formation_id)
    if formation is None:
        raise EntityNotFoundError("Formation", formation_id)
    return templates.TemplateResponse(request, "pages/formation.html", {"formation": formation})
