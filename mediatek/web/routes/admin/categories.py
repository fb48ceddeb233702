"""
Administration des catégories : listing avec formulaire d'ajout, ajout, suppression.

Le nom d'une catégorie est unique sans tenir compte de la casse ; une catégorie
rattachée à des formations ne peut pas être supprimée.
"""

from fastapi import APIRouter, Depends, Request
from loguru import logger
from sqlalchemy.exc import IntegrityError

from ....core.value_objects import Notice
from ....infrastructure.persistence.models import Categorie
from ....infrastructure.persistence.repositories import SQLModelCategorieRepository
from ...deps import get_categorie_repository, redirect_with_notice, templates
from ...forms import REQUIRED_MESSAGE, CategorieForm, bind_form
from ..helpers import is_csrf_valid, read_search_value

router = APIRouter()

LISTING_URL = "/admin/categories"
TEMPLATE_CATEGORIES = "admin/categories.html"

EMPTY_NAME_MESSAGE = "Le nom de la catégorie ne peut pas être vide."


def _render_listing(request: Request, categories, valeur: str = "", table: str = ""):
    return templates.TemplateResponse(
        request,
        TEMPLATE_CATEGORIES,
        {"categories": categories, "valeur": valeur, "table": table},
    )


@router.get("/categories")
async def admin_categories(
    request: Request,
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    return _render_listing(request, categories.find_all_order_by_name("ASC"))


@router.get("/categories/tri/{field}/{order}")
async def admin_categories_sort(
    request: Request,
    field: str,
    order: str,
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """Tri par nom ("name") ou par nombre de formations ("nb_formations")."""
    return _render_listing(request, categories.find_all_order_by(field, order))


@router.api_route("/categories/recherche/{field}", methods=["GET", "POST"])
@router.api_route("/categories/recherche/{field}/{relation}", methods=["GET", "POST"])
async def admin_categories_search(
    request: Request,
    field: str,
    relation: str = "",
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    valeur = await read_search_value(request)
    return _render_listing(
        request,
        categories.find_by_contain_value(field, valeur, relation),
        valeur=valeur,
        table=relation,
    )


@router.post("/categorie/ajouter")
async def admin_categorie_add(
    request: Request,
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """
    Ajout d'une catégorie.

    Le nom soumis est nettoyé des espaces de bord, refusé s'il est vide ou
    s'il existe déjà (sans tenir compte de la casse), puis enregistré nettoyé.
    """
    form_data = await request.form()
    form, errors = bind_form(CategorieForm, {"name": str(form_data.get("name", ""))})
    if form is None:
        message = errors.get("name", EMPTY_NAME_MESSAGE)
        if message == REQUIRED_MESSAGE:
            message = EMPTY_NAME_MESSAGE
        return redirect_with_notice(request, LISTING_URL, Notice.warning(message))

    name = form.name
    if categories.find_one_by_name(name) is not None:
        return redirect_with_notice(
            request, LISTING_URL, Notice.warning(f'La catégorie "{name}" existe déjà.')
        )

    try:
        categorie = categories.add(Categorie(name=name))
    except IntegrityError:
        return redirect_with_notice(
            request, LISTING_URL, Notice.warning(f'La catégorie "{name}" existe déjà.')
        )

    logger.info("Categorie ajoutee", categorie_id=categorie.id, name=name)
    return redirect_with_notice(request, LISTING_URL, Notice.success(f'Catégorie "{name}" ajoutée.'))


@router.post("/categorie/supprimer/{categorie_id:int}")
async def admin_categorie_delete(
    request: Request,
    categorie_id: int,
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """Suppression d'une catégorie sans formation (jeton CSRF requis)."""
    categorie = categories.find(categorie_id)
    if categorie is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning("Catégorie introuvable."))

    if not await is_csrf_valid(request, "supprimer", "categorie", categorie.id):
        return redirect_with_notice(request, LISTING_URL, Notice.error("Token CSRF invalide."))

    count = categorie.formations_count
    if count > 0:
        logger.info("Suppression de categorie refusee", categorie_id=categorie_id, formations=count)
        return redirect_with_notice(
            request,
            LISTING_URL,
            Notice.warning(
                f'La catégorie "{categorie.name}" contient {count} formations '
                "et ne peut pas être supprimée."
            ),
        )

    name = categorie.name
    categories.remove(categorie)
    logger.info("Categorie supprimee", categorie_id=categorie_id, name=name)
    return redirect_with_notice(request, LISTING_URL, Notice.success(f'Catégorie "{name}" supprimée.'))
