"""
Administration des formations : listing, détail, ajout, modification, suppression.
"""

from datetime import date

from fastapi import APIRouter, Depends, Request
from loguru import logger

from ....core.value_objects import Notice
from ....infrastructure.persistence.models import Formation
from ....infrastructure.persistence.repositories import (
    SQLModelCategorieRepository,
    SQLModelFormationRepository,
    SQLModelPlaylistRepository,
)
from ...deps import (
    get_categorie_repository,
    get_formation_repository,
    get_playlist_repository,
    redirect_with_notice,
    templates,
)
from ...forms import FormationForm, bind_form
from ..helpers import is_csrf_valid, read_search_value

router = APIRouter()

LISTING_URL = "/admin/formations"
TEMPLATE_FORMATIONS = "admin/formations.html"
TEMPLATE_FORM = "admin/formation_form.html"

_TEXT_FIELDS = ("published_at", "title", "description", "video_id", "playlist_id")


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


def _form_data_from(formation: Formation) -> dict:
    """Valeurs initiales du formulaire pour une formation existante ou nouvelle."""
    return {
        "published_at": formation.published_at.isoformat() if formation.published_at else "",
        "title": formation.title or "",
        "description": formation.description or "",
        "video_id": formation.video_id or "",
        "playlist_id": str(formation.playlist_id or ""),
        "categorie_ids": [str(c.id) for c in formation.categories],
    }


async def _read_form_data(request: Request) -> dict:
    form = await request.form()
    data = {key: str(form.get(key, "")) for key in _TEXT_FIELDS}
    data["categorie_ids"] = [str(v) for v in form.getlist("categorie_ids") if v]
    return data


def _render_form(
    request: Request,
    formation: Formation | None,
    form_data: dict,
    playlists: SQLModelPlaylistRepository,
    categories: SQLModelCategorieRepository,
    errors: dict[str, str] | None = None,
):
    return templates.TemplateResponse(
        request,
        TEMPLATE_FORM,
        {
            "formation": formation,
            "form_data": form_data,
            "errors": errors or {},
            "playlists": playlists.find_all(),
            "categories": categories.find_all(),
        },
    )


async def _save(
    request: Request,
    formation: Formation,
    formations: SQLModelFormationRepository,
    playlists: SQLModelPlaylistRepository,
    categories: SQLModelCategorieRepository,
):
    """Valide le formulaire soumis et enregistre la formation, ou ré-affiche les erreurs."""
    form_data = await _read_form_data(request)
    form, errors = bind_form(FormationForm, form_data)

    playlist = None
    if form is not None:
        playlist = playlists.find(form.playlist_id)
        if playlist is None:
            errors["playlist_id"] = "Playlist inconnue."
    if errors:
        existing = formation if formation.id is not None else None
        return _render_form(request, existing, form_data, playlists, categories, errors)

    formation.published_at = form.published_at
    formation.title = form.title
    formation.description = form.description
    formation.video_id = form.video_id
    formation.playlist = playlist
    formation.categories = categories.find_by_ids(form.categorie_ids)
    formations.add(formation)

    logger.info("Formation enregistree", formation_id=formation.id, title=formation.title)
    return redirect_with_notice(
        request, LISTING_URL, Notice.success(f'Formation "{formation.title}" enregistrée.')
    )


# ----------------------------------------------------------------------
# Listing
# ----------------------------------------------------------------------


@router.get("/formations")
async def admin_formations(
    request: Request,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    return _render_listing(request, formations.find_all(), categories.find_all())


@router.get("/formations/tri/{field}/{order}")
@router.get("/formations/tri/{field}/{order}/{relation}")
async def admin_formations_sort(
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


@router.api_route("/formations/recherche/{field}", methods=["GET", "POST"])
@router.api_route("/formations/recherche/{field}/{relation}", methods=["GET", "POST"])
async def admin_formations_search(
    request: Request,
    field: str,
    relation: str = "",
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    valeur = await read_search_value(request)
    return _render_listing(
        request,
        formations.find_by_contain_value(field, valeur, relation),
        categories.find_all(),
        valeur=valeur,
        table=relation,
    )


# ----------------------------------------------------------------------
# Ajout / modification (déclarées avant /formation/{id})
# ----------------------------------------------------------------------


@router.get("/formation/ajouter")
async def admin_formation_add_form(
    request: Request,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """Formulaire d'ajout, date de parution pré-remplie à aujourd'hui."""
    form_data = _form_data_from(Formation())
    form_data["published_at"] = date.today().isoformat()
    return _render_form(request, None, form_data, playlists, categories)


@router.post("/formation/ajouter")
async def admin_formation_add(
    request: Request,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    return await _save(request, Formation(), formations, playlists, categories)


@router.get("/formation/modifier/{formation_id:int}")
async def admin_formation_edit_form(
    request: Request,
    formation_id: int,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    formation = formations.find(formation_id)
    if formation is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning("Formation introuvable."))
    return _render_form(request, formation, _form_data_from(formation), playlists, categories)


@router.post("/formation/modifier/{formation_id:int}")
async def admin_formation_edit(
    request: Request,
    formation_id: int,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    formation = formations.find(formation_id)
    if formation is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning("Formation introuvable."))
    return await _save(request, formation, formations, playlists, categories)


@router.post("/formation/supprimer/{formation_id:int}")
async def admin_formation_delete(
    request: Request,
    formation_id: int,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
):
    """Suppression (jeton CSRF requis) ; les liens vers les catégories disparaissent avec elle."""
    formation = formations.find(formation_id)
    if formation is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning("Formation introuvable."))

    if not await is_csrf_valid(request, "supprimer", "formation", formation.id):
        return redirect_with_notice(request, LISTING_URL, Notice.error("Token CSRF invalide."))

    title = formation.title
    formations.remove(formation)
    logger.info("Formation supprimee", formation_id=formation_id, title=title)
    return redirect_with_notice(request, LISTING_URL, Notice.success(f'Formation "{title}" supprimée.'))


# ----------------------------------------------------------------------
# Détail
# ----------------------------------------------------------------------


@router.get("/formation/{formation_id:int}")
async def admin_formation_detail(
    request: Request,
    formation_id: int,
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
):
    formation = formations.find(formation_id)
    if formation is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning("Formation introuvable."))
    return templates.TemplateResponse(request, "admin/formation.html", {"formation": formation})
