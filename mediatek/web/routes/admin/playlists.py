"""
Administration des playlists : listing, détail, ajout, modification, suppression.

Une playlist contenant des formations ne peut pas être supprimée.
"""

from fastapi import APIRouter, Depends, Request
from loguru import logger
from sqlalchemy.exc import IntegrityError

from ....core.value_objects import Notice
from ....infrastructure.persistence.models import Playlist
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
from ...forms import PlaylistForm, bind_form
from ..helpers import is_csrf_valid, read_search_value

router = APIRouter()

LISTING_URL = "/admin/playlists"
TEMPLATE_PLAYLISTS = "admin/playlists.html"
TEMPLATE_FORM = "admin/playlist_form.html"

PLAYLIST_NOT_FOUND = "Playlist introuvable."


def _render_listing(request: Request, playlists, categories, valeur: str = "", table: str = ""):
    return templates.TemplateResponse(
        request,
        TEMPLATE_PLAYLISTS,
        {
            "playlists": playlists,
            "categories": categories,
            "valeur": valeur,
            "table": table,
        },
    )


def _render_form(
    request: Request,
    playlist: Playlist | None,
    form_data: dict,
    errors: dict[str, str] | None = None,
):
    return templates.TemplateResponse(
        request,
        TEMPLATE_FORM,
        {"playlist": playlist, "form_data": form_data, "errors": errors or {}},
    )


async def _save(request: Request, playlist: Playlist, playlists: SQLModelPlaylistRepository):
    form = await request.form()
    form_data = {
        "name": str(form.get("name", "")),
        "description": str(form.get("description", "")),
    }
    validated, errors = bind_form(PlaylistForm, form_data)
    if validated is None:
        existing = playlist if playlist.id is not None else None
        return _render_form(request, existing, form_data, errors)

    playlist.name = validated.name
    playlist.description = validated.description
    playlists.add(playlist)

    logger.info("Playlist enregistree", playlist_id=playlist.id, name=playlist.name)
    return redirect_with_notice(
        request, LISTING_URL, Notice.success(f'Playlist "{playlist.name}" enregistrée.')
    )


def _not_empty_notice(playlist: Playlist, count: int) -> Notice:
    return Notice.warning(
        f'La playlist "{playlist.name}" contient {count} formations '
        "et ne peut pas être supprimée."
    )


# ----------------------------------------------------------------------
# Listing
# ----------------------------------------------------------------------


@router.get("/playlists")
async def admin_playlists(
    request: Request,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    return _render_listing(request, playlists.find_all_order_by_name("ASC"), categories.find_all())


@router.get("/playlists/tri/{field}/{order}")
async def admin_playlists_sort(
    request: Request,
    field: str,
    order: str,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    return _render_listing(request, playlists.find_all_order_by(field, order), categories.find_all())


@router.api_route("/playlists/recherche/{field}", methods=["GET", "POST"])
@router.api_route("/playlists/recherche/{field}/{relation}", methods=["GET", "POST"])
async def admin_playlists_search(
    request: Request,
    field: str,
    relation: str = "",
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    valeur = await read_search_value(request)
    return _render_listing(
        request,
        playlists.find_by_contain_value(field, valeur, relation),
        categories.find_all(),
        valeur=valeur,
        table=relation,
    )


@router.get("/playlists/{playlist_id:int}")
async def admin_playlist_detail(
    request: Request,
    playlist_id: int,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    playlist = playlists.find(playlist_id)
    if playlist is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning(PLAYLIST_NOT_FOUND))
    return templates.TemplateResponse(
        request,
        "admin/playlist.html",
        {
            "playlist": playlist,
            "playlist_categories": categories.find_all_for_one_playlist(playlist_id),
            "playlist_formations": formations.find_all_for_one_playlist(playlist_id),
        },
    )


# ----------------------------------------------------------------------
# Ajout / modification / suppression
# ----------------------------------------------------------------------


@router.get("/playlist/ajouter")
async def admin_playlist_add_form(request: Request):
    return _render_form(request, None, {"name": "", "description": ""})


@router.post("/playlist/ajouter")
async def admin_playlist_add(
    request: Request,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
):
    return await _save(request, Playlist(), playlists)


@router.get("/playlist/modifier/{playlist_id:int}")
async def admin_playlist_edit_form(
    request: Request,
    playlist_id: int,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
):
    playlist = playlists.find(playlist_id)
    if playlist is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning(PLAYLIST_NOT_FOUND))
    form_data = {"name": playlist.name or "", "description": playlist.description or ""}
    return _render_form(request, playlist, form_data)


@router.post("/playlist/modifier/{playlist_id:int}")
async def admin_playlist_edit(
    request: Request,
    playlist_id: int,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
):
    playlist = playlists.find(playlist_id)
    if playlist is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning(PLAYLIST_NOT_FOUND))
    return await _save(request, playlist, playlists)


@router.post("/playlist/supprimer/{playlist_id:int}")
async def admin_playlist_delete(
    request: Request,
    playlist_id: int,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
):
    """
    Suppression d'une playlist vide.

    Ordre des contrôles : existence, jeton CSRF, absence de formations.
    Une formation ajoutée entre le contrôle et la suppression fait échouer
    la contrainte RESTRICT, traitée comme une playlist non vide.
    """
    playlist = playlists.find(playlist_id)
    if playlist is None:
        return redirect_with_notice(request, LISTING_URL, Notice.warning(PLAYLIST_NOT_FOUND))

    if not await is_csrf_valid(request, "supprimer", "playlist", playlist.id):
        return redirect_with_notice(request, LISTING_URL, Notice.error("Token CSRF invalide."))

    count = playlist.formations_count
    if count > 0:
        logger.info("Suppression de playlist refusee", playlist_id=playlist_id, formations=count)
        return redirect_with_notice(request, LISTING_URL, _not_empty_notice(playlist, count))

    name = playlist.name
    try:
        playlists.remove(playlist)
    except IntegrityError:
        return redirect_with_notice(
            request,
            LISTING_URL,
            Notice.warning(f'La playlist "{name}" contient des formations et ne peut pas être supprimée.'),
        )

    logger.info("Playlist supprimee", playlist_id=playlist_id, name=name)
    return redirect_with_notice(request, LISTING_URL, Notice.success(f'Playlist "{name}" supprimée.'))
