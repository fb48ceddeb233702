"""
Routes publiques des playlists : listing, tri, recherche et détail.
"""

from fastapi import APIRouter, Depends, Request

from ...core.exceptions import EntityNotFoundError
from ...infrastructure.persistence.repositories import (
    SQLModelCategorieRepository,
    SQLModelFormationRepository,
    SQLModelPlaylistRepository,
)
from ..deps import (
    get_categorie_repository,
    get_formation_repository,
    get_playlist_repository,
    templates,
)
from .helpers import read_search_value

router = APIRouter(prefix="/playlists")

TEMPLATE_PLAYLISTS = "pages/playlists.html"


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


@router.get("")
async def playlists_index(
    request: Request,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """Toutes les playlists par nom croissant."""
    return _render_listing(request, playlists.find_all_order_by_name("ASC"), categories.find_all())


@router.get("/tri/{field}/{order}")
async def playlists_sort(
    request: Request,
    field: str,
    order: str,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """Tri par nom ("name") ou par nombre de formations ("nb_formations")."""
    return _render_listing(request, playlists.find_all_order_by(field, order), categories.find_all())


@router.api_route("/recherche/{field}", methods=["GET", "POST"])
@router.api_route("/recherche/{field}/{relation}", methods=["GET", "POST"])
async def playlists_search(
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


@router.get("/playlist/{playlist_id:int}")
async def playlist_detail(
    request: Request,
    playlist_id: int,
    playlists: SQLModelPlaylistRepository = Depends(get_playlist_repository),
    formations: SQLModelFormationRepository = Depends(get_formation_repository),
    categories: SQLModelCategorieRepository = Depends(get_categorie_repository),
):
    """Détail d'une playlist : ses catégories et ses formations par date croissante."""
    playlist = playlists.find(playlist_id)
    if playlist is None:
        raise EntityNotFoundError("Playlist", playlist_id)
    return templates.TemplateResponse(
        request,
        "pages/playlist.html",
        {
            "playlist": playlist,
            "playlist_categories": categories.find_all_for_one_playlist(playlist_id),
            "playlist_formations": formations.find_all_for_one_playlist(playlist_id),
        },
    )
