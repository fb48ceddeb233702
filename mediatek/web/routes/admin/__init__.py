"""
Package routes d'administration : formations, playlists et catégories.

Toutes les routes exigent un utilisateur connecté portant ROLE_ADMIN ;
la garde est une dépendance du routeur, évaluée avant chaque route.
"""

from fastapi import APIRouter, Depends

from ...deps import require_admin
from . import categories, formations, playlists

router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])

router.include_router(formations.router)
router.include_router(playlists.router)
router.include_router(categories.router)
