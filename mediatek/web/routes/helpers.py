"""
Fonctions partagées par les routes publiques et d'administration.
"""

from fastapi import Request

from ..csrf import CSRF_FIELD_NAME, build_token_id
from ..deps import SESSION_USER_KEY


async def read_search_value(request: Request) -> str:
    """
    Valeur recherchée, champ "recherche" du formulaire (POST) ou de l'URL (GET).

    Une valeur absente vaut "" : le repository renvoie alors le listing complet.
    """
    if request.method == "POST":
        form = await request.form()
        value = form.get("recherche", "")
    else:
        value = request.query_params.get("recherche", "")
    return str(value)


async def is_csrf_valid(request: Request, action: str, entity_type: str, entity_id: int) -> bool:
    """Vérifie le jeton "_token" soumis pour l'action sur l'entité."""
    form = await request.form()
    token = form.get(CSRF_FIELD_NAME)
    return request.app.state.csrf.is_token_valid(
        build_token_id(action, entity_type, entity_id),
        request.session.get(SESSION_USER_KEY),
        str(token) if token is not None else None,
    )
