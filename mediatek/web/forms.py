"""
Formulaires de l'administration et de la connexion.

Chaque formulaire est un modèle pydantic alimenté par les données POST.
bind_form() retourne soit le modèle validé, soit un dict d'erreurs par champ
(messages en français) pour ré-afficher le formulaire.
"""

from datetime import date
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

FormT = TypeVar("FormT", bound=BaseModel)

REQUIRED_MESSAGE = "Ce champ est obligatoire."
FUTURE_DATE_MESSAGE = "La date ne peut pas être postérieure à aujourd'hui."

# Messages par type d'erreur pydantic
_ERROR_MESSAGES = {
    "missing": REQUIRED_MESSAGE,
    "string_too_short": REQUIRED_MESSAGE,
    "string_too_long": "Ce champ ne peut pas dépasser {max_length} caractères.",
    "date_parsing": "Date invalide.",
    "date_from_datetime_parsing": "Date invalide.",
    "date_from_datetime_inexact": "Date invalide.",
    "int_parsing": "Valeur invalide.",
    "int_type": "Valeur invalide.",
    "list_type": "Valeur invalide.",
}


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class FormationForm(BaseModel):
    """Ajout / modification d'une formation."""

    published_at: date
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    video_id: str = Field(min_length=1, max_length=20)
    playlist_id: int
    categorie_ids: list[int] = Field(default_factory=list)

    strip_text = field_validator("title", "video_id", mode="before")(_strip)

    @field_validator("published_at")
    @classmethod
    def not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError(FUTURE_DATE_MESSAGE)
        return value


class PlaylistForm(BaseModel):
    """Ajout / modification d'une playlist."""

    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None

    strip_name = field_validator("name", mode="before")(_strip)


class CategorieForm(BaseModel):
    """Ajout d'une catégorie (le nom est enregistré sans espaces de bord)."""

    name: str = Field(min_length=1, max_length=50)

    strip_name = field_validator("name", mode="before")(_strip)


class LoginForm(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


def _error_message(error: dict) -> str:
    """Traduit une erreur pydantic en message affichable."""
    if error["type"] == "value_error":
        # Message levé par un validateur : "Value error, <message>"
        return str(error["ctx"]["error"])
    template = _ERROR_MESSAGES.get(error["type"])
    if template is None:
        return "Valeur invalide."
    return template.format(**error.get("ctx", {}))


def bind_form(
    form_cls: type[FormT], data: dict[str, Any]
) -> tuple[Optional[FormT], dict[str, str]]:
    """
    Valide les données soumises contre un formulaire.

    Les champs texte vides sont traités comme absents, un champ requis vide
    produit donc le message "obligatoire".

    Retourne :
        (formulaire validé, {}) ou (None, {champ: message})
    """
    cleaned = {key: value for key, value in data.items() if value not in ("", None)}
    try:
        return form_cls.model_validate(cleaned), {}
    except ValidationError as e:
        errors: dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "__all__"
            errors.setdefault(field, _error_message(error))
        return None, errors
