"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MEDIATEK_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de mediatek/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIATEK_.
    Exemple : MEDIATEK_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIATEK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///mediatek.db")

    # Sécurité (cookie de session, jetons CSRF, coût bcrypt)
    secret_key: str = Field(default="change-me-in-production")
    csrf_token_max_age: int = Field(default=3600, ge=1)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Affichage
    home_latest_count: int = Field(default=2, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mediatek.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def uses_default_secret(self) -> bool:
        """Vérifie si la clé secrète par défaut est encore utilisée."""
        return self.secret_key == "change-me-in-production"
