"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique
- Redirection des loggers standards (uvicorn, warnings des bibliothèques) vers loguru
"""

import logging
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from mediatek.config import Settings

# Loggers de la bibliothèque standard redirigés vers loguru
_INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class InterceptHandler(logging.Handler):
    """Handler logging standard qui transmet chaque enregistrement à loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonter la pile jusqu'à l'appelant réel (hors module logging)
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(settings: "Settings") -> None:
    """Configure le logging de l'application.

    Args :
        settings : Paramètres de l'application (niveau, fichier, rotation, rétention)

    Le handler console produit des logs colorés lisibles.
    Le handler fichier produit des logs sérialisés JSON avec rotation.
    """
    # Supprime le handler par défaut
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level> {extra}"
        ),
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=logging.WARNING, force=True)
    for name in _INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.debug(
        "Logging configuré",
        log_file=str(settings.log_file),
        rotation=settings.log_rotation_size,
    )
