"""
Configuration de la base de donnees pour MediaTek.

Ce module fournit :
- Engine SQLAlchemy (SQLite par defaut) avec cles etrangeres activees
- Session factory sous forme de generateur
- Fonction d'initialisation des tables

La base de donnees est configuree via MEDIATEK_DATABASE_URL (defaut: sqlite:///mediatek.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Active PRAGMA foreign_keys sur chaque connexion SQLite (RESTRICT sur playlist_id)."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(db_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour SQLite, le repertoire parent du fichier est cree si besoin,
    les cles etrangeres sont activees et une base en memoire partage
    une connexion unique (StaticPool) pour survivre entre les sessions.
    """
    if not db_url.startswith("sqlite"):
        return create_engine(db_url, echo=False)

    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    else:
        db_path = Path(db_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(db_url, echo=False, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> Engine:
    """
    Retourne l'engine global, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from mediatek.config import Settings
        settings = Settings()
        _engine = create_db_engine(settings.database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() ou comme dependance FastAPI :
        session = next(get_session())
        try:
            # operations
        finally:
            session.close()

    Yields:
        Session SQLModel connectee a l'engine global
    """
    with Session(get_engine()) as session:
        yield session


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Les modeles sont importes ici pour enregistrer leurs metadonnees
    dans SQLModel.metadata sans import circulaire.

    Doit etre appelee une fois au demarrage de l'application.
    """
    from mediatek.infrastructure.persistence import models  # noqa: F401

    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisees", url=engine.url.render_as_string(hide_password=True))
