"""
Module de persistance SQL pour MediaTek.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Requetes de listing, tri, recherche et persistance
- fixtures.py : Jeu de donnees de demonstration

Usage:
    from mediatek.infrastructure.persistence import init_db, get_session
    from mediatek.infrastructure.persistence import Formation, Playlist

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
    session.add(Playlist(name="Python"))
    session.commit()
"""

from mediatek.infrastructure.persistence.database import (
    create_db_engine,
    get_engine,
    get_session,
    init_db,
)
from mediatek.infrastructure.persistence.models import (
    Categorie,
    Formation,
    FormationCategorieLink,
    Playlist,
    User,
)

__all__ = [
    "create_db_engine",
    "get_engine",
    "get_session",
    "init_db",
    "Categorie",
    "Formation",
    "FormationCategorieLink",
    "Playlist",
    "User",
]
