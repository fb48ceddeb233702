"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
configuration, initialisation de la base, sessions SQLModel et repositories.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelCategorieRepository,
    SQLModelFormationRepository,
    SQLModelPlaylistRepository,
    SQLModelUserRepository,
)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        session = container.session()
        formations = container.formation_repository(session=session)

    Les repositories recoivent une session fraiche par defaut ; pour
    partager une transaction entre plusieurs repositories, passer
    explicitement la meme session a chacun.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraiche
    formation_repository = providers.Factory(
        SQLModelFormationRepository,
        session=session,
    )
    playlist_repository = providers.Factory(
        SQLModelPlaylistRepository,
        session=session,
    )
    categorie_repository = providers.Factory(
        SQLModelCategorieRepository,
        session=session,
    )
    user_repository = providers.Factory(
        SQLModelUserRepository,
        session=session,
    )
