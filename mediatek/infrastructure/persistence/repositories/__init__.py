"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans mediatek/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Valide les noms de champ et de relation contre sa liste blanche
"""

from mediatek.infrastructure.persistence.repositories.categorie_repository import (
    SQLModelCategorieRepository,
)
from mediatek.infrastructure.persistence.repositories.formation_repository import (
    SQLModelFormationRepository,
)
from mediatek.infrastructure.persistence.repositories.playlist_repository import (
    SQLModelPlaylistRepository,
)
from mediatek.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = [
    "SQLModelFormationRepository",
    "SQLModelPlaylistRepository",
    "SQLModelCategorieRepository",
    "SQLModelUserRepository",
]
