"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- ICatalogRepository : Contrat commun tri / recherche / ajout / suppression
- IFormationRepository : Stockage des formations
- IPlaylistRepository : Stockage des playlists
- ICategorieRepository : Stockage des catégories
- IUserRepository : Stockage des comptes d'administration
"""

from mediatek.core.ports.repositories import (
    ICatalogRepository,
    ICategorieRepository,
    IFormationRepository,
    IPlaylistRepository,
    IUserRepository,
)

__all__ = [
    "ICatalogRepository",
    "IFormationRepository",
    "IPlaylistRepository",
    "ICategorieRepository",
    "IUserRepository",
]
