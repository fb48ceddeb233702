"""
MediaTek Formations - Catalogue de formations vidéo.

Ce package fournit le site public (consultation des formations, playlists
et catégories) et le back-office d'administration (ajout, modification,
suppression) de la médiathèque de formations.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports, exceptions)
- infrastructure/ : Persistance SQLModel, sécurité (hachage des mots de passe)
- web/ : Application FastAPI, templates Jinja2, routes publiques et admin
"""
