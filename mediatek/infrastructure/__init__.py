"""
Couche infrastructure de MediaTek.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports). Il gere les preoccupations techniques :

- persistence/ : Stockage SQL avec SQLModel (modeles, repositories, jeu de demo)
- security/ : Hachage des mots de passe (bcrypt)
"""
