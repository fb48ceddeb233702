"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- FieldRef : Reference (champ, relation) utilisee pour trier ou filtrer
- SortDirection : Sens de tri (ASC, DESC)
- Notice : Message transitoire affiche a l'utilisateur apres une redirection
- NoticeKind : Type de message (success, warning, error)
"""

from mediatek.core.value_objects.notice import Notice, NoticeKind
from mediatek.core.value_objects.query import FieldRef, SortDirection

__all__ = [
    "FieldRef",
    "SortDirection",
    "Notice",
    "NoticeKind",
]
