"""
Jeu de donnees de demonstration.

Cree quelques playlists, categories et formations ainsi que le compte
d'administration par defaut (admin / admin). Utilise par la commande CLI
`mediatek load-fixtures`.
"""

from datetime import date, timedelta

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from mediatek.infrastructure.persistence.models import (
    ROLE_ADMIN,
    Categorie,
    Formation,
    Playlist,
    User,
)
from mediatek.infrastructure.security import hash_password

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin"

CATEGORIES = ["Java", "UML", "C#", "Python", "SQL", "Android", "MCD", "POO"]

# (nom de playlist, description, [(titre, video_id, [categories]), ...])
PLAYLISTS = [
    (
        "Bases de la programmation (C#)",
        "Notions de base de la programmation en C#.",
        [
            ("C# : variables et affectations", "Z4yTTSpaWvE", ["C#", "POO"]),
            ("C# : structures de controle", "dkvSqVvOBXc", ["C#"]),
            ("C# : les tableaux", "1Z1sbk0cDik", ["C#"]),
        ],
    ),
    (
        "Cours UML",
        "Diagrammes de classes, de cas d'utilisation et de sequences.",
        [
            ("UML : diagramme de cas d'utilisation", "9B2m7PU5vSQ", ["UML"]),
            ("UML : diagramme de classes", "WGtaOJhJnps", ["UML", "POO"]),
        ],
    ),
    (
        "Python pour debutants",
        "Premiers pas en Python.",
        [
            ("Python : installation et premiers scripts", "kqtD5dpn9C8", ["Python"]),
            ("Python : listes et dictionnaires", "W8KRzm-HUcc", ["Python", "POO"]),
        ],
    ),
    (
        "Modelisation des donnees",
        "Du MCD au schema relationnel.",
        [
            ("MCD : entites et associations", "BPb2tRnJRnU", ["MCD", "SQL"]),
        ],
    ),
]


def reset_database(session: Session) -> None:
    """Supprime et recree toutes les tables."""
    engine = session.get_bind()
    session.close()
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)


def load_fixtures(
    session: Session,
    admin_password: str = DEFAULT_ADMIN_PASSWORD,
    bcrypt_rounds: int = 12,
) -> dict[str, int]:
    """
    Insere le jeu de demonstration dans une base vide.

    Les formations sont publiees un jour apres l'autre en remontant
    depuis aujourd'hui, la plus recente en premier.

    Retourne :
        Le nombre d'entites creees par type (vide si la base contient deja
        des formations)
    """
    existing = session.exec(select(func.count()).select_from(Formation)).one()
    if existing:
        logger.warning("Base deja peuplee, jeu de demo ignore", formations=existing)
        return {}

    categories = {name: Categorie(name=name) for name in CATEGORIES}
    session.add_all(categories.values())

    published_at = date.today()
    formation_count = 0
    for name, description, formations in PLAYLISTS:
        playlist = Playlist(name=name, description=description)
        session.add(playlist)
        for title, video_id, categorie_names in formations:
            session.add(
                Formation(
                    title=title,
                    description=f"{title}.",
                    video_id=video_id,
                    published_at=published_at,
                    playlist=playlist,
                    categories=[categories[c] for c in categorie_names],
                )
            )
            published_at -= timedelta(days=1)
            formation_count += 1

    admin = User(
        username=DEFAULT_ADMIN_USERNAME,
        password=hash_password(admin_password, rounds=bcrypt_rounds),
        roles=[ROLE_ADMIN],
    )
    session.add(admin)
    session.commit()

    counts = {
        "playlists": len(PLAYLISTS),
        "categories": len(CATEGORIES),
        "formations": formation_count,
        "users": 1,
    }
    logger.info("Jeu de demonstration charge", **counts)
    return counts
