"""
Fixtures pytest partagees pour les tests MediaTek.

Ce module contient les fixtures communes utilisees dans les tests:
- Base SQLite en memoire (StaticPool, cles etrangeres actives) recreee par test
- Repositories construits sur la session de test
- Catalogue de reference (playlists, categories, formations)
- Client FastAPI dont la session BDD est remplacee par celle du test
- Comptes administrateur / utilisateur et client connecte
"""

from datetime import date
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel

from mediatek.infrastructure.persistence import models  # noqa: F401
from mediatek.infrastructure.persistence.database import create_db_engine
from mediatek.infrastructure.persistence.models import (
    ROLE_ADMIN,
    Categorie,
    Formation,
    Playlist,
    User,
)
from mediatek.infrastructure.persistence.repositories import (
    SQLModelCategorieRepository,
    SQLModelFormationRepository,
    SQLModelPlaylistRepository,
    SQLModelUserRepository,
)
from mediatek.infrastructure.security import hash_password
from mediatek.web.app import app
from mediatek.web.deps import get_db_session

# Cout bcrypt minimal pour garder les tests rapides
TEST_BCRYPT_ROUNDS = 4
ADMIN_PASSWORD = "secret-admin"
USER_PASSWORD = "secret-user"


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire, tables creees puis supprimees."""
    engine = create_db_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def formation_repo(session: Session) -> SQLModelFormationRepository:
    return SQLModelFormationRepository(session)


@pytest.fixture
def playlist_repo(session: Session) -> SQLModelPlaylistRepository:
    return SQLModelPlaylistRepository(session)


@pytest.fixture
def categorie_repo(session: Session) -> SQLModelCategorieRepository:
    return SQLModelCategorieRepository(session)


@pytest.fixture
def user_repo(session: Session) -> SQLModelUserRepository:
    return SQLModelUserRepository(session)


@pytest.fixture
def catalog(session: Session) -> dict:
    """
    Catalogue de reference.

    Playlists :
        "Cours UML" (2 formations), "Python pour debutants" (1), "Playlist vide" (0)
    Categories :
        Java (1 formation), Python (1), SQL (0), UML (2)
    Formations (par date de parution) :
        "A : introduction UML"     2024-01-10  Cours UML              [UML]
        "Python : les listes"      2024-02-01  Python pour debutants  [Python]
        "ZZZ : conclusion UML"     2024-03-05  Cours UML              [UML, Java]
    """
    java = Categorie(name="Java")
    python = Categorie(name="Python")
    sql = Categorie(name="SQL")
    uml = Categorie(name="UML")

    cours_uml = Playlist(name="Cours UML", description="Diagrammes UML")
    cours_python = Playlist(name="Python pour debutants", description="Premiers pas")
    vide = Playlist(name="Playlist vide", description="")

    intro = Formation(
        title="A : introduction UML",
        description="Presentation des diagrammes",
        video_id="intro001",
        published_at=date(2024, 1, 10),
        playlist=cours_uml,
        categories=[uml],
    )
    listes = Formation(
        title="Python : les listes",
        description="Listes et dictionnaires",
        video_id="listes01",
        published_at=date(2024, 2, 1),
        playlist=cours_python,
        categories=[python],
    )
    conclusion = Formation(
        title="ZZZ : conclusion UML",
        description="Synthese du cours",
        video_id="conclu01",
        published_at=date(2024, 3, 5),
        playlist=cours_uml,
        categories=[uml, java],
    )

    session.add_all([java, python, sql, uml, cours_uml, cours_python, vide, intro, listes, conclusion])
    session.commit()
    for entity in (java, python, sql, uml, cours_uml, cours_python, vide, intro, listes, conclusion):
        session.refresh(entity)

    return {
        "categories": {"Java": java, "Python": python, "SQL": sql, "UML": uml},
        "playlists": {"uml": cours_uml, "python": cours_python, "vide": vide},
        "formations": {"intro": intro, "listes": listes, "conclusion": conclusion},
    }


@pytest.fixture
def javascript_catalog(session: Session, catalog: dict) -> dict:
    """
    Catalogue de reference complete d'une categorie "JavaScript".

    Playlist "Cours JavaScript" : "JS : promesses" 2024-04-02 [JavaScript]
    Le nom "Java" est contenu dans "JavaScript" sans designer la meme categorie.
    """
    javascript = Categorie(name="JavaScript")
    cours_js = Playlist(name="Cours JavaScript", description="Asynchronisme")
    promesses = Formation(
        title="JS : promesses",
        description="Promesses et async/await",
        video_id="promes01",
        published_at=date(2024, 4, 2),
        playlist=cours_js,
        categories=[javascript],
    )
    session.add_all([javascript, cours_js, promesses])
    session.commit()
    for entity in (javascript, cours_js, promesses):
        session.refresh(entity)

    catalog["categories"]["JavaScript"] = javascript
    catalog["playlists"]["javascript"] = cours_js
    catalog["formations"]["promesses"] = promesses
    return catalog


# ----------------------------------------------------------------------
# Application web
# ----------------------------------------------------------------------


@pytest.fixture
def client(session: Session) -> Iterator[TestClient]:
    """Client HTTP dont chaque requete utilise la session de test."""

    def override_db_session() -> Iterator[Session]:
        yield session

    app.dependency_overrides[get_db_session] = override_db_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(session: Session) -> User:
    user = User(
        username="admin",
        password=hash_password(ADMIN_PASSWORD, rounds=TEST_BCRYPT_ROUNDS),
        roles=[ROLE_ADMIN],
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def simple_user(session: Session) -> User:
    """Utilisateur authentifiable sans ROLE_ADMIN."""
    user = User(
        username="lecteur",
        password=hash_password(USER_PASSWORD, rounds=TEST_BCRYPT_ROUNDS),
        roles=[],
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def admin_client(client: TestClient, admin_user: User) -> TestClient:
    """Client connecte avec le compte administrateur."""
    response = client.post(
        "/login",
        data={"username": admin_user.username, "password": ADMIN_PASSWORD},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return client


@pytest.fixture
def csrf_token(admin_user: User) -> Callable[[str], str]:
    """Fabrique de jetons CSRF valides pour l'administrateur connecte."""

    def make(token_id: str) -> str:
        return app.state.csrf.generate_token(token_id, admin_user.id)

    return make
