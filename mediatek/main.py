"""
Point d'entrée CLI de MediaTek.

Initialise le container DI, configure le logging et fournit les commandes CLI :
affichage de la configuration, serveur web, jeu de démonstration et
création de comptes d'administration.
"""

from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import Settings
from .container import Container
from .infrastructure.persistence.fixtures import (
    DEFAULT_ADMIN_PASSWORD,
    load_fixtures,
    reset_database,
)
from .infrastructure.persistence.models import ROLE_ADMIN, User
from .infrastructure.security import hash_password
from .logging_config import configure_logging

app = typer.Typer(
    name="mediatek",
    help="Catalogue de formations MediaTek86",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration MediaTek")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Clé secrète : {'par défaut (à changer)' if config.uses_default_secret else 'définie'}")
    typer.echo(f"Validité des jetons CSRF : {config.csrf_token_max_age} s")
    typer.echo(f"Formations en page d'accueil : {config.home_latest_count}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo("MediaTek v0.1.0")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web MediaTek."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("mediatek.web.app:app", host=host, port=port, reload=reload)


@app.command(name="load-fixtures")
def load_fixtures_command(
    reset: Annotated[
        bool, typer.Option("--reset", help="Vider la base avant le chargement")
    ] = False,
    admin_password: Annotated[
        str, typer.Option("--admin-password", help="Mot de passe du compte admin")
    ] = DEFAULT_ADMIN_PASSWORD,
) -> None:
    """Charge le jeu de démonstration (playlists, catégories, formations, admin)."""
    config = get_config()
    session = container.session()
    try:
        if reset:
            reset_database(session)
            session = container.session()
        counts = load_fixtures(
            session, admin_password=admin_password, bcrypt_rounds=config.bcrypt_rounds
        )
    finally:
        session.close()

    if not counts:
        console.print("[yellow]La base contient déjà des formations, rien n'a été chargé.[/yellow]")
        console.print("Utiliser --reset pour repartir d'une base vide.")
        raise typer.Exit(code=1)

    table = Table(title="Jeu de démonstration")
    table.add_column("Type", style="cyan")
    table.add_column("Créés", justify="right", style="green")
    for name, count in counts.items():
        table.add_row(name, str(count))
    console.print(table)


@app.command(name="create-user")
def create_user(
    username: Annotated[str, typer.Argument(help="Identifiant de connexion")],
    password: Annotated[
        str,
        typer.Option(prompt=True, confirmation_prompt=True, hide_input=True, help="Mot de passe"),
    ],
    admin: Annotated[bool, typer.Option(help="Attribuer ROLE_ADMIN")] = True,
) -> None:
    """Crée un compte utilisateur (administrateur par défaut)."""
    config = get_config()
    users = container.user_repository()
    if users.find_by_username(username) is not None:
        console.print(f"[red]L'utilisateur {username} existe déjà.[/red]")
        raise typer.Exit(code=1)

    user = User(
        username=username,
        password=hash_password(password, rounds=config.bcrypt_rounds),
        roles=[ROLE_ADMIN] if admin else [],
    )
    users.add(user)
    logger.info("Utilisateur cree", username=username, roles=user.get_roles())
    console.print(f"[green]Utilisateur {username} créé[/green] ({', '.join(user.get_roles())})")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    configure_logging(container.config())

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de MediaTek", version="0.1.0")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
