"""
Point d'entrée CLI de Filmotheque.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import add, films, reindex, remove, stats
from .config import Settings
from .container import Container
from .logging_config import configure_logging, console_level

app = typer.Typer(
    name="filmotheque",
    help="Catalogue de films personnel",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Filmotheque - Catalogue de films personnel."""
    if quiet:
        state["quiet"] = True
    else:
        state["verbose"] = verbose
    if verbose or quiet:
        settings = get_config()
        configure_logging(
            settings,
            level=console_level(settings.log_level, state["verbose"], state["quiet"]),
        )


# Monter les commandes depuis commands.py
app.command()(films)
app.command()(add)
app.command()(remove)
app.command()(reindex)
app.command()(stats)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Filmotheque")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Recherche : {config.search_driver}")
    if config.meilisearch_enabled:
        typer.echo(f"Meilisearch : {config.meilisearch_url} (index {config.meilisearch_index})")
    typer.echo(
        f"Taille de page : {config.page_size_default} "
        f"(min {config.page_size_min}, max {config.page_size_max})"
    )
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Filmotheque v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web Filmotheque."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("filmotheque.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(settings)

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de Filmotheque", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
