"""
Commandes CLI du catalogue de films (films, add, remove, reindex, stats).
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from filmotheque.adapters.cli.helpers import console, parse_code_name, suppress_loguru, with_container
from filmotheque.core.ports.repositories import MediaNotFoundError
from filmotheque.core.ports.search import SearchUnavailableError
from filmotheque.core.value_objects import FilterCriteria, MediaFormat
from filmotheque.services.catalog import CatalogResult
from filmotheque.services.statistics import DashboardStats, DistributionItem
from filmotheque.utils.constants import (
    ATTR_COUNTRIES,
    ATTR_DIRECTORS,
    ATTR_GENRES,
    ATTR_LANGUAGES,
)
from filmotheque.utils.helpers import attribute_list


# ============================================================================
# films : navigation dans le catalogue
# ============================================================================


def films(
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Recherche plein texte"),
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Format exact (DVD, Blu-ray, VHS, 4K UHD)"),
    ] = None,
    year: Annotated[
        Optional[str],
        typer.Option("--year", "-y", help="Annee de sortie exacte"),
    ] = None,
    language: Annotated[
        Optional[str],
        typer.Option("--language", "-l", help="Code ou nom de langue (ex: en, English)"),
    ] = None,
    country: Annotated[
        Optional[str],
        typer.Option("--country", "-c", help="Code ou nom de pays (ex: US)"),
    ] = None,
    director: Annotated[
        Optional[str],
        typer.Option("--director", "-d", help="Nom exact du realisateur"),
    ] = None,
    sort: Annotated[
        str,
        typer.Option("--sort", help="Tri: title ou year"),
    ] = "title",
    direction: Annotated[
        str,
        typer.Option("--direction", help="Sens: asc ou desc"),
    ] = "asc",
    page: Annotated[
        int,
        typer.Option("--page", "-p", help="Numero de page"),
    ] = 1,
    page_size: Annotated[
        Optional[int],
        typer.Option("--page-size", help="Films par page (borne entre 10 et 100)"),
    ] = None,
    show_directors: Annotated[
        bool,
        typer.Option("--directors", help="Affiche la liste des realisateurs du catalogue"),
    ] = False,
) -> None:
    """
    Liste les films du catalogue avec filtres, tri et pagination.

    Exemples:
      filmotheque films                          # Titres A-Z, 10 par page
      filmotheque films --sort year --direction desc
      filmotheque films -s matrix -f DVD         # Recherche + format
      filmotheque films -l en -c US -p 2
    """
    asyncio.run(
        _films_async(
            search, format, year, language, country, director,
            sort, direction, page, page_size, show_directors,
        )
    )


@with_container()
async def _films_async(
    container,
    search: Optional[str],
    format: Optional[str],
    year: Optional[str],
    language: Optional[str],
    country: Optional[str],
    director: Optional[str],
    sort: str,
    direction: str,
    page: int,
    page_size: Optional[int],
    show_directors: bool,
) -> None:
    """Implementation async de la commande films."""
    config = container.config()
    criteria = FilterCriteria.from_query_params(
        q=search,
        format=format,
        year=year,
        language=language,
        country=country,
        director=director,
        sort=sort,
        direction=direction,
        page=page,
        page_size=page_size,
        default_page_size=config.page_size_default,
    )

    service = container.catalog_service()
    try:
        result = await service.browse(criteria)
    except SearchUnavailableError as e:
        console.print(f"[red]Recherche indisponible: {e}[/red]")
        raise typer.Exit(1)

    with suppress_loguru():
        _render_films(result, show_directors)


def _render_films(result: CatalogResult, show_directors: bool) -> None:
    """Affiche une page de films dans une table Rich."""
    page = result.page
    if page.is_empty:
        console.print("[yellow]Aucun film ne correspond aux criteres.[/yellow]")
    else:
        table = Table(title="Films")
        table.add_column("ID", justify="right", style="dim")
        table.add_column("Titre", style="bold")
        table.add_column("Annee", justify="right")
        table.add_column("Format")
        table.add_column("Realisateurs")
        for record in page.items:
            directors = [d for d in attribute_list(record.attributes, ATTR_DIRECTORS) if isinstance(d, str)]
            table.add_row(
                str(record.id),
                escape(record.title),
                str(record.year),
                record.format.value,
                ", ".join(directors),
            )
        console.print(table)

    console.print(
        f"[bold]Page {page.page}/{page.last_page}[/bold] - "
        f"{page.total} film(s), {page.page_size} par page"
    )

    if show_directors and result.directors:
        console.print("\n[bold]Realisateurs:[/bold] " + ", ".join(result.directors))


# ============================================================================
# add / remove : chemin d'ecriture
# ============================================================================


def add(
    title: Annotated[str, typer.Argument(help="Titre du film")],
    format: Annotated[
        MediaFormat,
        typer.Option("--format", "-f", help="Format du support"),
    ],
    year: Annotated[int, typer.Option("--year", "-y", help="Annee de sortie")],
    director: Annotated[
        Optional[list[str]],
        typer.Option("--director", "-d", help="Realisateur (repetable)"),
    ] = None,
    genre: Annotated[
        Optional[list[str]],
        typer.Option("--genre", "-g", help="Genre (repetable)"),
    ] = None,
    language: Annotated[
        Optional[list[str]],
        typer.Option("--language", "-l", help="Langue 'code:nom' (repetable, ex: en:English)"),
    ] = None,
    country: Annotated[
        Optional[list[str]],
        typer.Option("--country", "-c", help="Pays 'code:nom' (repetable, ex: US:United States)"),
    ] = None,
) -> None:
    """Ajoute un film au catalogue."""
    attributes = _build_attributes(director, genre, language, country)
    asyncio.run(_add_async(title, format, year, attributes))


def _build_attributes(
    directors: Optional[list[str]],
    genres: Optional[list[str]],
    languages: Optional[list[str]],
    countries: Optional[list[str]],
) -> dict:
    """Construit le sac d'attributs a partir des options repetables."""
    attributes: dict = {}
    if directors:
        attributes[ATTR_DIRECTORS] = [d.strip() for d in directors if d.strip()]
    if genres:
        attributes[ATTR_GENRES] = [g.strip() for g in genres if g.strip()]
    if languages:
        attributes[ATTR_LANGUAGES] = [e for e in map(parse_code_name, languages) if e]
    if countries:
        attributes[ATTR_COUNTRIES] = [e for e in map(parse_code_name, countries) if e]
    return attributes


@with_container()
async def _add_async(container, title: str, format: MediaFormat, year: int, attributes: dict) -> None:
    """Implementation async de la commande add."""
    if not title.strip():
        console.print("[red]Le titre est obligatoire.[/red]")
        raise typer.Exit(1)

    service = container.media_service()
    record = await service.create_film(title, format, year, attributes)
    console.print(f"[green]Film ajoute:[/green] #{record.id} {escape(record.title)} ({record.year})")


def remove(
    media_id: Annotated[int, typer.Argument(help="ID du film a supprimer")],
) -> None:
    """Supprime (logiquement) un film du catalogue."""
    asyncio.run(_remove_async(media_id))


@with_container()
async def _remove_async(container, media_id: int) -> None:
    """Implementation async de la commande remove."""
    service = container.media_service()
    try:
        await service.delete_film(media_id)
    except MediaNotFoundError:
        console.print(f"[red]Film introuvable: {media_id}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Film supprime:[/green] #{media_id}")


# ============================================================================
# reindex / stats : maintenance et tableau de bord
# ============================================================================


def reindex() -> None:
    """Recalcule les cles de tri et reconstruit l'index de recherche."""
    asyncio.run(_reindex_async())


@with_container()
async def _reindex_async(container) -> None:
    """Implementation async de la commande reindex."""
    service = container.media_service()
    try:
        stats = await service.reindex()
    except SearchUnavailableError as e:
        console.print(f"[red]Recherche indisponible: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]Reindexation terminee:[/green] {stats.indexed} film(s) indexe(s) "
        f"sur {stats.total}, {stats.skipped} ignore(s)"
    )


def stats() -> None:
    """Affiche les statistiques du catalogue (genres, realisateurs, decennies, langues)."""
    asyncio.run(_stats_async())


@with_container()
async def _stats_async(container) -> None:
    """Implementation async de la commande stats."""
    dashboard = container.statistics_service().dashboard()
    with suppress_loguru():
        _render_stats(dashboard)


def _distribution_table(title: str, items: list[DistributionItem]) -> Table:
    """Table Rich a deux colonnes pour une distribution."""
    table = Table(title=title)
    table.add_column("Nom")
    table.add_column("Films", justify="right")
    for item in items:
        table.add_row(escape(item.name), str(item.count))
    return table


def _render_stats(dashboard: DashboardStats) -> None:
    """Affiche le tableau de bord."""
    console.print(f"[bold]Films:[/bold] {dashboard.films_count}")
    if dashboard.films_count == 0:
        return
    console.print(_distribution_table("Genres", dashboard.genres))
    console.print(_distribution_table("Realisateurs", dashboard.directors))
    console.print(_distribution_table("Decennies", dashboard.decades))
    console.print(_distribution_table("Langues", dashboard.languages))
