"""
Service de statistiques du catalogue (tableau de bord).

Agrege les films actifs par genre, realisateur, decennie et langue.
Chaque distribution est une liste de {name, count} triee de facon stable.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Optional

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.ports.repositories import CatalogQuery, IMediaRepository
from filmotheque.utils.constants import ATTR_DIRECTORS, ATTR_GENRES, ATTR_LANGUAGES
from filmotheque.utils.helpers import attribute_list


@dataclass
class DistributionItem:
    """Une entree de distribution (libelle, nombre de films)."""

    name: str
    count: int


@dataclass
class DashboardStats:
    """Statistiques globales du catalogue de films."""

    films_count: int = 0
    genres: list[DistributionItem] = field(default_factory=list)
    directors: list[DistributionItem] = field(default_factory=list)
    decades: list[DistributionItem] = field(default_factory=list)
    languages: list[DistributionItem] = field(default_factory=list)


def _count_strings(records: list[MediaRecord], key: str) -> Counter:
    """Compte les chaines non vides d'une liste du sac d'attributs."""
    counts: Counter = Counter()
    for record in records:
        for value in attribute_list(record.attributes, key):
            if isinstance(value, str) and value != "":
                counts[value] += 1
    return counts


def _language_label(language: Any) -> Optional[str]:
    """Libelle d'une langue : nom, sinon code. Accepte aussi une chaine brute."""
    if isinstance(language, dict):
        name = language.get("name")
        code = language.get("code")
        if isinstance(name, str) and name != "":
            return name
        return code if isinstance(code, str) else None
    if isinstance(language, str):
        return language
    return None


def _alphabetical(counts: Counter) -> list[DistributionItem]:
    return [DistributionItem(name=name, count=counts[name]) for name in sorted(counts)]


def genres_distribution(records: list[MediaRecord]) -> list[DistributionItem]:
    """Nombre de films par genre, ordre alphabetique."""
    return _alphabetical(_count_strings(records, ATTR_GENRES))


def directors_distribution(records: list[MediaRecord]) -> list[DistributionItem]:
    """Nombre de films par realisateur, ordre alphabetique."""
    return _alphabetical(_count_strings(records, ATTR_DIRECTORS))


def decades_distribution(records: list[MediaRecord]) -> list[DistributionItem]:
    """
    Nombre de films par decennie ("1990s"), ordre chronologique.

    Les annees nulles ou negatives sont ignorees.
    """
    counts: Counter = Counter()
    for record in records:
        if not record.year or record.year <= 0:
            continue
        counts[(record.year // 10) * 10] += 1
    return [
        DistributionItem(name=f"{start}s", count=counts[start])
        for start in sorted(counts)
    ]


def languages_distribution(records: list[MediaRecord]) -> list[DistributionItem]:
    """Nombre de films par langue (nom, sinon code), ordre alphabetique."""
    counts: Counter = Counter()
    for record in records:
        for language in attribute_list(record.attributes, ATTR_LANGUAGES):
            label = _language_label(language)
            if label:
                counts[label] += 1
    return _alphabetical(counts)


class StatisticsService:
    """Calcule les statistiques du tableau de bord sur les films actifs."""

    def __init__(self, media_repo: IMediaRepository) -> None:
        self._media_repo = media_repo

    def dashboard(self) -> DashboardStats:
        """Retourne toutes les distributions en un seul passage sur le stockage."""
        films = self._media_repo.find_films(CatalogQuery())
        return DashboardStats(
            films_count=len(films),
            genres=genres_distribution(films),
            directors=directors_distribution(films),
            decades=decades_distribution(films),
            languages=languages_distribution(films),
        )
