"""
Tests unitaires pour les statistiques du tableau de bord.
"""

from filmotheque.core.value_objects import MediaType
from filmotheque.infrastructure.persistence.repositories import InMemoryMediaRepository
from filmotheque.services.statistics import (
    DistributionItem,
    StatisticsService,
    decades_distribution,
    directors_distribution,
    genres_distribution,
    languages_distribution,
)
from tests.fixtures.films import make_film


def _pairs(items: list[DistributionItem]) -> list[tuple[str, int]]:
    return [(i.name, i.count) for i in items]


class TestGenresDistribution:
    def test_counts_alphabetical(self) -> None:
        records = [
            make_film(id=1, genres=["Drama", "Crime"]),
            make_film(id=2, genres=["Drama"]),
            make_film(id=3),
        ]
        assert _pairs(genres_distribution(records)) == [("Crime", 1), ("Drama", 2)]

    def test_ignores_malformed(self) -> None:
        records = [make_film(id=1, genres="Drama"), make_film(id=2, genres=["", None, "Noir"])]
        assert _pairs(genres_distribution(records)) == [("Noir", 1)]


class TestDirectorsDistribution:
    def test_counts_alphabetical(self) -> None:
        records = [
            make_film(id=1, directors=["Christopher Nolan"]),
            make_film(id=2, directors=["Christopher Nolan", "Agnes Varda"]),
        ]
        assert _pairs(directors_distribution(records)) == [
            ("Agnes Varda", 1),
            ("Christopher Nolan", 2),
        ]


class TestDecadesDistribution:
    def test_groups_by_decade_in_order(self) -> None:
        records = [
            make_film(id=1, year=1999),
            make_film(id=2, year=1990),
            make_film(id=3, year=1972),
            make_film(id=4, year=2003),
        ]
        assert _pairs(decades_distribution(records)) == [
            ("1970s", 1),
            ("1990s", 2),
            ("2000s", 1),
        ]

    def test_skips_non_positive_years(self) -> None:
        records = [make_film(id=1, year=0), make_film(id=2, year=-5), make_film(id=3, year=2010)]
        assert _pairs(decades_distribution(records)) == [("2010s", 1)]


class TestLanguagesDistribution:
    def test_name_then_code_then_raw_string(self) -> None:
        records = [
            make_film(id=1, languages=[{"code": "en", "name": "English"}]),
            make_film(id=2, languages=[{"code": "fr"}, "English"]),
            make_film(id=3, languages=[{"name": ""}, 7]),
        ]
        assert _pairs(languages_distribution(records)) == [("English", 2), ("fr", 1)]


class TestStatisticsService:
    def test_dashboard_only_counts_active_films(self, godfather_catalog) -> None:
        repo = InMemoryMediaRepository(godfather_catalog)
        repo.save(make_film(id=10, title="Twin Peaks", year=1990, media_type=MediaType.TV, genres=["Drama"]))
        repo.soft_delete(3)

        stats = StatisticsService(repo).dashboard()

        assert stats.films_count == 2
        assert _pairs(stats.genres) == [
            ("Action", 1),
            ("Crime", 1),
            ("Drama", 1),
            ("Science Fiction", 1),
        ]
        assert _pairs(stats.decades) == [("1970s", 1), ("1990s", 1)]
        assert _pairs(stats.languages) == [("English", 2), ("Italiano", 1)]

    def test_empty_catalog(self) -> None:
        stats = StatisticsService(InMemoryMediaRepository()).dashboard()
        assert stats.films_count == 0
        assert stats.genres == []
        assert stats.decades == []
