"""
Tests unitaires pour InMemoryMediaRepository.

Le repository en memoire doit produire les memes resultats de requete
que le repository SQLModel pour un meme catalogue.
"""

import pytest

from filmotheque.core.ports.repositories import CatalogQuery
from filmotheque.core.value_objects import FilterCriteria, MediaType, SortDirection, SortField
from filmotheque.infrastructure.persistence.repositories import (
    InMemoryMediaRepository,
    SQLModelMediaRepository,
)
from filmotheque.services.catalog import CatalogQueryService
from tests.fixtures.films import make_film


class TestInMemoryRepository:
    """Tests pour le stockage en memoire."""

    def test_assigns_incrementing_ids(self) -> None:
        repo = InMemoryMediaRepository()
        first = repo.save(make_film(title="A"))
        second = repo.save(make_film(title="B"))
        assert (first.id, second.id) == (1, 2)

    def test_explicit_ids_advance_the_counter(self) -> None:
        repo = InMemoryMediaRepository([make_film(id=10, title="A")])
        assert repo.save(make_film(title="B")).id == 11

    def test_returns_copies(self) -> None:
        repo = InMemoryMediaRepository([make_film(id=1, title="Heat")])
        record = repo.get_by_id(1)
        record.title = "Changed"
        assert repo.get_by_id(1).title == "Heat"

    def test_find_films_respects_type_ids_and_deleted(self) -> None:
        repo = InMemoryMediaRepository(
            [make_film(id=1), make_film(id=2), make_film(id=3, media_type=MediaType.TV)]
        )
        repo.soft_delete(2)
        assert [r.id for r in repo.find_films(CatalogQuery())] == [1]
        assert [r.id for r in repo.find_films(CatalogQuery(ids=frozenset({2}), include_deleted=True))] == [2]
        assert repo.find_films(CatalogQuery(ids=frozenset())) == []


class TestAdapterIndependence:
    """Memes criteres, memes resultats quel que soit le stockage."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "criteria",
        [
            FilterCriteria(),
            FilterCriteria(format="DVD"),
            FilterCriteria(language="English", sort_field=SortField.YEAR, sort_direction=SortDirection.DESC),
            FilterCriteria(country="US", director="Lana Wachowski"),
            FilterCriteria(year=2003),
        ],
    )
    async def test_same_results(self, criteria, session, godfather_catalog, mock_search_provider) -> None:
        sql_repo = SQLModelMediaRepository(session)
        for record in godfather_catalog:
            sql_repo.save(record)
        memory_repo = InMemoryMediaRepository(godfather_catalog)

        sql_page = await CatalogQueryService(sql_repo, mock_search_provider).find(criteria)
        memory_page = await CatalogQueryService(memory_repo, mock_search_provider).find(criteria)

        assert [r.id for r in sql_page.items] == [r.id for r in memory_page.items]
        assert sql_page.total == memory_page.total
