"""
Tests unitaires pour la pagination et le bornage de la taille de page.
"""

import pytest

from filmotheque.services.catalog import clamp_page_size, paginate
from tests.fixtures.films import make_film


@pytest.fixture
def records():
    """25 films deja tries (IDs 1 a 25)."""
    return [make_film(id=i, title=f"Film {i:02d}") for i in range(1, 26)]


class TestClampPageSize:
    """Tests pour clamp_page_size."""

    @pytest.mark.parametrize(
        "requested, expected",
        [(0, 10), (-5, 10), (9, 10), (10, 10), (42, 42), (100, 100), (101, 100), (10000, 100)],
    )
    def test_clamps_into_range(self, requested: int, expected: int) -> None:
        assert clamp_page_size(requested) == expected

    def test_custom_bounds(self) -> None:
        assert clamp_page_size(3, minimum=5, maximum=20) == 5
        assert clamp_page_size(50, minimum=5, maximum=20) == 20


class TestPaginate:
    """Tests pour paginate."""

    def test_first_page(self, records) -> None:
        page = paginate(records, page=1, page_size=10)
        assert [r.id for r in page.items] == list(range(1, 11))
        assert page.total == 25
        assert page.page == 1
        assert page.page_size == 10
        assert page.last_page == 3

    def test_last_partial_page(self, records) -> None:
        page = paginate(records, page=3, page_size=10)
        assert [r.id for r in page.items] == list(range(21, 26))

    def test_page_beyond_last_is_empty_with_total(self, records) -> None:
        page = paginate(records, page=4, page_size=10)
        assert page.items == []
        assert page.is_empty is True
        assert page.total == 25

    def test_page_below_one_is_first_page(self, records) -> None:
        page = paginate(records, page=0, page_size=10)
        assert page.page == 1
        assert page.items[0].id == 1

    def test_page_size_clamped(self, records) -> None:
        assert paginate(records, page_size=0).page_size == 10
        page = paginate(records, page_size=10000)
        assert page.page_size == 100
        assert len(page.items) == 25
        assert page.last_page == 1

    def test_empty_sequence(self) -> None:
        page = paginate([], page=1, page_size=10)
        assert page.total == 0
        assert page.items == []
        assert page.last_page == 1

    def test_pages_partition_the_sequence(self, records) -> None:
        ids = []
        for number in (1, 2, 3):
            ids.extend(r.id for r in paginate(records, page=number, page_size=10).items)
        assert ids == list(range(1, 26))
