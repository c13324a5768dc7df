"""
Tests unitaires pour le tri deterministe du catalogue.
"""

from filmotheque.core.value_objects import SortDirection, SortField
from filmotheque.services.catalog import order_records
from tests.fixtures.films import make_film


def _titles(records) -> list[str]:
    return [r.title for r in records]


class TestOrderByTitle:
    """Tri par titre (cle orderable_title)."""

    def test_scenario_godfather_matrix(self, godfather_catalog) -> None:
        """"The Godfather" est range sous G, avant les deux Matrix."""
        records = [godfather_catalog[1], godfather_catalog[2], godfather_catalog[0]]
        assert _titles(order_records(records)) == [
            "The Godfather",
            "The Matrix",
            "Matrix Revolutions",
        ]

    def test_uses_orderable_title_not_raw_title(self) -> None:
        records = [make_film(id=1, title="The Zoo"), make_film(id=2, title="Mad Max")]
        records[0].orderable_title = "zoo"
        records[1].orderable_title = "mad max"
        assert _titles(order_records(records)) == ["Mad Max", "The Zoo"]

    def test_missing_orderable_title_is_derived(self) -> None:
        records = [make_film(id=1, title="Zodiac"), make_film(id=2, title="The Birds")]
        assert _titles(order_records(records)) == ["The Birds", "Zodiac"]

    def test_descending(self, godfather_catalog) -> None:
        result = order_records(godfather_catalog, SortField.TITLE, SortDirection.DESC)
        assert _titles(result) == ["Matrix Revolutions", "The Matrix", "The Godfather"]

    def test_does_not_mutate_input(self, godfather_catalog) -> None:
        before = list(godfather_catalog)
        order_records(godfather_catalog, SortField.TITLE, SortDirection.DESC)
        assert godfather_catalog == before


class TestOrderByYear:
    """Tri par annee (numerique)."""

    def test_ascending(self) -> None:
        records = [make_film(id=1, year=2003), make_film(id=2, year=999), make_film(id=3, year=1972)]
        assert [r.year for r in order_records(records, SortField.YEAR)] == [999, 1972, 2003]

    def test_descending(self) -> None:
        records = [make_film(id=1, year=1972), make_film(id=2, year=2003)]
        result = order_records(records, SortField.YEAR, SortDirection.DESC)
        assert [r.year for r in result] == [2003, 1972]


class TestTieBreak:
    """Les egalites sont departagees par ID croissant dans les deux sens."""

    def test_ties_by_id_ascending(self) -> None:
        records = [make_film(id=5, year=2000), make_film(id=2, year=2000), make_film(id=9, year=2000)]
        assert [r.id for r in order_records(records, SortField.YEAR)] == [2, 5, 9]

    def test_ties_by_id_ascending_when_descending(self) -> None:
        records = [
            make_film(id=5, year=2000),
            make_film(id=2, year=2000),
            make_film(id=7, year=2010),
        ]
        result = order_records(records, SortField.YEAR, SortDirection.DESC)
        assert [r.id for r in result] == [7, 2, 5]

    def test_same_title_ties(self) -> None:
        records = [make_film(id=3, title="Solaris"), make_film(id=1, title="Solaris")]
        assert [r.id for r in order_records(records)] == [1, 3]

    def test_ordering_is_independent_of_input_order(self, godfather_catalog) -> None:
        forward = order_records(godfather_catalog, SortField.YEAR, SortDirection.DESC)
        backward = order_records(list(reversed(godfather_catalog)), SortField.YEAR, SortDirection.DESC)
        assert [r.id for r in forward] == [r.id for r in backward]
