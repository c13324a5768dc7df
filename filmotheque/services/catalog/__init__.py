"""
Package du moteur de requete du catalogue.

Reexporte CatalogQueryService, les dataclasses de resultat et les
briques unitaires (filtres, tri, pagination, facettes).
"""

from .attribute_matcher import matches_country, matches_director, matches_language
from .catalog_service import CatalogQueryService
from .dataclasses import CatalogPage, CatalogResult
from .facets import distinct_directors
from .filter_pipeline import base_predicate, build_predicate, build_query
from .paginator import clamp_page_size, paginate
from .sorter import order_records

__all__ = [
    "CatalogQueryService",
    "CatalogPage",
    "CatalogResult",
    "matches_director",
    "matches_language",
    "matches_country",
    "base_predicate",
    "build_predicate",
    "build_query",
    "order_records",
    "clamp_page_size",
    "paginate",
    "distinct_directors",
]
