"""
Fournisseurs de recherche plein texte.

Implementations concretes de ISearchProvider :
- DatabaseSearchProvider : table search_index en base (defaut)
- MeilisearchSearchProvider : serveur Meilisearch via HTTP
"""

from .database_search import DatabaseSearchProvider
from .meilisearch_client import MeilisearchSearchProvider
from .retry import RateLimitError, request_with_retry, with_retry

__all__ = [
    "DatabaseSearchProvider",
    "MeilisearchSearchProvider",
    "RateLimitError",
    "request_with_retry",
    "with_retry",
]
