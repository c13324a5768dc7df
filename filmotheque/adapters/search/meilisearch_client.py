"""
Fournisseur de recherche Meilisearch.

Interroge un serveur Meilisearch via son API HTTP (httpx) et maintient
l'index des films (documents {id, title, year}).

Toute erreur de transport, reponse en erreur ou rate limiting persistant
est convertie en SearchUnavailableError : le moteur de requete ne doit
jamais confondre une panne avec une recherche sans resultat.

Usage:
    provider = MeilisearchSearchProvider(url="http://localhost:7700", index="films")
    ids = await provider.search("matrix")
    await provider.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from filmotheque.adapters.search.retry import RateLimitError, request_with_retry
from filmotheque.core.ports.search import (
    ISearchProvider,
    SearchIndexEntry,
    SearchUnavailableError,
)


class MeilisearchSearchProvider(ISearchProvider):
    """
    Client Meilisearch implementant ISearchProvider.

    Attributes:
        DEFAULT_MAX_HITS: Nombre maximal d'IDs candidats demandes par recherche
    """

    DEFAULT_MAX_HITS = 1000

    def __init__(
        self,
        url: str,
        index: str = "films",
        api_key: Optional[str] = None,
        timeout: float = 5.0,
        max_hits: int = DEFAULT_MAX_HITS,
        retry_attempts: int = 3,
    ) -> None:
        """
        Initialise le client.

        Args:
            url: URL du serveur Meilisearch (ex: http://localhost:7700)
            index: UID de l'index des films
            api_key: Cle API (optionnelle en developpement)
            timeout: Timeout HTTP en secondes
            max_hits: Nombre maximal de candidats par recherche
            retry_attempts: Nombre de tentatives sur reponse 429
        """
        self._url = url.rstrip("/")
        self._index = index
        self._api_key = api_key
        self._timeout = timeout
        self._max_hits = max_hits
        self._retry_attempts = retry_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self._api_key:
                headers["Authorization"] = f"Bearer {self._api_key}"
            self._client = httpx.AsyncClient(
                base_url=self._url,
                headers=headers,
                timeout=self._timeout,
            )
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Execute une requete et convertit les echecs en SearchUnavailableError."""
        try:
            return await request_with_retry(
                self._get_client(), method, path, max_attempts=self._retry_attempts, **kwargs
            )
        except RateLimitError as e:
            logger.warning(f"Meilisearch: rate limiting persistant ({e})")
            raise SearchUnavailableError("Meilisearch: trop de requetes") from e
        except httpx.HTTPError as e:
            logger.warning(f"Meilisearch: echec {method} {path}: {e!r}")
            raise SearchUnavailableError(f"Meilisearch indisponible: {e}") from e

    async def search(self, term: str) -> set[int]:
        response = await self._request(
            "POST",
            f"/indexes/{self._index}/search",
            json={"q": term, "limit": self._max_hits, "attributesToRetrieve": ["id"]},
        )
        try:
            hits = response.json()["hits"]
            return {int(hit["id"]) for hit in hits}
        except (ValueError, KeyError, TypeError) as e:
            raise SearchUnavailableError(f"Reponse Meilisearch invalide: {e}") from e

    async def index(self, entry: SearchIndexEntry) -> None:
        await self._request(
            "POST",
            f"/indexes/{self._index}/documents",
            params={"primaryKey": "id"},
            json=[{"id": entry.id, "title": entry.title, "year": entry.year}],
        )

    async def remove(self, media_id: int) -> None:
        await self._request("DELETE", f"/indexes/{self._index}/documents/{media_id}")

    async def clear(self) -> None:
        await self._request("DELETE", f"/indexes/{self._index}/documents")

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
