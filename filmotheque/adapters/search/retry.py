"""
Mecanisme de retry avec backoff exponentiel pour le moteur de recherche distant.

Gere automatiquement les erreurs 429 (rate limiting) en relancant
les requetes avec un delai croissant et du jitter aleatoire.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=3, max_wait=5)
    async def my_search_call():
        ...

    # Avec la fonction helper
    response = await request_with_retry(client, "POST", url, json=payload)
"""

from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand le serveur retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie ou illisible.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Lit le header Retry-After (secondes), None si absent ou non numerique."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def with_retry(max_attempts: int = 3, max_wait: int = 5):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    La recherche est sur le chemin d'une requete utilisateur : le nombre
    de tentatives et le delai maximal restent courts.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 3)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 5)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    max_wait: int = 5,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429.

    Convertit les reponses 429 en RateLimitError et relance avec
    backoff exponentiel. Les autres erreurs HTTP (4xx, 5xx) sont
    propagees immediatement sans retry.

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()
