"""
Tests for MeilisearchSearchProvider - Meilisearch HTTP search adapter.

Uses respx to mock httpx calls and verifies:
- search returns the set of candidate IDs
- an empty hit list is a normal empty result
- transport errors, error responses and persistent 429 raise SearchUnavailableError
- index maintenance calls hit the documents endpoints
"""

import json

import httpx
import pytest
import respx

from filmotheque.adapters.search import MeilisearchSearchProvider
from filmotheque.core.ports.search import ISearchProvider, SearchIndexEntry, SearchUnavailableError

BASE_URL = "http://meili.test:7700"
SEARCH_URL = f"{BASE_URL}/indexes/films/search"
DOCUMENTS_URL = f"{BASE_URL}/indexes/films/documents"


@pytest.fixture
def provider() -> MeilisearchSearchProvider:
    """Provider with a single attempt so 429 tests do not wait."""
    return MeilisearchSearchProvider(url=BASE_URL, api_key="master", retry_attempts=1)


class TestMeilisearchInterface:
    def test_implements_interface(self, provider) -> None:
        assert isinstance(provider, ISearchProvider)


class TestMeilisearchSearch:
    """Tests for search()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_hit_ids(self, provider) -> None:
        route = respx.post(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"hits": [{"id": 2}, {"id": 3}], "query": "matrix"})
        )

        result = await provider.search("matrix")

        assert result == {2, 3}
        request = route.calls.last.request
        assert request.headers["Authorization"] == "Bearer master"
        body = json.loads(request.content)
        assert body["q"] == "matrix"
        assert body["attributesToRetrieve"] == ["id"]
        await provider.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_hits_is_empty_set(self, provider) -> None:
        respx.post(SEARCH_URL).mock(return_value=httpx.Response(200, json={"hits": []}))
        assert await provider.search("solaris") == set()

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_raises_unavailable(self, provider) -> None:
        respx.post(SEARCH_URL).mock(return_value=httpx.Response(500, json={"message": "boom"}))
        with pytest.raises(SearchUnavailableError):
            await provider.search("matrix")

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_raises_unavailable(self, provider) -> None:
        respx.post(SEARCH_URL).mock(side_effect=httpx.ReadTimeout)
        with pytest.raises(SearchUnavailableError):
            await provider.search("matrix")

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error_raises_unavailable(self, provider) -> None:
        respx.post(SEARCH_URL).mock(side_effect=httpx.ConnectError)
        with pytest.raises(SearchUnavailableError):
            await provider.search("matrix")

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limited_raises_unavailable(self, provider) -> None:
        respx.post(SEARCH_URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "1"})
        )
        with pytest.raises(SearchUnavailableError):
            await provider.search("matrix")

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_body_raises_unavailable(self, provider) -> None:
        respx.post(SEARCH_URL).mock(return_value=httpx.Response(200, json={"unexpected": True}))
        with pytest.raises(SearchUnavailableError):
            await provider.search("matrix")


class TestMeilisearchIndexMaintenance:
    """Tests for index(), remove() and clear()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_index_posts_document(self, provider) -> None:
        route = respx.post(DOCUMENTS_URL).mock(return_value=httpx.Response(202, json={"taskUid": 1}))

        await provider.index(SearchIndexEntry(id=7, title="Heat", year=1995))

        assert route.called
        request = route.calls.last.request
        assert request.url.params["primaryKey"] == "id"
        assert json.loads(request.content) == [{"id": 7, "title": "Heat", "year": 1995}]

    @pytest.mark.asyncio
    @respx.mock
    async def test_remove_deletes_document(self, provider) -> None:
        route = respx.delete(f"{DOCUMENTS_URL}/7").mock(return_value=httpx.Response(202, json={}))
        await provider.remove(7)
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_clear_deletes_all_documents(self, provider) -> None:
        route = respx.delete(DOCUMENTS_URL).mock(return_value=httpx.Response(202, json={}))
        await provider.clear()
        assert route.called
