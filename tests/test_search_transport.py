import httpx
import pytest

from eolapi.errors import DecodeError, NotFoundError, TransportError
from eolapi.search import SearchQuery, SearchTransport


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, error: Exception | None = None):
        self._payload = payload
        self.status_code = status_code
        self._error = error

    def json(self):
        if self._error:
            raise self._error
        return self._payload


def _stub_client(calls: dict, response: FakeResponse | None = None, error: Exception | None = None):
    class StubClient:
        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, headers=None, timeout=None):
            calls["url"] = url
            calls["headers"] = headers
            calls["timeout"] = timeout
            if error:
                raise error
            return response

    return StubClient


def test_build_url_carries_query_and_page() -> None:
    transport = SearchTransport("https://eol.example/api/")
    url = httpx.URL(transport.build_url(SearchQuery(query="Ursus arctos"), 3))

    assert url.path == "/api/search/1.0.json"
    assert url.params["q"] == "Ursus arctos"
    assert url.params["exact"] == "false"
    assert url.params["filter_by_string"] == ""
    assert url.params["cache_ttl"] == "0"
    assert url.params["page"] == "3"
    assert "limit" not in url.params
    assert "filter_by_taxon_concept_id" not in url.params
    assert "filter_by_hierarchy_entry_id" not in url.params


def test_build_url_includes_positive_filters() -> None:
    transport = SearchTransport("https://eol.example/api")
    query = SearchQuery(
        query="Ursus & co",
        exact=True,
        limit=10,
        filter_by_taxon_concept_id=7,
        filter_by_hierarchy_entry_id=9,
        filter_by_string="Mammalia",
        cache_ttl=60,
    )
    url = httpx.URL(transport.build_url(query, 1))

    assert url.params["q"] == "Ursus & co"
    assert url.params["exact"] == "true"
    assert url.params["limit"] == "10"
    assert url.params["filter_by_taxon_concept_id"] == "7"
    assert url.params["filter_by_hierarchy_entry_id"] == "9"
    assert url.params["filter_by_string"] == "Mammalia"
    assert url.params["cache_ttl"] == "60"


def test_build_url_is_deterministic() -> None:
    transport = SearchTransport()
    query = SearchQuery(query="Ursus")
    assert transport.build_url(query, 2) == transport.build_url(query, 2)
    assert transport.build_url(query, 2).startswith("http://eol.org/api/search/1.0.json?")


@pytest.mark.asyncio
async def test_fetch_page_decodes_batch(monkeypatch) -> None:
    calls: dict = {}
    payload = {
        "totalResults": 157,
        "itemsPerPage": 30,
        "results": [
            {
                "id": 14349,
                "title": "Ursus",
                "link": "http://eol.org/14349?action=overview&controller=taxa",
                "content": "Ursus Linnaeus, 1758; Ursus; Ursus Arctos Bruinosus; Ursus Arctos Ssp.",
            }
        ],
    }
    monkeypatch.setattr(
        "eolapi.http.httpx.AsyncClient",
        _stub_client(calls, FakeResponse(payload)),
    )

    transport = SearchTransport("https://eol.example/api", timeout=5.0, user_agent="tests/1.0")
    batch = await transport.fetch_page("https://eol.example/api/search/1.0.json?q=Ursus&page=1")

    assert batch.total_results == 157.0
    assert batch.items_per_page == 30.0
    assert batch.page_count() == 6
    assert batch.items[0].id == 14349
    assert batch.items[0].title == "Ursus"
    assert calls["timeout"] == 5.0
    assert calls["headers"]["User-Agent"] == "tests/1.0"


@pytest.mark.asyncio
async def test_fetch_page_404_is_not_found(monkeypatch) -> None:
    monkeypatch.setattr(
        "eolapi.http.httpx.AsyncClient",
        _stub_client({}, FakeResponse({}, status_code=404)),
    )

    with pytest.raises(NotFoundError) as info:
        await SearchTransport().fetch_page("http://eol.org/api/search/1.0.json?page=2")

    assert info.value.kind == "not_found"
    assert info.value.status_code == 404
    assert "page=2" in info.value.url


@pytest.mark.asyncio
async def test_fetch_page_server_error_is_transport(monkeypatch) -> None:
    monkeypatch.setattr(
        "eolapi.http.httpx.AsyncClient",
        _stub_client({}, FakeResponse({}, status_code=503)),
    )

    with pytest.raises(TransportError) as info:
        await SearchTransport().fetch_page("http://eol.org/api/search/1.0.json?page=1")

    assert info.value.status_code == 503
    assert "StatusCode: 503" in str(info.value)


@pytest.mark.asyncio
async def test_fetch_page_connection_failure_is_transport(monkeypatch) -> None:
    monkeypatch.setattr(
        "eolapi.http.httpx.AsyncClient",
        _stub_client({}, error=httpx.ConnectError("boom")),
    )

    with pytest.raises(TransportError, match="boom"):
        await SearchTransport().fetch_page("http://eol.org/api/search/1.0.json?page=1")


@pytest.mark.asyncio
async def test_fetch_page_invalid_json_is_decode_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "eolapi.http.httpx.AsyncClient",
        _stub_client({}, FakeResponse(error=ValueError("Expecting value"))),
    )

    with pytest.raises(DecodeError):
        await SearchTransport().fetch_page("http://eol.org/api/search/1.0.json?page=1")


@pytest.mark.asyncio
async def test_fetch_page_wrong_shape_is_decode_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "eolapi.http.httpx.AsyncClient",
        _stub_client({}, FakeResponse({"results": "nope", "totalResults": 1, "itemsPerPage": 1})),
    )

    with pytest.raises(DecodeError, match="results must be an array"):
        await SearchTransport().fetch_page("http://eol.org/api/search/1.0.json?page=1")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "totals",
    [
        {"totalResults": float("nan"), "itemsPerPage": 30},
        {"totalResults": float("inf"), "itemsPerPage": 30},
        {"totalResults": 157, "itemsPerPage": float("-inf")},
        {"totalResults": 10**400, "itemsPerPage": 30},
    ],
)
async def test_fetch_page_non_finite_totals_are_decode_errors(monkeypatch, totals) -> None:
    monkeypatch.setattr(
        "eolapi.http.httpx.AsyncClient",
        _stub_client({}, FakeResponse({"results": [], **totals})),
    )

    with pytest.raises(DecodeError):
        await SearchTransport().fetch_page("http://eol.org/api/search/1.0.json?page=1")
