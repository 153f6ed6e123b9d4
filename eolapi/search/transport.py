"""Search page transport: URL building and one decoded page fetch."""

import httpx

from eolapi.errors import DecodeError
from eolapi.http import DEFAULT_TIMEOUT, get_json
from eolapi.search.models import PageBatch, SearchQuery

DEFAULT_BASE_URL = "http://eol.org/api"


class SearchTransport:
    """Fetches single pages of the EOL search endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
    ):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    def build_url(self, query: SearchQuery, page: int) -> str:
        """Request URL for ``page`` of ``query``."""
        params: dict[str, str | int] = {
            "q": query.query,
            "exact": "true" if query.exact else "false",
            "filter_by_string": query.filter_by_string,
            "cache_ttl": query.cache_ttl,
            "page": page,
        }
        if query.filter_by_hierarchy_entry_id > 0:
            params["filter_by_hierarchy_entry_id"] = query.filter_by_hierarchy_entry_id
        if query.filter_by_taxon_concept_id > 0:
            params["filter_by_taxon_concept_id"] = query.filter_by_taxon_concept_id
        if query.limit > 0:
            params["limit"] = query.limit
        return str(httpx.URL(f"{self.base_url}/search/1.0.json", params=params))

    async def fetch_page(self, url: str) -> PageBatch:
        """Fetch and decode one page; never returns a partial batch."""
        payload = await get_json(url, timeout=self.timeout, user_agent=self.user_agent)
        try:
            return PageBatch.from_dict(payload)
        except (OverflowError, TypeError, ValueError) as e:
            raise DecodeError(f"malformed search page: {e}", url=url) from e
