"""EOL API client facade."""

from __future__ import annotations

from typing import TYPE_CHECKING

from eolapi.pages import PageDetail, PageQuery, fetch_page_detail
from eolapi.search import Aggregator, SearchQuery, SearchResult, SearchTransport

if TYPE_CHECKING:
    from eolapi.config.schema import Config


class EolClient:
    """Entry point for searches and taxon page lookups."""

    def __init__(self, config: "Config | None" = None, transport: SearchTransport | None = None):
        from eolapi.config.schema import Config

        self.config = config or Config()
        api = self.config.api
        self.transport = transport or SearchTransport(
            api.base_url,
            timeout=api.timeout,
            user_agent=api.user_agent,
        )
        self.aggregator = Aggregator(
            self.transport,
            sink_capacity=self.config.search.sink_capacity,
        )

    async def search(self, query: SearchQuery | str) -> list[SearchResult]:
        """Every result of ``query`` across all pages; a bare string becomes a default query."""
        if isinstance(query, str):
            query = SearchQuery(query=query, cache_ttl=self.config.search.cache_ttl)
        return await self.aggregator.search(query)

    async def page(self, query: PageQuery | int) -> PageDetail:
        """Look up one taxon page by id."""
        if isinstance(query, int):
            query = PageQuery(id=query)
        api = self.config.api
        return await fetch_page_detail(
            query,
            base_url=api.base_url,
            timeout=api.timeout,
            user_agent=api.user_agent,
        )
