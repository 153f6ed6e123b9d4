"""Single-page fetch unit used by the search supervisor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from loguru import logger

from eolapi.errors import EolError
from eolapi.search.models import PageBatch, SearchQuery, SearchResult
from eolapi.search.scope import CancellationScope
from eolapi.search.sink import ResultSink

if TYPE_CHECKING:
    from eolapi.search.transport import SearchTransport

OutcomeStatus = Literal["succeeded", "failed", "skipped"]


@dataclass(frozen=True, slots=True)
class PageOutcome:
    """What happened to one page."""

    page: int
    status: OutcomeStatus
    batch: PageBatch | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.status == "succeeded"


class PageWorker:
    """Fetches one page and forwards its items to the sink."""

    def __init__(self, transport: "SearchTransport"):
        self.transport = transport

    async def fetch(
        self,
        page: int,
        query: SearchQuery,
        scope: CancellationScope,
        sink: ResultSink[SearchResult],
    ) -> PageOutcome:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        if scope.dying:
            logger.debug("Skipping page {} of '{}': search is shutting down", page, query.query)
            return PageOutcome(page=page, status="skipped")

        logger.debug("Search '{}': fetching page {}", query.query, page)
        url = self.transport.build_url(query, page)
        try:
            batch = await self.transport.fetch_page(url)
        except EolError as e:
            return PageOutcome(page=page, status="failed", error=e.with_context(page=page, url=url))

        for item in batch.items:
            await sink.put(item)
        return PageOutcome(page=page, status="succeeded", batch=batch)
