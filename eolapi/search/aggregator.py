"""Top-level search entry point: drain the pages, then decide the outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from eolapi.errors import ValidationError
from eolapi.search.models import SearchQuery, SearchResult
from eolapi.search.sink import DEFAULT_SINK_CAPACITY
from eolapi.search.supervisor import FetchSupervisor

if TYPE_CHECKING:
    from eolapi.search.transport import SearchTransport


class Aggregator:
    """Collects every page of a search into one list, or fails as a whole."""

    def __init__(
        self,
        transport: "SearchTransport",
        *,
        sink_capacity: int = DEFAULT_SINK_CAPACITY,
        supervisor: FetchSupervisor | None = None,
    ):
        self.supervisor = supervisor or FetchSupervisor(transport, sink_capacity=sink_capacity)

    async def search(self, query: SearchQuery) -> list[SearchResult]:
        """
        Run ``query`` across all of its pages.

        Items of page 1 always come first, in order. Items of later pages
        follow in arrival order. If any page fails, the collected items are
        discarded and the first recorded error is raised.

        Raises:
            ValidationError: the query term is empty; no request is made.
            EolError: a page failed (NotFoundError, TransportError, DecodeError).
        """
        if not (query.query or "").strip():
            raise ValidationError("a query value is required for eol search")

        logger.info("Searching EOL for '{}'", query.query)
        run = self.supervisor.start(query)
        try:
            results = [item async for item in run.sink]
        except BaseException:
            await run.cancel()
            raise

        error = await run.wait()
        if error is not None:
            logger.warning(
                "Search '{}' failed, discarding {} collected results: {}",
                query.query,
                len(results),
                error,
            )
            raise error

        logger.info("Search '{}' finished with {} results", query.query, len(results))
        return results
