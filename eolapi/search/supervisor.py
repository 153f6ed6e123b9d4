"""Fan-out/fan-in supervision of a paginated search."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from eolapi.search.models import SearchQuery, SearchResult
from eolapi.search.scope import CancellationScope
from eolapi.search.sink import DEFAULT_SINK_CAPACITY, ResultSink
from eolapi.search.worker import PageOutcome, PageWorker

if TYPE_CHECKING:
    from eolapi.search.transport import SearchTransport


@dataclass(slots=True)
class FetchRun:
    """Handle on one running search: the live sink plus its outcome."""

    query: SearchQuery
    sink: ResultSink[SearchResult]
    scope: CancellationScope
    task: asyncio.Task[None] | None = None
    outcomes: list[PageOutcome] = field(default_factory=list)

    async def wait(self) -> BaseException | None:
        """Wait for the supervisor to finish; return the recorded error, if any."""
        if self.task is not None:
            await self.task
        return self.scope.error

    async def cancel(self) -> None:
        """Stop the supervisor and every page task, and wait until they are gone."""
        if self.task is None:
            return
        self.task.cancel()
        await asyncio.gather(self.task, return_exceptions=True)


class FetchSupervisor:
    """
    Turns one search into page fetches.

    Page 1 is fetched on its own first. Its totals decide how many pages
    exist, then every remaining page gets its own task. The first failure
    stops pages that have not started yet; pages already in flight finish
    and still deliver their items. The sink is closed once every worker has
    returned.
    """

    def __init__(
        self,
        transport: "SearchTransport",
        *,
        sink_capacity: int = DEFAULT_SINK_CAPACITY,
        worker: PageWorker | None = None,
    ):
        self.transport = transport
        self.sink_capacity = sink_capacity
        self.worker = worker or PageWorker(transport)

    def start(self, query: SearchQuery) -> FetchRun:
        """Schedule the search and return immediately with the live sink."""
        scope = CancellationScope()
        sink: ResultSink[SearchResult] = ResultSink(self.sink_capacity)
        run = FetchRun(query=query, sink=sink, scope=scope)
        run.task = asyncio.create_task(self._supervise(run))
        return run

    async def _supervise(self, run: FetchRun) -> None:
        query, scope = run.query, run.scope
        tasks: list[asyncio.Task[PageOutcome]] = []  # strong refs until the barrier releases
        try:
            scope.add()
            first = await self._run_page(1, run)
            if first.batch is None:
                return

            page_count = first.batch.page_count()
            logger.info(
                "Search '{}': {} results over {} pages",
                query.query,
                int(first.batch.total_results),
                page_count,
            )

            # no await between launches: workers check the dying flag before fetching
            for page in range(2, page_count + 1):
                scope.add()
                tasks.append(asyncio.create_task(self._run_page(page, run)))

            await scope.wait()
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        finally:
            await run.sink.close()

    async def _run_page(self, page: int, run: FetchRun) -> PageOutcome:
        try:
            try:
                outcome = await self.worker.fetch(page, run.query, run.scope, run.sink)
            except Exception as e:
                outcome = PageOutcome(page=page, status="failed", error=e)

            run.outcomes.append(outcome)
            if outcome.status == "failed" and outcome.error is not None:
                logger.warning("Search '{}': page {} failed: {}", run.query.query, page, outcome.error)
                run.scope.fail(outcome.error)
            return outcome
        finally:
            run.scope.done()
