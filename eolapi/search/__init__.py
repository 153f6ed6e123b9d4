"""Concurrent paginated search over the EOL search endpoint."""

from eolapi.search.aggregator import Aggregator
from eolapi.search.models import PageBatch, SearchQuery, SearchResult
from eolapi.search.scope import CancellationScope
from eolapi.search.sink import DEFAULT_SINK_CAPACITY, ResultSink, SinkClosedError
from eolapi.search.supervisor import FetchRun, FetchSupervisor
from eolapi.search.transport import SearchTransport
from eolapi.search.worker import PageOutcome, PageWorker

__all__ = [
    "Aggregator",
    "CancellationScope",
    "DEFAULT_SINK_CAPACITY",
    "FetchRun",
    "FetchSupervisor",
    "PageBatch",
    "PageOutcome",
    "PageWorker",
    "ResultSink",
    "SearchQuery",
    "SearchResult",
    "SearchTransport",
    "SinkClosedError",
]
