"""Values exchanged by the paginated search."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """One logical search against the EOL search endpoint."""

    query: str
    # Only match taxon pages whose title, synonym or common name equals the term.
    exact: bool = False
    # Restrict the number of results the API returns (0 = API default).
    limit: int = 0
    # Restrict results to members of this EOL page ID taxonomic group.
    filter_by_taxon_concept_id: int = 0
    # Restrict results to members of this hierarchy entry's taxonomic group.
    filter_by_hierarchy_entry_id: int = 0
    # Exact-search this string and use the matching page as the taxonomic filter.
    filter_by_string: str = ""
    # Seconds the API should cache the response for.
    cache_ttl: int = 0


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Single search hit."""

    id: int
    title: str
    link: str
    content: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchResult":
        if not isinstance(data, dict):
            raise ValueError("search result must be an object")
        return cls(
            id=int(data.get("id", 0) or 0),
            title=str(data.get("title") or ""),
            link=str(data.get("link") or ""),
            content=str(data.get("content") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "link": self.link,
            "content": self.content,
        }


def _number(data: dict[str, Any], key: str) -> float:
    value = data.get(key, 0)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{key} must be a finite number")
    return number


@dataclass(frozen=True, slots=True)
class PageBatch:
    """Decoded payload of one search page."""

    items: tuple[SearchResult, ...] = field(default_factory=tuple)
    total_results: float = 0.0
    items_per_page: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageBatch":
        if not isinstance(data, dict):
            raise ValueError("search page must be an object")
        raw_results = data.get("results") or []
        if not isinstance(raw_results, list):
            raise ValueError("results must be an array")
        return cls(
            items=tuple(SearchResult.from_dict(item) for item in raw_results),
            total_results=_number(data, "totalResults"),
            items_per_page=_number(data, "itemsPerPage"),
        )

    def page_count(self) -> int:
        """Number of pages the whole result set spans, at least 1."""
        if self.items_per_page <= 0:
            return 1
        return max(1, math.ceil(self.total_results / self.items_per_page))
