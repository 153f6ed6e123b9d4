"""Taxon page lookup: exactly one request per page id."""

import httpx
from loguru import logger

from eolapi.errors import DecodeError, ValidationError
from eolapi.http import DEFAULT_TIMEOUT, get_json
from eolapi.pages.models import PageDetail, PageQuery
from eolapi.search.transport import DEFAULT_BASE_URL


def _flag(value: bool) -> str:
    return "true" if value else "false"


def page_url(query: PageQuery, base_url: str = DEFAULT_BASE_URL) -> str:
    """Request URL for a taxon page lookup."""
    params: dict[str, str | int] = {
        "images": query.images,
        "videos": query.videos,
        "sounds": query.sounds,
        "maps": query.maps,
        "text": query.text,
        "iucn": _flag(query.iucn),
    }
    if query.subjects:
        params["subjects"] = query.subjects
    if query.licenses:
        params["licenses"] = query.licenses
    if query.common_names:
        params["common_names"] = "true"
    if query.details:
        params["details"] = "true"
    if query.synonyms:
        params["synonyms"] = "true"
    if query.references:
        params["references"] = "true"
    if query.vetted > 0:
        params["vetted"] = query.vetted
    if query.cache_ttl > 0:
        params["cache_ttl"] = query.cache_ttl

    base = (base_url or DEFAULT_BASE_URL).rstrip("/")
    return str(httpx.URL(f"{base}/pages/1.0/{query.id}.json", params=params))


async def fetch_page_detail(
    query: PageQuery,
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> PageDetail:
    """Fetch and decode one taxon page."""
    if query.id <= 0:
        raise ValidationError("a page id is required")

    url = page_url(query, base_url)
    logger.info("Fetching EOL page {}", query.id)
    payload = await get_json(url, timeout=timeout, user_agent=user_agent)
    try:
        return PageDetail.from_dict(payload)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"malformed taxon page: {e}", url=url) from e
