"""Single GET round trip against the EOL API."""

from typing import Any

import httpx
from loguru import logger

from eolapi.errors import DecodeError, NotFoundError, TransportError

DEFAULT_TIMEOUT = 30.0


async def get_json(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> Any:
    """GET ``url`` and return the decoded JSON body.

    Status 404 raises NotFoundError, any other non-2xx status or connection
    failure raises TransportError, and a body that is not JSON raises
    DecodeError.
    """
    headers = {"Accept": "application/json"}
    if user_agent:
        headers["User-Agent"] = user_agent

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(url, headers=headers, timeout=timeout)
    except httpx.HTTPError as e:
        raise TransportError(f"could not get http response: {e}", url=url) from e

    status = response.status_code
    logger.debug("GET {} -> {}", url, status)
    if status == 404:
        raise NotFoundError("resource not found", url=url, status_code=status)
    if not 200 <= status < 300:
        raise TransportError(
            f"unexpected response status {status}",
            url=url,
            status_code=status,
        )

    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"could not unmarshal http response: {e}", url=url) from e
