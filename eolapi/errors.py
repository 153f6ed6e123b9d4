"""Error kinds raised by the EOL API client."""

from __future__ import annotations


class EolError(Exception):
    """Base error for every failure surfaced by the client.

    Carries the request context (page number, URL, HTTP status) when known so
    the final error of a multi-page search identifies which request failed.
    """

    kind = "eol"

    def __init__(
        self,
        message: str,
        *,
        page: int | None = None,
        url: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.page = page
        self.url = url
        self.status_code = status_code

    def with_context(self, *, page: int | None = None, url: str | None = None) -> "EolError":
        """Return a copy of the same kind with page/URL context attached."""
        wrapped = type(self)(
            self.message,
            page=page if page is not None else self.page,
            url=url or self.url,
            status_code=self.status_code,
        )
        wrapped.__cause__ = self
        return wrapped

    def __str__(self) -> str:
        context: list[str] = []
        if self.page is not None:
            context.append(f"page {self.page}")
        if self.status_code is not None:
            context.append(f"StatusCode: {self.status_code}")
        if self.url:
            context.append(f"URL: {self.url}")
        if not context:
            return self.message
        return f"{self.message} ({'; '.join(context)})"


class ValidationError(EolError):
    """Raised for bad input, before any request is made."""

    kind = "validation"


class NotFoundError(EolError):
    """Raised when the remote API answers 404."""

    kind = "not_found"


class TransportError(EolError):
    """Raised on connection failures and non-2xx responses other than 404."""

    kind = "transport"


class DecodeError(EolError):
    """Raised when a response body cannot be decoded into the expected shape."""

    kind = "decode"
