"""Request builder exceptions."""

from __future__ import annotations


class RequestBuilderError(Exception):
    """Base exception for all request builder failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidURLError(RequestBuilderError):
    """Raised by ``build`` when no valid base URL has been set."""

    def __init__(self, raw_url: str | None = None, *, cause: Exception | None = None) -> None:
        if raw_url is None:
            message = "Bad URL: no base URL was set"
        else:
            message = f"Bad URL: {raw_url!r}"
        super().__init__(message, cause=cause)
        self.raw_url = raw_url
