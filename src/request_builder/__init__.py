"""Fluent builder for outbound HTTP request descriptions."""

from __future__ import annotations

from .builder import RequestBuilder
from .exceptions import InvalidURLError, RequestBuilderError
from .request import FinishedRequest, HTTPMethod
from .security import sanitize_headers

__all__ = [
    "FinishedRequest",
    "HTTPMethod",
    "InvalidURLError",
    "RequestBuilder",
    "RequestBuilderError",
    "sanitize_headers",
]

__version__ = "0.1.0"
