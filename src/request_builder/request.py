"""Immutable request value produced by :class:`RequestBuilder`."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

import httpx

from .security import sanitize_headers


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"

    @classmethod
    def coerce(cls, value: "HTTPMethod | str") -> "HTTPMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(f"Unsupported HTTP method {value!r}; expected one of {allowed}") from None


@dataclass(frozen=True)
class FinishedRequest:
    url: str
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float = 30.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __repr__(self) -> str:
        body = f"<{len(self.body)} bytes>" if self.body is not None else None
        return (
            f"FinishedRequest(url={self.url!r}, method={self.method.value!r}, "
            f"headers={sanitize_headers(self.headers)!r}, body={body}, timeout={self.timeout!r})"
        )

    def to_httpx(self) -> httpx.Request:
        """Convert into an ``httpx.Request`` ready for ``httpx.Client.send``."""
        return httpx.Request(
            self.method.value,
            self.url,
            headers=dict(self.headers),
            content=self.body,
            extensions={"timeout": httpx.Timeout(self.timeout).as_dict()},
        )
