"""Fluent builder that assembles a :class:`FinishedRequest` piece by piece.

A builder is meant for one call site at a time. Concurrent use of a single
instance from several threads is undefined unless the caller synchronizes it.
"""

from __future__ import annotations

import logging
import os
import uuid
from typing import Any, Iterable, Mapping

import httpx
from pydantic import ConfigDict, TypeAdapter
from pydantic_core import PydanticSerializationError, from_json

from .exceptions import InvalidURLError
from .request import FinishedRequest, HTTPMethod
from .security import sanitize_headers
from .urls import append_path_segments, parse_base_url, replace_query


logger = logging.getLogger(__name__)

# NaN and infinities are not JSON: they are dumped as bare constants and
# rejected by the strict re-parse in _encode_json.
_json_adapter: TypeAdapter[Any] = TypeAdapter(Any, config=ConfigDict(ser_json_inf_nan="constants"))


def _encode_json(payload: Any) -> bytes | None:
    try:
        encoded = _json_adapter.dump_json(payload)
        from_json(encoded, allow_inf_nan=False)
        return encoded
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        logger.debug("JSON body encoding failed for %s: %s", type(payload).__name__, exc)
        return None


class RequestBuilder:
    default_timeout = 30.0
    default_method = HTTPMethod.GET
    json_content_type = "application/json"

    def __init__(self) -> None:
        self._raw_base_url: str | None = None
        self._base_url: httpx.URL | None = None
        self._base_url_error: InvalidURLError | None = None
        self._path_segments: list[str] = []
        self._method = self.default_method
        self._headers: dict[str, str] = {}
        self._query_params: list[tuple[str, str]] = []
        self._body: bytes | None = None
        self._timeout = self.default_timeout
        self._boundary = f"Boundary-{uuid.uuid4()}"

    @classmethod
    def from_env(
        cls,
        *,
        base_url_env_var: str = "REQUEST_BUILDER_BASE_URL",
        timeout_env_var: str = "REQUEST_BUILDER_TIMEOUT",
    ) -> "RequestBuilder":
        """Create a builder seeded with a base URL and timeout from the environment."""
        builder = cls()
        base_url = os.getenv(base_url_env_var)
        if base_url:
            builder.set_base_url(base_url)
        raw_timeout = os.getenv(timeout_env_var)
        if raw_timeout:
            try:
                builder.set_timeout(float(raw_timeout))
            except ValueError:
                logger.debug("Ignoring non-numeric %s=%r", timeout_env_var, raw_timeout)
        return builder

    @property
    def boundary(self) -> str:
        return self._boundary

    # URL / path

    def set_base_url(self, url: str) -> "RequestBuilder":
        self._raw_base_url = url
        try:
            self._base_url = parse_base_url(url)
            self._base_url_error = None
        except InvalidURLError as exc:
            logger.debug("Base URL %r is not usable: %s", url, exc)
            self._base_url = None
            self._base_url_error = exc
        return self

    def set_full_url(self, url: str) -> "RequestBuilder":
        """Use an already complete URL; stored exactly like a base URL."""
        return self.set_base_url(url)

    def add_path(self, segment: str) -> "RequestBuilder":
        self._path_segments.append(segment)
        return self

    def add_path_segments(self, segments: Iterable[str]) -> "RequestBuilder":
        self._path_segments.extend(segments)
        return self

    # Method, headers, timeout

    def set_method(self, method: HTTPMethod | str) -> "RequestBuilder":
        self._method = HTTPMethod.coerce(method)
        return self

    def add_header(self, name: str, value: str) -> "RequestBuilder":
        self._headers[name] = value
        return self

    def set_headers(self, headers: Mapping[str, str]) -> "RequestBuilder":
        self._headers = dict(headers)
        return self

    def set_timeout(self, seconds: float) -> "RequestBuilder":
        self._timeout = seconds
        return self

    # Query

    def add_query_parameter(self, name: str, value: str | None) -> "RequestBuilder":
        if value is None:
            return self
        self._query_params.append((name, value))
        return self

    def add_query_parameters(self, params: Mapping[str, str | None]) -> "RequestBuilder":
        for name, value in params.items():
            self.add_query_parameter(name, value)
        return self

    # Body

    def set_body(self, data: bytes | None) -> "RequestBuilder":
        self._body = data
        return self

    def set_json_body(self, payload: Any) -> "RequestBuilder":
        """Encode ``payload`` as JSON and mark the request as ``application/json``.

        Payloads that cannot be encoded leave the body and headers untouched.
        """
        encoded = _encode_json(payload)
        if encoded is not None:
            self._body = encoded
            self.add_header("Content-Type", self.json_content_type)
        return self

    # Build

    def build(self) -> FinishedRequest:
        if self._base_url is None:
            cause = self._base_url_error.cause if self._base_url_error is not None else None
            raise InvalidURLError(self._raw_base_url, cause=cause)

        url = append_path_segments(self._base_url, self._path_segments)
        url = replace_query(url, self._query_params)

        request = FinishedRequest(
            url=str(url),
            method=self._method,
            headers=self._headers,
            body=self._body,
            timeout=self._timeout,
        )
        logger.debug(
            "Built %s %s headers=%s",
            request.method.value,
            request.url,
            sanitize_headers(request.headers),
        )
        return request
