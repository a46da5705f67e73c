"""URL parsing and assembly used by the request builder."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence
from urllib.parse import quote

import httpx

from .exceptions import InvalidURLError


logger = logging.getLogger(__name__)

# RFC 3986 pchar minus "%", plus "/" which stays a separator inside a segment.
_SEGMENT_SAFE = "/!$&'()*+,;=:@"


def parse_base_url(raw: str | httpx.URL | None) -> httpx.URL:
    """Parse an absolute URL.

    A URL is usable when httpx accepts it, it carries both a scheme and a
    host, and it contains no NUL byte. Anything else raises
    :class:`InvalidURLError`, with the httpx error as ``cause`` when httpx
    rejected it.
    """
    if raw is None:
        raise InvalidURLError(None)
    if isinstance(raw, str) and "\x00" in raw:
        raise InvalidURLError(raw)
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURLError(str(raw), cause=exc) from exc
    if not url.scheme or not url.host:
        raise InvalidURLError(str(raw))
    return url


def encode_path_segment(segment: str) -> str:
    """Percent-encode a segment for use in a URL path.

    ``/`` is kept as a separator. ``.`` and ``..`` pieces are encoded so they
    are not resolved as dot segments.
    """
    pieces = []
    for piece in quote(segment, safe=_SEGMENT_SAFE).split("/"):
        if piece in (".", ".."):
            piece = "%2E" * len(piece)
        pieces.append(piece)
    return "/".join(pieces)


def append_path_segments(url: httpx.URL, segments: Iterable[str]) -> httpx.URL:
    """Append each segment to the URL path with a single ``/`` separator."""
    path = url.raw_path.decode("ascii").partition("?")[0]
    changed = False
    for segment in segments:
        if not path.endswith("/"):
            path += "/"
        path += encode_path_segment(segment.lstrip("/"))
        changed = True
    if not changed:
        return url
    return url.copy_with(path=path)


def replace_query(url: httpx.URL, params: Sequence[tuple[str, str]]) -> httpx.URL:
    """Replace the query string with ``params``, keeping order and duplicates.

    Falls back to ``url`` unchanged if the query cannot be built.
    """
    if not params:
        return url
    try:
        return url.copy_with(params=httpx.QueryParams(list(params)))
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        logger.debug("Query construction failed for %s, keeping URL without query: %s", url, exc)
        return url
