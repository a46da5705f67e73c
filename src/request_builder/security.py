"""Header redaction for logs and request reprs."""

from __future__ import annotations

from typing import Mapping


REDACTED = "[REDACTED]"

# Compared against lower-cased header names.
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization", "x-api-key"})


def is_sensitive_header(name: str) -> bool:
    return name.lower() in SENSITIVE_HEADERS


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy ``headers`` with credential-bearing values replaced by ``REDACTED``."""
    return {name: REDACTED if is_sensitive_header(name) else value for name, value in headers.items()}
