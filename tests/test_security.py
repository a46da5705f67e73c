from __future__ import annotations

from request_builder import sanitize_headers


def test_sanitize_headers_redacts_case_insensitively() -> None:
    headers = {"authorization": "Bearer t", "X-API-Key": "k", "Cookie": "s=1", "Accept": "*/*"}

    assert sanitize_headers(headers) == {
        "authorization": "[REDACTED]",
        "X-API-Key": "[REDACTED]",
        "Cookie": "[REDACTED]",
        "Accept": "*/*",
    }


def test_sanitize_headers_returns_a_copy() -> None:
    headers = {"Accept": "*/*"}
    sanitized = sanitize_headers(headers)
    sanitized["Accept"] = "text/html"

    assert headers == {"Accept": "*/*"}
