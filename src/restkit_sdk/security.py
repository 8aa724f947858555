"""Header redaction and base URL checks for the client and transports."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlparse


SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})
SENSITIVE_MARKERS = ("token", "secret", "api-key", "apikey", "password")
LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})
REDACTED = "[REDACTED]"


def _is_sensitive(name: str) -> bool:
    lowered = name.lower()
    return lowered in SENSITIVE_HEADERS or any(marker in lowered for marker in SENSITIVE_MARKERS)


def _redact(name: str, value: str) -> str:
    # "Bearer abc" -> "Bearer [REDACTED]"
    if name.lower().endswith("authorization") and " " in value:
        scheme, _ = value.split(" ", 1)
        return f"{scheme} {REDACTED}"
    return REDACTED


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of request headers that is safe to log.

    Credentials set through ``RestClient.defaults.headers`` or per-request
    options are masked; ``Authorization`` keeps its scheme, e.g.
    ``Bearer [REDACTED]``.
    """
    return {
        name: _redact(name, str(value)) if _is_sensitive(name) else value
        for name, value in headers.items()
    }


def validate_base_url(url: str, *, allow_http: bool = False) -> str:
    """Check a transport base URL and return it without a trailing slash.

    Resource paths are joined onto the base URL, so it may not carry a query
    string, a fragment or embedded credentials.
    """
    if "\x00" in url:
        raise ValueError("Invalid base_url")
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"base_url must be an absolute http(s) URL, got {url!r}")
    if parsed.query or parsed.fragment:
        raise ValueError("base_url must not contain a query string or fragment")
    if parsed.username or parsed.password:
        raise ValueError("base_url must not embed credentials; use defaults.headers instead")
    if parsed.scheme == "http" and not allow_http and (parsed.hostname or "").lower() not in LOOPBACK_HOSTS:
        raise ValueError("Non-HTTPS base_url is not allowed without allow_http=True")
    return url.rstrip("/")
