"""SDK-specific exceptions."""

from __future__ import annotations

from typing import Any


class RestClientError(Exception):
    """Base exception for all REST client failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        if self.status_code is None:
            return str(self.args[0])
        return f"{self.status_code}: {self.args[0]}"


class RestValidationError(RestClientError):
    """Raised when the client or a request is configured incorrectly."""


class RestHTTPError(RestClientError):
    """Raised for responses with a status outside [200, 400).

    The raw response is kept untouched on ``response``; its body is never
    read, so callers decide how to interpret error payloads.
    """

    def __init__(self, response: Any, *, message: str | None = None) -> None:
        status_code = getattr(response, "status", None)
        super().__init__(
            message or "request failed",
            status_code=status_code,
            response=response,
        )

    @property
    def status(self) -> int | None:
        return self.status_code
