"""Exceptions raised while loading, validating and resolving business IDs."""

from __future__ import annotations

from typing import Any


class YtjError(Exception):
    """Base exception for all ytjfetch errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InputError(YtjError):
    """Input source is missing or contains no usable identifiers."""


class FormatError(YtjError):
    """Identifier does not have the ``NNNNNNN-N`` shape."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Ungültiges Y-Tunnus-Format: {identifier!r}")
        self.identifier = identifier


class ClientError(YtjError):
    """HTTP or network failure that is not retried."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RetryExhaustedError(YtjError):
    """Registry kept answering HTTP 429 until the attempt budget was used up."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"Rate-Limit (HTTP 429) nach {attempts} Versuchen weiterhin aktiv")
        self.attempts = attempts


class ParseError(YtjError):
    """Response body is not a JSON object."""


class NotFoundOrAmbiguousError(YtjError):
    """Lookup did not return exactly one company."""

    def __init__(self, identifier: str, total: int | None) -> None:
        if not total:
            message = f"Kein Unternehmen gefunden für {identifier}"
        else:
            message = f"Mehrdeutiges Ergebnis für {identifier}: {total} Treffer"
        super().__init__(message)
        self.identifier = identifier
        self.total = total


LookupFailure = (
    FormatError,
    ClientError,
    RetryExhaustedError,
    ParseError,
    NotFoundOrAmbiguousError,
)

__all__ = [
    "ClientError",
    "FormatError",
    "InputError",
    "LookupFailure",
    "NotFoundOrAmbiguousError",
    "ParseError",
    "RetryExhaustedError",
    "YtjError",
]
