"""Business ID (Y-Tunnus) format check."""

from __future__ import annotations

import re

from .errors import FormatError

_BUSINESS_ID_PATTERN = re.compile(r"[0-9]{7}-[0-9]")


def is_valid(identifier: str) -> bool:
    return _BUSINESS_ID_PATTERN.fullmatch(identifier) is not None


def validate(identifier: str) -> str:
    """Return *identifier* unchanged or raise :class:`FormatError`.

    The value is not trimmed; surrounding whitespace counts as malformed.
    """

    if not isinstance(identifier, str) or not is_valid(identifier):
        raise FormatError(str(identifier))
    return identifier


__all__ = ["is_valid", "validate"]
