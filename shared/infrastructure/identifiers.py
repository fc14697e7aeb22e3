"""Identifier parsing for values taken from URLs and request bodies."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from shared.domain.errors import InvalidIdentifier


def parse_identifier(value: Any, label: str = "resource") -> UUID:
    """Return ``value`` as a UUID or raise InvalidIdentifier.

    Runs before any store lookup so malformed ids never reach a query.
    """

    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise InvalidIdentifier(f"Invalid {label} ID format") from None
