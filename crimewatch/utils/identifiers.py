"""Opaque identifier helpers shared by every stored resource."""

from __future__ import annotations

import uuid
from typing import Any


def new_identifier() -> str:
    """Return a fresh opaque identifier."""

    return str(uuid.uuid4())


def is_valid_identifier(value: Any) -> bool:
    """Return ``True`` when ``value`` is a well-formed identifier string."""

    if not isinstance(value, str) or not value:
        return False
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    return str(parsed) == value.lower()


__all__ = ["new_identifier", "is_valid_identifier"]
