"""Exception hierarchy for chuk-mcp-harmony."""

from __future__ import annotations

from typing import Any


class HarmonyError(Exception):
    """Base exception for all harmony errors."""


class NotFoundError(HarmonyError, LookupError):
    """A catalog lookup matched no record.

    ``value`` is the name, short name or distance that failed, so a broken
    chord table can be traced back to the entry that produced it.
    """

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"No interval found for {value!r}")


class InvalidChordError(HarmonyError, ValueError):
    """A chord description uses a value outside the defined tags.

    Subclasses ValueError so callers validating user input with
    ``except ValueError`` keep working.
    """

    def __init__(self, field: str, value: Any, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid chord {field}: {value!r}")
