"""Exceptions raised by genome location operations."""

from __future__ import annotations


class GenomeLocError(Exception):
    """Base class for all genomeloc errors."""


class InvalidArgumentError(GenomeLocError, ValueError):
    """An operand violates the precondition of an operation."""


class NullArgumentError(GenomeLocError, ValueError):
    """A required genome location was None."""


def validate_arg(condition: bool, message: str) -> None:
    """Raise InvalidArgumentError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise InvalidArgumentError(message)


def non_null(value: object, name: str = "loc") -> None:
    """Raise NullArgumentError if ``value`` is None."""
    if value is None:
        raise NullArgumentError(f"{name} must not be None")
