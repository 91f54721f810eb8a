"""
Translation Errors
==================

A single exception family for message translation failures.

- ``ValidationError``: input violates a structural precondition
- ``TransformError``: a valid value could not be re-encoded

Every error carries the provider whose format was being produced and the
offending raw value, so callers can log exactly what failed.
"""

from __future__ import annotations

from typing import Any

from .enums import ErrorKind, Provider


class AgencyError(Exception):
    """Base class for all translation errors."""

    kind: ErrorKind | None = None
    prefix = ""

    def __init__(self, message: str, provider: Provider | str, original_data: Any = None):
        self.detail = message
        self.provider = Provider(provider)
        self.original_data = original_data
        super().__init__(f"{self.prefix}{message}")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.detail!r}, provider={self.provider.value!r})"
        )


class ValidationError(AgencyError):
    """Malformed or structurally invalid input."""

    kind = ErrorKind.VALIDATION
    prefix = "Validation failed: "


class TransformError(AgencyError):
    """Failure while re-encoding already-valid data."""

    kind = ErrorKind.TRANSFORM
    prefix = "Transform failed: "


def create_error(
    kind: ErrorKind | str,
    message: str,
    provider: Provider | str,
    data: Any = None,
) -> AgencyError:
    """
    Build the error subclass matching ``kind``.

    Args:
        kind: "validation" or "transform"
        message: Human readable description
        provider: Provider whose format was being produced
        data: Offending raw value

    Returns:
        ValidationError or TransformError instance (not raised)
    """
    if ErrorKind(kind) == ErrorKind.VALIDATION:
        return ValidationError(message, provider, data)
    return TransformError(message, provider, data)
