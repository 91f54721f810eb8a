"""
Translation helpers.

The JSON wrappers here are the only place native encode/decode exceptions
are caught; everything downstream treats (de)serialization as infallible.
"""

from __future__ import annotations

import uuid
from typing import Any

from .enums import ErrorKind, Provider
from .errors import create_error
from .json_utils import dumps, loads


def generate_id() -> str:
    """Generate a unique tool call id."""
    return f"call_{uuid.uuid4().hex[:24]}"


def safe_json_parse(text: str, provider: Provider | str) -> dict[str, Any]:
    """
    Parse a JSON string that must encode an object.

    Args:
        text: Raw JSON text (e.g. tool call arguments)
        provider: Provider whose format is being produced

    Returns:
        Parsed dict

    Raises:
        ValidationError: if the text is not valid JSON or not an object
    """
    try:
        parsed = loads(text)
    except (ValueError, TypeError) as e:
        raise create_error(
            ErrorKind.VALIDATION, f"Invalid JSON: {e}", provider, text
        ) from e

    if not is_valid_object(parsed):
        raise create_error(
            ErrorKind.VALIDATION, "Parsed JSON is not an object", provider, text
        )
    return parsed


def safe_json_stringify(obj: Any, provider: Provider | str) -> str:
    """
    Serialize a value to compact JSON.

    Raises:
        TransformError: if the value cannot be encoded (cycles, unsupported
            types, out-of-range integers)
    """
    try:
        return dumps(obj)
    except (TypeError, ValueError, OverflowError, RecursionError) as e:
        raise create_error(
            ErrorKind.TRANSFORM, f"JSON stringify failed: {e}", provider, obj
        ) from e


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def is_valid_object(value: Any) -> bool:
    """True for dict-like JSON objects (not None, not a list)."""
    return isinstance(value, dict)
