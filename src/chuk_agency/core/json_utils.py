"""
Fast JSON Utilities
===================

Uses the fastest available JSON library:
1. orjson (Rust-based, fastest)
2. ujson (C-based, fast)
3. stdlib json (fallback)

All backends emit compact output with no ASCII or slash escaping, so a
serialized tool call reads the same regardless of which library is installed.
"""

import json as _stdlib_json
from typing import Any

# Try to import fast JSON libraries
_json_lib = "stdlib"

try:
    import orjson

    _json_lib = "orjson"
    _orjson_available = True
except ImportError:
    _orjson_available = False

try:
    import ujson  # type: ignore[import-untyped]

    _ujson_available = True
    if _json_lib == "stdlib":
        _json_lib = "ujson"
except ImportError:
    _ujson_available = False


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serialize object to JSON string using fastest available library.

    Args:
        obj: Object to serialize
        **kwargs: ``indent`` and ``sort_keys`` are honoured by every backend

    Returns:
        JSON string

    Raises:
        TypeError, ValueError or OverflowError depending on the backend when
        the object cannot be encoded (cycles, unsupported types).
    """
    if _orjson_available:
        # orjson returns bytes, convert to str
        option = 0
        if kwargs.get("indent"):
            option |= orjson.OPT_INDENT_2
        if kwargs.get("sort_keys"):
            option |= orjson.OPT_SORT_KEYS
        return orjson.dumps(obj, option=option).decode("utf-8")

    elif _ujson_available:
        kwargs.setdefault("ensure_ascii", False)
        kwargs.setdefault("escape_forward_slashes", False)
        return ujson.dumps(obj, **kwargs)

    else:
        kwargs.setdefault("ensure_ascii", False)
        if not kwargs.get("indent"):
            kwargs.setdefault("separators", (",", ":"))
        return _stdlib_json.dumps(obj, **kwargs)


def loads(s: str | bytes) -> Any:
    """
    Deserialize JSON string to Python object using fastest available library.

    Args:
        s: JSON string or bytes

    Returns:
        Deserialized Python object

    Raises:
        ValueError: on malformed input (every backend's decode error
            subclasses it)
    """
    if _orjson_available:
        if isinstance(s, str):
            s = s.encode("utf-8")
        return orjson.loads(s)

    elif _ujson_available:
        return ujson.loads(s)

    else:
        if isinstance(s, bytes):
            s = s.decode("utf-8")
        return _stdlib_json.loads(s)


def get_json_library() -> str:
    """
    Get the name of the JSON library being used.

    Returns:
        "orjson", "ujson", or "stdlib"
    """
    return _json_lib
