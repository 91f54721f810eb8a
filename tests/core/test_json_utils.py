"""
Tests for chuk_agency.core.json_utils
=====================================

Test fast JSON utilities with all available backends.
"""

import json
from unittest.mock import patch

import pytest

import chuk_agency.core.json_utils as json_utils

# =============================================================================
# Test Data
# =============================================================================

TEST_DATA = {
    "string": "hello",
    "number": 42,
    "boolean": True,
    "null": None,
    "array": [1, 2, 3],
    "nested": {"key": "value", "count": 10},
}

TEST_JSON_STR = '{"string":"hello","number":42,"boolean":true,"null":null,"array":[1,2,3],"nested":{"key":"value","count":10}}'


def test_get_json_library():
    """Test getting the active JSON library name"""
    assert json_utils.get_json_library() in ["orjson", "ujson", "stdlib"]


# =============================================================================
# dumps() Tests
# =============================================================================


def test_dumps_is_compact():
    """Tool call arguments must serialize without whitespace"""
    assert json_utils.dumps({"path": "README.md"}) == '{"path":"README.md"}'
    assert json_utils.dumps(TEST_DATA) == TEST_JSON_STR


def test_dumps_with_indent():
    """Test JSON serialization with indentation"""
    result = json_utils.dumps(TEST_DATA, indent=2)
    assert "\n" in result
    assert json.loads(result) == TEST_DATA


def test_dumps_keeps_unicode():
    """Non-ASCII text is not escaped"""
    assert json_utils.dumps({"greeting": "你好"}) == '{"greeting":"你好"}'


def test_dumps_stdlib_fallback_is_compact():
    """Stdlib fallback matches the fast backends' output"""
    with patch.object(json_utils, "_orjson_available", False), patch.object(
        json_utils, "_ujson_available", False
    ):
        assert json_utils.dumps({"a": [1, 2], "b": "é"}) == '{"a":[1,2],"b":"é"}'


def test_dumps_does_not_escape_slashes():
    assert json_utils.dumps({"path": "src/app.py"}) == '{"path":"src/app.py"}'


def test_dumps_ujson_backend_matches():
    """ujson output matches orjson: compact, no slash or unicode escaping"""
    ujson = pytest.importorskip("ujson")
    with patch.object(json_utils, "_orjson_available", False), patch.object(
        json_utils, "_ujson_available", True
    ), patch.object(json_utils, "ujson", ujson, create=True):
        assert json_utils.dumps({"path": "a/b", "b": "é"}) == '{"path":"a/b","b":"é"}'


def test_dumps_circular_reference_raises():
    data: dict = {"key": "value"}
    data["self"] = data
    with pytest.raises((TypeError, ValueError, OverflowError, RecursionError)):
        json_utils.dumps(data)


# =============================================================================
# loads() Tests
# =============================================================================


def test_loads_from_string():
    assert json_utils.loads(TEST_JSON_STR) == TEST_DATA


def test_loads_from_bytes():
    assert json_utils.loads(TEST_JSON_STR.encode("utf-8")) == TEST_DATA


def test_loads_stdlib_fallback_from_bytes():
    with patch.object(json_utils, "_orjson_available", False), patch.object(
        json_utils, "_ujson_available", False
    ):
        assert json_utils.loads(b'{"test": "data"}') == {"test": "data"}


def test_loads_invalid_json_raises_value_error():
    """Every backend's decode error subclasses ValueError"""
    with pytest.raises(ValueError):
        json_utils.loads("{invalid json}")
