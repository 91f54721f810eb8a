# tests/conftest.py
"""
Shared test configuration for chuk-agency.
Provides message/tool fixtures in both formats and an isolated config.
"""

import pytest

from chuk_agency.config import reset_config

# ---------------------------------------------------------------------------
# Configuration isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Run every test without user config files or env overrides."""
    for name in (
        "CHUK_AGENCY_CONFIG",
        "CHUK_AGENCY_STRICT",
        "CHUK_AGENCY_PRESERVE_IDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


# ---------------------------------------------------------------------------
# OpenAI fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def openai_simple_messages():
    return [
        {"role": "user", "content": "Hello, how are you?"},
        {"role": "assistant", "content": "I'm doing well, thank you for asking!"},
    ]


@pytest.fixture
def openai_tool_call_messages():
    return [
        {"role": "user", "content": "Read the file README.md"},
        {
            "role": "assistant",
            "content": "I'll read the README.md file for you.",
            "tool_calls": [
                {
                    "id": "call_abc123",
                    "type": "function",
                    "function": {
                        "name": "read_file",
                        "arguments": '{"path":"README.md"}',
                    },
                }
            ],
        },
    ]


@pytest.fixture
def openai_tool_result_messages(openai_tool_call_messages):
    return openai_tool_call_messages + [
        {
            "role": "tool",
            "tool_call_id": "call_abc123",
            "content": "# Project\n\nThis is a sample README file.",
        }
    ]


@pytest.fixture
def openai_tools():
    return [
        {
            "type": "function",
            "function": {
                "name": "read_file",
                "description": "Read a file from the filesystem",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string", "description": "File path to read"},
                    },
                    "required": ["path"],
                },
                "strict": True,
            },
        }
    ]


# ---------------------------------------------------------------------------
# Anthropic fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def anthropic_simple_messages():
    return [
        {"role": "user", "content": [{"type": "text", "text": "Hello, how are you?"}]},
        {
            "role": "assistant",
            "content": [{"type": "text", "text": "I'm doing well, thank you for asking!"}],
        },
    ]


@pytest.fixture
def anthropic_tool_use_messages():
    return [
        {"role": "user", "content": [{"type": "text", "text": "Read the file README.md"}]},
        {
            "role": "assistant",
            "content": [
                {"type": "text", "text": "I'll read the README.md file for you."},
                {
                    "type": "tool_use",
                    "id": "toolu_abc123",
                    "name": "read_file",
                    "input": {"path": "README.md"},
                },
            ],
        },
    ]


@pytest.fixture
def anthropic_tool_result_messages(anthropic_tool_use_messages):
    return anthropic_tool_use_messages + [
        {
            "role": "user",
            "content": [
                {
                    "type": "tool_result",
                    "tool_use_id": "toolu_abc123",
                    "content": "# Project\n\nThis is a sample README file.",
                }
            ],
        }
    ]


@pytest.fixture
def anthropic_tools():
    return [
        {
            "name": "read_file",
            "description": "Read a file from the filesystem",
            "input_schema": {
                "type": "object",
                "properties": {
                    "path": {"type": "string", "description": "File path to read"},
                },
                "required": ["path"],
            },
        }
    ]
