"""
Type Converters
===============

Convert between wire dicts and Pydantic models.

Handles:
- Inbound coercion of OpenAI/Anthropic messages and tools (dict → Pydantic)
- Outbound dumps of translated models (Pydantic → dict)

Inbound values that are already models pass through untouched. Dicts that
fail model validation surface as ``ValidationError`` carrying the raw dict.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from chuk_agency.core import (
    AnthropicMessage,
    AnthropicTool,
    ErrorKind,
    OpenAIMessage,
    OpenAITool,
    Provider,
    TranslationOptions,
    create_error,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

# ================================================================
# Inbound Converters (dict → Pydantic)
# ================================================================


def _coerce(
    model_cls: type[ModelT], value: Any, provider: Provider, label: str
) -> ModelT:
    if isinstance(value, model_cls):
        return value

    try:
        return model_cls.model_validate(value)
    except PydanticValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or label}: {err['msg']}"
            for err in e.errors()
        )
        raise create_error(
            ErrorKind.VALIDATION, f"Invalid {label}: {errors}", provider, value
        ) from e


def convert_openai_message(
    msg: OpenAIMessage | dict[str, Any], provider: Provider = Provider.ANTHROPIC
) -> OpenAIMessage:
    """
    Convert a Chat Completions message dict to ``OpenAIMessage``.

    Args:
        msg: Message dict with 'role', 'content', optional 'tool_calls', etc.
        provider: Provider being produced, recorded on validation errors

    Returns:
        Validated OpenAIMessage
    """
    return _coerce(OpenAIMessage, msg, provider, "OpenAI message")


def convert_anthropic_message(
    msg: AnthropicMessage | dict[str, Any], provider: Provider = Provider.OPENAI
) -> AnthropicMessage:
    """
    Convert a Messages API message dict to ``AnthropicMessage``.

    String content is normalized to a single text block.
    """
    return _coerce(AnthropicMessage, msg, provider, "Anthropic message")


def convert_openai_tool(
    tool: OpenAITool | dict[str, Any], provider: Provider = Provider.ANTHROPIC
) -> OpenAITool:
    return _coerce(OpenAITool, tool, provider, "OpenAI tool")


def convert_anthropic_tool(
    tool: AnthropicTool | dict[str, Any], provider: Provider = Provider.OPENAI
) -> AnthropicTool:
    return _coerce(AnthropicTool, tool, provider, "Anthropic tool")


def convert_translation_options(
    options: TranslationOptions | dict[str, Any], provider: Provider = Provider.ANTHROPIC
) -> TranslationOptions:
    return _coerce(TranslationOptions, options, provider, "translation options")


# ================================================================
# Outbound Converters (Pydantic → dict)
# ================================================================


def model_to_dict(model: BaseModel) -> dict[str, Any]:
    """Dump a model to a wire-ready dict, dropping unset optional fields."""
    return model.model_dump(mode="json", exclude_none=True)


def messages_to_dicts(messages: Iterable[BaseModel]) -> list[dict[str, Any]]:
    """Dump translated messages (either schema) to wire-ready dicts."""
    return [model_to_dict(msg) for msg in messages]


def tools_to_dicts(tools: Iterable[BaseModel]) -> list[dict[str, Any]]:
    """Dump translated tool definitions (either schema) to wire-ready dicts."""
    return [model_to_dict(tool) for tool in tools]
