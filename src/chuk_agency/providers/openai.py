"""
OpenAI Message Translation
==========================

OpenAI-named view of the translators in ``chuk_agency.providers.anthropic``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from chuk_agency.core import AnthropicMessage, AnthropicTool, OpenAIMessage, OpenAITool

from . import anthropic
from .anthropic import AnthropicMessageInput, OpenAIMessageInput, OptionsInput


def from_anthropic(
    messages: Sequence[AnthropicMessageInput],
    options: OptionsInput = None,
    system: str | None = None,
) -> list[OpenAIMessage]:
    """Convert Anthropic messages to OpenAI format."""
    return anthropic.to_openai(messages, options, system=system)


def to_anthropic(
    messages: Sequence[OpenAIMessageInput], options: OptionsInput = None
) -> list[AnthropicMessage]:
    """Convert OpenAI messages to Anthropic format."""
    return anthropic.from_openai(messages, options)


def tools_from_anthropic(
    tools: Sequence[AnthropicTool | dict[str, Any]],
) -> list[OpenAITool]:
    """Convert Anthropic tools to OpenAI format."""
    return anthropic.tools_to_openai(tools)


def tools_to_anthropic(tools: Sequence[OpenAITool | dict[str, Any]]) -> list[AnthropicTool]:
    """Convert OpenAI tools to Anthropic format."""
    return anthropic.tools_from_openai(tools)
