"""
Anthropic Message Translation
=============================

Converts between OpenAI Chat Completions messages and Anthropic Messages API
content blocks.

OpenAI → Anthropic:
- ``system`` messages are lifted out (Anthropic takes them out-of-band)
- ``tool`` messages become ``tool_result`` blocks appended to the preceding
  assistant turn
- inline ``tool_calls`` become ``tool_use`` blocks

Anthropic → OpenAI:
- text blocks are concatenated into ``content``
- ``tool_use`` blocks become ``tool_calls``
- every ``tool_result`` block becomes its own ``tool`` message
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from typing_extensions import assert_never

from chuk_agency.compat import (
    convert_anthropic_message,
    convert_anthropic_tool,
    convert_openai_message,
    convert_openai_tool,
)
from chuk_agency.config import resolve_options
from chuk_agency.core import (
    AnthropicInputSchema,
    AnthropicMessage,
    AnthropicTool,
    ContentBlock,
    ErrorKind,
    MessageRole,
    OpenAIFunctionCall,
    OpenAIFunctionDefinition,
    OpenAIFunctionParameters,
    OpenAIMessage,
    OpenAITool,
    OpenAIToolCall,
    Provider,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    TranslationOptions,
    ValidationError,
    create_error,
    generate_id,
    safe_json_parse,
    safe_json_stringify,
)

logger = logging.getLogger(__name__)

OpenAIMessageInput = OpenAIMessage | dict[str, Any]
AnthropicMessageInput = AnthropicMessage | dict[str, Any]
OptionsInput = TranslationOptions | dict[str, Any] | None


# ================================================================
# OpenAI → Anthropic
# ================================================================


def from_openai_with_system(
    messages: Sequence[OpenAIMessageInput], options: OptionsInput = None
) -> tuple[list[AnthropicMessage], str | None]:
    """
    Convert OpenAI messages to Anthropic format, keeping the system prompt.

    Args:
        messages: OpenAI messages (dicts or ``OpenAIMessage``)
        options: Translation options (reserved)

    Returns:
        Tuple of (Anthropic messages, last system prompt or None)

    Raises:
        ValidationError: orphan tool result, message without content,
            or tool call arguments that are not a JSON object
    """
    resolve_options(options, Provider.ANTHROPIC)

    result: list[AnthropicMessage] = []
    system_message: str | None = None

    for raw in messages:
        msg = convert_openai_message(raw, Provider.ANTHROPIC)

        if msg.role == MessageRole.SYSTEM:
            system_message = msg.content or ""
            continue

        if msg.role == MessageRole.TOOL:
            if not result or result[-1].role != MessageRole.ASSISTANT:
                raise create_error(
                    ErrorKind.VALIDATION,
                    "Tool result without preceding assistant message",
                    Provider.ANTHROPIC,
                    raw,
                )
            result[-1] = _append_tool_result(result[-1], msg)
            continue

        content: list[ContentBlock] = []

        if msg.content:
            content.append(TextBlock(text=msg.content))

        for tool_call in msg.tool_calls or []:
            content.append(
                ToolUseBlock(
                    id=tool_call.id or generate_id(),
                    name=tool_call.function.name,
                    input=_parse_arguments(tool_call),
                )
            )

        if not content:
            raise create_error(
                ErrorKind.VALIDATION, "Message has no content", Provider.ANTHROPIC, raw
            )

        role = (
            MessageRole.ASSISTANT
            if msg.role == MessageRole.ASSISTANT
            else MessageRole.USER
        )
        result.append(AnthropicMessage(role=role, content=content))

    logger.debug(
        f"Converted {len(messages)} OpenAI messages to {len(result)} Anthropic "
        f"messages (system prompt: {system_message is not None})"
    )
    return result, system_message


def from_openai(
    messages: Sequence[OpenAIMessageInput], options: OptionsInput = None
) -> list[AnthropicMessage]:
    """Convert OpenAI messages to Anthropic format, dropping system messages."""
    converted, _ = from_openai_with_system(messages, options)
    return converted


def _append_tool_result(
    previous: AnthropicMessage, msg: OpenAIMessage
) -> AnthropicMessage:
    """Return a copy of ``previous`` with the tool message appended as a block."""
    tool_result = ToolResultBlock(
        tool_use_id=msg.tool_call_id or generate_id(),
        content=msg.content or "",
        is_error=False,
    )

    # content is always a block list here; string shorthand is normalized on input
    return previous.model_copy(update={"content": [*previous.content, tool_result]})


def _parse_arguments(tool_call: OpenAIToolCall) -> dict[str, Any]:
    try:
        return safe_json_parse(tool_call.function.arguments, Provider.ANTHROPIC)
    except ValidationError as e:
        raise create_error(
            ErrorKind.VALIDATION,
            f"Tool call '{tool_call.id}' has invalid arguments: {e.detail}",
            Provider.ANTHROPIC,
            tool_call,
        ) from e


# ================================================================
# Anthropic → OpenAI
# ================================================================


def to_openai(
    messages: Sequence[AnthropicMessageInput],
    options: OptionsInput = None,
    system: str | None = None,
) -> list[OpenAIMessage]:
    """
    Convert Anthropic messages to OpenAI format.

    Args:
        messages: Anthropic messages (dicts or ``AnthropicMessage``)
        options: Translation options (reserved)
        system: Out-of-band Anthropic system prompt; emitted as a leading
            ``system`` message when non-empty

    Returns:
        OpenAI messages

    Raises:
        TransformError: if a tool input or tool result cannot be serialized
    """
    resolve_options(options, Provider.OPENAI)

    result: list[OpenAIMessage] = []

    if system:
        result.append(OpenAIMessage(role=MessageRole.SYSTEM, content=system))

    for raw in messages:
        msg = convert_anthropic_message(raw, Provider.OPENAI)

        text_parts: list[str] = []
        tool_calls: list[OpenAIToolCall] = []
        has_tool_result = False

        for block in msg.content:
            if isinstance(block, TextBlock):
                text_parts.append(block.text)
            elif isinstance(block, ToolUseBlock):
                tool_calls.append(
                    OpenAIToolCall(
                        id=block.id,
                        function=OpenAIFunctionCall(
                            name=block.name,
                            arguments=safe_json_stringify(block.input, Provider.OPENAI),
                        ),
                    )
                )
            elif isinstance(block, ToolResultBlock):
                # Tool results always become separate OpenAI messages
                result.append(
                    OpenAIMessage(
                        role=MessageRole.TOOL,
                        tool_call_id=block.tool_use_id,
                        content=_tool_result_text(block),
                    )
                )
                has_tool_result = True
            else:
                assert_never(block)

        text_content = "".join(text_parts)

        # Pure tool-result turns are fully represented by the tool messages
        if has_tool_result and not text_content and not tool_calls:
            continue

        result.append(
            OpenAIMessage(
                role=msg.role,
                content=text_content or None,
                tool_calls=tool_calls or None,
            )
        )

    logger.debug(
        f"Converted {len(messages)} Anthropic messages to {len(result)} OpenAI messages"
    )
    return result


def _tool_result_text(block: ToolResultBlock) -> str:
    if block.content is None:
        return ""
    if isinstance(block.content, str):
        return block.content
    return safe_json_stringify(block.content, Provider.OPENAI)


# ================================================================
# Tool definitions
# ================================================================


def tools_from_openai(tools: Sequence[OpenAITool | dict[str, Any]]) -> list[AnthropicTool]:
    """Convert OpenAI tool definitions to Anthropic format (``strict`` is dropped)."""
    converted = []
    for raw in tools:
        function = convert_openai_tool(raw, Provider.ANTHROPIC).function
        converted.append(
            AnthropicTool(
                name=function.name,
                description=function.description,
                input_schema=AnthropicInputSchema(
                    properties=function.parameters.properties,
                    required=function.parameters.required,
                ),
            )
        )
    return converted


def tools_to_openai(tools: Sequence[AnthropicTool | dict[str, Any]]) -> list[OpenAITool]:
    """Convert Anthropic tool definitions to OpenAI format."""
    converted = []
    for raw in tools:
        tool = convert_anthropic_tool(raw, Provider.OPENAI)
        converted.append(
            OpenAITool(
                function=OpenAIFunctionDefinition(
                    name=tool.name,
                    description=tool.description,
                    parameters=OpenAIFunctionParameters(
                        properties=tool.input_schema.properties,
                        required=tool.input_schema.required,
                    ),
                )
            )
        )
    return converted
