"""
Message Models
==============

Type-safe Pydantic models for both wire schemas.

- OpenAI (Chat Completions): flat messages with inline ``tool_calls`` and
  separate ``tool`` role results
- Anthropic (Messages API): user/assistant messages whose content is a list
  of typed blocks

All models are frozen; translators build new values instead of mutating.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import ContentBlockType, MessageRole, ToolType

# ================================================================
# OpenAI schema
# ================================================================


class OpenAIFunctionCall(BaseModel):
    """Function name plus JSON-encoded arguments."""

    name: str
    arguments: str = Field(default="{}", description="JSON-encoded object")

    model_config = ConfigDict(frozen=True)


class OpenAIToolCall(BaseModel):
    """Tool call issued by an assistant message."""

    id: str | None = None
    type: ToolType = ToolType.FUNCTION
    function: OpenAIFunctionCall

    model_config = ConfigDict(frozen=True)


class OpenAIMessage(BaseModel):
    """Chat Completions message."""

    role: MessageRole
    content: str | None = None
    name: str | None = None
    tool_calls: list[OpenAIToolCall] | None = None
    tool_call_id: str | None = None

    model_config = ConfigDict(frozen=True)


class OpenAIFunctionParameters(BaseModel):
    """JSON schema for function parameters."""

    type: Literal["object"] = "object"
    properties: dict[str, Any] = Field(default_factory=dict)
    required: list[str] | None = None

    model_config = ConfigDict(frozen=True)


class OpenAIFunctionDefinition(BaseModel):
    name: str
    description: str = ""
    parameters: OpenAIFunctionParameters = Field(
        default_factory=OpenAIFunctionParameters
    )
    strict: bool | None = None

    model_config = ConfigDict(frozen=True)


class OpenAITool(BaseModel):
    """Chat Completions tool definition."""

    type: ToolType = ToolType.FUNCTION
    function: OpenAIFunctionDefinition

    model_config = ConfigDict(frozen=True)


# ================================================================
# Anthropic schema
# ================================================================


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str

    model_config = ConfigDict(frozen=True)


class ToolUseBlock(BaseModel):
    """Model-issued request to invoke a tool."""

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class ToolResultBlock(BaseModel):
    """Caller's answer to a tool use, correlated by ``tool_use_id``."""

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: Union[str, list[Any], dict[str, Any], None] = None
    is_error: bool | None = None

    model_config = ConfigDict(frozen=True)


ContentBlock = Annotated[
    Union[TextBlock, ToolUseBlock, ToolResultBlock], Field(discriminator="type")
]


class AnthropicMessage(BaseModel):
    """Messages API message: a role plus a non-empty block list."""

    role: MessageRole
    content: list[ContentBlock] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: MessageRole) -> MessageRole:
        """Anthropic messages only carry user and assistant turns."""
        if v not in (MessageRole.USER, MessageRole.ASSISTANT):
            raise ValueError(f"Anthropic messages cannot have role '{v.value}'")
        return v

    @field_validator("content", mode="before")
    @classmethod
    def normalize_content(cls, v: Any) -> Any:
        # String shorthand accepted by the Messages API
        if isinstance(v, str):
            return [{"type": ContentBlockType.TEXT.value, "text": v}]
        return v


class AnthropicInputSchema(BaseModel):
    """JSON schema for tool input."""

    type: Literal["object"] = "object"
    properties: dict[str, Any] = Field(default_factory=dict)
    required: list[str] | None = None

    model_config = ConfigDict(frozen=True)


class AnthropicTool(BaseModel):
    """Messages API tool definition."""

    name: str
    description: str = ""
    input_schema: AnthropicInputSchema = Field(default_factory=AnthropicInputSchema)

    model_config = ConfigDict(frozen=True)


# ================================================================
# Options
# ================================================================


class TranslationOptions(BaseModel):
    """
    Per-call translation options.

    Both fields are reserved; no option changes translator output yet.
    """

    strict: bool = Field(default=False, description="Reserved: strict validation")
    preserve_ids: bool = Field(
        default=False, description="Reserved: never substitute generated ids"
    )

    model_config = ConfigDict(frozen=True)
