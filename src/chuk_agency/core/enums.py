"""
Core Enumerations
=================

Type-safe enums for providers, roles, content blocks and error kinds.
No more magic strings!
"""

from enum import Enum


class Provider(str, Enum):
    """Wire schema a translation produces."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class MessageRole(str, Enum):
    """Chat message role."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class ContentBlockType(str, Enum):
    """Anthropic content block discriminator."""

    TEXT = "text"
    TOOL_USE = "tool_use"
    TOOL_RESULT = "tool_result"


class ToolType(str, Enum):
    """Tool/function call types."""

    FUNCTION = "function"


class ErrorKind(str, Enum):
    """Translation failure kinds."""

    VALIDATION = "validation"
    TRANSFORM = "transform"
