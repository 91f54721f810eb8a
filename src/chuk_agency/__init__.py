# chuk_agency/__init__.py
"""
ChukAgency - LLM Message Translation
====================================

Translate chat messages and tool definitions between the OpenAI Chat
Completions format and the Anthropic Messages format.

Usage:
    from chuk_agency import agency

    # OpenAI → Anthropic
    anthropic_messages = agency.openai.to_anthropic(openai_messages)

    # Anthropic → OpenAI
    openai_messages = agency.anthropic.to_openai(anthropic_messages)
"""

from types import SimpleNamespace

from .compat import messages_to_dicts, tools_to_dicts
from .config import get_config, load_config, reset_config
from .core import (
    AgencyError,
    AnthropicMessage,
    AnthropicTool,
    ContentBlockType,
    ErrorKind,
    MessageRole,
    OpenAIMessage,
    OpenAITool,
    OpenAIToolCall,
    Provider,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    TransformError,
    TranslationOptions,
    ValidationError,
    create_error,
)
from .providers import anthropic, openai

# Version
__version__ = "0.1.0"

agency = SimpleNamespace(anthropic=anthropic, openai=openai)


def get_version():
    """Get ChukAgency version"""
    return __version__


__all__ = [
    "__version__",
    "get_version",
    # Namespaces
    "agency",
    "anthropic",
    "openai",
    # Models
    "AnthropicMessage",
    "AnthropicTool",
    "OpenAIMessage",
    "OpenAITool",
    "OpenAIToolCall",
    "TextBlock",
    "ToolResultBlock",
    "ToolUseBlock",
    "TranslationOptions",
    # Enums
    "ContentBlockType",
    "ErrorKind",
    "MessageRole",
    "Provider",
    # Errors
    "AgencyError",
    "TransformError",
    "ValidationError",
    "create_error",
    # Dict helpers
    "messages_to_dicts",
    "tools_to_dicts",
    # Configuration
    "get_config",
    "load_config",
    "reset_config",
]
