"""
Core Types
==========

Enums, errors, JSON helpers and Pydantic models shared by every translator.
"""

from .enums import ContentBlockType, ErrorKind, MessageRole, Provider, ToolType
from .errors import AgencyError, TransformError, ValidationError, create_error
from .json_utils import dumps, get_json_library, loads
from .models import (
    AnthropicInputSchema,
    AnthropicMessage,
    AnthropicTool,
    ContentBlock,
    OpenAIFunctionCall,
    OpenAIFunctionDefinition,
    OpenAIFunctionParameters,
    OpenAIMessage,
    OpenAITool,
    OpenAIToolCall,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    TranslationOptions,
)
from .utils import (
    generate_id,
    is_non_empty_string,
    is_valid_object,
    safe_json_parse,
    safe_json_stringify,
)

__all__ = [
    # Enums
    "ContentBlockType",
    "ErrorKind",
    "MessageRole",
    "Provider",
    "ToolType",
    # Errors
    "AgencyError",
    "TransformError",
    "ValidationError",
    "create_error",
    # JSON
    "dumps",
    "loads",
    "get_json_library",
    # Models
    "AnthropicInputSchema",
    "AnthropicMessage",
    "AnthropicTool",
    "ContentBlock",
    "OpenAIFunctionCall",
    "OpenAIFunctionDefinition",
    "OpenAIFunctionParameters",
    "OpenAIMessage",
    "OpenAITool",
    "OpenAIToolCall",
    "TextBlock",
    "ToolResultBlock",
    "ToolUseBlock",
    "TranslationOptions",
    # Utilities
    "generate_id",
    "is_non_empty_string",
    "is_valid_object",
    "safe_json_parse",
    "safe_json_stringify",
]
