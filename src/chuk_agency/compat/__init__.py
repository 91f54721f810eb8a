"""
Compatibility Layer
===================

Two-way bridge between plain wire dicts and the Pydantic message models.

- **Inbound**: Convert dict-based messages/tools to Pydantic
- **Outbound**: Convert translated Pydantic models back to dicts

Usage:
    # Convert inbound dict message to Pydantic
    msg = convert_openai_message({"role": "user", "content": "Hello"})

    # Convert translated output back to dicts for an API call
    payload = messages_to_dicts(openai.to_anthropic(messages))
"""

from .converters import (
    convert_anthropic_message,
    convert_anthropic_tool,
    convert_openai_message,
    convert_openai_tool,
    convert_translation_options,
    messages_to_dicts,
    model_to_dict,
    tools_to_dicts,
)

__all__ = [
    # Inbound converters (dict → Pydantic)
    "convert_anthropic_message",
    "convert_anthropic_tool",
    "convert_openai_message",
    "convert_openai_tool",
    "convert_translation_options",
    # Outbound converters (Pydantic → dict)
    "messages_to_dicts",
    "model_to_dict",
    "tools_to_dicts",
]
