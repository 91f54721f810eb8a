"""
Basic Translation Example
=========================

Shows how to move a tool-calling conversation between the OpenAI and
Anthropic message formats.
"""

from chuk_agency import agency, messages_to_dicts, tools_to_dicts
from chuk_agency.core import dumps

# ================================================================
# OpenAI conversation with a tool call and its result
# ================================================================

openai_messages = [
    {"role": "system", "content": "You are a helpful assistant."},
    {"role": "user", "content": "Please read the README.md file and summarize it"},
    {
        "role": "assistant",
        "content": "I'll read the README file for you.",
        "tool_calls": [
            {
                "id": "call_abc123",
                "type": "function",
                "function": {"name": "read_file", "arguments": '{"path":"README.md"}'},
            }
        ],
    },
    {
        "role": "tool",
        "tool_call_id": "call_abc123",
        "content": "# chuk-agency\n\nLLM message translator between providers",
    },
    {
        "role": "assistant",
        "content": "The README describes an LLM message translator.",
    },
]

# Convert to Anthropic format, keeping the system prompt for the `system` param
anthropic_messages, system = agency.anthropic.from_openai_with_system(openai_messages)
print(f"System prompt: {system!r}")
print("Converted to Anthropic format:")
print(dumps(messages_to_dicts(anthropic_messages), indent=2))

# Convert back to OpenAI format
back_to_openai = agency.anthropic.to_openai(anthropic_messages, system=system)
print("\nConverted back to OpenAI format:")
print(dumps(messages_to_dicts(back_to_openai), indent=2))

# ================================================================
# Tool definitions
# ================================================================

openai_tools = [
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
        },
    }
]

anthropic_tools = agency.openai.tools_to_anthropic(openai_tools)
print("\nTools in Anthropic format:")
print(dumps(tools_to_dicts(anthropic_tools), indent=2))
