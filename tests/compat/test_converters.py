"""
Tests for the dict ↔ model compatibility layer
"""

import pytest

from chuk_agency.compat import (
    convert_anthropic_message,
    convert_anthropic_tool,
    convert_openai_message,
    convert_openai_tool,
    messages_to_dicts,
    model_to_dict,
    tools_to_dicts,
)
from chuk_agency.core import (
    AnthropicMessage,
    MessageRole,
    OpenAIMessage,
    Provider,
    TextBlock,
    ValidationError,
)


class TestInboundConverters:
    def test_model_instances_pass_through(self):
        msg = OpenAIMessage(role=MessageRole.USER, content="Hi")
        assert convert_openai_message(msg) is msg

    def test_dict_is_validated(self):
        msg = convert_anthropic_message({"role": "user", "content": "Hi"})

        assert isinstance(msg, AnthropicMessage)
        assert msg.content == [TextBlock(text="Hi")]

    def test_invalid_dict_raises_validation_error(self):
        raw = {"role": "user", "content": [{"type": "text"}]}

        with pytest.raises(ValidationError) as exc_info:
            convert_anthropic_message(raw, Provider.OPENAI)

        error = exc_info.value
        assert error.provider == Provider.OPENAI
        assert error.original_data is raw
        assert "Invalid Anthropic message" in str(error)
        assert "content.0" in str(error)

    def test_default_provider_is_target_schema(self):
        with pytest.raises(ValidationError) as exc_info:
            convert_openai_message({"role": "nobody"})
        assert exc_info.value.provider == Provider.ANTHROPIC

    def test_tools(self, openai_tools, anthropic_tools):
        assert convert_openai_tool(openai_tools[0]).function.strict is True
        assert convert_anthropic_tool(anthropic_tools[0]).name == "read_file"


class TestOutboundConverters:
    def test_model_to_dict_drops_none(self):
        msg = OpenAIMessage(role=MessageRole.ASSISTANT, content="Hi")
        assert model_to_dict(msg) == {"role": "assistant", "content": "Hi"}

    def test_messages_round_trip_through_dicts(self, anthropic_tool_result_messages):
        models = [convert_anthropic_message(m) for m in anthropic_tool_result_messages]
        assert messages_to_dicts(models) == anthropic_tool_result_messages

    def test_tools_to_dicts(self, anthropic_tools):
        models = [convert_anthropic_tool(t) for t in anthropic_tools]
        assert tools_to_dicts(models) == anthropic_tools
