# tests/test_openai_provider.py
"""Tests for OpenAI provider."""

import pytest
import json
from unittest.mock import Mock, patch


def _response(content, prompt_tokens=120, completion_tokens=30):
    mock_response = Mock()
    mock_response.choices = [Mock()]
    mock_response.choices[0].message.content = content
    mock_response.usage.prompt_tokens = prompt_tokens
    mock_response.usage.completion_tokens = completion_tokens
    return mock_response


def test_openai_provider_has_correct_name():
    from prd_zero.coaching.providers.openai_provider import OpenAIProvider

    with patch("prd_zero.coaching.providers.openai_provider.OpenAI"):
        provider = OpenAIProvider(api_key="test-key")
    assert provider.name == "openai"


def test_openai_provider_default_model():
    from prd_zero.coaching.providers.openai_provider import OpenAIProvider

    with patch("prd_zero.coaching.providers.openai_provider.OpenAI"):
        provider = OpenAIProvider(api_key="test-key")
    assert provider.model == "gpt-4.1-mini"


def test_openai_provider_custom_model():
    from prd_zero.coaching.providers.openai_provider import OpenAIProvider

    with patch("prd_zero.coaching.providers.openai_provider.OpenAI"):
        provider = OpenAIProvider(api_key="test-key", model="gpt-4o")
    assert provider.model == "gpt-4o"


def test_openai_provider_sends_system_and_user_messages():
    from prd_zero.coaching.providers.openai_provider import OpenAIProvider

    with patch("prd_zero.coaching.providers.openai_provider.OpenAI"):
        provider = OpenAIProvider(api_key="test-key")

    with patch.object(provider, '_client') as mock_client:
        mock_client.chat.completions.create.return_value = _response("  Looks good  ")
        result = provider.complete("Judge this", "You are a coach")

    assert result.text == "Looks good"
    messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
    assert messages == [
        {"role": "system", "content": "You are a coach"},
        {"role": "user", "content": "Judge this"},
    ]


def test_openai_provider_reports_token_usage():
    from prd_zero.coaching.providers.openai_provider import OpenAIProvider

    with patch("prd_zero.coaching.providers.openai_provider.OpenAI"):
        provider = OpenAIProvider(api_key="test-key")

    with patch.object(provider, '_client') as mock_client:
        mock_client.chat.completions.create.return_value = _response("ok", prompt_tokens=812, completion_tokens=64)
        result = provider.complete("Judge this", "You are a coach")

    assert result.input_tokens == 812
    assert result.output_tokens == 64


def test_openai_provider_normalizes_smart_quotes():
    from prd_zero.coaching.providers.openai_provider import OpenAIProvider

    with patch("prd_zero.coaching.providers.openai_provider.OpenAI"):
        provider = OpenAIProvider(api_key="test-key")

    with patch.object(provider, '_client') as mock_client:
        mock_client.chat.completions.create.return_value = _response("ok")
        provider.complete("“Todo” – it’s simple", "system")

    messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
    assert messages[1]["content"] == "\"Todo\" - it's simple"


def test_openai_provider_reply_parses_as_json():
    from prd_zero.coaching.providers.base import parse_json_response
    from prd_zero.coaching.providers.openai_provider import OpenAIProvider

    with patch("prd_zero.coaching.providers.openai_provider.OpenAI"):
        provider = OpenAIProvider(api_key="test-key")

    content = "```json\n" + json.dumps({
        "assessment": "good",
        "feedback": "Specific and measurable",
    }) + "\n```"

    with patch.object(provider, '_client') as mock_client:
        mock_client.chat.completions.create.return_value = _response(content)
        result = parse_json_response(provider.complete("prompt", "system").text)

    assert result["assessment"] == "good"


def test_openai_provider_malformed_json_reply():
    from prd_zero.coaching.providers.base import parse_json_response
    from prd_zero.coaching.providers.openai_provider import OpenAIProvider

    with patch("prd_zero.coaching.providers.openai_provider.OpenAI"):
        provider = OpenAIProvider(api_key="test-key")

    with patch.object(provider, '_client') as mock_client:
        mock_client.chat.completions.create.return_value = _response("This is not JSON")
        completion = provider.complete("prompt", "system")

    with pytest.raises(ValueError, match="Failed to parse"):
        parse_json_response(completion.text)
