# tests/test_anthropic_provider.py
"""Tests for Anthropic provider."""

import pytest
import json
from unittest.mock import Mock, patch


def _response(text, input_tokens=120, output_tokens=30):
    mock_response = Mock()
    mock_response.content = [Mock()]
    mock_response.content[0].text = text
    mock_response.usage.input_tokens = input_tokens
    mock_response.usage.output_tokens = output_tokens
    return mock_response


def test_anthropic_provider_has_correct_name():
    from prd_zero.coaching.providers.anthropic_provider import AnthropicProvider

    provider = AnthropicProvider(api_key="test-key")
    assert provider.name == "anthropic"


def test_anthropic_provider_default_model():
    from prd_zero.coaching.providers.anthropic_provider import AnthropicProvider

    provider = AnthropicProvider(api_key="test-key")
    assert "claude" in provider.model.lower()


def test_anthropic_provider_passes_system_prompt():
    from prd_zero.coaching.providers.anthropic_provider import AnthropicProvider

    provider = AnthropicProvider(api_key="test-key")

    with patch.object(provider, '_client') as mock_client:
        mock_client.messages.create.return_value = _response("Answer is vague\n")
        result = provider.complete("Judge this", "You are a coach")

    assert result.text == "Answer is vague"
    kwargs = mock_client.messages.create.call_args.kwargs
    assert kwargs["system"] == "You are a coach"
    assert kwargs["messages"] == [{"role": "user", "content": "Judge this"}]


def test_anthropic_provider_reports_token_usage():
    from prd_zero.coaching.providers.anthropic_provider import AnthropicProvider

    provider = AnthropicProvider(api_key="test-key")

    with patch.object(provider, '_client') as mock_client:
        mock_client.messages.create.return_value = _response("ok", input_tokens=950, output_tokens=210)
        result = provider.complete("Judge this", "You are a coach")

    assert result.input_tokens == 950
    assert result.output_tokens == 210


def test_anthropic_provider_reply_parses_as_json():
    from prd_zero.coaching.providers.anthropic_provider import AnthropicProvider
    from prd_zero.coaching.providers.base import parse_json_response

    provider = AnthropicProvider(api_key="test-key")

    text = "Here you go: " + json.dumps({
        "assessment": "critical",
        "feedback": "Too many features",
        "feature_count": 7,
    })

    with patch.object(provider, '_client') as mock_client:
        mock_client.messages.create.return_value = _response(text)
        result = parse_json_response(provider.complete("prompt", "system").text)

    assert result["assessment"] == "critical"
    assert result["feature_count"] == 7


def test_anthropic_provider_malformed_json_reply():
    from prd_zero.coaching.providers.anthropic_provider import AnthropicProvider
    from prd_zero.coaching.providers.base import parse_json_response

    provider = AnthropicProvider(api_key="test-key")

    with patch.object(provider, '_client') as mock_client:
        mock_client.messages.create.return_value = _response("Not valid JSON at all")
        completion = provider.complete("prompt", "system")

    with pytest.raises(ValueError, match="Failed to parse"):
        parse_json_response(completion.text)
