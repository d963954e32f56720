# prd_zero/coaching/providers/__init__.py
"""LLM providers for answer coaching."""

from prd_zero.coaching.providers.base import CoachProvider, Completion
from prd_zero.coaching.providers.openai_provider import OpenAIProvider
from prd_zero.coaching.providers.anthropic_provider import AnthropicProvider

__all__ = ["CoachProvider", "Completion", "OpenAIProvider", "AnthropicProvider"]
