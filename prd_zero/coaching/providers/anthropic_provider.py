# prd_zero/coaching/providers/anthropic_provider.py
"""Anthropic Claude LLM provider."""

import os
from typing import Optional

from anthropic import Anthropic

from prd_zero.coaching.providers.base import CoachProvider, Completion


class AnthropicProvider(CoachProvider):
    """Anthropic Claude-based coaching provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "claude-haiku-4-5-20251001",
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ):
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self._model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = Anthropic(api_key=self.api_key)

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def model(self) -> str:
        return self._model

    def complete(self, prompt: str, system: str) -> Completion:
        """Complete a prompt using Anthropic messages."""
        response = self._client.messages.create(
            model=self._model,
            max_tokens=self.max_tokens,
            messages=[
                {"role": "user", "content": prompt},
            ],
            system=system,
            temperature=self.temperature,
        )

        return Completion(
            text=response.content[0].text.strip(),
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )
