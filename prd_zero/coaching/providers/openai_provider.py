# prd_zero/coaching/providers/openai_provider.py
"""OpenAI LLM provider."""

import os
from typing import Optional

from openai import OpenAI

from prd_zero.coaching.providers.base import CoachProvider, Completion


class OpenAIProvider(CoachProvider):
    """OpenAI-based coaching provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4.1-mini",
        temperature: float = 0.7,
    ):
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY")
        self._model = model
        self.temperature = temperature
        self._client = OpenAI(api_key=self.api_key)

    @property
    def name(self) -> str:
        return "openai"

    @property
    def model(self) -> str:
        return self._model

    def _normalize_text(self, text: str) -> str:
        """Replace smart quotes and other problematic unicode with ASCII equivalents."""
        replacements = {
            '\u201c': '"',  # Left double quote
            '\u201d': '"',  # Right double quote
            '\u2018': "'",  # Left single quote
            '\u2019': "'",  # Right single quote
            '\u2013': '-',  # En dash
        }
        for old, new in replacements.items():
            text = text.replace(old, new)
        return text

    def complete(self, prompt: str, system: str) -> Completion:
        """Complete a prompt using OpenAI chat completions."""
        # Answers pasted from other tools often carry curly quotes
        prompt = self._normalize_text(prompt)

        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
        )

        return Completion(
            text=(response.choices[0].message.content or "").strip(),
            input_tokens=response.usage.prompt_tokens,
            output_tokens=response.usage.completion_tokens,
        )
