# prd_zero/coaching/providers/base.py
"""Abstract base class for LLM providers."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Completion:
    """A model reply with the token counts the provider billed for it."""

    text: str
    input_tokens: int = 0
    output_tokens: int = 0


class CoachProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def complete(self, prompt: str, system: str) -> Completion:
        """
        Send one prompt and return the model's reply.

        Args:
            prompt: Fully rendered user prompt
            system: System prompt setting the coach persona

        Returns:
            Completion with the stripped reply text and the usage reported by the API
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging (e.g., 'openai', 'anthropic')."""
        pass

    @property
    @abstractmethod
    def model(self) -> str:
        """Model identifier, used for cost estimates."""
        pass


def parse_json_response(content: str) -> dict:
    """Parse a JSON object reply, tolerating markdown fences and chatter."""
    start = content.find("{")
    end = content.rfind("}") + 1
    if start != -1 and end > start:
        content = content[start:end]

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse LLM response as JSON: {e}")
    if not isinstance(data, dict):
        raise ValueError("Failed to parse LLM response as JSON: expected an object")
    return data
