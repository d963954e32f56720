# prd_zero/config.py
"""Configuration for the planning wizard."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from prd_zero.errors import ConfigError, InvalidTimeLimitError

AI_MODES = ("active", "passive", "off")
PROVIDERS = ("openai", "anthropic")
MIN_TIME_LIMIT = 10
MAX_TIME_LIMIT = 180


def validate_time_limit(minutes: int) -> int:
    """Raise InvalidTimeLimitError unless 10 <= minutes <= 180."""
    if not MIN_TIME_LIMIT <= minutes <= MAX_TIME_LIMIT:
        raise InvalidTimeLimitError(minutes)
    return minutes


@dataclass
class WizardConfig:
    """Configuration for a planning session."""

    # Output
    output_dir: Path = field(default_factory=lambda: Path("./outputs"))

    # Session
    time_limit_minutes: int = 70

    # AI coaching
    ai_mode: str = "passive"
    provider: str = "openai"
    openai_model: str = "gpt-4.1-mini"
    anthropic_model: str = "claude-haiku-4-5-20251001"
    max_budget: float = 5.00  # USD
    show_costs: bool = False

    def __post_init__(self):
        validate_time_limit(self.time_limit_minutes)
        if self.ai_mode not in AI_MODES:
            raise ConfigError(f"AI mode must be one of {', '.join(AI_MODES)}", key="ai_mode")
        if self.provider not in PROVIDERS:
            raise ConfigError(f"Provider must be one of {', '.join(PROVIDERS)}", key="provider")

    @property
    def ai_enabled(self) -> bool:
        return self.ai_mode != "off"

    @classmethod
    def from_env(cls, **overrides) -> "WizardConfig":
        """Create configuration from environment variables.

        Keyword overrides (e.g. from CLI options) win over the environment;
        None values are ignored.
        """
        values = dict(
            output_dir=Path(os.environ.get("PRD_ZERO_OUTPUT_DIR", "./outputs")),
            time_limit_minutes=int(os.environ.get("PRD_ZERO_TIME_LIMIT", 70)),
            ai_mode=os.environ.get("PRD_ZERO_AI_MODE", "passive"),
            provider=os.environ.get("PRD_ZERO_PROVIDER", "openai"),
            openai_model=os.environ.get("OPENAI_MODEL", "gpt-4.1-mini"),
            anthropic_model=os.environ.get("ANTHROPIC_MODEL", "claude-haiku-4-5-20251001"),
            max_budget=float(os.environ.get("AI_MAX_BUDGET", 5.00)),
            show_costs=os.environ.get("AI_SHOW_COSTS", "false").lower() == "true",
        )
        values.update({k: v for k, v in overrides.items() if v is not None})
        if isinstance(values["output_dir"], str):
            values["output_dir"] = Path(values["output_dir"])
        return cls(**values)
