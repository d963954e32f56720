# prd_zero/errors.py
"""Custom error types for the planning wizard."""


class PrdZeroError(Exception):
    """Base error for prd-zero operations."""
    pass


class ConfigError(PrdZeroError):
    """Invalid configuration value."""

    def __init__(self, message: str, key: str = None):
        super().__init__(message)
        self.key = key


class InvalidTimeLimitError(ConfigError):
    """Session time limit outside the allowed range."""

    def __init__(self, limit: int):
        super().__init__("Time limit must be between 10 and 180 minutes", key="time_limit")
        self.limit = limit


class CoachingError(PrdZeroError):
    """AI coach could not produce a usable response."""

    def __init__(self, message: str, provider: str = None):
        super().__init__(message)
        self.provider = provider


class BudgetExceededError(CoachingError):
    """AI spend reached the configured budget."""

    def __init__(self, spent: float, budget: float):
        super().__init__(f"Budget exceeded: ${spent:.4f} of ${budget:.2f}")
        self.spent = spent
        self.budget = budget


class SessionAbortedError(PrdZeroError):
    """User aborted the wizard before it finished."""

    def __init__(self, message: str = "Session aborted", step: str = None):
        super().__init__(message)
        self.step = step
