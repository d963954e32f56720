# prd_zero/coaching/usage.py
"""Token and cost accounting for coaching calls."""

from dataclasses import dataclass, field
from datetime import datetime

# USD per million tokens (input, output), matched by substring of the model id
MODEL_PRICING = (
    ("opus", (15.00, 75.00)),
    ("sonnet", (3.00, 15.00)),
    ("haiku", (0.25, 1.25)),
    ("gpt-4.1-mini", (0.40, 1.60)),
    ("gpt-4o", (2.50, 10.00)),
)
DEFAULT_PRICING = (3.00, 15.00)

BUDGET_WARNING_PERCENT = 80


def price_for(model: str) -> tuple:
    model = (model or "").lower()
    for needle, pricing in MODEL_PRICING:
        if needle in model:
            return pricing
    return DEFAULT_PRICING


def calculate_cost(model: str, input_tokens: int, output_tokens: int) -> float:
    input_price, output_price = price_for(model)
    cost = input_tokens / 1_000_000 * input_price + output_tokens / 1_000_000 * output_price
    return round(cost, 6)


@dataclass
class Interaction:
    """One coaching call."""

    kind: str
    provider: str
    model: str
    input_tokens: int
    output_tokens: int
    cost: float
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "provider": self.provider,
            "model": self.model,
            "input_tokens": self.input_tokens,
            "output_tokens": self.output_tokens,
            "cost": self.cost,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class CoachUsage:
    """Running totals for a session."""

    max_budget: float = 5.00
    interactions: list[Interaction] = field(default_factory=list)

    @property
    def api_calls(self) -> int:
        return len(self.interactions)

    @property
    def input_tokens(self) -> int:
        return sum(i.input_tokens for i in self.interactions)

    @property
    def output_tokens(self) -> int:
        return sum(i.output_tokens for i in self.interactions)

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    @property
    def estimated_cost(self) -> float:
        return round(sum(i.cost for i in self.interactions), 6)

    @property
    def percent_used(self) -> float:
        if not self.max_budget:
            return 0.0
        return self.estimated_cost / self.max_budget * 100

    def within_budget(self) -> bool:
        """A budget of 0 disables the limit."""
        return not self.max_budget or self.percent_used < 100

    def near_budget(self) -> bool:
        return bool(self.max_budget) and self.percent_used >= BUDGET_WARNING_PERCENT

    def record(self, interaction: Interaction):
        self.interactions.append(interaction)

    def cost_by_kind(self) -> dict[str, float]:
        totals: dict[str, float] = {}
        for i in self.interactions:
            totals[i.kind] = round(totals.get(i.kind, 0.0) + i.cost, 6)
        return totals

    def summary(self) -> str:
        lines = [
            f"API calls: {self.api_calls}",
            f"Tokens: {self.total_tokens:,} ({self.input_tokens:,} in / {self.output_tokens:,} out)",
            f"Estimated cost: ${self.estimated_cost:.4f}",
        ]
        for kind, cost in self.cost_by_kind().items():
            share = cost / self.estimated_cost * 100 if self.estimated_cost else 0
            lines.append(f"  - {kind}: ${cost:.4f} ({share:.1f}%)")
        if self.max_budget:
            lines.append(
                f"Budget: ${self.estimated_cost:.4f} of ${self.max_budget:.2f} ({self.percent_used:.1f}%)"
            )
        return "\n".join(lines)
