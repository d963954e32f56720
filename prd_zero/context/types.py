# prd_zero/context/types.py
"""Data types for the answer history."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Optional

from prd_zero.questions.types import QuestionCategory, QuestionType


@dataclass
class ContextEntry:
    """One answered question."""

    question: str
    answer: str
    timestamp: datetime = field(default_factory=datetime.now)
    question_type: QuestionType = QuestionType.GENERIC
    category: QuestionCategory = QuestionCategory.OTHER
    improved: bool = False

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "answer": self.answer,
            "timestamp": self.timestamp.isoformat(),
            "question_type": self.question_type.value,
            "category": self.category.value,
            "improved": self.improved,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContextEntry":
        timestamp = data.get("timestamp")
        return cls(
            question=data.get("question", ""),
            answer=data.get("answer", ""),
            timestamp=datetime.fromisoformat(timestamp) if timestamp else datetime.now(),
            question_type=QuestionType.from_string(data.get("question_type", "generic")),
            category=_category_from_string(data.get("category", "other")),
            improved=bool(data.get("improved", False)),
        )


def _category_from_string(value: str) -> QuestionCategory:
    for member in QuestionCategory:
        if member.value == value:
            return member
    return QuestionCategory.OTHER


@dataclass
class ProjectContext:
    """Project facts derived from the answers so far."""

    name: Optional[str] = None
    description: Optional[str] = None
    target_audience: Optional[str] = None
    problem: Optional[str] = None
    solution: Optional[str] = None
    unique_value: Optional[str] = None
    features: list[str] = field(default_factory=list)
    tech_stack: list[str] = field(default_factory=list)
    timeline: Optional[str] = None
    risks: list[str] = field(default_factory=list)
    success_metrics: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {f.name: _copy(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectContext":
        known = {f.name for f in fields(cls)}
        return cls(**{k: _copy(v) for k, v in data.items() if k in known})


def _copy(value):
    return list(value) if isinstance(value, list) else value


@dataclass
class ConsistencyCheck:
    is_consistent: bool
    issues: list[str] = field(default_factory=list)
    affected_questions: list[str] = field(default_factory=list)
