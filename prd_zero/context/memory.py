# prd_zero/context/memory.py
"""Sequential answer history with a derived project context."""

import re
from datetime import datetime
from typing import Optional

from prd_zero.context.consistency import check_consistency
from prd_zero.context.types import ConsistencyCheck, ContextEntry, ProjectContext
from prd_zero.questions.types import QuestionCategory, QuestionType

MAX_CONTEXT_LENGTH = 2000
CONTEXT_START = "=== PROJECT CONTEXT SO FAR ==="
CONTEXT_END = "=== END CONTEXT ==="
CONTEXT_IMPORTANT = "IMPORTANT: New answers must fit and build on the definitions above."
CRITICAL_PREFIXES = ("Project name:", "Target audience:", "Problem:", "Features:")

# Checked in order; the first matching field receives the answer
CONTEXT_FIELD_PATTERNS = (
    ("name", ("name",)),
    ("description", ("describe",)),
    ("target_audience", ("target", "audience")),
    ("problem", ("problem",)),
    ("unique_value", ("unique",)),
    ("solution", ("solution",)),
    ("features", ("feature",)),
    ("tech_stack", ("tech", "stack")),
    ("timeline", ("timeline", "weeks")),
    ("risks", ("risk",)),
    ("success_metrics", ("metric", "success")),
)

LIST_FIELDS = frozenset({"features", "tech_stack", "risks", "success_metrics"})

_LIST_SPLIT_RE = re.compile(r"[\n,]")


def parse_list_answer(answer: str) -> list[str]:
    """Split a free-text answer on newlines and commas."""
    if "\n" in answer or "," in answer:
        return [item.strip() for item in _LIST_SPLIT_RE.split(answer) if item.strip()]
    return [answer]


def detect_context_field(question: str) -> Optional[str]:
    """Which ProjectContext field a question fills, if any."""
    q = question.lower()
    for field_name, keywords in CONTEXT_FIELD_PATTERNS:
        if any(kw in q for kw in keywords):
            if field_name == "solution" and "problem" in q:
                continue
            return field_name
    return None


class ContextMemory:
    """
    Accumulates answers one at a time.

    Readers always get a snapshot: history() and context return copies, so
    later appends never change what a caller already holds.
    """

    def __init__(self, max_context_length: int = MAX_CONTEXT_LENGTH):
        self.max_context_length = max_context_length
        self._history: list[ContextEntry] = []
        self._context = ProjectContext()
        self._cached_prompt: Optional[str] = None

    def add_entry(self, entry: ContextEntry):
        self._history.append(entry)
        self._update_context(entry)
        self._cached_prompt = None

    def record(
        self,
        question: str,
        answer: str,
        question_type: QuestionType = QuestionType.GENERIC,
        category: QuestionCategory = QuestionCategory.OTHER,
        improved: bool = False,
    ) -> ContextEntry:
        """Build an entry stamped with the current time and add it."""
        entry = ContextEntry(
            question=question,
            answer=answer,
            timestamp=datetime.now(),
            question_type=question_type,
            category=category,
            improved=improved,
        )
        self.add_entry(entry)
        return entry

    def _update_context(self, entry: ContextEntry):
        field_name = detect_context_field(entry.question)
        if field_name is None:
            return
        answer = entry.answer.strip()
        if field_name in LIST_FIELDS:
            setattr(self._context, field_name, parse_list_answer(answer))
        else:
            setattr(self._context, field_name, answer)

    @property
    def context(self) -> ProjectContext:
        return ProjectContext.from_dict(self._context.to_dict())

    def history(self) -> list[ContextEntry]:
        return list(self._history)

    def related_answers(self, question_type: QuestionType) -> list[ContextEntry]:
        return [e for e in self._history if e.question_type == question_type]

    def answers_by_category(self, category: QuestionCategory) -> list[ContextEntry]:
        return [e for e in self._history if e.category == category]

    def detect_inconsistencies(self) -> ConsistencyCheck:
        return check_consistency(self.history(), self.context)

    def context_for_prompt(self) -> str:
        """Render the derived context for an LLM prompt, capped in length."""
        if self._cached_prompt is not None:
            return self._cached_prompt

        ctx = self._context
        lines = [CONTEXT_START]
        if ctx.name:
            lines.append(f"Project name: {ctx.name}")
        if ctx.target_audience:
            lines.append(f"Target audience: {ctx.target_audience}")
        if ctx.problem:
            lines.append(f"Problem: {ctx.problem}")
        if ctx.solution:
            lines.append(f"Solution: {ctx.solution}")
        if ctx.unique_value:
            lines.append(f"Unique value: {ctx.unique_value}")
        if ctx.features:
            lines.append(f"Features: {', '.join(ctx.features)}")
        if ctx.tech_stack:
            lines.append(f"Tech stack: {', '.join(ctx.tech_stack)}")
        if ctx.timeline:
            lines.append(f"Timeline: {ctx.timeline}")
        if ctx.risks:
            lines.append(f"Risks: {', '.join(ctx.risks)}")
        if ctx.success_metrics:
            lines.append(f"Success metrics: {', '.join(ctx.success_metrics)}")
        lines.append(CONTEXT_END + "\n")
        lines.append(CONTEXT_IMPORTANT)

        full = "\n".join(lines)
        if len(full) > self.max_context_length:
            full = self._trim(full)

        self._cached_prompt = full
        return full

    def _trim(self, full: str) -> str:
        """Keep headers and critical fields, then add other lines while they fit."""
        critical: list[str] = []
        other: list[str] = []
        for line in full.split("\n"):
            if line.startswith(CRITICAL_PREFIXES) or line.startswith(("===", "IMPORTANT:")):
                critical.append(line)
            else:
                other.append(line)

        result = "\n".join(critical)
        for line in other:
            if len(result) + len(line) < self.max_context_length:
                result += "\n" + line
        return result

    def summary(self) -> str:
        ctx = self._context
        parts = []
        if ctx.name:
            parts.append(f"Project: {ctx.name}")
        if ctx.target_audience:
            parts.append(f"Target audience: {ctx.target_audience}")
        if ctx.problem:
            parts.append(f"Problem: {ctx.problem}")
        if ctx.features:
            parts.append(f"Features: {len(ctx.features)} defined")
        if ctx.timeline:
            parts.append(f"Timeline: {ctx.timeline}")
        return "\n".join(parts)

    def export(self, session_id: Optional[str] = None) -> dict:
        data = {
            "history": [e.to_dict() for e in self._history],
            "project_context": self._context.to_dict(),
            "exported_at": datetime.now().isoformat(),
        }
        if session_id:
            data["session_id"] = session_id
        return data

    def load(self, data: dict):
        """Replace the current state with an exported one."""
        self._history = [ContextEntry.from_dict(e) for e in data.get("history", [])]
        self._context = ProjectContext.from_dict(data.get("project_context", {}))
        self._cached_prompt = None

    def clear(self):
        self._history = []
        self._context = ProjectContext()
        self._cached_prompt = None

    def __len__(self) -> int:
        return len(self._history)
