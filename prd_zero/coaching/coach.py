# prd_zero/coaching/coach.py
"""AI Coach - challenges answers through an LLM provider."""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from prd_zero.coaching.feedback import CoachingFeedback, parse_feedback
from prd_zero.coaching.prompts import load_prompt
from prd_zero.coaching.providers.anthropic_provider import AnthropicProvider
from prd_zero.coaching.providers.base import CoachProvider, parse_json_response
from prd_zero.coaching.providers.openai_provider import OpenAIProvider
from prd_zero.coaching.usage import CoachUsage, Interaction, calculate_cost
from prd_zero.errors import BudgetExceededError
from prd_zero.questions.detector import detect_type, get_validation_requirements
from prd_zero.questions.types import QuestionType

logger = logging.getLogger(__name__)

ISSUE_MARKER = "Issue:"
ISSUE_PENALTY = 20


@dataclass
class AnswerValidation:
    """Result of asking the coach to cross-check all answers."""

    is_valid: bool
    score: int
    issues: list[str] = field(default_factory=list)
    critical_problems: list[str] = field(default_factory=list)


def parse_issues(content: str) -> list[str]:
    """Pull the text after each "Issue:" marker up to the end of its line."""
    if ISSUE_MARKER not in content:
        return []
    return [part.split("\n")[0].strip() for part in content.split(ISSUE_MARKER)[1:]]


class AICoach:
    """
    Challenges wizard answers using LLM providers.

    Flow:
    1. Raise BudgetExceededError once the session budget is spent
    2. Try primary provider (OpenAI by default)
    3. Try fallback provider (Anthropic by default)
    4. Return None if all fail, so the wizard carries on without coaching
    """

    def __init__(
        self,
        primary: Optional[CoachProvider] = None,
        fallback: Optional[CoachProvider] = None,
        max_budget: float = 5.00,
        session_logger=None,
        session_id: str = "",
    ):
        self.primary = primary
        self.fallback = fallback
        self.usage = CoachUsage(max_budget=max_budget)
        self.session_logger = session_logger
        self.session_id = session_id

        # Lazy initialization of default providers
        self._factories = (OpenAIProvider, AnthropicProvider)
        self._primary_initialized = primary is not None
        self._fallback_initialized = fallback is not None

    @classmethod
    def from_config(cls, config, session_logger=None, session_id: str = "") -> "AICoach":
        """Build a coach whose primary provider is the configured one."""
        openai_provider = lambda: OpenAIProvider(model=config.openai_model)  # noqa: E731
        anthropic_provider = lambda: AnthropicProvider(model=config.anthropic_model)  # noqa: E731
        coach = cls(max_budget=config.max_budget, session_logger=session_logger, session_id=session_id)
        if config.provider == "anthropic":
            coach._factories = (anthropic_provider, openai_provider)
        else:
            coach._factories = (openai_provider, anthropic_provider)
        return coach

    def _get_primary(self) -> CoachProvider:
        """Get or initialize primary provider."""
        if not self._primary_initialized:
            self._primary_initialized = True
            self.primary = self._factories[0]()
        return self.primary

    def _get_fallback(self) -> CoachProvider:
        """Get or initialize fallback provider."""
        if not self._fallback_initialized:
            self._fallback_initialized = True
            self.fallback = self._factories[1]()
        return self.fallback

    def _providers(self):
        for getter in (self._get_primary, self._get_fallback):
            try:
                provider = getter()
            except Exception as e:
                logger.warning(f"Provider unavailable: {e}")
                continue
            if provider is not None:
                yield provider

    def _call(self, kind: str, prompt: str, parse_json: bool = False):
        """Run a prompt through the provider chain and record usage."""
        if not self.usage.within_budget():
            raise BudgetExceededError(self.usage.estimated_cost, self.usage.max_budget)

        system = load_prompt("system")

        for provider in self._providers():
            try:
                logger.info(f"Calling {provider.name} for {kind}")
                completion = provider.complete(prompt, system)
                result = parse_json_response(completion.text) if parse_json else completion.text
            except Exception as e:
                logger.warning(f"Provider ({provider.name}) failed: {e}")
                continue

            self.usage.record(Interaction(
                kind=kind,
                provider=provider.name,
                model=provider.model,
                input_tokens=completion.input_tokens,
                output_tokens=completion.output_tokens,
                cost=calculate_cost(provider.model, completion.input_tokens, completion.output_tokens),
            ))
            if self.usage.near_budget():
                logger.warning(f"Budget warning: {self.usage.percent_used:.1f}% used")
                if self.session_logger:
                    self.session_logger.budget_warning(
                        self.session_id, self.usage.estimated_cost, self.usage.max_budget
                    )
            return result, provider

        logger.error(f"All providers failed for {kind}")
        return None, None

    def challenge(
        self,
        question: str,
        answer: str,
        context: str = "",
        question_type: Optional[QuestionType] = None,
    ) -> Optional[CoachingFeedback]:
        """
        Ask the coach to assess one answer.

        Args:
            question: Question text as shown to the user
            answer: The user's answer
            context: Rendered project context so far
            question_type: Explicit type; detected from the question if omitted

        Returns:
            Feedback variant for the question type, or None when no provider answered
        """
        if question_type is None:
            question_type = detect_type(question)

        template = load_prompt(f"challenge_{question_type.value}")
        requirements = "\n".join(f"- {r}" for r in get_validation_requirements(question_type))
        prompt = template.format(
            question=question,
            answer=answer,
            context=context,
            requirements=requirements,
        )

        data, provider = self._call("challenge", prompt, parse_json=True)
        if data is None:
            return None

        feedback = parse_feedback(question_type, data)
        if self.session_logger:
            self.session_logger.coaching_result(
                self.session_id,
                provider.name,
                feedback.assessment.value,
                self.usage.interactions[-1].cost,
            )
        return feedback

    def suggest_improvement(self, question: str, answer: str) -> Optional[str]:
        prompt = load_prompt("improve").format(question=question, answer=answer)
        content, _ = self._call("suggest", prompt)
        return content or None

    def validate_answers(self, answers: dict) -> Optional[AnswerValidation]:
        """Cross-check all answers; each reported issue costs 20 points."""
        prompt = load_prompt("validate").format(answers=json.dumps(answers, indent=2, default=str))
        content, _ = self._call("validate", prompt)
        if content is None:
            return None

        issues = parse_issues(content)
        return AnswerValidation(
            is_valid=len(issues) == 0,
            score=max(0, 100 - len(issues) * ISSUE_PENALTY),
            issues=issues,
            critical_problems=[i for i in issues if "critical" in i.lower()],
        )

    def optimize_document(self, document: str) -> Optional[str]:
        prompt = load_prompt("optimize").format(document=document)
        content, _ = self._call("optimize", prompt)
        return content or None
