"""Answer grading for challenges and quiz questions.

Grading compares keys with exact, case-sensitive equality. Callers are
responsible for passing keys exactly as authored.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import Challenge, ChallengeType, QuizQuestion


@dataclass(frozen=True)
class QuizResult:
    """Outcome of grading one quiz question."""

    correct: bool
    explanation: str


def grade_challenge(challenge: Challenge, submitted_key: str) -> bool:
    """Return whether ``submitted_key`` is the challenge's correct option key."""
    if challenge.type is not ChallengeType.MULTIPLE_CHOICE:
        raise ValueError(f"Challenge '{challenge.id}' ({challenge.type.value}) is not auto-gradable.")
    return submitted_key == challenge.correct_answer


def grade_quiz_question(question: QuizQuestion, submitted_key: str) -> QuizResult:
    """Grade a quiz answer; the explanation is returned whatever the outcome."""
    return QuizResult(correct=submitted_key == question.correct_choice_key, explanation=question.explanation)
