"""Authoring checks for content that is valid but likely to grade badly."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import Challenge, ChallengeType, Epoch, Lesson, QuizQuestion


@dataclass(frozen=True)
class AuthoringWarning:
    """One suspicious spot in the curriculum."""

    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


def lint_epochs(epochs: Iterable[Epoch]) -> list[AuthoringWarning]:
    """Collect authoring warnings for every epoch, lesson and assessment."""
    warnings: list[AuthoringWarning] = []
    for epoch in epochs:
        if epoch.lesson_count != epoch.expected_lesson_count:
            warnings.append(
                AuthoringWarning(
                    epoch.id,
                    f"declares {epoch.expected_lesson_count} lessons but contains {epoch.lesson_count}",
                )
            )
        for lesson in epoch.lessons:
            warnings.extend(lint_lesson(lesson))
    return warnings


def lint_lesson(lesson: Lesson) -> list[AuthoringWarning]:
    warnings: list[AuthoringWarning] = []
    for challenge in lesson.challenges:
        warnings.extend(_lint_challenge(challenge))
    for position, question in enumerate(lesson.quiz_questions, start=1):
        location = f"{lesson.id}/quiz-{question.id or position}"
        warnings.extend(_lint_quiz_question(location, question))
    return warnings


def _lint_challenge(challenge: Challenge) -> list[AuthoringWarning]:
    if challenge.type is not ChallengeType.MULTIPLE_CHOICE:
        return []
    warnings: list[AuthoringWarning] = []
    labels = challenge.option_labels
    for label in labels:
        if label != label.strip():
            warnings.append(AuthoringWarning(challenge.id, f"option label {label!r} has surrounding whitespace"))
    warnings.extend(_near_miss_keys(challenge.id, labels))

    stripped = [label.strip() for label in labels if label.strip().isalpha()]
    if any(label.isupper() for label in stripped) and any(label.islower() for label in stripped):
        warnings.append(AuthoringWarning(challenge.id, f"option labels mix letter case: {', '.join(labels)}"))
    return warnings


def _lint_quiz_question(location: str, question: QuizQuestion) -> list[AuthoringWarning]:
    warnings: list[AuthoringWarning] = []
    key = question.correct_choice_key
    if key != key.strip():
        warnings.append(AuthoringWarning(location, f"correct key {key!r} has surrounding whitespace"))
    for choice_key in question.choices:
        if choice_key != choice_key.strip():
            warnings.append(AuthoringWarning(location, f"choice key {choice_key!r} has surrounding whitespace"))
    warnings.extend(_near_miss_keys(location, tuple(question.choices)))
    if not question.explanation.strip():
        warnings.append(AuthoringWarning(location, "has no explanation"))
    return warnings


def _near_miss_keys(location: str, keys: tuple[str, ...]) -> list[AuthoringWarning]:
    """Flag distinct keys that only differ by case or whitespace."""
    warnings: list[AuthoringWarning] = []
    seen: dict[str, str] = {}
    for key in keys:
        normalized = key.strip().casefold()
        previous = seen.get(normalized)
        if previous is not None and previous != key:
            warnings.append(AuthoringWarning(location, f"keys {previous!r} and {key!r} differ only by case or spacing"))
        else:
            seen[normalized] = key
    return warnings
