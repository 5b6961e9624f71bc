"""Core domain models for the curriculum tree."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .errors import ConstructionError, ErrorKind

ChoiceMap = Mapping[str, str]
"""Quiz choice key -> choice text, in display order."""

OPTION_LABEL_SEPARATOR = ")"


class ContentKind(Enum):
    """Rendering hint for a lesson content block."""

    THEORY = "theory"
    EXAMPLE = "example"
    ANALOGY = "analogy"
    KEY_POINT = "key_point"
    WARNING = "warning"


class ChallengeType(Enum):
    """Kinds of assessment a challenge can be."""

    MULTIPLE_CHOICE = "multiple_choice"
    CODE_COMPLETION = "code_completion"
    FREE_CODING = "free_coding"
    CONCEPTUAL = "conceptual"

    @property
    def is_coding(self) -> bool:
        return self in (ChallengeType.CODE_COMPLETION, ChallengeType.FREE_CODING)


def option_label(option: str) -> str:
    """Return the label key of an option such as ``"B) text"`` (``"B"``).

    Returns an empty string when the option carries no label prefix.
    """
    label, separator, _ = option.partition(OPTION_LABEL_SEPARATOR)
    if not separator:
        return ""
    return label


@dataclass(frozen=True)
class ContentBlock:
    """One heading/body section of lesson prose."""

    kind: ContentKind
    heading: str
    body: str


@dataclass(frozen=True)
class TestCase:
    """Expected behaviour used to check a coding challenge submission."""

    __test__ = False

    description: str
    inputs: tuple[Any, ...]
    expected_output: Any
    visible: bool = True


@dataclass(frozen=True)
class Challenge:
    """Assessment item owned by a lesson."""

    id: str
    title: str
    type: ChallengeType
    description: str
    options: tuple[str, ...] = ()
    correct_answer: str | None = None
    starter_code: str = ""
    method_signature: str = ""
    test_cases: tuple[TestCase, ...] = ()

    @property
    def option_labels(self) -> tuple[str, ...]:
        """Label keys of the options, in display order."""
        return tuple(option_label(option) for option in self.options)


class QuizQuestion:
    """Question with an explanation shown after grading.

    Choices are accumulated with :meth:`add_choice` while the owning lesson is
    being authored. Once handed to a :class:`~socratic_mentor.builders.LessonBuilder`
    the question is treated as frozen.
    """

    def __init__(self, prompt: str, correct_choice_key: str, explanation: str = "", id: str = "") -> None:
        self.id = id
        self.prompt = prompt
        self.correct_choice_key = correct_choice_key
        self.explanation = explanation
        self._choices: dict[str, str] = {}

    @property
    def choices(self) -> ChoiceMap:
        """Read-only view of the choices."""
        return MappingProxyType(self._choices)

    def add_choice(self, key: str, text: str) -> QuizQuestion:
        """Append one choice; keys are case-sensitive and must be unique."""
        if key in self._choices:
            raise ConstructionError(
                ErrorKind.DUPLICATE_OPTION,
                f"Quiz question '{self.id or self.prompt}' already has choice '{key}'.",
                self.id,
            )
        self._choices[key] = text
        return self

    def set_explanation(self, text: str) -> QuizQuestion:
        self.explanation = text
        return self

    def __repr__(self) -> str:
        return f"QuizQuestion(id={self.id!r}, prompt={self.prompt!r}, choices={list(self._choices)!r})"


@dataclass(frozen=True)
class Lesson:
    """Ordered instructional unit within an epoch."""

    id: str
    title: str
    estimated_minutes: int
    blocks: tuple[ContentBlock, ...] = ()
    challenges: tuple[Challenge, ...] = ()
    quiz_questions: tuple[QuizQuestion, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class Epoch:
    """Top-level course module."""

    id: str
    title: str
    description: str
    expected_lesson_count: int
    lessons: tuple[Lesson, ...]
    estimated_hours: int = 0

    @property
    def lesson_count(self) -> int:
        return len(self.lessons)

    @property
    def estimated_minutes(self) -> int:
        """Sum of the lessons' estimated minutes."""
        return sum(lesson.estimated_minutes for lesson in self.lessons)

    def __str__(self) -> str:
        return f"{self.title} ({self.lesson_count} lessons, ~{self.estimated_hours}h)"
