"""Fluent builders that validate lessons and challenges before they exist.

Each builder accumulates fields into private staging lists and, on
``build()``, validates them and returns a frozen entity holding tuples.
Builders are single-use: a second ``build()`` or any mutation after
``build()`` raises ``RuntimeError``.
"""

from __future__ import annotations

from typing import Any

from .errors import ConstructionError, ErrorKind
from .models import (
    Challenge,
    ChallengeType,
    ContentBlock,
    ContentKind,
    Lesson,
    QuizQuestion,
    TestCase,
    option_label,
)


def _require_identity(kind_name: str, entity_id: str, title: str) -> None:
    """Validate the id/title pair every builder starts from."""
    if not isinstance(entity_id, str) or not entity_id.strip():
        raise ConstructionError(ErrorKind.INVALID_IDENTITY, f"{kind_name} id must be a non-empty string.")
    if not isinstance(title, str) or not title.strip():
        raise ConstructionError(
            ErrorKind.INVALID_IDENTITY, f"{kind_name} '{entity_id}' must have a non-empty title.", entity_id
        )


class _SingleUseBuilder:
    """Shared consumed-state guard."""

    _built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise RuntimeError(f"{type(self).__name__} has already been built; create a new builder.")

    def _consume(self) -> None:
        self._ensure_open()
        self._built = True


class LessonBuilder(_SingleUseBuilder):
    """Accumulate lesson content and validate it into a :class:`Lesson`."""

    def __init__(self, lesson_id: str, title: str) -> None:
        _require_identity("Lesson", lesson_id, title)
        self._id = lesson_id
        self._title = title
        self._blocks: list[ContentBlock] = []
        self._challenges: list[Challenge] = []
        self._quiz_questions: list[QuizQuestion] = []
        self._estimated_minutes: int | None = None

    def add_content(self, heading: str, body: str, kind: ContentKind) -> LessonBuilder:
        """Append one content block of the given kind."""
        self._ensure_open()
        if not heading or not heading.strip():
            raise ConstructionError(
                ErrorKind.INVALID_CONTENT_BLOCK, f"Lesson '{self._id}' has a content block without a heading.", self._id
            )
        if not body or not body.strip():
            raise ConstructionError(
                ErrorKind.INVALID_CONTENT_BLOCK,
                f"Lesson '{self._id}' content block '{heading}' has an empty body.",
                self._id,
            )
        self._blocks.append(ContentBlock(kind=kind, heading=heading, body=body))
        return self

    def add_theory(self, heading: str, body: str) -> LessonBuilder:
        return self.add_content(heading, body, ContentKind.THEORY)

    def add_example(self, heading: str, body: str) -> LessonBuilder:
        return self.add_content(heading, body, ContentKind.EXAMPLE)

    def add_analogy(self, heading: str, body: str) -> LessonBuilder:
        return self.add_content(heading, body, ContentKind.ANALOGY)

    def add_key_point(self, heading: str, body: str) -> LessonBuilder:
        return self.add_content(heading, body, ContentKind.KEY_POINT)

    def add_warning(self, heading: str, body: str) -> LessonBuilder:
        return self.add_content(heading, body, ContentKind.WARNING)

    def add_challenge(self, challenge: Challenge) -> LessonBuilder:
        self._ensure_open()
        self._challenges.append(challenge)
        return self

    def add_quiz_question(self, question: QuizQuestion) -> LessonBuilder:
        self._ensure_open()
        self._quiz_questions.append(question)
        return self

    def estimated_minutes(self, minutes: int) -> LessonBuilder:
        self._ensure_open()
        # bool is an int subclass
        if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes <= 0:
            raise ConstructionError(
                ErrorKind.INVALID_DURATION,
                f"Lesson '{self._id}' estimated minutes must be a positive integer, got {minutes!r}.",
                self._id,
            )
        self._estimated_minutes = minutes
        return self

    def build(self) -> Lesson:
        """Validate and return the frozen lesson."""
        self._ensure_open()
        if self._estimated_minutes is None:
            raise ConstructionError(
                ErrorKind.INVALID_DURATION, f"Lesson '{self._id}' has no estimated duration.", self._id
            )
        _validate_unique_challenge_ids(self._id, self._challenges)
        for position, question in enumerate(self._quiz_questions, start=1):
            _validate_quiz_question(self._id, position, question)

        self._consume()
        return Lesson(
            id=self._id,
            title=self._title,
            estimated_minutes=self._estimated_minutes,
            blocks=tuple(self._blocks),
            challenges=tuple(self._challenges),
            quiz_questions=tuple(self._quiz_questions),
        )


class ChallengeBuilder(_SingleUseBuilder):
    """Accumulate challenge fields and validate them into a :class:`Challenge`."""

    def __init__(self, challenge_id: str, title: str, challenge_type: ChallengeType) -> None:
        _require_identity("Challenge", challenge_id, title)
        if not isinstance(challenge_type, ChallengeType):
            raise TypeError(f"challenge_type must be a ChallengeType, got {challenge_type!r}.")
        self._id = challenge_id
        self._title = title
        self._type = challenge_type
        self._description: str | None = None
        self._options: list[str] = []
        self._labels: set[str] = set()
        self._correct_answer: str | None = None
        self._starter_code = ""
        self._method_signature = ""
        self._test_cases: list[TestCase] = []

    def description(self, text: str) -> ChallengeBuilder:
        self._ensure_open()
        self._description = text
        return self

    def add_multiple_choice_option(self, option: str) -> ChallengeBuilder:
        """Append one label-prefixed option such as ``"A) text"``."""
        self._ensure_open()
        label = option_label(option)
        if not label.strip():
            raise ConstructionError(
                ErrorKind.INVALID_OPTION,
                f"Challenge '{self._id}' option {option!r} has no label prefix like 'A)'.",
                self._id,
            )
        if label in self._labels:
            raise ConstructionError(
                ErrorKind.DUPLICATE_OPTION, f"Challenge '{self._id}' has duplicate option label '{label}'.", self._id
            )
        self._labels.add(label)
        self._options.append(option)
        return self

    def correct_answer(self, label_key: str) -> ChallengeBuilder:
        self._ensure_open()
        self._correct_answer = label_key
        return self

    def starter_code(self, code: str) -> ChallengeBuilder:
        self._ensure_open()
        self._starter_code = code
        return self

    def method_signature(self, signature: str) -> ChallengeBuilder:
        self._ensure_open()
        self._method_signature = signature
        return self

    def add_test_case(
        self,
        test_case: TestCase | str,
        inputs: tuple[Any, ...] | list[Any] = (),
        expected_output: Any = None,
    ) -> ChallengeBuilder:
        """Append a test case, either prebuilt or from description/inputs/expected output."""
        self._ensure_open()
        if not isinstance(test_case, TestCase):
            test_case = TestCase(description=test_case, inputs=tuple(inputs), expected_output=expected_output)
        self._test_cases.append(test_case)
        return self

    def build(self) -> Challenge:
        """Validate and return the frozen challenge."""
        self._ensure_open()
        if self._description is None or not self._description.strip():
            raise ConstructionError(
                ErrorKind.MISSING_PROMPT, f"Challenge '{self._id}' has no description.", self._id
            )
        if self._type is ChallengeType.MULTIPLE_CHOICE:
            self._validate_multiple_choice()
        elif self._options or self._correct_answer is not None:
            if self._correct_answer is not None:
                self._validate_correct_answer()
            raise ConstructionError(
                ErrorKind.INVALID_OPTION,
                f"Challenge '{self._id}' ({self._type.value}) does not take options or a correct answer.",
                self._id,
            )
        elif self._type.is_coding and not self._test_cases:
            raise ConstructionError(
                ErrorKind.MISSING_TEST_CASES, f"Coding challenge '{self._id}' has no test cases.", self._id
            )

        self._consume()
        return Challenge(
            id=self._id,
            title=self._title,
            type=self._type,
            description=self._description,
            options=tuple(self._options),
            correct_answer=self._correct_answer,
            starter_code=self._starter_code,
            method_signature=self._method_signature,
            test_cases=tuple(self._test_cases),
        )

    def _validate_multiple_choice(self) -> None:
        if not self._options:
            raise ConstructionError(
                ErrorKind.MISSING_OPTIONS, f"Multiple choice challenge '{self._id}' has no options.", self._id
            )
        self._validate_correct_answer()

    def _validate_correct_answer(self) -> None:
        """The correct answer must equal the label of exactly one option."""
        matches = [option for option in self._options if option_label(option) == self._correct_answer]
        if len(matches) != 1:
            labels = ", ".join(option_label(option) for option in self._options)
            raise ConstructionError(
                ErrorKind.DANGLING_CORRECT_ANSWER,
                f"Challenge '{self._id}' correct answer {self._correct_answer!r} does not match any option ({labels}).",
                self._id,
            )


def _validate_unique_challenge_ids(lesson_id: str, challenges: list[Challenge]) -> None:
    seen: set[str] = set()
    for challenge in challenges:
        if challenge.id in seen:
            raise ConstructionError(
                ErrorKind.DUPLICATE_CHALLENGE_ID,
                f"Lesson '{lesson_id}' has duplicate challenge id '{challenge.id}'.",
                lesson_id,
            )
        seen.add(challenge.id)


def _validate_quiz_question(lesson_id: str, position: int, question: QuizQuestion) -> None:
    """Validate a quiz question at the moment its lesson is built."""
    label = question.id or f"#{position}"
    if not question.prompt or not question.prompt.strip():
        raise ConstructionError(
            ErrorKind.MISSING_PROMPT, f"Lesson '{lesson_id}' quiz question {label} has no prompt.", lesson_id
        )
    if not question.choices:
        raise ConstructionError(
            ErrorKind.MISSING_OPTIONS, f"Lesson '{lesson_id}' quiz question {label} has no choices.", lesson_id
        )
    if question.correct_choice_key not in question.choices:
        raise ConstructionError(
            ErrorKind.DANGLING_CORRECT_ANSWER,
            f"Lesson '{lesson_id}' quiz question {label} correct key {question.correct_choice_key!r} "
            f"is not one of {list(question.choices)}.",
            lesson_id,
        )
