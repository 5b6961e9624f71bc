import copy
import dataclasses

import pytest

from socratic_mentor.builders import ChallengeBuilder, LessonBuilder
from socratic_mentor.errors import ConstructionError, ErrorKind
from socratic_mentor.models import ChallengeType, ContentKind, QuizQuestion, TestCase

from factories import make_challenge


def _kind(exc_info: pytest.ExceptionInfo[ConstructionError]) -> ErrorKind:
    return exc_info.value.kind


def test_lesson_blocks_round_trip_in_call_order() -> None:
    lesson = (
        LessonBuilder("l1", "Lesson One")
        .add_theory("T", "theory body")
        .add_example("E", "example body")
        .add_analogy("A", "analogy body")
        .add_key_point("K", "key body")
        .add_warning("W", "warning body")
        .add_theory("T2", "second theory")
        .estimated_minutes(12)
        .build()
    )

    assert [(block.heading, block.body, block.kind) for block in lesson.blocks] == [
        ("T", "theory body", ContentKind.THEORY),
        ("E", "example body", ContentKind.EXAMPLE),
        ("A", "analogy body", ContentKind.ANALOGY),
        ("K", "key body", ContentKind.KEY_POINT),
        ("W", "warning body", ContentKind.WARNING),
        ("T2", "second theory", ContentKind.THEORY),
    ]
    assert lesson.estimated_minutes == 12
    assert lesson.challenges == ()
    assert lesson.quiz_questions == ()


def test_lesson_requires_identity() -> None:
    with pytest.raises(ConstructionError) as exc_info:
        LessonBuilder("", "Title")
    assert _kind(exc_info) is ErrorKind.INVALID_IDENTITY

    with pytest.raises(ConstructionError) as exc_info:
        LessonBuilder("l1", "   ")
    assert _kind(exc_info) is ErrorKind.INVALID_IDENTITY
    assert exc_info.value.entity_id == "l1"


@pytest.mark.parametrize("minutes", [0, -5, True, 2.5])
def test_lesson_rejects_non_positive_duration(minutes: object) -> None:
    with pytest.raises(ConstructionError) as exc_info:
        LessonBuilder("l1", "Title").estimated_minutes(minutes)  # type: ignore[arg-type]
    assert _kind(exc_info) is ErrorKind.INVALID_DURATION


def test_lesson_build_requires_duration() -> None:
    with pytest.raises(ConstructionError) as exc_info:
        LessonBuilder("l1", "Title").add_theory("H", "B").build()
    assert _kind(exc_info) is ErrorKind.INVALID_DURATION


def test_content_block_requires_heading_and_body() -> None:
    builder = LessonBuilder("l1", "Title")
    with pytest.raises(ConstructionError) as exc_info:
        builder.add_theory("", "body")
    assert _kind(exc_info) is ErrorKind.INVALID_CONTENT_BLOCK
    with pytest.raises(ConstructionError) as exc_info:
        builder.add_warning("Heading", "")
    assert _kind(exc_info) is ErrorKind.INVALID_CONTENT_BLOCK


def test_empty_lesson_body_is_legal() -> None:
    lesson = LessonBuilder("l1", "Only a title").estimated_minutes(5).build()
    assert lesson.blocks == ()
    assert lesson.title == "Only a title"


def test_lesson_builder_is_single_use() -> None:
    builder = LessonBuilder("l1", "Title").add_theory("H", "B").estimated_minutes(5)
    lesson = builder.build()

    with pytest.raises(RuntimeError):
        builder.build()
    with pytest.raises(RuntimeError):
        builder.add_theory("H2", "B2")
    assert len(lesson.blocks) == 1


def test_built_lesson_is_frozen() -> None:
    lesson = LessonBuilder("l1", "Title").estimated_minutes(5).build()
    with pytest.raises(dataclasses.FrozenInstanceError):
        lesson.title = "changed"  # type: ignore[misc]


def test_lesson_rejects_duplicate_challenge_ids() -> None:
    builder = (
        LessonBuilder("l1", "Title")
        .add_challenge(make_challenge("same"))
        .add_challenge(make_challenge("same"))
        .estimated_minutes(5)
    )
    with pytest.raises(ConstructionError) as exc_info:
        builder.build()
    assert _kind(exc_info) is ErrorKind.DUPLICATE_CHALLENGE_ID


def test_lesson_rejects_quiz_question_with_dangling_key() -> None:
    question = QuizQuestion("Pick", correct_choice_key="Z").add_choice("A", "a").add_choice("B", "b")
    builder = LessonBuilder("l1", "Title").add_quiz_question(question).estimated_minutes(5)
    with pytest.raises(ConstructionError) as exc_info:
        builder.build()
    assert _kind(exc_info) is ErrorKind.DANGLING_CORRECT_ANSWER


def test_lesson_rejects_quiz_question_without_choices() -> None:
    builder = LessonBuilder("l1", "Title").add_quiz_question(QuizQuestion("Pick", "A")).estimated_minutes(5)
    with pytest.raises(ConstructionError) as exc_info:
        builder.build()
    assert _kind(exc_info) is ErrorKind.MISSING_OPTIONS


def test_quiz_question_rejects_duplicate_choice_keys() -> None:
    question = QuizQuestion("Pick", "A").add_choice("A", "first")
    with pytest.raises(ConstructionError) as exc_info:
        question.add_choice("A", "again")
    assert _kind(exc_info) is ErrorKind.DUPLICATE_OPTION
    assert dict(question.choices) == {"A": "first"}


def test_quiz_question_choices_keep_insertion_order_and_are_read_only() -> None:
    question = QuizQuestion("Pick", "b").add_choice("c", "3").add_choice("a", "1").add_choice("b", "2")
    assert list(question.choices) == ["c", "a", "b"]
    with pytest.raises(TypeError):
        question.choices["d"] = "4"  # type: ignore[index]


def test_challenge_builds_with_matching_answer() -> None:
    challenge = make_challenge(correct="C")
    assert challenge.options == ("A) x", "B) y", "C) z")
    assert challenge.option_labels == ("A", "B", "C")
    assert challenge.correct_answer == "C"
    assert challenge.type is ChallengeType.MULTIPLE_CHOICE


def test_challenge_rejects_dangling_correct_answer() -> None:
    builder = (
        ChallengeBuilder("c1", "Pick", ChallengeType.MULTIPLE_CHOICE)
        .description("Which?")
        .add_multiple_choice_option("A) x")
        .add_multiple_choice_option("B) y")
        .correct_answer("C")
    )
    with pytest.raises(ConstructionError) as exc_info:
        builder.build()
    assert _kind(exc_info) is ErrorKind.DANGLING_CORRECT_ANSWER
    assert exc_info.value.entity_id == "c1"


@pytest.mark.parametrize("answer", ["b", " B", "B)", "", None])
def test_challenge_answer_match_is_exact(answer: str | None) -> None:
    builder = (
        ChallengeBuilder("c1", "Pick", ChallengeType.MULTIPLE_CHOICE)
        .description("Which?")
        .add_multiple_choice_option("A) x")
        .add_multiple_choice_option("B) y")
    )
    if answer is not None:
        builder.correct_answer(answer)
    with pytest.raises(ConstructionError) as exc_info:
        builder.build()
    assert _kind(exc_info) is ErrorKind.DANGLING_CORRECT_ANSWER


def test_challenge_rejects_duplicate_option_label() -> None:
    builder = ChallengeBuilder("c1", "Pick", ChallengeType.MULTIPLE_CHOICE).add_multiple_choice_option("A) x")
    with pytest.raises(ConstructionError) as exc_info:
        builder.add_multiple_choice_option("A) something else")
    assert _kind(exc_info) is ErrorKind.DUPLICATE_OPTION


def test_challenge_labels_are_case_sensitive() -> None:
    challenge = (
        ChallengeBuilder("c1", "Pick", ChallengeType.MULTIPLE_CHOICE)
        .description("Which?")
        .add_multiple_choice_option("A) upper")
        .add_multiple_choice_option("a) lower")
        .correct_answer("a")
        .build()
    )
    assert challenge.option_labels == ("A", "a")


def test_challenge_rejects_option_without_label() -> None:
    builder = ChallengeBuilder("c1", "Pick", ChallengeType.MULTIPLE_CHOICE)
    with pytest.raises(ConstructionError) as exc_info:
        builder.add_multiple_choice_option("no label here")
    assert _kind(exc_info) is ErrorKind.INVALID_OPTION
    with pytest.raises(ConstructionError) as exc_info:
        builder.add_multiple_choice_option(") empty label")
    assert _kind(exc_info) is ErrorKind.INVALID_OPTION


def test_challenge_requires_options_and_description() -> None:
    with pytest.raises(ConstructionError) as exc_info:
        ChallengeBuilder("c1", "Pick", ChallengeType.MULTIPLE_CHOICE).description("Which?").correct_answer("A").build()
    assert _kind(exc_info) is ErrorKind.MISSING_OPTIONS

    with pytest.raises(ConstructionError) as exc_info:
        ChallengeBuilder("c2", "Pick", ChallengeType.MULTIPLE_CHOICE).add_multiple_choice_option("A) x").build()
    assert _kind(exc_info) is ErrorKind.MISSING_PROMPT


def test_challenge_requires_identity_and_type() -> None:
    with pytest.raises(ConstructionError) as exc_info:
        ChallengeBuilder("", "Pick", ChallengeType.MULTIPLE_CHOICE)
    assert _kind(exc_info) is ErrorKind.INVALID_IDENTITY
    with pytest.raises(TypeError):
        ChallengeBuilder("c1", "Pick", "multiple_choice")  # type: ignore[arg-type]


def test_coding_challenge_needs_test_cases() -> None:
    with pytest.raises(ConstructionError) as exc_info:
        ChallengeBuilder("code", "Write it", ChallengeType.FREE_CODING).description("Do it").build()
    assert _kind(exc_info) is ErrorKind.MISSING_TEST_CASES

    challenge = (
        ChallengeBuilder("code", "Write it", ChallengeType.CODE_COMPLETION)
        .description("Do it")
        .starter_code("int f() {}")
        .method_signature("int f()")
        .add_test_case("returns 1", [], 1)
        .add_test_case(TestCase(description="hidden", inputs=(2,), expected_output=4, visible=False))
        .build()
    )
    assert challenge.correct_answer is None
    assert [case.description for case in challenge.test_cases] == ["returns 1", "hidden"]
    assert challenge.test_cases[0].inputs == ()
    assert challenge.test_cases[1].visible is False


def test_conceptual_challenge_needs_only_description() -> None:
    challenge = ChallengeBuilder("why", "Reflect", ChallengeType.CONCEPTUAL).description("Explain.").build()
    assert challenge.options == ()
    assert challenge.test_cases == ()


def test_challenge_builder_is_single_use() -> None:
    builder = (
        ChallengeBuilder("c1", "Pick", ChallengeType.MULTIPLE_CHOICE)
        .description("Which?")
        .add_multiple_choice_option("A) x")
        .correct_answer("A")
    )
    challenge = builder.build()
    with pytest.raises(RuntimeError):
        builder.add_multiple_choice_option("B) y")
    with pytest.raises(RuntimeError):
        builder.build()
    assert challenge.options == ("A) x",)


@pytest.mark.parametrize(
    "challenge_type", [ChallengeType.CONCEPTUAL, ChallengeType.FREE_CODING, ChallengeType.CODE_COMPLETION]
)
def test_non_multiple_choice_rejects_dangling_correct_answer(challenge_type: ChallengeType) -> None:
    builder = (
        ChallengeBuilder("c1", "Pick", challenge_type)
        .description("Which?")
        .add_multiple_choice_option("A) x")
        .add_multiple_choice_option("B) y")
        .correct_answer("C")
        .add_test_case("t", (), 1)
    )
    with pytest.raises(ConstructionError) as exc_info:
        builder.build()
    assert _kind(exc_info) is ErrorKind.DANGLING_CORRECT_ANSWER


@pytest.mark.parametrize(
    "challenge_type", [ChallengeType.CONCEPTUAL, ChallengeType.FREE_CODING, ChallengeType.CODE_COMPLETION]
)
def test_non_multiple_choice_rejects_options_and_answers(challenge_type: ChallengeType) -> None:
    with_options = (
        ChallengeBuilder("c1", "Pick", challenge_type)
        .description("Which?")
        .add_multiple_choice_option("A) x")
        .add_test_case("t", (), 1)
    )
    with pytest.raises(ConstructionError) as exc_info:
        with_options.build()
    assert _kind(exc_info) is ErrorKind.INVALID_OPTION

    matching_answer = (
        ChallengeBuilder("c2", "Pick", challenge_type)
        .description("Which?")
        .add_multiple_choice_option("A) x")
        .correct_answer("A")
        .add_test_case("t", (), 1)
    )
    with pytest.raises(ConstructionError) as exc_info:
        matching_answer.build()
    assert _kind(exc_info) is ErrorKind.INVALID_OPTION

    answer_only = ChallengeBuilder("c3", "Pick", challenge_type).description("Which?").correct_answer("A")
    with pytest.raises(ConstructionError) as exc_info:
        answer_only.build()
    assert _kind(exc_info) is ErrorKind.DANGLING_CORRECT_ANSWER


def test_construction_error_copies_keep_kind_and_entity() -> None:
    original = ConstructionError(ErrorKind.DUPLICATE_OPTION, "dup", "c1")
    duplicate = copy.copy(original)
    assert duplicate is not original
    assert (duplicate.kind, duplicate.entity_id, str(duplicate)) == (ErrorKind.DUPLICATE_OPTION, "c1", "dup")
