"""Errors raised while constructing curriculum content."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a construction failure."""

    INVALID_IDENTITY = "invalid_identity"
    INVALID_DURATION = "invalid_duration"
    INVALID_LESSON_COUNT = "invalid_lesson_count"
    INVALID_CONTENT_BLOCK = "invalid_content_block"
    DUPLICATE_OPTION = "duplicate_option"
    INVALID_OPTION = "invalid_option"
    MISSING_OPTIONS = "missing_options"
    MISSING_PROMPT = "missing_prompt"
    MISSING_TEST_CASES = "missing_test_cases"
    DANGLING_CORRECT_ANSWER = "dangling_correct_answer"
    DUPLICATE_CHALLENGE_ID = "duplicate_challenge_id"
    DUPLICATE_LESSON_ID = "duplicate_lesson_id"
    DUPLICATE_EPOCH_ID = "duplicate_epoch_id"


class ConstructionError(ValueError):
    """An entity could not be built because one of its invariants failed.

    Raised by builders and by registry initialization only. Malformed content
    is an authoring defect, so callers are expected to let it propagate.
    """

    def __init__(self, kind: ErrorKind, message: str, entity_id: str = "") -> None:
        super().__init__(message)
        self.kind = kind
        self.entity_id = entity_id

    def __reduce__(self) -> tuple[type[ConstructionError], tuple[ErrorKind, str, str]]:
        return type(self), (self.kind, str(self), self.entity_id)

    def __repr__(self) -> str:
        return f"ConstructionError(kind={self.kind.name}, entity_id={self.entity_id!r}, message={str(self)!r})"
