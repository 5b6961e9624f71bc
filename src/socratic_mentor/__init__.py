"""socratic_mentor: curriculum content model, builders, registry and grading."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .builders import ChallengeBuilder, LessonBuilder
from .errors import ConstructionError, ErrorKind
from .grading import QuizResult, grade_challenge, grade_quiz_question
from .models import Challenge, ChallengeType, ContentBlock, ContentKind, Epoch, Lesson, QuizQuestion, TestCase
from .registry import CurriculumRegistry, EpochDefinition

__all__ = [
    "Challenge",
    "ChallengeBuilder",
    "ChallengeType",
    "ConstructionError",
    "ContentBlock",
    "ContentKind",
    "CurriculumRegistry",
    "Epoch",
    "EpochDefinition",
    "ErrorKind",
    "Lesson",
    "LessonBuilder",
    "QuizQuestion",
    "QuizResult",
    "TestCase",
    "__version__",
    "grade_challenge",
    "grade_quiz_question",
]


def _version_from_pyproject() -> str | None:
    """Read [project].version when running from a source checkout."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.exists():
            continue
        with pyproject.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
        if project.get("name") == "socratic-mentor":
            return project.get("version")
    return None


_project_version = _version_from_pyproject()
if _project_version is not None:
    __version__ = _project_version
else:
    try:
        __version__ = version("socratic-mentor")
    except PackageNotFoundError:
        __version__ = "0+unknown"
