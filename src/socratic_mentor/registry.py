"""Curriculum registry: builds the epoch tree once and serves read queries."""

from __future__ import annotations

import copy
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import structlog

from .errors import ConstructionError, ErrorKind
from .models import Epoch, Lesson

logger = structlog.get_logger(__name__)

LessonFactory = Callable[[], Lesson]


@dataclass(frozen=True)
class EpochDefinition:
    """Assembly routine for one epoch: metadata plus ordered lesson factories."""

    id: str
    title: str
    description: str
    expected_lesson_count: int
    lesson_factories: tuple[LessonFactory, ...]
    estimated_hours: int = 0

    def assemble(self) -> Epoch:
        """Run each lesson factory in order and return the frozen epoch."""
        if not self.id.strip() or not self.title.strip():
            raise ConstructionError(ErrorKind.INVALID_IDENTITY, "Epoch id and title must be non-empty.", self.id)
        if self.estimated_hours < 0:
            raise ConstructionError(
                ErrorKind.INVALID_DURATION,
                f"Epoch '{self.id}' estimated hours must not be negative, got {self.estimated_hours}.",
                self.id,
            )
        if self.expected_lesson_count < 0:
            raise ConstructionError(
                ErrorKind.INVALID_LESSON_COUNT,
                f"Epoch '{self.id}' expected lesson count must not be negative, got {self.expected_lesson_count}.",
                self.id,
            )
        lessons = tuple(factory() for factory in self.lesson_factories)
        return Epoch(
            id=self.id,
            title=self.title,
            description=self.description,
            expected_lesson_count=self.expected_lesson_count,
            lessons=lessons,
            estimated_hours=self.estimated_hours,
        )


class CurriculumRegistry:
    """Ordered collection of epochs, assembled at most once per instance.

    The first call to :meth:`initialize` (directly, or through any query)
    runs every epoch definition under a lock. Concurrent callers wait for that
    build and see the same result. A failed build is remembered and re-raised
    to every later caller; the registry never retries or serves a partial
    tree.
    """

    def __init__(self, definitions: Sequence[EpochDefinition]) -> None:
        self._definitions = tuple(definitions)
        self._lock = threading.Lock()
        self._epochs: tuple[Epoch, ...] | None = None
        self._failure: Exception | None = None
        self._build_count = 0

    @classmethod
    def from_catalog(cls) -> CurriculumRegistry:
        """Create a registry over the bundled course content."""
        from .content import CATALOG

        return cls(CATALOG)

    @property
    def initialized(self) -> bool:
        return self._epochs is not None

    @property
    def build_count(self) -> int:
        """Number of build attempts; never more than one."""
        return self._build_count

    def initialize(self) -> tuple[Epoch, ...]:
        """Build the epoch tree if needed and return it.

        Callers arriving after a failed build get a fresh copy of the original
        error, chained to it, so the stored exception's traceback never grows.
        """
        epochs = self._epochs
        if epochs is not None:
            return epochs
        with self._lock:
            if self._failure is not None:
                raise copy.copy(self._failure).with_traceback(None) from self._failure
            if self._epochs is None:
                self._epochs = self._build()
            return self._epochs

    def _build(self) -> tuple[Epoch, ...]:
        self._build_count += 1
        try:
            epochs = tuple(definition.assemble() for definition in self._definitions)
            _validate_unique_epoch_ids(epochs)
            _validate_unique_lesson_ids(epochs)
        except ConstructionError as exc:
            self._failure = exc
            logger.error(
                "curriculum.initialization_failed",
                kind=exc.kind.name,
                entity_id=exc.entity_id,
                error=str(exc),
            )
            raise
        except Exception as exc:
            self._failure = exc
            logger.error("curriculum.initialization_failed", error=repr(exc))
            raise
        logger.info(
            "curriculum.initialized",
            epochs=len(epochs),
            lessons=sum(epoch.lesson_count for epoch in epochs),
        )
        return epochs

    def get_all_epochs(self) -> list[Epoch]:
        """Return all epochs in curriculum order as a new list."""
        return list(self.initialize())

    def get_epoch_by_id(self, epoch_id: str) -> Epoch | None:
        """Return the epoch with this exact id, or ``None``."""
        for epoch in self.initialize():
            if epoch.id == epoch_id:
                return epoch
        return None

    def get_lesson(self, epoch_id: str, lesson_id: str) -> Lesson | None:
        """Return a lesson within a specific epoch, or ``None``."""
        epoch = self.get_epoch_by_id(epoch_id)
        if epoch is None:
            return None
        for lesson in epoch.lessons:
            if lesson.id == lesson_id:
                return lesson
        return None

    def find_lesson(self, lesson_id: str) -> tuple[Epoch, Lesson] | None:
        """Locate a lesson by its globally unique id."""
        for epoch in self.initialize():
            for lesson in epoch.lessons:
                if lesson.id == lesson_id:
                    return epoch, lesson
        return None

    def get_next_lesson(self, epoch_id: str, lesson_id: str) -> Lesson | None:
        """Return the lesson after ``lesson_id`` in its epoch; ``None`` at the end."""
        epoch = self.get_epoch_by_id(epoch_id)
        if epoch is None:
            return None
        lessons = epoch.lessons
        for index in range(len(lessons) - 1):
            if lessons[index].id == lesson_id:
                return lessons[index + 1]
        return None

    def get_previous_lesson(self, epoch_id: str, lesson_id: str) -> Lesson | None:
        """Return the lesson before ``lesson_id`` in its epoch; ``None`` at the start."""
        epoch = self.get_epoch_by_id(epoch_id)
        if epoch is None:
            return None
        lessons = epoch.lessons
        for index in range(1, len(lessons)):
            if lessons[index].id == lesson_id:
                return lessons[index - 1]
        return None

    def get_first_lesson(self, epoch_id: str) -> Lesson | None:
        epoch = self.get_epoch_by_id(epoch_id)
        if epoch is None or not epoch.lessons:
            return None
        return epoch.lessons[0]

    def total_lesson_count(self) -> int:
        return sum(epoch.lesson_count for epoch in self.initialize())


def _validate_unique_epoch_ids(epochs: Sequence[Epoch]) -> None:
    seen: set[str] = set()
    for epoch in epochs:
        if epoch.id in seen:
            raise ConstructionError(ErrorKind.DUPLICATE_EPOCH_ID, f"Duplicate epoch id: {epoch.id}", epoch.id)
        seen.add(epoch.id)


def _validate_unique_lesson_ids(epochs: Sequence[Epoch]) -> None:
    """Validate that lesson ids are unique across every epoch."""
    seen: dict[str, str] = {}
    for epoch in epochs:
        for lesson in epoch.lessons:
            previous = seen.get(lesson.id)
            if previous is not None:
                raise ConstructionError(
                    ErrorKind.DUPLICATE_LESSON_ID,
                    f"Duplicate lesson id: {lesson.id} (in {previous} and {epoch.id})",
                    lesson.id,
                )
            seen[lesson.id] = epoch.id
