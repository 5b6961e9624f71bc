"""Bundled course content, in canonical curriculum order."""

from __future__ import annotations

from ..registry import EpochDefinition
from . import epoch0, epoch1

CATALOG: tuple[EpochDefinition, ...] = (
    EpochDefinition(
        id="epoch-0",
        title="Epoch 0: The Foundation",
        description="What is a program? What is Java? Why does any of this matter?",
        expected_lesson_count=4,
        estimated_hours=5,
        lesson_factories=(epoch0.lesson_01, epoch0.lesson_02, epoch0.lesson_03, epoch0.lesson_04),
    ),
    EpochDefinition(
        id="epoch-1",
        title="Epoch 1: The Bare Essentials",
        description="How do I make the computer remember things and make decisions?",
        expected_lesson_count=3,
        estimated_hours=15,
        lesson_factories=(epoch1.lesson_01, epoch1.lesson_02, epoch1.lesson_03),
    ),
)
