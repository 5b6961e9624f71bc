from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from socratic_mentor.settings import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep MENTOR_* variables from the developer's shell out of tests."""
    for name in ("MENTOR_DEBUG", "MENTOR_LOG_LEVEL", "MENTOR_STRICT_AUTHORING"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(ROOT / "tests")
    reset_settings()
    yield
    reset_settings()
