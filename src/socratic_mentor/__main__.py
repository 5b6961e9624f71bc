"""Module entrypoint for `python -m socratic_mentor`."""

from __future__ import annotations

from .main import main_entry

if __name__ == "__main__":  # pragma: no cover
    main_entry()
