"""Developer CLI for checking and listing the bundled curriculum."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from . import __version__
from .authoring import lint_epochs
from .errors import ConstructionError
from .logging_config import configure_logging
from .registry import CurriculumRegistry
from .settings import get_settings

PrintFn = Callable[[str], None]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="socratic-mentor", description="Curriculum content tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subcommands = parser.add_subparsers(dest="command")

    check = subcommands.add_parser("check", help="Build every lesson and report authoring warnings")
    check.add_argument("--strict", action="store_true", help="Exit non-zero when there are authoring warnings")

    subcommands.add_parser("list", help="List epochs and their lesson ids")
    return parser


def run(
    argv: list[str] | None = None,
    registry: CurriculumRegistry | None = None,
    print_fn: PrintFn = print,
) -> int:
    """Run the CLI and return the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, debug=settings.debug)

    if registry is None:
        registry = CurriculumRegistry.from_catalog()
    command = args.command or "check"
    if command == "list":
        return _list_command(registry, print_fn)
    strict = bool(getattr(args, "strict", False)) or settings.strict_authoring
    return _check_command(registry, print_fn, strict=strict)


def _check_command(registry: CurriculumRegistry, print_fn: PrintFn, *, strict: bool) -> int:
    """Build the registry and print a validation summary."""
    try:
        epochs = registry.get_all_epochs()
    except ConstructionError as exc:
        print_fn(f"Curriculum failed to build [{exc.kind.name}]: {exc}")
        return 1

    lessons = [lesson for epoch in epochs for lesson in epoch.lessons]
    challenges = sum(len(lesson.challenges) for lesson in lessons)
    questions = sum(len(lesson.quiz_questions) for lesson in lessons)
    print_fn(f"OK: {len(epochs)} epochs, {len(lessons)} lessons, {challenges} challenges, {questions} quiz questions")

    warnings = lint_epochs(epochs)
    for warning in warnings:
        print_fn(f"warning: {warning}")
    if warnings and strict:
        print_fn(f"{len(warnings)} authoring warning(s) in strict mode.")
        return 1
    return 0


def _list_command(registry: CurriculumRegistry, print_fn: PrintFn) -> int:
    try:
        epochs = registry.get_all_epochs()
    except ConstructionError as exc:
        print_fn(f"Curriculum failed to build [{exc.kind.name}]: {exc}")
        return 1
    for epoch in epochs:
        print_fn(f"{epoch.id}  {epoch}")
        for lesson in epoch.lessons:
            print_fn(f"  {lesson.id}  {lesson.title} ({lesson.estimated_minutes} min)")
    return 0


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
