# main.py
"""CLI entry point for the Lesson Forge lesson plan generator."""

from __future__ import annotations

import argparse
import sys

from config import settings
from orchestration.cli_runner import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a lesson plan, slides, quiz and homework for a topic."
    )
    parser.add_argument("--topic", required=True, help="Lesson topic")
    parser.add_argument("--subject", required=True, help="Class subject")
    parser.add_argument(
        "--grade",
        default=settings.DEFAULT_GRADE_LEVEL,
        help="Audience grade level (default: %(default)s)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the raw lesson plan JSON"
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Override the number of generation attempts",
    )
    parser.add_argument(
        "--hide-answers",
        action="store_true",
        help="Leave quiz answers out of the rendered plan",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse command-line arguments and generate a lesson plan."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_attempts is not None and args.max_attempts < 1:
        parser.error("--max-attempts must be at least 1")
    return run(
        args.topic,
        args.grade,
        args.subject,
        as_json=args.json,
        max_attempts=args.max_attempts,
        show_answers=not args.hide_answers,
    )


if __name__ == "__main__":
    sys.exit(main())
