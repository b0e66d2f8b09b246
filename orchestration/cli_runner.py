# orchestration/cli_runner.py
"""Command-line runner for the lesson planner."""

from __future__ import annotations

import asyncio

import structlog
from agents.lesson_planner_agent import LessonPlannerAgent
from core.errors import ExhaustedRetriesError, LessonPlanError
from core.llm_interface import LLMService
from rich.console import Console
from rich.markup import escape
from ui.lesson_display import render_lesson_plan
from utils.logging import setup_logging

logger = structlog.get_logger(__name__)


async def _run(
    service: LLMService,
    topic: str,
    grade_level: str,
    subject: str,
    as_json: bool,
    max_attempts: int | None,
    show_answers: bool,
    console: Console,
) -> None:
    agent = LessonPlannerAgent(service)
    try:
        plan = await agent.generate_lesson_plan(
            topic, grade_level, subject, max_attempts=max_attempts
        )
    finally:
        await service.aclose()
    if as_json:
        console.print_json(plan.model_dump_json())
    else:
        render_lesson_plan(plan, console, show_answers=show_answers)


def run(
    topic: str,
    grade_level: str,
    subject: str,
    as_json: bool = False,
    max_attempts: int | None = None,
    show_answers: bool = True,
    service: LLMService | None = None,
    console: Console | None = None,
) -> int:
    """Generate one lesson plan and print it. Returns the process exit code."""
    setup_logging()
    console = console or Console()
    service = service or LLMService()
    try:
        asyncio.run(
            _run(
                service,
                topic,
                grade_level,
                subject,
                as_json,
                max_attempts,
                show_answers,
                console,
            )
        )
    except ExhaustedRetriesError as exc:
        logger.error(
            "Lesson generation exhausted retries.",
            attempts=exc.attempts,
            last_failure_kind=exc.last_failure_kind,
        )
        console.print(
            f"[red]An error occurred:[/red] {escape(str(exc))}", highlight=False
        )
        return 1
    except LessonPlanError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return 1
    except KeyboardInterrupt:
        logger.info("Lesson generation cancelled by user.")
        return 130
    return 0
