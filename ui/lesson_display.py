"""Rich-based terminal rendering of a generated lesson plan."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from models import LessonPlan, QuizItem, Slide


def _bullets(lines: list[str]) -> Text:
    text = Text()
    for i, line in enumerate(lines):
        if i:
            text.append("\n")
        text.append(f"  • {line}")
    return text


def _slide_panel(index: int, slide: Slide) -> Panel:
    return Panel(
        _bullets(slide.bullet_points()),
        title=f"Slide {index}: {slide.title}",
        title_align="left",
        border_style="cyan",
    )


def _quiz_text(index: int, item: QuizItem, show_answers: bool) -> Text:
    text = Text(f"{index}. {item.question}", style="bold")
    for offset, option in enumerate(item.options):
        text.append(f"\n   {chr(ord('A') + offset)}) {option}")
    if show_answers:
        text.append(f"\n   Correct Answer: {item.answer}", style="green")
    return text


def build_lesson_renderable(plan: LessonPlan, show_answers: bool = True) -> Group:
    """Compose the whole lesson plan as one Rich renderable."""
    sections = [
        Text(plan.title, style="bold magenta", justify="center"),
        Panel(
            _bullets(plan.learning_objectives),
            title="Learning Objectives",
            border_style="blue",
        ),
        Panel(
            Group(*(_slide_panel(i, s) for i, s in enumerate(plan.slides, start=1))),
            title="Lesson Slides",
            border_style="blue",
        ),
        Panel(
            Group(
                *(
                    _quiz_text(i, q, show_answers)
                    for i, q in enumerate(plan.quiz, start=1)
                )
            ),
            title="Quiz Questions",
            border_style="blue",
        ),
        Panel(
            Text(plan.homework.title, style="bold")
            + Text("\n")
            + Text(plan.homework.description),
            title="Homework Assignment",
            border_style="blue",
        ),
    ]
    return Group(*sections)


def render_lesson_plan(
    plan: LessonPlan, console: Console | None = None, show_answers: bool = True
) -> None:
    """Print the lesson plan to ``console`` (stdout by default)."""
    (console or Console()).print(build_lesson_renderable(plan, show_answers))
