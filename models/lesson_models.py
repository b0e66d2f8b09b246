# models/lesson_models.py
"""Pydantic models for the decoded lesson plan."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

_BULLET_MARKER_RE = re.compile(r"^\s*[-*]\s*")


class LessonBaseModel(BaseModel):
    """Base model that ignores fields the model adds beyond the schema."""

    model_config = ConfigDict(extra="ignore")


class Slide(LessonBaseModel):
    title: str
    content: str

    def bullet_points(self) -> list[str]:
        """Return the non-blank content lines with one leading bullet marker removed."""
        return [
            _BULLET_MARKER_RE.sub("", line, count=1)
            for line in self.content.split("\n")
            if line.strip()
        ]


class QuizItem(LessonBaseModel):
    question: str
    options: list[str]
    answer: str


class Homework(LessonBaseModel):
    title: str
    description: str


class LessonPlan(LessonBaseModel):
    """A complete lesson plan as returned by the generation endpoint."""

    title: str
    learning_objectives: list[str]
    slides: list[Slide]
    quiz: list[QuizItem]
    homework: Homework
