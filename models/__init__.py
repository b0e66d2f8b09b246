"""Central package for Lesson Forge data models."""

from .lesson_models import Homework, LessonPlan, QuizItem, Slide
from .schema import GenerationRequest, SchemaKind, SchemaNode

__all__ = [
    "GenerationRequest",
    "SchemaKind",
    "SchemaNode",
    "LessonPlan",
    "Slide",
    "QuizItem",
    "Homework",
]
