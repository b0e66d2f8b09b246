# lesson_planning_logic.py
"""Builds the schema-constrained request for a lesson plan."""

from __future__ import annotations

from prompt_renderer import render_prompt

from models import GenerationRequest, SchemaNode

LESSON_PROMPT_TEMPLATE = "lesson_planner_agent/generate_lesson_plan.j2"

# Counts requested in the instruction text only; decoding does not enforce them.
OBJECTIVES_RANGE = "3-4"
SLIDES_RANGE = "5-7"
QUIZ_QUESTIONS = 5
QUIZ_OPTIONS = 4

_STRING = SchemaNode.string()

LESSON_PLAN_SCHEMA = SchemaNode.object(
    {
        "title": _STRING,
        "learning_objectives": SchemaNode.array(_STRING),
        "slides": SchemaNode.array(
            SchemaNode.object(
                {"title": _STRING, "content": _STRING},
                required=("title", "content"),
            )
        ),
        "quiz": SchemaNode.array(
            SchemaNode.object(
                {
                    "question": _STRING,
                    "options": SchemaNode.array(_STRING),
                    "answer": _STRING,
                },
                required=("question", "options", "answer"),
            )
        ),
        "homework": SchemaNode.object(
            {"title": _STRING, "description": _STRING},
            required=("title", "description"),
        ),
    },
    required=("title", "learning_objectives", "slides", "quiz", "homework"),
)


def build_generation_request(
    topic: str, grade_level: str, subject: str
) -> GenerationRequest:
    """Assemble the instruction text and output schema for one lesson plan.

    This is a pure function and performs no validation. Called with an empty
    topic or subject it still returns a request, but one the model cannot
    answer sensibly, so callers must reject empty values first (see
    ``LessonPlannerAgent``).
    """
    instruction = render_prompt(
        LESSON_PROMPT_TEMPLATE,
        {
            "topic": topic,
            "grade_level": grade_level,
            "subject": subject,
            "objectives_range": OBJECTIVES_RANGE,
            "slides_range": SLIDES_RANGE,
            "quiz_questions": QUIZ_QUESTIONS,
            "quiz_options": QUIZ_OPTIONS,
        },
    )
    return GenerationRequest(
        instruction_text=instruction, output_schema=LESSON_PLAN_SCHEMA
    )
