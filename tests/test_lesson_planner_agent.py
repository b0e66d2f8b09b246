# tests/test_lesson_planner_agent.py
import pytest
from agents import lesson_planner_agent
from agents.lesson_planner_agent import LessonPlannerAgent
from config import settings
from core.errors import InputValidationError

from models import LessonPlan


class FakeService:
    model_name = "fake-model"

    def __init__(self, plan: LessonPlan):
        self.plan = plan
        self.calls: list[dict] = []

    async def invoke(self, request, max_attempts=None, initial_delay_ms=None):
        self.calls.append(
            {
                "request": request,
                "max_attempts": max_attempts,
                "initial_delay_ms": initial_delay_ms,
            }
        )
        return self.plan


@pytest.fixture
def fake_service(sample_plan_dict):
    return FakeService(LessonPlan.model_validate(sample_plan_dict))


@pytest.mark.asyncio
async def test_generate_lesson_plan_returns_plan(fake_service):
    agent = LessonPlannerAgent(fake_service)
    plan = await agent.generate_lesson_plan(
        "  Volcanoes ", "5th Grade", "Science", max_attempts=2, initial_delay_ms=5
    )

    assert plan is fake_service.plan
    call = fake_service.calls[0]
    assert call["max_attempts"] == 2
    assert call["initial_delay_ms"] == 5
    assert '"Volcanoes"' in call["request"].instruction_text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "topic,subject",
    [("", "Science"), ("Volcanoes", ""), ("   ", "Science"), ("Volcanoes", "\t")],
)
async def test_blank_topic_or_subject_rejected_without_call(
    fake_service, topic, subject
):
    agent = LessonPlannerAgent(fake_service)
    with pytest.raises(InputValidationError):
        await agent.generate_lesson_plan(topic, "5th Grade", subject)
    assert fake_service.calls == []


@pytest.mark.asyncio
async def test_blank_grade_uses_default(fake_service):
    agent = LessonPlannerAgent(fake_service)
    await agent.generate_lesson_plan("Volcanoes", "", "Science")
    text = fake_service.calls[0]["request"].instruction_text
    assert f"{settings.DEFAULT_GRADE_LEVEL} Science class" in text


@pytest.mark.asyncio
async def test_module_level_generate_uses_shared_service(monkeypatch, fake_service):
    monkeypatch.setattr(lesson_planner_agent, "llm_service", fake_service)
    plan = await lesson_planner_agent.generate_lesson_plan(
        "Tides", "6th Grade", "Science"
    )
    assert plan.title == fake_service.plan.title
    assert fake_service.calls[0]["max_attempts"] is None


@pytest.mark.asyncio
async def test_module_level_generate_accepts_service(monkeypatch, fake_service):
    shared = FakeService(fake_service.plan)
    monkeypatch.setattr(lesson_planner_agent, "llm_service", shared)

    await lesson_planner_agent.generate_lesson_plan(
        "Tides", "6th Grade", "Science", service=fake_service
    )

    assert len(fake_service.calls) == 1
    assert shared.calls == []
