# agents/lesson_planner_agent.py
import structlog
from config import settings
from core.errors import InputValidationError
from core.llm_interface import LLMService, llm_service
from lesson_planning_logic import build_generation_request

from models import LessonPlan

logger = structlog.get_logger(__name__)


class LessonPlannerAgent:
    """LLM-powered generator of complete lesson plans."""

    def __init__(self, service: LLMService | None = None):
        self.service = service or llm_service
        logger.info(
            f"LessonPlannerAgent initialized with model: {self.service.model_name}"
        )

    def _validate_inputs(self, topic: str, subject: str) -> None:
        if not topic or not topic.strip() or not subject or not subject.strip():
            raise InputValidationError("Please enter a lesson topic and subject.")

    async def generate_lesson_plan(
        self,
        topic: str,
        grade_level: str,
        subject: str,
        max_attempts: int | None = None,
        initial_delay_ms: int | None = None,
    ) -> LessonPlan:
        """Validate inputs, build the request and invoke the model with retries.

        Raises ``InputValidationError`` without touching the network when the
        topic or subject is blank, and ``ExhaustedRetriesError`` when every
        attempt fails.
        """
        self._validate_inputs(topic, subject)
        topic = topic.strip()
        subject = subject.strip()
        grade_level = (grade_level or "").strip() or settings.DEFAULT_GRADE_LEVEL

        request = build_generation_request(topic, grade_level, subject)
        logger.info(
            f"Generating lesson plan on '{topic}' for {grade_level} {subject}."
        )
        plan = await self.service.invoke(
            request,
            max_attempts=max_attempts,
            initial_delay_ms=initial_delay_ms,
        )
        logger.info(
            f"Lesson plan '{plan.title}' generated: {len(plan.slides)} slides, "
            f"{len(plan.quiz)} quiz questions."
        )
        return plan


async def generate_lesson_plan(
    topic: str,
    grade_level: str,
    subject: str,
    service: LLMService | None = None,
) -> LessonPlan:
    """Generate a lesson plan with the default retry policy.

    Without ``service`` the shared ``llm_service`` is used. Its connection pool
    belongs to the first event loop that uses it, so hosts that call
    ``asyncio.run`` more than once should pass their own ``LLMService`` and
    close it with ``aclose()``.
    """
    agent = LessonPlannerAgent(service)
    return await agent.generate_lesson_plan(topic, grade_level, subject)
