# core/llm_interface.py
"""
Handles all direct interactions with the hosted generation model (Gemini
``generateContent``). Includes the request transport, response envelope
extraction, lesson plan decoding and the bounded exponential backoff loop.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

Copyright 2025 Dennis Lewis
"""

# Standard library imports
import asyncio
import json
from dataclasses import dataclass

# Type hints
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

# Local imports
from config import settings
from core.errors import (
    DecodeError,
    EnvelopeShapeError,
    ExhaustedRetriesError,
    GenerationAttemptError,
    MissingCredentialError,
    TransportError,
)

from models import GenerationRequest, LessonPlan

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RetryState:
    """Per-call retry bookkeeping. A fresh value is threaded through each attempt."""

    attempt_index: int
    current_delay_ms: int

    def advance(self) -> "RetryState":
        return RetryState(self.attempt_index + 1, self.current_delay_ms * 2)


def extract_envelope_text(data: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` or raise EnvelopeShapeError."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise EnvelopeShapeError(
            "Invalid response structure from API: missing "
            "candidates[0].content.parts[0].text"
        ) from e
    if not isinstance(text, str) or not text:
        raise EnvelopeShapeError(
            "Invalid response structure from API: text part is empty or not a string."
        )
    return text


def decode_lesson_plan(text: str) -> LessonPlan:
    """Decode the embedded JSON text into a LessonPlan or raise DecodeError."""
    try:
        return LessonPlan.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError(
            f"Generated text is not a valid lesson plan ({e.error_count()} error(s)): "
            f"{e.errors(include_url=False)[:3]}"
        ) from e


class LLMService:
    """Utility class for calling the lesson plan generation endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        api_base: str | None = None,
        model_name: str | None = None,
        timeout: float | None = settings.HTTPX_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.api_base = (api_base or settings.GEMINI_API_BASE).rstrip("/")
        self.model_name = model_name or settings.GEMINI_MODEL
        # Use a single async client for all requests to reuse connections
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)
        logger.info(f"LLMService initialized for model '{self.model_name}'.")

    @property
    def endpoint_url(self) -> str:
        return f"{self.api_base}/models/{self.model_name}:generateContent"

    async def _backoff_delay(self, delay_ms: int) -> None:
        """Suspend the calling task without blocking the event loop."""
        await asyncio.sleep(delay_ms / 1000)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise MissingCredentialError(
                "No API key configured. Set GEMINI_API_KEY or pass api_key explicitly."
            )
        return {"Content-Type": "application/json", "x-goog-api-key": self.api_key}

    async def _post_generate_content(
        self, payload: dict[str, Any], headers: dict[str, str]
    ) -> Any:
        """Send one request and return the parsed response envelope."""
        try:
            response = await self._client.post(
                self.endpoint_url, json=payload, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e_status:
            raise TransportError(
                f"API request failed with status {e_status.response.status_code}: "
                f"{e_status.response.reason_phrase}. Body: {e_status.response.text[:200]}",
                status_code=e_status.response.status_code,
            ) from e_status
        except httpx.RequestError as e_req:
            raise TransportError(f"Request error: {e_req!r}") from e_req

        try:
            return response.json()
        except json.JSONDecodeError as e_json:
            raise EnvelopeShapeError(
                f"Failed to decode JSON response envelope: {e_json}. "
                f"Response text: {response.text[:200]}"
            ) from e_json

    async def _attempt(
        self, payload: dict[str, Any], headers: dict[str, str]
    ) -> LessonPlan:
        data = await self._post_generate_content(payload, headers)
        text = extract_envelope_text(data)
        return decode_lesson_plan(text)

    async def invoke(
        self,
        request: GenerationRequest,
        max_attempts: int | None = None,
        initial_delay_ms: int | None = None,
    ) -> LessonPlan:
        """Deliver ``request`` and return the decoded lesson plan.

        Transport, envelope and decode failures are retried up to
        ``max_attempts`` times, sleeping ``initial_delay_ms`` before the second
        attempt and doubling the delay after each further failure. When every
        attempt fails, ``ExhaustedRetriesError`` wraps the last failure.
        """
        attempts = (
            max_attempts if max_attempts is not None else settings.LLM_RETRY_ATTEMPTS
        )
        delay_ms = (
            initial_delay_ms
            if initial_delay_ms is not None
            else settings.LLM_RETRY_DELAY_MS
        )
        if attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {attempts}.")
        if delay_ms < 0:
            raise ValueError(f"initial_delay_ms must not be negative, got {delay_ms}.")

        headers = self._headers()
        payload = request.to_payload()
        state = RetryState(attempt_index=0, current_delay_ms=delay_ms)

        while True:
            try:
                plan = await self._attempt(payload, headers)
            except GenerationAttemptError as exc:
                is_final = state.attempt_index >= attempts - 1
                if is_final:
                    logger.error(
                        f"Lesson generation: All {attempts} attempts failed. "
                        f"Last error ({exc.failure_kind}): {exc}"
                    )
                    raise ExhaustedRetriesError(attempts, exc) from exc
                logger.warning(
                    f"Attempt {state.attempt_index + 1}/{attempts} failed "
                    f"({exc.failure_kind}): {exc}. Retrying in {state.current_delay_ms}ms..."
                )
                await self._backoff_delay(state.current_delay_ms)
                state = state.advance()
                continue

            logger.debug(
                f"Lesson plan '{plan.title}' decoded on attempt {state.attempt_index + 1}."
            )
            return plan


llm_service = LLMService()
