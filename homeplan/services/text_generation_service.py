"""Text generation service for HomePlan.

Asks a locally hosted, Ollama-compatible model for a free-text
construction plan. The output is advisory prose only; none of the
structured plan values depend on it.

API Details:
- Endpoint: POST {TEXT_GENERATION_URL} (default http://localhost:11434/api/generate)
- Body: {"model": ..., "prompt": ..., "stream": false}
- Response: {"response": "<generated text>", ...}
"""

from typing import Optional

import httpx
import structlog
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from homeplan.config.errors import ErrorCode, HomePlanError
from homeplan.config.settings import settings

logger = structlog.get_logger(__name__)


PROMPT_TEMPLATE = """
You are an AI construction planning assistant for Indian residential projects.

Generate:
1) Floor-wise blueprint layout (text)
2) Week-by-week construction schedule
3) Workforce & cost overview

Inputs:
Area: {area} sq ft
Floors: {floors}
Timeline: {timeline} weeks
"""


def build_prompt(area: float, floors: int, timeline: int) -> str:
    """Build the generation prompt for a project."""
    return PROMPT_TEMPLATE.format(area=area, floors=floors, timeline=timeline)


class TextGenerationService:
    """Client for an Ollama-compatible text generation endpoint.

    An httpx.AsyncClient can be injected (for tests); otherwise one is
    created per request.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url or settings.text_generation_url
        self.model = model or settings.text_generation_model
        self.timeout = timeout or settings.text_generation_timeout_seconds
        self._client = client

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(httpx.ConnectError),
        reraise=True,
    )
    async def _post(self, payload: dict) -> dict:
        if self._client is not None:
            response = await self._client.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(self.url, json=payload)
            response.raise_for_status()
            return response.json()

    async def generate_construction_plan(self, area: float, floors: int, timeline: int) -> str:
        """Generate a free-text construction plan.

        Args:
            area: Built-up area per floor (sq ft).
            floors: Number of floors.
            timeline: Timeline in weeks.

        Returns:
            Generated plan text.

        Raises:
            HomePlanError: On timeout, HTTP failure or a malformed response.
        """
        payload = {
            "model": self.model,
            "prompt": build_prompt(area, floors, timeline),
            "stream": False,
        }

        try:
            data = await self._post(payload)
        except httpx.TimeoutException as e:
            raise HomePlanError(
                code=ErrorCode.TEXT_GENERATION_TIMEOUT,
                message=f"Text generation timed out after {self.timeout}s",
                details={"url": self.url, "original_error": str(e)},
            )
        except httpx.HTTPError as e:
            raise HomePlanError(
                code=ErrorCode.TEXT_GENERATION_ERROR,
                message=f"Text generation request failed: {e}",
                details={"url": self.url, "original_error": str(e)},
            )

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise HomePlanError(
                code=ErrorCode.TEXT_GENERATION_ERROR,
                message="Text generation response has no 'response' text",
                details={"url": self.url},
            )

        logger.info(
            "text_generated",
            model=self.model,
            content_length=len(text),
        )
        return text

    async def generate_plan_narrative(self, area: float, floors: int, timeline: int) -> Optional[str]:
        """Best-effort variant of generate_construction_plan.

        Returns None instead of raising so callers never block on it.
        """
        try:
            return await self.generate_construction_plan(area, floors, timeline)
        except HomePlanError as e:
            logger.warning(
                "text_generation_unavailable",
                code=e.code,
                error=e.message,
            )
            return None
