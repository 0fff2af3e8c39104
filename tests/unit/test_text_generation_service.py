"""Unit tests for the text generation service."""

import json

import httpx
import pytest

from homeplan.config.errors import HomePlanError
from homeplan.services.text_generation_service import (
    TextGenerationService,
    build_prompt,
)


def _service(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return TextGenerationService(
        url="http://ollama.test/api/generate",
        model="test-model",
        timeout=5,
        client=client,
    )


class TestBuildPrompt:
    """Tests for prompt construction."""

    def test_includes_inputs(self):
        prompt = build_prompt(1000, 2, 24)
        assert "Area: 1000 sq ft" in prompt
        assert "Floors: 2" in prompt
        assert "Timeline: 24 weeks" in prompt


class TestTextGenerationService:
    """Tests for TextGenerationService."""

    def test_defaults_from_settings(self):
        service = TextGenerationService()
        assert service.url.endswith("/api/generate")
        assert service.timeout > 0

    @pytest.mark.asyncio
    async def test_generate_construction_plan(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"response": "Week 1: site preparation", "done": True})

        text = await _service(handler).generate_construction_plan(1000, 2, 24)

        assert text == "Week 1: site preparation"
        assert captured["url"] == "http://ollama.test/api/generate"
        assert captured["body"]["model"] == "test-model"
        assert captured["body"]["stream"] is False
        assert "Floors: 2" in captured["body"]["prompt"]

    @pytest.mark.asyncio
    async def test_http_error(self):
        def handler(request):
            return httpx.Response(500, json={"error": "model not loaded"})

        with pytest.raises(HomePlanError) as exc_info:
            await _service(handler).generate_construction_plan(1000, 2, 24)

        assert exc_info.value.code == "TEXT_GENERATION_ERROR"

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(HomePlanError) as exc_info:
            await _service(handler).generate_construction_plan(1000, 2, 24)

        assert exc_info.value.code == "TEXT_GENERATION_TIMEOUT"

    @pytest.mark.asyncio
    async def test_missing_response_text(self):
        def handler(request):
            return httpx.Response(200, json={"done": True})

        with pytest.raises(HomePlanError) as exc_info:
            await _service(handler).generate_construction_plan(1000, 2, 24)

        assert exc_info.value.code == "TEXT_GENERATION_ERROR"

    @pytest.mark.asyncio
    async def test_narrative_returns_none_on_failure(self):
        def handler(request):
            return httpx.Response(503)

        assert await _service(handler).generate_plan_narrative(1000, 2, 24) is None

    @pytest.mark.asyncio
    async def test_narrative_returns_text(self):
        def handler(request):
            return httpx.Response(200, json={"response": "Ground floor: living room"})

        assert await _service(handler).generate_plan_narrative(1000, 2, 24) == "Ground floor: living room"
