"""Unit tests for the Gemini generateContent client."""

from typing import Any, Dict

import httpx
import pytest

from tripsage.config import Settings
from tripsage.generation.errors import UpstreamError
from tripsage.generation.gemini_client import GeminiClient
from tripsage.generation.types import PromptPair


PROMPT = PromptPair(
    system_prompt="You are a travel expert.",
    user_prompt="Describe Lisbon.",
    expected_shape='{"description": "..."}',
)


def _response(status_code: int, json_data: Any = None, text: str = None) -> httpx.Response:
    request = httpx.Request("POST", "https://example.test/models/gemini:generateContent")
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    return httpx.Response(status_code, json=json_data, request=request)


def test_requires_api_key(no_key_settings: Settings):
    with pytest.raises(ValueError):
        GeminiClient(no_key_settings)


@pytest.mark.asyncio
async def test_generate_sends_prompts_and_reads_first_candidate(settings: Settings):
    client = GeminiClient(settings)
    captured: Dict[str, Any] = {}

    async def fake_post(url, params=None, json=None, **kwargs):
        captured["url"] = url
        captured["params"] = params
        captured["json"] = json
        return _response(200, {
            "candidates": [{"content": {"parts": [{"text": '{"description": "Sunny"}'}]}}],
            "usageMetadata": {"promptTokenCount": 120, "candidatesTokenCount": 45},
        })

    client.client.post = fake_post  # type: ignore

    output = await client.generate(PROMPT)

    assert output.text == '{"description": "Sunny"}'
    assert output.prompt_tokens == 120
    assert output.completion_tokens == 45
    assert captured["url"].endswith(f"/models/{settings.gemini_model}:generateContent")
    assert captured["params"] == {"key": "test-gemini"}
    assert captured["json"]["system_instruction"]["parts"]["text"] == PROMPT.system_prompt
    assert captured["json"]["contents"]["parts"]["text"] == PROMPT.user_prompt

    await client.close()


@pytest.mark.asyncio
async def test_missing_candidates_yield_empty_text(settings: Settings):
    client = GeminiClient(settings)

    async def fake_post(url, **kwargs):
        return _response(200, {"promptFeedback": {"blockReason": "SAFETY"}})

    client.client.post = fake_post  # type: ignore

    output = await client.generate(PROMPT)
    assert output.text == ""
    assert output.prompt_tokens == 0

    await client.close()


@pytest.mark.asyncio
async def test_http_error_status_raises_upstream_error(settings: Settings):
    client = GeminiClient(settings)

    async def fake_post(url, **kwargs):
        return _response(503, {"error": {"message": "overloaded"}})

    client.client.post = fake_post  # type: ignore

    with pytest.raises(UpstreamError) as exc_info:
        await client.generate(PROMPT)
    assert exc_info.value.status_code == 503

    await client.close()


@pytest.mark.asyncio
async def test_network_error_raises_upstream_error(settings: Settings):
    client = GeminiClient(settings)

    async def fake_post(url, **kwargs):
        raise httpx.ConnectError("connection refused")

    client.client.post = fake_post  # type: ignore

    with pytest.raises(UpstreamError) as exc_info:
        await client.generate(PROMPT)
    assert exc_info.value.status_code is None

    await client.close()


@pytest.mark.asyncio
async def test_non_json_body_raises_upstream_error(settings: Settings):
    client = GeminiClient(settings)

    async def fake_post(url, **kwargs):
        return _response(200, text="<html>gateway</html>")

    client.client.post = fake_post  # type: ignore

    with pytest.raises(UpstreamError):
        await client.generate(PROMPT)

    await client.close()
