"""Unit tests for the generation orchestrator.

Covers:
- No API key and spend cap short-circuits (zero upstream calls)
- Direct success, retry on brace-free output, no retry on broken JSON
- Upstream failures treated as empty output
- Strict shape validation
- Usage ledger recording
"""

import json
from typing import List, Union

import pytest

from tripsage.config import Settings
from tripsage.db.models import GenerationCall
from tripsage.generation.errors import UpstreamError
from tripsage.generation.orchestrator import GenerationOrchestrator
from tripsage.generation.sections import DestinationRequest, DestinationSectionTask, Section
from tripsage.generation.spend_cap import SpendCapManager
from tripsage.generation.types import GenerationOutput, PromptPair


FOOD_JSON = json.dumps({
    "cuisine": "Seafood and pastries",
    "dishes": ["Bacalhau", "Pastel de nata"],
    "restaurants": [{"name": "Cervejaria Ramiro", "type": "Seafood", "description": "Classic"}],
    "dietary": "Vegetarian options are common",
})


class ScriptedClient:
    """Stands in for GeminiClient, answering calls from a fixed script."""

    def __init__(self, *replies: Union[str, Exception]):
        self.replies: List[Union[str, Exception]] = list(replies)
        self.prompts: List[PromptPair] = []
        self.closed = False

    async def generate(self, prompt: PromptPair) -> GenerationOutput:
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return GenerationOutput(text=reply, prompt_tokens=1000, completion_tokens=1000)

    async def close(self):
        self.closed = True


def _food_task() -> DestinationSectionTask:
    return DestinationSectionTask(DestinationRequest(destination="Lisbon", section=Section.FOOD))


@pytest.mark.asyncio
async def test_no_api_key_serves_fallback_without_calls(no_key_settings: Settings):
    orchestrator = GenerationOrchestrator(no_key_settings)
    assert orchestrator.client is None

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is True
    assert result.attempts == 0
    assert result.payload["is_fallback_data"] is True
    assert "cuisine" in result.payload


@pytest.mark.asyncio
async def test_valid_json_returned_after_one_call(settings: Settings):
    client = ScriptedClient(FOOD_JSON)
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is False
    assert result.attempts == 1
    assert result.payload == json.loads(FOOD_JSON)
    assert len(client.prompts) == 1


@pytest.mark.asyncio
async def test_fenced_json_is_recovered(settings: Settings):
    client = ScriptedClient(f"Here is the data:\n```json\n{FOOD_JSON}\n```")
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is False
    assert result.payload["dishes"] == ["Bacalhau", "Pastel de nata"]


@pytest.mark.asyncio
async def test_prose_twice_makes_two_calls_then_falls_back(settings: Settings):
    client = ScriptedClient("Lisbon has great food.", "Really, the food is great.")
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is True
    assert result.attempts == 2
    assert result.payload["is_fallback_data"] is True
    assert len(client.prompts) == 2
    assert "CRITICAL" in client.prompts[1].user_prompt
    assert "ONLY valid JSON" in client.prompts[1].system_prompt


@pytest.mark.asyncio
async def test_retry_can_succeed(settings: Settings):
    client = ScriptedClient("I would love to help with Lisbon!", FOOD_JSON)
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is False
    assert result.attempts == 2
    assert "is_fallback_data" not in result.payload


@pytest.mark.asyncio
async def test_truncated_json_falls_back_without_retry(settings: Settings):
    client = ScriptedClient('{"cuisine": "Seafood", "dishes": ["Bacal')
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is True
    assert result.attempts == 1
    assert len(client.prompts) == 1


@pytest.mark.asyncio
async def test_upstream_error_counts_as_empty_output(settings: Settings):
    client = ScriptedClient(UpstreamError("Gemini returned HTTP 500", status_code=500), FOOD_JSON)
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is False
    assert result.attempts == 2


@pytest.mark.asyncio
async def test_two_upstream_errors_fall_back(settings: Settings):
    client = ScriptedClient(UpstreamError("timeout"), RuntimeError("boom"))
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is True
    assert result.attempts == 2


@pytest.mark.asyncio
async def test_missing_shape_keys_fall_back_without_retry(settings: Settings):
    client = ScriptedClient('{"cuisine": "Seafood"}')
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is True
    assert result.attempts == 1
    assert len(client.prompts) == 1


@pytest.mark.asyncio
async def test_partial_object_accepted_when_shape_validation_disabled(settings: Settings):
    lenient = settings.model_copy(update={"strict_shape_validation": False})
    client = ScriptedClient('{"cuisine": "Seafood"}')
    orchestrator = GenerationOrchestrator(lenient, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is False
    assert result.payload == {"cuisine": "Seafood"}


@pytest.mark.asyncio
async def test_spend_cap_reached_skips_generation(settings: Settings, db_session):
    spend_cap = SpendCapManager(settings, db_session)
    spend_cap.ledger_repo.record_call(
        task="destination:food",
        model=settings.gemini_model,
        attempt=1,
        outcome="parsed",
        cost_usd=settings.monthly_spend_cap_usd,
    )
    client = ScriptedClient(FOOD_JSON)
    orchestrator = GenerationOrchestrator(settings, client=client, spend_cap=spend_cap)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is True
    assert result.attempts == 0
    assert client.prompts == []


@pytest.mark.asyncio
async def test_each_call_is_recorded_in_ledger(settings: Settings, db_session):
    spend_cap = SpendCapManager(settings, db_session)
    client = ScriptedClient("No JSON here.", FOOD_JSON)
    orchestrator = GenerationOrchestrator(settings, client=client, spend_cap=spend_cap)

    await orchestrator.run(_food_task())

    calls = db_session.query(GenerationCall).order_by(GenerationCall.attempt).all()
    assert [(c.attempt, c.outcome) for c in calls] == [(1, "extraction_failed"), (2, "parsed")]
    assert all(c.task == "destination:food" for c in calls)
    assert all(c.prompt_tokens == 1000 and c.completion_tokens == 1000 for c in calls)
    assert calls[0].cost_usd > 0


@pytest.mark.asyncio
async def test_close_closes_client(settings: Settings):
    client = ScriptedClient()
    orchestrator = GenerationOrchestrator(settings, client=client)

    await orchestrator.close()

    assert client.closed is True


@pytest.mark.asyncio
async def test_nan_in_reply_falls_back_without_retry(settings: Settings):
    client = ScriptedClient('{"cuisine": NaN, "dishes": [], "restaurants": [], "dietary": "x"}')
    orchestrator = GenerationOrchestrator(settings, client=client)

    result = await orchestrator.run(_food_task())

    assert result.is_fallback is True
    assert result.attempts == 1
    assert isinstance(result.payload["cuisine"], str)
    json.dumps(result.payload, allow_nan=False)
