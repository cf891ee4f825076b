"""Gemini generateContent client.

One call per prompt pair, no retries here: the orchestrator decides whether
a second call is worth making and with which prompt.
"""

import logging
from typing import Any, Dict

import httpx

from tripsage.config import Settings
from tripsage.generation.errors import UpstreamError
from tripsage.generation.types import GenerationOutput, PromptPair

logger = logging.getLogger(__name__)


class GeminiClient:
    """Client for the hosted Gemini text generation endpoint."""

    def __init__(self, settings: Settings):
        if not settings.gemini_api_key:
            raise ValueError("GeminiClient requires a configured gemini_api_key")

        self.api_key = settings.gemini_api_key
        self.model = settings.gemini_model
        self.base_url = settings.gemini_base_url.rstrip("/")

        self.client = httpx.AsyncClient(timeout=settings.gemini_timeout_seconds)

    def _build_request(self, prompt: PromptPair) -> Dict[str, Any]:
        return {
            "system_instruction": {
                "parts": {"text": prompt.system_prompt},
            },
            "contents": {
                "parts": {"text": prompt.user_prompt},
            },
        }

    async def generate(self, prompt: PromptPair) -> GenerationOutput:
        """Send one prompt pair and return the first candidate's text.
        Args:
            prompt (PromptPair): System and user prompt for this call.
        Returns:
            GenerationOutput: Candidate text ('' when the upstream sent none) and token usage.
        Raises:
            UpstreamError: On network failure, non-2xx status or a non-JSON body.
        """
        url = f"{self.base_url}/models/{self.model}:generateContent"

        try:
            response = await self.client.post(
                url,
                params={"key": self.api_key},
                json=self._build_request(prompt),
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"Gemini returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"Gemini returned a non-JSON body: {e}") from e

        text = self._first_candidate_text(data)
        usage = data.get("usageMetadata") or {}

        logger.info(f"Gemini call to {self.model} returned {len(text)} characters")

        return GenerationOutput(
            text=text,
            prompt_tokens=usage.get("promptTokenCount", 0) or 0,
            completion_tokens=usage.get("candidatesTokenCount", 0) or 0,
        )

    @staticmethod
    def _first_candidate_text(data: Dict[str, Any]) -> str:
        try:
            return data["candidates"][0]["content"]["parts"][0].get("text") or ""
        except (KeyError, IndexError, TypeError, AttributeError):
            return ""

    async def close(self):
        """Clean up resources."""
        await self.client.aclose()
