"""Generation orchestrator.

Sequences prompt building, the upstream call, JSON extraction, the single
reinforced retry and the template fallback. A well-formed task always
produces a payload: failures below the HTTP boundary are logged and turned
into a retry or a fallback, never raised to the caller.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from tripsage.config import Settings
from tripsage.generation.errors import ExtractionError, UpstreamError
from tripsage.generation.extraction import extract_json, looks_like_attempted_json, missing_keys
from tripsage.generation.gemini_client import GeminiClient
from tripsage.generation.spend_cap import SpendCapManager
from tripsage.generation.tasks import GenerationTask, reinforce
from tripsage.generation.types import GenerationOutput, GenerationResult, PromptPair, with_fallback_marker

logger = logging.getLogger(__name__)

OUTCOME_PARSED = "parsed"
OUTCOME_EXTRACTION_FAILED = "extraction_failed"
OUTCOME_UPSTREAM_ERROR = "upstream_error"


class GenerationOrchestrator:
    """Runs generation tasks against Gemini with retry and fallback."""

    def __init__(self,
                settings: Settings,
                client: Optional[GeminiClient] = None,
                spend_cap: Optional[SpendCapManager] = None,
            ):
        self.settings = settings
        self.spend_cap = spend_cap

        # No key configured means no client: every task is served from templates
        if client is None and settings.gemini_api_key:
            client = GeminiClient(settings)
        self.client = client

    async def run(self, task: GenerationTask) -> GenerationResult:
        """Produce a payload for the task.
        Args:
            task (GenerationTask): Validated generation task.
        Returns:
            GenerationResult: Generated payload, or a fallback payload tagged
            with is_fallback_data, plus the number of upstream calls made.
        """
        if self.client is None:
            logger.warning(f"No Gemini API key configured, using fallback for {task.label}")
            return self._fallback(task, attempts=0)

        if self._spend_cap_reached():
            logger.warning(f"Monthly spend cap reached, using fallback for {task.label}")
            return self._fallback(task, attempts=0)

        prompt = task.build_prompt()

        text, payload = await self._attempt(task, prompt, attempt=1)
        if payload is not None:
            return GenerationResult(payload=payload, is_fallback=False, attempts=1)

        if looks_like_attempted_json(text):
            logger.warning(f"Unusable JSON for {task.label}, not retrying")
            return self._fallback(task, attempts=1)

        logger.info(f"No JSON in response for {task.label}, retrying with reinforced prompt")
        _, payload = await self._attempt(task, reinforce(prompt), attempt=2)
        if payload is not None:
            return GenerationResult(payload=payload, is_fallback=False, attempts=2)

        return self._fallback(task, attempts=2)

    async def _attempt(self,
                        task: GenerationTask,
                        prompt: PromptPair,
                        attempt: int,
                    ) -> Tuple[str, Optional[Dict[str, Any]]]:
        """One upstream call plus extraction.

        Returns the raw text ('' when the call failed) and the parsed payload,
        or None when nothing usable came back.
        """
        try:
            output = await self.client.generate(prompt)
        except UpstreamError as e:
            logger.error(f"Gemini call {attempt} for {task.label} failed: {e}")
            self._record(task, attempt, OUTCOME_UPSTREAM_ERROR)
            return "", None
        except Exception as e:
            logger.exception(f"Unexpected error in Gemini call {attempt} for {task.label}: {e}")
            self._record(task, attempt, OUTCOME_UPSTREAM_ERROR)
            return "", None

        try:
            payload = self._extract(task, output.text)
        except ExtractionError as e:
            logger.warning(f"Extraction failed for {task.label} on call {attempt}: {e}")
            logger.debug(f"Raw response for {task.label}: {output.text!r}")
            self._record(task, attempt, OUTCOME_EXTRACTION_FAILED, output)
            return output.text, None

        self._record(task, attempt, OUTCOME_PARSED, output)
        return output.text, payload

    def _extract(self, task: GenerationTask, text: str) -> Dict[str, Any]:
        payload = extract_json(text)

        if self.settings.strict_shape_validation:
            missing = missing_keys(payload, task.required_keys)
            if missing:
                raise ExtractionError(f"Response is missing keys: {', '.join(missing)}")

        return payload

    def _fallback(self, task: GenerationTask, attempts: int) -> GenerationResult:
        logger.info(f"Serving fallback content for {task.label} after {attempts} call(s)")
        return GenerationResult(
            payload=with_fallback_marker(task.build_fallback()),
            is_fallback=True,
            attempts=attempts,
        )

    def _spend_cap_reached(self) -> bool:
        if self.spend_cap is None:
            return False
        try:
            return self.spend_cap.is_spend_cap_exceeded()
        except Exception as e:
            logger.warning(f"Could not check spend cap, continuing: {e}")
            return False

    def _record(self,
                task: GenerationTask,
                attempt: int,
                outcome: str,
                output: Optional[GenerationOutput] = None,
            ) -> None:
        if self.spend_cap is None:
            return
        # Ledger failures must not change the response
        try:
            self.spend_cap.record_generation_call(
                task=task.label,
                model=self.settings.gemini_model,
                attempt=attempt,
                outcome=outcome,
                prompt_tokens=output.prompt_tokens if output else 0,
                completion_tokens=output.completion_tokens if output else 0,
            )
        except Exception as e:
            logger.warning(f"Failed to record generation call for {task.label}: {e}")

    async def close(self):
        """Clean up resources."""
        if self.client is not None:
            await self.client.close()
