"""Base generation task interface."""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from tripsage.generation.types import PromptPair

RETRY_SYSTEM_DIRECTIVE = (
    " You MUST respond with ONLY valid JSON and nothing else."
    " No explanations, just the JSON object."
)
RETRY_USER_DIRECTIVE = (
    " CRITICAL: Your response must be valid JSON that can be parsed directly"
    " with a standard JSON parser. Do not include any text outside the JSON object."
    " The expected structure is: "
)


def render_shape(shape: Dict[str, Any]) -> str:
    """Example object as it is echoed into prompts."""
    return json.dumps(shape, indent=2, ensure_ascii=False)


def reinforce(prompt: PromptPair) -> PromptPair:
    """Prompt pair for the single retry after the model ignored the JSON instruction."""
    return PromptPair(
        system_prompt=prompt.system_prompt + RETRY_SYSTEM_DIRECTIVE,
        user_prompt=prompt.user_prompt + RETRY_USER_DIRECTIVE + prompt.expected_shape,
        expected_shape=prompt.expected_shape,
    )


class GenerationTask(ABC):
    """One structured-generation request: its prompt, shape and fallback."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Short task name used in logs and the usage ledger."""
        pass

    @property
    @abstractmethod
    def shape(self) -> Dict[str, Any]:
        """Example object whose top-level keys are the expected schema."""
        pass

    @abstractmethod
    def build_prompt(self) -> PromptPair:
        """Build the prompt pair for the first generation call."""
        pass

    @abstractmethod
    def build_fallback(self) -> Dict[str, Any]:
        """Build template content from the request parameters alone.

        Must be pure: identical tasks give identical payloads.
        """
        pass

    @property
    def required_keys(self) -> Tuple[str, ...]:
        return tuple(self.shape.keys())
