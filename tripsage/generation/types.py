"""Value types flowing through the generation pipeline.

None of these outlive a single request; every stage produces a new value.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO date or datetime string. Raises ValueError when invalid."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    # Compare aware and naive values on the same footing
    if parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None) - parsed.utcoffset()
    return parsed


@dataclass(frozen=True)
class DateRange:
    """Trip dates as supplied by the caller, validated on construction."""
    start: str
    end: str

    def __post_init__(self):
        parse_iso_datetime(self.start)
        parse_iso_datetime(self.end)

    @property
    def duration_days(self) -> int:
        """Absolute number of days between start and end, rounded up."""
        delta = parse_iso_datetime(self.end) - parse_iso_datetime(self.start)
        return math.ceil(abs(delta.total_seconds()) / 86400)


@dataclass(frozen=True)
class PromptPair:
    """System and user prompt sent together in one generation call."""
    system_prompt: str
    user_prompt: str
    expected_shape: str


@dataclass(frozen=True)
class GenerationOutput:
    """Raw text of the first candidate plus reported token usage."""
    text: str
    prompt_tokens: int = 0
    completion_tokens: int = 0


@dataclass
class GenerationResult:
    """What the orchestrator hands back to the route layer.

    attempts counts upstream calls actually made (0, 1 or 2).
    """
    payload: Dict[str, Any]
    is_fallback: bool
    attempts: int = 0


def with_fallback_marker(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of payload tagged so callers can tell it was not generated."""
    marked = dict(payload)
    marked["is_fallback_data"] = True
    return marked


def optional_number(value: Optional[float], default: float) -> float:
    """Numeric request parameter with a default for missing values."""
    return default if value is None else value
