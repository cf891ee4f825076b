"""JSON recovery from generated text.

Models asked for JSON-only output still wrap it in markdown fences or add a
sentence of prose around it. The extractor tries the cheap path first and
only then looks for a fenced block or a single outer object.
"""

import json
import re
from typing import Any, Dict, Iterator, Optional, Sequence

from tripsage.generation.errors import ExtractionError


FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")
OUTER_OBJECT = re.compile(r"^\s*(\{[\s\S]*\})\s*$")


def looks_like_attempted_json(text: str) -> bool:
    """True when the text contains any brace character.

    Output without a single brace means the model ignored the JSON
    instruction entirely; output with braces is treated as a failed attempt
    that a second call is unlikely to fix.
    """
    return "{" in text or "}" in text


def _candidates(text: str) -> Iterator[str]:
    yield text

    fenced = FENCED_BLOCK.search(text)
    if fenced and fenced.group(1):
        yield fenced.group(1)

    outer = OUTER_OBJECT.match(text)
    if outer:
        yield outer.group(1)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON and cannot be rendered back to a client
    raise ValueError(f"Non-finite constant {name} in generated JSON")


def _load_object(candidate: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant)
    except (json.JSONDecodeError, ValueError):
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_json(text: str) -> Dict[str, Any]:
    """Recover a JSON object from generated text.

    Tried in order, first success wins: the whole text, the interior of the
    first fenced block, the text as one outer ``{...}`` span.

    Raises:
        ExtractionError: when no stage yields a JSON object.
    """
    for candidate in _candidates(text or ""):
        parsed = _load_object(candidate)
        if parsed is not None:
            return parsed

    raise ExtractionError("No valid JSON object found in the response")


def missing_keys(payload: Dict[str, Any], required: Sequence[str]) -> list:
    """Required top-level keys absent from payload."""
    return [key for key in required if key not in payload]
