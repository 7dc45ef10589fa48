"""Recovers a JSON object from free-form model output."""

import json
import re
from typing import Any

from app.logging.logger import Log

_DIAGNOSTIC_LIMIT = 200

# An optional `json` tag may sit directly against the opening fence.
_FENCE_RE = re.compile(r"```(?:json)?\s*\n?([\s\S]*?)\n?\s*```", re.IGNORECASE)


def strip_code_fence(text: str) -> str:
    """Return the content of the first fenced block, or the text itself when unfenced."""
    cleaned = text.strip()
    match = _FENCE_RE.search(cleaned)
    if match:
        return match.group(1).strip()
    return cleaned


def parse_response(raw: str | None) -> dict[str, Any] | None:
    """Decode the JSON object carried by ``raw``.

    Never raises. Anything that does not decode to a JSON object yields None.
    """
    if not raw or not raw.strip():
        return None

    cleaned = strip_code_fence(raw)
    try:
        parsed = json.loads(cleaned)
    except (ValueError, RecursionError):
        Log.error(
            f"Failed to parse AI response as JSON: {cleaned[:_DIAGNOSTIC_LIMIT]}"
        )
        return None

    if not isinstance(parsed, dict):
        Log.error(
            f"AI response JSON is not an object ({type(parsed).__name__}): "
            f"{cleaned[:_DIAGNOSTIC_LIMIT]}"
        )
        return None
    return parsed
