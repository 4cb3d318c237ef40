"""Text-generation pass treated as one more unreliable adapter."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol

logger = logging.getLogger("aerodex.generation")

REQUIRED_FIELDS = ("status", "currentLocation")

SYSTEM_MESSAGE = (
    "You are a flight-tracking assistant for an aviation encyclopedia. "
    "Respond ONLY with a single JSON object using exactly the keys you are given. "
    "Never invent data beyond what is provided; use \"Unknown\" when a value cannot be inferred."
)


class TextCompletionClient(Protocol):
    async def complete(self, prompt: str, *, system_message: str | None = None) -> str:
        """Return the model's raw text for ``prompt``."""


def extract_json_object(text: str) -> Optional[dict[str, Any]]:
    """Parse the largest brace-delimited substring of ``text`` as a JSON object."""

    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        parsed = json.loads(text[start : end + 1])
    except json.JSONDecodeError as exc:
        logger.warning("Generated text is not valid JSON: %s", exc)
        return None
    return parsed if isinstance(parsed, dict) else None


class FlightTextGenerator:
    """Turn a prompt into a candidate response object, or ``None``."""

    def __init__(self, client: TextCompletionClient, *, system_message: str = SYSTEM_MESSAGE) -> None:
        self.client = client
        self.system_message = system_message

    async def generate(self, prompt: str) -> Optional[dict[str, Any]]:
        try:
            text = await self.client.complete(prompt, system_message=self.system_message)
        except RuntimeError as exc:
            logger.error("AI generation failed: %s", exc)
            return None

        parsed = extract_json_object(text)
        if parsed is None:
            return None
        missing = [name for name in REQUIRED_FIELDS if not parsed.get(name)]
        if missing:
            logger.warning("Generated JSON is missing required fields: %s", missing)
            return None
        return parsed


__all__ = [
    "FlightTextGenerator",
    "REQUIRED_FIELDS",
    "SYSTEM_MESSAGE",
    "TextCompletionClient",
    "extract_json_object",
]
