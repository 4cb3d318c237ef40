"""Thin OpenAI client wrapper for one-shot flight summary completions."""

from __future__ import annotations

import logging
from typing import Any

from openai import APIError, APITimeoutError, AsyncOpenAI, RateLimitError

logger = logging.getLogger("aerodex.openai")


class OpenAITextClient:
    """Send a single prompt to OpenAI chat completions and return the text."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout: float,
        client: AsyncOpenAI | None = None,
    ) -> None:
        if not api_key:
            raise RuntimeError("OpenAI API key not configured")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client

    def get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout)
            logger.info("Initialized OpenAI client for model %s", self.model)
        return self._client

    async def complete(self, prompt: str, *, system_message: str | None = None) -> str:
        messages: list[dict[str, Any]] = []
        if system_message:
            messages.append({"role": "system", "content": system_message})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self.get_client().chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=0.2,
                max_tokens=1000,
            )
            choice = response.choices[0].message
            return choice.content or ""
        except (APITimeoutError, RateLimitError, APIError) as exc:
            logger.error("OpenAI API error: %s", exc)
            raise RuntimeError("AI service temporarily unavailable") from exc
        except Exception as exc:  # pragma: no cover - safeguard
            logger.exception("Unexpected OpenAI failure")
            raise RuntimeError("AI service unavailable") from exc


__all__ = ["OpenAITextClient"]
