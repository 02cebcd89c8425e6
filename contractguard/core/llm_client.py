"""LLM client — unified async interface for Claude and GPT-4o with retries."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import anthropic
import openai

from contractguard.core.config import Settings, get_settings
from contractguard.core.errors import ResponseParseError

logger = logging.getLogger(__name__)

_RETRYABLE = (
    anthropic.RateLimitError,
    anthropic.APIConnectionError,
    anthropic.InternalServerError,
    openai.RateLimitError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


class LLMClient:
    """Async client for the reasoning service behind contract analysis.

    Features:
    - Primary (Claude) + fallback (GPT-4o) with automatic failover
    - Exponential backoff retries on rate limits / transient errors
    - Fast model tier for quick insight calls
    - Token usage tracking
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self._anthropic = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key or None)
        self._openai = openai.AsyncOpenAI(api_key=settings.openai_api_key or "unset")
        self._has_fallback = bool(settings.openai_api_key)
        self._primary_model = settings.primary_llm_model
        self._fallback_model = settings.fallback_llm_model
        self._fast_model = settings.llm_fast_model
        self._max_tokens = settings.llm_max_tokens
        self._temperature = settings.llm_temperature
        self._max_retries = max(1, settings.llm_max_retries)
        self._retry_base_delay = settings.llm_retry_base_delay
        self._total_input_tokens = 0
        self._total_output_tokens = 0

    @property
    def token_usage(self) -> dict[str, int]:
        return {
            "input_tokens": self._total_input_tokens,
            "output_tokens": self._total_output_tokens,
        }

    async def analyze(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int | None = None,
        fast: bool = False,
    ) -> dict[str, Any]:
        """Send a prompt to the LLM and return its JSON response as a dict.

        Tries Claude first and falls back to GPT-4o when an OpenAI key is
        configured. Each call is retried with exponential backoff on
        transient errors.

        Raises:
            ResponseParseError: the model answered without a JSON object.
            anthropic.APIError / openai.APIError: the call itself failed.
        """
        model = self._fast_model if fast else self._primary_model
        tokens = max_tokens or self._max_tokens
        try:
            return await self._retry(
                self._call_claude, model, system_prompt, user_prompt, tokens,
            )
        except Exception as e:
            if not self._has_fallback:
                raise
            logger.warning(
                "Claude API failed after retries: %s, falling back to %s",
                e, self._fallback_model, extra={"model": self._fallback_model},
            )
            return await self._retry(
                self._call_openai, self._fallback_model, system_prompt, user_prompt, tokens,
            )

    async def _retry(self, fn, *args, **kwargs) -> dict[str, Any]:
        """Retry a function with exponential backoff."""
        last_error: Exception | None = None
        for attempt in range(self._max_retries):
            try:
                return await fn(*args, **kwargs)
            except _RETRYABLE as e:
                last_error = e
                delay = self._retry_base_delay * (2 ** attempt)
                logger.warning(
                    "Retry %d/%d after %.1fs: %s", attempt + 1, self._max_retries, delay, e,
                    extra={"attempt": attempt + 1},
                )
                await asyncio.sleep(delay)
        raise last_error  # type: ignore[misc]

    async def _call_claude(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> dict[str, Any]:
        """Call Claude API (async)."""
        message = await self._anthropic.messages.create(
            model=model,
            max_tokens=max_tokens,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        self._total_input_tokens += message.usage.input_tokens
        self._total_output_tokens += message.usage.output_tokens
        content = message.content[0].text
        return self.parse_json_response(content)

    async def _call_openai(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> dict[str, Any]:
        """Call OpenAI API (async)."""
        response = await self._openai.chat.completions.create(
            model=model,
            temperature=self._temperature,
            max_tokens=max_tokens,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        usage = response.usage
        if usage:
            self._total_input_tokens += usage.prompt_tokens
            self._total_output_tokens += usage.completion_tokens
        content = response.choices[0].message.content or ""
        return self.parse_json_response(content)

    @staticmethod
    def parse_json_response(content: str) -> dict[str, Any]:
        """Extract a JSON object from LLM output, handling markdown code blocks."""
        content = content.strip()

        # Handle ```json ... ``` blocks
        if content.startswith("```"):
            lines = content.split("\n")
            json_lines: list[str] = []
            in_block = False
            for line in lines:
                if line.startswith("```") and not in_block:
                    in_block = True
                    continue
                elif line.startswith("```") and in_block:
                    break
                elif in_block:
                    json_lines.append(line)
            content = "\n".join(json_lines)

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError:
            # Try to find a JSON object in surrounding prose
            start = content.find("{")
            end = content.rfind("}") + 1
            if start < 0 or end <= start:
                raise ResponseParseError() from None
            try:
                parsed = json.loads(content[start:end])
            except json.JSONDecodeError:
                raise ResponseParseError() from None

        if not isinstance(parsed, dict):
            raise ResponseParseError()
        return parsed
