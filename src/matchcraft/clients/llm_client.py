"""Claude API wrapper with async support and bounded retry on transient errors."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from matchcraft.exceptions import (
    PermanentProviderError,
    ProviderError,
    TransientProviderError,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
TRANSIENT_STATUS_CODES = frozenset({408, 409, 429})


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


def classify_provider_error(exc: Exception) -> ProviderError:
    """Map an SDK exception onto a retryable or permanent provider error."""
    if isinstance(exc, anthropic.APIConnectionError):  # includes APITimeoutError
        return TransientProviderError(f"Provider unreachable: {exc}")
    if isinstance(exc, anthropic.APIStatusError):
        status = exc.status_code
        if status in TRANSIENT_STATUS_CODES or status >= 500:
            return TransientProviderError(f"Provider returned {status}: {exc}")
        return PermanentProviderError(f"Provider rejected request ({status}): {exc}")
    return PermanentProviderError(f"Provider error: {exc}")


class LLMClient:
    """Async Claude API client with exponential-backoff retries."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        *,
        max_retries: int = 3,
        retry_wait: wait_base | None = None,
    ):
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.max_retries = max_retries
        self.retry_wait = retry_wait or wait_exponential(min=1, max=10)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def _call_api(
        self,
        prompt: str,
        system: str,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> anthropic.types.Message:
        """Make one API call, translating SDK errors into provider errors."""
        messages = [{"role": "user", "content": prompt}]
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
        }
        if system:
            kwargs["system"] = system
        try:
            return await self.client.messages.create(**kwargs)
        except anthropic.APIError as exc:
            raise classify_provider_error(exc) from exc

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage.

        Transient provider errors are retried up to ``max_retries`` attempts;
        permanent ones are raised immediately.
        """
        logger.debug("LLM call: model=%s", model)
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=self.retry_wait,
                retry=retry_if_exception_type(TransientProviderError),
                reraise=True,
            ):
                with attempt:
                    message = await self._call_api(
                        prompt=prompt,
                        system=system,
                        model=model,
                        temperature=temperature,
                        max_tokens=max_tokens,
                    )
        except ProviderError:
            logger.error("LLM call failed", exc_info=True)
            raise
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))
        return LLMResponse(
            text=message.content[0].text if message.content else "",
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
