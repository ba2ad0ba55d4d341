from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from openai import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
    OpenAI,
)

from core.config import Settings
from core.retry import COMPLETION_RETRY, RetryPolicy

BODY_SNIPPET_LIMIT = 2048
logger = logging.getLogger(__name__)


def build_openai_client(settings: Settings) -> OpenAI | None:
    if not settings.openai_api_key:
        return None
    return OpenAI(
        api_key=settings.openai_api_key,
        organization=settings.openai_org or None,
        project=settings.openai_project or None,
        timeout=float(settings.openai_timeout_sec),
        max_retries=0,
    )


def _snippet(value: Any) -> str:
    text = "" if value is None else str(value)
    if len(text) <= BODY_SNIPPET_LIMIT:
        return text
    return text[:BODY_SNIPPET_LIMIT] + "..."


def _first_choice_text(completion: Any) -> str | None:
    choices = getattr(completion, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        return None
    content = content.strip()
    return content or None


class CompletionGateway:
    """Chat-completion calls with bounded retry; returns ``None`` instead of raising."""

    def __init__(
        self,
        client: OpenAI | None,
        model: str | None,
        *,
        retry_policy: RetryPolicy = COMPLETION_RETRY,
        temperature: float = 0.7,
    ) -> None:
        self.client = client
        self.model = model
        self.retry_policy = retry_policy
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings, client: OpenAI | None = None) -> "CompletionGateway":
        return cls(client or build_openai_client(settings), settings.openai_model)

    @property
    def is_configured(self) -> bool:
        return self.client is not None and bool(self.model)

    async def complete(self, messages: Iterable[dict[str, str]]) -> str | None:
        if not self.is_configured:
            logger.warning("Completion skipped: OpenAI key or model is not configured")
            return None

        prepared = list(messages)
        max_attempts = self.retry_policy.max_attempts

        for attempt in range(1, max_attempts + 1):
            try:
                completion = await asyncio.get_running_loop().run_in_executor(
                    None,
                    lambda: self.client.chat.completions.create(
                        model=self.model,
                        messages=prepared,
                        temperature=self.temperature,
                    ),
                )
            except (APITimeoutError, APIConnectionError) as exc:
                logger.warning(
                    "Transient OpenAI error on attempt %s/%s: %s",
                    attempt,
                    max_attempts,
                    exc,
                )
            except APIStatusError as exc:
                if exc.status_code < 500:
                    logger.error(
                        "OpenAI rejected request (status=%s): %s",
                        exc.status_code,
                        _snippet(exc.body if exc.body is not None else exc.message),
                    )
                    return None
                logger.warning(
                    "OpenAI server error on attempt %s/%s (status=%s): %s",
                    attempt,
                    max_attempts,
                    exc.status_code,
                    _snippet(exc.body if exc.body is not None else exc.message),
                )
            except APIError as exc:
                logger.error("Malformed OpenAI response: %s", _snippet(exc))
                return None
            except Exception:
                logger.exception("Unexpected error while calling OpenAI")
                return None
            else:
                text = _first_choice_text(completion)
                if text is None:
                    logger.error("OpenAI response has no usable choice: %s", _snippet(completion))
                return text

            if not self.retry_policy.should_retry(attempt):
                break
            await asyncio.sleep(self.retry_policy.delay_for(attempt))

        logger.error("OpenAI completion failed after %s attempts", max_attempts)
        return None


__all__ = ["CompletionGateway", "build_openai_client"]
