from __future__ import annotations

import asyncio
from types import SimpleNamespace

import httpx
from openai import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    BadRequestError,
    InternalServerError,
)

from core.completion import CompletionGateway
from core.retry import RetryPolicy

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
NO_DELAY = RetryPolicy(max_attempts=3, base_delay=0)
MESSAGES = [{"role": "user", "content": "pasta?"}]


def completion(text: str | None):
    if text is None:
        return SimpleNamespace(choices=[])
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


class StubOpenAI:
    def __init__(self, outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def server_error() -> InternalServerError:
    response = httpx.Response(500, request=REQUEST, text="boom")
    return InternalServerError("server error", response=response, body={"error": "boom"})


def bad_request() -> BadRequestError:
    response = httpx.Response(400, request=REQUEST, text="bad")
    return BadRequestError("bad request", response=response, body={"error": "bad"})


def run(gateway: CompletionGateway):
    return asyncio.run(gateway.complete(MESSAGES))


def test_returns_first_choice_text():
    client = StubOpenAI([completion("  Spaghetti al pomodoro  ")])
    gateway = CompletionGateway(client, "gpt-4o-mini", retry_policy=NO_DELAY)

    assert run(gateway) == "Spaghetti al pomodoro"
    assert client.calls[0]["model"] == "gpt-4o-mini"
    assert client.calls[0]["messages"] == MESSAGES


def test_unconfigured_gateway_skips_the_call():
    client = StubOpenAI([completion("never")])

    assert run(CompletionGateway(None, "gpt-4o-mini")) is None
    assert run(CompletionGateway(client, "")) is None
    assert client.calls == []


def test_transient_errors_are_retried():
    client = StubOpenAI(
        [
            APITimeoutError(request=REQUEST),
            APIConnectionError(request=REQUEST),
            completion("Risotto"),
        ]
    )
    gateway = CompletionGateway(client, "gpt-4o-mini", retry_policy=NO_DELAY)

    assert run(gateway) == "Risotto"
    assert len(client.calls) == 3


def test_server_errors_give_up_after_max_attempts():
    client = StubOpenAI([server_error(), server_error(), server_error(), completion("late")])
    gateway = CompletionGateway(client, "gpt-4o-mini", retry_policy=NO_DELAY)

    assert run(gateway) is None
    assert len(client.calls) == 3


def test_client_errors_are_not_retried():
    client = StubOpenAI([bad_request(), completion("unused")])
    gateway = CompletionGateway(client, "gpt-4o-mini", retry_policy=NO_DELAY)

    assert run(gateway) is None
    assert len(client.calls) == 1


def test_malformed_response_is_not_retried():
    client = StubOpenAI([APIError("garbled", REQUEST, body=None), completion("unused")])
    gateway = CompletionGateway(client, "gpt-4o-mini", retry_policy=NO_DELAY)

    assert run(gateway) is None
    assert len(client.calls) == 1


def test_empty_choices_yield_none():
    client = StubOpenAI([completion(None)])
    gateway = CompletionGateway(client, "gpt-4o-mini", retry_policy=NO_DELAY)

    assert run(gateway) is None
    assert len(client.calls) == 1


def test_unexpected_client_error_yields_none():
    client = StubOpenAI([ValueError("unexpected payload")])
    gateway = CompletionGateway(client, "gpt-4o-mini", retry_policy=NO_DELAY)

    assert run(gateway) is None
    assert len(client.calls) == 1


def test_linear_backoff_delays():
    policy = RetryPolicy(max_attempts=3, base_delay=0.35)
    assert [policy.delay_for(attempt) for attempt in (1, 2)] == [0.35, 0.7]
    assert policy.should_retry(2) and not policy.should_retry(3)
