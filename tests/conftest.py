"""Pytest configuration and shared fixtures."""
import asyncio
import json
import logging
import os
from collections.abc import Callable, Sequence

import httpx
import pytest

from platform_assistant.conversation import ConversationTurn
from platform_assistant.errors import RemoteCallError
from platform_assistant.llm import RemoteRequestConfig, RemoteResponder

ENV_VARS = (
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_DEPLOYMENT_NAME",
    "AZURE_OPENAI_API_VERSION",
    "ASSISTANT_USE_AI",
    "ASSISTANT_LOG_LEVEL",
)


class StubResponder(RemoteResponder):
    """Responder that answers without a network and records its calls."""

    def __init__(self, answer: str = "remote answer") -> None:
        self.answer = answer
        self.calls: list[tuple[str, list[ConversationTurn]]] = []
        self.closed = False

    async def respond(self, user_text: str, history: Sequence[ConversationTurn]) -> str:
        self.calls.append((user_text, list(history)))
        return self.answer

    async def close(self) -> None:
        self.closed = True


class FailingResponder(StubResponder):
    """Responder that always raises the given error."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    async def respond(self, user_text: str, history: Sequence[ConversationTurn]) -> str:
        self.calls.append((user_text, list(history)))
        raise self.error


class GatedResponder(StubResponder):
    """Responder that blocks until released, to simulate a slow remote call."""

    def __init__(self) -> None:
        super().__init__()
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def respond(self, user_text: str, history: Sequence[ConversationTurn]) -> str:
        self.calls.append((user_text, list(history)))
        self.started.set()
        await self.release.wait()
        return f"answer to: {user_text}"


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by CLI tests."""
    yield
    logger = logging.getLogger("platform_assistant")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def stub_responder():
    return StubResponder()


@pytest.fixture
def failing_responder():
    """Factory for responders that fail with a given error."""
    def _make(error: Exception | None = None) -> FailingResponder:
        return FailingResponder(error or RemoteCallError("simulated failure"))
    return _make


@pytest.fixture
def gated_responder():
    return GatedResponder()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove assistant settings from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(scope="session")
def azure_credentials():
    """Return real Azure OpenAI credentials from environment, if any."""
    return {
        "endpoint": os.getenv("AZURE_OPENAI_ENDPOINT"),
        "api_key": os.getenv("AZURE_OPENAI_API_KEY"),
        "deployment_name": os.getenv("AZURE_OPENAI_DEPLOYMENT_NAME"),
    }


@pytest.fixture
def request_config():
    return RemoteRequestConfig(
        endpoint="https://example-resource.openai.azure.com",
        api_key="test-key",
        deployment_name="gpt-4",
    )


def completion_body(content: str | None) -> dict:
    """Build a chat-completion success body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 5, "total_tokens": 17},
    }


class RecordingTransport:
    """Builds an httpx mock transport and keeps the requests it saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def mock_transport():
    """Factory for recording transports around a request handler."""
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> RecordingTransport:
        return RecordingTransport(handler)
    return _make


@pytest.fixture
def completion():
    return completion_body
