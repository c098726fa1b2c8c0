import sys
from pathlib import Path


def _ensure_local_package_on_path() -> None:
    root_dir = Path(__file__).resolve().parents[1]
    if str(root_dir) not in sys.path:
        sys.path.insert(0, str(root_dir))


_ensure_local_package_on_path()

import json  # noqa: E402
from typing import Callable, Iterator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from openai import AsyncOpenAI  # noqa: E402

from lingua_relay.api.deps import get_openai_gateway  # noqa: E402
from lingua_relay.core.app import create_app  # noqa: E402
from lingua_relay.core.config import AppSettings, get_settings  # noqa: E402
from lingua_relay.integrations.openai_gateway import OpenAIGateway  # noqa: E402

UPSTREAM_BASE_URL = "https://upstream.test/v1"


def chat_completion_payload(content: str | None) -> dict[str, object]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class StubUpstream:
    """Records outbound OpenAI requests and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json=chat_completion_payload("")
        )

    def reply_with(self, response: httpx.Response) -> None:
        self.responder = lambda request: response

    def reply_with_chat(self, content: str | None) -> None:
        self.reply_with(httpx.Response(200, json=chat_completion_payload(content)))

    def reply_with_audio(self, audio: bytes) -> None:
        self.reply_with(httpx.Response(200, content=audio, headers={"content-type": "audio/mpeg"}))

    def fail_transport(self) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.responder = _raise

    def json_bodies(self) -> list[dict[str, object]]:
        return [json.loads(request.content) for request in self.requests]

    def client_factory(self, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=api_key,
            base_url=UPSTREAM_BASE_URL,
            max_retries=0,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self._handle)),
        )

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


def make_settings(**overrides: object) -> AppSettings:
    values: dict[str, object] = {"OPENAI_API_KEY": "sk-test"}
    values.update(overrides)
    return AppSettings(_env_file=None, **values)  # type: ignore[arg-type]


@pytest.fixture
def upstream() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def gateway(settings: AppSettings, upstream: StubUpstream) -> OpenAIGateway:
    return OpenAIGateway(settings, client_factory=upstream.client_factory)


def override_dependencies(app: FastAPI, settings: AppSettings, gateway: OpenAIGateway) -> None:
    async def override_get_settings() -> AppSettings:
        return settings

    async def override_get_openai_gateway() -> OpenAIGateway:
        return gateway

    app.dependency_overrides[get_settings] = override_get_settings
    app.dependency_overrides[get_openai_gateway] = override_get_openai_gateway


@pytest.fixture
def app(settings: AppSettings, gateway: OpenAIGateway) -> Iterator[FastAPI]:
    application = create_app()
    override_dependencies(application, settings, gateway)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
