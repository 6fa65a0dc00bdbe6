from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from src.core.config import Settings
from src.llm import GeminiClient
from src.main import create_app

Handler = Callable[[httpx.Request], httpx.Response]


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def upstream_calls() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(settings, upstream_calls) -> Callable[[Handler], TestClient]:
    """Build a TestClient whose Gemini traffic is answered by `handler`."""

    def _make(handler: Handler) -> TestClient:
        def recording(request: httpx.Request) -> httpx.Response:
            upstream_calls.append(request)
            return handler(request)

        llm_client = GeminiClient(
            api_key=settings.gemini_api_key,
            transport=httpx.MockTransport(recording),
        )
        return TestClient(create_app(settings, llm_client=llm_client))

    return _make
