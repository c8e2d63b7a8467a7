import pytest
from unittest.mock import AsyncMock, MagicMock

from config import Config


@pytest.fixture
def anyio_backend():
    """The service code is asyncio-based (asyncio.wait_for / asyncio.sleep)."""
    return "asyncio"


@pytest.fixture
def openai_client_builder():
    from tests.fixtures.mock_clients import OpenAIClientBuilder
    return OpenAIClientBuilder()


@pytest.fixture
def mock_openai_client(openai_client_builder):
    """Reusable AsyncOpenAI mock answering text, image and speech calls."""
    return openai_client_builder.build()


@pytest.fixture
def generator(mock_openai_client):
    """GenerationService backed by the mock client."""
    from services.generation_service import GenerationService
    return GenerationService(mock_openai_client)


@pytest.fixture
def fake_sleep():
    """Awaitable stand-in for asyncio.sleep that records requested delays."""
    return AsyncMock(return_value=None)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "test-key")


@pytest.fixture
def instant_retries(monkeypatch):
    """Keep the retry budget but drop the backoff delays."""
    monkeypatch.setattr(Config, "RETRY_INITIAL_DELAY", 0.0)
    monkeypatch.setattr(Config, "RETRY_MAX_DELAY", 0.0)


@pytest.fixture
def use_openai_client(monkeypatch, api_key, instant_retries):
    """Route the endpoint's provider calls to a given mock client."""
    def install(client):
        monkeypatch.setattr("routes.chat.get_openai_client", lambda: client)
        return client
    return install


@pytest.fixture
def configured_app(use_openai_client, mock_openai_client):
    """Pre-configured app with the standard provider mock."""
    from fastapi.testclient import TestClient
    from main import app

    use_openai_client(mock_openai_client)

    with TestClient(app) as client:
        yield client


@pytest.fixture
def notify():
    return MagicMock()
