"""Shared fixtures for gateway and front end tests."""
import os

# Settings are read when src.api.main is imported
os.environ.setdefault("GEMINI_API_KEY", "test-api-key")
os.environ.setdefault("APP_ENV", "production")

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.api.routes.chat import get_chat_service
from src.core.config import get_settings
from src.llm.catalog import PREFERRED_MODEL
from src.services.chat_service import ChatService

from ._helpers import FakeLLMClient


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    """Provide a fake Gemini client that answers successfully."""
    return FakeLLMClient()


@pytest.fixture
def chat_service(fake_llm: FakeLLMClient) -> ChatService:
    """Provide a ChatService wired to the fake client."""
    return ChatService(llm_client=fake_llm, default_model=PREFERRED_MODEL)


@pytest.fixture
def client(chat_service: ChatService):
    """Provide a TestClient whose chat route uses the fake client."""
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def development_env(monkeypatch: pytest.MonkeyPatch):
    """Run with APP_ENV=development so error details are exposed."""
    monkeypatch.setenv("APP_ENV", "development")
    get_settings.cache_clear()
    yield
    monkeypatch.undo()
    get_settings.cache_clear()
