"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - test_user: Identity returned by the overridden auth dependency
    - fake_chat_service / fake_file_service: In-process provider stand-ins
    - app: Fresh FastAPI app with auth and services overridden
    - async_client: HTTPX client for API testing
    - auth_headers: Bearer header accepted by the overridden auth
"""

from collections.abc import AsyncGenerator, Iterable
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from chat_relay.api.app import create_app
from chat_relay.api.deps import chat_service, file_service, get_current_user
from chat_relay.llm.config import DEFAULT_SYSTEM_PROMPT
from chat_relay.models.schemas import AuthUser


class FakeChatService:
    """Yields fixed deltas, optionally failing after them."""

    default_system_prompt = DEFAULT_SYSTEM_PROMPT

    def __init__(
        self,
        chunks: Iterable[str] = ("Hello", " world"),
        error: Exception | None = None,
    ) -> None:
        self.chunks = list(chunks)
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def stream_response(self, message: str, system_prompt: str) -> AsyncGenerator[str]:
        self.calls.append((message, system_prompt))
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error


class FakeFileService:
    """Records uploads and serves canned metadata."""

    def __init__(self, max_upload_bytes: int = 1024) -> None:
        self.max_upload_bytes = max_upload_bytes
        self.uploads: list[tuple[str, bytes]] = []
        self.upload_error: Exception | None = None
        self.retrieve_error: Exception | None = None

    async def upload(self, filename: str, data: bytes) -> SimpleNamespace:
        if self.upload_error is not None:
            raise self.upload_error
        self.uploads.append((filename, data))
        return SimpleNamespace(id="file-abc123")

    async def retrieve(self, file_id: str) -> dict[str, Any]:
        if self.retrieve_error is not None:
            raise self.retrieve_error
        return {"id": file_id, "object": "file", "filename": "notes.txt", "bytes": 11}


@pytest.fixture
def test_user() -> AuthUser:
    return AuthUser(id="user-123", email="tester@example.com")


@pytest.fixture
def fake_chat_service() -> FakeChatService:
    return FakeChatService()


@pytest.fixture
def fake_file_service() -> FakeFileService:
    return FakeFileService()


@pytest.fixture
def app(
    test_user: AuthUser,
    fake_chat_service: FakeChatService,
    fake_file_service: FakeFileService,
) -> FastAPI:
    """Create an app whose auth and provider services are replaced."""
    application = create_app()
    application.dependency_overrides[get_current_user] = lambda: test_user
    application.dependency_overrides[chat_service] = lambda: fake_chat_service
    application.dependency_overrides[file_service] = lambda: fake_file_service
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": "Bearer test-token"}
