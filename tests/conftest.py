"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - make_message: Factory for conversation turns
    - tutor_config: Small thinking budget for tests
    - fake_tutor: Recording stand-in for the Gemini client
    - async_client: HTTPX client for API testing
"""

import itertools
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.models.schemas import Message, MessagePart, Role, TutorConfig
from tests.fakes import FakeTutor


@pytest.fixture
def make_message() -> Callable[..., Message]:
    """Build messages with unique increasing ids.

    Returns:
        Factory taking a role plus optional text and image.
    """
    ids = itertools.count(1)

    def _make(role: Role | str, text: str | None = None, image: str | None = None) -> Message:
        parts = []
        if text is not None or image is None:
            parts.append(MessagePart(text=text or ""))
        if image is not None:
            parts.append(MessagePart(image=image))
        message_id = next(ids)
        return Message(id=str(message_id), role=role, parts=parts, timestamp=message_id)

    return _make


@pytest.fixture
def tutor_config() -> TutorConfig:
    return TutorConfig(thinking_budget=1024)


@pytest.fixture
def fake_tutor() -> FakeTutor:
    return FakeTutor()


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
