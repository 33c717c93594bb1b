"""Integration tests against the live Gemini API.

Runs the real TutorClient and ConversationController end to end.

Requirements:
    - GEMINI_API_KEY environment variable
    - Tests are skipped without it
"""

import os
from unittest.mock import patch

import pytest

from src.conversation.controller import ERROR_REPLY, ConversationController
from src.models.schemas import Role, TutorConfig
from src.tutor.client import TutorClient
from src.tutor.config import TutorSettings


def has_gemini_key() -> bool:
    """Check if Gemini API key is configured."""
    key = os.environ.get("GEMINI_API_KEY", "")
    return bool(key and not key.isspace())


requires_api_key = pytest.mark.skipif(
    not has_gemini_key(),
    reason="GEMINI_API_KEY not set - skipping Gemini integration test",
)


@pytest.fixture
def tutor_client() -> TutorClient:
    return TutorClient(TutorSettings())


@requires_api_key
class TestLiveTutor:
    """Full send path with the real provider."""

    async def test_tutor_replies_to_problem(self, tutor_client: TutorClient) -> None:
        conversation = ConversationController(
            tutor=tutor_client, config=TutorConfig(thinking_budget=1024)
        )

        reply = await conversation.send("How do I solve 2x + 3 = 7?")

        assert reply is not None
        assert reply.role is Role.ASSISTANT
        assert reply.text
        assert reply.text != ERROR_REPLY

    async def test_follow_up_uses_history(self, tutor_client: TutorClient) -> None:
        conversation = ConversationController(
            tutor=tutor_client, config=TutorConfig(thinking_budget=1024)
        )

        await conversation.send("Let's work on x^2 - 5x + 6 = 0.")
        reply = await conversation.next_step()

        assert reply is not None
        assert reply.text != ERROR_REPLY
        assert len(conversation.messages) == 5


class TestMissingCredential:
    """A missing key fails the first call, and the conversation apologizes."""

    async def test_missing_key_yields_apology(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            tutor = TutorClient(TutorSettings(api_key=""))
            conversation = ConversationController(
                tutor=tutor, config=TutorConfig(thinking_budget=0)
            )

            reply = await conversation.send("Hello?")

        assert reply is not None
        assert reply.text == ERROR_REPLY
        assert conversation.can_send("again")
