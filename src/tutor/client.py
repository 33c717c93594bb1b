"""Gemini tutor client: conversation-to-wire translation and the single API call.

Architecture decisions:

1. **Stateless calls** - The client keeps no session on the provider side.
   Every call replays the whole transcript, so the conversation controller
   stays the single owner of history.

2. **Explicit wire models** - Turns are first mapped to our own pydantic
   wire models (``WireTurn``) and only converted to SDK types at the call
   boundary. The mapping stays a pure function that tests can inspect
   without touching the network.

3. **Lazy SDK client** - The ``genai.Client`` is built on the first call.
   A missing API key therefore fails that call instead of app startup.

4. **Errors propagate** - Failures are logged and re-raised unchanged.
   Retry and user-facing fallback belong to the caller.
"""

import base64
import logging
from collections.abc import Sequence

from google import genai
from google.genai import types

from src.models.schemas import (
    InlineData,
    Message,
    MessagePart,
    Role,
    TutorConfig,
    WirePart,
    WireTurn,
)
from src.tutor.config import TutorSettings, get_tutor_settings
from src.tutor.prompts import SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPE = "image/jpeg"
EMPTY_RESPONSE_FALLBACK = (
    "I'm sorry, I couldn't generate a response. Let's try looking at the problem again."
)


def to_wire_role(role: Role | str) -> str:
    """Map a local role to the API's role: assistant becomes model, all else user."""
    return "model" if role == Role.ASSISTANT else "user"


def strip_data_url(image: str) -> str:
    """Return the base64 payload of a data URL.

    Everything up to and including the first comma is dropped. A string
    without a comma is returned unchanged.
    """
    _, sep, payload = image.partition(",")
    return payload if sep else image


def to_wire_part(part: MessagePart) -> WirePart:
    if part.image:
        return WirePart(
            inline_data=InlineData(
                mime_type=IMAGE_MIME_TYPE,
                data=strip_data_url(part.image),
            )
        )
    return WirePart(text=part.text or "")


def build_contents(messages: Sequence[Message]) -> list[WireTurn]:
    """Serialize a conversation into wire-turns.

    System turns are dropped; the system instruction travels out-of-band.

    Args:
        messages: The full ordered conversation.

    Returns:
        One wire-turn per non-system message, in order.

    Raises:
        ValueError: If the conversation is empty.
    """
    if not messages:
        raise ValueError("Conversation must contain at least one turn")

    return [
        WireTurn(
            role=to_wire_role(message.role),
            parts=[to_wire_part(part) for part in message.parts],
        )
        for message in messages
        if message.role != Role.SYSTEM
    ]


def _to_sdk_content(turn: WireTurn) -> types.Content:
    parts: list[types.Part] = []
    for part in turn.parts:
        if part.inline_data is not None:
            parts.append(
                types.Part.from_bytes(
                    data=base64.b64decode(part.inline_data.data),
                    mime_type=part.inline_data.mime_type,
                )
            )
        else:
            parts.append(types.Part(text=part.text or ""))
    return types.Content(role=turn.role, parts=parts)


class TutorClient:
    """Sends a conversation to Gemini and returns the tutor's reply text."""

    def __init__(self, settings: TutorSettings | None = None) -> None:
        """Initialize the tutor client.

        Args:
            settings: Optional tutor settings.
                      Loads from environment if not provided.
        """
        self._settings = settings or get_tutor_settings()
        self._client: genai.Client | None = None

    @property
    def settings(self) -> TutorSettings:
        return self._settings

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self._settings.api_key)
        return self._client

    def _build_request_config(self, config: TutorConfig) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=SYSTEM_INSTRUCTION,
            thinking_config=types.ThinkingConfig(thinking_budget=config.thinking_budget),
            temperature=self._settings.temperature,
        )

    async def send_message(
        self,
        messages: Sequence[Message],
        config: TutorConfig,
    ) -> str:
        """Get the tutor's next reply for a conversation.

        Args:
            messages: The full ordered conversation, resent on every call.
            config: Per-call tuning (thinking budget).

        Returns:
            The response text, or a fixed fallback if the API returned none.

        Raises:
            Exception: Any transport or API error, unchanged.
        """
        contents = build_contents(messages)
        logger.debug(f"Sending {len(contents)} turns to {self._settings.model_name}")

        try:
            response = await self._get_client().aio.models.generate_content(
                model=self._settings.model_name,
                contents=[_to_sdk_content(turn) for turn in contents],
                config=self._build_request_config(config),
            )
        except Exception as e:
            logger.error(f"Gemini API error: {e}")
            raise

        return response.text or EMPTY_RESPONSE_FALLBACK


# Module-level singleton instance
_tutor_client: TutorClient | None = None


def get_tutor_client() -> TutorClient:
    """Get or create the global tutor client.

    Returns:
        The TutorClient instance.
    """
    global _tutor_client
    if _tutor_client is None:
        _tutor_client = TutorClient()
    return _tutor_client
