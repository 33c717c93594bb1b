"""Conversation state and the send path.

One controller per page owns the transcript and the single
outstanding-request flag. Renderers read state from it and subscribe to
change notifications instead of touching globals.
"""

import base64
import logging
import time
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Protocol

from src.models.schemas import Message, MessagePart, Role, TutorConfig
from src.tutor.client import get_tutor_client
from src.tutor.prompts import GREETING

logger = logging.getLogger(__name__)

ERROR_REPLY = "I'm sorry, I hit a snag while thinking. Could we try that step again?"
IMAGE_ONLY_PROMPT = (
    "I've uploaded an image of a problem. Can you help me with the first step?"
)
WHY_PROMPT = "Why did we do that? I want to understand the concept behind this step."
NEXT_STEP_PROMPT = "I'm stuck, can you show me the next step?"
DEFAULT_IMAGE_TYPE = "image/jpeg"


class ConversationStatus(str, Enum):
    """Whether a tutor call is outstanding."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class Tutor(Protocol):
    """Anything that can answer a conversation."""

    async def send_message(
        self, messages: Sequence[Message], config: TutorConfig
    ) -> str: ...


def to_data_url(content: bytes, content_type: str | None = None) -> str:
    """Encode raw image bytes as a base64 data URL."""
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type or DEFAULT_IMAGE_TYPE};base64,{encoded}"


class ConversationController:
    """Owns the transcript and drives the Idle/Awaiting-Response cycle.

    Attributes:
        draft_text: The input buffer, bound to the page's text field.
        selected_image: Data URL of the picked image, if any.
    """

    def __init__(
        self,
        tutor: Tutor | None = None,
        config: TutorConfig | None = None,
        greeting: str = GREETING,
    ) -> None:
        """Initialize a conversation seeded with the tutor's greeting.

        Args:
            tutor: Tutor to answer turns. Uses the global client if omitted.
            config: Per-call tuning. Loads from environment if omitted.
            greeting: Text of the seed assistant message.
        """
        if tutor is None or config is None:
            client = get_tutor_client()
            tutor = tutor or client
            config = config or client.settings.tutor_config()

        self._tutor = tutor
        self._config = config
        self._messages: list[Message] = []
        self._last_id = 0
        self._listeners: list[Callable[[], None]] = []
        self.status = ConversationStatus.IDLE
        self.draft_text = ""
        self.selected_image: str | None = None

        self._append(Role.ASSISTANT, [MessagePart(text=greeting)])

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def is_awaiting_response(self) -> bool:
        return self.status is ConversationStatus.AWAITING_RESPONSE

    @property
    def nudges_enabled(self) -> bool:
        """Nudges need an exchange to refer to and no outstanding call."""
        return not self.is_awaiting_response and len(self._messages) >= 2

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every state change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()

    def _next_id(self) -> tuple[str, int]:
        now = int(time.time() * 1000)
        self._last_id = max(now, self._last_id + 1)
        return str(self._last_id), now

    def _append(self, role: Role, parts: list[MessagePart]) -> Message:
        message_id, timestamp = self._next_id()
        message = Message(id=message_id, role=role, parts=tuple(parts), timestamp=timestamp)
        self._messages.append(message)
        return message

    def select_image(self, content: bytes, content_type: str | None = None) -> str:
        """Attach an image to the next turn. Replaces any previous selection."""
        self.selected_image = to_data_url(content, content_type)
        logger.debug(f"Selected image ({len(content)} bytes)")
        self._notify()
        return self.selected_image

    def clear_image(self) -> None:
        self.selected_image = None
        self._notify()

    def can_send(self, text: str | None = None) -> bool:
        """Whether a send would start a tutor call.

        Args:
            text: Text to send instead of the input buffer.
        """
        if self.is_awaiting_response:
            return False
        candidate = text if text is not None else self.draft_text
        return bool(candidate and candidate.strip()) or self.selected_image is not None

    async def send(self, text: str | None = None) -> Message | None:
        """Send a user turn and append the tutor's reply.

        Failures of the tutor call are logged and replaced by a fixed apology.

        Args:
            text: Text to send instead of the input buffer (used by nudges).

        Returns:
            The appended assistant message, or None if nothing was sent.
        """
        if not self.can_send(text):
            return None

        content = text if text is not None else self.draft_text
        image = self.selected_image

        parts = [MessagePart(text=content if content.strip() else IMAGE_ONLY_PROMPT)]
        if image:
            parts.append(MessagePart(image=image))
        self._append(Role.USER, parts)

        self.draft_text = ""
        self.selected_image = None
        self.status = ConversationStatus.AWAITING_RESPONSE

        try:
            self._notify()
            reply = await self._tutor.send_message(self.messages, self._config)
        except Exception as e:
            logger.error(f"Tutor call failed: {e}")
            reply = ERROR_REPLY
        finally:
            # Also reached on cancellation, which propagates without a reply.
            self.status = ConversationStatus.IDLE

        message = self._append(Role.ASSISTANT, [MessagePart(text=reply)])
        self._notify()
        return message

    async def ask_why(self) -> Message | None:
        """Ask for the concept behind the last step."""
        if not self.nudges_enabled:
            return None
        return await self.send(WHY_PROMPT)

    async def next_step(self) -> Message | None:
        """Ask for the next step."""
        if not self.nudges_enabled:
            return None
        return await self.send(NEXT_STEP_PROMPT)
