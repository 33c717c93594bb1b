"""Pydantic models for conversation state and the generative API wire format.

Provides type safety and validation for everything that crosses a seam.

Models:
    - Role: Speaker of a turn
    - MessagePart: Text or image content of a turn
    - Message: One immutable conversation turn
    - TutorConfig: Per-call tuning (thinking budget)
    - WireTurn / WirePart / InlineData: Serialized request turns
"""

from src.models.schemas import (
    InlineData,
    Message,
    MessagePart,
    Role,
    TutorConfig,
    WirePart,
    WireTurn,
)

__all__ = [
    "InlineData",
    "Message",
    "MessagePart",
    "Role",
    "TutorConfig",
    "WirePart",
    "WireTurn",
]
