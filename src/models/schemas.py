from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Role(str, Enum):
    """Speaker of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class MessagePart(BaseModel):
    """A unit of content within a turn.

    Attributes:
        text: Inline text, if any.
        image: Image as a data URL (``data:<mime>;base64,<payload>``), if any.
    """

    model_config = ConfigDict(frozen=True)

    text: str | None = None
    image: str | None = None

    @model_validator(mode="after")
    def require_content(self) -> "MessagePart":
        """Reject parts carrying neither text nor an image."""
        if self.text is None and self.image is None:
            raise ValueError("A message part needs text or an image")
        return self


class Message(BaseModel):
    """One conversational turn. Immutable once built.

    Attributes:
        id: Opaque identifier, increasing within a conversation.
        role: The speaker (user, assistant, or system).
        parts: Ordered content parts.
        timestamp: Creation time in epoch milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    role: Role
    parts: tuple[MessagePart, ...] = Field(..., min_length=1)
    timestamp: int = Field(..., ge=0)

    @property
    def text(self) -> str:
        """Concatenated text of all text parts."""
        return "\n".join(p.text for p in self.parts if p.text)

    @property
    def images(self) -> list[str]:
        return [p.image for p in self.parts if p.image]


class TutorConfig(BaseModel):
    """Per-call tuning passed opaquely to the generative API.

    Attributes:
        thinking_budget: Reasoning budget hint. Range is the provider's concern.
    """

    thinking_budget: int


class InlineData(BaseModel):
    """Inline binary payload of a wire part."""

    mime_type: str
    data: str


class WirePart(BaseModel):
    """A part of a wire-turn: either text or inline data."""

    text: str | None = None
    inline_data: InlineData | None = None


class WireTurn(BaseModel):
    """A conversation turn in the generative API's request schema."""

    role: str
    parts: list[WirePart]
