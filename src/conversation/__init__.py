"""In-memory conversation state for a single chat page.

Responsibilities:
    - Holding the ordered transcript, seeded with the tutor's greeting
    - Gating sends so at most one tutor call is outstanding
    - Turning tutor failures into a fixed apology
    - Canned "why?" and "next step" nudges

Lives for one page; nothing is persisted.
"""

from src.conversation.controller import (
    ConversationController,
    ConversationStatus,
    to_data_url,
)

__all__ = ["ConversationController", "ConversationStatus", "to_data_url"]
