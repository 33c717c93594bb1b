"""Socratica - a Socratic math tutor chat.

Combines NiceGUI for the chat page, FastAPI as its host, Gemini (google-genai)
for the tutor, and Pydantic for data validation.

Components:
    - api: FastAPI host and health check
    - tutor: Gemini client, persona, and settings
    - conversation: In-memory transcript and send state
    - rendering: Prose/LaTeX rendering for chat bubbles
    - ui: Web interface for the conversation
    - models: Message and wire-format schemas
"""

__version__ = "0.1.0"
