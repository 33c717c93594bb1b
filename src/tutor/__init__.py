"""Gemini tutor: persona, configuration, and the request/response client.

Responsibilities:
    - Mapping the local transcript to the Gemini wire format
    - One blocking generate call per turn with the thinking budget
    - Environment-driven settings (API key, model, temperature)

Holds no conversation state; the conversation controller owns history.
"""

from src.tutor.client import TutorClient, build_contents, get_tutor_client
from src.tutor.config import TutorSettings, get_tutor_settings

__all__ = [
    "TutorClient",
    "TutorSettings",
    "build_contents",
    "get_tutor_client",
    "get_tutor_settings",
]
