"""Tutor configuration with environment variable loading.

Pydantic-based configuration for the Gemini tutor client.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from src.models.schemas import TutorConfig

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-3-pro-preview"
DEFAULT_THINKING_BUDGET = 32768


class TutorSettings(BaseModel):
    """Configuration for the Gemini tutor client.

    The API key is deliberately not validated here: a missing key surfaces
    as a failure of the first call, which the conversation turns into the
    usual apology.

    Attributes:
        api_key: Gemini API key.
        model_name: Model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        thinking_budget: Reasoning budget requested on every call.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", "")),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("TUTOR_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    thinking_budget: int = Field(
        default_factory=lambda: os.getenv(
            "TUTOR_THINKING_BUDGET", str(DEFAULT_THINKING_BUDGET)
        ),
        validate_default=True,
        description="Thinking budget passed opaquely to the model",
    )

    def tutor_config(self) -> TutorConfig:
        """Per-call tutor configuration derived from these settings."""
        return TutorConfig(thinking_budget=self.thinking_budget)


def get_tutor_settings() -> TutorSettings:
    """Create tutor settings from environment.

    Returns:
        Configured TutorSettings instance.
    """
    return TutorSettings()
