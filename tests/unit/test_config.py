"""Unit tests for TutorSettings.

Tests environment loading and value validation.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.tutor.config import (
    DEFAULT_MODEL,
    DEFAULT_THINKING_BUDGET,
    TutorSettings,
    get_tutor_settings,
)


class TestTutorSettings:
    """Tests for TutorSettings validation."""

    def test_valid_settings_with_all_fields(self) -> None:
        """Settings accept valid values for all fields."""
        settings = TutorSettings(
            api_key="test-key-12345",
            model_name="gemini-2.5-flash",
            temperature=0.5,
            thinking_budget=2048,
        )

        assert settings.api_key == "test-key-12345"
        assert settings.model_name == "gemini-2.5-flash"
        assert settings.temperature == 0.5
        assert settings.thinking_budget == 2048

    def test_settings_with_default_values(self) -> None:
        """Settings use defaults when only the API key is provided."""
        with patch.dict("os.environ", {}, clear=True):
            settings = TutorSettings(api_key="test-key")

        assert settings.model_name == DEFAULT_MODEL
        assert settings.temperature == 0.7
        assert settings.thinking_budget == DEFAULT_THINKING_BUDGET

    def test_missing_api_key_is_accepted(self) -> None:
        """A missing key is not validated locally; the first call fails instead."""
        with patch.dict("os.environ", {}, clear=True):
            settings = TutorSettings()

        assert settings.api_key == ""

    def test_fails_with_temperature_too_low(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TutorSettings(api_key="k", temperature=-0.1)

        assert "temperature" in str(exc_info.value).lower()

    def test_fails_with_temperature_too_high(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TutorSettings(api_key="k", temperature=2.5)

        assert "temperature" in str(exc_info.value).lower()

    def test_tutor_config_carries_thinking_budget(self) -> None:
        settings = TutorSettings(api_key="k", thinking_budget=512)

        assert settings.tutor_config().thinking_budget == 512


class TestGetTutorSettings:
    """Tests for get_tutor_settings factory function."""

    def test_reads_gemini_api_key(self) -> None:
        with patch.dict("os.environ", {"GEMINI_API_KEY": "env-key"}, clear=True):
            assert get_tutor_settings().api_key == "env-key"

    def test_falls_back_to_api_key(self) -> None:
        with patch.dict("os.environ", {"API_KEY": "fallback-key"}, clear=True):
            assert get_tutor_settings().api_key == "fallback-key"

    def test_reads_model_and_budget(self) -> None:
        env = {"TUTOR_MODEL": "gemini-2.5-pro", "TUTOR_THINKING_BUDGET": "4096"}
        with patch.dict("os.environ", env, clear=True):
            settings = get_tutor_settings()

        assert settings.model_name == "gemini-2.5-pro"
        assert settings.thinking_budget == 4096

    def test_malformed_budget_names_the_field(self) -> None:
        """A non-integer budget fails pydantic validation, not a bare int() error."""
        with (
            patch.dict("os.environ", {"TUTOR_THINKING_BUDGET": "lots"}, clear=True),
            pytest.raises(ValidationError) as exc_info,
        ):
            get_tutor_settings()

        assert "thinking_budget" in str(exc_info.value)
