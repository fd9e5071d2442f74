"""Tests for settings, logging setup and the error taxonomy."""

import logging

import pytest
from pydantic import ValidationError

from oulipo_engine.config import Settings, get_settings, reset_settings
from oulipo_engine.errors import (
    GenerationError,
    InvalidConfigError,
    OulipoError,
    UnknownPresetError,
)
from oulipo_engine.logging_config import configure_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.default_n_plus_offset == 7
        assert settings.default_haiku_theme == "nature"
        assert settings.max_text_length == 100_000
        assert settings.log_format == "json"

    def test_env_override(self, fresh_settings):
        fresh_settings.setenv("OULIPO_DEFAULT_N_PLUS_OFFSET", "3")
        settings = reset_settings()
        assert settings.default_n_plus_offset == 3
        assert get_settings() is settings

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(log_format="xml")


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_sets_root_level(self):
        configure_logging(Settings(log_level="debug", log_format="console"))
        assert logging.getLogger().level == logging.DEBUG
        configure_logging(Settings())
        assert logging.getLogger().level == logging.INFO

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(Settings(log_level="chatty"))
        assert logging.getLogger().level == logging.INFO


class TestErrors:
    """Tests for the error taxonomy."""

    def test_codes(self):
        assert InvalidConfigError("x").code == "INVALID_CONFIG"
        assert UnknownPresetError("x").code == "UNKNOWN_PRESET"
        assert GenerationError("x").code == "GENERATION_FAILED"

    def test_str_includes_code(self):
        assert str(InvalidConfigError("bad vowel")) == "INVALID_CONFIG: bad vowel"

    def test_to_dict(self):
        assert UnknownPresetError("nope").to_dict() == {
            "error": "oulipo_error",
            "code": "UNKNOWN_PRESET",
            "message": "nope",
        }

    def test_code_override(self):
        error = OulipoError("custom", code="CUSTOM")
        assert error.code == "CUSTOM"
        assert OulipoError.code == "OULIPO_ERROR"

    def test_subclasses_share_base(self):
        assert issubclass(GenerationError, OulipoError)
