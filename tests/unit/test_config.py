"""Unit tests for environment-driven configuration."""

import pytest

from reels_copy.config import load_generation_config
from reels_copy.exceptions import ConfigurationError


def test_load_config_with_gemini_key():
    config = load_generation_config({"GEMINI_API_KEY": "AIza-test"})

    assert config.api_key == "AIza-test"
    assert config.model == "gemini-3-flash-preview"
    assert config.timeout == 30.0
    assert config.mock is None


def test_load_config_falls_back_to_api_key():
    config = load_generation_config({"API_KEY": "legacy-key"})

    assert config.api_key == "legacy-key"


def test_load_config_reads_model_and_timeout():
    config = load_generation_config(
        {
            "GEMINI_API_KEY": "AIza-test",
            "REELS_COPY_MODEL": "gemini-2.5-flash",
            "REELS_COPY_TIMEOUT": "12.5",
        }
    )

    assert config.model == "gemini-2.5-flash"
    assert config.timeout == 12.5


def test_load_config_without_key_fails():
    with pytest.raises(ConfigurationError) as exc_info:
        load_generation_config({})

    assert "GEMINI_API_KEY" in exc_info.value.message


@pytest.mark.parametrize("flag", ["1", "true", "YES", "on"])
def test_mock_mode_needs_no_key(flag):
    config = load_generation_config({"REELS_COPY_MOCK": flag})

    assert config.api_key is None
    assert config.mock is not None
    assert config.mock.enabled is True


def test_invalid_timeout_is_configuration_error():
    with pytest.raises(ConfigurationError):
        load_generation_config({"GEMINI_API_KEY": "k", "REELS_COPY_TIMEOUT": "soon"})
