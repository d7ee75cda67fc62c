"""Unit tests for the public API and generator registry."""

from unittest.mock import MagicMock, patch

import pytest

from reels_copy.api import generate_caption, generate_caption_async
from reels_copy.exceptions import ConfigurationError, IncompleteInputsError
from reels_copy.mock import MockCaptionGenerator, MockConfig, MockResponse
from reels_copy.models import CopyInputs, GenerationConfig
from reels_copy.providers.google import GoogleCaptionGenerator
from reels_copy.registry import get_generator, register_provider


@pytest.fixture
def mock_config():
    return GenerationConfig(
        mock=MockConfig(enabled=True, responses=[MockResponse(text="Legenda mock")])
    )


# ==================== Registry ====================


def test_get_generator_returns_google_by_default(generation_config):
    assert isinstance(get_generator(generation_config), GoogleCaptionGenerator)


def test_get_generator_prefers_mock(mock_config):
    assert isinstance(get_generator(mock_config), MockCaptionGenerator)


def test_get_generator_unknown_provider():
    config = GenerationConfig(provider="unknown", api_key="test-key")

    with pytest.raises(ConfigurationError):
        get_generator(config)


def test_register_provider_adds_factory():
    custom = MagicMock()
    factory = MagicMock(return_value=custom)
    register_provider("custom-test", factory)
    config = GenerationConfig(provider="custom-test")

    assert get_generator(config) is custom
    factory.assert_called_once_with(config)


# ==================== API ====================


def test_generate_caption_uses_configured_backend(copy_inputs, mock_config):
    assert generate_caption(copy_inputs, mock_config) == "Legenda mock"


@pytest.mark.asyncio
async def test_generate_caption_async_uses_configured_backend(
    copy_inputs, mock_config
):
    assert await generate_caption_async(copy_inputs, mock_config) == "Legenda mock"


def test_generate_caption_rejects_incomplete_inputs(generation_config):
    with patch("reels_copy.api.get_generator") as mock_get_generator:
        with pytest.raises(IncompleteInputsError):
            generate_caption(CopyInputs(subject="vender mais"), generation_config)

    mock_get_generator.assert_not_called()
