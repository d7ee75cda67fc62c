"""Reels Copy - persuasive Instagram Reels captions generated with Gemini."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("reels-copy")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"

from .api import generate_caption, generate_caption_async
from .controller import COPY_ACK_SECONDS, CaptionRequestController, Clipboard
from .exceptions import (
    GENERATION_FAILURE_MESSAGE,
    ConfigurationError,
    GenerationFailure,
    GenerationTimeout,
    IncompleteInputsError,
    ReelsCopyException,
)
from .mock import MockConfig, MockResponse
from .models import (
    CaptionGenerator,
    CopyInputs,
    GeneratedCopy,
    GenerationConfig,
    GenerationStatus,
    SamplingConfig,
)
from .prompts import FALLBACK_CAPTION, build_caption_prompt
from .registry import get_generator, register_provider

__all__ = [
    # API functions
    "generate_caption",
    "generate_caption_async",
    "build_caption_prompt",
    "get_generator",
    "register_provider",
    # Controller
    "CaptionRequestController",
    "Clipboard",
    "COPY_ACK_SECONDS",
    # Models
    "CopyInputs",
    "GeneratedCopy",
    "GenerationStatus",
    "GenerationConfig",
    "SamplingConfig",
    "CaptionGenerator",
    "MockConfig",
    "MockResponse",
    # Messages
    "FALLBACK_CAPTION",
    "GENERATION_FAILURE_MESSAGE",
    # Exceptions
    "ReelsCopyException",
    "IncompleteInputsError",
    "ConfigurationError",
    "GenerationFailure",
    "GenerationTimeout",
]
