"""Build a GenerationConfig from environment variables.

Only the application entry point passes ``os.environ`` in; library code
takes a ``GenerationConfig`` explicitly.

Environment:
- GEMINI_API_KEY (falls back to API_KEY)
- REELS_COPY_MODEL (default: gemini-3-flash-preview)
- REELS_COPY_TIMEOUT (seconds, default: 30)
- REELS_COPY_MOCK ("1"/"true" to use the mock backend)
"""

from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from reels_copy.exceptions import ConfigurationError
from reels_copy.mock import MockConfig
from reels_copy.models import DEFAULT_MODEL, GenerationConfig

_TRUTHY = {"1", "true", "yes", "on"}


def load_generation_config(environ: Mapping[str, str]) -> GenerationConfig:
    """Read generation settings from ``environ``.

    Raises:
        ConfigurationError: If no API key is set outside mock mode, or a
            value cannot be parsed.
    """
    api_key = environ.get("GEMINI_API_KEY") or environ.get("API_KEY") or None
    use_mock = environ.get("REELS_COPY_MOCK", "").strip().lower() in _TRUTHY

    if not api_key and not use_mock:
        raise ConfigurationError(
            "GEMINI_API_KEY is not set. Export it or set REELS_COPY_MOCK=1."
        )

    try:
        return GenerationConfig(
            api_key=api_key,
            model=environ.get("REELS_COPY_MODEL") or DEFAULT_MODEL,
            timeout=environ.get("REELS_COPY_TIMEOUT") or 30.0,
            mock=MockConfig(enabled=True, delay_seconds=1.0) if use_mock else None,
        )
    except PydanticValidationError as ex:
        raise ConfigurationError(f"Invalid configuration: {ex}") from ex
