"""Mock caption generation for running the app and tests without Gemini."""

import asyncio
import random
import time
from typing import ClassVar, cast

from pydantic import BaseModel, ConfigDict, Field, model_validator

from reels_copy.exceptions import handle_generation_errors
from reels_copy.logging import GeneratorLogger
from reels_copy.models import CopyInputs, GenerationConfig
from reels_copy.prompts import CALL_TO_ACTION_HASHTAGS, FALLBACK_CAPTION

_LOGGER_NAME = "reels_copy.mock"


# ==================== Mock Models ====================


class MockResponse(BaseModel):
    """A single weighted outcome in the mock response pool.

    Set at most one of ``text`` or ``error``. With neither set, a sample
    caption is rendered from the request inputs. ``text=""`` simulates a
    backend that answers with no text.
    """

    weight: float = Field(
        default=1.0, description="Relative probability weight. Must be positive."
    )
    text: str | None = Field(
        default=None, description="Return this exact caption text."
    )
    error: Exception | None = Field(
        default=None,
        description="If set, raise this exception instead of returning a caption.",
    )

    @model_validator(mode="after")
    def validate_response(self) -> "MockResponse":
        if self.text is not None and self.error is not None:
            raise ValueError("Cannot specify both text and error in the same MockResponse")
        if self.weight <= 0:
            raise ValueError("weight must be positive")
        return self

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, arbitrary_types_allowed=True
    )


class MockConfig(BaseModel):
    """Enables mock caption generation for testing without real API calls.

    Set on [GenerationConfig][] ``mock`` to replace the Gemini backend.

    Example:
        ```python
        config = GenerationConfig(
            mock=MockConfig(enabled=True, delay_seconds=0.5),
        )
        ```
    """

    enabled: bool = Field(description="Set to True to activate the mock backend.")
    responses: list[MockResponse] | None = Field(
        default=None,
        description="Pool of possible outcomes. Defaults to a single sample-caption response.",
    )
    delay_seconds: float = Field(
        default=0.0, ge=0, description="Simulated backend latency."
    )

    @model_validator(mode="before")
    @classmethod
    def validate_config(cls, data: dict[str, object]) -> dict[str, object]:
        if data.get("enabled") and not data.get("responses"):
            data["responses"] = [MockResponse(weight=1.0)]
        return data

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, arbitrary_types_allowed=True
    )


GenerationConfig.model_rebuild()


# ==================== Response Selection ====================


def select_mock_response(responses: list[MockResponse]) -> MockResponse:
    """Select response based on weights."""
    total_weight = sum(r.weight for r in responses)
    weights = [r.weight / total_weight for r in responses]
    return random.choices(responses, weights=weights, k=1)[0]


def render_sample_caption(inputs: CopyInputs) -> str:
    """Render a caption that follows the real template's structure."""
    hashtags = "\n".join(CALL_TO_ACTION_HASHTAGS)
    return (
        f"🤔 {inputs.attention_question}\n\n"
        f"😓 Falar de {inputs.subject} sem estratégia trava os seus resultados.\n\n"
        "💡 Neste vídeo eu mostro uma estratégia simples para virar esse jogo.\n\n"
        f"👇 Se fez sentido para você, escreva [ {inputs.keyword} ] aqui embaixo.🔥\n"
        "📲 Envie para alguém que precisa destravar resultados.🚀\n"
        "👍 E fortaleça com seu LIKE ♥️\n\n"
        f"{hashtags}"
    )


def _resolve(selected: MockResponse, inputs: CopyInputs) -> str:
    if selected.error is not None:
        raise selected.error
    if selected.text is None:
        return render_sample_caption(inputs)
    return selected.text or FALLBACK_CAPTION


# ==================== Generator ====================


class MockCaptionGenerator:
    """Caption generator that serves outcomes from ``config.mock``."""

    def __init__(self, config: GenerationConfig):
        if not config.mock or not config.mock.enabled:
            raise ValueError("MockCaptionGenerator requires mock config to be enabled")
        self.config = config
        self.mock = config.mock
        self.logger = GeneratorLogger("mock", config.model, _LOGGER_NAME)

    def _select(self) -> MockResponse:
        selected = select_mock_response(cast(list[MockResponse], self.mock.responses))
        self.logger.debug(
            "Selected mock response",
            {"is_error": selected.error is not None, "text": selected.text},
        )
        return selected

    @handle_generation_errors
    async def generate_caption_async(self, inputs: CopyInputs) -> str:
        """Return a mock caption after the configured delay."""
        selected = self._select()
        if self.mock.delay_seconds:
            await asyncio.sleep(self.mock.delay_seconds)
        return _resolve(selected, inputs)

    @handle_generation_errors
    def generate_caption(self, inputs: CopyInputs) -> str:
        """Return a mock caption after the configured delay (blocking)."""
        selected = self._select()
        if self.mock.delay_seconds:
            time.sleep(self.mock.delay_seconds)
        return _resolve(selected, inputs)
