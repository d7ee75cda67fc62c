"""Core data models for caption generation."""

from typing import TYPE_CHECKING, ClassVar, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field, model_validator

from reels_copy.exceptions import IncompleteInputsError

if TYPE_CHECKING:
    from reels_copy.mock import MockConfig

GenerationStatus = Literal["idle", "loading", "success", "error"]

DEFAULT_MODEL = "gemini-3-flash-preview"

FIELD_LABELS = {
    "subject": "Assunto do Reels",
    "attention_question": "Pergunta de Atenção",
    "keyword": "Palavra-Chave (CTA)",
}


# ==================== Inputs ====================


class CopyInputs(BaseModel):
    """The three form fields a caption is generated from.

    An empty or whitespace-only string means "not provided". Values are
    interpolated into the prompt verbatim.
    """

    subject: str = Field(default="", description="What the Reels video is about.")
    attention_question: str = Field(
        default="", description="Question used verbatim as the caption's hook."
    )
    keyword: str = Field(
        default="", description="Word readers are asked to comment (call to action)."
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def missing_fields(self) -> list[str]:
        """Names of the fields that are still empty, in form order."""
        return [name for name in FIELD_LABELS if not getattr(self, name).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def validate_complete(self) -> None:
        """Raise ``IncompleteInputsError`` if any field is empty."""
        missing = self.missing_fields()
        if missing:
            raise IncompleteInputsError(
                missing,
                "Preencha todos os campos: "
                + ", ".join(FIELD_LABELS[name] for name in missing)
                + ".",
            )


# ==================== Result ====================


class GeneratedCopy(BaseModel):
    """Display state of the caption request, replaced wholesale on each transition.

    ``full_text`` is populated on success and kept across later ``loading``
    and ``error`` states. ``error_message`` is set only in ``error``.
    """

    full_text: str = Field(default="", description="Last generated caption.")
    status: GenerationStatus = Field(default="idle")
    error_message: str | None = Field(
        default=None, description="User-facing failure message (error state only)."
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_error_message(self) -> "GeneratedCopy":
        if self.status == "error" and not self.error_message:
            raise ValueError("error_message is required when status is 'error'")
        if self.status != "error" and self.error_message is not None:
            raise ValueError("error_message is only allowed when status is 'error'")
        return self


# ==================== Configuration ====================


class SamplingConfig(BaseModel):
    """Sampling parameters passed unchanged to the generation backend."""

    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    top_p: float = Field(default=0.95, gt=0.0, le=1.0)
    top_k: int = Field(default=40, ge=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class GenerationConfig(BaseModel):
    """Configuration for the caption generation client.

    Injected at construction time; the client never reads the environment.
    Immutable; use ``model_copy(update={...})`` to change fields.

    Example:
        ```python
        config = GenerationConfig(api_key="GEMINI_KEY", timeout=15)
        ```
    """

    provider: str = Field(default="google", description="Backend identifier.")
    model: str = Field(default=DEFAULT_MODEL, description="Model identifier.")
    api_key: str | None = Field(
        default=None, description="API key for the Gemini Developer API."
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Maximum seconds to wait for the backend to answer.",
    )
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    mock: "MockConfig | None" = Field(
        default=None, description="If set and enabled, use the mock backend."
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


# ==================== Generation client interface ====================


class CaptionGenerator(Protocol):
    """Narrow interface of a generation client: inputs in, caption text out.

    Implementations return the backend's text (or the fallback caption when
    the backend answers with nothing) and raise ``GenerationFailure`` on any
    backend or transport error.
    """

    async def generate_caption_async(self, inputs: CopyInputs) -> str:
        """Generate a caption without blocking the event loop.

        Raises:
            GenerationFailure: On any backend or transport error.
        """
        ...

    def generate_caption(self, inputs: CopyInputs) -> str:
        """Generate a caption synchronously (blocking)."""
        ...
