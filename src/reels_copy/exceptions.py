import functools
import inspect
import traceback
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

from pydantic import ValidationError as PydanticValidationError

from reels_copy.logging import log_error

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from reels_copy.models import CaptionGenerator, CopyInputs

AnyDict = dict[str, Any]

F = TypeVar("F", bound=Callable[..., "str | Awaitable[str]"])

GENERATION_FAILURE_MESSAGE = (
    "Falha na comunicação com a inteligência artificial. Tente novamente."
)


class ReelsCopyException(Exception):
    """Base class for all exceptions raised by reels-copy.

    Carries structured context (provider, model, request ID, raw provider
    response) for logging. Only ``message`` is meant to be shown to users.

    Attributes:
        message: Human-readable error description.
        provider: Backend identifier (e.g. ``"google"``).
        model: Model name at the time of the error.
        request_id: Request ID assigned by the generation client.
        raw_response: Unmodified backend error details, if available.
    """

    message: str
    provider: str | None
    model: str | None
    request_id: str | None
    raw_response: AnyDict | None

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        model: str | None = None,
        request_id: str | None = None,
        raw_response: AnyDict | None = None,
    ):
        self.message = message
        self.provider = provider
        self.model = model
        self.request_id = request_id
        self.raw_response = raw_response
        super().__init__(message)


class IncompleteInputsError(ReelsCopyException):
    """Raised when one or more caption inputs are empty at submission time.

    Never reaches the generation backend.

    Attributes:
        missing_fields: Names of the empty ``CopyInputs`` fields.
    """

    missing_fields: list[str]

    def __init__(self, missing_fields: list[str], message: str | None = None):
        self.missing_fields = list(missing_fields)
        super().__init__(
            message
            or "Preencha todos os campos: " + ", ".join(self.missing_fields) + "."
        )


class ConfigurationError(ReelsCopyException):
    """Raised when the generation client cannot be configured (e.g. no API key)."""

    pass


class GenerationFailure(ReelsCopyException):
    """Raised when the generation backend could not produce a caption.

    Covers network errors, authentication and quota errors, and malformed
    responses. ``message`` is always a fixed user-facing text; the backend's
    own error is kept in ``raw_response`` and ``__cause__``.
    """

    def __init__(
        self,
        message: str = GENERATION_FAILURE_MESSAGE,
        provider: str | None = None,
        model: str | None = None,
        request_id: str | None = None,
        raw_response: AnyDict | None = None,
    ):
        super().__init__(message, provider, model, request_id, raw_response)


class GenerationTimeout(GenerationFailure):
    """Raised when the backend does not answer within the configured timeout.

    Attributes:
        timeout_seconds: The timeout value that was exceeded, in seconds.
    """

    timeout_seconds: float | None

    def __init__(
        self,
        message: str = GENERATION_FAILURE_MESSAGE,
        provider: str | None = None,
        model: str | None = None,
        request_id: str | None = None,
        raw_response: AnyDict | None = None,
        timeout_seconds: float | None = None,
    ):
        super().__init__(message, provider, model, request_id, raw_response)
        self.timeout_seconds = timeout_seconds


def _wrap_unknown(
    generator: "CaptionGenerator", ex: Exception
) -> GenerationFailure:
    config = getattr(generator, "config", None)
    provider = getattr(config, "provider", None)
    model = getattr(config, "model", None)
    log_error(
        f"Unknown error while generating caption: {ex}",
        context={"provider": provider, "model": model},
        logger_name="reels_copy.exceptions",
        exc_info=True,
    )
    return GenerationFailure(
        provider=provider,
        model=model,
        raw_response={
            "error": str(ex),
            "error_type": type(ex).__name__,
            "traceback": traceback.format_exc(),
        },
    )


def handle_generation_errors(func: F) -> F:
    """Decorator that wraps unhandled exceptions in ``GenerationFailure``.

    Apply to ``generate_caption`` and ``generate_caption_async`` of a
    generation client. Works with both sync and async functions.

    Behaviour:
    - ``ReelsCopyException`` subclasses propagate unchanged.
    - ``PydanticValidationError`` propagates unchanged.
    - Any other exception is logged at ERROR level and wrapped in
      ``GenerationFailure`` carrying the fixed user-facing message.
    """
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(
            self: "CaptionGenerator", inputs: "CopyInputs"
        ) -> str:
            try:
                return await func(self, inputs)
            except (PydanticValidationError, ReelsCopyException):
                raise
            except Exception as ex:
                raise _wrap_unknown(self, ex) from ex

        return cast(F, async_wrapper)

    @functools.wraps(func)
    def sync_wrapper(self: "CaptionGenerator", inputs: "CopyInputs") -> str:
        try:
            return func(self, inputs)
        except (PydanticValidationError, ReelsCopyException):
            raise
        except Exception as ex:
            raise _wrap_unknown(self, ex) from ex

    return cast(F, sync_wrapper)
