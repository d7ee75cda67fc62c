"""Request lifecycle for the caption form.

State machine: ``idle -> loading -> success | error`` and
``success | error -> loading`` on resubmission. At most one request is in
flight; submitting while ``loading`` is a no-op.
"""

import asyncio
import time
from collections.abc import Callable
from typing import Any, Protocol

from reels_copy.exceptions import (
    GENERATION_FAILURE_MESSAGE,
    GenerationFailure,
    IncompleteInputsError,
)
from reels_copy.logging import log_debug, log_error, log_info
from reels_copy.models import CaptionGenerator, CopyInputs, GeneratedCopy

_LOGGER_NAME = "reels_copy.controller"

COPY_ACK_SECONDS = 2.0


class Clipboard(Protocol):
    """Destination for ``CaptionRequestController.copy``."""

    def write_text(self, text: str) -> None: ...


class CaptionRequestController:
    """Owns the form inputs and the single generation request's display state.

    Args:
        generator: Generation client; any object with ``generate_caption_async``
        clock: Monotonic clock used for the copy acknowledgement
    """

    def __init__(
        self,
        generator: CaptionGenerator,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.generator = generator
        self.clock = clock
        self.inputs = CopyInputs()
        self.result = GeneratedCopy()
        self.validation_message: str | None = None
        self._copied_at: float | None = None

    # ==================== Inputs ====================

    def update_field(self, name: str, value: str) -> None:
        """Replace one input field. Allowed in every state."""
        if name not in CopyInputs.model_fields:
            raise KeyError(f"Unknown input field: {name}")
        self.update_inputs(**{name: value})

    def update_inputs(self, **changes: Any) -> None:
        self.inputs = self.inputs.model_copy(update=changes)
        if self.validation_message and self.inputs.is_complete:
            self.validation_message = None

    # ==================== State ====================

    @property
    def status(self) -> str:
        return self.result.status

    @property
    def is_loading(self) -> bool:
        return self.result.status == "loading"

    @property
    def can_submit(self) -> bool:
        """Whether the trigger should be enabled."""
        return not self.is_loading and self.inputs.is_complete

    def _transition(self, result: GeneratedCopy) -> None:
        log_debug(
            "Status transition",
            context={"from": self.result.status, "to": result.status},
            logger_name=_LOGGER_NAME,
        )
        self.result = result

    def _fail(self, message: str) -> None:
        self._transition(
            GeneratedCopy(
                full_text=self.result.full_text, status="error", error_message=message
            )
        )

    # ==================== Submission ====================

    def begin(self) -> CopyInputs | None:
        """Validate and enter ``loading`` synchronously.

        Returns the inputs snapshot to generate from, or None when nothing
        should be sent (a request is already in flight, or inputs are
        incomplete, in which case ``validation_message`` is set and the
        status is left as is).
        """
        if self.is_loading:
            log_debug("Submit ignored while loading", logger_name=_LOGGER_NAME)
            return None

        try:
            self.inputs.validate_complete()
        except IncompleteInputsError as ex:
            self.validation_message = ex.message
            log_info(
                "Submit blocked by incomplete inputs",
                context={"missing_fields": ex.missing_fields},
                logger_name=_LOGGER_NAME,
            )
            return None

        self.validation_message = None
        self._copied_at = None
        self._transition(
            GeneratedCopy(full_text=self.result.full_text, status="loading")
        )
        return self.inputs

    async def complete(self, inputs: CopyInputs) -> GeneratedCopy:
        """Await the generation client and record the outcome."""
        try:
            text = await self.generator.generate_caption_async(inputs)
        except asyncio.CancelledError:
            log_info("Generation cancelled", logger_name=_LOGGER_NAME)
            self._fail(GENERATION_FAILURE_MESSAGE)
            raise
        except GenerationFailure as ex:
            self._fail(ex.message or GENERATION_FAILURE_MESSAGE)
            return self.result
        except Exception as ex:
            log_error(
                f"Generation client raised an unexpected error: {ex}",
                context={"error_type": type(ex).__name__},
                logger_name=_LOGGER_NAME,
                exc_info=True,
            )
            self._fail(GENERATION_FAILURE_MESSAGE)
            return self.result

        self._transition(GeneratedCopy(full_text=text, status="success"))
        return self.result

    async def submit(self) -> GeneratedCopy:
        """Validate, enter ``loading`` and generate.

        A no-op returning the current result when ``begin`` declines.
        """
        inputs = self.begin()
        if inputs is None:
            return self.result
        return await self.complete(inputs)

    # ==================== Copy ====================

    @property
    def copyable_text(self) -> str | None:
        """The caption a copy would write, or None outside ``success``."""
        if self.result.status != "success" or not self.result.full_text:
            return None
        return self.result.full_text

    def copy(self, clipboard: Clipboard) -> bool:
        """Write the caption to ``clipboard``; only available in ``success``."""
        text = self.copyable_text
        if text is None:
            return False
        clipboard.write_text(text)
        self._copied_at = self.clock()
        log_debug(
            "Caption copied",
            context={"length": len(self.result.full_text)},
            logger_name=_LOGGER_NAME,
        )
        return True

    @property
    def copy_acknowledged(self) -> bool:
        """True for ``COPY_ACK_SECONDS`` after a successful copy."""
        if self._copied_at is None:
            return False
        return self.clock() - self._copied_at < COPY_ACK_SECONDS
