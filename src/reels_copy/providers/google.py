"""Google Gemini caption generator using google-genai."""

import asyncio
import traceback
import uuid
from typing import Literal, overload

import httpx
from google.genai.client import AsyncClient, Client
from google.genai.errors import APIError
from google.genai.types import (
    GenerateContentConfig,
    GenerateContentResponse,
    HttpOptions,
)

from reels_copy.exceptions import (
    AnyDict,
    ConfigurationError,
    GenerationFailure,
    GenerationTimeout,
    ReelsCopyException,
    handle_generation_errors,
)
from reels_copy.logging import GeneratorLogger
from reels_copy.models import CopyInputs, GenerationConfig
from reels_copy.prompts import FALLBACK_CAPTION, build_caption_prompt

_LOGGER_NAME = "reels_copy.providers.google"


class GoogleCaptionGenerator:
    """Generation client backed by the Gemini Developer API.

    One ``generate_content`` call per caption with the fixed prompt and the
    configured sampling parameters. The API key comes from ``config``.
    """

    def __init__(self, config: GenerationConfig):
        if not config.api_key:
            raise ConfigurationError(
                "Gemini API key is required. Set api_key in GenerationConfig.",
                provider=config.provider,
                model=config.model,
            )
        self.config = config
        self._client: Client | None = None

    @overload
    def _get_client(self, client_type: Literal["async"]) -> AsyncClient: ...

    @overload
    def _get_client(self, client_type: Literal["sync"]) -> Client: ...

    def _get_client(self, client_type: Literal["sync", "async"]) -> AsyncClient | Client:
        """Return the cached google-genai client, creating it on first use.

        Args:
            client_type: Type of client to return ("sync" or "async")

        Returns:
            genai.Client instance (sync) or genai.Client.aio (async)
        """
        if self._client is None:
            self._client = Client(
                api_key=self.config.api_key,
                http_options=HttpOptions(timeout=int(self.config.timeout * 1000)),
            )
        if client_type == "async":
            return self._client.aio
        return self._client

    def _build_request(self, inputs: CopyInputs, logger: GeneratorLogger) -> AnyDict:
        """Build kwargs for ``client.models.generate_content``."""
        sampling = self.config.sampling
        api_payload: AnyDict = {
            "model": self.config.model,
            "contents": build_caption_prompt(inputs),
            "config": GenerateContentConfig(
                temperature=sampling.temperature,
                top_p=sampling.top_p,
                top_k=sampling.top_k,
            ),
        }
        logger.debug(
            "Mapped request to provider format",
            {"converted_request": api_payload},
            redact=True,
        )
        return api_payload

    def _convert_response(
        self, response: GenerateContentResponse, logger: GeneratorLogger
    ) -> str:
        """Return the response text, or the fallback caption when it is empty."""
        text = response.text
        if not text:
            logger.warning("Backend returned no text, using fallback caption")
            return FALLBACK_CAPTION
        logger.info("Caption generated", {"length": len(text)})
        return text

    def _handle_error(self, request_id: str, ex: Exception) -> ReelsCopyException:
        """Map a google-genai or transport error to a user-safe exception.

        The original error is logged and kept in ``raw_response``; the
        returned exception always carries the fixed user-facing message.
        """
        if isinstance(ex, ReelsCopyException):
            return ex

        logger = GeneratorLogger(
            self.config.provider, self.config.model, _LOGGER_NAME, request_id
        )
        raw_response: AnyDict = {
            "error": str(ex),
            "error_type": type(ex).__name__,
        }

        if isinstance(ex, (asyncio.TimeoutError, httpx.TimeoutException)):
            logger.error(
                "Caption generation timed out",
                {"timeout_seconds": self.config.timeout, **raw_response},
            )
            return GenerationTimeout(
                provider=self.config.provider,
                model=self.config.model,
                request_id=request_id,
                raw_response=raw_response,
                timeout_seconds=self.config.timeout,
            )

        if isinstance(ex, (httpx.ConnectError, httpx.NetworkError)):
            logger.error("Connection error while generating caption", raw_response)
            return GenerationFailure(
                provider=self.config.provider,
                model=self.config.model,
                request_id=request_id,
                raw_response=raw_response,
            )

        # Auth, quota, validation and server errors all surface the same way
        if isinstance(ex, APIError):
            raw_response.update(
                {
                    "status_code": ex.code,
                    "message": ex.message,
                    "error_status": ex.status,
                }
            )
            logger.error("Gemini API error", raw_response)
            return GenerationFailure(
                provider=self.config.provider,
                model=self.config.model,
                request_id=request_id,
                raw_response=raw_response,
            )

        logger.error(
            f"Unknown error while generating caption: {ex}",
            raw_response,
            exc_info=True,
        )
        raw_response["traceback"] = traceback.format_exc()
        return GenerationFailure(
            provider=self.config.provider,
            model=self.config.model,
            request_id=request_id,
            raw_response=raw_response,
        )

    @handle_generation_errors
    async def generate_caption_async(self, inputs: CopyInputs) -> str:
        """Generate a caption asynchronously, bounded by ``config.timeout``.

        Args:
            inputs: The three form fields

        Returns:
            Caption text, or ``FALLBACK_CAPTION`` when the backend returns none

        Raises:
            GenerationFailure: On any backend or transport error
        """
        client = self._get_client("async")
        request_id = f"google-caption-{uuid.uuid4()}"
        logger = GeneratorLogger(
            self.config.provider, self.config.model, _LOGGER_NAME
        ).with_request_id(request_id)

        logger.debug("Starting caption generation API call")
        try:
            kwargs = self._build_request(inputs, logger)
            response: GenerateContentResponse = await asyncio.wait_for(
                client.models.generate_content(**kwargs),
                timeout=self.config.timeout,
            )
            return self._convert_response(response, logger)
        except Exception as ex:
            raise self._handle_error(request_id, ex) from ex

    @handle_generation_errors
    def generate_caption(self, inputs: CopyInputs) -> str:
        """Generate a caption synchronously (blocking).

        The HTTP timeout configured on the client bounds the call.
        """
        client = self._get_client("sync")
        request_id = f"google-caption-{uuid.uuid4()}"
        logger = GeneratorLogger(
            self.config.provider, self.config.model, _LOGGER_NAME
        ).with_request_id(request_id)

        logger.debug("Starting caption generation API call")
        try:
            kwargs = self._build_request(inputs, logger)
            response: GenerateContentResponse = client.models.generate_content(
                **kwargs
            )
            return self._convert_response(response, logger)
        except Exception as ex:
            raise self._handle_error(request_id, ex) from ex
