"""Public API for caption generation."""

from reels_copy.logging import log_debug
from reels_copy.models import CopyInputs, GenerationConfig
from reels_copy.registry import get_generator


def generate_caption(inputs: CopyInputs, config: GenerationConfig) -> str:
    """Generate a Reels caption synchronously.

    Args:
        inputs: The three form fields
        config: Backend configuration (API key, model, timeout, sampling)

    Returns:
        Caption text, or the fallback caption when the backend returns none

    Raises:
        IncompleteInputsError: If any input is empty (no backend call is made)
        GenerationFailure: On any backend or transport error

    Example:
        ```python
        text = generate_caption(
            CopyInputs(subject="vender mais", attention_question="Você trava nas vendas?", keyword="VENDAS"),
            GenerationConfig(api_key="GEMINI_KEY"),
        )
        ```
    """
    inputs.validate_complete()
    log_debug(
        "generate_caption called",
        context={"provider": config.provider, "model": config.model},
        logger_name="reels_copy.api",
    )
    return get_generator(config).generate_caption(inputs)


async def generate_caption_async(inputs: CopyInputs, config: GenerationConfig) -> str:
    """Generate a Reels caption asynchronously.

    Same contract as [generate_caption][].
    """
    inputs.validate_complete()
    log_debug(
        "generate_caption_async called",
        context={"provider": config.provider, "model": config.model},
        logger_name="reels_copy.api",
    )
    return await get_generator(config).generate_caption_async(inputs)
