"""Generation client registry and resolution."""

from collections.abc import Callable

from reels_copy.exceptions import ConfigurationError
from reels_copy.logging import log_debug, log_error, log_info
from reels_copy.models import CaptionGenerator, GenerationConfig
from reels_copy.providers.google import GoogleCaptionGenerator

GeneratorFactory = Callable[[GenerationConfig], CaptionGenerator]

_GENERATOR_FACTORIES: dict[str, GeneratorFactory] = {
    "google": GoogleCaptionGenerator,
}


def get_generator(config: GenerationConfig) -> CaptionGenerator:
    """Build the generation client for the given config.

    Args:
        config: Generation configuration

    Returns:
        MockCaptionGenerator if mock is enabled, else the provider's generator

    Raises:
        ConfigurationError: If provider is not supported
    """
    if config.mock and config.mock.enabled:
        from reels_copy.mock import MockCaptionGenerator

        log_info(
            "Using mock generator",
            context={"mock_enabled": True},
            logger_name="reels_copy.registry",
        )
        return MockCaptionGenerator(config)

    factory = _GENERATOR_FACTORIES.get(config.provider)
    if factory is None:
        log_error(
            "Unsupported provider",
            context={"provider": config.provider},
            logger_name="reels_copy.registry",
        )
        raise ConfigurationError(
            f"Unsupported provider: {config.provider}",
            provider=config.provider,
        )

    log_debug(
        "Selected provider",
        context={"provider": config.provider, "model": config.model},
        logger_name="reels_copy.registry",
    )
    return factory(config)


def register_provider(provider: str, factory: GeneratorFactory) -> None:
    """Register a custom generation backend.

    Args:
        provider: Provider name matched against ``GenerationConfig.provider``
        factory: Callable building a CaptionGenerator from a GenerationConfig
    """
    if provider in _GENERATOR_FACTORIES:
        log_info(
            f"Overwriting existing provider: {provider}",
            context={"provider": provider},
            logger_name="reels_copy.registry",
        )

    _GENERATOR_FACTORIES[provider] = factory
    log_debug(
        "Registered custom provider",
        context={"provider": provider},
        logger_name="reels_copy.registry",
    )
