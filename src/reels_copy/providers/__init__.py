"""Generation backend implementations."""

from reels_copy.providers.google import GoogleCaptionGenerator

__all__ = ["GoogleCaptionGenerator"]
