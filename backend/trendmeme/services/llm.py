"""
Caption generation interface.

Each text generation backend implements ``CaptionGenerator``. The route only
ever talks to this interface; ``get_caption_generator`` picks the
implementation for the requested ``CaptionProvider``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from trendmeme.config import Settings, get_settings
from trendmeme.schemas.meme import CaptionProvider

logger = logging.getLogger(__name__)


CAPTION_PROMPT = (
    "Write a very short (max 12 words) witty meme caption "
    "(no hashtags, no surrounding quotes) for the topic: \"{topic}\""
)


class CaptionServiceError(Exception):
    """Base exception for caption generation errors."""
    pass


class CaptionConfigurationError(CaptionServiceError):
    """Raised when the selected backend has no API key configured."""
    pass


class CaptionResponseError(CaptionServiceError):
    """Raised when a backend fails or returns an unusable response."""
    pass


class CaptionGenerator(ABC):
    """A text generation backend that writes one meme caption per call."""

    provider: CaptionProvider

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @staticmethod
    def build_prompt(topic: str) -> str:
        return CAPTION_PROMPT.format(topic=topic)

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the backend's API key is present."""

    @abstractmethod
    async def generate_caption(self, topic: str) -> Optional[str]:
        """
        Generate a raw, unsanitized caption for ``topic``.

        Raises:
            CaptionConfigurationError: If the backend's key is missing
            CaptionResponseError: If the backend call fails
        """


def get_caption_generator(
    provider: CaptionProvider,
    settings: Optional[Settings] = None,
) -> CaptionGenerator:
    """Return the caption generator for ``provider``."""
    # Imported here so each backend module can import this one
    from trendmeme.services.gemini import GeminiCaptionGenerator
    from trendmeme.services.groq import GroqCaptionGenerator

    generators: dict[CaptionProvider, type[CaptionGenerator]] = {
        CaptionProvider.GROQ: GroqCaptionGenerator,
        CaptionProvider.GEMINI: GeminiCaptionGenerator,
    }
    return generators[provider](settings)


# Dependency injection support
_caption_generators = None

def get_caption_generators() -> dict[CaptionProvider, CaptionGenerator]:
    """
    Get the process-wide generator for each provider.

    Generators are built once so each keeps its lazily created client
    (and connection pool) for the life of the process.
    """
    global _caption_generators
    if _caption_generators is None:
        _caption_generators = {provider: get_caption_generator(provider) for provider in CaptionProvider}
    return _caption_generators
