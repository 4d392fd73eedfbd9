"""
Groq caption generation.

Groq serves an OpenAI-compatible chat completions API, so this backend uses
the openai client pointed at GROQ_BASE_URL.
"""

import logging
from typing import Optional

import openai
from openai import AsyncOpenAI

from trendmeme.config import Settings
from trendmeme.schemas.meme import CaptionProvider
from trendmeme.services.llm import (
    CaptionConfigurationError,
    CaptionGenerator,
    CaptionResponseError,
)

logger = logging.getLogger(__name__)


class GroqCaptionGenerator(CaptionGenerator):
    """Writes captions with a Llama model hosted on Groq."""

    provider = CaptionProvider.GROQ

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__(settings)
        self._client: Optional[AsyncOpenAI] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.GROQ_API_KEY)

    def _get_client(self) -> AsyncOpenAI:
        """Lazy-initialize the client so a missing key only fails when Groq is used."""
        if self._client is not None:
            return self._client
        if not self.is_configured:
            raise CaptionConfigurationError(
                "Groq API key missing. Provide provider=gemini or configure GROQ_API_KEY."
            )
        self._client = AsyncOpenAI(
            api_key=self.settings.GROQ_API_KEY,
            base_url=self.settings.GROQ_BASE_URL,
            timeout=self.settings.CAPTION_TIMEOUT,
            max_retries=0,
        )
        return self._client

    async def generate_caption(self, topic: str) -> Optional[str]:
        client = self._get_client()

        logger.info(f"Requesting caption from Groq model {self.settings.GROQ_MODEL}")
        try:
            response = await client.chat.completions.create(
                model=self.settings.GROQ_MODEL,
                messages=[{"role": "user", "content": self.build_prompt(topic)}],
                temperature=0.9,
                max_tokens=40,
            )
        except openai.OpenAIError as e:
            logger.error(f"Groq caption request failed: {e}")
            raise CaptionResponseError(f"Groq caption request failed: {e}") from e

        if not response.choices:
            return None
        return response.choices[0].message.content
