"""Gemini caption generation via the google-genai SDK."""

import logging
from typing import Optional

import httpx
from google import genai
from google.genai import errors, types

from trendmeme.config import Settings
from trendmeme.schemas.meme import CaptionProvider
from trendmeme.services.llm import (
    CaptionConfigurationError,
    CaptionGenerator,
    CaptionResponseError,
)

logger = logging.getLogger(__name__)


class GeminiCaptionGenerator(CaptionGenerator):
    """Writes captions with Google Gemini."""

    provider = CaptionProvider.GEMINI

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__(settings)
        self._client: Optional[genai.Client] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.GEMINI_API_KEY)

    def _get_client(self) -> genai.Client:
        if self._client is not None:
            return self._client
        if not self.is_configured:
            raise CaptionConfigurationError("Missing GEMINI_API_KEY / GOOGLE_API_KEY")
        self._client = genai.Client(
            api_key=self.settings.GEMINI_API_KEY,
            # google-genai takes the timeout in milliseconds
            http_options=types.HttpOptions(timeout=self.settings.CAPTION_TIMEOUT * 1000),
        )
        return self._client

    async def generate_caption(self, topic: str) -> Optional[str]:
        client = self._get_client()

        logger.info(f"Requesting caption from Gemini model {self.settings.GEMINI_MODEL}")
        try:
            response = await client.aio.models.generate_content(
                model=self.settings.GEMINI_MODEL,
                contents=self.build_prompt(topic),
            )
        except (errors.APIError, httpx.HTTPError) as e:
            logger.error(f"Gemini caption request failed: {e}")
            raise CaptionResponseError(f"Gemini caption request failed: {e}") from e

        return response.text
