"""
Trending searches service.

Thin proxy over SerpApi's Google Trends "trending now" engine. The
``trending_searches`` array is handed back to the front end untouched.
"""

import logging
from typing import Any, Optional

import httpx

from trendmeme.config import Settings, get_settings

logger = logging.getLogger(__name__)


class TrendsServiceError(Exception):
    """Base exception for trends service errors."""
    pass


class TrendsConfigurationError(TrendsServiceError):
    """Raised when SERPAPI_KEY is not configured."""
    pass


class TrendsResponseError(TrendsServiceError):
    """Raised when SerpApi cannot be reached or returns an unusable response."""
    pass


class TrendsService:
    """Fetches the current trending searches."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _build_params(self) -> dict[str, str]:
        return {
            "engine": self.settings.TRENDS_ENGINE,
            "geo": self.settings.TRENDS_GEO,
            "api_key": self.settings.SERPAPI_KEY,
        }

    async def get_trending_searches(self) -> list[Any]:
        """
        Return SerpApi's ``trending_searches`` array.

        Raises:
            TrendsConfigurationError: If SERPAPI_KEY is missing
            TrendsResponseError: On network errors, non-200 status or a body without trends
        """
        if not self.settings.SERPAPI_KEY:
            raise TrendsConfigurationError(
                "SERPAPI_KEY is not configured. Set SERPAPI_KEY in your .env file."
            )

        try:
            async with httpx.AsyncClient(timeout=self.settings.TRENDS_TIMEOUT) as client:
                response = await client.get(self.settings.SERPAPI_URL, params=self._build_params())
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach SerpApi: {e}")
            raise TrendsResponseError(f"Failed to reach SerpApi: {e}") from e

        if response.status_code != 200:
            logger.error(
                f"SerpApi returned status {response.status_code}: {response.text[:500]}"
            )
            raise TrendsResponseError(f"SerpApi returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise TrendsResponseError("SerpApi returned a non-JSON body") from e

        trending = data.get("trending_searches") if isinstance(data, dict) else None
        if not isinstance(trending, list):
            raise TrendsResponseError("SerpApi response has no trending_searches list")

        logger.info(f"Fetched {len(trending)} trending searches")
        return trending


# Convenience function for dependency injection
async def get_trends_service() -> TrendsService:
    """Get a TrendsService instance for dependency injection."""
    return TrendsService()
