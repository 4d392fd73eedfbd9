"""
Configuration module for the Trend Meme Backend.

This module handles all environment variable loading and configuration settings.
All external dependencies (API URLs, keys, timeouts) are configured here.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All API keys are optional at startup. A missing key only turns into an
    error when a request actually needs that provider.
    """

    # ==========================================================================
    # APPLICATION SETTINGS
    # ==========================================================================

    APP_NAME: str = "Trend Meme Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Local development server
    HOST: str = "0.0.0.0"
    PORT: int = 8787

    # ==========================================================================
    # TRENDS SETTINGS (SerpApi)
    # ==========================================================================

    # Key for SerpApi's google_trends_trending_now engine.
    # The front end build used VITE_SERPAPI_KEY, both names are accepted.
    SERPAPI_KEY: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("SERPAPI_KEY", "VITE_SERPAPI_KEY"),
    )
    SERPAPI_URL: str = "https://serpapi.com/search.json"
    TRENDS_ENGINE: str = "google_trends_trending_now"
    TRENDS_GEO: str = "US"
    TRENDS_TIMEOUT: int = 30

    # ==========================================================================
    # CAPTION PROVIDERS
    # ==========================================================================

    # Groq exposes an OpenAI-compatible API, so the openai client is used
    # with GROQ_BASE_URL.
    GROQ_API_KEY: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("GROQ_API_KEY", "VITE_GROQ_API_KEY"),
    )
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.1-8b-instant"

    GEMINI_API_KEY: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    GEMINI_MODEL: str = "gemini-2.0-flash"

    # Timeout for caption generation calls (in seconds)
    CAPTION_TIMEOUT: int = 30

    # ==========================================================================
    # MEMEGEN SETTINGS
    # ==========================================================================

    # Base URL for both the template catalog and the rendered images
    MEMEGEN_BASE_URL: str = "https://api.memegen.link"
    MEMEGEN_TIMEOUT: int = 10

    # How long a fetched template catalog stays fresh (in seconds)
    TEMPLATE_TTL_SECONDS: int = 60 * 60

    # ==========================================================================
    # CORS SETTINGS
    # ==========================================================================

    # Comma separated list, e.g. "https://memes.example.com,http://localhost:5173"
    CORS_ORIGINS: str = "http://localhost:5173"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS string into a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        # Load settings from .env file if it exists
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once
    and reused across the application.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
