"""Health and readiness routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from trendmeme.config import Settings, get_settings
from trendmeme.schemas.meme import CaptionProvider
from trendmeme.services.llm import CaptionGenerator, get_caption_generators

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Check if the backend service is running.",
)
async def health_check():
    return {"status": "ok"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Report which external credentials are configured.",
)
async def readiness_check(
    settings: Annotated[Settings, Depends(get_settings)],
    caption_generators: Annotated[dict[CaptionProvider, CaptionGenerator], Depends(get_caption_generators)],
):
    """
    Readiness check that verifies configuration is loaded.

    Memes can be generated once at least one caption provider has a key;
    trends additionally need SERPAPI_KEY. Key values are never returned.
    """
    providers = {
        provider.value: generator.is_configured
        for provider, generator in caption_generators.items()
    }
    trends_configured = bool(settings.SERPAPI_KEY)
    ready = any(providers.values())

    warnings = []
    if not ready:
        warnings.append("Set GROQ_API_KEY or GEMINI_API_KEY to generate captions")
    if not trends_configured:
        warnings.append("Set SERPAPI_KEY to serve /api/trends")

    return {
        "status": "ready" if ready else "not_ready",
        "configuration": {
            "caption_providers": providers,
            "trends_configured": trends_configured,
            "memegen_base_url": settings.MEMEGEN_BASE_URL,
        },
        "warnings": warnings,
    }
