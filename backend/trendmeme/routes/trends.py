"""Trending searches API route."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from trendmeme.errors import ConfigurationError, UpstreamError
from trendmeme.schemas.meme import ErrorResponse
from trendmeme.services.trends import (
    TrendsConfigurationError,
    TrendsService,
    TrendsServiceError,
    get_trends_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["trends"],
)


@router.get(
    "/trends",
    status_code=status.HTTP_200_OK,
    responses={
        500: {"description": "Missing SERPAPI_KEY or SerpApi failure", "model": ErrorResponse},
    },
    summary="Current trending searches",
    description="Proxy for SerpApi's trending searches; the array is returned verbatim.",
)
async def get_trends(
    trends_service: Annotated[TrendsService, Depends(get_trends_service)],
) -> list[Any]:
    try:
        return await trends_service.get_trending_searches()
    except TrendsConfigurationError as e:
        logger.error(f"Trends provider is not configured: {e}")
        raise ConfigurationError("Trends API key missing. Configure SERPAPI_KEY.") from e
    except TrendsServiceError as e:
        logger.error(f"Error fetching trends: {e}")
        raise UpstreamError("Failed to fetch trends") from e
