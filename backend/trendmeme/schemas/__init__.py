# Schemas package - Pydantic models for request/response validation
from trendmeme.schemas.meme import (
    CaptionProvider,
    ErrorResponse,
    MemeGenerateRequest,
    MemeGenerateResponse,
    MemeMode,
)

__all__ = [
    "CaptionProvider",
    "ErrorResponse",
    "MemeGenerateRequest",
    "MemeGenerateResponse",
    "MemeMode",
]
