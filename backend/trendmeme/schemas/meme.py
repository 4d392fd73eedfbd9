"""
Meme generation schemas.

This module contains all Pydantic models for request/response validation
in the meme generation endpoint. Field names on the wire follow the front
end's camelCase convention; Python code uses snake_case.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CaptionProvider(str, Enum):
    """Text generation backends that can write a caption."""
    GROQ = "groq"
    GEMINI = "gemini"


class MemeMode(str, Enum):
    """What the caller wants back."""
    FULL = "full"
    CAPTION = "caption"


# =============================================================================
# FRONTEND REQUEST/RESPONSE SCHEMAS
# =============================================================================

class MemeGenerateRequest(BaseModel):
    """
    Request schema for meme generation from the front end.

    Only ``topic`` is required. ``template`` may be a canonical memegen id,
    a friendly alias such as ``success-kid``, or ``"random"``.
    """

    topic: str = Field(
        ...,
        description="Trending topic the caption should be about",
        examples=["space exploration"],
    )

    template: Optional[str] = Field(
        None,
        description="Requested template id, alias, or 'random'",
        examples=["gru-plan"],
    )

    mode: Optional[str] = Field(
        None,
        description="'caption' to skip building the image URL",
    )

    provider: Optional[str] = Field(
        None,
        description="'gemini' to use Gemini, anything else uses Groq",
    )

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v: str) -> str:
        """Reject blank topics."""
        v = v.strip()
        if not v:
            raise ValueError("Topic cannot be empty")
        return v

    @property
    def caption_only(self) -> bool:
        return self.mode == MemeMode.CAPTION.value

    @property
    def caption_provider(self) -> CaptionProvider:
        if self.provider == CaptionProvider.GEMINI.value:
            return CaptionProvider.GEMINI
        return CaptionProvider.GROQ


class MemeGenerateResponse(BaseModel):
    """
    Response schema for successful meme generation.

    ``memeUrl`` is omitted in caption-only mode. The image itself is never
    fetched by the backend; the client loads it straight from memegen.
    """

    caption: str = Field(
        ...,
        description="Sanitized caption, at most 120 characters"
    )

    meme_url: Optional[str] = Field(
        None,
        alias="memeUrl",
        description="Rendered meme image URL on memegen"
    )

    template: str = Field(
        ...,
        description="Canonical template id used for the image"
    )

    requested_template: Optional[str] = Field(
        None,
        alias="requestedTemplate",
        description="Template exactly as the client sent it"
    )

    resolved_template: str = Field(
        ...,
        alias="resolvedTemplate",
        description="Canonical template id the request resolved to"
    )

    templates: list[str] = Field(
        ...,
        description="Current template catalog"
    )

    provider: CaptionProvider = Field(
        ...,
        description="Backend that wrote the caption"
    )

    class Config:
        populate_by_name = True


# =============================================================================
# ERROR RESPONSE SCHEMA
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(..., description="Human-readable error message")
