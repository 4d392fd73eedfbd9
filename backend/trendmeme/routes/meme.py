"""
Meme generation API routes.

The backend never renders images. It resolves the template, asks a text
generation backend for a caption, and returns the memegen URL that the
client loads directly:

1. Frontend (topic, template, mode, provider) -> Backend
2. Backend -> template catalog (canonical template id)
3. Backend -> Groq or Gemini (caption)
4. Backend -> Frontend (caption + memegen image URL)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from trendmeme.config import Settings, get_settings
from trendmeme.errors import ConfigurationError, MethodNotAllowedError, UpstreamError
from trendmeme.schemas.meme import (
    CaptionProvider,
    ErrorResponse,
    MemeGenerateRequest,
    MemeGenerateResponse,
)
from trendmeme.services.captions import build_meme_url, sanitize_caption
from trendmeme.services.llm import (
    CaptionConfigurationError,
    CaptionGenerator,
    get_caption_generators,
)
from trendmeme.services.templates import TemplateCatalog, get_template_catalog

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["meme"],
)


@router.post(
    "/generate-meme",
    response_model=MemeGenerateResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Missing topic or invalid body", "model": ErrorResponse},
        405: {"description": "Method other than POST", "model": ErrorResponse},
        500: {"description": "Missing credentials or caption backend failure", "model": ErrorResponse},
    },
    summary="Generate a meme",
    description="""
    Generate a captioned meme for a topic.

    1. The requested template (id, alias, or "random") is resolved against
       the memegen catalog, falling back to "drake".
    2. The selected provider (Groq by default, or Gemini) writes a caption.
    3. The caption is sanitized and, unless mode is "caption", encoded into
       a memegen image URL.
    """,
)
async def generate_meme(
    request: MemeGenerateRequest,
    settings: Annotated[Settings, Depends(get_settings)],
    template_catalog: Annotated[TemplateCatalog, Depends(get_template_catalog)],
    caption_generators: Annotated[dict[CaptionProvider, CaptionGenerator], Depends(get_caption_generators)],
) -> MemeGenerateResponse:
    """
    Generate a meme caption and image URL for a topic.

    Raises:
        ConfigurationError: If the selected provider has no API key
        UpstreamError: If the caption backend fails
    """
    provider = request.caption_provider
    logger.info(
        f"Received meme generation request. topic='{request.topic[:50]}', "
        f"template={request.template!r}, provider={provider.value}, mode={request.mode!r}"
    )

    # ==========================================================================
    # STEP 1: Resolve the template against the current catalog
    # ==========================================================================
    template, templates = await template_catalog.resolve(request.template)
    logger.info(f"Resolved template {request.template!r} -> '{template}'")

    # ==========================================================================
    # STEP 2: Generate the caption with the selected provider (no fallback)
    # ==========================================================================
    generator = caption_generators[provider]
    try:
        raw_caption = await generator.generate_caption(request.topic)
    except CaptionConfigurationError as e:
        logger.error(f"Caption provider {provider.value} is not configured: {e}")
        raise ConfigurationError(str(e)) from e
    except Exception as e:
        logger.error(f"Error generating meme: {e}", exc_info=True)
        raise UpstreamError("Failed to generate meme") from e

    # ==========================================================================
    # STEP 3: Sanitize, and build the image URL unless caption-only
    # ==========================================================================
    caption = sanitize_caption(raw_caption)

    meme_url = None
    if not request.caption_only:
        meme_url = build_meme_url(settings.MEMEGEN_BASE_URL, template, caption)

    logger.info(f"Generated caption '{caption}' with template '{template}'")

    return MemeGenerateResponse(
        caption=caption,
        meme_url=meme_url,
        template=template,
        requested_template=request.template,
        resolved_template=template,
        templates=templates,
        provider=provider,
    )


@router.api_route(
    "/generate-meme",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def generate_meme_wrong_method():
    raise MethodNotAllowedError("Only POST requests are allowed")
