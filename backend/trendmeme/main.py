"""
Trend Meme Backend - Main Application Entry Point.

This FastAPI application serves the trend meme front end. It coordinates:
1. SerpApi - trending searches for the topic picker
2. memegen - template catalog and image rendering (by URL only)
3. Groq / Gemini - caption generation

The backend NEVER generates images or overlays text itself.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trendmeme.config import get_settings
from trendmeme.errors import register_exception_handlers
from trendmeme.routes.health import router as health_router
from trendmeme.routes.meme import router as meme_router
from trendmeme.routes.trends import router as trends_router

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFESPAN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    # Log configuration status (without exposing secrets)
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"Groq API key configured: {bool(settings.GROQ_API_KEY)}")
    logger.info(f"Gemini API key configured: {bool(settings.GEMINI_API_KEY)}")
    logger.info(f"SerpApi key configured: {bool(settings.SERPAPI_KEY)}")
    logger.info(f"memegen base URL: {settings.MEMEGEN_BASE_URL}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    # Missing keys are request-time errors, not startup failures
    if not settings.GROQ_API_KEY and not settings.GEMINI_API_KEY:
        logger.warning(
            "No caption provider is configured. "
            "Set GROQ_API_KEY or GEMINI_API_KEY in your .env file."
        )
    if not settings.SERPAPI_KEY:
        logger.warning(
            "SERPAPI_KEY is not configured. /api/trends will return errors."
        )

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Application shutdown")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
## Trend Meme Backend

Pick a trending topic, get a captioned meme.

### Key Endpoints

- `GET /api/trends` - Current trending searches
- `POST /api/generate-meme` - Generate a caption and memegen image URL
- `GET /health` - Health check
- `GET /health/ready` - Readiness check

### Configuration

API keys (GROQ_API_KEY, GEMINI_API_KEY, SERPAPI_KEY) are read from
environment variables or a `.env` file.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


# =============================================================================
# MIDDLEWARE & ERROR HANDLERS
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# =============================================================================
# ROUTES
# =============================================================================

app.include_router(health_router)
app.include_router(trends_router)
app.include_router(meme_router)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def run() -> None:
    """Run the local development server."""
    import uvicorn

    uvicorn.run(
        "trendmeme.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
