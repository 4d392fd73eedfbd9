"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from trendmeme.config import Settings, get_settings
from trendmeme.main import app
from trendmeme.schemas.meme import CaptionProvider
from trendmeme.services.llm import CaptionGenerator, get_caption_generators
from trendmeme.services.templates import TemplateCatalog, get_template_catalog
from trendmeme.services.trends import TrendsService, get_trends_service

CATALOG = ["drake", "db", "ds", "doge", "success", "gru", "cmm", "leo", "buzz", "two-face"]


def make_settings(**overrides) -> Settings:
    """Settings that ignore the developer's .env and real keys."""
    values = {
        "GROQ_API_KEY": "groq-test-key",
        "GEMINI_API_KEY": "gemini-test-key",
        "SERPAPI_KEY": "serpapi-test-key",
        "MEMEGEN_BASE_URL": "https://api.memegen.link",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_generator(provider: CaptionProvider, caption="When it works on the first try") -> MagicMock:
    generator = MagicMock(spec=CaptionGenerator)
    generator.provider = provider
    generator.is_configured = True
    generator.generate_caption = AsyncMock(return_value=caption)
    return generator


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def template_catalog(settings) -> TemplateCatalog:
    """A catalog whose memegen fetch returns CATALOG."""
    catalog = TemplateCatalog(settings)
    catalog._fetch_template_ids = AsyncMock(return_value=list(CATALOG))
    return catalog


@pytest.fixture
def caption_generators() -> dict:
    return {
        CaptionProvider.GROQ: make_generator(CaptionProvider.GROQ),
        CaptionProvider.GEMINI: make_generator(CaptionProvider.GEMINI),
    }


@pytest.fixture
def trends_service() -> MagicMock:
    service = MagicMock(spec=TrendsService)
    service.get_trending_searches = AsyncMock(return_value=[{"query": "space exploration"}])
    return service


@pytest.fixture
def client(settings, template_catalog, caption_generators, trends_service):
    """Test client with every external dependency replaced."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_template_catalog] = lambda: template_catalog
    app.dependency_overrides[get_caption_generators] = lambda: caption_generators
    app.dependency_overrides[get_trends_service] = lambda: trends_service
    yield TestClient(app)
    app.dependency_overrides.clear()
