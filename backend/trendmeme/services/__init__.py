# Services package - External API integrations and caption/template logic
from trendmeme.services.gemini import GeminiCaptionGenerator
from trendmeme.services.groq import GroqCaptionGenerator
from trendmeme.services.llm import CaptionGenerator, get_caption_generator
from trendmeme.services.templates import TemplateCatalog, resolve_template
from trendmeme.services.trends import TrendsService

__all__ = [
    "CaptionGenerator",
    "GeminiCaptionGenerator",
    "GroqCaptionGenerator",
    "TemplateCatalog",
    "TrendsService",
    "get_caption_generator",
    "resolve_template",
]
