"""
Meme template catalog and template resolution.

The catalog is the list of canonical template ids that memegen currently
serves. It is fetched lazily, kept for TEMPLATE_TTL_SECONDS, and never
empty: when no fetch has ever succeeded the built-in FALLBACK_TEMPLATES
are served instead.

Resolution turns whatever the client sent (``gru-plan``, ``SUCCESS_KID``,
``random``...) into one of those canonical ids.
"""

import asyncio
import logging
import random
import time
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional, Sequence

import httpx

from trendmeme.config import Settings, get_settings

logger = logging.getLogger(__name__)


RANDOM_TEMPLATE = "random"
DEFAULT_TEMPLATE = "drake"

# Known-good memegen ids, served when the catalog cannot be fetched.
# DEFAULT_TEMPLATE must stay in this list.
FALLBACK_TEMPLATES: tuple[str, ...] = (
    "drake",
    "db",
    "ds",
    "doge",
    "success",
    "gru",
    "cmm",
    "leo",
    "buzz",
)

# Friendly and legacy names used by the front end -> canonical memegen ids.
# Keys are lower-case; lookups are case-insensitive.
TEMPLATE_ALIASES: Mapping[str, str] = MappingProxyType({
    "success-kid": "success",
    "successkid": "success",
    "gru-plan": "gru",
    "gruplan": "gru",
    "distracted-boyfriend": "db",
    "distracted_boyfriend": "db",
    "distractedboyfriend": "db",
    "two-buttons": "ds",
    "two_buttons": "ds",
    "twobuttons": "ds",
    "change-my-mind": "cmm",
    "change_my_mind": "cmm",
    "changemymind": "cmm",
    "leonardo-dicaprio": "leo",
    "leonardo_dicaprio": "leo",
    "leonardodicaprio": "leo",
    "drake-hotline": "drake",
    "drakehotline": "drake",
    "buzz-lightyear": "buzz",
    "buzzlightyear": "buzz",
})


def _alias(name: str) -> Optional[str]:
    return TEMPLATE_ALIASES.get(name.lower())


def _candidates(raw: str) -> Iterator[Optional[str]]:
    """Yield template candidates for ``raw`` in priority order, lazily."""
    lowered = raw.lower()
    yield raw
    yield lowered
    yield _alias(raw)
    yield _alias(lowered)

    underscored = raw.replace("-", "_")
    yield underscored
    yield _alias(underscored)

    dashed = raw.replace("_", "-")
    yield dashed
    yield _alias(dashed)

    condensed = raw.replace("-", "").replace("_", "")
    yield condensed
    yield _alias(condensed)


def resolve_template(
    requested: Optional[str],
    catalog: Sequence[str],
    default: str = DEFAULT_TEMPLATE,
    choose: Callable[[Sequence[str]], str] = random.choice,
) -> str:
    """
    Resolve a requested template name to a canonical catalog id.

    Args:
        requested: Template id, alias, ``"random"``, or None
        catalog: Non-empty sequence of canonical template ids
        default: Returned when nothing matches
        choose: Picks the template for ``"random"`` requests

    Returns:
        A member of ``catalog``, or ``default``. Never raises.
    """
    if requested == RANDOM_TEMPLATE:
        return choose(catalog)

    if not requested:
        return default

    valid = set(catalog)
    tried: set[str] = set()
    for candidate in _candidates(requested):
        if not candidate or candidate in tried:
            continue
        tried.add(candidate)
        if candidate in valid:
            return candidate

    logger.info(f"No template matched '{requested}', using default '{default}'")
    return default


class TemplateCatalog:
    """
    Process-wide cache of the memegen template catalog.

    ``get_templates`` refreshes the cached list when it is missing or older
    than the TTL. A failed refresh keeps the previous list, or falls back to
    FALLBACK_TEMPLATES when there is none.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings or get_settings()
        self._clock = clock
        self._templates: tuple[str, ...] = ()
        self._fetched_at: float = 0.0
        self._lock = asyncio.Lock()

    @property
    def templates_url(self) -> str:
        return f"{self.settings.MEMEGEN_BASE_URL.rstrip('/')}/templates/"

    def _is_fresh(self) -> bool:
        if not self._templates:
            return False
        return (self._clock() - self._fetched_at) < self.settings.TEMPLATE_TTL_SECONDS

    def _current(self) -> list[str]:
        return list(self._templates or FALLBACK_TEMPLATES)

    async def get_templates(self) -> list[str]:
        """Return the current catalog, refreshing it first if it is stale."""
        if self._is_fresh():
            return self._current()

        async with self._lock:
            # Another request may have refreshed while we waited
            if not self._is_fresh():
                await self._refresh()

        return self._current()

    async def _refresh(self) -> None:
        try:
            ids = await self._fetch_template_ids()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning(f"Failed to refresh meme template list, using fallback: {e}")
            return

        self._templates = tuple(ids)
        self._fetched_at = self._clock()
        logger.info(f"Loaded {len(ids)} meme templates from memegen")

    async def _fetch_template_ids(self) -> list[str]:
        """
        Fetch template ids from memegen.

        Raises:
            httpx.HTTPError: On network errors or a non-success status
            httpx.InvalidURL: If MEMEGEN_BASE_URL is malformed
            ValueError: If the body is not a list of templates with ids
        """
        async with httpx.AsyncClient(timeout=self.settings.MEMEGEN_TIMEOUT) as client:
            response = await client.get(self.templates_url)
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, list):
            raise ValueError("Template list response is not a JSON array")

        ids = [
            entry["id"] for entry in data
            if isinstance(entry, dict) and isinstance(entry.get("id"), str) and entry["id"]
        ]
        if not ids:
            raise ValueError("Template list response contained no template ids")
        return ids

    async def resolve(self, requested: Optional[str]) -> tuple[str, list[str]]:
        """Resolve ``requested`` against the current catalog. Returns (template, catalog)."""
        templates = await self.get_templates()
        return resolve_template(requested, templates), templates


# Dependency injection support
_template_catalog = None

def get_template_catalog() -> TemplateCatalog:
    global _template_catalog
    if _template_catalog is None:
        _template_catalog = TemplateCatalog()
    return _template_catalog
