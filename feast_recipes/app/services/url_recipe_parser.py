import logging
import time

from feast_recipes.app.services.url_parsing.errors import (
    FetchError,
    InvalidUrlError,
    RecipeImportError,
    RecipeParseError,
)
from feast_recipes.app.services.url_parsing.extractors.schema_org import parse_recipe_from_html
from feast_recipes.app.services.url_parsing.html_fetcher import fetch_html
from feast_recipes.app.services.url_parsing.models import ImportResult

logger = logging.getLogger(__name__)


def _failure(url: str, exc: RecipeImportError) -> ImportResult:
    return ImportResult(
        success=False,
        source_url=url or None,
        error_code=exc.error_code,
        error_message=exc.user_message,
    )


async def parse_recipe_from_url(url: str) -> ImportResult:
    """Fetch ``url`` and map its JSON-LD Recipe.

    Failures are returned, not raised: ``error_message`` holds the fixed
    user-facing sentence for the error and ``error_code`` its stable code.
    """
    start = time.time()
    url = (url or "").strip()
    logger.debug("parse_recipe_from_url called, url_len=%d", len(url))

    if not url:
        logger.warning("parse_recipe_from_url failed: empty URL")
        return _failure(url, InvalidUrlError("empty URL"))

    try:
        html = await fetch_html(url)
    except FetchError as exc:
        logger.error("Fetch failed for %s: %s", url, exc)
        return _failure(url, exc)

    try:
        recipe = parse_recipe_from_html(html)
    except RecipeParseError as exc:
        logger.error("Parse failed for %s: %s", url, exc)
        return _failure(url, exc)

    duration_ms = int((time.time() - start) * 1000)
    logger.info("Imported recipe '%s' from %s in %dms", recipe.name[:50], url, duration_ms)
    return ImportResult(success=True, recipe=recipe, source_url=url)
