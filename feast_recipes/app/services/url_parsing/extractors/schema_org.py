"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Any, Dict, List

from bs4 import BeautifulSoup

from feast_recipes.app.services.url_parsing.constants import (
    GRAPH_KEY,
    JSONLD_SCRIPT_TYPE,
    RECIPE_TYPE,
)
from feast_recipes.app.services.url_parsing.errors import (
    MalformedRecipeError,
    MultipleRecipesFoundError,
    NoRecipeFoundError,
    NoStructuredDataFoundError,
)
from feast_recipes.app.services.url_parsing.ingredient_parser import extract_ingredients
from feast_recipes.app.services.url_parsing.models import ParsedRecipe
from feast_recipes.app.services.url_parsing.parsing_utils import (
    decode_text,
    extract_author,
    extract_image,
    extract_instruction_text,
    first_string,
    has_type,
    parse_iso8601_duration,
    parse_servings,
)

logger = logging.getLogger(__name__)


def extract_jsonld_blocks(html: str) -> List[Any]:
    """Parse every JSON-LD script block in ``html``; unparsable blocks are dropped."""
    soup = BeautifulSoup(html, "lxml")
    scripts = soup.find_all("script", attrs={"type": JSONLD_SCRIPT_TYPE})
    logger.info("Found %d JSON-LD script blocks", len(scripts))

    blocks: List[Any] = []
    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        try:
            blocks.append(json.loads(raw_json))
        except (json.JSONDecodeError, RecursionError) as exc:
            logger.debug(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                idx,
                exc,
                raw_json[:200],
            )

    if not blocks:
        raise NoStructuredDataFoundError()
    return blocks


def _collect_recipes(value: Any, found: List[Dict[str, Any]]) -> None:
    if isinstance(value, dict):
        if has_type(value, RECIPE_TYPE):
            found.append(value)
            return
        graph = value.get(GRAPH_KEY)
        if isinstance(graph, list):
            for item in graph:
                _collect_recipes(item, found)
    elif isinstance(value, list):
        for item in value:
            _collect_recipes(item, found)


def find_recipe_object(blocks: List[Any]) -> Dict[str, Any]:
    """Return the single Recipe object across all blocks.

    Lists and ``@graph`` containers are searched recursively; a Recipe's own
    subtree is not. More than one Recipe is ambiguous and fails rather than
    picking one.
    """
    recipes: List[Dict[str, Any]] = []
    for block in blocks:
        _collect_recipes(block, recipes)

    logger.info("Found %d Recipe objects in %d JSON-LD blocks", len(recipes), len(blocks))
    if not recipes:
        raise NoRecipeFoundError()
    if len(recipes) > 1:
        raise MultipleRecipesFoundError(len(recipes))
    return recipes[0]


def parse_recipe_json(obj: Dict[str, Any]) -> ParsedRecipe:
    """Map a schema.org Recipe object onto ``ParsedRecipe``.

    ``name``, ``recipeIngredient`` and ``recipeInstructions`` are required;
    every other field falls back to its default when absent or malformed.
    """
    name = obj.get("name")
    if not isinstance(name, str):
        raise MalformedRecipeError("missing name")
    name = decode_text(name)
    if not name.strip():
        raise MalformedRecipeError("missing name")

    ingredients_raw = obj.get("recipeIngredient")
    if not isinstance(ingredients_raw, list):
        raise MalformedRecipeError("missing ingredients")
    ingredients = extract_ingredients(ingredients_raw)
    if not ingredients:
        logger.warning(
            "Recipe '%s' has no usable ingredients (raw had %d items)",
            name[:50],
            len(ingredients_raw),
        )
        raise MalformedRecipeError("no valid ingredients")

    instructions = extract_instruction_text(obj.get("recipeInstructions"))
    if not instructions:
        raise MalformedRecipeError("missing instructions")

    description = obj.get("description")
    parsed = ParsedRecipe(
        name=name,
        description=decode_text(description) if isinstance(description, str) else "",
        prep_time=parse_iso8601_duration(obj.get("prepTime")),
        cook_time=parse_iso8601_duration(obj.get("cookTime")),
        total_time=parse_iso8601_duration(obj.get("totalTime")),
        servings=parse_servings(obj.get("recipeYield")),
        image_url=extract_image(obj.get("image")),
        ingredients=ingredients,
        instructions=instructions,
        author=extract_author(obj.get("author")),
        category=first_string(obj.get("recipeCategory")),
        cuisine=first_string(obj.get("recipeCuisine")),
    )
    logger.info(
        "Parsed recipe: name=%s, ingredients=%d, steps=%d",
        parsed.name[:50],
        len(parsed.ingredients),
        len(parsed.instructions),
    )
    return parsed


def parse_recipe_from_html(html: str) -> ParsedRecipe:
    """Locate the page's single JSON-LD Recipe and map it."""
    blocks = extract_jsonld_blocks(html)
    return parse_recipe_json(find_recipe_object(blocks))
