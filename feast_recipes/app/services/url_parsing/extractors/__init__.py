"""Recipe extractors for structured page data."""

from feast_recipes.app.services.url_parsing.extractors.schema_org import (
    extract_jsonld_blocks,
    find_recipe_object,
    parse_recipe_from_html,
    parse_recipe_json,
)

__all__ = [
    "extract_jsonld_blocks",
    "find_recipe_object",
    "parse_recipe_from_html",
    "parse_recipe_json",
]
