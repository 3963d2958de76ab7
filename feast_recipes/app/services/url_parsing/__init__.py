"""URL recipe parsing package.

This package fetches a recipe page, locates its schema.org JSON-LD Recipe and
maps it onto ``ParsedRecipe``, splitting each ingredient line into quantity,
unit and name along the way.
"""

from feast_recipes.app.services.url_parsing.errors import (
    ConnectionFailedError,
    FetchError,
    FetchTimeoutError,
    HttpStatusError,
    InvalidContentTypeError,
    InvalidUrlError,
    InvalidUrlSchemeError,
    MalformedRecipeError,
    MultipleRecipesFoundError,
    NoRecipeFoundError,
    NoStructuredDataFoundError,
    RecipeImportError,
    RecipeParseError,
    ResponseReadError,
    ResponseTooLargeError,
    TooManyRedirectsError,
)
from feast_recipes.app.services.url_parsing.html_fetcher import (
    fetch_html,
    is_html_content_type,
    is_private_host,
    validate_url,
)
from feast_recipes.app.services.url_parsing.ingredient_parser import (
    extract_ingredients,
    parse_ingredient,
)
from feast_recipes.app.services.url_parsing.models import (
    ImportResult,
    ParsedIngredient,
    ParsedRecipe,
)
from feast_recipes.app.services.url_parsing.parsing_utils import (
    decode_text,
    extract_author,
    extract_image,
    extract_instruction_text,
    parse_iso8601_duration,
    parse_servings,
)

__all__ = [
    # Models
    "ImportResult",
    "ParsedIngredient",
    "ParsedRecipe",
    # Errors
    "ConnectionFailedError",
    "FetchError",
    "FetchTimeoutError",
    "HttpStatusError",
    "InvalidContentTypeError",
    "InvalidUrlError",
    "InvalidUrlSchemeError",
    "MalformedRecipeError",
    "MultipleRecipesFoundError",
    "NoRecipeFoundError",
    "NoStructuredDataFoundError",
    "RecipeImportError",
    "RecipeParseError",
    "ResponseReadError",
    "ResponseTooLargeError",
    "TooManyRedirectsError",
    # HTML fetching
    "fetch_html",
    "is_html_content_type",
    "is_private_host",
    "validate_url",
    # Ingredient parsing
    "extract_ingredients",
    "parse_ingredient",
    # Parsing utilities
    "decode_text",
    "extract_author",
    "extract_image",
    "extract_instruction_text",
    "parse_iso8601_duration",
    "parse_servings",
]
