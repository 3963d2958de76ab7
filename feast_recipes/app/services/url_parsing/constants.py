"""Static lookup tables used while fetching and parsing recipe pages."""

JSONLD_SCRIPT_TYPE = "application/ld+json"
RECIPE_TYPE = "Recipe"
GRAPH_KEY = "@graph"
TYPE_KEY = "@type"

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")

HTTP_STATUS_MESSAGES = {
    400: "Bad request",
    401: "Authentication required",
    403: "Access forbidden",
    404: "Page not found",
    429: "Too many requests - please try again later",
    500: "Server error",
    502: "Bad gateway",
    503: "Service unavailable",
    504: "Gateway timeout",
}

DEFAULT_SERVINGS = 4

# Longer spellings come before their prefixes; matching stops at the first hit.
INGREDIENT_UNITS = (
    # Volume
    "cups",
    "cup",
    "c",
    "tablespoons",
    "tablespoon",
    "tbsp",
    "tbs",
    "tb",
    "teaspoons",
    "teaspoon",
    "tsp",
    "ts",
    "fluid ounces",
    "fluid ounce",
    "fl oz",
    "milliliters",
    "milliliter",
    "ml",
    "liters",
    "liter",
    "l",
    "pints",
    "pint",
    "pt",
    "quarts",
    "quart",
    "qt",
    "gallons",
    "gallon",
    "gal",
    # Weight
    "pounds",
    "pound",
    "lbs",
    "lb",
    "ounces",
    "ounce",
    "oz",
    "kilograms",
    "kilogram",
    "kg",
    "grams",
    "gram",
    "g",
    # Count
    "cloves",
    "clove",
    "slices",
    "slice",
    "pieces",
    "piece",
    "cans",
    "can",
    "bunches",
    "bunch",
    "heads",
    "head",
    "stalks",
    "stalk",
    "sprigs",
    "sprig",
    "packages",
    "package",
    "pkg",
    "pinches",
    "pinch",
    "dashes",
    "dash",
    # Size words used in place of a unit ("2 large eggs")
    "large",
    "medium",
    "small",
)

# Largest integer accepted from page data (signed 64-bit); anything larger is unparsable
MAX_PARSED_INT = 2**63 - 1
