"""Error taxonomy for recipe import.

Two independent hierarchies: ``FetchError`` for retrieving the page and
``RecipeParseError`` for turning its HTML into a recipe. Every error carries a
snake_case ``error_code`` and a fixed ``user_message`` that the command layer
shows verbatim.
"""

from __future__ import annotations


class RecipeImportError(Exception):
    """Base class for every terminal import failure."""

    error_code = "import_failed"
    user_message = "Could not import this recipe"


# ---------------------------------------------------------------------------
# Fetch errors
# ---------------------------------------------------------------------------


class FetchError(RecipeImportError):
    """Raised when a page cannot be retrieved."""

    error_code = "fetch_failed"


class InvalidUrlError(FetchError):
    """The URL could not be parsed or has no host."""

    error_code = "invalid_url"
    user_message = "Please enter a valid website URL"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid URL: {detail}")
        self.detail = detail


class InvalidUrlSchemeError(FetchError):
    """The URL uses something other than http or https."""

    error_code = "invalid_url_scheme"
    user_message = "Please enter a valid website URL"

    def __init__(self, scheme: str = "") -> None:
        super().__init__("Invalid URL scheme: only HTTP and HTTPS are supported")
        self.scheme = scheme


class ConnectionFailedError(FetchError):
    error_code = "connection_failed"
    user_message = "Could not connect to the website"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Connection failed: {detail}")
        self.detail = detail


class FetchTimeoutError(FetchError):
    error_code = "fetch_timeout"
    user_message = "The website took too long to respond"

    def __init__(self, seconds: float) -> None:
        super().__init__(f"Request timed out after {seconds:g} seconds")
        self.seconds = seconds


class TooManyRedirectsError(FetchError):
    error_code = "too_many_redirects"
    user_message = "Could not connect to the website"

    def __init__(self, limit: int) -> None:
        super().__init__(f"Too many redirects (max {limit})")
        self.limit = limit


class HttpStatusError(FetchError):
    """The server answered with a non-2xx status."""

    error_code = "http_error"

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"HTTP error {status}: {message}")
        self.status = status
        self.message = message

    @property
    def user_message(self) -> str:  # type: ignore[override]
        return f"The website returned an error (HTTP {self.status})"


class InvalidContentTypeError(FetchError):
    error_code = "unsupported_content_type"
    user_message = "This URL does not appear to be a recipe page"

    def __init__(self, received: str) -> None:
        super().__init__(f"Invalid content type: expected HTML, got {received}")
        self.received = received


class ResponseTooLargeError(FetchError):
    error_code = "response_too_large"
    user_message = "The page is too large to process"

    def __init__(self, limit: int) -> None:
        super().__init__(f"Response too large: exceeds {limit} bytes")
        self.limit = limit


class ResponseReadError(FetchError):
    error_code = "read_error"
    user_message = "Could not read the website response"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to read response: {detail}")
        self.detail = detail


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class RecipeParseError(RecipeImportError):
    """Raised when fetched HTML does not yield a usable recipe."""

    error_code = "parse_failed"


class NoStructuredDataFoundError(RecipeParseError):
    error_code = "no_structured_data"
    user_message = "Could not find recipe data on this page"

    def __init__(self) -> None:
        super().__init__("No JSON-LD data found on page")


class NoRecipeFoundError(RecipeParseError):
    error_code = "no_recipe_found"
    user_message = "Could not find recipe data on this page"

    def __init__(self) -> None:
        super().__init__("No Recipe found in JSON-LD data")


class MultipleRecipesFoundError(RecipeParseError):
    error_code = "multiple_recipes_found"
    user_message = "This page contains multiple recipes. Please try a more specific URL"

    def __init__(self, count: int) -> None:
        super().__init__(
            "Multiple recipes found on page - unable to determine which to import"
        )
        self.count = count


class MalformedRecipeError(RecipeParseError):
    """A required recipe field is missing or unusable; ``reason`` names it."""

    error_code = "malformed_recipe"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Recipe data is malformed: {reason}")
        self.reason = reason

    @property
    def user_message(self) -> str:  # type: ignore[override]
        return f"The recipe data on this page could not be read: {self.reason}"
