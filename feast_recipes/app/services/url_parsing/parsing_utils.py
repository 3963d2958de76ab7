"""General parsing utilities for recipe extraction.

Every helper here is total: malformed input degrades to a documented default
instead of raising, so a single odd optional field never sinks an import.
"""

import html
import re
from typing import Any, List, Optional
from urllib.parse import urlparse

from feast_recipes.app.services.url_parsing.constants import (
    DEFAULT_SERVINGS,
    MAX_PARSED_INT,
    TYPE_KEY,
)


def decode_text(text: str) -> str:
    """Decode HTML entities ("&amp;", "&#39;", ...) in a JSON-LD string."""
    return html.unescape(text)


def has_type(obj: Any, type_name: str) -> bool:
    """Check whether a JSON-LD object's ``@type`` is, or contains, ``type_name``."""
    if not isinstance(obj, dict):
        return False
    type_val = obj.get(TYPE_KEY)
    if isinstance(type_val, str):
        return type_val == type_name
    if isinstance(type_val, list):
        return any(t == type_name for t in type_val)
    return False


def parse_iso8601_duration(duration: Any) -> int:
    """Parse an ISO-8601 duration such as ``PT1H30M`` into whole minutes.

    Only hours and minutes contribute; seconds are dropped and date-scale
    components (days, weeks, years) are ignored. Anything not starting with
    ``P`` yields 0.
    """
    if not isinstance(duration, str) or not duration.startswith("P"):
        return 0

    body = duration[1:]
    if body.startswith("T"):
        body = body[1:]

    minutes = 0
    digits = ""
    for char in body:
        if char.isdigit() and char.isascii():
            digits += char
            continue
        value = parse_bounded_int(digits) or 0
        digits = ""
        if char == "H":
            minutes += value * 60
        elif char == "M":
            minutes += value
    return minutes


def parse_bounded_int(digits: str) -> Optional[int]:
    """Parse a run of ASCII digits; None when empty or above ``MAX_PARSED_INT``."""
    if not digits:
        return None
    significant = digits.lstrip("0")
    if len(significant) > len(str(MAX_PARSED_INT)):
        return None
    value = int(significant or "0")
    if value > MAX_PARSED_INT:
        return None
    return value


def extract_first_number(text: str) -> Optional[int]:
    """Return the first run of ASCII digits in ``text`` as an int."""
    match = re.search(r"[0-9]+", text)
    if match:
        return parse_bounded_int(match.group())
    return None


def parse_servings(value: Any) -> int:
    """Parse ``recipeYield`` ("4 servings", "4-6", 4, ["6", "6 bowls"])."""
    servings: Optional[int] = None
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, bool):
        servings = None
    elif isinstance(value, int):
        servings = value
    elif isinstance(value, float) and value.is_integer():
        servings = int(value)
    elif isinstance(value, str):
        servings = extract_first_number(value)

    if servings is None or servings < 1 or servings > MAX_PARSED_INT:
        return DEFAULT_SERVINGS
    return servings


def is_absolute_http_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def _image_url(entry: Any) -> Optional[str]:
    if isinstance(entry, str):
        candidate = entry
    elif isinstance(entry, dict) and isinstance(entry.get("url"), str):
        candidate = entry["url"]
    else:
        return None
    candidate = decode_text(candidate).strip()
    return candidate if is_absolute_http_url(candidate) else None


def extract_image(value: Any) -> Optional[str]:
    """Extract an absolute image URL from a string, ImageObject or list of either."""
    if isinstance(value, list):
        for item in value:
            url = _image_url(item)
            if url:
                return url
        return None
    return _image_url(value)


def extract_instruction_text(instructions: Any) -> List[str]:
    """Flatten ``recipeInstructions`` into ordered step strings.

    Accepts a single string, or a list of strings, HowToStep objects and
    HowToSection objects (whose ``itemListElement`` steps are inlined).
    Unrecognised entries are skipped.
    """
    if isinstance(instructions, str):
        return [decode_text(instructions)]
    if not isinstance(instructions, list):
        return []

    steps: List[str] = []
    for entry in instructions:
        if isinstance(entry, str):
            steps.append(decode_text(entry))
        elif has_type(entry, "HowToStep"):
            text_val = entry.get("text")
            if isinstance(text_val, str):
                steps.append(decode_text(text_val))
        elif has_type(entry, "HowToSection"):
            items = entry.get("itemListElement")
            if not isinstance(items, list):
                continue
            for item in items:
                text_val = item.get("text") if isinstance(item, dict) else None
                if isinstance(text_val, str):
                    steps.append(decode_text(text_val))
    return steps


def _author_name(entry: Any) -> Optional[str]:
    if isinstance(entry, str):
        return decode_text(entry)
    if isinstance(entry, dict) and isinstance(entry.get("name"), str):
        return decode_text(entry["name"])
    return None


def extract_author(value: Any) -> Optional[str]:
    """Extract an author name from a string, Person/Organization object or list."""
    if isinstance(value, list):
        for item in value:
            name = _author_name(item)
            if name:
                return name
        return None
    return _author_name(value)


def first_string(value: Any) -> Optional[str]:
    """Return a plain string, or the first element of a list, decoded."""
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, str):
        return decode_text(value)
    return None
