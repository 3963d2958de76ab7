"""Ingredient line parsing ("1 1/2 cups sugar" -> 1.5, "cups", "sugar")."""

import logging
from typing import Any, List, Tuple

from feast_recipes.app.services.url_parsing.constants import INGREDIENT_UNITS
from feast_recipes.app.services.url_parsing.models import ParsedIngredient
from feast_recipes.app.services.url_parsing.parsing_utils import decode_text

logger = logging.getLogger(__name__)

QUANTITY_CHARS = frozenset("0123456789/.-")


def parse_ingredient(line: str) -> ParsedIngredient:
    """Split one free-text ingredient line into quantity, unit and name.

    Never raises: a line with no leading number keeps quantity 0.0 and a line
    with no recognised unit keeps unit "".
    """
    text = decode_text(line).strip()
    quantity, rest = split_quantity(text)
    unit, name = split_unit(rest.strip())
    return ParsedIngredient(quantity=quantity, unit=unit, name=name.strip())


def split_quantity(text: str) -> Tuple[float, str]:
    """Consume the leading quantity token and return it with the remainder.

    The token is a run of digits, "/", "." and "-"; a single space inside it
    is kept only when a digit follows, so "1 1/2 cups" reads as one token
    while "2 cups" stops after "2".
    """
    start = len(text) - len(text.lstrip())
    end = start
    idx = start
    found_number = False

    while idx < len(text):
        char = text[idx]
        if char in QUANTITY_CHARS:
            found_number = True
            idx += 1
            end = idx
        elif char.isspace() and found_number:
            if idx + 1 < len(text) and text[idx + 1] in "0123456789":
                idx += 1
                end = idx
            else:
                break
        else:
            break

    if not found_number:
        return 0.0, text
    return parse_number(text[start:end]), text[end:]


def parse_number(token: str) -> float:
    """Interpret a quantity token: range, mixed number, fraction or decimal."""
    token = token.strip()

    dash_idx = token.find("-")
    if dash_idx > 0:
        # "3-4" keeps the low end of the range
        return parse_number(token[:dash_idx])

    parts = token.split()
    if len(parts) == 2:
        return max(_to_float(parts[0], 0.0) + parse_fraction(parts[1]), 0.0)

    if "/" in token:
        return parse_fraction(token)

    return max(_to_float(token, 0.0), 0.0)


def parse_fraction(token: str) -> float:
    parts = token.split("/")
    if len(parts) != 2:
        return 0.0
    numerator = _to_float(parts[0].strip(), 0.0)
    denominator = _to_float(parts[1].strip(), 1.0)
    if denominator == 0:
        return 0.0
    return max(numerator / denominator, 0.0)


def _to_float(value: str, default: float) -> float:
    try:
        return float(value)
    except ValueError:
        return default


def split_unit(text: str) -> Tuple[str, str]:
    """Match a leading unit word; returns ``(unit, remainder)``.

    A unit only matches on a word boundary (end of text, whitespace or a
    comma) so "c" never swallows the start of "chicken". A leading
    parenthesised aside such as "(15 oz)" is skipped and matching retried on
    what follows it.
    """
    text = text.strip()
    for unit in INGREDIENT_UNITS:
        size = len(unit)
        if text[:size].lower() != unit:
            continue
        if len(text) == size or text[size].isspace() or text[size] == ",":
            return text[:size], text[size:]

    if text.startswith("("):
        close_idx = text.find(")")
        if close_idx != -1:
            return split_unit(text[close_idx + 1 :].lstrip())

    return "", text


def extract_ingredients(ingredients: Any) -> List[ParsedIngredient]:
    """Parse every string in a ``recipeIngredient`` array; other entries are skipped."""
    parsed: List[ParsedIngredient] = []
    if not isinstance(ingredients, list):
        logger.debug("Ingredients input is not a list: %s", type(ingredients).__name__)
        return parsed

    for idx, raw in enumerate(ingredients):
        if not isinstance(raw, str):
            logger.debug("Ingredient %d: unexpected type %s, skipping", idx, type(raw).__name__)
            continue
        ingredient = parse_ingredient(raw)
        parsed.append(ingredient)
        logger.debug(
            "Ingredient %d: '%s' -> qty=%s, unit='%s', name='%s'",
            idx,
            raw[:50],
            ingredient.quantity,
            ingredient.unit,
            ingredient.name[:30],
        )

    logger.info("Extracted %d ingredients from input", len(parsed))
    return parsed
