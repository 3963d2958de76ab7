"""Unit normalization, conversion and quantity aggregation for shopping lists."""

import enum
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class UnitCategory(str, enum.Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"
    OTHER = "other"


# =============================================================================
# Unit Tables
# =============================================================================

# Volume conversions (base unit: ml)
VOLUME_UNITS: Dict[str, float] = {
    "ml": 1.0,
    "milliliter": 1.0,
    "milliliters": 1.0,
    "l": 1000.0,
    "liter": 1000.0,
    "liters": 1000.0,
    "tsp": 4.929,
    "teaspoon": 4.929,
    "teaspoons": 4.929,
    "tbsp": 14.787,
    "tbs": 14.787,
    "tablespoon": 14.787,
    "tablespoons": 14.787,
    "fl oz": 29.574,
    "fluid ounce": 29.574,
    "fluid ounces": 29.574,
    "cup": 236.588,
    "cups": 236.588,
    "c": 236.588,
    "pint": 473.176,
    "pints": 473.176,
    "pt": 473.176,
    "quart": 946.353,
    "quarts": 946.353,
    "qt": 946.353,
    "gallon": 3785.41,
    "gallons": 3785.41,
    "gal": 3785.41,
}

# Weight conversions (base unit: g)
WEIGHT_UNITS: Dict[str, float] = {
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "kg": 1000.0,
    "kilogram": 1000.0,
    "kilograms": 1000.0,
    "oz": 28.3495,
    "ounce": 28.3495,
    "ounces": 28.3495,
    "lb": 453.592,
    "lbs": 453.592,
    "pound": 453.592,
    "pounds": 453.592,
}

# Count units never convert; "" is a bare count ("2 eggs")
COUNT_UNITS = frozenset(
    {
        "",
        "whole",
        "piece",
        "pieces",
        "clove",
        "cloves",
        "slice",
        "slices",
        "can",
        "cans",
        "bunch",
        "bunches",
        "head",
        "heads",
        "stalk",
        "stalks",
        "sprig",
        "sprigs",
    }
)

# Canonical display spelling per unit family; keys are lower-case
UNIT_ALIASES: Dict[str, str] = {
    "c": "cup",
    "cup": "cup",
    "cups": "cup",
    "tbs": "tbsp",
    "tbsp": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tsp": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "l": "L",
    "liter": "L",
    "liters": "L",
    "fl oz": "fl oz",
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "pint": "pint",
    "pints": "pint",
    "pt": "pint",
    "quart": "quart",
    "quarts": "quart",
    "qt": "quart",
    "gallon": "gallon",
    "gallons": "gallon",
    "gal": "gallon",
    "g": "g",
    "gram": "g",
    "grams": "g",
    "kg": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    "piece": "",
    "pieces": "",
    "cloves": "clove",
    "slices": "slice",
    "cans": "can",
    "bunches": "bunch",
    "heads": "head",
    "stalks": "stalk",
    "sprigs": "sprig",
}


class AggregatedQuantity(BaseModel):
    """A summed quantity for one ingredient in a single display unit."""

    model_config = ConfigDict(frozen=True)

    quantity: float
    unit: str
    is_converted: bool = False


# =============================================================================
# Conversion Functions
# =============================================================================


def get_unit_category(unit: str) -> UnitCategory:
    unit_lower = unit.lower().strip()
    if unit_lower in VOLUME_UNITS:
        return UnitCategory.VOLUME
    if unit_lower in WEIGHT_UNITS:
        return UnitCategory.WEIGHT
    if unit_lower in COUNT_UNITS:
        return UnitCategory.COUNT
    return UnitCategory.OTHER


def get_conversion_factor(unit: str) -> Optional[float]:
    """Multiplier to the category's base unit (ml or g); None for count/other."""
    unit_lower = unit.lower().strip()
    if unit_lower in VOLUME_UNITS:
        return VOLUME_UNITS[unit_lower]
    return WEIGHT_UNITS.get(unit_lower)


def normalize_unit(unit: str) -> str:
    """Map a unit alias to its display form; unknown units are lower-cased."""
    unit_lower = unit.lower().strip()
    return UNIT_ALIASES.get(unit_lower, unit_lower)


def convert_quantity(quantity: float, from_unit: str, to_unit: str) -> Optional[float]:
    """
    Convert ``quantity`` between two units of the same category.

    Returns None when the units are incompatible. Count and other units only
    "convert" to themselves (same normalized form).
    """
    category = get_unit_category(from_unit)
    if category != get_unit_category(to_unit):
        return None

    if category in (UnitCategory.COUNT, UnitCategory.OTHER):
        if normalize_unit(from_unit) == normalize_unit(to_unit):
            return quantity
        return None

    from_factor = get_conversion_factor(from_unit)
    to_factor = get_conversion_factor(to_unit)
    if from_factor is None or to_factor is None:
        return None
    return quantity * from_factor / to_factor


# =============================================================================
# Aggregation
# =============================================================================


def find_target_unit(units: Iterable[str]) -> str:
    """
    Pick the most frequent normalized unit.

    Ties go to the lexicographically smallest spelling so the result does not
    depend on input order.
    """
    counts: Dict[str, int] = {}
    for unit in units:
        normalized = normalize_unit(unit)
        counts[normalized] = counts.get(normalized, 0) + 1
    if not counts:
        return ""
    return min(counts, key=lambda unit: (-counts[unit], unit))


def _sum_converted(group: List[Tuple[float, str]]) -> AggregatedQuantity:
    target = find_target_unit(unit for _, unit in group)
    total = 0.0
    any_converted = False
    for qty, unit in group:
        if normalize_unit(unit) == target:
            total += qty
            continue
        converted = convert_quantity(qty, unit, target)
        if converted is None:
            logger.warning("Could not convert %s to %s, dropping %s", unit, target, qty)
            continue
        total += converted
        any_converted = True
    return AggregatedQuantity(quantity=total, unit=target, is_converted=any_converted)


def aggregate_quantities(items: Iterable[Tuple[float, str]]) -> List[AggregatedQuantity]:
    """
    Combine ``(quantity, unit)`` pairs for one ingredient.

    Volume and weight entries each collapse into one total in their most
    common unit. Count and other entries are summed per normalized unit.
    Incompatible categories become separate entries; this never raises.
    Entries are returned in order of first appearance.
    """
    by_category: Dict[UnitCategory, List[Tuple[float, str]]] = {}
    for qty, unit in items:
        by_category.setdefault(get_unit_category(unit), []).append((qty, unit))

    results: List[AggregatedQuantity] = []
    for category, group in by_category.items():
        if category in (UnitCategory.VOLUME, UnitCategory.WEIGHT):
            results.append(_sum_converted(group))
            continue

        by_unit: Dict[str, float] = {}
        for qty, unit in group:
            normalized = normalize_unit(unit)
            by_unit[normalized] = by_unit.get(normalized, 0.0) + qty
        results.extend(
            AggregatedQuantity(quantity=qty, unit=unit, is_converted=False)
            for unit, qty in by_unit.items()
        )

    logger.debug("Aggregated %d categories into %d entries", len(by_category), len(results))
    return results
