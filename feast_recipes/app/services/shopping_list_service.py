"""Build an aggregated shopping list from planned meals."""

import logging
from typing import Dict, Iterable, List, Tuple

from feast_recipes.app.schemas.shopping_list import AggregatedShoppingItem, IngredientUsage
from feast_recipes.app.services.units import aggregate_quantities

logger = logging.getLogger(__name__)


def servings_multiplier(planned_servings: float, recipe_servings: float) -> float:
    """Scale factor for cooking ``planned_servings`` of a recipe yielding ``recipe_servings``."""
    if recipe_servings <= 0:
        return 1.0
    return planned_servings / recipe_servings


def aggregate_shopping_list(usages: Iterable[IngredientUsage]) -> List[AggregatedShoppingItem]:
    """
    Merge ingredient usages across recipes into shopping list lines.

    Usages are grouped by case-insensitive name and scaled by their servings
    multiplier; each group may still yield several lines when its units are
    incompatible. Lines are sorted by category, then name.
    """
    categories: Dict[str, str] = {}
    quantities: Dict[str, List[Tuple[float, str]]] = {}
    recipe_ids: Dict[str, List[str]] = {}
    count = 0
    for usage in usages:
        count += 1
        key = usage.name.strip().lower()
        categories.setdefault(key, usage.category)
        quantities.setdefault(key, []).append((usage.quantity * usage.servings_multiplier, usage.unit))
        ids = recipe_ids.setdefault(key, [])
        if usage.recipe_id not in ids:
            ids.append(usage.recipe_id)

    items: List[AggregatedShoppingItem] = []
    for name, group in quantities.items():
        for agg in aggregate_quantities(group):
            items.append(
                AggregatedShoppingItem(
                    name=name,
                    quantity=agg.quantity,
                    unit=agg.unit,
                    category=categories[name],
                    source_recipe_ids=list(recipe_ids[name]),
                    is_converted=agg.is_converted,
                )
            )

    items.sort(key=lambda item: (item.category, item.name))
    logger.info("Aggregated %d ingredient usages into %d shopping items", count, len(items))
    return items
