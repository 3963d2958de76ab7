import pytest

from feast_recipes.app.schemas.shopping_list import IngredientUsage
from feast_recipes.app.services.shopping_list_service import (
    aggregate_shopping_list,
    servings_multiplier,
)


def usage(name, quantity, unit, recipe_id, category="pantry", multiplier=1.0):
    return IngredientUsage(
        name=name,
        quantity=quantity,
        unit=unit,
        category=category,
        recipe_id=recipe_id,
        servings_multiplier=multiplier,
    )


def test_servings_multiplier():
    assert servings_multiplier(8, 4) == 2.0
    assert servings_multiplier(2, 4) == 0.5
    assert servings_multiplier(3, 0) == 1.0


def test_empty_plan():
    assert aggregate_shopping_list([]) == []


def test_merges_same_ingredient_across_recipes():
    items = aggregate_shopping_list(
        [
            usage("Flour", 1, "cup", "r1"),
            usage("flour ", 2, "tbsp", "r2"),
            usage("flour", 1, "cup", "r1"),
        ]
    )
    assert len(items) == 1
    item = items[0]
    assert item.name == "flour"
    assert item.unit == "cup"
    assert item.quantity == pytest.approx(2.125, rel=1e-3)
    assert item.is_converted is True
    assert item.source_recipe_ids == ["r1", "r2"]


def test_applies_servings_multiplier():
    items = aggregate_shopping_list(
        [
            usage("milk", 1, "cup", "r1", multiplier=2.0),
            usage("milk", 1, "cup", "r2", multiplier=0.5),
        ]
    )
    assert [(i.quantity, i.unit) for i in items] == [(2.5, "cup")]


def test_incompatible_units_become_separate_lines():
    items = aggregate_shopping_list(
        [
            usage("butter", 1, "cup", "r1", category="dairy"),
            usage("butter", 100, "g", "r2", category="dairy"),
        ]
    )
    assert [(i.quantity, i.unit) for i in items] == [(1, "cup"), (100, "g")]
    assert all(i.source_recipe_ids == ["r1", "r2"] for i in items)


def test_sorted_by_category_then_name():
    items = aggregate_shopping_list(
        [
            usage("onion", 1, "", "r1", category="produce"),
            usage("milk", 1, "cup", "r1", category="dairy"),
            usage("garlic", 2, "cloves", "r1", category="produce"),
            usage("cheddar", 100, "g", "r2", category="dairy"),
        ]
    )
    assert [(i.category, i.name) for i in items] == [
        ("dairy", "cheddar"),
        ("dairy", "milk"),
        ("produce", "garlic"),
        ("produce", "onion"),
    ]


def test_first_category_wins():
    items = aggregate_shopping_list(
        [
            usage("eggs", 2, "", "r1", category="dairy"),
            usage("Eggs", 3, "", "r2", category="protein"),
        ]
    )
    assert len(items) == 1
    assert items[0].category == "dairy"
    assert items[0].quantity == 5
