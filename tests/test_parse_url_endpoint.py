import pytest

from feast_recipes.app.services import url_recipe_parser
from feast_recipes.app.services.url_parsing.models import (
    ImportResult,
    ParsedIngredient,
    ParsedRecipe,
)


def _parsed_recipe():
    return ParsedRecipe(
        name="Parsed Recipe",
        description="From parser",
        prep_time=10,
        cook_time=15,
        total_time=25,
        servings=2,
        ingredients=[ParsedIngredient(quantity=1.0, unit="cup", name="flour")],
        instructions=["Mix well"],
    )


def test_import_url_success(monkeypatch, client):
    async def fake_parse(url: str):
        return ImportResult(success=True, recipe=_parsed_recipe(), source_url=url)

    monkeypatch.setattr(url_recipe_parser, "parse_recipe_from_url", fake_parse)

    response = client.post("/recipes/import/url", json={"url": "https://example.com/recipe"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["recipe"]["name"] == "Parsed Recipe"
    recipe_input = body["recipe_input"]
    assert recipe_input["source_url"] == "https://example.com/recipe"
    assert recipe_input["servings"] == 2
    assert recipe_input["ingredients"] == [
        {"name": "flour", "quantity": 1.0, "unit": "cup", "category": None, "notes": None}
    ]
    assert recipe_input["instructions"] == ["Mix well"]


def test_import_url_failure(monkeypatch, client):
    async def fake_parse(url: str):
        return ImportResult(
            success=False,
            source_url=url,
            error_code="no_recipe_found",
            error_message="Could not find recipe data on this page",
        )

    monkeypatch.setattr(url_recipe_parser, "parse_recipe_from_url", fake_parse)

    response = client.post("/recipes/import/url", json={"url": "https://example.com/blog"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["recipe"] is None
    assert body["recipe_input"] is None
    assert body["error_code"] == "no_recipe_found"
    assert body["error_message"] == "Could not find recipe data on this page"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_shopping_list_aggregate(client):
    payload = {
        "usages": [
            {"name": "Flour", "quantity": 1, "unit": "cup", "category": "baking", "recipe_id": "r1"},
            {
                "name": "flour",
                "quantity": 2,
                "unit": "tbsp",
                "category": "baking",
                "recipe_id": "r2",
                "servings_multiplier": 1.0,
            },
            {"name": "eggs", "quantity": 2, "unit": "", "category": "dairy", "recipe_id": "r1"},
        ]
    }
    response = client.post("/shopping-list/aggregate", json=payload)
    assert response.status_code == 200
    items = response.json()
    assert [(i["category"], i["name"], i["unit"]) for i in items] == [
        ("baking", "flour", "cup"),
        ("dairy", "eggs", ""),
    ]
    assert items[0]["quantity"] == pytest.approx(1.125, rel=1e-3)
    assert items[0]["source_recipe_ids"] == ["r1", "r2"]
    assert items[0]["is_converted"] is True


def test_shopping_list_rejects_negative_quantity(client):
    payload = {"usages": [{"name": "salt", "quantity": -1, "recipe_id": "r1"}]}
    response = client.post("/shopping-list/aggregate", json=payload)
    assert response.status_code == 422
    assert response.json()["error_code"] == "validation_error"
