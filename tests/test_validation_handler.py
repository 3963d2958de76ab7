import json

import pytest
from fastapi.exceptions import RequestValidationError

from feast_recipes.app.main import validation_exception_handler


@pytest.mark.asyncio
async def test_validation_handler_formats_errors():
    exc = RequestValidationError(
        errors=[
            {"loc": ("body", "url"), "msg": "field required"},
            {"loc": ("body", "usages", 0, "recipe_id"), "msg": "field required"},
        ]
    )
    response = await validation_exception_handler(None, exc)
    assert response.status_code == 422
    body = json.loads(response.body)
    assert body["error_code"] == "validation_error"
    assert body["message"] == "Invalid request payload."
    assert "request_id" in body and body["request_id"]
    assert {"field": "body.url", "message": "field required"} in body["details"]
    assert {"field": "body.usages.0.recipe_id", "message": "field required"} in body["details"]


def test_missing_url_is_rejected(client):
    response = client.post("/recipes/import/url", json={})
    assert response.status_code == 422
    assert response.json()["error_code"] == "validation_error"
