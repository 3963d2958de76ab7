from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from feast_recipes.app.schemas.recipe import RecipeCreate, to_recipe_create
from feast_recipes.app.services import url_recipe_parser
from feast_recipes.app.services.url_parsing.models import ImportResult

router = APIRouter(prefix="/recipes/import", tags=["import"])


class ImportUrlRequest(BaseModel):
    url: str


class ImportUrlResponse(ImportResult):
    recipe_input: Optional[RecipeCreate] = None


@router.post("/url", response_model=ImportUrlResponse)
async def import_from_url(payload: ImportUrlRequest):
    result = await url_recipe_parser.parse_recipe_from_url(payload.url)
    recipe_input = None
    if result.success and result.recipe is not None:
        recipe_input = to_recipe_create(result.recipe, result.source_url or payload.url)
    return ImportUrlResponse(**result.model_dump(), recipe_input=recipe_input)
