from typing import List, Optional

from pydantic import BaseModel

from feast_recipes.app.services.url_parsing.models import ParsedRecipe


class IngredientCreate(BaseModel):
    name: str
    quantity: float
    unit: str
    category: Optional[str] = None
    notes: Optional[str] = None


class RecipeCreate(BaseModel):
    name: str
    description: str = ""
    prep_time: int = 0
    cook_time: int = 0
    servings: int
    image_url: Optional[str] = None
    source_url: Optional[str] = None
    notes: Optional[str] = None
    tags: List[str] = []
    ingredients: List[IngredientCreate]
    instructions: List[str]


def to_recipe_create(parsed: ParsedRecipe, source_url: str) -> RecipeCreate:
    """Build the persistence request for an imported recipe."""
    return RecipeCreate(
        name=parsed.name,
        description=parsed.description,
        prep_time=parsed.prep_time,
        cook_time=parsed.cook_time,
        servings=parsed.servings,
        image_url=parsed.image_url,
        source_url=source_url,
        ingredients=[
            IngredientCreate(name=ing.name, quantity=ing.quantity, unit=ing.unit)
            for ing in parsed.ingredients
        ],
        instructions=list(parsed.instructions),
    )
