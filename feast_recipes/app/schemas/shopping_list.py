from typing import List

from pydantic import BaseModel, Field


class IngredientUsage(BaseModel):
    """One ingredient line from a recipe scheduled in the meal plan."""

    name: str
    quantity: float = Field(0.0, ge=0)
    unit: str = ""
    category: str = ""
    recipe_id: str
    servings_multiplier: float = Field(1.0, ge=0)


class AggregatedShoppingItem(BaseModel):
    name: str
    quantity: float
    unit: str
    category: str
    source_recipe_ids: List[str] = Field(default_factory=list)
    is_converted: bool = False


class ShoppingListAggregateRequest(BaseModel):
    usages: List[IngredientUsage]
