"""Pydantic models for URL recipe parsing."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from feast_recipes.app.services.url_parsing.constants import DEFAULT_SERVINGS


class ParsedIngredient(BaseModel):
    """One ingredient line split into quantity, unit and name.

    ``quantity`` is 0.0 when the line carries no leading number and ``unit``
    is the vocabulary term exactly as written, or "" when none matched.
    """

    model_config = ConfigDict(frozen=True)

    quantity: float = Field(0.0, ge=0)
    unit: str = ""
    name: str = ""


class ParsedRecipe(BaseModel):
    """A recipe mapped from schema.org JSON-LD, ready for persistence."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    prep_time: int = Field(0, ge=0)
    cook_time: int = Field(0, ge=0)
    total_time: int = Field(0, ge=0)
    servings: int = Field(DEFAULT_SERVINGS, ge=1)
    image_url: Optional[str] = None
    ingredients: List[ParsedIngredient] = Field(min_length=1)
    instructions: List[str] = Field(min_length=1)
    author: Optional[str] = None
    category: Optional[str] = None
    cuisine: Optional[str] = None


class ImportResult(BaseModel):
    """Result of a recipe import attempt."""

    success: bool
    recipe: Optional[ParsedRecipe] = None
    source_url: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
