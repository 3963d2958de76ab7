from typing import List

from fastapi import APIRouter

from feast_recipes.app.schemas.shopping_list import (
    AggregatedShoppingItem,
    ShoppingListAggregateRequest,
)
from feast_recipes.app.services.shopping_list_service import aggregate_shopping_list

router = APIRouter(prefix="/shopping-list", tags=["shopping-list"])


@router.post("/aggregate", response_model=List[AggregatedShoppingItem])
def aggregate(payload: ShoppingListAggregateRequest):
    return aggregate_shopping_list(payload.usages)
