import importlib

from fastapi import APIRouter

from feast_recipes.app.api.routes import shopping_list

import_routes = importlib.import_module("feast_recipes.app.api.routes.import")

api_router = APIRouter()
api_router.include_router(import_routes.router)
api_router.include_router(shopping_list.router)
