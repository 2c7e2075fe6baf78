from fastapi import APIRouter, Depends, Query, Request
from typing import Optional

from database.mongo import get_recipe_accessor
from database.recipe_accessor import RecipeAccessor
from models.recipe_model import PaginationParams, RecipeIn, RecipeOut, RecipePage, RecipeUpdate
from utils.recipe_handlers import (
    create_recipe_handler,
    list_recipes_handler,
    get_recipe_handler,
    update_recipe_handler,
    delete_recipe_handler,
)
from utils.recipe_helper import parse_pagination

router = APIRouter()


# page/size arrive as raw strings so bad values get a 400 from parse_pagination
def get_pagination(
    request: Request,
    page: Optional[str] = Query(None, description="1-based page number"),
    size: Optional[str] = Query(None, description="Number of recipes per page"),
) -> PaginationParams:
    return parse_pagination(page, size, request.app.state.settings.max_page_size)


@router.post("/", response_model=RecipeOut, status_code=201)
async def create_recipe(recipe: RecipeIn, accessor: RecipeAccessor = Depends(get_recipe_accessor)):
    return await create_recipe_handler(recipe, accessor)


@router.get("/", response_model=RecipePage)
async def list_recipes(
    pagination: PaginationParams = Depends(get_pagination),
    accessor: RecipeAccessor = Depends(get_recipe_accessor),
):
    return await list_recipes_handler(pagination, accessor)


@router.get("/{recipe_id}", response_model=RecipeOut)
async def get_recipe(recipe_id: str, accessor: RecipeAccessor = Depends(get_recipe_accessor)):
    return await get_recipe_handler(recipe_id, accessor)


@router.put("/{recipe_id}", response_model=RecipeOut)
async def update_recipe(
    recipe_id: str,
    update: RecipeUpdate,
    accessor: RecipeAccessor = Depends(get_recipe_accessor),
):
    return await update_recipe_handler(recipe_id, update, accessor)


@router.delete("/{recipe_id}")
async def delete_recipe(recipe_id: str, accessor: RecipeAccessor = Depends(get_recipe_accessor)):
    return await delete_recipe_handler(recipe_id, accessor)
