"""
Recipe Route Handlers
Each handler makes a single accessor call and maps the outcome to a response
"""
import asyncio
import logging

from fastapi import HTTPException
from pymongo.errors import PyMongoError, WriteError

from database.recipe_accessor import RecipeAccessor
from models.recipe_model import PaginationParams, RecipeIn, RecipeUpdate
from utils.recipe_helper import missing_fields, parse_recipe_id, recipe_helper, total_pages

logger = logging.getLogger(__name__)

# MongoDB "Document failed validation"
DOCUMENT_VALIDATION_FAILURE = 121


def _store_failure(message: str, exc: Exception) -> HTTPException:
    if isinstance(exc, asyncio.TimeoutError):
        logger.warning(f"{message}: store call timed out")
        return HTTPException(status_code=504, detail="Request timed out")
    if isinstance(exc, WriteError) and exc.code == DOCUMENT_VALIDATION_FAILURE:
        return HTTPException(status_code=400, detail={"message": "Recipe rejected by the store", "error": str(exc)})
    logger.error(f"{message}: {exc}")
    return HTTPException(status_code=500, detail={"message": message, "error": str(exc)})


def _render(recipe) -> dict:
    missing = missing_fields(recipe)
    if missing:
        logger.error(f"Recipe {recipe['_id']} is missing {', '.join(missing)}")
        raise HTTPException(
            status_code=500,
            detail={"message": "Stored recipe is incomplete", "error": f"missing fields: {', '.join(missing)}"},
        )
    return recipe_helper(recipe)


async def create_recipe_handler(recipe: RecipeIn, accessor: RecipeAccessor):
    try:
        created = await accessor.create(recipe.model_dump())
    except (PyMongoError, asyncio.TimeoutError) as e:
        raise _store_failure("Error creating recipe", e)
    logger.info(f"Created recipe {created['_id']}")
    return recipe_helper(created)


async def list_recipes_handler(pagination: PaginationParams, accessor: RecipeAccessor):
    try:
        docs = await accessor.find_page(pagination.skip, pagination.size)
        total = await accessor.count()
    except (PyMongoError, asyncio.TimeoutError) as e:
        raise _store_failure("Error fetching recipes", e)
    recipes = []
    for d in docs:
        missing = missing_fields(d)
        if missing:
            logger.warning(f"Skipping recipe {d['_id']}: missing {', '.join(missing)}")
            continue
        recipes.append(recipe_helper(d))
    return {
        "recipes": recipes,
        "totalRecipes": total,
        "page": pagination.page,
        "totalPages": total_pages(total, pagination.size),
    }


async def get_recipe_handler(recipe_id: str, accessor: RecipeAccessor):
    oid = parse_recipe_id(recipe_id)
    try:
        recipe = await accessor.find_by_id(oid)
    except (PyMongoError, asyncio.TimeoutError) as e:
        raise _store_failure("Error fetching recipe", e)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return _render(recipe)


async def update_recipe_handler(recipe_id: str, update: RecipeUpdate, accessor: RecipeAccessor):
    oid = parse_recipe_id(recipe_id)
    try:
        recipe = await accessor.update_by_id(oid, update.changes())
    except (PyMongoError, asyncio.TimeoutError) as e:
        raise _store_failure("Error updating recipe", e)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    logger.info(f"Updated recipe {recipe_id}")
    return _render(recipe)


async def delete_recipe_handler(recipe_id: str, accessor: RecipeAccessor):
    oid = parse_recipe_id(recipe_id)
    try:
        deleted = await accessor.delete_by_id(oid)
    except (PyMongoError, asyncio.TimeoutError) as e:
        raise _store_failure("Error deleting recipe", e)
    if not deleted:
        raise HTTPException(status_code=404, detail="Recipe not found")
    logger.info(f"Deleted recipe {recipe_id}")
    return {"message": "Recipe deleted"}
