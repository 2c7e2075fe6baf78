import math
from typing import List, Optional

from bson import ObjectId
from fastapi import HTTPException

from models.recipe_model import PaginationParams

# skip is sent to MongoDB as a signed 64-bit integer
MAX_SKIP = 2**63 - 1

REQUIRED_FIELDS = ("name", "ingredients", "instructions", "cookingTime", "createdAt")


def missing_fields(recipe) -> List[str]:
    return [name for name in REQUIRED_FIELDS if recipe.get(name) is None]


def recipe_helper(recipe) -> dict:
    return {
        "id": str(recipe["_id"]),
        "name": recipe["name"],
        "ingredients": recipe["ingredients"],
        "instructions": recipe["instructions"],
        "cookingTime": recipe["cookingTime"],
        "createdAt": recipe["createdAt"],
    }


def parse_recipe_id(recipe_id: str) -> ObjectId:
    if not ObjectId.is_valid(recipe_id):
        raise HTTPException(status_code=400, detail="Invalid recipe ID")
    return ObjectId(recipe_id)


def _positive_int(name: str, raw: Optional[str], default: int) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Query parameter '{name}' must be an integer")
    if value < 1:
        raise HTTPException(status_code=400, detail=f"Query parameter '{name}' must be at least 1")
    return value


def parse_pagination(page: Optional[str], size: Optional[str], max_size: int) -> PaginationParams:
    """
    Turn the raw ``page``/``size`` query strings into a bounded PaginationParams
    """
    params = PaginationParams(
        page=_positive_int("page", page, 1),
        size=_positive_int("size", size, 10),
    )
    if params.size > max_size:
        raise HTTPException(status_code=400, detail=f"Query parameter 'size' must not exceed {max_size}")
    if params.skip > MAX_SKIP:
        raise HTTPException(status_code=400, detail="Query parameter 'page' is too large")
    return params


def total_pages(total: int, size: int) -> int:
    return math.ceil(total / size)
