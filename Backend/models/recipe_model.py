from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union
from datetime import datetime


def _require_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


def _require_positive(value):
    if value <= 0:
        raise ValueError("must be greater than 0")
    return value


def _require_ingredients(value: List[str]) -> List[str]:
    cleaned = [item.strip() for item in value]
    if not cleaned:
        raise ValueError("must contain at least one ingredient")
    if any(not item for item in cleaned):
        raise ValueError("ingredients must not be empty")
    return cleaned


class RecipeIn(BaseModel):
    name: str = Field(..., examples=["Soup"])
    ingredients: List[str] = Field(..., examples=[["water", "salt"]])
    instructions: str = Field(..., examples=["Boil."])
    cookingTime: Union[int, float] = Field(..., examples=[10])

    @field_validator("name", "instructions")
    @classmethod
    def _text(cls, value: str) -> str:
        return _require_text(value)

    @field_validator("ingredients")
    @classmethod
    def _ingredients(cls, value: List[str]) -> List[str]:
        return _require_ingredients(value)

    @field_validator("cookingTime")
    @classmethod
    def _cooking_time(cls, value: Union[int, float]) -> Union[int, float]:
        return _require_positive(value)


class RecipeUpdate(BaseModel):
    """Partial update: only the fields that are sent get written."""
    name: Optional[str] = None
    ingredients: Optional[List[str]] = None
    instructions: Optional[str] = None
    cookingTime: Optional[Union[int, float]] = None

    @field_validator("name", "instructions")
    @classmethod
    def _text(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            raise ValueError("must not be null")
        return _require_text(value)

    @field_validator("ingredients")
    @classmethod
    def _ingredients(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            raise ValueError("must not be null")
        return _require_ingredients(value)

    @field_validator("cookingTime")
    @classmethod
    def _cooking_time(cls, value: Optional[Union[int, float]]) -> Optional[Union[int, float]]:
        if value is None:
            raise ValueError("must not be null")
        return _require_positive(value)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class RecipeOut(BaseModel):
    id: str
    name: str
    ingredients: List[str]
    instructions: str
    cookingTime: Union[int, float]
    createdAt: datetime


class PaginationParams(BaseModel):
    page: int = 1
    size: int = 10

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.size


class RecipePage(BaseModel):
    recipes: List[RecipeOut]
    totalRecipes: int
    page: int
    totalPages: int
