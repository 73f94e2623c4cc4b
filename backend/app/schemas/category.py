from datetime import datetime

from pydantic import ConfigDict, Field

from app.schemas.base import CamelModel
from app.schemas.recipe import RecipeSummaryRead


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=80)

    model_config = ConfigDict(str_strip_whitespace=True)


class CategoryRead(CamelModel):
    id: int
    name: str
    created_at: datetime


class CategoryRecipesRead(CamelModel):
    category: CategoryRead
    recipes: list[RecipeSummaryRead] = Field(default_factory=list)
