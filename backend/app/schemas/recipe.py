from datetime import datetime

from pydantic import ConfigDict, Field

from app.schemas.base import CamelModel


class IngredientCreate(CamelModel):
    name: str = Field(min_length=1, max_length=120)
    amount: str | None = Field(default=None, max_length=40)
    unit: str | None = Field(default=None, max_length=40)

    # Amount and unit are free text; "400" and 400 are both accepted.
    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)


class IngredientRead(CamelModel):
    id: int
    name: str
    amount: str | None = None
    unit: str | None = None


class StepCreate(CamelModel):
    instruction: str = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class StepRead(CamelModel):
    id: int
    step_number: int
    instruction: str


class RecipeBase(CamelModel):
    category_id: int | None = Field(default=None, gt=0)
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    servings: int | None = Field(default=None, ge=1)
    prep_time: int | None = Field(default=None, ge=0)
    image_url: str | None = Field(default=None, max_length=500)


class RecipeCreate(RecipeBase):
    is_public: bool | None = None
    ingredients: list[IngredientCreate] = Field(min_length=1)
    steps: list[StepCreate] = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class RecipeSummaryRead(RecipeBase):
    id: int
    user_id: int | None = None
    owner_display_name: str | None = None
    category_name: str | None = None
    is_public: bool
    is_favorite: bool = False
    created_at: datetime


class RecipeRead(RecipeSummaryRead):
    ingredients: list[IngredientRead] = Field(default_factory=list)
    steps: list[StepRead] = Field(default_factory=list)


class FavoriteToggleRead(CamelModel):
    id: int
    is_favorite: bool


class VisibilityToggleRead(CamelModel):
    id: int
    is_public: bool
