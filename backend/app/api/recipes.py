from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.errors import to_http_exception
from app.core.database import get_db
from app.core.security import get_current_user, get_optional_user
from app.models.user import User
from app.schemas.recipe import (
    FavoriteToggleRead,
    IngredientRead,
    RecipeCreate,
    RecipeRead,
    RecipeSummaryRead,
    StepRead,
    VisibilityToggleRead,
)
from app.services import favorites, recipe_queries, recipe_store
from app.services.errors import RecipeBookError
from app.services.recipe_queries import RecipeFilters, RecipeRow

router = APIRouter(prefix="/recipes", tags=["recipes"])


def _user_id(user: User | None) -> int | None:
    return user.id if user is not None else None


def recipe_filters(
    category_id: int | None = Query(default=None, alias="categoryId"),
    search: str | None = Query(default=None, max_length=200),
    favorite: bool = Query(default=False),
) -> RecipeFilters:
    return RecipeFilters(category_id=category_id, search=search, favorites_only=favorite)


def to_recipe_summary(row: RecipeRow) -> RecipeSummaryRead:
    recipe = row.recipe
    return RecipeSummaryRead(
        id=recipe.id,
        category_id=recipe.category_id,
        category_name=recipe.category.name if recipe.category else None,
        user_id=recipe.user_id,
        owner_display_name=recipe.owner.display_name if recipe.owner else None,
        title=recipe.title,
        description=recipe.description,
        servings=recipe.servings,
        prep_time=recipe.prep_time,
        image_url=recipe.image_url,
        is_public=recipe.is_public,
        is_favorite=row.is_favorite,
        created_at=recipe.created_at,
    )


def to_recipe_read(row: RecipeRow) -> RecipeRead:
    summary = to_recipe_summary(row)
    return RecipeRead(
        **summary.model_dump(),
        ingredients=[IngredientRead.model_validate(item) for item in row.recipe.ingredients],
        steps=[StepRead.model_validate(step) for step in row.recipe.steps],
    )


@router.get("", response_model=list[RecipeSummaryRead])
def list_global_recipes(
    filters: RecipeFilters = Depends(recipe_filters),
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> list[RecipeSummaryRead]:
    rows = recipe_queries.list_global_recipes(db, user_id=_user_id(current_user), filters=filters)
    return [to_recipe_summary(row) for row in rows]


@router.get("/mine", response_model=list[RecipeSummaryRead])
def list_my_recipes(
    filters: RecipeFilters = Depends(recipe_filters),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[RecipeSummaryRead]:
    rows = recipe_queries.list_my_recipes(db, user_id=current_user.id, filters=filters)
    return [to_recipe_summary(row) for row in rows]


@router.get("/community", response_model=list[RecipeSummaryRead])
def list_community_recipes(
    filters: RecipeFilters = Depends(recipe_filters),
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> list[RecipeSummaryRead]:
    rows = recipe_queries.list_public_recipes_of_others(db, user_id=_user_id(current_user), filters=filters)
    return [to_recipe_summary(row) for row in rows]


@router.get("/{recipe_id}", response_model=RecipeRead)
def get_recipe(
    recipe_id: int,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> RecipeRead:
    try:
        row = recipe_queries.get_recipe_detail(db, recipe_id, user_id=_user_id(current_user))
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc
    return to_recipe_read(row)


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
def create_recipe(
    payload: RecipeCreate,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> RecipeRead:
    user_id = _user_id(current_user)
    try:
        recipe = recipe_store.create_recipe(db, payload, owner_id=user_id)
        row = recipe_queries.get_recipe_detail(db, recipe.id, user_id=user_id)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc
    return to_recipe_read(row)


@router.put("/{recipe_id}", response_model=RecipeRead)
def update_recipe(
    recipe_id: int,
    payload: RecipeCreate,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> RecipeRead:
    user_id = _user_id(current_user)
    try:
        recipe_store.update_recipe(db, recipe_id, payload, user_id=user_id)
        row = recipe_queries.get_recipe_detail(db, recipe_id, user_id=user_id)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc
    return to_recipe_read(row)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: int,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> Response:
    try:
        recipe_store.delete_recipe(db, recipe_id, user_id=_user_id(current_user))
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{recipe_id}/favorite", response_model=FavoriteToggleRead)
def toggle_favorite(
    recipe_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> FavoriteToggleRead:
    try:
        is_favorite = favorites.toggle_favorite(db, recipe_id, user_id=current_user.id)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc
    return FavoriteToggleRead(id=recipe_id, is_favorite=is_favorite)


@router.patch("/{recipe_id}/visibility", response_model=VisibilityToggleRead)
def toggle_visibility(
    recipe_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> VisibilityToggleRead:
    try:
        is_public = favorites.toggle_visibility(db, recipe_id, user_id=current_user.id)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc
    return VisibilityToggleRead(id=recipe_id, is_public=is_public)
