from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.errors import to_http_exception
from app.api.recipes import to_recipe_summary
from app.core.database import get_db
from app.core.security import get_optional_user
from app.models.category import Category
from app.models.user import User
from app.schemas.category import CategoryCreate, CategoryRead, CategoryRecipesRead
from app.services import categories, recipe_queries
from app.services.errors import RecipeBookError

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryRead])
def list_categories(db: Session = Depends(get_db)) -> list[Category]:
    return categories.list_categories(db)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: int, db: Session = Depends(get_db)) -> Category:
    try:
        return categories.get_category(db, category_id)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc


@router.get("/{category_id}/recipes", response_model=CategoryRecipesRead)
def list_category_recipes(
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> CategoryRecipesRead:
    user_id = current_user.id if current_user is not None else None
    try:
        category, rows = recipe_queries.list_category_recipes(db, category_id, user_id=user_id)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc

    return CategoryRecipesRead(
        category=CategoryRead.model_validate(category),
        recipes=[to_recipe_summary(row) for row in rows],
    )


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)) -> Category:
    try:
        return categories.create_category(db, payload.name)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc


@router.put("/{category_id}", response_model=CategoryRead)
def rename_category(category_id: int, payload: CategoryCreate, db: Session = Depends(get_db)) -> Category:
    try:
        return categories.rename_category(db, category_id, payload.name)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        categories.delete_category(db, category_id)
    except RecipeBookError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
