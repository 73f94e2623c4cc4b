from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import and_, or_
from sqlalchemy.orm import Query, Session, joinedload, selectinload

from app.models.category import Category
from app.models.favorite import UserFavorite
from app.models.recipe import Recipe
from app.services.categories import get_category
from app.services.errors import RecipeNotFoundError


@dataclass(frozen=True)
class RecipeFilters:
    category_id: int | None = None
    search: str | None = None
    favorites_only: bool = False


@dataclass(frozen=True)
class RecipeRow:
    """A recipe annotated with the caller's favorite flag."""

    recipe: Recipe
    is_favorite: bool


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _annotated_query(db: Session, user_id: int | None) -> Query:
    # With no caller the join condition becomes "user_id IS NULL", which never
    # matches because favorites always belong to a user.
    favorite_match = and_(UserFavorite.recipe_id == Recipe.id, UserFavorite.user_id == user_id)
    return (
        db.query(Recipe, UserFavorite.id)
        .outerjoin(UserFavorite, favorite_match)
        .options(joinedload(Recipe.category), joinedload(Recipe.owner))
    )


def _apply_filters(query: Query, filters: RecipeFilters) -> Query:
    if filters.category_id is not None:
        query = query.filter(Recipe.category_id == filters.category_id)

    search = (filters.search or "").strip()
    if search:
        like_term = f"%{_escape_like(search)}%"
        query = query.filter(Recipe.title.ilike(like_term, escape="\\"))

    if filters.favorites_only:
        query = query.filter(UserFavorite.id.is_not(None))

    return query


def _fetch(query: Query, filters: RecipeFilters | None, user_id: int | None) -> list[RecipeRow]:
    filters = filters or RecipeFilters()
    if filters.favorites_only and user_id is None:
        return []

    rows = _apply_filters(query, filters).order_by(Recipe.created_at.desc(), Recipe.id.desc()).all()
    return [RecipeRow(recipe=recipe, is_favorite=favorite_id is not None) for recipe, favorite_id in rows]


def load_recipe(db: Session, recipe_id: int) -> Recipe:
    recipe = db.get(Recipe, recipe_id)
    if recipe is None:
        raise RecipeNotFoundError(recipe_id)
    return recipe


def list_global_recipes(
    db: Session,
    *,
    user_id: int | None = None,
    filters: RecipeFilters | None = None,
) -> list[RecipeRow]:
    query = _annotated_query(db, user_id).filter(Recipe.user_id.is_(None))
    return _fetch(query, filters, user_id)


def list_my_recipes(
    db: Session,
    *,
    user_id: int,
    filters: RecipeFilters | None = None,
) -> list[RecipeRow]:
    query = _annotated_query(db, user_id).filter(Recipe.user_id == user_id)
    return _fetch(query, filters, user_id)


def list_public_recipes_of_others(
    db: Session,
    *,
    user_id: int | None = None,
    filters: RecipeFilters | None = None,
) -> list[RecipeRow]:
    query = _annotated_query(db, user_id).filter(
        Recipe.user_id.is_not(None),
        Recipe.is_public.is_(True),
    )
    if user_id is not None:
        query = query.filter(Recipe.user_id != user_id)
    return _fetch(query, filters, user_id)


def list_category_recipes(
    db: Session,
    category_id: int,
    *,
    user_id: int | None = None,
) -> tuple[Category, list[RecipeRow]]:
    category = get_category(db, category_id)

    visible = or_(Recipe.user_id.is_(None), Recipe.is_public.is_(True))
    if user_id is not None:
        visible = or_(visible, Recipe.user_id == user_id)

    query = _annotated_query(db, user_id).filter(Recipe.category_id == category_id, visible)
    return category, _fetch(query, None, user_id)


def get_recipe_detail(db: Session, recipe_id: int, *, user_id: int | None = None) -> RecipeRow:
    row = (
        _annotated_query(db, user_id)
        .options(selectinload(Recipe.ingredients), selectinload(Recipe.steps))
        .filter(Recipe.id == recipe_id)
        .first()
    )
    if row is None:
        raise RecipeNotFoundError(recipe_id)

    recipe, favorite_id = row
    return RecipeRow(recipe=recipe, is_favorite=favorite_id is not None)
