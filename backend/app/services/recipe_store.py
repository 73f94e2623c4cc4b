from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.recipe import Ingredient, Recipe, Step
from app.schemas.recipe import RecipeCreate
from app.services.errors import CategoryNotFoundError, NotRecipeOwnerError, RecipeValidationError
from app.services.recipe_queries import load_recipe
from app.services.transactions import write_transaction

logger = logging.getLogger("recipebook.recipes")


def validate_recipe_payload(payload: RecipeCreate) -> None:
    """Reject a payload that would leave a recipe without title, ingredients or steps."""
    if not (payload.title or "").strip():
        raise RecipeValidationError("Title is required")
    if not payload.ingredients:
        raise RecipeValidationError("At least one ingredient is required")
    if any(not (ingredient.name or "").strip() for ingredient in payload.ingredients):
        raise RecipeValidationError("Ingredient name is required")
    if not payload.steps:
        raise RecipeValidationError("At least one step is required")
    if any(not (step.instruction or "").strip() for step in payload.steps):
        raise RecipeValidationError("Step instruction is required")


def _ensure_category_exists(db: Session, category_id: int | None) -> None:
    if category_id is not None and db.get(Category, category_id) is None:
        raise CategoryNotFoundError(category_id)


def _ensure_can_modify(recipe: Recipe, user_id: int | None) -> None:
    # Global recipes are shared and editable by anyone.
    if recipe.user_id is not None and recipe.user_id != user_id:
        raise NotRecipeOwnerError("Only the owner can modify this recipe")


def _build_ingredients(payload: RecipeCreate) -> list[Ingredient]:
    return [
        Ingredient(name=ingredient.name, amount=ingredient.amount or None, unit=ingredient.unit or None)
        for ingredient in payload.ingredients
    ]


def _build_steps(payload: RecipeCreate) -> list[Step]:
    return [
        Step(step_number=number, instruction=step.instruction)
        for number, step in enumerate(payload.steps, start=1)
    ]


def _apply_header(recipe: Recipe, payload: RecipeCreate) -> None:
    recipe.category_id = payload.category_id
    recipe.title = payload.title.strip()
    recipe.description = payload.description or None
    recipe.servings = payload.servings
    recipe.prep_time = payload.prep_time
    recipe.image_url = payload.image_url or None


def create_recipe(db: Session, payload: RecipeCreate, *, owner_id: int | None) -> Recipe:
    validate_recipe_payload(payload)
    _ensure_category_exists(db, payload.category_id)

    recipe = Recipe(user_id=owner_id)
    _apply_header(recipe, payload)
    recipe.is_public = bool(payload.is_public) if owner_id is not None else False

    with write_transaction(db, "create recipe"):
        db.add(recipe)
        recipe.ingredients.extend(_build_ingredients(payload))
        recipe.steps.extend(_build_steps(payload))

    logger.info("Created recipe %s (owner=%s)", recipe.id, owner_id)
    return recipe


def update_recipe(db: Session, recipe_id: int, payload: RecipeCreate, *, user_id: int | None) -> Recipe:
    recipe = load_recipe(db, recipe_id)
    _ensure_can_modify(recipe, user_id)
    validate_recipe_payload(payload)
    _ensure_category_exists(db, payload.category_id)

    with write_transaction(db, "update recipe"):
        _apply_header(recipe, payload)
        if payload.is_public is not None and recipe.user_id is not None:
            recipe.is_public = payload.is_public

        # Children are always rewritten from the payload, never patched.
        recipe.ingredients.clear()
        recipe.steps.clear()
        db.flush()
        recipe.ingredients.extend(_build_ingredients(payload))
        recipe.steps.extend(_build_steps(payload))

    logger.info("Updated recipe %s", recipe_id)
    return recipe


def delete_recipe(db: Session, recipe_id: int, *, user_id: int | None) -> None:
    recipe = load_recipe(db, recipe_id)
    _ensure_can_modify(recipe, user_id)

    with write_transaction(db, "delete recipe"):
        # Cascades remove ingredients, steps and every user's favorite row.
        db.delete(recipe)

    logger.info("Deleted recipe %s", recipe_id)
