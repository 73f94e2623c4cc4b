"""Per-user favorites and owner-controlled visibility.

A favorite is the presence of a ``UserFavorite`` row for a (user, recipe)
pair, so toggling needs no separate state read by the client: an existing
row is deleted, a missing one is inserted.

Visibility is a flag on the recipe itself and only the owner may flip it.
Global recipes have no owner and therefore no visibility toggle.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.models.favorite import UserFavorite
from app.services.errors import NotRecipeOwnerError
from app.services.recipe_queries import load_recipe
from app.services.transactions import write_transaction

logger = logging.getLogger("recipebook.recipes")


def toggle_favorite(db: Session, recipe_id: int, *, user_id: int) -> bool:
    load_recipe(db, recipe_id)

    favorite = (
        db.query(UserFavorite)
        .filter(UserFavorite.user_id == user_id, UserFavorite.recipe_id == recipe_id)
        .first()
    )

    with write_transaction(db, "toggle favorite"):
        if favorite is not None:
            db.delete(favorite)
            favorited = False
        else:
            db.add(UserFavorite(user_id=user_id, recipe_id=recipe_id))
            favorited = True

    logger.info("User %s %s recipe %s", user_id, "favorited" if favorited else "unfavorited", recipe_id)
    return favorited


def toggle_visibility(db: Session, recipe_id: int, *, user_id: int) -> bool:
    recipe = load_recipe(db, recipe_id)
    if recipe.user_id is None or recipe.user_id != user_id:
        raise NotRecipeOwnerError("Only the recipe owner can change its visibility")

    with write_transaction(db, "toggle visibility"):
        recipe.is_public = not recipe.is_public
        is_public = recipe.is_public

    logger.info("Recipe %s is now %s", recipe_id, "public" if is_public else "private")
    return is_public
