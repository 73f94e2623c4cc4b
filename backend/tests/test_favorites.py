import pytest
from sqlalchemy.orm import Session

from app.models.favorite import UserFavorite
from app.services import favorites
from app.services.errors import NotRecipeOwnerError, RecipeNotFoundError
from app.services.recipe_queries import get_recipe_detail


def _is_favorite(db: Session, recipe_id: int, *, user_id: int | None) -> bool:
    return (
        db.query(UserFavorite.id)
        .filter(UserFavorite.user_id == user_id, UserFavorite.recipe_id == recipe_id)
        .first()
        is not None
    )


def test_toggle_favorite_twice_restores_original_state(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    recipe = make_recipe("Tea")

    assert _is_favorite(db, recipe.id, user_id=alice.id) is False
    assert favorites.toggle_favorite(db, recipe.id, user_id=alice.id) is True
    assert _is_favorite(db, recipe.id, user_id=alice.id) is True
    assert favorites.toggle_favorite(db, recipe.id, user_id=alice.id) is False
    assert _is_favorite(db, recipe.id, user_id=alice.id) is False
    assert db.query(UserFavorite).count() == 0


def test_favorites_are_independent_per_user(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    bob = make_user("bob")
    recipe = make_recipe("Tea", owner=alice, is_public=True)

    favorites.toggle_favorite(db, recipe.id, user_id=bob.id)

    assert _is_favorite(db, recipe.id, user_id=bob.id) is True
    assert _is_favorite(db, recipe.id, user_id=alice.id) is False
    assert _is_favorite(db, recipe.id, user_id=None) is False


def test_toggle_favorite_on_missing_recipe_raises(db: Session, make_user) -> None:
    alice = make_user("alice")

    with pytest.raises(RecipeNotFoundError):
        favorites.toggle_favorite(db, 123, user_id=alice.id)

    assert db.query(UserFavorite).count() == 0


def test_owner_toggles_visibility(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    recipe = make_recipe("Gratin", owner=alice)

    assert favorites.toggle_visibility(db, recipe.id, user_id=alice.id) is True
    assert get_recipe_detail(db, recipe.id).recipe.is_public is True
    assert favorites.toggle_visibility(db, recipe.id, user_id=alice.id) is False
    assert get_recipe_detail(db, recipe.id).recipe.is_public is False


def test_visibility_toggle_by_other_user_is_rejected(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    bob = make_user("bob")
    recipe = make_recipe("Gratin", owner=alice)

    with pytest.raises(NotRecipeOwnerError):
        favorites.toggle_visibility(db, recipe.id, user_id=bob.id)

    assert get_recipe_detail(db, recipe.id).recipe.is_public is False


def test_global_recipe_has_no_visibility_toggle(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    recipe = make_recipe("Tea")

    with pytest.raises(NotRecipeOwnerError):
        favorites.toggle_visibility(db, recipe.id, user_id=alice.id)


def test_toggle_visibility_on_missing_recipe_raises(db: Session, make_user) -> None:
    alice = make_user("alice")

    with pytest.raises(RecipeNotFoundError):
        favorites.toggle_visibility(db, 123, user_id=alice.id)
