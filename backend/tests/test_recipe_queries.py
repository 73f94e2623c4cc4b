from datetime import datetime, timedelta

import pytest
from sqlalchemy.orm import Session

from app.models.category import Category
from app.services import favorites
from app.services.errors import CategoryNotFoundError, RecipeNotFoundError
from app.services.recipe_queries import (
    RecipeFilters,
    get_recipe_detail,
    list_category_recipes,
    list_global_recipes,
    list_my_recipes,
    list_public_recipes_of_others,
)


def _titles(rows) -> list[str]:
    return [row.recipe.title for row in rows]


def _category(db: Session, name: str) -> Category:
    category = Category(name=name)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def test_anonymous_recipe_is_global_and_not_owned_by_anyone(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    make_recipe("Tea")

    assert _titles(list_global_recipes(db)) == ["Tea"]
    assert _titles(list_global_recipes(db, user_id=alice.id)) == ["Tea"]
    assert list_my_recipes(db, user_id=alice.id) == []


def test_global_listing_excludes_owned_recipes(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    make_recipe("Soup")
    make_recipe("Cutlet", owner=alice, is_public=True)

    assert _titles(list_global_recipes(db, user_id=alice.id)) == ["Soup"]


def test_search_is_case_insensitive_substring(db: Session, make_recipe) -> None:
    make_recipe("Tea")
    make_recipe("Green TEA Latte")
    make_recipe("Coffee")

    rows = list_global_recipes(db, filters=RecipeFilters(search="tea"))

    assert sorted(_titles(rows)) == ["Green TEA Latte", "Tea"]


def test_search_matches_wildcards_literally(db: Session, make_recipe) -> None:
    make_recipe("100% Rye Bread")
    make_recipe("Tea")
    make_recipe("Snake_case Salad")

    assert _titles(list_global_recipes(db, filters=RecipeFilters(search="%"))) == ["100% Rye Bread"]
    assert _titles(list_global_recipes(db, filters=RecipeFilters(search="_"))) == ["Snake_case Salad"]


def test_listing_is_newest_first(db: Session, make_recipe) -> None:
    older = make_recipe("Older")
    newer = make_recipe("Newer")
    older.created_at = datetime(2026, 1, 1)
    newer.created_at = datetime(2026, 1, 1) + timedelta(days=1)
    db.commit()

    assert _titles(list_global_recipes(db)) == ["Newer", "Older"]


def test_my_recipes_include_private_ones(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    bob = make_user("bob")
    make_recipe("Private Muesli", owner=alice)
    make_recipe("Public Gratin", owner=alice, is_public=True)
    make_recipe("Bob's Pad Thai", owner=bob)

    assert sorted(_titles(list_my_recipes(db, user_id=alice.id))) == ["Private Muesli", "Public Gratin"]


def test_community_lists_only_public_recipes_of_other_users(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    bob = make_user("bob")
    make_recipe("Global Salad")
    make_recipe("Alice Public", owner=alice, is_public=True)
    make_recipe("Bob Public", owner=bob, is_public=True)
    make_recipe("Bob Private", owner=bob)

    assert _titles(list_public_recipes_of_others(db, user_id=alice.id)) == ["Bob Public"]
    assert sorted(_titles(list_public_recipes_of_others(db))) == ["Alice Public", "Bob Public"]


def test_is_favorite_is_computed_per_caller(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    bob = make_user("bob")
    recipe = make_recipe("Tea")
    favorites.toggle_favorite(db, recipe.id, user_id=alice.id)

    assert [row.is_favorite for row in list_global_recipes(db, user_id=alice.id)] == [True]
    assert [row.is_favorite for row in list_global_recipes(db, user_id=bob.id)] == [False]
    assert [row.is_favorite for row in list_global_recipes(db)] == [False]


def test_favorites_only_filter(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    tea = make_recipe("Tea")
    make_recipe("Coffee")
    favorites.toggle_favorite(db, tea.id, user_id=alice.id)

    only_favorites = RecipeFilters(favorites_only=True)

    assert _titles(list_global_recipes(db, user_id=alice.id, filters=only_favorites)) == ["Tea"]
    assert list_global_recipes(db, filters=only_favorites) == []


def test_filters_compose_conjunctively(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    drinks = _category(db, "Drink")
    soups = _category(db, "Soup")
    iced_tea = make_recipe("Iced Tea", category_id=drinks.id)
    make_recipe("Hot Tea", category_id=drinks.id)
    make_recipe("Tea Soup", category_id=soups.id)
    make_recipe("Lemonade", category_id=drinks.id)
    favorites.toggle_favorite(db, iced_tea.id, user_id=alice.id)

    by_category = list_global_recipes(db, filters=RecipeFilters(category_id=drinks.id, search="tea"))
    assert sorted(_titles(by_category)) == ["Hot Tea", "Iced Tea"]

    all_three = RecipeFilters(category_id=drinks.id, search="tea", favorites_only=True)
    assert _titles(list_global_recipes(db, user_id=alice.id, filters=all_three)) == ["Iced Tea"]


def test_detail_includes_children_owner_and_category(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice", display_name="Alice A.")
    desserts = _category(db, "Dessert")
    recipe = make_recipe(
        "Panna Cotta",
        owner=alice,
        category_id=desserts.id,
        ingredients=[{"name": "Cream", "amount": "500", "unit": "ml"}, {"name": "Sugar"}],
        steps=[{"instruction": "Heat cream"}, {"instruction": "Chill"}],
    )
    favorites.toggle_favorite(db, recipe.id, user_id=alice.id)

    row = get_recipe_detail(db, recipe.id, user_id=alice.id)

    assert row.is_favorite is True
    assert row.recipe.owner.display_name == "Alice A."
    assert row.recipe.category.name == "Dessert"
    assert [item.name for item in row.recipe.ingredients] == ["Cream", "Sugar"]
    assert [(step.step_number, step.instruction) for step in row.recipe.steps] == [
        (1, "Heat cream"),
        (2, "Chill"),
    ]
    assert get_recipe_detail(db, recipe.id).is_favorite is False


def test_detail_of_unknown_recipe_raises_not_found(db: Session) -> None:
    with pytest.raises(RecipeNotFoundError):
        get_recipe_detail(db, 999)


def test_category_recipes_hide_private_recipes_of_others(db: Session, make_user, make_recipe) -> None:
    alice = make_user("alice")
    bob = make_user("bob")
    mains = _category(db, "Main Course")
    make_recipe("Carbonara", category_id=mains.id)
    make_recipe("Alice Private", owner=alice, category_id=mains.id)
    make_recipe("Bob Private", owner=bob, category_id=mains.id)
    make_recipe("Bob Public", owner=bob, category_id=mains.id, is_public=True)

    category, rows = list_category_recipes(db, mains.id, user_id=alice.id)

    assert category.name == "Main Course"
    assert sorted(_titles(rows)) == ["Alice Private", "Bob Public", "Carbonara"]


def test_category_recipes_of_unknown_category_raises(db: Session) -> None:
    with pytest.raises(CategoryNotFoundError):
        list_category_recipes(db, 42)
