from __future__ import annotations

import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.recipe import Recipe
from app.services.errors import CategoryConflictError, CategoryNotFoundError, CategoryValidationError
from app.services.transactions import write_transaction

logger = logging.getLogger("recipebook.categories")


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise CategoryValidationError("Category name is required")
    return cleaned


def _ensure_name_free(db: Session, name: str, *, exclude_id: int | None = None) -> None:
    query = db.query(Category).filter(Category.name == name)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first():
        raise CategoryConflictError(name)


def list_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def get_category(db: Session, category_id: int) -> Category:
    category = db.get(Category, category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    return category


def create_category(db: Session, name: str) -> Category:
    cleaned = _clean_name(name)
    _ensure_name_free(db, cleaned)

    category = Category(name=cleaned)
    with write_transaction(db, "create category", conflict=CategoryConflictError(cleaned)):
        db.add(category)

    db.refresh(category)
    logger.info("Created category %s (%r)", category.id, category.name)
    return category


def rename_category(db: Session, category_id: int, name: str) -> Category:
    category = get_category(db, category_id)
    cleaned = _clean_name(name)
    _ensure_name_free(db, cleaned, exclude_id=category.id)

    with write_transaction(db, "rename category", conflict=CategoryConflictError(cleaned)):
        category.name = cleaned

    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> None:
    """Delete a category; its recipes stay, with no category."""
    category = get_category(db, category_id)

    with write_transaction(db, "delete category"):
        detached = db.execute(
            update(Recipe)
            .where(Recipe.category_id == category.id)
            .values(category_id=None)
            .execution_options(synchronize_session="fetch")
        ).rowcount
        db.delete(category)

    logger.info("Deleted category %s, %s recipe(s) left uncategorized", category_id, detached)
