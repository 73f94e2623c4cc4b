from collections.abc import Callable, Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.core.database import Base
from app.models.recipe import Recipe
from app.models.user import User
from app.schemas.recipe import RecipeCreate
from app.services import recipe_store


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine: Engine) -> Generator[Session, None, None]:
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db: Session) -> Callable[..., User]:
    def _make_user(username: str, display_name: str | None = None) -> User:
        user = User(
            username=username,
            display_name=display_name or username.title(),
            password_hash="unused",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


def build_recipe_payload(title: str = "Tea", **overrides: object) -> RecipeCreate:
    data: dict[str, object] = {
        "title": title,
        "ingredients": [{"name": "Water", "amount": "250", "unit": "ml"}],
        "steps": [{"instruction": "Boil"}],
    }
    data.update(overrides)
    return RecipeCreate.model_validate(data)


@pytest.fixture
def recipe_payload() -> Callable[..., RecipeCreate]:
    return build_recipe_payload


@pytest.fixture
def make_recipe(db: Session) -> Callable[..., Recipe]:
    def _make_recipe(title: str = "Tea", *, owner: User | None = None, **overrides: object) -> Recipe:
        payload = build_recipe_payload(title, **overrides)
        return recipe_store.create_recipe(db, payload, owner_id=owner.id if owner else None)

    return _make_recipe
