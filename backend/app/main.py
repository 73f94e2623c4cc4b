import logging

from fastapi import FastAPI

from app import models  # noqa: F401
from app.api.auth import router as auth_router
from app.api.categories import router as category_router
from app.api.health import router as health_router
from app.api.recipes import router as recipe_router
from app.core.config import settings
from app.core.database import Base, engine
from app.core.observability_middleware import ObservabilityMiddleware


def create_app() -> FastAPI:
    logging.getLogger("recipebook").setLevel(settings.log_level.upper())

    app = FastAPI(title=settings.app_name)
    app.add_middleware(ObservabilityMiddleware)

    if settings.auto_create_tables:
        Base.metadata.create_all(bind=engine)

    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(auth_router, prefix=settings.api_prefix)
    app.include_router(category_router, prefix=settings.api_prefix)
    app.include_router(recipe_router, prefix=settings.api_prefix)
    return app


app = create_app()
