from fastapi import HTTPException

from app.services.errors import RecipeBookError


def to_http_exception(exc: RecipeBookError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.detail)
