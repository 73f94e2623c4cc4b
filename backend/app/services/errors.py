from __future__ import annotations


class RecipeBookError(Exception):
    """Base class for errors the API reports back to the caller."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationError(RecipeBookError):
    status_code = 422


class RecipeValidationError(ValidationError):
    pass


class CategoryValidationError(ValidationError):
    pass


class NotFoundError(RecipeBookError):
    status_code = 404


class RecipeNotFoundError(NotFoundError):
    def __init__(self, recipe_id: int) -> None:
        super().__init__("Recipe not found")
        self.recipe_id = recipe_id


class CategoryNotFoundError(NotFoundError):
    def __init__(self, category_id: int) -> None:
        super().__init__("Category not found")
        self.category_id = category_id


class NotRecipeOwnerError(RecipeBookError):
    status_code = 403


class ConflictError(RecipeBookError):
    status_code = 409


class CategoryConflictError(ConflictError):
    def __init__(self, name: str) -> None:
        super().__init__("Category already exists")
        self.name = name


class StorageError(RecipeBookError):
    status_code = 500

    def __init__(self, detail: str = "Storage failure") -> None:
        super().__init__(detail)
