from app.models.category import Category
from app.models.favorite import UserFavorite
from app.models.recipe import Ingredient, Recipe, Step
from app.models.user import User

__all__ = [
    "Category",
    "Ingredient",
    "Recipe",
    "Step",
    "User",
    "UserFavorite",
]
