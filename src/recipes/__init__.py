"""Recipe box domain model: a box of named recipes, each with an ingredient list."""

from recipes.recipe import Recipe
from recipes.recipe_box import RecipeBox

__all__ = ["Recipe", "RecipeBox"]
