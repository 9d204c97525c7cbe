"""recipes/recipe.py — A named recipe holding a mutable list of ingredients."""

from __future__ import annotations

from collections.abc import Iterable


class Recipe:
    """A recipe name paired with an ordered, mutable ingredient list.

    The name is fixed at construction. Ingredients keep insertion order and may
    repeat. A list passed to the constructor is stored as-is, so the caller and
    the recipe see the same list.

    Properties:
        name: Recipe name (str, read-only)
        ingredients: Ingredient names in insertion order (list of str)
    """

    __hash__ = None  # mutable, compared by value

    def __init__(self, name: str, ingredients: Iterable[str] = ()) -> None:
        self.__name = name
        self.__ingredients = ingredients if isinstance(ingredients, list) else list(ingredients)

    @property
    def name(self) -> str:
        return self.__name

    @property
    def ingredients(self) -> list[str]:
        return self.__ingredients

    def add_ingredient(self, ingredient: str) -> None:
        self.__ingredients.append(ingredient)

    def remove_ingredient(self, ingredient: str) -> None:
        """Removes the first occurrence of ingredient; does nothing if it is absent."""
        if ingredient in self.__ingredients:
            self.__ingredients.remove(ingredient)

    def ingredient_count(self) -> int:
        return len(self.__ingredients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.__name == other.name and self.__ingredients == other.ingredients

    def __repr__(self) -> str:
        return f"Recipe({self.__name!r}, {self.__ingredients!r})"
