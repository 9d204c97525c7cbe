"""recipes/recipe_box.py — An ordered collection of Recipe references."""

from __future__ import annotations

from collections.abc import Iterator

from recipes.recipe import Recipe


class RecipeBox:
    """Ordered box of recipes.

    The box stores references, never copies: a recipe mutated after being added
    is seen mutated through the box. Names need not be unique and the same
    recipe may be added more than once.
    """

    def __init__(self) -> None:
        self.__recipes: list[Recipe] = []

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        """Snapshot of the current recipes in box order."""
        return tuple(self.__recipes)

    def add(self, recipe: Recipe) -> None:
        self.__recipes.append(recipe)

    def remove(self, recipe: Recipe) -> None:
        """Removes the first recipe equal to recipe; does nothing if none is."""
        for index, candidate in enumerate(self.__recipes):
            if candidate is recipe or candidate == recipe:
                del self.__recipes[index]
                return

    def find(self, name: str) -> Recipe | None:
        """Returns the first recipe called name, or None."""
        return next((r for r in self.__recipes if r.name == name), None)

    def clear(self) -> None:
        self.__recipes.clear()

    def size(self) -> int:
        return len(self.__recipes)

    def __len__(self) -> int:
        return len(self.__recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(tuple(self.__recipes))

    def __contains__(self, recipe: object) -> bool:
        return any(candidate is recipe or candidate == recipe for candidate in self.__recipes)

    def __repr__(self) -> str:
        return f"RecipeBox({self.__recipes!r})"
