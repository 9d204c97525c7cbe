"""
test_recipe.py — Unit tests for recipes/recipe.py
"""

import pytest

from recipes import Recipe

# ── Construction ──────────────────────────────────────────────────────────────


class TestRecipeConstruction:
    def test_name_and_ingredients_are_kept(self, pancakes):
        assert pancakes.name == "Pancakes"
        assert pancakes.ingredients == ["flour", "milk", "egg"]

    def test_ingredients_default_to_empty(self):
        assert Recipe("Water").ingredients == []

    def test_any_iterable_of_ingredients_is_accepted(self):
        """A tuple or generator is copied into a list."""
        assert Recipe("Toast", ("bread", "butter")).ingredients == ["bread", "butter"]
        assert Recipe("Toast", (i for i in ["bread"])).ingredients == ["bread"]

    def test_list_is_stored_by_reference(self):
        """The caller's list and the recipe's ingredients are the same object."""
        ingredients = ["bread"]
        recipe = Recipe("Toast", ingredients)
        ingredients.append("jam")
        assert recipe.ingredients == ["bread", "jam"]

    def test_name_is_read_only(self, pancakes):
        with pytest.raises(AttributeError):
            pancakes.name = "Crepes"
        assert pancakes.name == "Pancakes"


# ── Ingredients ───────────────────────────────────────────────────────────────


class TestRecipeIngredients:
    def test_add_ingredient_appends(self, pancakes):
        pancakes.add_ingredient("syrup")
        assert pancakes.ingredients[-1] == "syrup"
        assert pancakes.ingredient_count() == 4

    def test_add_ingredient_keeps_duplicates(self, pancakes):
        pancakes.add_ingredient("egg")
        assert pancakes.ingredients == ["flour", "milk", "egg", "egg"]

    def test_remove_ingredient_removes_first_occurrence_only(self):
        recipe = Recipe("Omelette", ["egg", "cheese", "egg"])
        recipe.remove_ingredient("egg")
        assert recipe.ingredients == ["cheese", "egg"]

    def test_remove_missing_ingredient_is_a_no_op(self, pancakes):
        pancakes.remove_ingredient("chocolate")
        assert pancakes.ingredients == ["flour", "milk", "egg"]

    def test_ingredient_count_tracks_mutations(self):
        recipe = Recipe("Salad")
        assert recipe.ingredient_count() == 0
        recipe.add_ingredient("lettuce")
        recipe.add_ingredient("tomato")
        recipe.remove_ingredient("lettuce")
        assert recipe.ingredient_count() == 1


# ── Equality ──────────────────────────────────────────────────────────────────


class TestRecipeEquality:
    def test_equal_when_name_and_ingredients_match(self):
        assert Recipe("Toast", ["bread"]) == Recipe("Toast", ["bread"])

    def test_not_equal_when_ingredients_differ(self):
        assert Recipe("Toast", ["bread"]) != Recipe("Toast", ["bread", "jam"])

    def test_not_equal_to_other_types(self, pancakes):
        assert pancakes != "Pancakes"

    def test_recipes_are_unhashable(self, pancakes):
        with pytest.raises(TypeError):
            hash(pancakes)
