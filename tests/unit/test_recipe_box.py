"""
test_recipe_box.py — Unit tests for recipes/recipe_box.py
"""

from recipes import Recipe, RecipeBox

# ── add / size / enumeration ──────────────────────────────────────────────────


class TestRecipeBoxAdd:
    def test_new_box_is_empty(self):
        box = RecipeBox()
        assert box.size() == 0
        assert len(box) == 0
        assert box.recipes == ()

    def test_add_keeps_insertion_order(self, box, omelette):
        box.add(omelette)
        assert [r.name for r in box] == ["Pancakes", "Omelette"]

    def test_add_stores_the_same_reference(self, box, pancakes):
        """Mutating a recipe after adding it is visible through the box."""
        pancakes.add_ingredient("syrup")
        assert box.find("Pancakes") is pancakes
        assert "syrup" in box.recipes[0].ingredients

    def test_adding_the_same_recipe_twice_gives_two_entries(self, box, pancakes):
        box.add(pancakes)
        assert box.size() == 2

    def test_recipes_snapshot_is_read_only(self, box, omelette):
        snapshot = box.recipes
        box.add(omelette)
        assert len(snapshot) == 1
        assert box.size() == 2


# ── remove ────────────────────────────────────────────────────────────────────


class TestRecipeBoxRemove:
    def test_remove_then_find_returns_none(self, box, pancakes, omelette):
        box.add(omelette)
        box.remove(pancakes)
        assert box.find("Pancakes") is None
        assert box.find("Omelette") is omelette

    def test_remove_matches_by_value(self, box):
        box.remove(Recipe("Pancakes", ["flour", "milk", "egg"]))
        assert box.size() == 0

    def test_remove_only_first_entry(self, box, pancakes):
        box.add(pancakes)
        box.remove(pancakes)
        assert box.size() == 1

    def test_remove_missing_recipe_is_a_no_op(self, box, omelette):
        box.remove(omelette)
        assert box.size() == 1

    def test_remove_from_empty_box_is_a_no_op(self, pancakes):
        box = RecipeBox()
        box.remove(pancakes)
        assert box.size() == 0


# ── find ──────────────────────────────────────────────────────────────────────


class TestRecipeBoxFind:
    def test_find_returns_first_match(self, box):
        second = Recipe("Pancakes", ["buckwheat"])
        box.add(second)
        assert box.find("Pancakes").ingredients == ["flour", "milk", "egg"]

    def test_find_missing_name_returns_none(self, box):
        assert box.find("Waffles") is None

    def test_find_on_empty_box_returns_none(self):
        assert RecipeBox().find("Pancakes") is None

    def test_membership(self, box, pancakes, omelette):
        assert pancakes in box
        assert omelette not in box


# ── clear ─────────────────────────────────────────────────────────────────────


class TestRecipeBoxClear:
    def test_clear_empties_box_after_any_history(self, box, pancakes, omelette):
        box.add(omelette)
        box.remove(pancakes)
        box.add(Recipe("Waffles", ["flour", "egg"]))
        box.add(pancakes)
        box.clear()
        assert box.size() == 0
        for name in ("Pancakes", "Omelette", "Waffles"):
            assert box.find(name) is None

    def test_clear_leaves_recipes_held_elsewhere_intact(self, box, pancakes):
        box.clear()
        assert pancakes.ingredients == ["flour", "milk", "egg"]

    def test_clear_on_empty_box(self):
        box = RecipeBox()
        box.clear()
        assert box.size() == 0
