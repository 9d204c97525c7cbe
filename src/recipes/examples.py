"""recipes/examples.py — The recipe box hooks walkthrough as a runnable suite.

Per-unit hooks give every unit its own box holding one Pancakes recipe; the
nested group builds one Toast box for the whole group and shares it, which is
where state leaks from one unit into the next.
"""

from lifecycle import Group
from recipes.recipe import Recipe
from recipes.recipe_box import RecipeBox

SUITE_NAME = "Before/after hooks and shared state (RecipeBox examples)"


def build_suite() -> Group:
    """Returns a fresh declaration of the walkthrough suite."""
    suite = Group(SUITE_NAME)

    @suite.before_each
    def fresh_box(ctx):
        ctx.box = RecipeBox()
        ctx.recipe = Recipe("Pancakes", ["flour", "milk", "egg"])
        ctx.box.add(ctx.recipe)

    @suite.after_each
    def clear_box(ctx):
        ctx.box.clear()

    @suite.unit("sets up a new RecipeBox and Recipe before each unit")
    def _(ctx):
        assert ctx.recipe in ctx.box

    @suite.unit("can add a new recipe in a unit")
    def _(ctx):
        omelette = Recipe("Omelette", ["egg", "cheese"])
        ctx.box.add(omelette)
        assert omelette in ctx.box
        assert ctx.box.size() == 2

    @suite.unit("removes a recipe in a unit")
    def _(ctx):
        ctx.box.remove(ctx.recipe)
        assert ctx.recipe not in ctx.box
        assert ctx.box.find("Pancakes") is None

    @suite.unit("does not persist changes between units")
    def _(ctx):
        assert ctx.box.size() == 1

    @suite.unit("can modify the recipe ingredients")
    def _(ctx):
        ctx.recipe.add_ingredient("syrup")
        assert "syrup" in ctx.recipe.ingredients

    @suite.unit("starts every unit with a box cleaned up by the previous teardown")
    def _(ctx):
        assert ctx.box.size() == 1
        assert ctx.recipe.ingredients == ["flour", "milk", "egg"]

    with suite.group("with before_all and after_all") as shared:

        @shared.before_all
        def shared_box(ctx):
            ctx.shared_box = RecipeBox()
            ctx.shared_recipe = Recipe("Toast", ["bread", "butter"])
            ctx.shared_box.add(ctx.shared_recipe)

        @shared.after_all
        def clear_shared_box(ctx):
            ctx.shared_box.clear()

        @shared.unit("shares state across units in before_all")
        def _(ctx):
            assert ctx.shared_recipe in ctx.shared_box

        @shared.unit("modifies shared state (not recommended)")
        def _(ctx):
            ctx.shared_recipe.add_ingredient("jam")
            assert "jam" in ctx.shared_recipe.ingredients

        @shared.unit("sees the previous unit's change to shared state")
        def _(ctx):
            assert ctx.shared_recipe.ingredients == ["bread", "butter", "jam"]

    @suite.unit("shows that state from before_each is not shared")
    def _(ctx):
        ctx.box.add(Recipe("Waffles", ["flour", "egg"]))
        assert ctx.box.find("Waffles") is not None

    suite.skip(
        "shows that state from before_all is shared (pitfall)",
        reason="Student exercise: try modifying the shared box in several units and observe the result.",
    )

    @suite.unit("uses after_each for cleanup")
    def _(ctx):
        assert ctx.recipe in ctx.box

    suite.skip(
        "uses after_all for cleanup (pending)",
        reason="Student exercise: add an after_all hook to clear a shared resource.",
    )

    return suite
