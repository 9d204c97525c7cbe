"""
conftest.py — Shared pytest fixtures for the recipe-hooks unit tests.
"""

import sys
from pathlib import Path

import pytest

# src/ is the Python root for all packages (core, lifecycle, recipes, cli)
_SRC = Path(__file__).parent.parent.parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from lifecycle import Group, Runner  # noqa: E402
from recipes import Recipe, RecipeBox  # noqa: E402


@pytest.fixture
def pancakes():
    """The Pancakes recipe used throughout the walkthrough."""
    return Recipe("Pancakes", ["flour", "milk", "egg"])


@pytest.fixture
def omelette():
    return Recipe("Omelette", ["egg", "cheese"])


@pytest.fixture
def box(pancakes):
    """A box holding only the pancakes recipe."""
    b = RecipeBox()
    b.add(pancakes)
    return b


@pytest.fixture
def suite():
    """An empty top-level group."""
    return Group("suite")


@pytest.fixture
def runner():
    return Runner()


@pytest.fixture
def calls():
    """Ordered log of hook and body invocations, for ordering assertions."""
    return []
