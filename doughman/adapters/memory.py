"""
In-memory Recipe Store -- serves recipe lists held in Python.

Use this adapter for tests, scripts, or embedding Doughman where recipe
data already lives in memory (fixtures, another service's payload).
"""

from __future__ import annotations

from doughman.adapters.parsing import parse_snapshot
from doughman.protocols.store import RecipeSnapshot


class StaticRecipeStore:
    """
    RecipeStore over raw record lists.

    Accepts the same camelCase dicts as the JSON file store. The lists are
    parsed on every load(), so the caller may swap them between reloads.
    """

    def __init__(self, bread_types=None, dough_recipes=None, filling_recipes=None):
        self.bread_types = list(bread_types or [])
        self.dough_recipes = list(dough_recipes or [])
        self.filling_recipes = list(filling_recipes or [])

    def load(self) -> RecipeSnapshot:
        return parse_snapshot(self.bread_types, self.dough_recipes, self.filling_recipes)
