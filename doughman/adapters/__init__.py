"""
Doughman Adapters.

Implementations of the RecipeStore protocol. The ORM adapter imports the
models lazily, so the file and in-memory stores work without a database.
"""

from doughman.adapters.database import ModelRecipeStore
from doughman.adapters.json_file import JsonRecipeStore
from doughman.adapters.memory import StaticRecipeStore

__all__ = [
    "ModelRecipeStore",
    "JsonRecipeStore",
    "StaticRecipeStore",
]
