"""
Doughman Protocols.

Defines interfaces for external integrations.
"""

from doughman.protocols.store import (
    BreadTypeData,
    DoughRecipeData,
    FillingRecipeData,
    FillingUsage,
    IngredientUsage,
    RecipeReference,
    RecipeSnapshot,
    RecipeStore,
)

__all__ = [
    # Store Protocol
    "RecipeStore",
    # Record types
    "IngredientUsage",
    "RecipeReference",
    "FillingUsage",
    "DoughRecipeData",
    "FillingRecipeData",
    "BreadTypeData",
    "RecipeSnapshot",
]
