"""
Database Recipe Store.

Implements RecipeStore over the Doughman models (BreadType, DoughRecipe,
FillingRecipe). Only active rows are loaded.

Configuration (default):
    DOUGHMAN = {
        "RECIPE_STORE": "doughman.adapters.ModelRecipeStore",
    }
"""

from __future__ import annotations

import logging

from doughman.adapters.parsing import parse_snapshot
from doughman.protocols.store import RecipeSnapshot

logger = logging.getLogger(__name__)


class ModelRecipeStore:
    """
    RecipeStore backed by the Django ORM.

    Rows are read in the models' default ordering, which is also the
    precedence order when two records share an identifier.
    """

    def load(self) -> RecipeSnapshot:
        from doughman.models import BreadType, DoughRecipe, FillingRecipe

        dough_recipes = [
            {
                "id": row.code,
                "name": row.name,
                "description": row.description,
                "yield": row.yield_quantity,
                "unit": row.unit,
                "ingredients": row.ingredients,
                "preFerments": row.pre_ferments,
            }
            for row in DoughRecipe.objects.filter(is_active=True)
        ]
        filling_recipes = [
            {
                "id": row.code,
                "name": row.name,
                "description": row.description,
                "yield": row.yield_quantity,
                "unit": row.unit,
                "ingredients": row.ingredients,
                "subFillings": row.sub_fillings,
            }
            for row in FillingRecipe.objects.filter(is_active=True)
        ]
        bread_types = [
            {
                "id": row.code,
                "name": row.name,
                "description": row.description,
                "doughId": row.dough_code,
                "doughWeight": row.dough_weight,
                "fillings": row.fillings,
                "decorations": row.decorations,
            }
            for row in BreadType.objects.filter(is_active=True)
        ]

        return parse_snapshot(bread_types, dough_recipes, filling_recipes)
