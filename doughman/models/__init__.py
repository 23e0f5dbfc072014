"""
Doughman Models.

Recipe data the material explosion works on:
- BreadType: finished product (dough weight + fillings + decorations)
- DoughRecipe: dough BOM, may nest pre-ferment doughs
- FillingRecipe: filling BOM, may nest sub-fillings
"""

from doughman.models.bread_type import BreadType
from doughman.models.recipe import DoughRecipe, FillingRecipe

__all__ = [
    "BreadType",
    "DoughRecipe",
    "FillingRecipe",
]
