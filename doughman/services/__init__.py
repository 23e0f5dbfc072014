"""
Doughman Services.

Business logic that doesn't belong in models:
- catalog: load-once cache of the configured recipe store
- materials: raw-material explosion (multilevel BOM by yield ratios)
"""

from doughman.services.catalog import (
    RecipeCatalog,
    get_catalog,
    invalidate_catalog,
    reset_catalog,
)
from doughman.services.materials import (
    add_material,
    collect_dough,
    collect_filling,
    materials_for_batch,
    materials_for_dough,
    materials_for_filling,
    materials_for_product,
)

__all__ = [
    "RecipeCatalog",
    "get_catalog",
    "invalidate_catalog",
    "reset_catalog",
    "add_material",
    "collect_dough",
    "collect_filling",
    "materials_for_product",
    "materials_for_dough",
    "materials_for_filling",
    "materials_for_batch",
]
