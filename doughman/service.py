"""
Doughman Service - Thin wrapper over the material explosion.

Usage:
    from doughman import bom, DoughError

    # One unit of a product (by code or by name)
    materials = bom.for_product("croissant")

    # A weight of dough or filling
    materials = bom.for_dough("baguette-dough", 50000)
    materials = bom.for_filling("custard", 3000)

    # A whole production batch
    materials = bom.for_batch({"croissant": 120, "Pain au chocolat": 80})

    # Recipes edited outside the ORM? Reload explicitly.
    bom.reload()
"""

import logging
from typing import Any, Mapping

from doughman.protocols.store import RecipeSnapshot
from doughman.results import MaterialTotal
from doughman.services.catalog import get_catalog
from doughman.services.materials import (
    materials_for_batch,
    materials_for_dough,
    materials_for_filling,
    materials_for_product,
)

logger = logging.getLogger(__name__)


class Bom:
    """
    Main API for Doughman (thin wrapper).

    Every method reads the process-wide catalog; pass ``catalog=`` to the
    functions in doughman.services.materials to use another one.
    """

    @classmethod
    def for_product(cls, identifier: str) -> dict[str, MaterialTotal]:
        """Raw materials for one unit of a bread type."""
        return materials_for_product(identifier)

    @classmethod
    def for_dough(cls, identifier: str, required_weight: Any) -> dict[str, MaterialTotal]:
        """Raw materials for a weight of dough."""
        return materials_for_dough(identifier, required_weight)

    @classmethod
    def for_filling(cls, identifier: str, required_weight: Any) -> dict[str, MaterialTotal]:
        """Raw materials for a weight of filling."""
        return materials_for_filling(identifier, required_weight)

    @classmethod
    def for_batch(cls, quantities: Mapping[str, Any]) -> dict[str, MaterialTotal]:
        """Raw materials for ``{product: units}``."""
        return materials_for_batch(quantities)

    @classmethod
    def reload(cls) -> RecipeSnapshot:
        """
        Reload recipe data from the store.

        Raises:
            DoughError: RECIPE_STORE_UNAVAILABLE if the store fails
        """
        snapshot = get_catalog().reload()
        logger.info("Recipe catalog reloaded: %s", snapshot.counts)
        return snapshot
