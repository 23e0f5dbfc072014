"""
Raw-material explosion (multilevel BOM) for bakery products.

Given a bread type, a weight of dough, or a weight of filling, computes the
total quantity of every raw ingredient consumed. Nested recipes
(pre-ferments inside doughs, sub-fillings inside fillings) are expanded
recursively, each one scaled by its yield:

    child_scale = (reference.quantity / child.yield) * parent_scale

Anomalies in the data never fail the calculation. A missing recipe, an
invalid yield or a malformed line item only removes its own contribution;
everything else resolvable is still summed.

Usage:
    from doughman.services import materials_for_dough

    materials = materials_for_dough("D1", 2000)
    for ingredient_id, total in materials.items():
        print(f"{total.name}: {total.quantity} {total.unit}")
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any, Mapping

from doughman.conf import get_default_unit, get_max_depth
from doughman.protocols.store import RecipeSnapshot
from doughman.results import MaterialTotal
from doughman.services.catalog import RecipeCatalog, get_catalog

logger = logging.getLogger("doughman")


def _as_number(value: Any) -> float | None:
    """Finite real number as float, else None (bools and strings are not numbers)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def _positive(value: Any) -> float | None:
    number = _as_number(value)
    if number is None or number <= 0:
        return None
    return number


def _snapshot(catalog: RecipeCatalog | None) -> RecipeSnapshot:
    return (catalog or get_catalog()).snapshot()


# ══════════════════════════════════════════════════════════════
# AGGREGATION
# ══════════════════════════════════════════════════════════════


def add_material(
    materials: dict[str, MaterialTotal],
    ingredient_id: str,
    quantity: Any,
    unit: str | None = None,
) -> dict[str, MaterialTotal]:
    """
    Merge one ingredient usage into the aggregation map.

    Empty ids and quantities that are not finite positive numbers are
    dropped silently. Units are carried as declared and never reconciled:
    all recipes are assumed to share one base unit.
    """
    amount = _positive(quantity)
    if not ingredient_id or not isinstance(ingredient_id, str) or amount is None:
        logger.debug("Skipping material %r with quantity %r.", ingredient_id, quantity)
        return materials

    total = materials.get(ingredient_id)
    if total is not None:
        total.quantity += amount
    else:
        materials[ingredient_id] = MaterialTotal(
            name=ingredient_id,
            quantity=amount,
            unit=unit or get_default_unit(),
        )
    return materials


def _add_usages(materials, usages, scale_factor: float) -> None:
    for usage in usages:
        quantity = _as_number(usage.quantity)
        if quantity is None:
            logger.debug("Skipping %r: quantity %r is not a number.", usage.ingredient_id, usage.quantity)
            continue
        add_material(materials, usage.ingredient_id, quantity * scale_factor, usage.unit)


def _depth_exceeded(kind: str, recipe_id: str, depth: int, max_depth: int | None) -> bool:
    if max_depth is None or depth <= max_depth:
        return False
    logger.warning(
        "%s nesting limit (%d) reached at recipe %s, possible cycle.",
        kind,
        max_depth,
        recipe_id,
    )
    return True


# ══════════════════════════════════════════════════════════════
# RECURSION
# ══════════════════════════════════════════════════════════════


def collect_dough(
    snapshot: RecipeSnapshot,
    dough_id: str,
    scale_factor: float,
    materials: dict[str, MaterialTotal],
    *,
    depth: int = 0,
    max_depth: int | None = None,
) -> dict[str, MaterialTotal]:
    """
    Add the materials of one dough recipe, scaled, including its pre-ferments.

    Args:
        snapshot:     Recipe data to resolve ids against.
        dough_id:     Dough recipe id.
        scale_factor: Batches of this recipe required (weight / yield,
                      times every factor accumulated by the parents).
        materials:    Aggregation map, mutated in place.
        depth:        Current nesting level.
        max_depth:    Optional nesting limit; None expands without bound.
    """
    if _depth_exceeded("Pre-ferment", dough_id, depth, max_depth):
        return materials

    recipe = snapshot.find_dough_recipe(dough_id)
    if recipe is None:
        logger.debug("Dough recipe %r not found. Skipping.", dough_id)
        return materials

    _add_usages(materials, recipe.ingredients, scale_factor)

    for reference in recipe.pre_ferments:
        pre_ferment = snapshot.find_dough_recipe(reference.id)
        pre_ferment_yield = _positive(pre_ferment.yield_) if pre_ferment else None
        if pre_ferment_yield is None:
            logger.debug(
                "Pre-ferment %r in %r not found or has invalid yield. Skipping.",
                reference.id,
                recipe.id,
            )
            continue

        reference_quantity = _as_number(reference.quantity)
        if reference_quantity is None:
            continue

        collect_dough(
            snapshot,
            reference.id,
            (reference_quantity / pre_ferment_yield) * scale_factor,
            materials,
            depth=depth + 1,
            max_depth=max_depth,
        )

    return materials


def collect_filling(
    snapshot: RecipeSnapshot,
    filling_id: str,
    scale_factor: float,
    materials: dict[str, MaterialTotal],
    *,
    depth: int = 0,
    max_depth: int | None = None,
) -> dict[str, MaterialTotal]:
    """Add the materials of one filling recipe, scaled, including its sub-fillings."""
    if _depth_exceeded("Sub-filling", filling_id, depth, max_depth):
        return materials

    recipe = snapshot.find_filling_recipe(filling_id)
    if recipe is None:
        logger.debug("Filling recipe %r not found. Skipping.", filling_id)
        return materials

    _add_usages(materials, recipe.ingredients, scale_factor)

    for reference in recipe.sub_fillings:
        sub_filling = snapshot.find_filling_recipe(reference.id)
        sub_filling_yield = _positive(sub_filling.yield_) if sub_filling else None
        if sub_filling_yield is None:
            logger.debug(
                "Sub-filling %r in %r not found or has invalid yield. Skipping.",
                reference.id,
                recipe.id,
            )
            continue

        reference_quantity = _as_number(reference.quantity)
        if reference_quantity is None:
            continue

        collect_filling(
            snapshot,
            reference.id,
            (reference_quantity / sub_filling_yield) * scale_factor,
            materials,
            depth=depth + 1,
            max_depth=max_depth,
        )

    return materials


# ══════════════════════════════════════════════════════════════
# ENTRY POINTS
# ══════════════════════════════════════════════════════════════


def _collect_product(snapshot: RecipeSnapshot, bread_type, materials, max_depth) -> None:
    dough_weight = _positive(bread_type.dough_weight)
    if bread_type.dough_id and dough_weight is not None:
        dough = snapshot.find_dough_recipe(bread_type.dough_id)
        dough_yield = _positive(dough.yield_) if dough else None
        if dough_yield is not None:
            collect_dough(
                snapshot,
                dough.id,
                dough_weight / dough_yield,
                materials,
                max_depth=max_depth,
            )
        else:
            logger.debug(
                "Dough %r for %r not found or has invalid yield.",
                bread_type.dough_id,
                bread_type.name,
            )

    for usage in bread_type.fillings:
        quantity = _positive(usage.quantity)
        if not usage.filling_id or quantity is None:
            continue
        filling = snapshot.find_filling_recipe(usage.filling_id)
        filling_yield = _positive(filling.yield_) if filling else None
        if filling_yield is None:
            logger.debug(
                "Filling %r for %r not found or has invalid yield.",
                usage.filling_id,
                bread_type.name,
            )
            continue
        collect_filling(
            snapshot,
            filling.id,
            quantity / filling_yield,
            materials,
            max_depth=max_depth,
        )

    # Decorations are raw ingredients used as-is, per unit of product.
    for usage in bread_type.decorations:
        add_material(materials, usage.ingredient_id, usage.quantity, usage.unit)


def materials_for_product(
    identifier: str,
    *,
    catalog: RecipeCatalog | None = None,
) -> dict[str, MaterialTotal]:
    """
    Raw materials for one unit of a bread type.

    The bread type is resolved by id or by name. Unknown products return
    an empty map.

    Raises:
        DoughError: RECIPE_STORE_UNAVAILABLE if recipe data fails to load.
    """
    snapshot = _snapshot(catalog)
    materials: dict[str, MaterialTotal] = {}

    bread_type = snapshot.find_bread_type(identifier)
    if bread_type is None:
        logger.debug("Bread type %r not found.", identifier)
        return materials

    _collect_product(snapshot, bread_type, materials, get_max_depth())
    return materials


def materials_for_dough(
    identifier: str,
    required_weight: Any,
    *,
    catalog: RecipeCatalog | None = None,
) -> dict[str, MaterialTotal]:
    """
    Raw materials for ``required_weight`` of a dough (e.g. 50000 g of baguette dough).

    Returns an empty map when the dough is unknown, its yield is invalid,
    or the weight is not a positive number.
    """
    snapshot = _snapshot(catalog)
    materials: dict[str, MaterialTotal] = {}

    recipe = snapshot.find_dough_recipe(identifier)
    weight = _positive(required_weight)
    recipe_yield = _positive(recipe.yield_) if recipe else None
    if recipe is None or weight is None or recipe_yield is None:
        logger.debug("Cannot expand dough %r for weight %r.", identifier, required_weight)
        return materials

    return collect_dough(
        snapshot,
        recipe.id,
        weight / recipe_yield,
        materials,
        max_depth=get_max_depth(),
    )


def materials_for_filling(
    identifier: str,
    required_weight: Any,
    *,
    catalog: RecipeCatalog | None = None,
) -> dict[str, MaterialTotal]:
    """Raw materials for ``required_weight`` of a filling. Same rules as materials_for_dough()."""
    snapshot = _snapshot(catalog)
    materials: dict[str, MaterialTotal] = {}

    recipe = snapshot.find_filling_recipe(identifier)
    weight = _positive(required_weight)
    recipe_yield = _positive(recipe.yield_) if recipe else None
    if recipe is None or weight is None or recipe_yield is None:
        logger.debug("Cannot expand filling %r for weight %r.", identifier, required_weight)
        return materials

    return collect_filling(
        snapshot,
        recipe.id,
        weight / recipe_yield,
        materials,
        max_depth=get_max_depth(),
    )


def materials_for_batch(
    quantities: Mapping[str, Any],
    *,
    catalog: RecipeCatalog | None = None,
) -> dict[str, MaterialTotal]:
    """
    Raw materials for a production batch of several bread types.

    Args:
        quantities: ``{bread type id or name: units to produce}``.

    Each product is exploded per unit and every material is added times
    the unit count. Counts that are not positive numbers are skipped.
    """
    snapshot = _snapshot(catalog)
    max_depth = get_max_depth()
    materials: dict[str, MaterialTotal] = {}

    for identifier, count in quantities.items():
        units = _positive(count)
        bread_type = snapshot.find_bread_type(identifier)
        if units is None or bread_type is None:
            logger.debug("Skipping batch line %r x %r.", identifier, count)
            continue

        per_unit: dict[str, MaterialTotal] = {}
        _collect_product(snapshot, bread_type, per_unit, max_depth)
        for ingredient_id, total in per_unit.items():
            add_material(materials, ingredient_id, total.quantity * units, total.unit)

    logger.info(
        "Exploded batch of %d products into %d materials.",
        len(quantities),
        len(materials),
        extra={"products": list(quantities), "materials": len(materials)},
    )
    return materials
