"""
Recipe Store Protocol.

Defines the interface Doughman uses to read recipe data, and the frozen
record types a store hands back.

A store returns one RecipeSnapshot holding three ordered collections:

    bread_types      →  finished products (dough + fillings + decorations)
    dough_recipes    →  doughs, possibly consuming pre-ferment doughs
    filling_recipes  →  fillings, possibly consuming sub-fillings

Quantities inside recipes are per batch (relative to the recipe yield).
Quantities on bread types are absolute, per unit of product.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


# ══════════════════════════════════════════════════════════════
# DATA TYPES
# ══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class IngredientUsage:
    """Raw ingredient line item (quantity relative to the recipe yield)."""

    ingredient_id: str
    quantity: Any
    unit: str = ""


@dataclass(frozen=True)
class RecipeReference:
    """Nested recipe consumed by a parent (pre-ferment or sub-filling)."""

    id: str
    quantity: Any


@dataclass(frozen=True)
class FillingUsage:
    """Filling weight required for one unit of a bread type."""

    filling_id: str
    quantity: Any
    unit: str = ""


@dataclass(frozen=True)
class DoughRecipeData:
    """Dough recipe record."""

    id: str
    name: str = ""
    yield_: Any = None
    ingredients: tuple[IngredientUsage, ...] = ()
    pre_ferments: tuple[RecipeReference, ...] = ()
    unit: str = ""
    description: str = ""


@dataclass(frozen=True)
class FillingRecipeData:
    """Filling recipe record."""

    id: str
    name: str = ""
    yield_: Any = None
    ingredients: tuple[IngredientUsage, ...] = ()
    sub_fillings: tuple[RecipeReference, ...] = ()
    unit: str = ""
    description: str = ""


@dataclass(frozen=True)
class BreadTypeData:
    """Finished product record."""

    id: str
    name: str = ""
    dough_id: str | None = None
    dough_weight: Any = None
    fillings: tuple[FillingUsage, ...] = ()
    decorations: tuple[IngredientUsage, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class RecipeSnapshot:
    """
    Immutable view of the three recipe collections.

    Lookup tables are built once on construction. When ids repeat, the
    first record in store order wins, as a linear scan would.
    """

    bread_types: tuple[BreadTypeData, ...] = ()
    dough_recipes: tuple[DoughRecipeData, ...] = ()
    filling_recipes: tuple[FillingRecipeData, ...] = ()

    _bread_types_by_id: dict = field(default_factory=dict, init=False, repr=False, compare=False)
    _bread_types_by_name: dict = field(default_factory=dict, init=False, repr=False, compare=False)
    _doughs_by_id: dict = field(default_factory=dict, init=False, repr=False, compare=False)
    _fillings_by_id: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "bread_types", tuple(self.bread_types))
        object.__setattr__(self, "dough_recipes", tuple(self.dough_recipes))
        object.__setattr__(self, "filling_recipes", tuple(self.filling_recipes))

        for bread_type in self.bread_types:
            self._bread_types_by_id.setdefault(bread_type.id, bread_type)
            self._bread_types_by_name.setdefault(bread_type.name, bread_type)
        for dough in self.dough_recipes:
            self._doughs_by_id.setdefault(dough.id, dough)
        for filling in self.filling_recipes:
            self._fillings_by_id.setdefault(filling.id, filling)

    @classmethod
    def empty(cls) -> RecipeSnapshot:
        return cls()

    def find_bread_type(self, identifier) -> BreadTypeData | None:
        """
        Resolve a bread type by id, falling back to its name.

        Every id is tried before any name, so when one product's name equals
        another product's id, the product with that id wins.
        """
        if not identifier:
            return None
        return self._bread_types_by_id.get(identifier) or self._bread_types_by_name.get(identifier)

    def find_dough_recipe(self, dough_id) -> DoughRecipeData | None:
        if not dough_id:
            return None
        return self._doughs_by_id.get(dough_id)

    def find_filling_recipe(self, filling_id) -> FillingRecipeData | None:
        if not filling_id:
            return None
        return self._fillings_by_id.get(filling_id)

    @property
    def counts(self) -> dict[str, int]:
        return {
            "bread_types": len(self.bread_types),
            "dough_recipes": len(self.dough_recipes),
            "filling_recipes": len(self.filling_recipes),
        }

    @property
    def is_empty(self) -> bool:
        return not (self.bread_types or self.dough_recipes or self.filling_recipes)


# ══════════════════════════════════════════════════════════════
# PROTOCOL
# ══════════════════════════════════════════════════════════════


@runtime_checkable
class RecipeStore(Protocol):
    """
    Protocol for recipe data sources.

    Implementations read the three collections in one go and raise on any
    failure. Partial data must never be returned.
    """

    def load(self) -> RecipeSnapshot:
        """
        Load every bread type, dough recipe and filling recipe.

        Returns:
            RecipeSnapshot with the three collections

        Raises:
            Any exception when the data cannot be read completely
        """
        ...
