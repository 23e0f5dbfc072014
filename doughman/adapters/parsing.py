"""
Raw recipe documents → frozen records.

Recipe data arrives as plain dicts (JSON files, ORM rows, fixtures). Keys
follow the camelCase shape recipes have always been exchanged in
(``ingredientId``, ``preFerments``, ``doughWeight``...); snake_case
aliases are accepted too.

Parsing is lenient about content and strict about shape: quantities are
kept as given (the explosion drops bad ones), but a collection that is
not a list is rejected so a broken store never yields partial data.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from doughman.protocols.store import (
    BreadTypeData,
    DoughRecipeData,
    FillingRecipeData,
    FillingUsage,
    IngredientUsage,
    RecipeReference,
    RecipeSnapshot,
)

logger = logging.getLogger(__name__)

_MISSING = object()


def _pick(raw: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = raw.get(key, _MISSING)
        if value is not _MISSING:
            return value
    return default


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _items(raw: dict, *keys: str) -> list[dict]:
    value = _pick(raw, *keys)
    if not value:
        return []
    if not isinstance(value, (list, tuple)):
        logger.debug("Ignoring %s: expected a list, got %s.", keys[0], type(value).__name__)
        return []
    return [item for item in value if isinstance(item, dict)]


def parse_ingredient_usages(raw: dict, *keys: str) -> tuple[IngredientUsage, ...]:
    return tuple(
        IngredientUsage(
            ingredient_id=_text(_pick(item, "ingredientId", "ingredient_id")),
            quantity=item.get("quantity"),
            unit=_text(item.get("unit")),
        )
        for item in _items(raw, *keys)
    )


def parse_dough_recipe(raw: dict) -> DoughRecipeData:
    return DoughRecipeData(
        id=_text(_pick(raw, "id", "code")),
        name=_text(raw.get("name")),
        yield_=_pick(raw, "yield", "yield_quantity"),
        ingredients=parse_ingredient_usages(raw, "ingredients"),
        pre_ferments=tuple(
            RecipeReference(id=_text(item.get("id")), quantity=item.get("quantity"))
            for item in _items(raw, "preFerments", "pre_ferments")
        ),
        unit=_text(raw.get("unit")),
        description=_text(raw.get("description")),
    )


def parse_filling_recipe(raw: dict) -> FillingRecipeData:
    return FillingRecipeData(
        id=_text(_pick(raw, "id", "code")),
        name=_text(raw.get("name")),
        yield_=_pick(raw, "yield", "yield_quantity"),
        ingredients=parse_ingredient_usages(raw, "ingredients"),
        sub_fillings=tuple(
            RecipeReference(
                id=_text(_pick(item, "recipeId", "subFillingId", "id")),
                quantity=item.get("quantity"),
            )
            for item in _items(raw, "subFillings", "sub_fillings")
        ),
        unit=_text(raw.get("unit")),
        description=_text(raw.get("description")),
    )


def parse_bread_type(raw: dict) -> BreadTypeData:
    return BreadTypeData(
        id=_text(_pick(raw, "id", "code")),
        name=_text(raw.get("name")),
        dough_id=_text(_pick(raw, "doughId", "dough_id", "dough_code")) or None,
        dough_weight=_pick(raw, "doughWeight", "dough_weight"),
        fillings=tuple(
            FillingUsage(
                filling_id=_text(_pick(item, "fillingId", "filling_id")),
                quantity=item.get("quantity"),
                unit=_text(item.get("unit")),
            )
            for item in _items(raw, "fillings")
        ),
        decorations=parse_ingredient_usages(raw, "decorations"),
        description=_text(raw.get("description")),
    )


def _collection(name: str, value: Any) -> Iterable[dict]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name}: expected a list of records, got {type(value).__name__}")
    for i, raw in enumerate(value):
        if not isinstance(raw, dict):
            raise ValueError(f"{name}[{i}]: expected an object, got {type(raw).__name__}")
        yield raw


def parse_snapshot(bread_types: Any, dough_recipes: Any, filling_recipes: Any) -> RecipeSnapshot:
    """
    Build a RecipeSnapshot from three lists of raw records.

    Raises:
        ValueError: if a collection is not a list of objects
    """
    return RecipeSnapshot(
        bread_types=tuple(parse_bread_type(raw) for raw in _collection("breadTypes", bread_types)),
        dough_recipes=tuple(
            parse_dough_recipe(raw) for raw in _collection("doughRecipes", dough_recipes)
        ),
        filling_recipes=tuple(
            parse_filling_recipe(raw) for raw in _collection("fillingRecipes", filling_recipes)
        ),
    )
