"""
Shared fixtures for Doughman tests.

Recipe data uses the camelCase document shape accepted by every store.
"""

import pytest

from doughman.adapters import StaticRecipeStore
from doughman.conf import reset_recipe_store
from doughman.services.catalog import RecipeCatalog, reset_catalog


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Each test starts with a fresh catalog and store."""
    reset_catalog()
    reset_recipe_store()
    yield
    reset_catalog()
    reset_recipe_store()


@pytest.fixture
def dough_recipes():
    return [
        {
            "id": "D1",
            "name": "Baguette Dough",
            "yield": 1000,
            "ingredients": [
                {"ingredientId": "flour", "quantity": 500, "unit": "g"},
                {"ingredientId": "water", "quantity": 300, "unit": "g"},
            ],
            "preFerments": [{"id": "D0", "quantity": 200, "unit": "g"}],
        },
        {
            "id": "D0",
            "name": "Poolish",
            "yield": 100,
            "ingredients": [
                {"ingredientId": "flour", "quantity": 60, "unit": "g"},
                {"ingredientId": "water", "quantity": 40, "unit": "g"},
            ],
        },
        {
            "id": "country",
            "name": "Country Loaf Dough",
            "yield": 1000,
            "ingredients": [
                {"ingredientId": "flour", "quantity": 600, "unit": "g"},
                {"ingredientId": "water", "quantity": 300, "unit": "g"},
                {"ingredientId": "salt", "quantity": 20, "unit": "g"},
            ],
            "preFerments": [{"id": "levain", "quantity": 80, "unit": "g"}],
        },
        {
            "id": "levain",
            "name": "Levain",
            "yield": 200,
            "ingredients": [
                {"ingredientId": "flour", "quantity": 100, "unit": "g"},
                {"ingredientId": "water", "quantity": 80, "unit": "g"},
            ],
            "preFerments": [{"id": "starter", "quantity": 20, "unit": "g"}],
        },
        {
            "id": "starter",
            "name": "Starter",
            "yield": 50,
            "ingredients": [
                {"ingredientId": "flour", "quantity": 25, "unit": "g"},
                {"ingredientId": "water", "quantity": 25, "unit": "g"},
            ],
        },
        {
            "id": "no-yield",
            "name": "Dough Without Yield",
            "yield": 0,
            "ingredients": [{"ingredientId": "flour", "quantity": 10, "unit": "g"}],
        },
        {
            "id": "null-yield",
            "name": "Dough With Null Yield",
            "yield": None,
            "ingredients": [{"ingredientId": "flour", "quantity": 10, "unit": "g"}],
        },
        {
            "id": "absent-yield",
            "name": "Dough With Absent Yield",
            "ingredients": [{"ingredientId": "flour", "quantity": 10, "unit": "g"}],
        },
        {
            "id": "broken-refs",
            "name": "Dough With Broken References",
            "yield": 500,
            "ingredients": [{"ingredientId": "flour", "quantity": 100, "unit": "g"}],
            "preFerments": [
                {"id": "ghost", "quantity": 50, "unit": "g"},
                {"id": "no-yield", "quantity": 50, "unit": "g"},
                {"id": "null-yield", "quantity": 50, "unit": "g"},
                {"id": "D0", "quantity": 50, "unit": "g"},
            ],
        },
        {
            "id": "messy",
            "name": "Dough With Malformed Lines",
            "yield": 100,
            "ingredients": [
                {"ingredientId": "flour", "quantity": "abc", "unit": "g"},
                {"ingredientId": "", "quantity": 10, "unit": "g"},
                {"ingredientId": "salt", "quantity": -1, "unit": "g"},
                {"ingredientId": "sugar", "quantity": 0, "unit": "g"},
                {"ingredientId": "water", "quantity": None, "unit": "g"},
                {"ingredientId": "milk", "quantity": True, "unit": "g"},
                {"ingredientId": "yeast", "quantity": 2, "unit": "g"},
            ],
        },
        {
            "id": "loop-a",
            "name": "Cyclic A",
            "yield": 100,
            "ingredients": [{"ingredientId": "flour", "quantity": 10, "unit": "g"}],
            "preFerments": [{"id": "loop-b", "quantity": 10, "unit": "g"}],
        },
        {
            "id": "loop-b",
            "name": "Cyclic B",
            "yield": 100,
            "ingredients": [{"ingredientId": "water", "quantity": 10, "unit": "g"}],
            "preFerments": [{"id": "loop-a", "quantity": 10, "unit": "g"}],
        },
    ]


@pytest.fixture
def filling_recipes():
    return [
        {
            "id": "custard",
            "name": "Custard",
            "yield": 1000,
            "ingredients": [
                {"ingredientId": "milk", "quantity": 600, "unit": "g"},
                {"ingredientId": "sugar", "quantity": 200, "unit": "g"},
                {"ingredientId": "egg", "quantity": 200, "unit": "g"},
            ],
        },
        {
            "id": "cream",
            "name": "Diplomat Cream",
            "yield": 500,
            "ingredients": [{"ingredientId": "cream", "quantity": 300, "unit": "g"}],
            "subFillings": [{"recipeId": "custard", "quantity": 200, "unit": "g"}],
        },
        {
            "id": "orphan",
            "name": "Filling With Missing Sub-filling",
            "yield": 100,
            "ingredients": [{"ingredientId": "butter", "quantity": 50, "unit": "g"}],
            "subFillings": [
                {"recipeId": "nope", "quantity": 10, "unit": "g"},
                {"recipeId": "zero-yield", "quantity": 10, "unit": "g"},
                {"recipeId": "custard", "quantity": 50, "unit": "g"},
            ],
        },
        {
            "id": "zero-yield",
            "name": "Filling Without Yield",
            "yield": 0,
            "ingredients": [{"ingredientId": "butter", "quantity": 50, "unit": "g"}],
        },
    ]


@pytest.fixture
def bread_types():
    return [
        {
            "id": "croissant",
            "name": "Croissant",
            "doughId": "D1",
            "doughWeight": 80,
            "decorations": [
                {"ingredientId": "flour", "quantity": 2, "unit": "g"},
                {"ingredientId": "sesame", "quantity": 3, "unit": "g"},
            ],
        },
        {
            "id": "cream-bun",
            "name": "Cream Bun",
            "doughId": "D0",
            "doughWeight": 50,
            "fillings": [{"fillingId": "cream", "quantity": 25, "unit": "g"}],
            "decorations": [{"ingredientId": "sugar", "quantity": 5, "unit": "g"}],
        },
        {
            "id": "broken-bread",
            "name": "Broken Bread",
            "doughId": "ghost",
            "doughWeight": 100,
            "fillings": [
                {"fillingId": "nope", "quantity": 10, "unit": "g"},
                {"fillingId": "custard", "quantity": 0, "unit": "g"},
                {"fillingId": "", "quantity": 10, "unit": "g"},
                {"fillingId": "custard", "quantity": 100, "unit": "g"},
            ],
            "decorations": [
                {"ingredientId": "", "quantity": 3, "unit": "g"},
                {"ingredientId": "salt", "quantity": "1", "unit": "g"},
                {"ingredientId": "salt", "quantity": 1, "unit": "g"},
            ],
        },
        {
            "id": "seed-roll",
            "name": "Seed Roll",
            "doughId": "D1",
            "doughWeight": None,
            "decorations": [{"ingredientId": "seeds", "quantity": 1, "unit": "g"}],
        },
    ]


@pytest.fixture
def store(bread_types, dough_recipes, filling_recipes):
    return StaticRecipeStore(
        bread_types=bread_types,
        dough_recipes=dough_recipes,
        filling_recipes=filling_recipes,
    )


@pytest.fixture
def catalog(store):
    return RecipeCatalog(store=store)
