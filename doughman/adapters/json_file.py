"""
JSON File Recipe Store.

Reads the three recipe collections from one JSON document:

    {
        "breadTypes":     [{"id": "...", "doughId": "...", "doughWeight": 80, ...}],
        "doughRecipes":   [{"id": "...", "yield": 1000, "ingredients": [...], ...}],
        "fillingRecipes": [{"id": "...", "yield": 500, "subFillings": [...], ...}]
    }

Configuration:
    DOUGHMAN = {
        "RECIPE_STORE": "doughman.adapters.JsonRecipeStore",
        "DATA_PATH": BASE_DIR / "data" / "recipes.json",
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from doughman.adapters.parsing import parse_snapshot
from doughman.conf import get_setting
from doughman.protocols.store import RecipeSnapshot

logger = logging.getLogger(__name__)

COLLECTIONS = ("breadTypes", "doughRecipes", "fillingRecipes")


class JsonRecipeStore:
    """RecipeStore reading a JSON data file. Every collection is required."""

    def __init__(self, path=None):
        self._path = path

    @property
    def path(self) -> Path:
        path = self._path or get_setting("DATA_PATH")
        if not path:
            raise ValueError("No recipe data file configured (DOUGHMAN['DATA_PATH']).")
        return Path(path)

    def load(self) -> RecipeSnapshot:
        path = self.path
        with path.open(encoding="utf-8") as f:
            document = json.load(f)

        if not isinstance(document, dict):
            raise ValueError(f"{path}: expected a JSON object at top level")

        missing = [name for name in COLLECTIONS if name not in document]
        if missing:
            raise ValueError(f"{path}: missing collections {', '.join(missing)}")

        logger.debug("Read recipe data file %s.", path)
        return parse_snapshot(*(document[name] for name in COLLECTIONS))
