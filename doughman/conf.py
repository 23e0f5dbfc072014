"""
Doughman Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    DOUGHMAN = {
        "RECIPE_STORE": "doughman.adapters.JsonRecipeStore",
        "DATA_PATH": BASE_DIR / "data" / "recipes.json",
    }

    # Option 2: Flat
    DOUGHMAN_RECIPE_STORE = "doughman.adapters.JsonRecipeStore"
    DOUGHMAN_DATA_PATH = BASE_DIR / "data" / "recipes.json"

All settings have sensible defaults; zero configuration required.
"""

import threading

from django.conf import settings

from doughman.exceptions import INVALID_RECIPE_STORE, DoughError


# ── Defaults ──

DEFAULTS = {
    "RECIPE_STORE": "doughman.adapters.ModelRecipeStore",
    "DATA_PATH": None,
    "DEFAULT_UNIT": "g",
    "MAX_DEPTH": None,
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a doughman setting.

    Looks up in order:
    1. DOUGHMAN dict (e.g. DOUGHMAN = {"RECIPE_STORE": "..."})
    2. Flat setting (e.g. DOUGHMAN_RECIPE_STORE = "...")
    3. DEFAULTS
    """
    doughman_dict = getattr(settings, "DOUGHMAN", {})
    if name in doughman_dict:
        return doughman_dict[name]

    flat_value = getattr(settings, f"DOUGHMAN_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def get_default_unit() -> str:
    """Unit recorded for ingredient usages that do not declare one."""
    return get_setting("DEFAULT_UNIT") or DEFAULTS["DEFAULT_UNIT"]


def get_max_depth() -> int | None:
    """Optional nesting limit for recipe expansion (None = unbounded)."""
    value = get_setting("MAX_DEPTH")
    if value is None:
        return None
    return int(value)


_recipe_store_lock = threading.Lock()
_recipe_store_instance = None


def get_recipe_store():
    """
    Return the configured recipe store instance.

    The recipe store supplies the bread types, dough recipes and filling
    recipes that the BOM explosion works on.
    """
    global _recipe_store_instance

    if _recipe_store_instance is None:
        with _recipe_store_lock:
            if _recipe_store_instance is None:  # double-checked
                from django.utils.module_loading import import_string

                path = get_setting("RECIPE_STORE")
                try:
                    store_class = import_string(path)
                except ImportError as e:
                    raise DoughError(INVALID_RECIPE_STORE, path=path, error=str(e)) from e

                store = store_class()
                if not callable(getattr(store, "load", None)):
                    raise DoughError(INVALID_RECIPE_STORE, path=path, error="missing load()")
                _recipe_store_instance = store

    return _recipe_store_instance


def reset_recipe_store() -> None:
    """Reset singleton (for tests)."""
    global _recipe_store_instance
    _recipe_store_instance = None
