"""
Recipe catalog: load-once cache of the recipe store.

The first caller loads the three recipe collections from the configured
store; concurrent callers arriving meanwhile wait for that same load.
Afterwards the snapshot is immutable and read without locking.

A failed load raises DoughError for the triggering call and leaves an
empty snapshot behind, so later calls find nothing instead of failing
again. reload() retries explicitly.
"""

from __future__ import annotations

import logging
import threading

from doughman.conf import get_recipe_store
from doughman.exceptions import RECIPE_STORE_UNAVAILABLE, DoughError
from doughman.protocols.store import RecipeSnapshot

logger = logging.getLogger(__name__)


class RecipeCatalog:
    """Process-wide holder of the loaded RecipeSnapshot."""

    def __init__(self, store=None):
        self._store = store
        self._lock = threading.Lock()
        self._snapshot = RecipeSnapshot.empty()
        self._loaded = False
        self.last_error: DoughError | None = None

    @property
    def store(self):
        if self._store is None:
            self._store = get_recipe_store()
        return self._store

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def failed(self) -> bool:
        """True when the last load failed and the catalog is serving empty data."""
        return self._loaded and self.last_error is not None

    def snapshot(self) -> RecipeSnapshot:
        """Return the cached snapshot, loading it on first use."""
        if not self._loaded:
            loaded = None
            with self._lock:
                if not self._loaded:  # double-checked
                    loaded = self._load()
            if loaded is not None:
                self._notify(loaded)
        return self._snapshot

    def reload(self) -> RecipeSnapshot:
        """Load the store again, replacing the cached snapshot."""
        with self._lock:
            snapshot = self._load()
        self._notify(snapshot)
        return snapshot

    def reset(self) -> None:
        """
        Mark the cached snapshot stale; the next call loads again.

        The old snapshot keeps being served to readers that already got
        past the loaded check, until the next load replaces it.
        """
        with self._lock:
            self._loaded = False
            self.last_error = None

    def _load(self) -> RecipeSnapshot:
        store = self.store
        store_name = type(store).__name__

        try:
            snapshot = store.load()
            if not isinstance(snapshot, RecipeSnapshot):
                raise TypeError(f"{store_name}.load() returned {type(snapshot).__name__}")
        except Exception as e:
            logger.exception("Failed to load recipe data from %s.", store_name)
            self._snapshot = RecipeSnapshot.empty()
            self._loaded = True
            self.last_error = DoughError(
                RECIPE_STORE_UNAVAILABLE,
                store=store_name,
                error=str(e),
            )
            raise self.last_error from e

        self._snapshot = snapshot
        self._loaded = True
        self.last_error = None

        logger.info(
            "Loaded recipe data from %s.",
            store_name,
            extra={"store": store_name, **snapshot.counts},
        )
        return snapshot

    def _notify(self, snapshot: RecipeSnapshot) -> None:
        # Sent without holding the lock: receivers may reload() or reset().
        from doughman.signals import recipes_reloaded

        recipes_reloaded.send(sender=self.__class__, catalog=self, snapshot=snapshot)


_catalog_lock = threading.Lock()
_catalog_instance: RecipeCatalog | None = None


def get_catalog() -> RecipeCatalog:
    """Return the process-wide catalog (created on first use, not loaded)."""
    global _catalog_instance

    if _catalog_instance is None:
        with _catalog_lock:
            if _catalog_instance is None:  # double-checked
                _catalog_instance = RecipeCatalog()

    return _catalog_instance


def invalidate_catalog() -> None:
    """Drop cached recipe data so the next call reads the store again."""
    if _catalog_instance is not None:
        _catalog_instance.reset()


def reset_catalog() -> None:
    """Reset singleton (for tests)."""
    global _catalog_instance
    _catalog_instance = None
