"""
Tests for doughman.services.catalog (load-once recipe cache).

Covers:
- Lazy load on first use, at most once under concurrency
- Load failure: raises for the triggering call, then serves empty data
- reload() / reset() lifecycle
- recipes_reloaded signal
"""

import threading
import time
from unittest.mock import MagicMock

import pytest

from doughman.adapters import StaticRecipeStore
from doughman.exceptions import DoughError
from doughman.protocols.store import RecipeSnapshot
from doughman.services.catalog import (
    RecipeCatalog,
    get_catalog,
    invalidate_catalog,
    reset_catalog,
)
from doughman.services.materials import materials_for_dough, materials_for_product
from doughman.signals import recipes_reloaded


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


class CountingStore:
    """Store that counts load() calls and can be made slow or broken."""

    def __init__(self, inner, delay=0.0):
        self.inner = inner
        self.delay = delay
        self.calls = 0
        self.error = None

    def load(self):
        self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.inner.load()


@pytest.fixture
def counting_store(store):
    return CountingStore(store)


# ═══════════════════════════════════════════════════════════════════
# Tests
# ═══════════════════════════════════════════════════════════════════


class TestLazyLoad:
    """Data is loaded on first use and cached."""

    def test_not_loaded_until_used(self, counting_store):
        catalog = RecipeCatalog(store=counting_store)

        assert not catalog.is_loaded
        assert counting_store.calls == 0

    def test_loads_once(self, counting_store):
        catalog = RecipeCatalog(store=counting_store)

        first = catalog.snapshot()
        second = catalog.snapshot()
        materials_for_dough("D1", 2000, catalog=catalog)

        assert counting_store.calls == 1
        assert first is second
        assert catalog.is_loaded
        assert not catalog.failed

    def test_concurrent_first_calls_share_one_load(self, store):
        slow_store = CountingStore(store, delay=0.05)
        catalog = RecipeCatalog(store=slow_store)
        results = []

        def worker():
            results.append(catalog.snapshot())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert slow_store.calls == 1
        assert len(results) == 8
        assert all(snapshot is results[0] for snapshot in results)

    def test_snapshot_counts(self, catalog):
        counts = catalog.snapshot().counts

        assert counts == {"bread_types": 4, "dough_recipes": 12, "filling_recipes": 4}


class TestLoadFailure:
    """A failed load surfaces once, then the engine degrades to empty results."""

    def test_triggering_call_raises(self, counting_store):
        counting_store.error = OSError("connection refused")
        catalog = RecipeCatalog(store=counting_store)

        with pytest.raises(DoughError) as exc:
            materials_for_product("croissant", catalog=catalog)

        assert exc.value.code == "RECIPE_STORE_UNAVAILABLE"
        assert exc.value.details["store"] == "CountingStore"
        assert "connection refused" in exc.value.details["error"]

    def test_later_calls_return_empty(self, counting_store):
        counting_store.error = OSError("connection refused")
        catalog = RecipeCatalog(store=counting_store)

        with pytest.raises(DoughError):
            catalog.snapshot()

        assert catalog.failed
        assert catalog.last_error.code == "RECIPE_STORE_UNAVAILABLE"
        assert catalog.snapshot().is_empty
        assert materials_for_product("croissant", catalog=catalog) == {}
        assert materials_for_dough("D1", 2000, catalog=catalog) == {}
        assert counting_store.calls == 1

    def test_reload_recovers(self, counting_store):
        counting_store.error = OSError("connection refused")
        catalog = RecipeCatalog(store=counting_store)
        with pytest.raises(DoughError):
            catalog.snapshot()

        counting_store.error = None
        catalog.reload()

        assert not catalog.failed
        assert catalog.last_error is None
        assert materials_for_dough("D1", 2000, catalog=catalog)["flour"].quantity == pytest.approx(1240)

    def test_failed_reload_drops_previous_data(self, counting_store):
        """No stale or partial data survives a failed reload."""
        catalog = RecipeCatalog(store=counting_store)
        assert not catalog.snapshot().is_empty

        counting_store.error = ValueError("malformed")
        with pytest.raises(DoughError):
            catalog.reload()

        assert catalog.snapshot().is_empty

    def test_malformed_collection_is_a_load_failure(self):
        catalog = RecipeCatalog(store=StaticRecipeStore(dough_recipes=["not-a-record"]))

        with pytest.raises(DoughError) as exc:
            catalog.snapshot()

        assert "doughRecipes[0]" in exc.value.details["error"]

    def test_store_returning_wrong_type(self):
        store = MagicMock()
        store.load.return_value = {"breadTypes": []}
        catalog = RecipeCatalog(store=store)

        with pytest.raises(DoughError) as exc:
            catalog.snapshot()

        assert exc.value.code == "RECIPE_STORE_UNAVAILABLE"


class TestLifecycle:
    """reload(), reset() and the process-wide catalog."""

    def test_reload_reads_store_again(self, store):
        catalog = RecipeCatalog(store=store)
        assert materials_for_dough("D0", 100, catalog=catalog)["flour"].quantity == 60

        store.dough_recipes = [
            {
                "id": "D0",
                "name": "Poolish",
                "yield": 100,
                "ingredients": [{"ingredientId": "flour", "quantity": 50, "unit": "g"}],
            }
        ]
        assert materials_for_dough("D0", 100, catalog=catalog)["flour"].quantity == 60

        catalog.reload()
        assert materials_for_dough("D0", 100, catalog=catalog)["flour"].quantity == 50

    def test_reset_loads_on_next_call(self, counting_store):
        catalog = RecipeCatalog(store=counting_store)
        catalog.snapshot()

        catalog.reset()

        assert not catalog.is_loaded
        catalog.snapshot()
        assert counting_store.calls == 2

    def test_reset_keeps_serving_old_snapshot_until_reload(self, catalog):
        """Readers racing with reset() never see an empty snapshot."""
        first = catalog.snapshot()

        catalog.reset()

        assert catalog._snapshot is first
        assert not catalog._snapshot.is_empty

    def test_get_catalog_is_singleton(self):
        assert get_catalog() is get_catalog()

        reset_catalog()
        assert get_catalog() is get_catalog()

    def test_invalidate_without_catalog_is_noop(self):
        invalidate_catalog()

    def test_invalidate_resets_loaded_catalog(self, settings):
        settings.DOUGHMAN = {"RECIPE_STORE": "doughman.adapters.StaticRecipeStore"}
        catalog = get_catalog()
        catalog.snapshot()

        invalidate_catalog()

        assert not catalog.is_loaded

    def test_uses_configured_store(self, settings):
        settings.DOUGHMAN = {"RECIPE_STORE": "doughman.adapters.StaticRecipeStore"}

        assert isinstance(get_catalog().store, StaticRecipeStore)
        assert get_catalog().snapshot() == RecipeSnapshot.empty()


class TestRecipesReloadedSignal:
    """recipes_reloaded is sent after every successful load."""

    def test_sent_on_load(self, catalog):
        handler = MagicMock()
        recipes_reloaded.connect(handler, weak=False)
        try:
            snapshot = catalog.snapshot()
        finally:
            recipes_reloaded.disconnect(handler)

        handler.assert_called_once()
        kwargs = handler.call_args.kwargs
        assert kwargs["catalog"] is catalog
        assert kwargs["snapshot"] is snapshot

    def test_not_sent_on_failure(self, counting_store):
        counting_store.error = OSError("down")
        catalog = RecipeCatalog(store=counting_store)
        handler = MagicMock()
        recipes_reloaded.connect(handler, weak=False)
        try:
            with pytest.raises(DoughError):
                catalog.snapshot()
        finally:
            recipes_reloaded.disconnect(handler)

        handler.assert_not_called()

    def test_receiver_may_call_back_into_catalog(self, catalog):
        calls = []

        def handler(sender, catalog, snapshot, **kwargs):
            calls.append(snapshot)
            if len(calls) == 1:
                catalog.reload()
            catalog.reset()

        recipes_reloaded.connect(handler, weak=False)
        try:
            worker = threading.Thread(target=catalog.snapshot, daemon=True)
            worker.start()
            worker.join(timeout=5)
        finally:
            recipes_reloaded.disconnect(handler)

        assert not worker.is_alive()
        assert len(calls) == 2
        assert not catalog.is_loaded
