"""
Doughman Signals.

Signals:
    recipes_reloaded: Recipe data was (re)loaded into the catalog
"""

from django.dispatch import Signal

# Recipe data loaded from the store
# Sent after every successful RecipeCatalog load
# Args: catalog, snapshot
recipes_reloaded = Signal()

__all__ = ["recipes_reloaded"]
