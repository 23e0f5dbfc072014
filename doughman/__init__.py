"""
Django Doughman - Raw-material explosion for bakeries.

Computes how much of every raw ingredient a product, a dough or a
filling consumes, expanding pre-ferments and sub-fillings recursively.

Usage:
    from doughman import bom, DoughError

    materials = bom.for_dough("D1", 2000)
    for ingredient_id, total in materials.items():
        print(f"{total.name}: {total.quantity} {total.unit}")

    materials = bom.for_product("Croissant")
    if not materials:
        print("Unknown product or nothing to expand")
"""

from doughman.exceptions import DoughError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ("bom", "Bom"):
        from doughman.service import Bom

        return Bom
    if name == "MaterialTotal":
        from doughman.results import MaterialTotal

        return MaterialTotal
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["bom", "Bom", "DoughError", "MaterialTotal"]
__version__ = "0.1.0"
