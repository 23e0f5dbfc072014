"""
Doughman Result Types.

Structured results for material explosion.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class MaterialTotal:
    """Aggregated quantity of one raw ingredient."""

    name: str
    quantity: float
    unit: str

    def as_dict(self) -> dict:
        return asdict(self)


def materials_as_dict(materials: dict[str, MaterialTotal]) -> dict[str, dict]:
    """
    Plain ``{ingredient_id: {name, quantity, unit}}`` mapping.

    Handy for JSON responses and for comparing against fixtures.
    """
    return {key: total.as_dict() for key, total in materials.items()}
