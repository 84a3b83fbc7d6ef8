"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Weapon definition; every stat is an additive contribution."""

    id: str
    name: str
    attack: float
    elemental_damage: float = 0.0
    elemental_chance: float = 0.0
    price: int = 0
    description: str = ""
