"""Armor definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArmorDef:
    """Minimal armor definition."""

    id: str
    name: str
    armor: float
    price: int = 0
    description: str = ""
