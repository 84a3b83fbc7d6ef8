"""Biome (environmental damage modifier) model."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Biome:
    """Per-battle environment that may add a bonus to any attack."""

    name: str
    chance: float
    damage: float
    icon_url: str | None = None
