"""Repository exports."""

from .armor_repo import ArmorRepository
from .biomes_repo import BiomesRepository
from .fighters_repo import FightersRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "ArmorRepository",
    "BiomesRepository",
    "FightersRepository",
    "WeaponsRepository",
]
