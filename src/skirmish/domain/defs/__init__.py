"""Domain definition exports."""

from .armor_def import ArmorDef
from .companion_def import PetDef, SkillDef
from .fighter_def import FighterDef
from .weapon_def import WeaponDef

__all__ = [
    "ArmorDef",
    "FighterDef",
    "PetDef",
    "SkillDef",
    "WeaponDef",
]
