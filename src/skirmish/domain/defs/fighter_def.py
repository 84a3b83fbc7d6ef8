"""Fighter definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from skirmish.domain.elemental import Elemental

from .companion_def import PetDef, SkillDef


@dataclass(frozen=True, slots=True)
class FighterDef:
    """Configuration value used to create a Fighter.

    Optional slots (element, skill, pet, image) are absent by default; an
    absent element is rolled when the fighter is created.
    """

    name: str
    id: str | None = None
    attack: float = 10
    hp: float = 100
    armor: float = 0.1
    crit_chance: float = 0.3
    crit_damage: float = 1.2
    element: Elemental | None = None
    armor_ids: tuple[str, ...] = ()
    weapon_ids: tuple[str, ...] = ()
    skill: SkillDef | None = None
    pet: PetDef | None = None
    image_url: str | None = None

    @property
    def fighter_id(self) -> str:
        return self.id if self.id is not None else self.name
