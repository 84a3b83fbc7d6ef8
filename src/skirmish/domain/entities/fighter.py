"""Fighter runtime model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from skirmish.core.types import RandomSource
from skirmish.domain.defs import ArmorDef, PetDef, SkillDef, WeaponDef
from skirmish.domain.elemental import Elemental


@dataclass(slots=True, eq=False)
class Fighter:
    """A combat participant.

    Fighters compare and hash by identity so a battle can collapse duplicate
    references with a set. ``hp`` is allowed to drop below zero; callers
    decide what a dead fighter means.
    """

    name: str
    id: str
    element: Elemental
    attack: float = 10
    hp: float = 100
    armor: float = 0.1
    crit_chance: float = 0.3
    crit_damage: float = 1.2
    equipped_armors: List[ArmorDef] = field(default_factory=list)
    equipped_weapons: List[WeaponDef] = field(default_factory=list)
    skill: SkillDef | None = None
    pet: PetDef | None = None
    image_url: str | None = None

    @property
    def elemental_damage(self) -> float:
        return sum(weapon.elemental_damage for weapon in self.equipped_weapons)

    @property
    def elemental_chance(self) -> float:
        return sum(weapon.elemental_chance for weapon in self.equipped_weapons)

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def equip_armor(self, armor: ArmorDef) -> None:
        self.armor += armor.armor
        self.equipped_armors.append(armor)

    def equip_weapon(self, weapon: WeaponDef) -> None:
        self.attack += weapon.attack
        self.equipped_weapons.append(weapon)

    def is_crit(self, rng: RandomSource) -> bool:
        """Roll for a critical hit."""
        return rng.chance(self.crit_chance)

    def is_elemental_damage(self, rng: RandomSource) -> bool:
        """Roll for an elemental hit using the weapons equipped right now."""
        return rng.chance(self.elemental_chance)
