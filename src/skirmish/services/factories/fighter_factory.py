"""Factory for creating fighters from definitions."""
from __future__ import annotations

from skirmish.core.types import RandomSource
from skirmish.data.repositories import ArmorRepository, WeaponsRepository
from skirmish.domain.defs import FighterDef
from skirmish.domain.elemental import ELEMENTAL_TYPES
from skirmish.domain.entities import Fighter
from skirmish.services.errors import FactoryError


def create_fighter(
    fighter_def: FighterDef,
    rng: RandomSource,
    *,
    weapons_repo: WeaponsRepository | None = None,
    armor_repo: ArmorRepository | None = None,
) -> Fighter:
    """Instantiate a fighter and equip the items its definition lists.

    The element is rolled from the five canonical types unless the
    definition fixes one.
    """
    element = fighter_def.element if fighter_def.element is not None else rng.choice(ELEMENTAL_TYPES)
    fighter = Fighter(
        name=fighter_def.name,
        id=fighter_def.fighter_id,
        element=element,
        attack=fighter_def.attack,
        hp=fighter_def.hp,
        armor=fighter_def.armor,
        crit_chance=fighter_def.crit_chance,
        crit_damage=fighter_def.crit_damage,
        skill=fighter_def.skill,
        pet=fighter_def.pet,
        image_url=fighter_def.image_url,
    )

    if fighter_def.armor_ids and armor_repo is None:
        raise FactoryError(f"Fighter '{fighter.id}' lists armor but no armor repository was given.")
    for armor_id in fighter_def.armor_ids:
        assert armor_repo is not None
        try:
            fighter.equip_armor(armor_repo.get(armor_id))
        except KeyError as exc:
            raise FactoryError(f"Armor '{armor_id}' not found for fighter '{fighter.id}'.") from exc

    if fighter_def.weapon_ids and weapons_repo is None:
        raise FactoryError(f"Fighter '{fighter.id}' lists weapons but no weapons repository was given.")
    for weapon_id in fighter_def.weapon_ids:
        assert weapons_repo is not None
        try:
            fighter.equip_weapon(weapons_repo.get(weapon_id))
        except KeyError as exc:
            raise FactoryError(f"Weapon '{weapon_id}' not found for fighter '{fighter.id}'.") from exc

    return fighter
