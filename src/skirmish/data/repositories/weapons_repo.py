"""Weapons repository."""
from __future__ import annotations

from typing import Dict

from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.defs import WeaponDef


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads and validates weapon definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("weapons.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        for raw_id, weapon_data in self._iter_entries(raw, "weapon"):
            context = f"weapon '{raw_id}'"
            self._assert_exact_fields(
                weapon_data,
                {"name", "attack"},
                context,
                optional_fields={"elemental_damage", "elemental_chance", "price", "description"},
            )

            weapons[raw_id] = WeaponDef(
                id=raw_id,
                name=self._require_str(weapon_data["name"], f"{context} name"),
                attack=self._require_number(weapon_data["attack"], f"{context} attack"),
                elemental_damage=self._require_number(
                    weapon_data.get("elemental_damage", 0), f"{context} elemental_damage"
                ),
                elemental_chance=self._require_number(
                    weapon_data.get("elemental_chance", 0), f"{context} elemental_chance"
                ),
                price=self._require_int(weapon_data.get("price", 0), f"{context} price"),
                description=self._require_str(weapon_data.get("description", ""), f"{context} description"),
            )
        return weapons
