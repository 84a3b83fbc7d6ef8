"""Armor repository."""
from __future__ import annotations

from typing import Dict

from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.defs import ArmorDef


class ArmorRepository(RepositoryBase[ArmorDef]):
    """Loads and validates armor definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("armor.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ArmorDef]:
        armor: Dict[str, ArmorDef] = {}
        for raw_id, armor_data in self._iter_entries(raw, "armor"):
            context = f"armor '{raw_id}'"
            self._assert_exact_fields(
                armor_data,
                {"name", "armor"},
                context,
                optional_fields={"price", "description"},
            )

            armor[raw_id] = ArmorDef(
                id=raw_id,
                name=self._require_str(armor_data["name"], f"{context} name"),
                armor=self._require_number(armor_data["armor"], f"{context} armor"),
                price=self._require_int(armor_data.get("price", 0), f"{context} price"),
                description=self._require_str(armor_data.get("description", ""), f"{context} description"),
            )
        return armor
