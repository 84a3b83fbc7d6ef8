"""Fighters repository."""
from __future__ import annotations

from typing import Dict

from skirmish.data.errors import DataReferenceError, DataValidationError
from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.defs import FighterDef, PetDef, SkillDef
from skirmish.domain.elemental import Elemental, get_elemental

_STAT_FIELDS = ("attack", "hp", "armor", "crit_chance", "crit_damage")


class FightersRepository(RepositoryBase[FighterDef]):
    """Loads fighter templates.

    Each entry is keyed by fighter id; stats left out fall back to the
    FighterDef defaults.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("fighters.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, FighterDef]:
        fighters: Dict[str, FighterDef] = {}
        for raw_id, fighter_data in self._iter_entries(raw, "fighter"):
            context = f"fighter '{raw_id}'"
            self._assert_exact_fields(
                fighter_data,
                {"name"},
                context,
                optional_fields={*_STAT_FIELDS, "element", "armor_ids", "weapon_ids", "skill", "pet", "image_url"},
            )

            stats = {
                stat: self._require_number(fighter_data[stat], f"{context} {stat}")
                for stat in _STAT_FIELDS
                if stat in fighter_data
            }
            image_url = fighter_data.get("image_url")
            fighters[raw_id] = FighterDef(
                name=self._require_str(fighter_data["name"], f"{context} name"),
                id=raw_id,
                element=self._parse_element(fighter_data.get("element"), context),
                armor_ids=tuple(self._require_str_list(fighter_data.get("armor_ids"), f"{context} armor_ids")),
                weapon_ids=tuple(self._require_str_list(fighter_data.get("weapon_ids"), f"{context} weapon_ids")),
                skill=self._parse_companion(fighter_data.get("skill"), SkillDef, f"{context} skill"),
                pet=self._parse_companion(fighter_data.get("pet"), PetDef, f"{context} pet"),
                image_url=self._require_str(image_url, f"{context} image_url") if image_url is not None else None,
                **stats,
            )
        return fighters

    def _parse_element(self, value: object, context: str) -> Elemental | None:
        if value is None:
            return None
        name = self._require_str(value, f"{context} element")
        try:
            return get_elemental(name)
        except KeyError as exc:
            raise DataReferenceError(f"{context} references unknown element '{name}'.") from exc

    def _parse_companion(self, value: object, def_type: type, context: str):
        if value is None:
            return None
        payload = self._require_mapping(value, context)
        self._assert_exact_fields(payload, {"id", "name"}, context, optional_fields={"description"})
        description = payload.get("description", "")
        if not isinstance(description, str):
            raise DataValidationError(f"{context} description must be a string.")
        return def_type(
            id=self._require_str(payload["id"], f"{context} id"),
            name=self._require_str(payload["name"], f"{context} name"),
            description=description,
        )
