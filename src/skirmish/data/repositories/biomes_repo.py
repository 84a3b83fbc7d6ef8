"""Biomes repository."""
from __future__ import annotations

from typing import Dict

from skirmish.data.errors import DataValidationError
from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.biome import Biome


class BiomesRepository(RepositoryBase[Biome]):
    """Loads and validates biome definitions, keyed by id."""

    def __init__(self, base_path=None) -> None:
        super().__init__("biomes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Biome]:
        biomes: Dict[str, Biome] = {}
        for raw_id, biome_data in self._iter_entries(raw, "biome"):
            context = f"biome '{raw_id}'"
            self._assert_exact_fields(biome_data, {"name", "chance", "damage"}, context, optional_fields={"icon_url"})

            chance = self._require_number(biome_data["chance"], f"{context} chance")
            if not 0 <= chance <= 1:
                raise DataValidationError(f"{context} chance must be between 0 and 1.")
            icon_url = biome_data.get("icon_url")
            biomes[raw_id] = Biome(
                name=self._require_str(biome_data["name"], f"{context} name"),
                chance=chance,
                damage=self._require_number(biome_data["damage"], f"{context} damage"),
                icon_url=self._require_str(icon_url, f"{context} icon_url") if icon_url is not None else None,
            )
        return biomes
