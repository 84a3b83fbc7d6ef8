from __future__ import annotations

import json
from pathlib import Path

import pytest

from skirmish.data.errors import DataLoadError, DataReferenceError, DataValidationError
from skirmish.data.repositories import (
    ArmorRepository,
    BiomesRepository,
    FightersRepository,
    WeaponsRepository,
)
from skirmish.domain.elemental import FROST


def _write(definitions_dir: Path, filename: str, payload: object) -> None:
    (definitions_dir / filename).write_text(json.dumps(payload), encoding="utf-8")


def test_weapons_repository_loads_defaults(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "weapons.json",
        {
            "flame_sword": {"name": "Flame Sword", "attack": 5, "elemental_damage": 1.5, "elemental_chance": 0.2},
            "stick": {"name": "Stick", "attack": 1},
        },
    )
    repo = WeaponsRepository(base_path=tmp_path)

    sword = repo.get("flame_sword")
    stick = repo.get("stick")

    assert sword.attack == 5
    assert sword.elemental_damage == pytest.approx(1.5)
    assert sword.elemental_chance == pytest.approx(0.2)
    assert stick.elemental_damage == 0 and stick.elemental_chance == 0 and stick.price == 0
    assert [weapon.id for weapon in repo.all()] == ["flame_sword", "stick"]


def test_weapons_repository_rejects_unknown_fields(tmp_path: Path) -> None:
    _write(tmp_path, "weapons.json", {"stick": {"name": "Stick", "attack": 1, "durability": 3}})

    with pytest.raises(DataValidationError, match="unknown fields"):
        WeaponsRepository(base_path=tmp_path).get("stick")


def test_weapons_repository_rejects_non_numeric_attack(tmp_path: Path) -> None:
    _write(tmp_path, "weapons.json", {"stick": {"name": "Stick", "attack": "high"}})

    with pytest.raises(DataValidationError):
        WeaponsRepository(base_path=tmp_path).all()


def test_armor_repository_loads_and_requires_fields(tmp_path: Path) -> None:
    _write(tmp_path, "armor.json", {"helmet": {"name": "Helmet", "armor": 0.05, "price": 30}})
    repo = ArmorRepository(base_path=tmp_path)

    helmet = repo.get("helmet")

    assert helmet.armor == pytest.approx(0.05)
    assert helmet.price == 30
    with pytest.raises(KeyError):
        repo.get("boots")

    _write(tmp_path, "armor.json", {"boots": {"name": "Boots"}})
    with pytest.raises(DataValidationError, match="missing fields"):
        ArmorRepository(base_path=tmp_path).get("boots")


def test_biomes_repository_validates_chance(tmp_path: Path) -> None:
    _write(tmp_path, "biomes.json", {"swamp": {"name": "Swamp", "chance": 0.3, "damage": 1.1, "icon_url": "s.png"}})
    swamp = BiomesRepository(base_path=tmp_path).get("swamp")

    assert swamp.name == "Swamp"
    assert swamp.icon_url == "s.png"

    _write(tmp_path, "biomes.json", {"lava": {"name": "Lava", "chance": 1.5, "damage": 2}})
    with pytest.raises(DataValidationError):
        BiomesRepository(base_path=tmp_path).get("lava")


def test_fighters_repository_builds_definitions(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "fighters.json",
        {
            "ice_golem": {
                "name": "Ice Golem",
                "hp": 250,
                "armor": 0.3,
                "element": "Frost",
                "weapon_ids": ["frost_fist"],
                "pet": {"id": "penguin", "name": "Penguin"},
            },
            "goblin": {"name": "Goblin"},
        },
    )
    repo = FightersRepository(base_path=tmp_path)

    golem = repo.get("ice_golem")
    goblin = repo.get("goblin")

    assert golem.fighter_id == "ice_golem"
    assert golem.hp == 250
    assert golem.element is FROST
    assert golem.weapon_ids == ("frost_fist",)
    assert golem.pet is not None and golem.pet.name == "Penguin"
    assert goblin.attack == 10 and goblin.element is None and goblin.skill is None


def test_fighters_repository_rejects_unknown_element(tmp_path: Path) -> None:
    _write(tmp_path, "fighters.json", {"bolt": {"name": "Bolt", "element": "Lightning"}})

    with pytest.raises(DataReferenceError):
        FightersRepository(base_path=tmp_path).get("bolt")


def test_missing_and_malformed_files_raise_load_errors(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        WeaponsRepository(base_path=tmp_path).all()

    (tmp_path / "armor.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        ArmorRepository(base_path=tmp_path).all()


def test_top_level_must_be_object(tmp_path: Path) -> None:
    _write(tmp_path, "weapons.json", [{"name": "Stick", "attack": 1}])

    with pytest.raises(DataValidationError):
        WeaponsRepository(base_path=tmp_path).all()
