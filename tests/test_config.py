from __future__ import annotations

import json
from pathlib import Path

import pytest

from skirmish.config import load_settings, save_settings
from skirmish.data.errors import DataLoadError, DataValidationError
from skirmish.domain.battle_models import BattleSettings
from skirmish.services.errors import ConfigurationError


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.json")

    assert settings == BattleSettings(interval_ms=4000, show_battle=True, log_battle=False)


def test_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "battle.json"
    save_settings(BattleSettings(interval_ms=0, show_battle=False, log_battle=True), path)

    assert load_settings(path) == BattleSettings(interval_ms=0, show_battle=False, log_battle=True)


def test_partial_file_keeps_defaults_and_ignores_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "battle.json"
    path.write_text(json.dumps({"log_battle": True, "theme": "dark"}), encoding="utf-8")

    settings = load_settings(path)

    assert settings.log_battle is True
    assert settings.interval_ms == 4000


def test_negative_interval_is_a_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "battle.json"
    path.write_text(json.dumps({"interval_ms": -5}), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_wrong_types_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "battle.json"
    path.write_text(json.dumps({"show_battle": "yes"}), encoding="utf-8")
    with pytest.raises(DataValidationError):
        load_settings(path)

    path.write_text(json.dumps({"interval_ms": 1.5}), encoding="utf-8")
    with pytest.raises(DataValidationError):
        load_settings(path)


def test_malformed_json_raises_load_error(tmp_path: Path) -> None:
    path = tmp_path / "battle.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(DataLoadError):
        load_settings(path)
