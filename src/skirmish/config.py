"""Battle settings persistence helpers."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from skirmish.data.errors import DataValidationError
from skirmish.data.json_loader import load_json
from skirmish.domain.battle_models import BattleSettings
from skirmish.services.errors import ConfigurationError

logger = logging.getLogger(__name__)

_DEFAULTS = BattleSettings()


def load_settings(path: Path | str) -> BattleSettings:
    """Load battle settings from a JSON file.

    A missing file yields the defaults; unknown keys are ignored.
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.debug("No settings at %s, using defaults", config_path)
        return BattleSettings()

    raw = load_json(config_path)
    if not isinstance(raw, dict):
        raise DataValidationError(f"Expected top-level object in {config_path}")

    interval_ms = raw.get("interval_ms", _DEFAULTS.interval_ms)
    if isinstance(interval_ms, bool) or not isinstance(interval_ms, int):
        raise DataValidationError(f"interval_ms in {config_path} must be an integer.")
    if interval_ms < 0:
        raise ConfigurationError(f"interval_ms must be >= 0, got {interval_ms}.")

    return BattleSettings(
        interval_ms=interval_ms,
        show_battle=_require_bool(raw.get("show_battle", _DEFAULTS.show_battle), "show_battle", config_path),
        log_battle=_require_bool(raw.get("log_battle", _DEFAULTS.log_battle), "log_battle", config_path),
    )


def save_settings(settings: BattleSettings, path: Path | str) -> None:
    """Persist settings to disk."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "interval_ms": settings.interval_ms,
        "show_battle": settings.show_battle,
        "log_battle": settings.log_battle,
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def _require_bool(value: object, key: str, config_path: Path) -> bool:
    if not isinstance(value, bool):
        raise DataValidationError(f"{key} in {config_path} must be true or false.")
    return value
