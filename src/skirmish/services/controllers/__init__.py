"""UI-agnostic controllers for battle flow orchestration."""
from __future__ import annotations

from .battle_controller import BattleController, BattleRenderer

__all__ = [
    "BattleController",
    "BattleRenderer",
]
