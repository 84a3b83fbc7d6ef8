"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from skirmish.domain.entities import Fighter


@dataclass(slots=True)
class BattleStat:
    """Cumulative numbers tracked for one fighter during a battle."""

    total_damage_dealt: float = 0.0
    remaining_hp: float = 0.0


@dataclass(slots=True)
class BattleSettings:
    """Pacing and output switches for a battle."""

    interval_ms: int = 4000
    show_battle: bool = True
    log_battle: bool = False


@dataclass(frozen=True, slots=True)
class AttackResult:
    """Everything a renderer needs to report a single attack."""

    attacker_id: str
    attacker_name: str
    attacker_element: str
    defender_id: str
    defender_name: str
    defender_element: str
    round: int
    attack_rate: float
    armor_protection: float
    damage_dealt: float
    defender_hp: float
    multiplier: float = 0.0
    is_crit: bool = False
    is_elemental: bool = False
    is_biome: bool = False
    biome_name: str | None = None
    biome_icon_url: str | None = None
    attacker_image_url: str | None = None

    @property
    def multiplier_text(self) -> str:
        if not self.multiplier:
            return ""
        return f" (x{self.multiplier:.1f}) 🔥"


@dataclass(slots=True)
class BattleOutcome:
    """Summary returned once a battle loop finishes."""

    winner: Fighter | None
    rounds: int
    stats: Dict[str, BattleStat] = field(default_factory=dict)
