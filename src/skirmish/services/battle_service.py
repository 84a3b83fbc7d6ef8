"""Battle service resolving attacks and tracking per-fighter statistics."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, Iterable, List

from skirmish.core.clock import sleep_ms
from skirmish.core.types import RandomSource, Waiter
from skirmish.domain.battle_models import AttackResult, BattleSettings, BattleStat
from skirmish.domain.biome import Biome
from skirmish.domain.entities import Fighter
from skirmish.services.errors import ConfigurationError

logger = logging.getLogger(__name__)

DiedTextFn = Callable[[Fighter], str]


def default_player_died_text(fighter: Fighter) -> str:
    return f"{fighter.name} has been defeated!"


class BattleService:
    """Owns the state of one battle and resolves attacks inside it.

    The service does not decide who attacks whom or when the battle ends;
    that belongs to a strategy driven by ``BattleController``. Calls to
    :meth:`attack` must be serialized for a given instance.
    """

    def __init__(
        self,
        fighters: Iterable[Fighter],
        *,
        rng: RandomSource,
        biome: Biome | None = None,
        settings: BattleSettings | None = None,
        waiter: Waiter = sleep_ms,
    ) -> None:
        # dict.fromkeys keeps first-appearance order while collapsing repeats
        self._fighters: List[Fighter] = list(dict.fromkeys(fighters))
        self._rng = rng
        self._biome = biome
        # copied so set_interval only affects this battle
        self._settings = replace(settings) if settings is not None else BattleSettings()
        if self._settings.interval_ms < 0:
            raise ConfigurationError(f"interval_ms must be >= 0, got {self._settings.interval_ms}.")
        self._waiter = waiter
        self._round = 0
        self._stats: Dict[str, BattleStat] = {}
        self._player_died_text: DiedTextFn = default_player_died_text

    # -----------------------
    # State accessors
    # -----------------------
    @property
    def round(self) -> int:
        return self._round

    @property
    def fighters(self) -> List[Fighter]:
        return list(self._fighters)

    @property
    def living_fighters(self) -> List[Fighter]:
        return [fighter for fighter in self._fighters if fighter.is_alive]

    @property
    def biome(self) -> Biome | None:
        return self._biome

    @property
    def settings(self) -> BattleSettings:
        return self._settings

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def stats(self) -> Dict[str, BattleStat]:
        """Snapshot of the statistics map keyed by fighter id."""
        return {
            fighter_id: BattleStat(stat.total_damage_dealt, stat.remaining_hp)
            for fighter_id, stat in self._stats.items()
        }

    def next_round(self) -> int:
        self._round += 1
        return self._round

    # -----------------------
    # Configuration
    # -----------------------
    def set_interval(self, milliseconds: int) -> BattleService:
        """Set the pause between rounds and return self for chaining."""
        if milliseconds < 0:
            raise ConfigurationError(f"interval_ms must be >= 0, got {milliseconds}.")
        self._settings.interval_ms = milliseconds
        return self

    def set_player_died_text(self, text: DiedTextFn) -> BattleService:
        self._player_died_text = text
        return self

    def player_died_text(self, fighter: Fighter) -> str:
        return self._player_died_text(fighter)

    def wait(self) -> None:
        self._waiter(self._settings.interval_ms)

    # -----------------------
    # Statistics
    # -----------------------
    def get_damage_dealt(self, fighter_id: str) -> float | None:
        stat = self._stats.get(fighter_id)
        return stat.total_damage_dealt if stat else None

    def get_remaining_hp(self, fighter_id: str) -> float | None:
        stat = self._stats.get(fighter_id)
        return stat.remaining_hp if stat else None

    # -----------------------
    # Attack resolution
    # -----------------------
    def is_biome_damage(self) -> bool:
        if self._biome is None:
            return False
        return self._rng.chance(self._biome.chance)

    def attack(self, attacker: Fighter, defender: Fighter) -> AttackResult:
        """Resolve one attack from ``attacker`` on ``defender``.

        Crit, elemental and biome bonuses add up into one multiplier. With no
        bonus the attacker's attack is used as is. The elemental bonus adds
        the defender's elemental damage.
        """
        is_biome = self.is_biome_damage()
        is_crit = attacker.is_crit(self._rng)
        is_elemental = attacker.is_elemental_damage(self._rng) and attacker.element.is_strong_against(
            defender.element
        )

        multiplier = 0.0
        if is_crit:
            multiplier += attacker.crit_damage
        if is_elemental:
            multiplier += defender.elemental_damage
        if is_biome:
            assert self._biome is not None
            multiplier += self._biome.damage

        attack_rate = attacker.attack * multiplier if multiplier else attacker.attack
        armor_protection = defender.armor * attack_rate
        damage_dealt = attack_rate - armor_protection

        defender.hp -= damage_dealt
        self._record(attacker, defender, damage_dealt)

        logger.debug(
            "Round %d: %s -> %s rate=%.2f protection=%.2f damage=%.2f (crit=%s elemental=%s biome=%s)",
            self._round,
            attacker.id,
            defender.id,
            attack_rate,
            armor_protection,
            damage_dealt,
            is_crit,
            is_elemental,
            is_biome,
        )

        return AttackResult(
            attacker_id=attacker.id,
            attacker_name=attacker.name,
            attacker_element=str(attacker.element),
            defender_id=defender.id,
            defender_name=defender.name,
            defender_element=str(defender.element),
            round=self._round,
            attack_rate=attack_rate,
            armor_protection=armor_protection,
            damage_dealt=damage_dealt,
            defender_hp=defender.hp,
            multiplier=multiplier,
            is_crit=is_crit,
            is_elemental=is_elemental,
            is_biome=is_biome,
            biome_name=self._biome.name if self._biome else None,
            biome_icon_url=self._biome.icon_url if self._biome else None,
            attacker_image_url=attacker.image_url,
        )

    # -----------------------
    # Helpers
    # -----------------------
    def _record(self, attacker: Fighter, defender: Fighter, damage_dealt: float) -> None:
        attacker_stat = self._stats.get(attacker.id)
        if attacker_stat is None:
            self._stats[attacker.id] = BattleStat(total_damage_dealt=damage_dealt, remaining_hp=attacker.hp)
        else:
            attacker_stat.total_damage_dealt += damage_dealt
            attacker_stat.remaining_hp = attacker.hp

        defender_stat = self._stats.get(defender.id)
        if defender_stat is None:
            self._stats[defender.id] = BattleStat(total_damage_dealt=0.0, remaining_hp=defender.hp)
        else:
            defender_stat.remaining_hp = defender.hp
