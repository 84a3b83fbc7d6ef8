"""Pairing and termination policies for battle loops."""
from __future__ import annotations

from typing import Protocol, Tuple

from skirmish.domain.entities import Fighter
from skirmish.services.battle_service import BattleService

Pairing = Tuple[Fighter, Fighter]


class BattleStrategy(Protocol):
    """Decides who attacks whom each round and when the battle is over."""

    def next_pair(self, battle: BattleService) -> Pairing: ...

    def is_over(self, battle: BattleService) -> bool: ...

    def winner(self, battle: BattleService) -> Fighter | None: ...


class DuelStrategy:
    """Two fighters take turns; the first fighter in the battle opens."""

    def next_pair(self, battle: BattleService) -> Pairing:
        first, second = self._duelists(battle)
        # Rounds are 1-based once the controller has advanced the counter.
        if battle.round % 2 == 1:
            return first, second
        return second, first

    def is_over(self, battle: BattleService) -> bool:
        return any(not fighter.is_alive for fighter in self._duelists(battle))

    def winner(self, battle: BattleService) -> Fighter | None:
        survivors = [fighter for fighter in self._duelists(battle) if fighter.is_alive]
        return survivors[0] if len(survivors) == 1 else None

    @staticmethod
    def _duelists(battle: BattleService) -> Pairing:
        fighters = battle.fighters
        if len(fighters) != 2:
            raise ValueError(f"A duel needs exactly two fighters, got {len(fighters)}.")
        return fighters[0], fighters[1]


class FreeForAllStrategy:
    """Every round two distinct living fighters are drawn at random."""

    def next_pair(self, battle: BattleService) -> Pairing:
        living = battle.living_fighters
        if len(living) < 2:
            raise ValueError("A free-for-all round needs at least two living fighters.")
        attacker, defender = battle.rng.sample(living, 2)
        return attacker, defender

    def is_over(self, battle: BattleService) -> bool:
        return len(battle.living_fighters) <= 1

    def winner(self, battle: BattleService) -> Fighter | None:
        living = battle.living_fighters
        return living[0] if len(living) == 1 else None
