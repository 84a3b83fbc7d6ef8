"""UI-agnostic battle loop that composes a BattleService with a strategy."""
from __future__ import annotations

import logging
from typing import Protocol

from skirmish.domain.battle_models import AttackResult, BattleOutcome
from skirmish.services.battle_service import BattleService
from skirmish.services.strategies import BattleStrategy

logger = logging.getLogger(__name__)


class BattleRenderer(Protocol):
    """Receives attack results and battle messages for display."""

    def render_attack(self, result: AttackResult) -> None: ...

    def render_message(self, text: str) -> None: ...


class BattleController:
    """
    Drives a battle round by round.

    Responsibilities:
    - Advance the round counter and ask the strategy for the next pair
    - Resolve the attack through BattleService
    - Forward results and death notices to the renderer when show_battle is on
    - Pause between rounds through the battle's waiter

    Non-responsibilities:
    - Damage math and statistics (BattleService)
    - Formatting text (presentation layer)
    """

    def __init__(
        self,
        battle: BattleService,
        strategy: BattleStrategy,
        renderer: BattleRenderer | None = None,
    ) -> None:
        self._battle = battle
        self._strategy = strategy
        self._renderer = renderer

    @property
    def battle(self) -> BattleService:
        return self._battle

    def is_over(self) -> bool:
        return self._strategy.is_over(self._battle)

    def play_round(self) -> AttackResult:
        """Play a single round and return the resolved attack."""
        self._battle.next_round()
        attacker, defender = self._strategy.next_pair(self._battle)
        was_alive = defender.is_alive
        result = self._battle.attack(attacker, defender)

        settings = self._battle.settings
        if settings.log_battle:
            logger.info(
                "Round %d: %s (%s) hit %s (%s) for %.1f%s, %s has %.1f HP left",
                result.round,
                result.attacker_name,
                result.attacker_element,
                result.defender_name,
                result.defender_element,
                result.damage_dealt,
                result.multiplier_text,
                result.defender_name,
                result.defender_hp,
            )
        if settings.show_battle and self._renderer is not None:
            self._renderer.render_attack(result)

        if was_alive and not defender.is_alive:
            self._announce(self._battle.player_died_text(defender))
        return result

    def run(self, *, max_rounds: int | None = None) -> BattleOutcome:
        """Play rounds until the strategy reports the battle over.

        ``max_rounds`` stops a battle that cannot finish (for example when
        every fighter has armor of 1.0 or more); the outcome then has no
        winner.
        """
        logger.info("Battle started with %d fighters", len(self._battle.fighters))
        while not self._strategy.is_over(self._battle):
            if max_rounds is not None and self._battle.round >= max_rounds:
                logger.warning("Battle stopped after %d rounds without a winner", self._battle.round)
                return BattleOutcome(winner=None, rounds=self._battle.round, stats=self._battle.stats)
            self.play_round()
            if not self._strategy.is_over(self._battle):
                self._battle.wait()

        winner = self._strategy.winner(self._battle)
        if winner is not None:
            self._announce(f"{winner.name} won the battle!")
        logger.info(
            "Battle finished after %d rounds, winner=%s",
            self._battle.round,
            winner.id if winner else None,
        )
        return BattleOutcome(winner=winner, rounds=self._battle.round, stats=self._battle.stats)

    def _announce(self, text: str) -> None:
        if self._battle.settings.log_battle:
            logger.info("%s", text)
        if self._battle.settings.show_battle and self._renderer is not None:
            self._renderer.render_message(text)
