"""Battle loop tests: controller composed with duel and free-for-all strategies."""
from __future__ import annotations

import logging

import pytest

from skirmish.domain.battle_models import AttackResult, BattleSettings
from skirmish.services import BattleController, BattleService, DuelStrategy, FreeForAllStrategy
from tests.helpers.fighters import make_fighter
from tests.helpers.scripted_rng import ScriptedRNG


class RecordingRenderer:
    def __init__(self) -> None:
        self.results: list[AttackResult] = []
        self.messages: list[str] = []

    def render_attack(self, result: AttackResult) -> None:
        self.results.append(result)

    def render_message(self, text: str) -> None:
        self.messages.append(text)


def _battle(fighters, *, settings: BattleSettings | None = None, waits: list[int] | None = None) -> BattleService:
    waiter = waits.append if waits is not None else (lambda _ms: None)
    return BattleService(fighters, rng=ScriptedRNG(), settings=settings, waiter=waiter)


def test_duel_alternates_and_finds_winner() -> None:
    hero = make_fighter("Hero", attack=10, hp=20, armor=0)
    slime = make_fighter("Slime", attack=5, hp=20, armor=0)
    waits: list[int] = []
    battle = _battle([hero, slime], settings=BattleSettings(interval_ms=100), waits=waits)
    renderer = RecordingRenderer()

    outcome = BattleController(battle, DuelStrategy(), renderer).run()

    assert outcome.winner is hero
    assert outcome.rounds == 3
    assert [(r.attacker_id, r.defender_id) for r in renderer.results] == [
        ("Hero", "Slime"),
        ("Slime", "Hero"),
        ("Hero", "Slime"),
    ]
    assert [r.round for r in renderer.results] == [1, 2, 3]
    assert waits == [100, 100]
    assert renderer.messages == ["Slime has been defeated!", "Hero won the battle!"]
    assert outcome.stats["Hero"].total_damage_dealt == 20
    assert outcome.stats["Slime"].remaining_hp == 0


def test_duel_requires_two_fighters() -> None:
    battle = _battle([make_fighter("A"), make_fighter("B"), make_fighter("C")])
    battle.next_round()

    with pytest.raises(ValueError):
        DuelStrategy().next_pair(battle)


def test_free_for_all_runs_until_one_survives() -> None:
    fighters = [make_fighter(name, attack=10, hp=10, armor=0) for name in ("A", "B", "C")]
    battle = _battle(fighters)
    renderer = RecordingRenderer()

    outcome = BattleController(battle, FreeForAllStrategy(), renderer).run()

    assert outcome.winner is fighters[0]
    assert outcome.rounds == 2
    assert [(r.attacker_id, r.defender_id) for r in renderer.results] == [("A", "B"), ("A", "C")]
    assert renderer.messages[-1] == "A won the battle!"


def test_free_for_all_skips_dead_fighters() -> None:
    fighters = [make_fighter(name) for name in ("A", "B", "C")]
    fighters[0].hp = 0
    battle = _battle(fighters)

    attacker, defender = FreeForAllStrategy().next_pair(battle)

    assert (attacker.id, defender.id) == ("B", "C")


def test_custom_death_text_is_used() -> None:
    hero = make_fighter("Hero", attack=100, armor=0)
    rat = make_fighter("Rat", hp=1, armor=0)
    battle = _battle([hero, rat]).set_player_died_text(lambda f: f"{f.name} fled to the void")
    renderer = RecordingRenderer()

    BattleController(battle, DuelStrategy(), renderer).run()

    assert renderer.messages[0] == "Rat fled to the void"


def test_max_rounds_stops_a_stalemate() -> None:
    tanks = [make_fighter(name, armor=1.0) for name in ("A", "B")]
    battle = _battle(tanks)

    outcome = BattleController(battle, DuelStrategy()).run(max_rounds=5)

    assert outcome.winner is None
    assert outcome.rounds == 5
    assert all(tank.hp == 100 for tank in tanks)


def test_hidden_battle_does_not_render() -> None:
    hero = make_fighter("Hero", attack=100, armor=0)
    rat = make_fighter("Rat", hp=1, armor=0)
    battle = _battle([hero, rat], settings=BattleSettings(show_battle=False))
    renderer = RecordingRenderer()

    outcome = BattleController(battle, DuelStrategy(), renderer).run()

    assert outcome.winner is hero
    assert renderer.results == []
    assert renderer.messages == []


def test_log_battle_emits_info_records(caplog: pytest.LogCaptureFixture) -> None:
    hero = make_fighter("Hero", attack=100, armor=0)
    rat = make_fighter("Rat", hp=1, armor=0)
    battle = _battle([hero, rat], settings=BattleSettings(show_battle=False, log_battle=True))

    with caplog.at_level(logging.INFO, logger="skirmish"):
        BattleController(battle, DuelStrategy()).run()

    messages = [record.getMessage() for record in caplog.records]
    assert any("Round 1: Hero" in message for message in messages)
    assert "Rat has been defeated!" in messages


def test_play_round_advances_round_counter() -> None:
    battle = _battle([make_fighter("A"), make_fighter("B")])
    controller = BattleController(battle, DuelStrategy())

    result = controller.play_round()

    assert result.round == 1
    assert battle.round == 1
    assert not controller.is_over()
