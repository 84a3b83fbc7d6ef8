"""Plain-text rendering of fighters and attack results."""
from __future__ import annotations

import math
import sys
from typing import Mapping, TextIO

from skirmish.domain.battle_models import AttackResult
from skirmish.domain.entities import Fighter

BAR_WIDTH = 20
BAR_FILL = "█"
BAR_EMPTY = " "

BETTER_MARK = "🟢"
WORSE_MARK = "🔴"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (12.5 -> 13)."""
    return math.floor(value + 0.5)


def health_bar(hp: float, max_hp: float, *, width: int = BAR_WIDTH) -> str:
    """Return a fixed-width bar; negative HP renders empty."""
    if hp < 0:
        hp = 0
    if max_hp <= 0:
        return BAR_EMPTY * width
    filled = min(width, round_half_up(hp * width / max_hp))
    return BAR_FILL * filled + BAR_EMPTY * (width - filled)


def format_percent(value: float) -> str:
    return f"{round_half_up(value * 100)}%"


def format_hp_line(name: str, hp: float, max_hp: float) -> str:
    remaining = round_half_up(hp) if hp >= 0 else 0
    return f"{name}'s remaining HP: `{health_bar(hp, max_hp)}` `{remaining}/{round_half_up(max_hp)}`"


def format_attack_result(result: AttackResult) -> list[str]:
    lines = []
    if result.biome_name:
        lines.append(f"Biome: {result.biome_name}")
    lines.extend(
        [
            f"Attacking Player: {result.attacker_name} ({result.attacker_element})",
            f"Defending Player: {result.defender_name} ({result.defender_element})",
            f"Round: {result.round}",
            f"Attack Rate: {round_half_up(result.attack_rate)}{result.multiplier_text}",
            f"Damage Reduction: {round_half_up(result.armor_protection)}",
            f"Damage Done: {round_half_up(result.damage_dealt)}",
        ]
    )
    return lines


def compare_mark(own: float, other: float) -> str:
    """Marker telling the other fighter whether their value beats this one."""
    if other > own:
        return f" {BETTER_MARK}"
    if own > other:
        return f" {WORSE_MARK}"
    return ""


def format_fighter_profile(fighter: Fighter, other: Fighter | None = None) -> list[str]:
    """Profile lines for a fighter.

    With ``other`` given, each numeric stat is marked from the other
    fighter's point of view: green when theirs is higher, red when lower.
    """

    def mark(stat: str) -> str:
        if other is None:
            return ""
        return compare_mark(getattr(fighter, stat), getattr(other, stat))

    armors = [f"{idx}. {armor.name}" for idx, armor in enumerate(fighter.equipped_armors, start=1)]
    weapons = [f"{idx}. {weapon.name}" for idx, weapon in enumerate(fighter.equipped_weapons, start=1)]
    return [
        f"Name: {fighter.name}",
        f"Element: {fighter.element}",
        f"Attack: {round_half_up(fighter.attack)}{mark('attack')}",
        f"HP: {round_half_up(fighter.hp)}{mark('hp')}",
        f"Armor: {format_percent(fighter.armor)}{mark('armor')}",
        f"Crit Chance: {format_percent(fighter.crit_chance)}{mark('crit_chance')}",
        f"Crit Damage: x{fighter.crit_damage:.1f}{mark('crit_damage')}",
        f"Elemental Chance: {format_percent(fighter.elemental_chance)}{mark('elemental_chance')}",
        f"Elemental Damage: x{fighter.elemental_damage:.1f}{mark('elemental_damage')}",
        f"Skill: {fighter.skill.name if fighter.skill else 'none'}",
        f"Pet: {fighter.pet.name if fighter.pet else 'none'}",
        "Armors: " + (", ".join(armors) or "none"),
        "Weapons: " + (", ".join(weapons) or "none"),
    ]


class TextRenderer:
    """BattleRenderer that writes plain text to a stream.

    When ``max_hp`` maps fighter ids to their starting HP, each attack is
    followed by the defender's health bar.
    """

    def __init__(self, stream: TextIO | None = None, max_hp: Mapping[str, float] | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._max_hp = dict(max_hp or {})

    def render_attack(self, result: AttackResult) -> None:
        print("", file=self._stream)
        for line in format_attack_result(result):
            print(line, file=self._stream)
        max_hp = self._max_hp.get(result.defender_id)
        if max_hp is not None:
            print(format_hp_line(result.defender_name, result.defender_hp, max_hp), file=self._stream)

    def render_message(self, text: str) -> None:
        print(text, file=self._stream)
