"""Elemental types and their strong/weak relations."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ElementalType(str, Enum):
    FIRE = "Fire"
    MIST = "Mist"
    PHYSICAL = "Physical"
    SLUDGE = "Sludge"
    FROST = "Frost"


@dataclass(frozen=True, slots=True)
class Elemental:
    """An elemental type together with the types it beats and loses to."""

    type: ElementalType
    strong_against: frozenset[ElementalType] = frozenset()
    weak_against: frozenset[ElementalType] = frozenset()

    def is_strong_against(self, other: Elemental) -> bool:
        return other.type in self.strong_against

    def is_weak_against(self, other: Elemental) -> bool:
        return other.type in self.weak_against

    def __str__(self) -> str:
        return self.type.value


FIRE = Elemental(ElementalType.FIRE, frozenset({ElementalType.MIST}), frozenset({ElementalType.FROST}))
MIST = Elemental(ElementalType.MIST, frozenset({ElementalType.SLUDGE}), frozenset({ElementalType.FIRE}))
PHYSICAL = Elemental(ElementalType.PHYSICAL)
SLUDGE = Elemental(ElementalType.SLUDGE, frozenset({ElementalType.FROST}), frozenset({ElementalType.MIST}))
FROST = Elemental(ElementalType.FROST, frozenset({ElementalType.FIRE}), frozenset({ElementalType.SLUDGE}))

ELEMENTAL_TYPES: tuple[Elemental, ...] = (FIRE, MIST, PHYSICAL, SLUDGE, FROST)

_BY_TYPE = {elemental.type: elemental for elemental in ELEMENTAL_TYPES}


def get_elemental(value: ElementalType | str) -> Elemental:
    """Return the canonical Elemental for an enum member or a type name.

    Names are matched case-insensitively against both the enum value
    ("Fire") and the member name ("FIRE").
    """
    if isinstance(value, ElementalType):
        return _BY_TYPE[value]
    lowered = value.strip().lower()
    for elemental_type, elemental in _BY_TYPE.items():
        if lowered in (elemental_type.value.lower(), elemental_type.name.lower()):
            return elemental
    raise KeyError(value)


__all__ = [
    "ELEMENTAL_TYPES",
    "Elemental",
    "ElementalType",
    "FIRE",
    "FROST",
    "MIST",
    "PHYSICAL",
    "SLUDGE",
    "get_elemental",
]
