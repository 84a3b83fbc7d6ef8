"""Skill and pet definitions.

Both are carried by fighters for presentation only; attack resolution
never reads them.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SkillDef:
    id: str
    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class PetDef:
    id: str
    name: str
    description: str = ""
