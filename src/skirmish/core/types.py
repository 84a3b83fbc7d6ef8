"""Shared protocols and type aliases for the core and domain layers."""
from __future__ import annotations

from typing import Callable, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can stand in for RNG during a battle."""

    def random(self) -> float: ...

    def chance(self, probability: float) -> bool: ...

    def choice(self, seq: Sequence[T]) -> T: ...

    def sample(self, seq: Sequence[T], k: int) -> list[T]: ...


# Pacing primitive: receives a delay in milliseconds.
Waiter = Callable[[int], None]

__all__ = ["RandomSource", "Waiter"]
