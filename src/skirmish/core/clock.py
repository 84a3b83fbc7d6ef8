"""Pacing helpers used between battle rounds."""
from __future__ import annotations

import time


def sleep_ms(milliseconds: int) -> None:
    """Block for the given number of milliseconds."""
    if milliseconds > 0:
        time.sleep(milliseconds / 1000)


def no_wait(milliseconds: int) -> None:
    """Headless waiter that skips pacing entirely."""
