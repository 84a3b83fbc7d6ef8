"""Factory helpers for runtime entities."""

from .fighter_factory import create_fighter

__all__ = ["create_fighter"]
