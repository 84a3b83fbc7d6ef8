"""Service layer exports."""

from .battle_service import BattleService, default_player_died_text
from .controllers import BattleController, BattleRenderer
from .errors import ConfigurationError, FactoryError
from .factories import create_fighter
from .strategies import BattleStrategy, DuelStrategy, FreeForAllStrategy

__all__ = [
    "BattleController",
    "BattleRenderer",
    "BattleService",
    "BattleStrategy",
    "ConfigurationError",
    "DuelStrategy",
    "FactoryError",
    "FreeForAllStrategy",
    "create_fighter",
    "default_player_died_text",
]
