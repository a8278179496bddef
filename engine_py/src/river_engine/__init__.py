"""
Up and Down the River: authoritative game engine.
"""

from .constants import GamePhase
from .errors import GameError, LookupFailure, StateError, ValidationError
from .manager import GameManager
from .models import Card, Game, Joker, Player, StandardCard
from .rules import RuleConfig, create_rules, default_rules

__version__ = "1.0.0"

__all__ = [
    "Card",
    "Game",
    "GameError",
    "GameManager",
    "GamePhase",
    "Joker",
    "LookupFailure",
    "Player",
    "RuleConfig",
    "StandardCard",
    "StateError",
    "ValidationError",
    "create_rules",
    "default_rules",
]
