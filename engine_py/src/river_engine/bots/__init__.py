"""
Bot players that can fill empty seats.
"""

from .base import BaseBot, BotAction
from .greedy import GreedyBot

__all__ = ["BaseBot", "BotAction", "GreedyBot"]
