"""
Base bot interface and utilities.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..constants import GamePhase
from ..models import Card, Game, Trick
from ..validate import current_bidder, current_player, forbidden_bid, legal_cards


class BotAction:
    """Represents a bot action."""

    def __init__(self, action_type: str, **kwargs):
        self.type = action_type
        self.data = kwargs

    @classmethod
    def bid(cls, value: int) -> 'BotAction':
        """Create a bid action."""
        return cls('bid', bid=value)

    @classmethod
    def play(cls, card: Card) -> 'BotAction':
        """Create a play action."""
        return cls('play', card=card)

    def __repr__(self) -> str:
        return f"BotAction({self.type}, {self.data})"


class BaseBot(ABC):
    """Abstract base class for bot players."""

    def __init__(self, player_id: str):
        self.player_id = player_id

    def choose_action(self, game: Game) -> Optional[BotAction]:
        """
        Choose an action based on the current game state.

        Bots only look at their own hand and public table information.

        Returns:
            BotAction to take, or None if it is not this bot's turn
        """
        if game.state == GamePhase.BIDDING and current_bidder(game) == self.player_id:
            return BotAction.bid(self.choose_bid(game))
        if game.state == GamePhase.PLAYING and current_player(game) == self.player_id:
            return BotAction.play(self.choose_card(game))
        return None

    @abstractmethod
    def choose_bid(self, game: Game) -> int:
        pass

    @abstractmethod
    def choose_card(self, game: Game) -> Card:
        pass

    def get_hand(self, game: Game) -> List[Card]:
        player = game.find_player(self.player_id)
        return player.hand if player else []

    def current_trick(self, game: Game) -> Optional[Trick]:
        return game.current_round.current_trick if game.current_round else None

    def get_legal_cards(self, game: Game) -> List[Card]:
        return legal_cards(self.get_hand(game), self.current_trick(game))

    def allowed_bids(self, game: Game) -> List[int]:
        rnd = game.current_round
        banned = forbidden_bid(game)
        return [b for b in range(rnd.total_cards + 1) if b != banned]

    def tricks_still_needed(self, game: Game) -> int:
        player = game.find_player(self.player_id)
        bid = game.current_round.bids.get(self.player_id, 0)
        return bid - player.tricks_won
