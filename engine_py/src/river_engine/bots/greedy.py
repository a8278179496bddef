"""
Greedy bot implementation with basic heuristics.
"""

from .base import BaseBot
from ..comparator import compare_cards, is_trump, led_suit, rank_value, trick_winner
from ..models import Card, Game, Joker


class GreedyBot(BaseBot):
    """
    Greedy bot that tries to make its bid exactly.

    Strategy:
    - Bid the number of near-certain winners (jokers, high spades, aces)
    - While short of the bid, win the trick as cheaply as possible
    - Once the bid is made, shed the highest card that still loses
    """

    def choose_bid(self, game: Game) -> int:
        hand = self.get_hand(game)
        estimate = sum(1 for card in hand if self._is_strong(card))
        allowed = self.allowed_bids(game)
        # Closest allowed bid to the estimate, preferring the lower one
        return min(allowed, key=lambda b: (abs(b - estimate), b))

    def choose_card(self, game: Game) -> Card:
        legal = self.get_legal_cards(game)
        trick = self.current_trick(game)
        want_trick = self.tricks_still_needed(game) > 0

        if not trick.plays:
            ordered = sorted(legal, key=self._strength)
            return ordered[-1] if want_trick else ordered[0]

        lead = led_suit(trick)
        best = trick_winner(trick.plays).card
        winners = [c for c in legal if compare_cards(c, best, lead) > 0]
        losers = [c for c in legal if c not in winners]

        if want_trick and winners:
            return min(winners, key=self._strength)
        if not losers:
            return min(winners, key=self._strength)
        if want_trick:
            # Can't win this one; keep the strong cards for later
            return min(losers, key=self._strength)
        return max(losers, key=self._strength)

    @staticmethod
    def _strength(card: Card) -> int:
        # Trumps always outrank plain suits when ordering a hand
        return rank_value(card) + (20 if is_trump(card) else 0)

    @staticmethod
    def _is_strong(card: Card) -> bool:
        if isinstance(card, Joker):
            return True
        if is_trump(card):
            return card.rank >= 12
        return card.rank == 14
