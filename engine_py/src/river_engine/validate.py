"""
Validation for bids and card plays.

Validators never mutate the game. They return a ValidationResult so callers
can either inspect it (bots, legal move listings) or turn it into the matching
GameError with ``raise_if_invalid``.
"""

from typing import List, Optional

from .comparator import holds_suit, led_suit, satisfies_lead_suit
from .constants import GamePhase
from .errors import (
    CARD_NOT_IN_HAND, ILLEGAL_PLAY, INVALID_BID, NOT_YOUR_TURN, PLAYER_NOT_FOUND,
    WRONG_STATE, make_error
)
from .models import Card, Game, Player, Trick


class ValidationResult:
    """Result of a validation check."""

    def __init__(
        self,
        valid: bool,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None
    ):
        self.valid = valid
        self.error_code = error_code
        self.error_message = error_message

    @classmethod
    def success(cls) -> 'ValidationResult':
        return cls(valid=True)

    @classmethod
    def error(cls, error_code: str, error_message: str) -> 'ValidationResult':
        return cls(valid=False, error_code=error_code, error_message=error_message)

    def raise_if_invalid(self) -> None:
        if not self.valid:
            raise make_error(self.error_code, self.error_message)

    def __bool__(self) -> bool:
        return self.valid


def validate_phase(game: Game, *phases: GamePhase) -> ValidationResult:
    if game.state not in phases:
        expected = ", ".join(p.value for p in phases)
        return ValidationResult.error(
            WRONG_STATE,
            f"Game is not in {expected} phase (current: {game.state.value})"
        )
    return ValidationResult.success()


def require_state(game: Game, *phases: GamePhase) -> None:
    validate_phase(game, *phases).raise_if_invalid()


def current_bidder(game: Game) -> Optional[str]:
    rnd = game.current_round
    if rnd is None or rnd.bidding_complete:
        return None
    return rnd.bid_order[rnd.current_bid_turn]


def current_player_seat(game: Game) -> Optional[int]:
    """Seat whose turn it is in the open trick, if any."""
    rnd = game.current_round
    if rnd is None or rnd.current_trick is None or game.num_players == 0:
        return None
    trick = rnd.current_trick
    return (trick.trick_leader + trick.trick_turn_index) % game.num_players


def current_player(game: Game) -> Optional[str]:
    seat = current_player_seat(game)
    return game.players[seat].id if seat is not None else None


def forbidden_bid(game: Game) -> Optional[int]:
    """
    The single bid the last bidder may not make under the dealer hook rule.

    Returns None when the rule is off, the bidder is not last, the round deals
    a single card, or the forbidden value falls outside the legal range.
    """
    rnd = game.current_round
    if not game.rules.dealer_hook or rnd is None or rnd.total_cards <= 1:
        return None
    if rnd.current_bid_turn != len(rnd.bid_order) - 1:
        return None
    forbidden = rnd.total_cards - sum(rnd.bids.values())
    if forbidden < 0 or forbidden > rnd.total_cards:
        return None
    return forbidden


def validate_bid(game: Game, player_id: str, bid) -> ValidationResult:
    """
    Validate a bid attempt.

    Checks, in order: phase, turn, range, and the optional dealer hook.
    """
    result = validate_phase(game, GamePhase.BIDDING)
    if not result:
        return result

    rnd = game.current_round
    expected = current_bidder(game)
    if player_id != expected:
        return ValidationResult.error(NOT_YOUR_TURN, "It is not your turn to bid")

    if isinstance(bid, bool) or not isinstance(bid, int):
        return ValidationResult.error(INVALID_BID, f"Bid must be a whole number, got {bid!r}")
    if bid < 0 or bid > rnd.total_cards:
        return ValidationResult.error(
            INVALID_BID,
            f"Bid must be between 0 and {rnd.total_cards}"
        )

    if bid == forbidden_bid(game):
        return ValidationResult.error(
            INVALID_BID,
            f"Dealer cannot bid {bid}: total bids would equal the {rnd.total_cards} cards dealt"
        )

    return ValidationResult.success()


def is_legal_play(hand: List[Card], card: Card, trick: Trick) -> bool:
    """
    Suit-following rule.

    Any card may lead. Afterwards a card is legal if it follows the led suit
    (jokers always do) or the hand holds no standard card of that suit.
    """
    suit = led_suit(trick)
    if suit is None:
        return True
    if satisfies_lead_suit(card, suit):
        return True
    return not holds_suit(hand, suit)


def legal_cards(hand: List[Card], trick: Optional[Trick]) -> List[Card]:
    """Cards from the hand that may legally be played into the trick."""
    if trick is None:
        return []
    return [card for card in hand if is_legal_play(hand, card, trick)]


def validate_play(game: Game, player_id: str, card: Card) -> ValidationResult:
    """
    Validate a card play attempt.

    Checks, in order: phase, turn, ownership, suit following.
    """
    result = validate_phase(game, GamePhase.PLAYING)
    if not result:
        return result

    if current_player(game) != player_id:
        return ValidationResult.error(NOT_YOUR_TURN, "It is not your turn to play")

    player: Optional[Player] = game.find_player(player_id)
    if player is None:
        return ValidationResult.error(PLAYER_NOT_FOUND, f"Unknown player {player_id}")

    if card not in player.hand:
        return ValidationResult.error(CARD_NOT_IN_HAND, f"You don't hold {card}")

    trick = game.current_round.current_trick
    if not is_legal_play(player.hand, card, trick):
        return ValidationResult.error(
            ILLEGAL_PLAY,
            f"You must follow {led_suit(trick)}"
        )

    return ValidationResult.success()
