"""
Card ordering, trump classification and trick resolution.
"""

from typing import List, Optional, Sequence

from .constants import JOKER_RANK_BASE, SUITS, TRUMP_SUIT
from .models import Card, Joker, Play, StandardCard, Trick


def rank_value(card: Card) -> int:
    """
    Numeric strength of a card for trick comparison.

    Standard cards map to their rank (2-14, Ace high). The jokers take the two
    values above the Ace, Joker 2 highest, so no two cards ever tie.
    """
    if isinstance(card, Joker):
        return JOKER_RANK_BASE + card.identity
    return card.rank


def is_trump(card: Card) -> bool:
    """Jokers and spades are trump."""
    if isinstance(card, Joker):
        return True
    return card.suit == TRUMP_SUIT


def satisfies_lead_suit(card: Card, led_suit: Optional[str]) -> bool:
    """A joker follows any suit; a standard card only its own."""
    if led_suit is None or isinstance(card, Joker):
        return True
    return card.suit == led_suit


def led_suit(trick: Trick) -> Optional[str]:
    """
    Suit that must be followed in this trick.

    Returns None while the trick is empty. A joker lead is treated as a
    spade lead, since the jokers are the top spades for following purposes.
    """
    if not trick.plays:
        return None
    lead = trick.plays[0].card
    if isinstance(lead, Joker):
        return TRUMP_SUIT
    return lead.suit


def holds_suit(hand: Sequence[Card], suit: str) -> bool:
    """True if the hand contains a standard card of the suit (jokers don't count)."""
    return any(isinstance(c, StandardCard) and c.suit == suit for c in hand)


def compare_cards(card_a: Card, card_b: Card, lead: Optional[str]) -> int:
    """
    Compare two cards played into the same trick.

    Returns:
        > 0 if card_a beats card_b
        < 0 if card_b beats card_a
        0 if neither can beat the other (two off-suit discards)
    """
    trump_a, trump_b = is_trump(card_a), is_trump(card_b)
    if trump_a and trump_b:
        return rank_value(card_a) - rank_value(card_b)
    if trump_a:
        return 1
    if trump_b:
        return -1
    follows_a = isinstance(card_a, StandardCard) and card_a.suit == lead
    follows_b = isinstance(card_b, StandardCard) and card_b.suit == lead
    if follows_a and follows_b:
        return rank_value(card_a) - rank_value(card_b)
    if follows_a:
        return 1
    if follows_b:
        return -1
    return 0


def trick_winner(plays: List[Play]) -> Play:
    """
    Pick the winning play of a complete trick.

    If any trump was played the highest trump wins, otherwise the highest card
    of the led suit wins.
    """
    if not plays:
        raise ValueError("Cannot determine the winner of an empty trick")

    trumps = [p for p in plays if is_trump(p.card)]
    if trumps:
        return max(trumps, key=lambda p: rank_value(p.card))

    lead = plays[0].card.suit
    followers = [p for p in plays if p.card.suit == lead]
    return max(followers, key=lambda p: rank_value(p.card))


def card_sort_key(card: Card):
    """Group by suit, trumps last, jokers at the very end."""
    if isinstance(card, Joker):
        return (len(SUITS), rank_value(card))
    return (SUITS.index(card.suit), card.rank)


def sort_hand(hand: Sequence[Card]) -> List[Card]:
    return sorted(hand, key=card_sort_key)
