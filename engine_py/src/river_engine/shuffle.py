"""
Card shuffling and dealing utilities.
"""

import random
from typing import List, Optional

from .constants import DECK_SIZE, JOKER_IDENTITIES, RANKS, SUITS
from .errors import INSUFFICIENT_CARDS, raise_error
from .models import Card, Game, Joker, StandardCard


def create_deck() -> List[Card]:
    """Create the 52 standard cards plus both jokers."""
    deck: List[Card] = [StandardCard(suit, rank) for suit in SUITS for rank in RANKS]
    deck.extend(Joker(identity) for identity in JOKER_IDENTITIES)
    return deck


def shuffle_deck(deck: List[Card], seed: Optional[int] = None) -> List[Card]:
    """
    Shuffle a deck deterministically if seed is provided.

    Args:
        deck: Cards to shuffle
        seed: Optional seed for deterministic shuffling

    Returns:
        Shuffled copy of the deck
    """
    deck_copy = deck.copy()

    if seed is not None:
        rng = random.Random(seed)
        rng.shuffle(deck_copy)
    else:
        random.shuffle(deck_copy)

    return deck_copy


def deal_cards(deck: List[Card], num_players: int, cards_per_player: int) -> List[List[Card]]:
    """
    Deal cards round-robin from the top of the deck.

    Whatever is left after the deal is the round's undealt residue and is
    simply not used.

    Args:
        deck: Shuffled deck of cards
        num_players: Number of hands to deal
        cards_per_player: Cards each player receives this round

    Returns:
        One list of cards per seat, in seat order

    Raises:
        ValidationError: INSUFFICIENT_CARDS if the deck cannot cover the deal
    """
    total_needed = cards_per_player * num_players
    if total_needed > len(deck) or total_needed > DECK_SIZE:
        raise_error(
            INSUFFICIENT_CARDS,
            f"Cannot deal {cards_per_player} cards to {num_players} players "
            f"(need {total_needed}, only {len(deck)} available)"
        )

    hands: List[List[Card]] = [[] for _ in range(num_players)]
    for i in range(total_needed):
        hands[i % num_players].append(deck[i])
    return hands


def validate_deck_integrity(game: Game) -> bool:
    """
    Check that no card is held twice across hands and plays of the current round.
    """
    seen = []
    for player in game.players:
        seen.extend(player.hand)
    rnd = game.current_round
    if rnd is not None:
        for trick in rnd.completed_tricks:
            seen.extend(p.card for p in trick.plays)
        if rnd.current_trick is not None:
            seen.extend(p.card for p in rnd.current_trick.plays)
    return len(seen) == len(set(seen)) and set(seen) <= set(create_deck())
