"""Game constants and utilities"""

from enum import Enum
from typing import Dict, List, Optional


class GamePhase(str, Enum):
    LOBBY = "lobby"
    BIDDING = "bidding"
    PLAYING = "playing"
    SCORING = "scoring"
    FINISHED = "finished"


# Phase changes driven by play; reset may return any phase to the lobby
PHASE_TRANSITIONS: Dict[GamePhase, List[GamePhase]] = {
    GamePhase.LOBBY: [GamePhase.BIDDING],
    GamePhase.BIDDING: [GamePhase.PLAYING],
    GamePhase.PLAYING: [GamePhase.SCORING],
    GamePhase.SCORING: [GamePhase.BIDDING, GamePhase.FINISHED],
    GamePhase.FINISHED: [],
}

HEARTS = "hearts"
DIAMONDS = "diamonds"
CLUBS = "clubs"
SPADES = "spades"

SUITS = [HEARTS, DIAMONDS, CLUBS, SPADES]
TRUMP_SUIT = SPADES
SUIT_SYMBOLS = {HEARTS: "♥", DIAMONDS: "♦", CLUBS: "♣", SPADES: "♠"}

RANKS = list(range(2, 15))  # 2..10, J=11, Q=12, K=13, A=14
FACE_NAMES = {11: "J", 12: "Q", 13: "K", 14: "A"}

JOKER_IDENTITIES = [1, 2]
# Jokers sit above the Ace of spades; Joker 2 outranks Joker 1
JOKER_RANK_BASE = 14

STANDARD_DECK_SIZE = 52
DECK_SIZE = STANDARD_DECK_SIZE + len(JOKER_IDENTITIES)
# Both jokers are kept out of the per-player ceiling
RESERVED_CARDS = len(JOKER_IDENTITIES)

MIN_PLAYERS = 2
MAX_PLAYERS = 6



def max_cards_for_table(num_players: int) -> int:
    """Largest hand size that keeps totalCards * numPlayers + 2 within the deck."""
    if num_players < 1:
        return 0
    return (DECK_SIZE - RESERVED_CARDS) // num_players


def rank_label(rank: int) -> str:
    return FACE_NAMES.get(rank, str(rank))


def parse_suit(value: str) -> Optional[str]:
    suit = value.strip().lower() if isinstance(value, str) else None
    return suit if suit in SUITS else None
