"""Game models and data structures"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .constants import GamePhase, JOKER_IDENTITIES, RANKS, SUITS, SUIT_SYMBOLS, rank_label
from .rules import RuleConfig, default_rules


@dataclass(frozen=True)
class StandardCard:
    suit: str
    rank: int  # 2..14, Ace high

    def __post_init__(self):
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}. Must be one of {SUITS}")
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}. Must be between 2 and 14")

    def __str__(self) -> str:
        return f"{rank_label(self.rank)}{SUIT_SYMBOLS[self.suit]}"


@dataclass(frozen=True)
class Joker:
    identity: int  # 1 or 2

    def __post_init__(self):
        if self.identity not in JOKER_IDENTITIES:
            raise ValueError(f"Invalid joker identity: {self.identity}")

    def __str__(self) -> str:
        return f"Joker{self.identity}"


Card = Union[StandardCard, Joker]


@dataclass
class Player:
    id: str
    display_name: str
    hand: List[Card] = field(default_factory=list)
    score: int = 0
    tricks_won: int = 0
    missed_bids: int = 0
    is_bot: bool = False


@dataclass
class Play:
    player_id: str
    card: Card


@dataclass
class Trick:
    trick_leader: int  # seat index
    trick_turn_index: int = 0
    plays: List[Play] = field(default_factory=list)
    winner_id: Optional[str] = None


@dataclass
class PlayerRoundResult:
    player_id: str
    bid: int
    tricks_won: int
    round_score: int


@dataclass
class RoundResult:
    round_number: int
    total_cards: int
    results: List[PlayerRoundResult] = field(default_factory=list)


@dataclass
class Round:
    round_number: int
    total_cards: int
    dealer_index: int
    bid_order: List[str] = field(default_factory=list)
    bids: Dict[str, int] = field(default_factory=dict)
    current_bid_turn: int = 0
    current_trick: Optional[Trick] = None
    completed_tricks: List[Trick] = field(default_factory=list)

    @property
    def bidding_complete(self) -> bool:
        return self.current_bid_turn >= len(self.bid_order)

    @property
    def last_trick(self) -> Optional[Trick]:
        return self.completed_tricks[-1] if self.completed_tricks else None


@dataclass
class Game:
    id: str
    max_cards: Optional[int] = None  # None: as many as the table allows
    state: GamePhase = GamePhase.LOBBY
    players: List[Player] = field(default_factory=list)
    current_round: Optional[Round] = None
    round_results: List[RoundResult] = field(default_factory=list)
    previous_trick: Optional[Trick] = None  # final trick of the last settled round
    round_sequence: List[int] = field(default_factory=list)
    rules: RuleConfig = field(default_factory=lambda: default_rules.model_copy())
    seed: Optional[int] = None  # shuffle seed for reproducible games
    version: int = 0

    @property
    def num_players(self) -> int:
        return len(self.players)

    def find_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def seat_of(self, player_id: str) -> int:
        for seat, player in enumerate(self.players):
            if player.id == player_id:
                return seat
        return -1
