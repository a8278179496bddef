"""Game engine: lifecycle, bidding, trick play and round settlement.

Every function here works on a Game in place and raises a GameError before
touching anything when a command is rejected. Locking and copy-on-write live
in GameManager; these functions assume the caller already holds the game.
"""

import logging
import random
import uuid
from typing import List, Optional, Tuple

from .comparator import trick_winner
from .constants import PHASE_TRANSITIONS, GamePhase, max_cards_for_table
from .errors import (
    GAME_FULL, INVALID_CONFIG, NOT_ENOUGH_PLAYERS, raise_error
)
from .models import Card, Game, Play, Player, PlayerRoundResult, Round, RoundResult, Trick
from .rules import RuleConfig, default_rules
from .scoring import get_policy, is_hit
from .shuffle import create_deck, deal_cards, shuffle_deck
from .validate import require_state, validate_bid, validate_play

logger = logging.getLogger(__name__)


def round_sequence(max_cards: int) -> List[int]:
    """Cards per round: up the river to max_cards, then back down to 1."""
    if max_cards < 1:
        return []
    return list(range(1, max_cards + 1)) + list(range(max_cards - 1, 0, -1))


def _transition(game: Game, phase: GamePhase) -> None:
    if phase not in PHASE_TRANSITIONS[game.state]:
        raise RuntimeError(f"Illegal phase change {game.state.value} -> {phase.value}")
    game.state = phase


def _new_player_id() -> str:
    return str(uuid.uuid4())


def _check_display_name(display_name: str) -> str:
    name = display_name.strip() if isinstance(display_name, str) else ""
    if not name:
        raise_error(INVALID_CONFIG, "displayName is required")
    return name


# ===================== LIFECYCLE =====================

def create_game(
    game_id: str,
    display_name: str,
    max_cards: Optional[int],
    rules: Optional[RuleConfig] = None
) -> Tuple[Game, str]:
    """Create a lobby with its creator seated; returns the game and the creator's id."""
    rules = rules or default_rules.model_copy()
    name = _check_display_name(display_name)

    if max_cards is not None:
        if isinstance(max_cards, bool) or not isinstance(max_cards, int) or max_cards < 1:
            raise_error(INVALID_CONFIG, f"maxCards must be at least 1, got {max_cards!r}")
        ceiling = rules.largest_max_cards()
        if max_cards > ceiling:
            raise_error(
                INVALID_CONFIG,
                f"maxCards {max_cards} cannot be dealt to {rules.min_players} players "
                f"(at most {ceiling})"
            )

    game = Game(id=game_id, max_cards=max_cards, rules=rules)
    creator = Player(id=_new_player_id(), display_name=name)
    game.players.append(creator)
    logger.info(f"Game {game_id} created by {name} (maxCards={max_cards})")
    return game, creator.id


def join_game(game: Game, display_name: str, is_bot: bool = False) -> str:
    if game.state != GamePhase.LOBBY:
        raise_error(GAME_FULL, "Game already started")
    if game.num_players >= game.rules.max_players:
        raise_error(GAME_FULL, f"Game is full ({game.rules.max_players} players)")
    name = _check_display_name(display_name)

    player = Player(id=_new_player_id(), display_name=name, is_bot=is_bot)
    game.players.append(player)
    game.version += 1
    logger.info(f"{name} joined game {game.id} in seat {game.num_players - 1}")
    return player.id


def start_game(game: Game, seed: Optional[int] = None) -> None:
    """Fix the round sequence and deal the first round."""
    require_state(game, GamePhase.LOBBY)
    n = game.num_players
    if n < game.rules.min_players:
        raise_error(
            NOT_ENOUGH_PLAYERS,
            f"Need at least {game.rules.min_players} players to start (have {n})"
        )

    table_ceiling = max_cards_for_table(n)
    ceiling = game.max_cards if game.max_cards is not None else table_ceiling
    if ceiling > table_ceiling:
        logger.warning(
            f"Game {game.id}: maxCards {ceiling} too large for {n} players, using {table_ceiling}"
        )
        ceiling = table_ceiling

    game.round_sequence = round_sequence(ceiling)
    game.seed = seed
    game.round_results = []
    game.current_round = None
    game.previous_trick = None
    if game.rules.random_first_dealer:
        first_dealer = random.Random(seed).randrange(n) if seed is not None else random.randrange(n)
    else:
        first_dealer = 0
    logger.info(f"Game {game.id} started with {n} players, rounds {game.round_sequence}")
    start_round(game, dealer_index=first_dealer, seed=seed)


def reset_game(game: Game) -> None:
    """Back to the lobby with the same id and seats; all progress cleared."""
    for player in game.players:
        reset_player_for_round(player)
        player.score = 0
        player.missed_bids = 0
    game.current_round = None
    game.round_results = []
    game.round_sequence = []
    game.previous_trick = None
    game.seed = None
    game.state = GamePhase.LOBBY
    game.version += 1
    logger.info(f"Game {game.id} reset to lobby")


# ===================== ROUNDS =====================

def reset_player_for_round(player: Player) -> None:
    player.hand = []
    player.tricks_won = 0


def start_round(game: Game, dealer_index: Optional[int] = None, seed: Optional[int] = None) -> None:
    """
    Deal the next round of the sequence and open bidding.

    The dealer rotates one seat per round unless given explicitly; bidding
    starts with the seat after the dealer and ends with the dealer.
    """
    number = len(game.round_results) + 1
    if number > len(game.round_sequence):
        raise RuntimeError(f"Game {game.id} has no round {number}")
    total_cards = game.round_sequence[number - 1]
    n = game.num_players

    if dealer_index is None:
        previous = game.current_round.dealer_index if game.current_round else -1
        dealer_index = (previous + 1) % n

    round_seed = seed + number if seed is not None else None
    hands = deal_cards(shuffle_deck(create_deck(), round_seed), n, total_cards)

    for player, hand in zip(game.players, hands):
        reset_player_for_round(player)
        player.hand = hand

    game.current_round = Round(
        round_number=number,
        total_cards=total_cards,
        dealer_index=dealer_index,
        bid_order=[game.players[(dealer_index + i) % n].id for i in range(1, n + 1)],
    )
    _transition(game, GamePhase.BIDDING)
    game.version += 1
    logger.info(
        f"Game {game.id}: round {number} deals {total_cards} card(s), "
        f"dealer {game.players[dealer_index].display_name}"
    )


def score_round(game: Game) -> None:
    """Settle the round, then deal the next one or finish the game."""
    _transition(game, GamePhase.SCORING)
    rnd = game.current_round
    policy = get_policy(game.rules.scoring_policy)

    record = RoundResult(round_number=rnd.round_number, total_cards=rnd.total_cards)
    for player in game.players:
        bid = rnd.bids[player.id]
        points = policy(bid, player.tricks_won)
        player.score += points
        if not is_hit(bid, player.tricks_won):
            player.missed_bids += 1
        record.results.append(PlayerRoundResult(
            player_id=player.id,
            bid=bid,
            tricks_won=player.tricks_won,
            round_score=points,
        ))
    game.round_results.append(record)
    logger.info(f"Game {game.id}: round {rnd.round_number} scored")

    if len(game.round_results) < len(game.round_sequence):
        start_round(game, seed=game.seed)
    else:
        _transition(game, GamePhase.FINISHED)
        game.version += 1
        leader = max(game.players, key=lambda p: p.score)
        logger.info(f"Game {game.id} finished; {leader.display_name} leads with {leader.score}")


# ===================== BIDDING =====================

def place_bid(game: Game, player_id: str, bid: int) -> None:
    validate_bid(game, player_id, bid).raise_if_invalid()

    rnd = game.current_round
    rnd.bids[player_id] = bid
    rnd.current_bid_turn += 1
    logger.debug(f"Game {game.id}: {player_id} bids {bid}")

    if rnd.bidding_complete:
        leader = (rnd.dealer_index + 1) % game.num_players
        rnd.current_trick = Trick(trick_leader=leader)
        _transition(game, GamePhase.PLAYING)
        logger.debug(f"Game {game.id}: bidding closed, bids {rnd.bids}")
    game.version += 1


# ===================== TRICKS =====================

def play_card(game: Game, player_id: str, card: Card) -> None:
    validate_play(game, player_id, card).raise_if_invalid()

    rnd = game.current_round
    trick = rnd.current_trick
    player = game.find_player(player_id)
    player.hand.remove(card)
    trick.plays.append(Play(player_id=player_id, card=card))
    trick.trick_turn_index += 1
    logger.debug(f"Game {game.id}: {player.display_name} plays {card}")

    if len(trick.plays) == game.num_players:
        _complete_trick(game)
    game.version += 1


def _complete_trick(game: Game) -> None:
    rnd = game.current_round
    trick = rnd.current_trick
    winning = trick_winner(trick.plays)
    trick.winner_id = winning.player_id
    winner = game.find_player(winning.player_id)
    winner.tricks_won += 1
    rnd.completed_tricks.append(trick)
    logger.debug(f"Game {game.id}: {winner.display_name} wins the trick with {winning.card}")

    if sum(p.tricks_won for p in game.players) == rnd.total_cards:
        rnd.current_trick = None
        game.previous_trick = trick
        score_round(game)
    else:
        rnd.current_trick = Trick(trick_leader=game.seat_of(winner.id))
