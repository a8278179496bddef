"""
State serialization and sanitization utilities.
"""

from typing import Any, Dict, List, Optional

from .comparator import sort_hand
from .constants import parse_suit
from .models import Card, Game, Joker, Round, RoundResult, StandardCard, Trick


def card_to_dict(card: Card) -> Dict[str, Any]:
    if isinstance(card, Joker):
        return {"joker": card.identity}
    return {"suit": card.suit, "rank": card.rank}


def card_from_dict(data: Dict[str, Any]) -> Card:
    """
    Parse the wire form of a card.

    Accepts ``{"joker": 1}`` / ``{"joker": 2}`` or ``{"suit": "hearts", "rank": 12}``.

    Raises:
        ValueError: if the payload does not describe a real card
    """
    if not isinstance(data, dict):
        raise ValueError(f"Card must be an object, got {data!r}")
    if data.get("joker") is not None:
        identity = data["joker"]
        if isinstance(identity, bool) or not isinstance(identity, int):
            raise ValueError(f"Joker must be 1 or 2, got {identity!r}")
        return Joker(identity)
    suit = parse_suit(data.get("suit"))
    if suit is None:
        raise ValueError(f"Unknown suit: {data.get('suit')!r}")
    rank = data.get("rank")
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise ValueError(f"Rank must be an integer, got {rank!r}")
    return StandardCard(suit, rank)


def _serialize_trick(trick: Optional[Trick]) -> Optional[Dict[str, Any]]:
    if trick is None:
        return None
    return {
        "trickLeader": trick.trick_leader,
        "trickTurnIndex": trick.trick_turn_index,
        "plays": [
            {"playerId": play.player_id, "card": card_to_dict(play.card)}
            for play in trick.plays
        ],
        "winnerID": trick.winner_id,
    }


def _serialize_round(rnd: Optional[Round]) -> Optional[Dict[str, Any]]:
    if rnd is None:
        return None
    return {
        "roundNumber": rnd.round_number,
        "totalCards": rnd.total_cards,
        "dealerIndex": rnd.dealer_index,
        "bidOrder": rnd.bid_order.copy(),
        "currentBidTurn": rnd.current_bid_turn,
        "bids": dict(rnd.bids),
        "currentTrick": _serialize_trick(rnd.current_trick),
        "lastTrick": _serialize_trick(rnd.last_trick),
        "tricksPlayed": len(rnd.completed_tricks),
    }


def _serialize_round_result(record: RoundResult) -> Dict[str, Any]:
    return {
        "roundNumber": record.round_number,
        "totalCards": record.total_cards,
        "results": [
            {
                "playerId": r.player_id,
                "bid": r.bid,
                "tricksWon": r.tricks_won,
                "roundScore": r.round_score,
            }
            for r in record.results
        ],
    }


def sanitize_state(game: Game, viewer_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Sanitize game state for transmission to clients.

    Args:
        game: Game to sanitize
        viewer_id: ID of the player viewing the state (to show their cards)

    Returns:
        Plain dict safe for JSON encoding. Only the viewer's own hand is
        included; every other player shows a card count.
    """
    players: List[Dict[str, Any]] = []
    for player in game.players:
        sanitized_player = {
            "id": player.id,
            "displayName": player.display_name,
            "isBot": player.is_bot,
            "score": player.score,
            "tricksWon": player.tricks_won,
            "missedBids": player.missed_bids,
            "handCount": len(player.hand),
        }

        # Show full hand only to the viewer
        if viewer_id is not None and player.id == viewer_id:
            sanitized_player["hand"] = [card_to_dict(c) for c in sort_hand(player.hand)]

        players.append(sanitized_player)

    return {
        "id": game.id,
        "version": game.version,
        "state": game.state.value,
        "maxCards": game.max_cards,
        "roundSequence": game.round_sequence.copy(),
        "players": players,
        "currentRound": _serialize_round(game.current_round),
        "previousTrick": _serialize_trick(game.previous_trick),
        "roundResults": [_serialize_round_result(r) for r in game.round_results],
    }


def get_public_game_info(game: Game) -> Dict[str, Any]:
    """Public information about a game for lobby listings."""
    return {
        "id": game.id,
        "state": game.state.value,
        "playerCount": game.num_players,
        "maxPlayers": game.rules.max_players,
        "players": [
            {"id": p.id, "displayName": p.display_name, "isBot": p.is_bot}
            for p in game.players
        ],
    }
