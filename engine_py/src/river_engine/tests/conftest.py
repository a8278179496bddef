"""Shared fixtures for the river engine tests."""

import pytest

from river_engine import engine
from river_engine.manager import GameManager
from river_engine.models import Joker, StandardCard
from river_engine.rules import create_rules


def card(text: str):
    """Shorthand: '10S' -> 10 of spades, 'QH' -> queen of hearts, 'J1' -> Joker 1."""
    if text in ("J1", "J2"):
        return Joker(int(text[1]))
    suits = {"H": "hearts", "D": "diamonds", "C": "clubs", "S": "spades"}
    faces = {"J": 11, "Q": 12, "K": 13, "A": 14}
    rank_text, suit = text[:-1], suits[text[-1]]
    rank = faces[rank_text] if rank_text in faces else int(rank_text)
    return StandardCard(suit, rank)


@pytest.fixture
def new_game():
    """Factory for a started game with n players; returns (game, [player ids])."""
    def _new_game(num_players=3, max_cards=3, seed=7, start=True, **rule_overrides):
        rules = create_rules(**rule_overrides)
        game, creator = engine.create_game("g-test", "Player 0", max_cards, rules)
        ids = [creator]
        for i in range(1, num_players):
            ids.append(engine.join_game(game, f"Player {i}"))
        if start:
            engine.start_game(game, seed=seed)
        return game, ids
    return _new_game


@pytest.fixture
def set_hands():
    """Replace every hand in seat order with the given card texts."""
    def _set_hands(game, *hands):
        for player, hand in zip(game.players, hands):
            player.hand = [card(c) for c in hand]
    return _set_hands


@pytest.fixture
def bid_all():
    """Place bids in bid order; bids given by seat."""
    def _bid_all(game, bids_by_seat):
        for player_id in list(game.current_round.bid_order):
            seat = game.seat_of(player_id)
            engine.place_bid(game, player_id, bids_by_seat[seat])
    return _bid_all


@pytest.fixture
def manager():
    return GameManager()
