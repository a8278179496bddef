"""
Bid phase tests.
"""

import pytest

from river_engine import engine
from river_engine.constants import GamePhase
from river_engine.errors import (
    INVALID_BID, NOT_YOUR_TURN, WRONG_STATE, StateError, ValidationError
)
from river_engine.validate import current_bidder, forbidden_bid


def test_bid_order_starts_after_dealer(new_game):
    game, ids = new_game(num_players=4)
    rnd = game.current_round
    assert rnd.dealer_index == 0
    assert rnd.bid_order == [ids[1], ids[2], ids[3], ids[0]]
    assert current_bidder(game) == ids[1]


def test_bid_out_of_turn_rejected(new_game):
    game, ids = new_game(num_players=3)
    for wrong in (ids[0], ids[2], "stranger"):
        with pytest.raises(ValidationError) as exc:
            engine.place_bid(game, wrong, 0)
        assert exc.value.code == NOT_YOUR_TURN
    assert game.current_round.bids == {}


@pytest.mark.parametrize("bid", [-1, 2, 1.5, "1", True])
def test_invalid_bid_values(new_game, bid):
    game, ids = new_game(num_players=3)
    assert game.current_round.total_cards == 1
    with pytest.raises(ValidationError) as exc:
        engine.place_bid(game, ids[1], bid)
    assert exc.value.code == INVALID_BID
    assert game.current_round.current_bid_turn == 0


def test_bidding_completes_into_play(new_game):
    game, ids = new_game(num_players=3)
    engine.place_bid(game, ids[1], 1)
    assert game.state == GamePhase.BIDDING
    engine.place_bid(game, ids[2], 0)
    engine.place_bid(game, ids[0], 1)

    rnd = game.current_round
    assert game.state == GamePhase.PLAYING
    assert rnd.bids == {ids[1]: 1, ids[2]: 0, ids[0]: 1}
    assert rnd.current_trick.trick_leader == 1
    assert rnd.current_trick.plays == []
    assert rnd.current_trick.winner_id is None


def test_bid_after_bidding_closed_is_wrong_state(new_game, bid_all):
    game, ids = new_game(num_players=2)
    bid_all(game, [0, 0])
    with pytest.raises(StateError) as exc:
        engine.place_bid(game, ids[1], 0)
    assert exc.value.code == WRONG_STATE


def test_bid_in_lobby_is_wrong_state(new_game):
    game, ids = new_game(num_players=2, start=False)
    with pytest.raises(StateError):
        engine.place_bid(game, ids[0], 0)


def test_dealer_hook_off_by_default(new_game, bid_all):
    game, ids = new_game(num_players=2, max_cards=3)
    # Advance to the two-card round
    game.current_round.total_cards = 2
    engine.place_bid(game, ids[1], 1)
    engine.place_bid(game, ids[0], 1)
    assert game.state == GamePhase.PLAYING


def test_dealer_hook_forbids_matching_total(new_game):
    game, ids = new_game(num_players=3, max_cards=3, dealer_hook=True)
    game.current_round.total_cards = 3
    engine.place_bid(game, ids[1], 1)
    engine.place_bid(game, ids[2], 1)
    assert forbidden_bid(game) == 1

    with pytest.raises(ValidationError) as exc:
        engine.place_bid(game, ids[0], 1)
    assert exc.value.code == INVALID_BID

    engine.place_bid(game, ids[0], 2)
    assert game.state == GamePhase.PLAYING


def test_dealer_hook_ignores_one_card_rounds(new_game):
    game, ids = new_game(num_players=2, max_cards=3, dealer_hook=True)
    assert game.current_round.total_cards == 1
    engine.place_bid(game, ids[1], 0)
    assert forbidden_bid(game) is None
    engine.place_bid(game, ids[0], 1)
    assert game.state == GamePhase.PLAYING


def test_dealer_hook_only_binds_last_bidder(new_game):
    game, ids = new_game(num_players=3, max_cards=3, dealer_hook=True)
    game.current_round.total_cards = 2
    assert forbidden_bid(game) is None
    engine.place_bid(game, ids[1], 2)
    assert forbidden_bid(game) is None
    engine.place_bid(game, ids[2], 1)
    # Others already bid past the cards dealt: nothing left to forbid
    assert forbidden_bid(game) is None
