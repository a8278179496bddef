"""
REST transport tests.
"""

import pytest
from fastapi.testclient import TestClient

from river_engine.manager import GameManager
from river_engine.rest.server import create_app


@pytest.fixture
def client():
    return TestClient(create_app(GameManager()))


@pytest.fixture
def started(client):
    """Two-player game, started with a fixed seed."""
    created = client.post("/games/create", json={"displayName": "Ann", "maxCards": 2}).json()
    joined = client.post("/games/join", json={"gameId": created["gameId"], "displayName": "Bob"}).json()
    response = client.post("/games/start", json={"gameId": created["gameId"], "seed": 4})
    assert response.status_code == 200
    return created["gameId"], created["playerId"], joined["playerId"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_and_join(client):
    response = client.post("/games/create", json={"displayName": "Ann", "maxCards": 3})
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"gameId", "playerId"}

    response = client.post("/games/join", json={"gameId": body["gameId"], "displayName": "Bob"})
    assert response.status_code == 200
    assert response.json()["gameId"] == body["gameId"]

    listing = client.get("/games").json()
    assert listing[0]["playerCount"] == 2


def test_create_invalid_config(client):
    response = client.post("/games/create", json={"displayName": "Ann", "maxCards": 0})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_CONFIG"
    assert response.json()["error"]["kind"] == "validation"


def test_malformed_request(client):
    response = client.post("/games/create", json={"maxCards": 3})
    assert response.status_code == 422


def test_game_not_found(client):
    response = client.get("/games/state", params={"gameId": "nope"})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "GAME_NOT_FOUND"


def test_state_shows_only_own_hand(client, started):
    game_id, ann, bob = started
    state = client.get("/games/state", params={"gameId": game_id, "playerId": ann}).json()
    players = {p["id"]: p for p in state["players"]}
    assert "hand" in players[ann]
    assert "hand" not in players[bob]
    assert players[bob]["handCount"] == 1
    assert state["state"] == "bidding"
    assert state["currentRound"]["bidOrder"] == [bob, ann]


def test_bid_out_of_turn_is_400(client, started):
    game_id, ann, bob = started
    response = client.post("/games/bid", json={"gameId": game_id, "playerId": ann, "bid": 0})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NOT_YOUR_TURN"


def test_play_in_bidding_is_409(client, started):
    game_id, ann, bob = started
    response = client.post("/games/play", json={
        "gameId": game_id, "playerId": bob, "card": {"suit": "hearts", "rank": 2}
    })
    assert response.status_code == 409
    assert response.json()["error"]["kind"] == "state"


def test_bad_card_payload_is_422(client, started):
    game_id, ann, bob = started
    response = client.post("/games/play", json={
        "gameId": game_id, "playerId": bob, "card": {"suit": "cups", "rank": 2}
    })
    assert response.status_code == 422


@pytest.mark.parametrize("joker", [[1], 1.5, True, "1", 3])
def test_bad_joker_id_is_422(client, started, joker):
    game_id, ann, bob = started
    response = client.post("/games/play", json={
        "gameId": game_id, "playerId": bob, "card": {"joker": joker}
    })
    assert response.status_code == 422


def test_play_a_round(client, started):
    game_id, ann, bob = started
    client.post("/games/bid", json={"gameId": game_id, "playerId": bob, "bid": 0})
    state = client.post("/games/bid", json={"gameId": game_id, "playerId": ann, "bid": 1}).json()
    assert state["state"] == "playing"
    assert state["currentRound"]["currentTrick"]["trickLeader"] == 1

    bob_state = client.get("/games/state", params={"gameId": game_id, "playerId": bob}).json()
    bob_card = next(p for p in bob_state["players"] if p["id"] == bob)["hand"][0]
    state = client.post("/games/play", json={"gameId": game_id, "playerId": bob, "card": bob_card}).json()
    assert state["currentRound"]["currentTrick"]["plays"][0]["card"] == bob_card

    ann_card = next(p for p in state["players"] if p["id"] != bob)
    assert "hand" not in ann_card

    ann_state = client.get("/games/state", params={"gameId": game_id, "playerId": ann}).json()
    ann_hand = next(p for p in ann_state["players"] if p["id"] == ann)["hand"]
    played = None
    for candidate in ann_hand:
        response = client.post("/games/play", json={"gameId": game_id, "playerId": ann, "card": candidate})
        if response.status_code == 200:
            played = response.json()
            break
    assert played is not None
    assert len(played["roundResults"]) == 1
    assert played["currentRound"]["roundNumber"] == 2
    assert sum(r["tricksWon"] for r in played["roundResults"][0]["results"]) == 1

    # Round 2 is already bidding; the settled trick stays visible
    assert played["currentRound"]["lastTrick"] is None
    previous = played["previousTrick"]
    assert [p["playerId"] for p in previous["plays"]] == [bob, ann]
    assert previous["plays"][0]["card"] == bob_card
    assert previous["winnerID"] in (ann, bob)


def test_reset(client, started):
    game_id, ann, bob = started
    state = client.post("/games/reset", json={"gameId": game_id}).json()
    assert state["state"] == "lobby"
    assert state["currentRound"] is None
    assert [p["id"] for p in state["players"]] == [ann, bob]
