"""
FastAPI REST server for the Up and Down the River engine.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from ..errors import INTERNAL_ERROR, GameError
from ..manager import GameManager
from .events import (
    BidRequest, CreateRequest, JoinRequest, PlayRequest, ResetRequest, StartRequest,
    create_error_body, status_for
)

logger = logging.getLogger(__name__)


def create_app(manager: Optional[GameManager] = None) -> FastAPI:
    """Build the app around a GameManager (a fresh one unless given)."""
    manager = manager or GameManager()

    app = FastAPI(
        title="Up and Down the River API",
        version="1.0.0",
        default_response_class=ORJSONResponse,
    )
    app.state.manager = manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(GameError)
    async def game_error_handler(request: Request, exc: GameError):
        return ORJSONResponse(status_code=status_for(exc), content=create_error_body(exc))

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return ORJSONResponse(
            status_code=500,
            content={"error": {"code": INTERNAL_ERROR, "kind": "internal", "message": "Internal error"}},
        )

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "games": len(manager.games)}

    @app.get("/games")
    def list_games():
        return manager.list_games()

    @app.post("/games/create")
    def create_game(req: CreateRequest):
        game_id, player_id = manager.create_game(req.display_name, req.max_cards)
        return {"gameId": game_id, "playerId": player_id}

    @app.post("/games/join")
    def join_game(req: JoinRequest):
        player_id = manager.join_game(req.game_id, req.display_name, is_bot=req.is_bot)
        return {"gameId": req.game_id, "playerId": player_id}

    @app.post("/games/start")
    def start_game(req: StartRequest):
        return manager.start_game(req.game_id, seed=req.seed, viewer_id=req.player_id)

    @app.post("/games/bid")
    def place_bid(req: BidRequest):
        return manager.place_bid(req.game_id, req.player_id, req.bid)

    @app.post("/games/play")
    def play_card(req: PlayRequest):
        return manager.play_card(req.game_id, req.player_id, req.card)

    @app.get("/games/state")
    def get_state(gameId: str, playerId: Optional[str] = None):
        return manager.get_state(gameId, viewer_id=playerId)

    @app.post("/games/reset")
    def reset_game(req: ResetRequest):
        return manager.reset_game(req.game_id, viewer_id=req.player_id)

    return app


app = create_app()
