"""
REST request models and error mapping.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import KIND_LOOKUP, KIND_STATE, KIND_VALIDATION, GameError
from ..serialization import card_from_dict


class BaseRequest(BaseModel):
    """Base request model; accepts the client's camelCase keys."""
    model_config = ConfigDict(populate_by_name=True)


class CreateRequest(BaseRequest):
    display_name: str = Field(..., alias="displayName", min_length=1, max_length=30)
    max_cards: Optional[int] = Field(default=None, alias="maxCards")


class JoinRequest(BaseRequest):
    game_id: str = Field(..., alias="gameId", min_length=1)
    display_name: str = Field(..., alias="displayName", min_length=1, max_length=30)
    is_bot: bool = Field(default=False, alias="isBot")


class StartRequest(BaseRequest):
    game_id: str = Field(..., alias="gameId", min_length=1)
    player_id: Optional[str] = Field(default=None, alias="playerId")
    seed: Optional[int] = None


class BidRequest(BaseRequest):
    game_id: str = Field(..., alias="gameId", min_length=1)
    player_id: str = Field(..., alias="playerId", min_length=1)
    bid: int


class PlayRequest(BaseRequest):
    game_id: str = Field(..., alias="gameId", min_length=1)
    player_id: str = Field(..., alias="playerId", min_length=1)
    card: Any

    @field_validator("card")
    @classmethod
    def parse_card(cls, v):
        return card_from_dict(v)


class ResetRequest(BaseRequest):
    game_id: str = Field(..., alias="gameId", min_length=1)
    player_id: Optional[str] = Field(default=None, alias="playerId")


# HTTP status per error kind
STATUS_BY_KIND = {
    KIND_VALIDATION: 400,
    KIND_STATE: 409,
    KIND_LOOKUP: 404,
}


def status_for(error: GameError) -> int:
    return STATUS_BY_KIND.get(error.kind, 400)


def create_error_body(error: GameError) -> dict:
    return {"error": error.to_dict()}
