# engine_py/src/river_engine/errors.py

KIND_VALIDATION = "validation"
KIND_STATE = "state"
KIND_LOOKUP = "lookup"


class GameError(Exception):
    """Base exception for game-related errors."""
    kind = KIND_VALIDATION

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict:
        return {"code": self.code, "kind": self.kind, "message": self.message}


class ValidationError(GameError):
    """The command is malformed or breaks a rule; the caller should re-prompt."""
    kind = KIND_VALIDATION


class StateError(GameError):
    """The command does not fit the game's current phase; the caller should resync."""
    kind = KIND_STATE


class LookupFailure(GameError):
    """The referenced game or player does not exist."""
    kind = KIND_LOOKUP


# Specific error codes
INVALID_CONFIG = "INVALID_CONFIG"
INVALID_BID = "INVALID_BID"
CARD_NOT_IN_HAND = "CARD_NOT_IN_HAND"
ILLEGAL_PLAY = "ILLEGAL_PLAY"
NOT_YOUR_TURN = "NOT_YOUR_TURN"
INSUFFICIENT_CARDS = "INSUFFICIENT_CARDS"
WRONG_STATE = "WRONG_STATE"
GAME_FULL = "GAME_FULL"
NOT_ENOUGH_PLAYERS = "NOT_ENOUGH_PLAYERS"
GAME_NOT_FOUND = "GAME_NOT_FOUND"
PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
INTERNAL_ERROR = "INTERNAL_ERROR"

_ERROR_CLASSES = {
    INVALID_CONFIG: ValidationError,
    INVALID_BID: ValidationError,
    CARD_NOT_IN_HAND: ValidationError,
    ILLEGAL_PLAY: ValidationError,
    NOT_YOUR_TURN: ValidationError,
    INSUFFICIENT_CARDS: ValidationError,
    WRONG_STATE: StateError,
    GAME_FULL: StateError,
    NOT_ENOUGH_PLAYERS: StateError,
    GAME_NOT_FOUND: LookupFailure,
    PLAYER_NOT_FOUND: LookupFailure,
}


def make_error(code: str, message: str) -> GameError:
    return _ERROR_CLASSES.get(code, GameError)(code, message)


# Helper function to raise common errors
def raise_error(code: str, message: str):
    raise make_error(code, message)
