"""Session manager: owns every active game and serializes commands per game"""

import copy
import logging
import threading
import uuid
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Tuple

from . import engine
from .bots import BaseBot, GreedyBot
from .errors import GAME_NOT_FOUND, GameError, PLAYER_NOT_FOUND, raise_error
from .models import Card, Game
from .rules import RuleConfig
from .serialization import get_public_game_info, sanitize_state
from .validate import legal_cards

logger = logging.getLogger(__name__)

# Upper bound on bot moves per command; a full game at six seats needs far fewer
MAX_BOT_MOVES = 10_000


class GameManager:
    """
    In-memory registry of games.

    Each game has its own lock, held for the whole of any command against it.
    Mutating commands run against a deep copy that is only installed when the
    command succeeds, so a rejected command leaves the game untouched.
    """

    def __init__(self, bot_factory: Callable[[str], BaseBot] = GreedyBot):
        self.games: Dict[str, Game] = {}
        self.game_locks = defaultdict(threading.Lock)
        self._registry_lock = threading.Lock()
        self.bot_factory = bot_factory

    # ---------- registry ----------

    def _lock_for(self, game_id: str) -> threading.Lock:
        with self._registry_lock:
            if game_id not in self.games:
                raise_error(GAME_NOT_FOUND, f"Game {game_id} not found")
            return self.game_locks[game_id]

    def _get(self, game_id: str) -> Game:
        game = self.games.get(game_id)
        if game is None:
            raise_error(GAME_NOT_FOUND, f"Game {game_id} not found")
        return game

    def _mutate(self, game_id: str, action: Callable[[Game], object]):
        """Run action on a working copy of the game and commit it on success."""
        with self._lock_for(game_id):
            working = copy.deepcopy(self._get(game_id))
            try:
                result = action(working)
                self._run_bots(working)
            except GameError as e:
                logger.warning(f"Game {game_id}: rejected [{e.code}] {e.message}")
                raise
            self.games[game_id] = working
            return working, result

    # ---------- operations ----------

    def create_game(
        self,
        display_name: str,
        max_cards: Optional[int],
        rules: Optional[RuleConfig] = None
    ) -> Tuple[str, str]:
        game_id = str(uuid.uuid4())
        game, player_id = engine.create_game(game_id, display_name, max_cards, rules)
        with self._registry_lock:
            self.games[game_id] = game
        return game_id, player_id

    def join_game(self, game_id: str, display_name: str, is_bot: bool = False) -> str:
        _, player_id = self._mutate(
            game_id, lambda g: engine.join_game(g, display_name, is_bot=is_bot)
        )
        return player_id

    def start_game(self, game_id: str, seed: Optional[int] = None, viewer_id: Optional[str] = None) -> dict:
        game, _ = self._mutate(game_id, lambda g: engine.start_game(g, seed=seed))
        return sanitize_state(game, viewer_id)

    def place_bid(self, game_id: str, player_id: str, bid: int) -> dict:
        game, _ = self._mutate(game_id, lambda g: engine.place_bid(g, player_id, bid))
        return sanitize_state(game, player_id)

    def play_card(self, game_id: str, player_id: str, card: Card) -> dict:
        game, _ = self._mutate(game_id, lambda g: engine.play_card(g, player_id, card))
        return sanitize_state(game, player_id)

    def reset_game(self, game_id: str, viewer_id: Optional[str] = None) -> dict:
        game, _ = self._mutate(game_id, engine.reset_game)
        return sanitize_state(game, viewer_id)

    def get_state(self, game_id: str, viewer_id: Optional[str] = None) -> dict:
        """Snapshot of the game as seen by viewer_id; never changes the game."""
        with self._lock_for(game_id):
            return sanitize_state(self._get(game_id), viewer_id)

    def legal_cards(self, game_id: str, player_id: str) -> List[Card]:
        with self._lock_for(game_id):
            game = self._get(game_id)
            player = game.find_player(player_id)
            if player is None:
                raise_error(PLAYER_NOT_FOUND, f"Player {player_id} not in game {game_id}")
            trick = game.current_round.current_trick if game.current_round else None
            return legal_cards(player.hand, trick)

    def list_games(self) -> List[dict]:
        with self._registry_lock:
            games = list(self.games.values())
        return [get_public_game_info(g) for g in games]

    def remove_game(self, game_id: str) -> None:
        with self._lock_for(game_id):
            with self._registry_lock:
                del self.games[game_id]
                self.game_locks.pop(game_id, None)
        logger.info(f"Game {game_id} removed")

    # ---------- bots ----------

    def _run_bots(self, game: Game) -> None:
        """Let bot seats act until a human is due or the game is over."""
        if not game.rules.auto_play_bots:
            return
        bots = {p.id: self.bot_factory(p.id) for p in game.players if p.is_bot}
        if not bots:
            return

        for _ in range(MAX_BOT_MOVES):
            action = None
            for bot in bots.values():
                action = bot.choose_action(game)
                if action is not None:
                    break
            if action is None:
                return
            if action.type == 'bid':
                engine.place_bid(game, bot.player_id, action.data['bid'])
            elif action.type == 'play':
                engine.play_card(game, bot.player_id, action.data['card'])
        raise RuntimeError(f"Game {game.id}: bots did not yield after {MAX_BOT_MOVES} moves")
