"""
Game implementation for five-in-a-row.
"""
import logging
from collections import namedtuple

from .board import Board, BLACK
from .config import GameConfig
from ..ai.agents.hint_agent import HintAgent

logger = logging.getLogger(__name__)

Move = namedtuple('Move', ['row', 'col', 'player'])

GameSnapshot = namedtuple('GameSnapshot', [
    'board',           # tuple of row tuples
    'current_player',
    'round_count',
    'game_over',
    'winner',
    'last_move',       # Move or None
])


class Game:
    """
    Manages a five-in-a-row game session.

    Handles turn order, the move log, win detection, undo, restart and
    hints. Observers registered with subscribe() receive a GameSnapshot
    after every accepted place, undo or restart.

    Illegal actions (out-of-bounds or occupied cell, any move after the
    game is over, undo with an empty log) are ignored without raising.
    """

    def __init__(self, config=None, rng=None):
        """
        Initialize a new game.

        Args:
            config (GameConfig, optional): Board size, win length and seed
            rng (random.Random, optional): Random source for hint fallback.
                Defaults to one seeded from config.seed.
        """
        self.config = config or GameConfig()
        self.board = Board(self.config.board_size, self.config.win_length)
        self.hint_agent = HintAgent(seed=self.config.seed, rng=rng)
        self._listeners = []
        self._reset_state()

    def _reset_state(self):
        self.current_player = BLACK  # Black goes first (1=black, -1=white)
        self._moves = []
        self._winner = None

    @property
    def game_over(self):
        return self._winner is not None

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win'
        """
        return 'win' if self.game_over else 'ongoing'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            int or None: Winner (1 for black, -1 for white) or None if no winner
        """
        return self._winner

    @property
    def round_count(self):
        """Completed placements, counted regardless of player."""
        return len(self._moves)

    @property
    def moves(self):
        return tuple(self._moves)

    @property
    def last_move(self):
        return self._moves[-1] if self._moves else None

    def subscribe(self, callback):
        """Register `callback(snapshot)` to be called on every state change."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def snapshot(self):
        """Return an immutable GameSnapshot of the current state."""
        return GameSnapshot(
            board=self.board.to_tuple(),
            current_player=self.current_player,
            round_count=self.round_count,
            game_over=self.game_over,
            winner=self._winner,
            last_move=self.last_move,
        )

    def _notify(self):
        snapshot = self.snapshot()
        for callback in list(self._listeners):
            callback(snapshot)

    def make_move(self, row, col):
        """
        Place a stone for the current player.

        The move is ignored if the game is over or the cell is off the
        board or occupied. After a winning move the current player is
        left as the winner; otherwise the turn passes to the opponent.

        Args:
            row (int): Row position
            col (int): Column position
        """
        if self.game_over:
            logger.debug("Ignoring move (%s, %s): game is over", row, col)
            return

        player = self.current_player
        if not self.board.apply_move(row, col, player):
            logger.debug("Ignoring move (%s, %s): cell is off the board or occupied", row, col)
            return

        self._moves.append(Move(row, col, player))

        if self.board.check_winner(row, col) == player:
            self._winner = player
            logger.info("Player %d wins at (%d, %d) after %d rounds",
                        player, row, col, self.round_count)
        else:
            self.current_player = -player

        self._notify()

    def undo(self):
        """
        Take back the last move.

        The turn returns to the player who made the undone move. Ignored if
        there is nothing to undo or the game is already over.
        """
        if not self._moves or self.game_over:
            logger.debug("Ignoring undo: %s",
                         "game is over" if self.game_over else "no moves to undo")
            return

        last = self._moves.pop()
        self.board.remove_stone(last.row, last.col)
        self.current_player = last.player
        self._notify()

    def restart(self):
        """Clear the board and start a new game with black to move."""
        self.board.clear()
        self._reset_state()
        self._notify()

    def hint(self, player=None):
        """
        Suggest a cell for `player` (defaults to the current player).

        Returns:
            tuple or None: (row, col) of an empty cell, or None if the game
            is over or the board is full
        """
        if self.game_over:
            return None
        if player is None:
            player = self.current_player
        return self.hint_agent.select_action(self, player)
