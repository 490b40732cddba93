"""
Text renderer for five-in-a-row.

The renderer observes a Game: subscribe it with ``game.subscribe(renderer)``
and it redraws the board every time the game state changes.
"""
import sys
import time
from typing import Callable, Optional, Tuple, TextIO

from ..core.board import BLACK, WHITE
from ..core.config import GameConfig

STONE_SYMBOLS = {BLACK: 'X', WHITE: 'O'}
EMPTY_SYMBOL = '.'
HINT_SYMBOL = '*'


def get_player_name(player):
    """Get display name for player."""
    return "Black (X)" if player == BLACK else "White (O)"


def pixel_to_cell(x, y, cell_size):
    """
    Convert a pointer position in pixels to a (row, col) cell index.

    The result may be off the board; the game ignores such moves.
    """
    return (int(y // cell_size), int(x // cell_size))


def render_board(board, hint=None):
    """
    Draw a board as text.

    Args:
        board: Grid as a sequence of row sequences (see Board.to_tuple)
        hint (tuple, optional): (row, col) to mark with HINT_SYMBOL

    Returns:
        str: Multi-line ASCII drawing with row and column headers
    """
    size = len(board)
    header = "   " + "".join(f"{col:2d} " for col in range(size))
    rule = "   " + "---" * size
    lines = [header, rule]

    for row in range(size):
        cells = []
        for col in range(size):
            value = board[row][col]
            if value in STONE_SYMBOLS:
                symbol = STONE_SYMBOLS[value]
            elif hint == (row, col):
                symbol = HINT_SYMBOL
            else:
                symbol = EMPTY_SYMBOL
            cells.append(f" {symbol} ")
        lines.append(f"{row:2d}|" + "".join(cells) + f"|{row:2d}")

    lines.append(rule)
    lines.append(header)
    return "\n".join(lines)


def render_status(snapshot):
    """One-line game status for a GameSnapshot."""
    if snapshot.game_over:
        return f"{get_player_name(snapshot.winner)} wins! Round: {snapshot.round_count}"
    return f"Current player: {get_player_name(snapshot.current_player)}  Round: {snapshot.round_count}"


class TextRenderer:
    """
    Draws game snapshots to a text stream.

    Hints are shown as a transient highlight that expires after
    config.hint_duration seconds on the injected clock.
    """

    def __init__(self,
                 out: Optional[TextIO] = None,
                 config: Optional[GameConfig] = None,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            out: Stream to draw to (defaults to sys.stdout)
            config: Cell size and hint duration
            clock: Monotonic time source in seconds
        """
        self.out = out if out is not None else sys.stdout
        self.config = config or GameConfig()
        self.clock = clock
        self.snapshot = None
        self._hint = None
        self._hint_expires_at = 0.0

    def __call__(self, snapshot):
        self.update(snapshot)

    def update(self, snapshot):
        """Receive a new game snapshot and redraw."""
        self.snapshot = snapshot
        # Any state change invalidates a pending hint
        self.clear_hint()
        self.draw()

    @property
    def active_hint(self) -> Optional[Tuple[int, int]]:
        """The highlighted cell, or None once the highlight has expired."""
        if self._hint is not None and self.clock() >= self._hint_expires_at:
            self._hint = None
        return self._hint

    def show_hint(self, cell):
        """Highlight `cell` for the configured duration and redraw."""
        if cell is None:
            return
        self._hint = tuple(cell)
        self._hint_expires_at = self.clock() + self.config.hint_duration
        self.draw()

    def clear_hint(self):
        self._hint = None

    def cell_at(self, x, y):
        """Translate a pointer position to a (row, col) cell."""
        return pixel_to_cell(x, y, self.config.cell_size)

    def draw(self):
        """Write the current board and status line to the output stream."""
        if self.snapshot is None:
            return
        print(render_board(self.snapshot.board, hint=self.active_hint), file=self.out)
        print(render_status(self.snapshot), file=self.out)
