"""
Board implementation for five-in-a-row.
"""
import numpy as np

EMPTY = 0
BLACK = 1
WHITE = -1


class Board:
    """
    Represents a square five-in-a-row board (15x15 by default).

    Board state representation:
    - 0: empty cell
    - 1: black stone (first player)
    - -1: white stone
    """

    # Horizontal, vertical, diagonal (↘), anti-diagonal (↗)
    DIRECTIONS = (
        (0, 1),
        (1, 0),
        (1, 1),
        (-1, 1),
    )

    def __init__(self, size=15, win_length=5):
        """
        Initialize an empty board.

        Args:
            size (int): Number of rows and columns
            win_length (int): Contiguous stones needed to win
        """
        self.size = size
        self.win_length = win_length
        self.state = np.zeros((self.size, self.size), dtype=np.int8)

    def in_bounds(self, row, col):
        """Return True if (row, col) lies on the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        """Return True if (row, col) is on the board and holds no stone."""
        return self.in_bounds(row, col) and self.state[row, col] == EMPTY

    def apply_move(self, row, col, player):
        """
        Apply a move to the board.

        Args:
            row (int): Row position
            col (int): Column position
            player (int): Player (1 for black, -1 for white)

        Returns:
            bool: True if move was applied successfully, False if invalid
        """
        if not self.in_bounds(row, col):
            return False

        if self.state[row, col] != EMPTY:
            return False

        if player not in (BLACK, WHITE):
            return False

        self.state[row, col] = player
        return True

    def remove_stone(self, row, col):
        """Clear (row, col). Out-of-bounds coordinates are ignored."""
        if self.in_bounds(row, col):
            self.state[row, col] = EMPTY

    def clear(self):
        """Remove every stone from the board."""
        self.state.fill(EMPTY)

    def get_legal_moves(self):
        """
        Get all empty positions on the board in row-major order.

        Returns:
            list: List of (row, col) tuples representing empty positions
        """
        rows, cols = np.nonzero(self.state == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def stone_count(self):
        """Number of occupied cells."""
        return int(np.count_nonzero(self.state))

    def is_full(self):
        """Return True if no empty cell remains."""
        return self.stone_count() == self.size * self.size

    def _count_direction(self, row, col, player, dr, dc):
        """
        Count contiguous stones of `player` stepping away from (row, col).

        At most win_length - 1 cells are examined; the walk stops at the
        first cell that is off the board or does not hold `player`.
        """
        count = 0
        for step in range(1, self.win_length):
            r, c = row + dr * step, col + dc * step
            if not self.in_bounds(r, c) or self.state[r, c] != player:
                break
            count += 1
        return count

    def _check_line_win(self, row, col, player, dr, dc):
        """
        Check for a win through (row, col) along one axis.

        Args:
            row (int): Anchor row position
            col (int): Anchor column position
            player (int): Player to check (1 or -1)
            dr (int): Row direction (-1, 0, 1)
            dc (int): Column direction (-1, 0, 1)

        Returns:
            bool: True if at least win_length contiguous stones are found
        """
        total_count = (1 +
                       self._count_direction(row, col, player, dr, dc) +
                       self._count_direction(row, col, player, -dr, -dc))
        return total_count >= self.win_length

    def check_winner(self, last_move_row, last_move_col):
        """
        Check if the last move resulted in a win.

        This is a local check anchored at the cell just played. It does not
        scan the whole board, so it only answers for lines through that cell.

        Args:
            last_move_row (int): Row of the last move
            last_move_col (int): Column of the last move

        Returns:
            int or None: Player (1 or -1) if win detected, None otherwise
        """
        if not self.in_bounds(last_move_row, last_move_col):
            return None

        player = int(self.state[last_move_row, last_move_col])
        if player == EMPTY:
            return None

        for dr, dc in self.DIRECTIONS:
            if self._check_line_win(last_move_row, last_move_col, player, dr, dc):
                return player

        return None

    def is_winning_move(self, row, col, player):
        """
        Return True if `player` placing at the empty cell (row, col) wins.

        The stone is placed speculatively and always retracted, so the board
        is unchanged afterwards.
        """
        if not self.is_empty(row, col):
            return False
        self.state[row, col] = player
        try:
            return self.check_winner(row, col) == player
        finally:
            self.state[row, col] = EMPTY

    def to_tuple(self):
        """Immutable copy of the grid as a tuple of row tuples."""
        return tuple(tuple(int(v) for v in row) for row in self.state)
