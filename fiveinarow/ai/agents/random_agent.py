"""
Random agent for five-in-a-row.
"""
import random


class RandomAgent:
    """
    An agent that picks a random empty cell.

    It selects uniformly at random from all empty positions, and is used
    as the fallback when no better hint exists.
    """

    def __init__(self, seed=None, rng=None):
        """
        Initialize the random agent.

        Args:
            seed (int, optional): Random seed for reproducible behavior
            rng (random.Random, optional): Random source to draw from.
                Takes precedence over seed.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def select_action(self, game):
        """
        Select a random empty cell on the game's board.

        Args:
            game: Game instance with current board state

        Returns:
            tuple: (row, col) coordinates of selected cell, or None if the board is full
        """
        legal_moves = game.board.get_legal_moves()

        if not legal_moves:
            return None

        return self.rng.choice(legal_moves)
