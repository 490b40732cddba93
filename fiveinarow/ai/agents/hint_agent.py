"""
Hint agent for five-in-a-row.
"""
from .random_agent import RandomAgent


class HintAgent:
    """
    Suggests a cell for a player.

    Priority order:
    1. Immediate win - the first empty cell (row-major) where the player
       would complete a line
    2. Random fallback - any empty cell, chosen uniformly

    Opponent threats are not considered: the hint never suggests a block.
    """

    def __init__(self, seed=None, rng=None):
        """
        Initialize the hint agent.

        Args:
            seed (int, optional): Random seed for the fallback choice
            rng (random.Random, optional): Random source for the fallback choice
        """
        self.fallback = RandomAgent(seed=seed, rng=rng)

    @property
    def rng(self):
        return self.fallback.rng

    def select_action(self, game, player=None):
        """
        Suggest a cell without changing the game.

        Args:
            game: Game instance with current board state
            player (int, optional): Player to hint for (defaults to game.current_player)

        Returns:
            tuple: (row, col) of an empty cell, or None if the board is full
        """
        if player is None:
            player = game.current_player

        win_move = self._find_immediate_win(game, player)
        if win_move:
            return win_move

        return self.fallback.select_action(game)

    def _find_immediate_win(self, game, player):
        """
        Find a move that creates an immediate win for the specified player.

        Args:
            game: Current game state
            player: Player to check for wins (1 or -1)

        Returns:
            tuple or None: (row, col) of winning move, or None if none exists
        """
        for row, col in game.board.get_legal_moves():
            if game.board.is_winning_move(row, col, player):
                return (row, col)

        return None
