"""
Configuration for a five-in-a-row game session and its renderer.
"""
from typing import Dict, Optional


class GameConfig:
    """Configuration for the board, win rule and presentation."""

    def __init__(self,
                 # Board
                 board_size: int = 15,
                 win_length: int = 5,

                 # Presentation
                 cell_size: int = 40,
                 hint_duration: float = 3.0,

                 # Hint fallback
                 seed: Optional[int] = None):

        if win_length < 2:
            raise ValueError(f"win_length must be at least 2, got {win_length}")
        if board_size < win_length:
            raise ValueError(
                f"board_size ({board_size}) must not be smaller than win_length ({win_length})")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        if hint_duration <= 0:
            raise ValueError(f"hint_duration must be positive, got {hint_duration}")

        self.board_size = board_size
        self.win_length = win_length

        self.cell_size = cell_size
        self.hint_duration = hint_duration

        self.seed = seed

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GameConfig':
        """Create config from dictionary."""
        return cls(**config_dict)
