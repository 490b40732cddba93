"""
Tests for RandomAgent class.
"""
import random

import pytest
from fiveinarow.core.game import Game
from fiveinarow.ai.agents.random_agent import RandomAgent


def test_random_agent_initialization():
    """Test that RandomAgent initializes correctly."""
    agent = RandomAgent()
    assert agent.rng is not None

    agent_seeded = RandomAgent(seed=42)
    assert agent_seeded.rng is not None


def test_random_agent_uses_injected_rng():
    """Test that an injected random source is used as-is."""
    rng = random.Random(5)
    agent = RandomAgent(seed=99, rng=rng)

    assert agent.rng is rng


def test_random_agent_select_action_empty_board():
    """Test that RandomAgent selects valid cells on an empty board."""
    game = Game()
    agent = RandomAgent(seed=42)

    move = agent.select_action(game)
    assert move is not None
    assert isinstance(move, tuple)
    assert len(move) == 2

    row, col = move
    assert 0 <= row < 15
    assert 0 <= col < 15
    assert game.board.state[row, col] == 0


def test_random_agent_select_action_partial_board():
    """Test that RandomAgent only selects empty cells on a partial board."""
    game = Game()
    agent = RandomAgent(seed=42)

    game.make_move(7, 7)
    game.make_move(7, 8)
    game.make_move(8, 7)

    for _ in range(50):
        row, col = agent.select_action(game)
        assert game.board.state[row, col] == 0
        assert (row, col) in game.board.get_legal_moves()


def test_random_agent_single_empty_cell():
    """Test that the only empty cell is always chosen."""
    game = Game()
    agent = RandomAgent(seed=1)

    for row in range(15):
        for col in range(15):
            if (row, col) != (14, 14):
                game.board.apply_move(row, col, 1 if (row + col) % 2 == 0 else -1)

    assert agent.select_action(game) == (14, 14)


def test_random_agent_no_legal_moves():
    """Test that RandomAgent handles a full board."""
    game = Game()
    agent = RandomAgent()

    for row in range(15):
        for col in range(15):
            game.board.apply_move(row, col, 1 if (row + col) % 2 == 0 else -1)

    assert agent.select_action(game) is None


def test_random_agent_same_seed_reproducible():
    """Test that same seed produces reproducible results."""
    game = Game()

    agent1 = RandomAgent(seed=42)
    agent2 = RandomAgent(seed=42)

    moves1 = [agent1.select_action(game) for _ in range(5)]
    moves2 = [agent2.select_action(game) for _ in range(5)]

    assert moves1 == moves2
