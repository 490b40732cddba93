"""
Tests for the terminal front end.
"""
import io

import pytest
from fiveinarow.core.config import GameConfig
from fiveinarow.core.game import Game
from fiveinarow.ui.renderer import TextRenderer
from scripts.play import parse_args, parse_command, parse_move, run


def scripted_input(lines):
    """Return a read_line callable that replays `lines` then raises EOFError."""
    remaining = list(lines)

    def read_line(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


def make_session(seed=0):
    config = GameConfig(seed=seed)
    game = Game(config)
    out = io.StringIO()
    renderer = TextRenderer(out=out, config=config)
    game.subscribe(renderer)
    return game, renderer, out


def test_parse_move():
    """Test parsing of space and comma separated coordinates."""
    assert parse_move("7 7") == (7, 7)
    assert parse_move("3,12") == (3, 12)
    assert parse_move(" 0 , 14 ") == (0, 14)
    assert parse_move("7") is None
    assert parse_move("a b") is None
    assert parse_move("1 2 3") is None


@pytest.mark.parametrize("line,expected", [
    ("7 7", ('move', (7, 7))),
    ("click 85 130", ('click', (85, 130))),
    ("undo", ('undo', None)),
    ("U", ('undo', None)),
    ("restart", ('restart', None)),
    ("h", ('hint', None)),
    ("help", ('help', None)),
    ("quit", ('quit', None)),
    ("click here", (None, None)),
    ("nonsense", (None, None)),
])
def test_parse_command(line, expected):
    """Test that user input maps to commands."""
    assert parse_command(line) == expected


def test_parse_args_defaults():
    """Test default command line options."""
    args = parse_args([])

    assert args.seed is None
    assert args.cell_size == 40
    assert args.hint_duration == 3.0
    assert args.verbose == False


def test_run_places_undoes_and_restarts():
    """Test a scripted session through the command loop."""
    game, renderer, out = make_session()

    run(game, renderer, scripted_input(["7 7", "click 85 130", "undo", "quit"]))

    assert game.round_count == 1
    assert game.board.state[7, 7] == 1
    assert game.board.state[3, 2] == 0
    assert game.current_player == -1
    assert "Thanks for playing!" in out.getvalue()


def test_run_click_places_stone():
    """Test that pixel input is translated before reaching the game."""
    game, renderer, _ = make_session()

    run(game, renderer, scripted_input(["click 85 130"]))

    assert game.board.state[3, 2] == 1


def test_run_reports_hint_and_invalid_input():
    """Test hint output and the invalid input message."""
    game, renderer, out = make_session()

    run(game, renderer, scripted_input(["hint", "what", "restart"]))

    text = out.getvalue()
    assert "Hint: " in text
    assert "Invalid input!" in text
    assert game.round_count == 0
