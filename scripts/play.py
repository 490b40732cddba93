#!/usr/bin/env python3
"""
CLI interface for playing five-in-a-row with undo, restart and hints.
"""
import sys
import os
import argparse
import logging

# Add the parent directory to Python path so we can import fiveinarow
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fiveinarow.core.config import GameConfig
from fiveinarow.core.game import Game
from fiveinarow.ui.renderer import TextRenderer, get_player_name


HELP_TEXT = """Commands:
  row col        place a stone (e.g. '7 7' or '7,7')
  click x y      place a stone at a pointer position in pixels
  undo | u       take back the last move
  restart | r    start a new game
  hint | h       suggest a cell for the current player
  help           show this message
  quit | q       leave the game"""


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Play five-in-a-row in the terminal')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for hints (default: none)')
    parser.add_argument('--cell-size', type=int, default=40,
                        help='Pixel size of one cell for click input (default: 40)')
    parser.add_argument('--hint-duration', type=float, default=3.0,
                        help='Seconds a hint stays highlighted (default: 3.0)')
    parser.add_argument('--verbose', action='store_true',
                        help='Log ignored moves and game events')
    return parser.parse_args(argv)


def parse_move(move_input):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "7 7" or "7,7"

    Returns:
        tuple: (row, col) or None if invalid
    """
    try:
        # Handle both space and comma separated input
        if ',' in move_input:
            parts = move_input.split(',')
        else:
            parts = move_input.split()

        if len(parts) != 2:
            return None

        return (int(parts[0].strip()), int(parts[1].strip()))

    except ValueError:
        return None


def parse_command(line):
    """
    Parse one line of user input.

    Returns:
        tuple: (command, argument) where command is one of 'move', 'click',
        'undo', 'restart', 'hint', 'help', 'quit', or (None, None) if the
        input is not understood
    """
    text = line.strip().lower()
    if text in ('quit', 'exit', 'q'):
        return ('quit', None)
    if text in ('undo', 'u'):
        return ('undo', None)
    if text in ('restart', 'r'):
        return ('restart', None)
    if text in ('hint', 'h'):
        return ('hint', None)
    if text in ('help', '?'):
        return ('help', None)
    if text.startswith('click'):
        point = parse_move(text[len('click'):])
        return ('click', point) if point is not None else (None, None)

    move = parse_move(text)
    if move is not None:
        return ('move', move)
    return (None, None)


def run(game, renderer, read_line=input):
    """
    Drive a game from user commands until the user quits.

    Args:
        game: Game instance
        renderer: TextRenderer subscribed to the game
        read_line: Callable returning the next line of input
    """
    renderer.update(game.snapshot())

    while True:
        try:
            line = read_line(f"{get_player_name(game.current_player)} > ")
        except (KeyboardInterrupt, EOFError):
            break

        command, argument = parse_command(line)

        if command == 'quit':
            break
        elif command == 'move':
            game.make_move(*argument)
        elif command == 'click':
            game.make_move(*renderer.cell_at(*argument))
        elif command == 'undo':
            game.undo()
        elif command == 'restart':
            game.restart()
        elif command == 'hint':
            cell = game.hint()
            if cell is None:
                print("No hint available.", file=renderer.out)
            else:
                print(f"Hint: {cell[0]} {cell[1]}", file=renderer.out)
                renderer.show_hint(cell)
        elif command == 'help':
            print(HELP_TEXT, file=renderer.out)
        else:
            print("Invalid input! Type 'help' for commands.", file=renderer.out)

    print("\nThanks for playing!", file=renderer.out)


def main(argv=None):
    """Main game loop."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    config = GameConfig(cell_size=args.cell_size,
                        hint_duration=args.hint_duration,
                        seed=args.seed)

    print("=" * 60)
    print("           FIVE IN A ROW")
    print("=" * 60)
    print("Get 5 or more stones in a row to win. Black (X) goes first.")
    print(HELP_TEXT)
    print("=" * 60)

    game = Game(config)
    renderer = TextRenderer(config=config)
    game.subscribe(renderer)
    run(game, renderer)


if __name__ == "__main__":
    main()
