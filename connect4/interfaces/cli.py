"""
cli.py - Command-line interface for playing Connect Four

This module provides a hot-seat terminal game where two players take turns
entering column numbers. Grid size and win length are set from the command line.
"""

import argparse
import sys
from typing import List, Optional, Union

from connect4.debug import debug, DebugLevel
from connect4.utils import DEFAULT_WIDTH, DEFAULT_HEIGHT, CONNECT_N
from connect4.game.grid import InvalidMove
from connect4.game.rules import ConnectFourGame

# Special command codes returned by get_move
QUIT = 'quit'
RESTART = 'restart'


class SimpleCLI:
    """Simple command-line interface for a two-player Connect Four game."""

    def __init__(self):
        """Initialize the CLI."""
        self.game: Optional[ConnectFourGame] = None
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four CLI')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game')
        play_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                                 help='Number of columns')
        play_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                                 help='Number of rows')
        play_parser.add_argument('--connect', type=int, default=CONNECT_N,
                                 help='Number of aligned tokens needed to win')
        play_parser.add_argument('--debug', action='store_true', help='Enable debug mode')
        play_parser.add_argument('--debug_level', type=str, default='warning',
                                 choices=[level.name.lower() for level in DebugLevel],
                                 help='Debug level')
        play_parser.add_argument('--log_file', type=str, default=None,
                                 help='Also write log messages to this file')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.configure(level=DebugLevel[self.args.debug_level.upper()])

        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def run(self) -> None:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            self.game = ConnectFourGame(self.args.width, self.args.height, self.args.connect)
            self.play_game()
        else:
            print("Please specify a command. Use --help for options.")
            sys.exit(1)

    def play_game(self) -> None:
        """Play a Connect Four game interactively."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{self.game.width - 1}) to drop a token. "
              f"Line up {self.game.connect_n} to win.")
        print("Other commands: 'q' to quit, 'r' to restart.")
        print(self.game.render())

        while not self.game.is_game_over():
            move = self.get_move()

            if move is None:
                continue
            elif move == QUIT:
                print("Quitting game.")
                return
            elif move == RESTART:
                self.game.reset()
                print("Game restarted.")
                print(self.game.render())
                continue

            try:
                self.game.make_move(move)
            except InvalidMove as e:
                debug.debug(f"Rejected move {move}: {e}", "cli")
                print(f"Invalid move: {e}")
                continue

            print(self.game.render())

        print("Game over!")
        winner = self.game.get_winner()
        if winner is None:
            print("It's a draw!")
        else:
            print(f"Player {winner.name} ({winner}) wins!")
            debug.debug(f"Winning line: {self.game.get_winning_line()}", "cli")

    def get_move(self) -> Optional[Union[int, str]]:
        """
        Get a move from the current player's input.

        Returns:
            Column index, or special command code, or None if invalid input
        """
        player = self.game.get_current_player()
        user_input = input(f"Player {player.name} ({player}) move: ").strip().lower()

        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    cli.run()


if __name__ == "__main__":
    main()
