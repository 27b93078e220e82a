"""
console.py - Terminal front end for Connect Four

Two people share the keyboard: the board is printed after every piece and
each player types the column for their drop.
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO

from connectfour.config import GameConfig
from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board
from connectfour.game.rules import ConnectFourGame, GameListener
from connectfour.game.scheduler import DeferredCallbacks
from connectfour.utils import Player, display_name, win_message

QUIT = -1
RESTART = -2


class ConsoleRenderer(GameListener):
    """Prints the board and game announcements to a text stream."""

    def __init__(self, out: TextIO = sys.stdout):
        self.out = out
        self.board: Optional[Board] = None

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def on_new_game(self, board: Board) -> None:
        self.board = board
        self._print("Starting a new Connect Four game!")
        self._print(board.render())
        self._print(f"{display_name(Player.ONE)} goes first.")

    def on_piece_placed(self, row: int, column: int, player: Player) -> None:
        self._print(f"{display_name(player)} drops into column {column}.")
        if self.board is not None:
            self._print(self.board.render())

    def on_turn_changed(self, player: Player) -> None:
        self._print(f"{display_name(player)}'s turn.")

    def on_game_won(self, player: Player) -> None:
        self._print(win_message(player))

    def on_game_tied(self, message: str) -> None:
        self._print(message)

    def on_input_after_game_end(self, column: int, message: str) -> None:
        self._print(f"{message} Enter 'r' to play again or 'q' to quit.")


class ConsoleCLI:
    """Command-line driver: parses options, then runs the input loop."""

    def __init__(self, argv: Optional[List[str]] = None,
                 input_fn: Callable[[str], str] = input,
                 out: TextIO = sys.stdout):
        self.args = self.parse_args(argv)
        self.input_fn = input_fn
        self.out = out
        self.scheduler = DeferredCallbacks()
        self.renderer = ConsoleRenderer(out)
        self.game = ConnectFourGame(
            config=GameConfig(
                width=self.args.width,
                height=self.args.height,
                notify_on_post_game_input=self.args.notify_after_end,
                end_game_delay=self.args.delay,
            ),
            listener=self.renderer,
            scheduler=self.scheduler,
        )

    @staticmethod
    def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
        parser = argparse.ArgumentParser(description='Play Connect Four in the terminal')
        parser.add_argument('--width', type=int, default=7, help='Number of columns')
        parser.add_argument('--height', type=int, default=6, help='Number of rows')
        parser.add_argument('--delay', type=float, default=0.8,
                            help='Seconds before the result is announced')
        parser.add_argument('--notify-after-end', dest='notify_after_end',
                            action='store_true', default=True,
                            help='Say so when a column is chosen after the game ended')
        parser.add_argument('--ignore-after-end', dest='notify_after_end',
                            action='store_false',
                            help='Silently ignore columns chosen after the game ended')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')
        args = parser.parse_args(argv)
        if args.width < 1 or args.height < 1:
            parser.error("--width and --height must be positive")
        if args.delay < 0:
            parser.error("--delay must not be negative")

        debug.set_from_string(args.debug_level)
        if args.log_file:
            debug.configure(log_file=args.log_file)
        return args

    def read_command(self) -> Optional[int]:
        """
        Ask the current player for a column.

        Returns:
            Column index, QUIT, RESTART, or None if the input was unusable
        """
        width = self.game.board.width
        prompt = f"{display_name(self.game.current_player)} (0-{width - 1}, r/q): "
        try:
            user_input = self.input_fn(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART
        try:
            column = int(user_input)
        except ValueError:
            print("Please enter a column number, 'r' or 'q'.", file=self.out)
            return None

        # Out-of-range columns never reach the game
        if not self.game.board.is_valid_column(column):
            print(f"Column must be between 0 and {width - 1}.", file=self.out)
            return None
        return column

    def run(self) -> int:
        while True:
            command = self.read_command()
            if command is None:
                continue
            if command == QUIT:
                self.game.cancel_pending_notification()
                print("Goodbye.", file=self.out)
                return 0
            if command == RESTART:
                self.game.new_game()
                continue

            if not self.game.on_column_selected(command) and not self.game.is_game_over():
                print(f"Column {command} is full.", file=self.out)
            # Let the final piece show before the result is announced
            self.scheduler.wait()


def main(argv: Optional[List[str]] = None) -> int:
    return ConsoleCLI(argv).run()


if __name__ == "__main__":
    sys.exit(main())
