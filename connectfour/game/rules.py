"""
rules.py - Turn sequencing for a Connect Four game

This module provides:
1. GameListener, the notifications a renderer receives from a game
2. ConnectFourGame, which owns one game's board and whose turn it is and
   turns column selections into placements, wins, ties and turn changes
"""

from typing import List, Optional, Tuple

from connectfour.config import GameConfig
from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.scheduler import Cancellable, Scheduler
from connectfour.game.win import find_winning_run
from connectfour.utils import GameStatus, Player, display_name


class GameListener:
    """
    Receives state changes from a ConnectFourGame.

    Every method is a no-op here; renderers override what they need.
    """

    def on_new_game(self, board: Board) -> None:
        pass

    def on_piece_placed(self, row: int, column: int, player: Player) -> None:
        pass

    def on_turn_changed(self, player: Player) -> None:
        pass

    def on_game_won(self, player: Player) -> None:
        pass

    def on_game_tied(self, message: str) -> None:
        pass

    def on_input_after_game_end(self, column: int, message: str) -> None:
        pass


class ConnectFourGame:
    """
    A single game of Connect Four between players ONE and TWO.

    Input arrives through on_column_selected. The end-of-game announcement
    is handed to `scheduler` with the configured delay when one is given,
    otherwise it is sent straight after the final piece is reported.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 listener: Optional[GameListener] = None,
                 scheduler: Optional[Scheduler] = None):
        """
        Initialize a new game.

        Args:
            config: Board size and policies, defaults to a 7x6 board
            listener: Receiver of game notifications
            scheduler: Anything with call_later(delay, callback), e.g. an
                asyncio event loop or DeferredCallbacks
        """
        self.config = config or GameConfig()
        self.listener = listener or GameListener()
        self.scheduler = scheduler
        debug.debug(f"Initializing ConnectFourGame with {self.config}", "game")

        self._pending: Optional[Cancellable] = None
        self._start()

    def _start(self) -> None:
        self.board = Board(self.config.width, self.config.height)
        self.current_player = Player.ONE
        self.status = GameStatus.IN_PROGRESS
        self.winning_run: Optional[List[Tuple[int, int]]] = None
        self.move_count = 0
        self.listener.on_new_game(self.board)

    def new_game(self) -> None:
        """Discard the current game and start over with player ONE."""
        debug.debug("Starting a new game", "game")
        self.cancel_pending_notification()
        self._start()

    @property
    def pending_notification(self) -> Optional[Cancellable]:
        return self._pending

    def cancel_pending_notification(self) -> bool:
        """Drop a not-yet-delivered win/tie announcement."""
        if self._pending is None:
            return False
        debug.debug("Cancelling pending end-of-game notification", "game")
        self._pending.cancel()
        self._pending = None
        return True

    def is_game_over(self) -> bool:
        return self.status.is_terminal()

    @property
    def winner(self) -> Optional[Player]:
        if self.status == GameStatus.PLAYER_ONE_WON:
            return Player.ONE
        elif self.status == GameStatus.PLAYER_TWO_WON:
            return Player.TWO
        return None

    def on_column_selected(self, column: int) -> bool:
        """
        Drop the current player's piece into `column`.

        Args:
            column: Column index (0-indexed)

        Returns:
            True if a piece was placed, False if the input was rejected
        """
        if self.status.is_terminal():
            debug.debug(f"Ignoring column {column}: game is over ({self.status.name})", "game")
            # The result has not been announced yet
            if self._pending is not None:
                return False
            if self.config.notify_on_post_game_input:
                self.listener.on_input_after_game_end(column, self.config.game_over_message)
            return False

        if not self.board.is_valid_column(column):
            debug.warning(f"Column {column} out of range [0, {self.board.width})", "game")
            return False

        row = self.board.find_landing_row(column)
        if row is None:
            debug.debug(f"Column {column} is full", "game")
            return False

        player = self.current_player
        self.board.place(row, column, player)
        self.move_count += 1
        self.listener.on_piece_placed(row, column, player)

        # A win on the last free cell is still a win
        with debug.timer("win_check", "game"):
            run = find_winning_run(self.board, player)
        if run is not None:
            self.winning_run = run
            self.status = GameStatus.won_by(player)
            debug.info(f"{display_name(player)} wins after move at ({row}, {column})", "game")
            self._announce(self.listener.on_game_won, player)
            return True

        if self.board.is_full():
            self.status = GameStatus.TIED
            debug.info("Game ends in a tie", "game")
            self._announce(self.listener.on_game_tied, self.config.tie_message)
            return True

        self.current_player = player.other()
        debug.debug(f"Switching to player {self.current_player.name}", "game")
        self.listener.on_turn_changed(self.current_player)
        return True

    def _announce(self, notify, *args) -> None:
        if self.scheduler is None:
            notify(*args)
            return

        def deliver():
            self._pending = None
            notify(*args)

        self._pending = self.scheduler.call_later(self.config.end_game_delay, deliver)
