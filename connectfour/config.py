"""
config.py - Per-game settings for Connect Four

A GameConfig is fixed for the lifetime of one game; starting a new game
with different settings means building a new ConnectFourGame.
"""

from dataclasses import dataclass

from connectfour.utils import WIDTH, HEIGHT

TIE_MESSAGE = "Somehow, you've managed a tie. You probably didn't even try to win..."
GAME_OVER_MESSAGE = "The game is over."


@dataclass(frozen=True)
class GameConfig:
    """
    Settings for a single game.

    Attributes:
        width: Number of columns
        height: Number of rows
        notify_on_post_game_input: Report column selections made after the
            game ended to the listener instead of silently ignoring them
        end_game_delay: Seconds between the final piece being placed and the
            win/tie announcement (only honoured when a scheduler is supplied)
        tie_message: Text handed to the listener when the board fills up
        game_over_message: Text handed to the listener for post-game input
    """
    width: int = WIDTH
    height: int = HEIGHT
    notify_on_post_game_input: bool = True
    end_game_delay: float = 0.8
    tie_message: str = TIE_MESSAGE
    game_over_message: str = GAME_OVER_MESSAGE

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Board dimensions must be positive, got {self.width}x{self.height}")
        if self.end_game_delay < 0:
            raise ValueError(f"end_game_delay must be >= 0, got {self.end_game_delay}")
