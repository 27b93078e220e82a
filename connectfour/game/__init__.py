"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, win detection, turn
sequencing and the delayed end-of-game notification support.
"""

from connectfour.game.board import Board
from connectfour.game.rules import ConnectFourGame, GameListener
from connectfour.game.scheduler import DeferredCallbacks
from connectfour.game.win import find_winning_run, has_win

__all__ = ['Board', 'ConnectFourGame', 'GameListener', 'DeferredCallbacks',
           'find_winning_run', 'has_win']
