"""
connectfour - Connect Four game engine

This package provides the board model, four-in-a-row detection and turn
sequencing for a two-player Connect Four game, along with a console
renderer that drives the engine from the terminal.
"""

# Version number
__version__ = '0.1.0'
