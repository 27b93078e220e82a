"""
connectfour.interfaces - Renderers for Connect Four

This package contains the front ends that draw a game and forward the
players' column choices to it.
"""

__all__ = []
