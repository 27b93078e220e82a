"""Shared fixtures for the Connect Four test suite."""

import pytest

from connectfour.game.rules import GameListener


class RecordingListener(GameListener):
    """Listener that keeps every notification as a tuple, in order."""

    def __init__(self):
        self.events = []

    def on_new_game(self, board):
        self.events.append(("new_game",))

    def on_piece_placed(self, row, column, player):
        self.events.append(("placed", row, column, player))

    def on_turn_changed(self, player):
        self.events.append(("turn", player))

    def on_game_won(self, player):
        self.events.append(("won", player))

    def on_game_tied(self, message):
        self.events.append(("tied", message))

    def on_input_after_game_end(self, column, message):
        self.events.append(("after_end", column, message))

    def of_kind(self, kind):
        return [event for event in self.events if event[0] == kind]


class FakeClock:
    """Manually advanced clock; sleep() advances it instead of blocking."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds

    def sleep(self, seconds):
        self.advance(seconds)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def clock():
    return FakeClock()
