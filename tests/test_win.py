"""
Tests for four-in-a-row detection in every orientation.
"""

import pytest

from connectfour.game.board import Board
from connectfour.game.win import candidate_runs, find_winning_run, has_win
from connectfour.utils import Player


def board_with(cells, player=Player.ONE, width=7, height=6):
    board = Board(width, height)
    for row, col in cells:
        board.grid[row, col] = player.value
    return board


class TestNoWin:
    """Boards that must not report a win."""

    def test_empty_board(self):
        board = Board()
        assert not has_win(board, Player.ONE)
        assert not has_win(board, Player.TWO)

    def test_three_in_a_row(self):
        board = board_with([(5, 0), (5, 1), (5, 2)])
        assert not has_win(board, Player.ONE)

    def test_other_players_line_does_not_count(self):
        board = board_with([(5, 0), (5, 1), (5, 2), (5, 3)], Player.TWO)
        assert not has_win(board, Player.ONE)
        assert has_win(board, Player.TWO)

    def test_broken_line(self):
        board = board_with([(5, 0), (5, 1), (5, 3), (5, 4)])
        assert not has_win(board, Player.ONE)

    def test_line_does_not_wrap_around_rows(self):
        # (0, 5), (0, 6) and (1, 0), (1, 1) are consecutive in memory only
        board = board_with([(0, 5), (0, 6), (1, 0), (1, 1)])
        assert not has_win(board, Player.ONE)

    def test_small_board_cannot_win(self):
        board = Board.from_rows([[1, 1, 1], [1, 1, 1], [1, 1, 1]])
        assert not has_win(board, Player.ONE)


class TestOrientations:
    """One winning line per orientation."""

    def test_horizontal(self):
        board = board_with([(5, 3), (5, 4), (5, 5), (5, 6)])
        assert find_winning_run(board, Player.ONE) == [(5, 3), (5, 4), (5, 5), (5, 6)]

    def test_vertical(self):
        board = board_with([(2, 6), (3, 6), (4, 6), (5, 6)], Player.TWO)
        assert find_winning_run(board, Player.TWO) == [(2, 6), (3, 6), (4, 6), (5, 6)]

    def test_diagonal_down_right(self):
        board = board_with([(2, 1), (3, 2), (4, 3), (5, 4)])
        assert has_win(board, Player.ONE)
        assert find_winning_run(board, Player.ONE) == [(2, 1), (3, 2), (4, 3), (5, 4)]

    def test_diagonal_down_left(self):
        board = board_with([(2, 4), (3, 3), (4, 2), (5, 1)])
        assert find_winning_run(board, Player.ONE) == [(2, 4), (3, 3), (4, 2), (5, 1)]

    def test_diagonal_touching_left_edge(self):
        board = board_with([(0, 3), (1, 2), (2, 1), (3, 0)])
        assert has_win(board, Player.ONE)

    def test_longer_line_reports_top_left_run(self):
        board = board_with([(5, c) for c in range(6)])
        assert find_winning_run(board, Player.ONE) == [(5, 0), (5, 1), (5, 2), (5, 3)]


class TestReflection:
    """Mirroring the board left to right never changes the verdict."""

    @pytest.mark.parametrize("cells", [
        [(5, 0), (5, 1), (5, 2), (5, 3)],
        [(2, 1), (3, 2), (4, 3), (5, 4)],
        [(0, 0), (1, 0), (2, 0), (3, 0)],
        [(5, 0), (5, 1), (4, 2), (5, 3)],
    ])
    def test_mirror_symmetry(self, cells):
        board = board_with(cells)
        assert has_win(board, Player.ONE) == has_win(board.mirrored(), Player.ONE)

    def test_mirrored_horizontal_line_is_found(self):
        board = board_with([(5, 0), (5, 1), (5, 2), (5, 3)])
        assert find_winning_run(board.mirrored(), Player.ONE) == [(5, 3), (5, 4), (5, 5), (5, 6)]


class TestCandidateRuns:
    """Runs built from an anchor cell."""

    def test_runs_from_anchor(self):
        horiz, vert, down_right, down_left = candidate_runs(0, 3)
        assert horiz == ((0, 3), (0, 4), (0, 5), (0, 6))
        assert vert == ((0, 3), (1, 3), (2, 3), (3, 3))
        assert down_right == ((0, 3), (1, 4), (2, 5), (3, 6))
        assert down_left == ((0, 3), (1, 2), (2, 1), (3, 0))

    def test_out_of_bounds_runs_do_not_raise(self):
        # Every run from the bottom-right corner leaves the board
        board = Board.from_rows([[1] * 7 for _ in range(6)])
        for run in candidate_runs(5, 6)[1:]:
            assert any(not board.in_bounds(r, c) for r, c in run)
        assert has_win(board, Player.ONE)
