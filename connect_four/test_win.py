"""
Tests for four-in-a-row detection.
"""

import random

import numpy as np
import pytest
from connect_four.grid import Grid, Player
from connect_four.win import check_for_win, check_win_at, find_winning_line


def board_with(cells, player=Player.ONE, rows=6, cols=7):
    board = np.zeros((rows, cols), dtype=int)
    for r, c in cells:
        board[r, c] = player.value
    return board


class TestWinDirections:
    """Test win detection in all directions."""
    
    def test_empty_board(self):
        """Test that an empty board has no winner."""
        board = np.zeros((6, 7), dtype=int)
        assert check_for_win(board, Player.ONE) is False
        assert check_for_win(board, Player.TWO) is False
    
    def test_horizontal(self):
        """Test horizontal win detection."""
        board = board_with([(5, 3), (5, 4), (5, 5), (5, 6)])
        assert check_for_win(board, Player.ONE) is True
        assert find_winning_line(board, Player.ONE) == [(5, 3), (5, 4), (5, 5), (5, 6)]
    
    def test_vertical(self):
        """Test vertical win detection."""
        board = board_with([(2, 0), (3, 0), (4, 0), (5, 0)], Player.TWO)
        assert check_for_win(board, Player.TWO) is True
        assert check_for_win(board, Player.ONE) is False
    
    def test_diagonal_down_right(self):
        """Test diagonal win going down and right."""
        board = board_with([(2, 0), (3, 1), (4, 2), (5, 3)])
        assert find_winning_line(board, Player.ONE) == [(2, 0), (3, 1), (4, 2), (5, 3)]
    
    def test_diagonal_down_left(self):
        """Test diagonal win going down and left."""
        board = board_with([(2, 6), (3, 5), (4, 4), (5, 3)])
        assert find_winning_line(board, Player.ONE) == [(2, 6), (3, 5), (4, 4), (5, 3)]
    
    def test_three_is_not_enough(self):
        """Test that runs of three never win."""
        board = board_with([(5, 0), (5, 1), (5, 2), (4, 0), (3, 0), (4, 1), (3, 2)])
        assert check_for_win(board, Player.ONE) is False
    
    def test_mixed_run_is_not_a_win(self):
        """Test that a run broken by the opponent does not win."""
        board = board_with([(5, 0), (5, 1), (5, 3)])
        board[5, 2] = Player.TWO.value
        assert check_for_win(board, Player.ONE) is False
        assert check_for_win(board, Player.TWO) is False


class TestBounds:
    """Runs that leave the board never count."""
    
    def test_runs_do_not_wrap_rows(self):
        """Test that runs do not wrap from one row to the next."""
        # Row 0 columns 4-6 followed by row 1 column 0 in flat order
        board = board_with([(0, 4), (0, 5), (0, 6), (1, 0)])
        assert check_for_win(board, Player.ONE) is False
    
    def test_probing_edges_does_not_raise(self):
        """Test that probing past the edges is safe."""
        board = np.full((6, 7), Player.ONE.value, dtype=int)
        board[:, 3] = Player.TWO.value
        board[2, :] = Player.TWO.value
        # Every run of four crosses row 2 or column 3
        assert check_for_win(board, Player.ONE) is False
        assert check_for_win(board, Player.TWO) is True
    
    def test_small_board(self):
        """Test a board too small for any run of four."""
        board = np.ones((3, 3), dtype=int)
        assert check_for_win(board, Player.ONE) is False


class TestLocalizedCheck:
    """The last-move check agrees with the full scan."""
    
    def test_detects_through_middle_piece(self):
        """Test the localized check from a piece inside the run."""
        board = board_with([(5, 1), (5, 2), (5, 3), (5, 4)])
        assert check_win_at(board, 5, 2, Player.ONE) is True
        assert check_win_at(board, 5, 2, Player.TWO) is False
    
    @pytest.mark.parametrize("seed", range(20))
    def test_agrees_with_full_scan(self, seed):
        """Test that both checks agree over random games."""
        rng = random.Random(seed)
        grid = Grid()
        player = Player.ONE
        while True:
            col = rng.choice(grid.valid_columns())
            row = grid.lowest_open_row(col)
            grid.place(row, col, player)
            
            full = check_for_win(grid.cells, player)
            assert check_win_at(grid.cells, row, col, player) == full
            if full or grid.is_full():
                break
            player = player.other
