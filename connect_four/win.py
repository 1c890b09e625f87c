"""
Four-in-a-row detection.

The canonical check scans the whole board, treating every cell as the start
of a run and probing rightward, downward and along both downward diagonals.
A localized variant that only walks the lines through the last placed piece
is provided as a faster equivalent.
"""

from typing import List, Optional, Tuple
import numpy as np

from .grid import Player

WIN_LENGTH = 4

# (row step, col step): right, down, down-right, down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

Cell = Tuple[int, int]


def _run(row: int, col: int, dr: int, dc: int) -> List[Cell]:
    return [(row + i * dr, col + i * dc) for i in range(WIN_LENGTH)]


def _is_win(board: np.ndarray, cells: List[Cell], player_value: int) -> bool:
    """True if every cell is on the board and holds ``player_value``."""
    rows, cols = board.shape
    return all(
        0 <= r < rows and 0 <= c < cols and board[r, c] == player_value
        for r, c in cells
    )


def find_winning_line(board: np.ndarray, player: Player) -> Optional[List[Cell]]:
    """
    Scan the board for a run of four belonging to ``player``.
    
    Args:
        board: The game board as numpy array
        player: The player whose pieces are checked
        
    Returns:
        Optional[List[Cell]]: The first winning run found, as (row, col)
        tuples in scan order, or None
    """
    rows, cols = board.shape
    for row in range(rows):
        for col in range(cols):
            for dr, dc in DIRECTIONS:
                cells = _run(row, col, dr, dc)
                if _is_win(board, cells, player.value):
                    return cells
    return None


def check_for_win(board: np.ndarray, player: Player) -> bool:
    """Check whether ``player`` has four in a row anywhere on the board."""
    return find_winning_line(board, player) is not None


def check_win_at(board: np.ndarray, row: int, col: int, player: Player) -> bool:
    """
    Check if the piece at (row, col) is part of a winning line.
    
    Args:
        board: The game board as numpy array
        row: Row of the placed piece
        col: Column of the placed piece
        player: Player who placed it
        
    Returns:
        bool: True if ``player`` has four in a row through (row, col)
    """
    rows, cols = board.shape
    for dr, dc in DIRECTIONS:
        count = 1
        
        r, c = row + dr, col + dc
        while 0 <= r < rows and 0 <= c < cols and board[r, c] == player.value:
            count += 1
            r, c = r + dr, c + dc
        
        r, c = row - dr, col - dc
        while 0 <= r < rows and 0 <= c < cols and board[r, c] == player.value:
            count += 1
            r, c = r - dr, c - dc
        
        if count >= WIN_LENGTH:
            return True
    
    return False
