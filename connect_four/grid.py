"""
Board grid for Connect Four.

The grid is a numpy array of shape (rows, cols) where 0 marks an empty cell
and any other value is the value of the Player occupying it. Row 0 is the
top of the board; pieces fall towards row ``rows - 1``.
"""

from enum import Enum
from typing import List, Optional
import numpy as np


class Player(Enum):
    """Enumeration for players in the game."""
    ONE = 1
    TWO = 2
    
    @property
    def other(self) -> "Player":
        """The opponent of this player."""
        return Player.TWO if self is Player.ONE else Player.ONE


EMPTY = 0


class Grid:
    """
    Cell occupancy for a Connect Four board.
    
    Attributes:
        rows (int): Number of rows in the board
        cols (int): Number of columns in the board
        cells (np.ndarray): The raw board, 0 for empty or a Player value
    """
    
    MAX_ROWS = 32
    MAX_COLS = 32
    
    def __init__(self, rows: int = 6, cols: int = 7):
        """
        Create an empty grid.
        
        Args:
            rows (int): Number of rows in the board (default: 6)
            cols (int): Number of columns in the board (default: 7)
            
        Raises:
            ValueError: If the dimensions are below 1x1 or above the maximum
        """
        if rows < 1 or cols < 1:
            raise ValueError("Board dimensions must be at least 1x1")
        if rows > self.MAX_ROWS or cols > self.MAX_COLS:
            raise ValueError(f"Board dimensions cannot exceed {self.MAX_ROWS}x{self.MAX_COLS}")
        
        self.rows = rows
        self.cols = cols
        self.cells = np.zeros((rows, cols), dtype=int)
    
    def in_bounds(self, row: int, col: int) -> bool:
        """
        Check whether (row, col) lies on the board.
        
        Args:
            row (int): Row index (0 is the top)
            col (int): Column index (0-based)
            
        Returns:
            bool: True if both coordinates are in range
        """
        return 0 <= row < self.rows and 0 <= col < self.cols
    
    def get(self, row: int, col: int) -> Optional[Player]:
        """Return the player occupying (row, col), or None if it is empty."""
        value = self.cells[row, col]
        if value == EMPTY:
            return None
        return Player(int(value))
    
    def lowest_open_row(self, col: int) -> Optional[int]:
        """
        Find where a piece dropped into ``col`` would land.
        
        Args:
            col (int): Column index (0-based)
            
        Returns:
            Optional[int]: The bottom-most empty row, or None if the column
            is full or out of range
        """
        if col < 0 or col >= self.cols:
            return None
        for row in range(self.rows - 1, -1, -1):
            if self.cells[row, col] == EMPTY:
                return row
        return None
    
    def place(self, row: int, col: int, player: Player) -> None:
        """
        Put ``player``'s piece at (row, col).
        
        Raises:
            ValueError: If the cell is out of bounds or already occupied
        """
        if not self.in_bounds(row, col):
            raise ValueError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} board")
        if self.cells[row, col] != EMPTY:
            raise ValueError(f"Cell ({row}, {col}) is already occupied")
        self.cells[row, col] = player.value
    
    def is_full(self) -> bool:
        """
        Check whether every cell is occupied.
        
        Returns:
            bool: True if no piece can be dropped anywhere
        """
        return bool(np.all(self.cells != EMPTY))
    
    def valid_columns(self) -> List[int]:
        """Columns that still have room, in ascending order."""
        return [int(col) for col in np.flatnonzero(self.cells[0] == EMPTY)]
    
    def get_board(self) -> List[List[int]]:
        """
        Get a copy of the board as nested lists.
        
        Returns:
            List[List[int]]: A copy of the board
        """
        return self.cells.tolist()
    
    def __str__(self) -> str:
        result = []
        
        col_numbers = " ".join(str(i % 10) for i in range(self.cols))
        result.append(f" {col_numbers}")
        result.append("+" + "-" * (2 * self.cols - 1) + "+")
        
        symbols = {EMPTY: " ", Player.ONE.value: "X", Player.TWO.value: "O"}
        for row in self.cells:
            result.append("|" + "|".join(symbols[int(cell)] for cell in row) + "|")
        
        result.append("+" + "-" * (2 * self.cols - 1) + "+")
        return "\n".join(result)
