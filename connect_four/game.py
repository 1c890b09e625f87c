"""
Connect Four game session.

Two players alternate dropping pieces into the columns of a Grid until one
of them gets four in a row (horizontally, vertically, or diagonally) or the
board fills up. A GameSession owns one grid and processes moves one at a
time; presentation layers read plain data back from it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .config import GameConfig
from .grid import Grid, Player
from .win import Cell, find_winning_line

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Enumeration for game states."""
    IN_PROGRESS = "in_progress"
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    DRAW = "draw"


WIN_STATES = {
    Player.ONE: GameState.PLAYER_ONE_WINS,
    Player.TWO: GameState.PLAYER_TWO_WINS,
}


@dataclass
class CellUpdate:
    """A piece that was just placed."""
    row: int
    col: int
    player: Player
    
    def to_dict(self) -> Dict[str, int]:
        return {'row': self.row, 'col': self.col, 'player': self.player.value}


@dataclass
class MoveResult:
    """Outcome of an accepted move."""
    update: CellUpdate
    game_state: GameState
    winner: Optional[Player] = None
    winning_line: Optional[List[Cell]] = None
    message: Optional[str] = None
    
    @property
    def is_game_over(self) -> bool:
        """True once the move ended the game."""
        return self.game_state != GameState.IN_PROGRESS


# Called as listener(updates, result); result is None after a restart.
Listener = Callable[[List[CellUpdate], Optional[MoveResult]], None]


class GameSession:
    """
    A single game of Connect Four between two players.
    
    Attributes:
        config (GameConfig): Defaults for board size and player colors
        grid (Grid): The board
        current_player (Player): The player to move
        game_state (GameState): Current state of the game
        colors (Dict[Player, str]): Display color of each player
        winning_line (Optional[List[Cell]]): Cells of the winning run, once won
    """
    
    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None,
                 player_one_color: Optional[str] = None,
                 player_two_color: Optional[str] = None,
                 config: Optional[GameConfig] = None):
        """
        Start a new game.
        
        Args:
            rows (int): Number of rows, defaults to ``config.rows``
            cols (int): Number of columns, defaults to ``config.cols``
            player_one_color (str): Color of Player.ONE, empty for the default
            player_two_color (str): Color of Player.TWO, empty for the default
            config (GameConfig): Configuration to take defaults from
        
        Raises:
            ValueError: If the board dimensions are invalid
        """
        self.config = config or GameConfig()
        self.rows = rows if rows is not None else self.config.rows
        self.cols = cols if cols is not None else self.config.cols
        self._listeners: List[Listener] = []
        self._start(player_one_color, player_two_color)
    
    def _start(self, player_one_color: Optional[str], player_two_color: Optional[str]) -> None:
        self.grid = Grid(self.rows, self.cols)
        self.current_player = Player.ONE
        self.game_state = GameState.IN_PROGRESS
        self.winning_line: Optional[List[Cell]] = None
        self.colors = {
            Player.ONE: player_one_color or self.config.player_one_color,
            Player.TWO: player_two_color or self.config.player_two_color,
        }
    
    def add_listener(self, listener: Listener) -> None:
        """Register a callback run after every accepted move and restart."""
        self._listeners.append(listener)
    
    def remove_listener(self, listener: Listener) -> None:
        """
        Unregister a callback added with add_listener.
        
        Raises:
            ValueError: If the listener was never registered
        """
        self._listeners.remove(listener)
    
    def _notify(self, updates: List[CellUpdate], result: Optional[MoveResult]) -> None:
        for listener in list(self._listeners):
            listener(updates, result)
    
    def submit_move(self, col: int) -> Optional[MoveResult]:
        """
        Drop the current player's piece into ``col``.
        
        Moves into a full or nonexistent column, or after the game has ended,
        are ignored: nothing changes and None is returned.
        
        Args:
            col (int): Column index (0-based)
        
        Returns:
            Optional[MoveResult]: What happened, or None if the move was ignored
        """
        if self.is_game_over():
            logger.debug("Ignoring move in column %s: game is over", col)
            return None
        
        row = self.grid.lowest_open_row(col)
        if row is None:
            logger.debug("Ignoring move in column %s: no space", col)
            return None
        
        player = self.current_player
        self.grid.place(row, col, player)
        update = CellUpdate(row, col, player)
        logger.debug("Player %s (%s) dropped into (%d, %d)",
                     player.name, self.colors[player], row, col)
        
        line = find_winning_line(self.grid.cells, player)
        if line is not None:
            self.game_state = WIN_STATES[player]
            self.winning_line = line
            logger.info("Player %s (%s) won", player.name, self.colors[player])
        elif self.grid.is_full():
            self.game_state = GameState.DRAW
            logger.info("Game ended in a tie")
        else:
            self.current_player = player.other
        
        result = MoveResult(
            update=update,
            game_state=self.game_state,
            winner=self.get_winner(),
            winning_line=self.winning_line,
            message=self.outcome_message(),
        )
        self._notify([update], result)
        return result
    
    def restart(self, player_one_color: Optional[str] = None,
                player_two_color: Optional[str] = None) -> None:
        """
        Clear the board and start over with Player.ONE to move.
        
        Args:
            player_one_color (str): New color for Player.ONE, empty for the default
            player_two_color (str): New color for Player.TWO, empty for the default
        """
        self._start(player_one_color, player_two_color)
        logger.info("Game restarted (%s vs %s)",
                    self.colors[Player.ONE], self.colors[Player.TWO])
        self._notify([], None)
    
    def color_of(self, player: Player) -> str:
        """
        Get the display color of a player.
        
        Args:
            player (Player): The player to look up
        
        Returns:
            str: The color assigned at the last start or restart
        """
        return self.colors[player]
    
    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.
        
        Returns:
            Optional[Player]: The winning player, or None if no winner yet
        """
        if self.game_state == GameState.PLAYER_ONE_WINS:
            return Player.ONE
        elif self.game_state == GameState.PLAYER_TWO_WINS:
            return Player.TWO
        return None
    
    def is_game_over(self) -> bool:
        """
        Check if the game is over.
        
        Returns:
            bool: True once the game is won or tied
        """
        return self.game_state != GameState.IN_PROGRESS
    
    def get_valid_moves(self) -> List[int]:
        """Columns that accept a piece, or [] once the game is over."""
        if self.is_game_over():
            return []
        return self.grid.valid_columns()
    
    def outcome_message(self) -> Optional[str]:
        """The end-of-game announcement, or None while the game is running."""
        winner = self.get_winner()
        if winner is not None:
            return f"The {self.colors[winner]} player won!"
        if self.game_state == GameState.DRAW:
            return "Tie!"
        return None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert the session to a JSON-serializable snapshot."""
        winner = self.get_winner()
        return {
            'board': self.grid.get_board(),
            'rows': self.rows,
            'cols': self.cols,
            'current_player': self.current_player.value,
            'colors': {str(p.value): color for p, color in self.colors.items()},
            'game_state': self.game_state.value,
            'valid_moves': self.get_valid_moves(),
            'winner': winner.value if winner else None,
            'winning_line': [list(cell) for cell in self.winning_line] if self.winning_line else None,
            'is_game_over': self.is_game_over(),
            'message': self.outcome_message(),
        }
    
    def __str__(self) -> str:
        result = [str(self.grid)]
        message = self.outcome_message()
        if message is None:
            player = self.current_player
            result.append(f"Current player: {player.name} ({self.colors[player]})")
        else:
            result.append(message)
        return "\n".join(result)
