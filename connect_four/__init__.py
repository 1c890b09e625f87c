"""
Connect Four Game Package

A two-player Connect Four game with a Flask web interface.
"""

from .config import GameConfig, create_game_config
from .grid import Grid, Player
from .game import GameSession, GameState, CellUpdate, MoveResult
from .win import check_for_win, check_win_at, find_winning_line

__all__ = [
    'GameConfig', 'create_game_config',
    'Grid', 'Player',
    'GameSession', 'GameState', 'CellUpdate', 'MoveResult',
    'check_for_win', 'check_win_at', 'find_winning_line',
]
__version__ = '1.0.0'
