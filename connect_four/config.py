"""
Configuration for Connect Four games and the web interface.
"""

import os


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


class GameConfig:
    """Configuration for a game session and the web server."""
    
    def __init__(self):
        # Board
        self.rows = 6
        self.cols = 7
        
        # Player colors used when none are supplied at (re)start
        self.player_one_color = "red"
        self.player_two_color = "blue"
        
        # Web server
        self.host = "0.0.0.0"
        self.port = 5000
        self.debug = False
        self.secret_key = "connect_four_secret_key_change_in_production"
        self.log_level = "INFO"
        self.max_games = 1000  # Oldest browser sessions are dropped past this
    
    @classmethod
    def from_env(cls) -> "GameConfig":
        """
        Build a configuration, overriding defaults from CONNECT_FOUR_* variables.
        
        Returns:
            GameConfig: Defaults with any environment overrides applied
        
        Raises:
            ValueError: If a numeric variable is not an integer
        """
        config = cls()
        config.rows = _int_from_env('CONNECT_FOUR_ROWS', config.rows)
        config.cols = _int_from_env('CONNECT_FOUR_COLS', config.cols)
        if os.getenv('CONNECT_FOUR_PLAYER1_COLOR'):
            config.player_one_color = os.getenv('CONNECT_FOUR_PLAYER1_COLOR')
        if os.getenv('CONNECT_FOUR_PLAYER2_COLOR'):
            config.player_two_color = os.getenv('CONNECT_FOUR_PLAYER2_COLOR')
        if os.getenv('CONNECT_FOUR_HOST'):
            config.host = os.getenv('CONNECT_FOUR_HOST')
        config.port = _int_from_env('CONNECT_FOUR_PORT', config.port)
        config.debug = os.getenv('CONNECT_FOUR_DEBUG', '').lower() in ('1', 'true', 'yes')
        config.secret_key = os.getenv('CONNECT_FOUR_SECRET_KEY', config.secret_key)
        config.log_level = os.getenv('CONNECT_FOUR_LOG_LEVEL', config.log_level).upper()
        config.max_games = _int_from_env('CONNECT_FOUR_MAX_GAMES', config.max_games)
        return config


def create_game_config(
    rows: int = 6,
    cols: int = 7,
    player_one_color: str = "red",
    player_two_color: str = "blue",
    **overrides
) -> GameConfig:
    """Create a game configuration with custom parameters."""
    config = GameConfig()
    config.rows = rows
    config.cols = cols
    config.player_one_color = player_one_color
    config.player_two_color = player_two_color
    for key, value in overrides.items():
        if not hasattr(config, key):
            raise ValueError(f"Unknown configuration option: {key}")
        setattr(config, key, value)
    return config
