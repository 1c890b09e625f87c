"""
Connect Four Web Interface

A Flask web application for playing Connect Four in the browser. Each
browser session gets its own GameSession; the page posts column clicks and
redraws the board from the returned JSON.
"""

import logging
import random
import threading
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from flask import Flask, render_template, request, jsonify, session

from .config import GameConfig
from .game import GameSession

logger = logging.getLogger(__name__)

config = GameConfig.from_env()

app = Flask(__name__)
app.secret_key = config.secret_key

# Global storage for game sessions, keyed by the id kept in the cookie session.
# Least recently used first; trimmed to config.max_games.
games: "OrderedDict[str, GameSession]" = OrderedDict()
locks: Dict[str, threading.Lock] = {}
games_lock = threading.Lock()


def _new_game_id() -> str:
    game_id = str(random.randint(100000, 999999))
    while game_id in games:
        game_id = str(random.randint(100000, 999999))
    return game_id


def _evict_old_games() -> None:
    while len(games) > config.max_games:
        game_id, _ = games.popitem(last=False)
        locks.pop(game_id, None)
        logger.info("Evicted game %s", game_id)


def get_game() -> Tuple[GameSession, threading.Lock]:
    """
    Get or create the game for the current browser session.
    
    Returns:
        Tuple[GameSession, threading.Lock]: The game and the lock guarding it
    
    Raises:
        ValueError: If the configured board size is invalid
    """
    with games_lock:
        game_id = session.get('game_id')
        if game_id is None or game_id not in games:
            game = GameSession(config=config)
            game_id = _new_game_id()
            games[game_id] = game
            locks[game_id] = threading.Lock()
            session['game_id'] = game_id
            logger.info("Created game %s", game_id)
            _evict_old_games()
        else:
            games.move_to_end(game_id)
        return games[game_id], locks[game_id]


def get_json_object() -> Optional[Dict[str, Any]]:
    """Request body as a dict; {} when empty, None when it is not a JSON object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    return data


def serialize_game_state(game: GameSession) -> Dict[str, Any]:
    """Convert game state to JSON-serializable format."""
    return game.to_dict()


@app.errorhandler(ValueError)
def handle_value_error(e):
    logger.warning("Rejected request: %s", e)
    return jsonify({'error': str(e)}), 400


@app.route('/')
def index():
    """Main game page."""
    get_game()
    return render_template('index.html')


@app.route('/api/game/state')
def get_game_state():
    """Get current game state."""
    game, lock = get_game()
    with lock:
        return jsonify(serialize_game_state(game))


@app.route('/api/game/move', methods=['POST'])
def make_move():
    """Drop a piece for the current player."""
    data = get_json_object()
    if data is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    
    col = data.get('col')
    if col is None:
        return jsonify({'error': 'Column not specified'}), 400
    if isinstance(col, bool) or not isinstance(col, int):
        return jsonify({'error': 'Column must be an integer'}), 400
    
    game, lock = get_game()
    with lock:
        result = game.submit_move(col)
        response = serialize_game_state(game)
    
    # Full columns and finished games are ignored, not errors
    response['moved'] = result is not None
    if result is not None:
        response['last_move'] = result.update.to_dict()
    return jsonify(response)


@app.route('/api/game/new', methods=['POST'])
def new_game():
    """Restart the game, optionally with new player colors."""
    data = get_json_object()
    if data is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    
    player1 = data.get('player1') or None
    player2 = data.get('player2') or None
    if not all(color is None or isinstance(color, str) for color in (player1, player2)):
        return jsonify({'error': 'Player colors must be strings'}), 400
    
    game, lock = get_game()
    with lock:
        game.restart(player1, player2)
        return jsonify(serialize_game_state(game))


def main() -> None:
    """Run the development server."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    logger.info("Starting Connect Four on %s:%d", config.host, config.port)
    app.run(debug=config.debug, host=config.host, port=config.port)


if __name__ == '__main__':
    main()
