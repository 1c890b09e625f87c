#!/usr/bin/env python3
"""
Example usage of the Connect Four implementation.

This script demonstrates how to drive a GameSession: playing moves,
listening for board updates, reaching a win or a tie, and restarting
with new player colors.
"""

import logging

from connect_four import GameSession, GameState


def example_basic_game():
    """Demonstrate a basic game ending in a win."""
    print("=== Basic Connect Four Game ===")

    game = GameSession()
    print(game)
    print()

    moves = [3, 3, 2, 4, 1, 5, 0]  # Player 1 wins along the bottom row
    for col in moves:
        player = game.current_player
        print(f"{player.name} ({game.color_of(player)}) plays column {col}")

        result = game.submit_move(col)
        if result is None:
            print(f"Ignored move: column {col}")
            continue

        print(game)
        print()
        if result.is_game_over:
            print(result.message)
            print(f"Winning line: {result.winning_line}")
            break

    print("\n" + "="*50 + "\n")


def example_listener():
    """Demonstrate a presentation layer subscribing to updates."""
    print("=== Listening for Updates ===")

    game = GameSession(player_one_color="yellow", player_two_color="green")

    def render(updates, result):
        if result is None:
            print("  board cleared")
            return
        for update in updates:
            print(f"  {game.color_of(update.player)} piece at row {update.row}, col {update.col}")
        if result.message:
            print(f"  {result.message}")

    game.add_listener(render)
    for col in [0, 1, 0, 1, 0, 1, 0]:
        game.submit_move(col)

    print("Restarting with new colors")
    game.restart("purple", "orange")
    print(game)
    print("\n" + "="*50 + "\n")


def example_ignored_moves():
    """Demonstrate moves that are silently ignored."""
    print("=== Ignored Moves ===")

    game = GameSession(rows=2, cols=4)
    game.submit_move(0)
    game.submit_move(0)
    print(game)
    print(f"Column 0 full, move accepted: {game.submit_move(0) is not None}")
    print(f"Still {game.current_player.name}'s turn")
    print("\n" + "="*50 + "\n")


def example_tie():
    """Demonstrate a full board with no winner."""
    print("=== Tie Game ===")

    game = GameSession()
    moves = [0] * 6 + [1] * 6 + [3] + [2] * 6 + [3] * 5 + [4] * 6 + [6] + [5] * 6 + [6] * 5
    for col in moves:
        game.submit_move(col)

    print(game)
    print(f"Game result: {game.game_state.value}")
    assert game.game_state == GameState.DRAW


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    print("Connect Four Examples")
    print("=" * 50)
    print()

    try:
        example_basic_game()
        example_listener()
        example_ignored_moves()
        example_tie()
    except KeyboardInterrupt:
        print("\nExamples interrupted by user.")


if __name__ == "__main__":
    main()
