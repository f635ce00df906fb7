"""
Command line entry point for console TicTacToe.

This module ties together:
- Player setup (name and human/computer for each slot)
- The game loop (alternating turns, board printed after each move)
- The final result

Run `tictactoe` or `python -m tictactoe` to play in the terminal!
"""

import random
from typing import Callable, List, Optional, Tuple

from .config import GameConfig
from .game import Game
from .players import Player, create_player


def ask_player(
    player_id: int,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
    rng: Optional[random.Random] = None
) -> Tuple[Player, int]:
    """
    Ask for one player's name and whether they are human.

    Args:
        player_id: Slot being filled (1 or 2).
        input_func: Where answers are read from.
        output_func: Where a human player's move errors go.
        rng: Random source if this slot turns out to be a computer.

    Returns:
        (player, next_player_id)
    """
    name = input_func(GameConfig.NAME_PROMPT.format(player_id=player_id)).strip()
    if not name:
        name = GameConfig.DEFAULT_NAME.format(player_id=player_id)

    answer = input_func(GameConfig.HUMAN_PROMPT.format(player_id=player_id)).strip()
    is_human = answer.lower().startswith("y")

    return create_player(
        player_id, name, is_human,
        input_func=input_func,
        output_func=output_func,
        rng=rng
    )


def setup_players(
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
    rng: Optional[random.Random] = None
) -> List[Player]:
    """Fill both player slots in order. Player 1 gets X, Player 2 gets O."""
    players = []
    player_id = GameConfig.FIRST_PLAYER_ID
    for _ in range(2):
        player, player_id = ask_player(player_id, input_func, output_func, rng)
        players.append(player)
    return players


def run(
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
    rng: Optional[random.Random] = None
) -> Game:
    """Set up the players, play one game and print the result."""
    first_player, second_player = setup_players(input_func, output_func, rng)

    game = Game(first_player, second_player, output_func=output_func)
    game.play()
    game.print_result()
    return game


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for computer players (repeatable games)"
    )

    args = parser.parse_args(argv)

    # Without a seed, computer players draw from the OS random source
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        run(input_func=input, output_func=print, rng=rng)
    except (KeyboardInterrupt, EOFError):
        print(f"\n{GameConfig.INTERRUPTED_MESSAGE}")
        return 1

    return 0
