"""
Enumerations shared by the board, the players and the game loop.
"""

from enum import Enum


class Symbol(Enum):
    """The mark a player puts on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Symbol":
        """Get the other symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X


class GameStatus(Enum):
    """Where the game is. Every value except IN_PROGRESS is final."""
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    FIRST_PLAYER_WIN = "first_player_win"
    SECOND_PLAYER_WIN = "second_player_win"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class PlayerType(Enum):
    """Who is deciding the moves."""
    HUMAN = "human"
    COMPUTER = "computer"
