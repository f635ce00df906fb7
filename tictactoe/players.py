"""
Players for console TicTacToe.
A human types moves at the keyboard, a computer picks random empty cells.
"""

import abc
import random
from typing import Callable, Optional, Tuple

from .board import Board
from .config import GameConfig
from .enums import PlayerType, Symbol
from .move_validator import MoveValidator


class Player(abc.ABC):
    """
    One of the two players in a game.

    The id, name and symbol are fixed when the player is created.
    get_next_move() both decides the move and marks it on the board.
    """

    player_type: PlayerType

    def __init__(self, player_id: int, name: str, symbol: Symbol):
        self.id = player_id
        self.name = name
        self.symbol = symbol

    @abc.abstractmethod
    def get_next_move(self, board: Board) -> Tuple[int, int]:
        """
        Pick a cell and mark it with this player's symbol.

        Args:
            board: The board to play on. Must have an empty cell.

        Returns:
            (row, col) of the cell that was marked.
        """

    def is_automated(self) -> bool:
        """True if moves are made without a person at the keyboard."""
        return self.player_type == PlayerType.COMPUTER

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, name={self.name!r}, "
            f"symbol={self.symbol.value})"
        )


class HumanPlayer(Player):
    """
    A player who types row and column at the keyboard.

    Keeps asking until the typed move is in range and lands on an
    empty cell. Every rejected attempt prints why.
    """

    player_type = PlayerType.HUMAN

    def __init__(
        self,
        player_id: int,
        name: str,
        symbol: Symbol,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        super().__init__(player_id, name, symbol)
        self._input = input_func
        self._output = output_func
        self.validator = MoveValidator()

    def get_next_move(self, board: Board) -> Tuple[int, int]:
        while True:
            text = self._input(GameConfig.MOVE_PROMPT.format(name=self.name))

            parsed = self.validator.parse_move(text)
            if not parsed.is_valid:
                self._output(parsed.error_message)
                continue

            result = self.validator.validate_move(board, parsed.row, parsed.col)
            if not result.is_valid:
                self._output(result.error_message)
                continue

            if board.mark_symbol(result.row, result.col, self.symbol):
                return result.row, result.col


class ComputerPlayer(Player):
    """
    A player that marks a uniformly random empty cell.

    Row and column are drawn independently from 0-2 and redrawn
    until they hit an empty cell. No strategy at all.
    """

    player_type = PlayerType.COMPUTER

    def __init__(
        self,
        player_id: int,
        name: str,
        symbol: Symbol,
        rng: Optional[random.Random] = None
    ):
        super().__init__(player_id, name, symbol)
        # SystemRandom seeds from the OS, pass a seeded Random for repeatable games
        self.rng = rng if rng is not None else random.SystemRandom()

    def get_next_move(self, board: Board) -> Tuple[int, int]:
        if not board.is_empty_cell_exist():
            raise ValueError("Board is full - no legal moves remain.")

        last = GameConfig.BOARD_SIZE - 1
        while True:
            row = self.rng.randint(0, last)
            col = self.rng.randint(0, last)
            if board.mark_symbol(row, col, self.symbol):
                return row, col


def symbol_for_player_id(player_id: int) -> Symbol:
    """Player 1 plays X, everyone else plays O."""
    if player_id == GameConfig.FIRST_PLAYER_ID:
        return GameConfig.FIRST_PLAYER_SYMBOL
    return GameConfig.SECOND_PLAYER_SYMBOL


def create_player(
    player_id: int,
    name: str,
    is_human: bool,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
    rng: Optional[random.Random] = None
) -> Tuple[Player, int]:
    """
    Create a player for the given slot.

    Args:
        player_id: Slot number (1 or 2). Decides the symbol.
        name: Entered name. Ignored for computer players.
        is_human: Human (keyboard) or computer (random moves).
        input_func: Where a human player reads moves from.
        output_func: Where a human player reports rejected moves.
        rng: Random source for a computer player.

    Returns:
        (player, next_player_id)
    """
    symbol = symbol_for_player_id(player_id)

    if is_human:
        player = HumanPlayer(
            player_id, name, symbol,
            input_func=input_func,
            output_func=output_func
        )
    else:
        player = ComputerPlayer(player_id, GameConfig.COMPUTER_NAME, symbol, rng=rng)

    return player, player_id + 1
