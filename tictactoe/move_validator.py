"""
Move validator for console TicTacToe.
Turns typed text into a move and checks that the move is legal.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .board import Board
from .config import GameConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    row: Optional[int] = None
    col: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Input must be two whole numbers (row and column)
    2. Row and column must be in range 0-2
    3. Can only place on empty cells
    """

    # "1 2", "1,2" and "1, 2" are all accepted
    SEPARATOR = re.compile(r"[\s,]+")

    def parse_move(self, text: str) -> ValidationResult:
        """
        Parse a typed move.

        Args:
            text: Raw line from the player.

        Returns:
            ValidationResult carrying row and col when parsing worked.
            Range is not checked here.
        """
        parts = [part for part in self.SEPARATOR.split(text.strip()) if part]
        if len(parts) != 2:
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.MALFORMED_MESSAGE
            )

        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.MALFORMED_MESSAGE
            )

        return ValidationResult(is_valid=True, row=row, col=col)

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to mark (0-2).
            col: Column to mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if row/col are in valid range
        size = GameConfig.BOARD_SIZE
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.OUT_OF_RANGE_MESSAGE,
                row=row,
                col=col
            )

        # Check if cell is empty
        if board.get(row, col) is not None:
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.CELL_TAKEN_MESSAGE.format(row=row, col=col),
                row=row,
                col=col
            )

        return ValidationResult(is_valid=True, row=row, col=col)
