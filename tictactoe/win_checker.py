"""
Win checker for console TicTacToe.
Checks if a symbol has three in a row or if the game is a draw.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

from .enums import Symbol

if TYPE_CHECKING:
    from .board import Board


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical symbols in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples).
    # Column i and row i alternate, then the two diagonals.
    WINNING_LINES = [
        [(0, 0), (1, 0), (2, 0)],  # column 0
        [(0, 0), (0, 1), (0, 2)],  # row 0
        [(0, 1), (1, 1), (2, 1)],  # column 1
        [(1, 0), (1, 1), (1, 2)],  # row 1
        [(0, 2), (1, 2), (2, 2)],  # column 2
        [(2, 0), (2, 1), (2, 2)],  # row 2
        [(0, 0), (1, 1), (2, 2)],  # diagonal
        [(0, 2), (1, 1), (2, 0)],  # anti-diagonal
    ]

    def check_winner(self, board: "Board") -> Optional[Symbol]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Symbol, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: "Board",
        line: List[Tuple[int, int]]
    ) -> Optional[Symbol]:
        """
        Check if a single line has a winner.

        Returns:
            The symbol if all 3 cells hold it, None otherwise.
        """
        first = board.get(*line[0])
        if first is None:
            return None  # Empty cell, no winner on this line

        for row, col in line[1:]:
            if board.get(row, col) != first:
                return None

        return first

    def check_draw(self, board: "Board") -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return not board.is_empty_cell_exist()
