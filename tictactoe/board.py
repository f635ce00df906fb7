"""
Board for console TicTacToe.
Holds the 9 cells, places marks and answers win/fullness questions.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .config import GameConfig
from .enums import Symbol
from .win_checker import WinChecker


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored flat, row by row, so (row, col) lives at
    index row * 3 + col. None means the cell is empty.

    The number of empty cells is kept up to date on every mark,
    so checking for a full board never scans the grid.
    """

    # The 9 cells - None means empty, otherwise the Symbol placed there
    cells: List[Optional[Symbol]] = field(
        default_factory=lambda: [None] * GameConfig.CELL_COUNT
    )

    # Cells still free (9 minus successful marks), derived from cells
    empty_count: int = field(init=False)

    def __post_init__(self):
        self.cells = list(self.cells)
        if len(self.cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"A board has {GameConfig.CELL_COUNT} cells, got {len(self.cells)}"
            )
        for cell in self.cells:
            if cell is not None and not isinstance(cell, Symbol):
                raise ValueError(f"Unknown cell value: {cell!r}")

        self.empty_count = self.cells.count(None)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from rows of glyphs.

        Args:
            rows: Three strings like "X_O" (spaces are ignored).

        Returns:
            A board with those cells filled in.
        """
        board = cls()
        rows = [row.replace(GameConfig.CELL_SEPARATOR, "") for row in rows]
        if len(rows) != GameConfig.BOARD_SIZE or any(
            len(row) != GameConfig.BOARD_SIZE for row in rows
        ):
            raise ValueError(f"Expected a 3x3 grid, got {rows}")

        for row, glyphs in enumerate(rows):
            for col, glyph in enumerate(glyphs):
                symbol = GameConfig.symbol_for_glyph(glyph)
                if symbol is not None:
                    board.mark_symbol(row, col, symbol)
        return board

    @staticmethod
    def _index(row: int, col: int) -> int:
        if not (0 <= row < GameConfig.BOARD_SIZE and 0 <= col < GameConfig.BOARD_SIZE):
            raise IndexError(f"Position ({row}, {col}) is off the board")
        return row * GameConfig.BOARD_SIZE + col

    def get(self, row: int, col: int) -> Optional[Symbol]:
        """Get what is in a cell (None if empty)."""
        return self.cells[self._index(row, col)]

    def mark_symbol(self, row: int, col: int, symbol: Symbol) -> bool:
        """
        Place a symbol on the board.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            symbol: The symbol to place.

        Returns:
            True if the cell was empty and is now marked,
            False if it was already taken (nothing changes).
        """
        index = self._index(row, col)

        # A marked cell is never overwritten
        if self.cells[index] is not None:
            return False

        self.cells[index] = symbol
        self.empty_count -= 1
        return True

    def check_win(self) -> bool:
        """True if any row, column or diagonal holds three of the same symbol."""
        return WinChecker().check_winner(self) is not None

    def is_empty_cell_exist(self) -> bool:
        """True while at least one cell is free."""
        return self.empty_count > 0

    def render(self) -> List[List[str]]:
        """
        Get the grid as glyphs, one list per row.

        Returns:
            3 rows of 3 glyphs, e.g. [["X", "_", "O"], ...].
        """
        size = GameConfig.BOARD_SIZE
        return [
            [GameConfig.glyph_for(cell) for cell in self.cells[row * size:(row + 1) * size]]
            for row in range(size)
        ]

    def format(self) -> str:
        """The rendered grid as text, one row per line."""
        return "\n".join(
            GameConfig.CELL_SEPARATOR.join(row) for row in self.render()
        )


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    assert board.mark_symbol(1, 1, Symbol.X)
    assert not board.mark_symbol(1, 1, Symbol.O)
    print(board.format())
    print(f"Empty cells left: {board.empty_count}")

    board = Board.from_rows(["XXX", "OO_", "___"])
    print(board.format())
    assert board.check_win()

    print("\nBoard test done!")
