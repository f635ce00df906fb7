"""
Configuration for console TicTacToe.
Board glyphs, player defaults and every message shown to the user.
"""

from .enums import Symbol


class GameConfig:
    """
    Configuration class for the console game.
    Change these values to restyle the output.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # How each cell is drawn
    EMPTY_GLYPH = "_"
    SYMBOL_GLYPHS = {
        Symbol.X: "X",
        Symbol.O: "O",
    }
    CELL_SEPARATOR = " "

    # ==================== PLAYER SETTINGS ====================
    # Player 1 plays X and moves first, Player 2 plays O
    FIRST_PLAYER_ID = 1
    FIRST_PLAYER_SYMBOL = Symbol.X
    SECOND_PLAYER_SYMBOL = Symbol.O

    # Computer players ignore the entered name
    COMPUTER_NAME = "Computer"
    DEFAULT_NAME = "Player {player_id}"

    # ==================== SETUP PROMPTS ====================
    NAME_PROMPT = "Enter name for Player {player_id}: "
    HUMAN_PROMPT = "Is Player {player_id} a human player? (y/n): "

    # ==================== MOVE PROMPTS ====================
    MOVE_PROMPT = "Player {name}, enter row and column (0-2): "
    OUT_OF_RANGE_MESSAGE = "Invalid input. Row and column must be in range [0, 2]."
    CELL_TAKEN_MESSAGE = "Cell ({row}, {col}) is already taken. Please choose another cell."
    MALFORMED_MESSAGE = "Invalid input. Please enter two numbers for row and column (e.g. 1 1)."

    # ==================== RESULT MESSAGES ====================
    WIN_MESSAGE = "Congratulations! {name} wins!"
    DRAW_MESSAGE = "It's a draw!"
    INTERRUPTED_MESSAGE = "Game interrupted by user."

    @classmethod
    def glyph_for(cls, symbol) -> str:
        """Get the glyph for a cell value (None means empty)."""
        if symbol is None:
            return cls.EMPTY_GLYPH
        return cls.SYMBOL_GLYPHS[symbol]

    @classmethod
    def symbol_for_glyph(cls, glyph: str):
        """Reverse of glyph_for(). Returns None for the empty marker."""
        if glyph == cls.EMPTY_GLYPH:
            return None
        for symbol, symbol_glyph in cls.SYMBOL_GLYPHS.items():
            if symbol_glyph == glyph:
                return symbol
        raise ValueError(f"Unknown cell glyph: {glyph!r}")
