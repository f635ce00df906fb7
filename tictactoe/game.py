"""
Game controller for console TicTacToe.

Alternates turns between two players:
1. First player (X) marks a cell
2. Board is printed
3. Stop if X has three in a row, or the board is full (draw)
4. Second player (O) marks a cell
5. Board is printed
6. Stop if O has three in a row
7. Repeat
"""

from typing import Callable, Optional

from .board import Board
from .config import GameConfig
from .enums import GameStatus
from .players import Player
from .win_checker import WinChecker


class Game:
    """
    One game between two players on a fresh board.

    The game owns its board. Status starts IN_PROGRESS and changes
    exactly once, to DRAW or one of the win states.
    """

    def __init__(
        self,
        first_player: Player,
        second_player: Player,
        output_func: Callable[[str], None] = print
    ):
        """
        Set up the game.

        Args:
            first_player: Moves first (plays X).
            second_player: Moves second (plays O).
            output_func: Where the board and result are printed.
        """
        self.board = Board()
        self.first_player = first_player
        self.second_player = second_player
        self.status = GameStatus.IN_PROGRESS
        self.win_checker = WinChecker()
        self._output = output_func

    def play(self) -> GameStatus:
        """
        Play until someone wins or the board is full.

        Returns:
            The final status. Calling play() again after the game
            ended changes nothing.
        """
        while self.board.is_empty_cell_exist() and self.status == GameStatus.IN_PROGRESS:
            # First player's half-turn
            self._half_turn(self.first_player)
            if self.board.check_win():
                self.status = GameStatus.FIRST_PLAYER_WIN
                break
            if self.win_checker.check_draw(self.board):
                self.status = GameStatus.DRAW
                break

            # Second player's half-turn
            self._half_turn(self.second_player)
            if self.board.check_win():
                self.status = GameStatus.SECOND_PLAYER_WIN
                break

        return self.status

    def _half_turn(self, player: Player):
        """Let one player mark the board, then show it."""
        player.get_next_move(self.board)
        self._output(self.board.format())

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw or unfinished game."""
        if self.status == GameStatus.FIRST_PLAYER_WIN:
            return self.first_player
        if self.status == GameStatus.SECOND_PLAYER_WIN:
            return self.second_player
        return None

    def result_message(self) -> str:
        """The line announcing how the game ended."""
        winner = self.winner
        if winner is not None:
            return GameConfig.WIN_MESSAGE.format(name=winner.name)
        return GameConfig.DRAW_MESSAGE

    def print_result(self):
        """Print the result. Does not change the game."""
        self._output(self.result_message())
