"""
Console TicTacToe
=================
Two players take turns marking a 3x3 board in the terminal.
Each player is either a human (keyboard input) or a computer
that picks a random empty cell.

Player 1 always plays X and moves first, Player 2 plays O.
"""

__version__ = "1.0.0"

from .enums import Symbol, GameStatus, PlayerType
from .config import GameConfig
from .board import Board
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .players import Player, HumanPlayer, ComputerPlayer, create_player
from .game import Game
