"""
Tests for the players, the game loop and the command line entry point.

Usage:
    pytest test_game.py     # Run with pytest
    python test_game.py     # Run without pytest's runner
"""

import random
import sys
from pathlib import Path
from unittest import mock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from tictactoe import cli
from tictactoe.board import Board
from tictactoe.config import GameConfig
from tictactoe.enums import GameStatus, PlayerType, Symbol
from tictactoe.game import Game
from tictactoe.players import (
    ComputerPlayer,
    HumanPlayer,
    create_player,
    symbol_for_player_id,
)


class ScriptedInput:
    """Stands in for input(): hands out prepared lines and records prompts."""

    def __init__(self, lines, before_each=None):
        self.lines = iter(lines)
        self.prompts = []
        self.before_each = before_each

    def __call__(self, prompt):
        if self.before_each is not None:
            self.before_each(len(self.prompts))
        self.prompts.append(prompt)
        return next(self.lines)


class SequenceRandom:
    """Random source that returns fixed numbers in order."""

    def __init__(self, values):
        self.values = iter(values)

    def randint(self, low, high):
        value = next(self.values)
        assert low <= value <= high
        return value


def make_humans(moves, outputs):
    """Two human players sharing one script of moves, X first."""
    script = ScriptedInput(moves)
    alice = HumanPlayer(1, "Alice", Symbol.X, input_func=script, output_func=outputs.append)
    bob = HumanPlayer(2, "Bob", Symbol.O, input_func=script, output_func=outputs.append)
    return alice, bob, script


# ==================== PLAYERS ====================

def test_player_factory_assigns_symbols_and_ids():
    first, next_id = create_player(1, "Alice", True)
    second, last_id = create_player(next_id, "Bob", False)

    assert (first.id, first.name, first.symbol) == (1, "Alice", Symbol.X)
    assert first.player_type == PlayerType.HUMAN
    assert not first.is_automated()

    assert (second.id, second.symbol) == (2, Symbol.O)
    assert second.name == GameConfig.COMPUTER_NAME
    assert second.player_type == PlayerType.COMPUTER
    assert second.is_automated()
    assert last_id == 3

    assert symbol_for_player_id(1) == Symbol.X
    assert symbol_for_player_id(2) == Symbol.O


def test_human_out_of_range_is_reprompted():
    board = Board()

    def board_untouched(attempt):
        # Nothing is marked until the valid move comes in
        assert board.empty_count == 9

    outputs = []
    script = ScriptedInput(["3 3", "1 1"], before_each=board_untouched)
    player = HumanPlayer(1, "Alice", Symbol.X, input_func=script, output_func=outputs.append)

    assert player.get_next_move(board) == (1, 1)
    assert script.prompts == ["Player Alice, enter row and column (0-2): "] * 2
    assert outputs == [GameConfig.OUT_OF_RANGE_MESSAGE]
    assert board.get(1, 1) == Symbol.X
    assert board.empty_count == 8


def test_human_taken_cell_is_reprompted():
    board = Board.from_rows(["O__", "___", "___"])
    outputs = []
    script = ScriptedInput(["0 0", "2 2"])
    player = HumanPlayer(1, "Alice", Symbol.X, input_func=script, output_func=outputs.append)

    assert player.get_next_move(board) == (2, 2)
    assert outputs == ["Cell (0, 0) is already taken. Please choose another cell."]
    assert board.get(0, 0) == Symbol.O
    assert board.get(2, 2) == Symbol.X


def test_human_malformed_input_is_reprompted():
    board = Board()
    outputs = []
    script = ScriptedInput(["a b", "1", "1,2"])
    player = HumanPlayer(2, "Bob", Symbol.O, input_func=script, output_func=outputs.append)

    assert player.get_next_move(board) == (1, 2)
    assert outputs == [GameConfig.MALFORMED_MESSAGE] * 2
    assert board.get(1, 2) == Symbol.O


def test_computer_takes_the_only_empty_cell():
    for seed in range(5):
        board = Board.from_rows(["XOX", "XOO", "OX_"])
        player = ComputerPlayer(2, "Computer", Symbol.O, rng=random.Random(seed))
        assert player.get_next_move(board) == (2, 2)
        assert board.get(2, 2) == Symbol.O
        assert not board.is_empty_cell_exist()


def test_computer_redraws_on_taken_cell():
    board = Board.from_rows(["X__", "___", "___"])
    player = ComputerPlayer(2, "Computer", Symbol.O, rng=SequenceRandom([0, 0, 0, 0, 2, 1]))
    assert player.get_next_move(board) == (2, 1)
    assert board.get(0, 0) == Symbol.X
    assert board.empty_count == 7


def test_computer_on_full_board_raises():
    board = Board.from_rows(["XOX", "XOO", "OXX"])
    player = ComputerPlayer(1, "Computer", Symbol.X, rng=random.Random(0))
    with pytest.raises(ValueError):
        player.get_next_move(board)

    # Same for a board built straight from its cells
    board = Board(cells=[Symbol.X] * 9)
    with pytest.raises(ValueError):
        player.get_next_move(board)


# ==================== GAME ====================

def test_first_player_wins_top_row():
    outputs = []
    alice, bob, _ = make_humans(["0 0", "1 0", "0 1", "1 1", "0 2"], outputs)
    game = Game(alice, bob, output_func=outputs.append)

    assert game.status == GameStatus.IN_PROGRESS
    assert game.play() == GameStatus.FIRST_PLAYER_WIN
    assert game.board.check_win()
    assert game.winner is alice

    # One board printed per half-turn
    assert outputs[0] == "X _ _\n_ _ _\n_ _ _"
    assert outputs[-1] == "X X X\nO O _\n_ _ _"
    assert len(outputs) == 5

    game.print_result()
    assert outputs[-1] == "Congratulations! Alice wins!"


def test_second_player_wins_middle_row():
    outputs = []
    alice, bob, _ = make_humans(["0 0", "1 0", "0 1", "1 1", "2 2", "1 2"], outputs)
    game = Game(alice, bob, output_func=outputs.append)

    assert game.play() == GameStatus.SECOND_PLAYER_WIN
    assert game.winner is bob
    assert game.result_message() == "Congratulations! Bob wins!"


def test_full_board_is_draw():
    outputs = []
    moves = ["0 0", "0 1", "0 2", "1 1", "1 0", "1 2", "2 1", "2 0", "2 2"]
    alice, bob, _ = make_humans(moves, outputs)
    game = Game(alice, bob, output_func=outputs.append)

    assert game.play() == GameStatus.DRAW
    assert not game.board.check_win()
    assert not game.board.is_empty_cell_exist()
    assert game.board.format() == "X O X\nX O O\nO X X"
    assert game.winner is None

    game.print_result()
    assert outputs[-1] == "It's a draw!"
    assert len(outputs) == 10


def test_finished_game_does_not_replay():
    outputs = []
    alice, bob, script = make_humans(["0 0", "1 0", "0 1", "1 1", "0 2"], outputs)
    game = Game(alice, bob, output_func=outputs.append)
    game.play()

    printed = len(outputs)
    assert game.play() == GameStatus.FIRST_PLAYER_WIN
    assert len(outputs) == printed
    assert len(script.prompts) == 5


def test_computer_game_reaches_terminal_status():
    for seed in range(20):
        rng = random.Random(seed)
        first = ComputerPlayer(1, "Computer", Symbol.X, rng=rng)
        second = ComputerPlayer(2, "Computer", Symbol.O, rng=rng)
        outputs = []
        game = Game(first, second, output_func=outputs.append)

        status = game.play()
        assert status.is_terminal
        assert len(outputs) == 9 - game.board.empty_count
        if status == GameStatus.DRAW:
            assert not game.board.is_empty_cell_exist()
            assert not game.board.check_win()
        else:
            assert game.board.check_win()


# ==================== COMMAND LINE ====================

def test_setup_players_prompts_for_both_slots():
    script = ScriptedInput(["Alice", "y", "Hal", "n"])
    first, second = cli.setup_players(input_func=script, rng=random.Random(1))

    assert script.prompts == [
        "Enter name for Player 1: ",
        "Is Player 1 a human player? (y/n): ",
        "Enter name for Player 2: ",
        "Is Player 2 a human player? (y/n): ",
    ]
    assert isinstance(first, HumanPlayer)
    assert (first.name, first.symbol) == ("Alice", Symbol.X)
    assert isinstance(second, ComputerPlayer)
    assert (second.name, second.symbol) == ("Computer", Symbol.O)


def test_setup_players_blank_name_and_yes():
    script = ScriptedInput(["", "YES", "Bob", "Yes"])
    first, second = cli.setup_players(input_func=script)
    assert first.name == "Player 1"
    assert second.name == "Bob"
    assert not first.is_automated() and not second.is_automated()


def test_run_prints_result():
    outputs = []
    script = ScriptedInput(["Ann", "n", "Ben", "n"])
    game = cli.run(input_func=script, output_func=outputs.append, rng=random.Random(4))

    assert game.status.is_terminal
    assert outputs[-1] in ("Congratulations! Computer wins!", "It's a draw!")


def test_main_exit_codes():
    with mock.patch("builtins.input", side_effect=["Ann", "n", "Ben", "n"]), \
            mock.patch("builtins.print"):
        assert cli.main(["--seed", "7"]) == 0

    with mock.patch("builtins.input", side_effect=EOFError), \
            mock.patch("builtins.print"):
        assert cli.main([]) == 1


# ==================== RUNNER ====================

def test_runner_reports_errors_as_failures():
    def broken_script():
        next(iter([]))

    def missed_raise():
        with pytest.raises(ValueError):
            pass

    def fine():
        pass

    with mock.patch("builtins.print"):
        assert run_all_tests([fine]) == 0
        assert run_all_tests([fine, broken_script]) == 1
        assert run_all_tests([missed_raise]) == 1


def run_all_tests(tests=None):
    """Run all tests (or the given ones). Returns a process exit code."""
    print("=" * 60)
    print("   Console TicTacToe - Game Tests")
    print("=" * 60)

    if tests is None:
        tests = [value for name, value in globals().items() if name.startswith("test_")]

    all_passed = True
    for test in tests:
        try:
            test()
            print(f"  {test.__name__}: ✓ PASS")
        except (Exception, pytest.fail.Exception) as e:
            print(f"  {test.__name__}: ✗ FAIL {e}")
            all_passed = False

    print("=" * 60)
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
