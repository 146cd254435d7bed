"""
Tests for deterministic move suggestions
"""

from termsweeper.config import GameConfig
from termsweeper.engine import Board
from termsweeper.hints import pick_move


def test_no_hint_before_first_reveal():
    assert pick_move(Board.start(9, 9, 10, seed=0)) is None


def test_suggests_flags_for_forced_mines():
    board = Board(GameConfig(5, 1, 2), mines=[(0, 0), (3, 0)])
    board.reveal_at(1, 0)
    assert pick_move(board) is None
    board.reveal_at(2, 0)
    assert pick_move(board) == ('flag', (0, 0))
    board.flag_at(0, 0)
    assert pick_move(board) == ('flag', (3, 0))
    board.flag_at(3, 0)
    assert pick_move(board) is None


def test_suggests_reveal_when_number_is_satisfied():
    board = Board(GameConfig(3, 2, 1), mines=[(0, 0)])
    board.reveal_at(2, 1)
    assert not board.grid.is_revealed(0, 1)
    assert pick_move(board) is None
    board.flag_at(0, 0)
    assert pick_move(board) == ('reveal', (0, 1))
