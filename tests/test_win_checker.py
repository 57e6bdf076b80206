"""
Tests for WinChecker and the board helpers.
"""

import pytest

from tictactoe.board import (
    WINNING_LINES,
    Mark,
    cell_to_index,
    empty_board,
    empty_cells,
    format_board,
    index_to_cell,
)
from tictactoe.game_state import GameState
from tictactoe.win_checker import WinChecker

X, O, _ = Mark.X, Mark.O, Mark.EMPTY


@pytest.fixture
def checker():
    return WinChecker()


def test_eight_lines_in_scan_order():
    assert WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_wins(checker, line, mark):
    board = empty_board()
    for index in line:
        board[index] = mark

    assert checker.check_winner(board) is mark
    assert checker.get_winning_line(board) == line
    assert not checker.check_draw(board)


def test_no_winner_on_empty_board(checker):
    board = empty_board()
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None
    assert not checker.check_draw(board)


def test_mixed_line_is_not_a_win(checker):
    board = [X, X, O,
             _, O, _,
             _, _, _]
    assert checker.check_winner(board) is None


def test_full_board_without_line_is_draw(checker):
    board = [X, O, X,
             X, X, O,
             O, X, O]
    assert checker.check_winner(board) is None
    assert checker.check_draw(board)


def test_full_board_with_line_is_not_draw(checker):
    board = [X, X, X,
             O, O, X,
             X, O, O]
    assert checker.check_winner(board) is X
    assert not checker.check_draw(board)


def test_first_line_in_scan_order_is_reported(checker):
    # Row 0 and column 0 both complete
    board = [X, X, X,
             X, O, O,
             X, O, O]
    assert checker.get_winning_line(board) == (0, 1, 2)


def test_update_game_state_win(checker):
    game = GameState(board=[O, O, O,
                            X, X, _,
                            X, _, _])
    checker.update_game_state(game)

    assert game.is_game_over
    assert game.outcome is O
    assert game.winning_line == (0, 1, 2)


def test_update_game_state_draw(checker):
    game = GameState(board=[X, O, X,
                            X, X, O,
                            O, X, O])
    checker.update_game_state(game)

    assert game.is_game_over
    assert game.outcome is Mark.EMPTY
    assert game.winning_line is None


def test_update_game_state_in_progress(checker):
    game = GameState(board=[X, _, _,
                            _, O, _,
                            _, _, _])
    checker.update_game_state(game)

    assert not game.is_game_over
    assert game.outcome is None


def test_index_cell_conversion():
    for index in range(9):
        row, col = index_to_cell(index)
        assert row == index // 3
        assert col == index % 3
        assert cell_to_index(row, col) == index


def test_empty_cells():
    board = [X, _, _,
             _, O, _,
             _, _, X]
    assert empty_cells(board) == [1, 2, 3, 5, 6, 7]


def test_mark_opposite():
    assert X.opposite() is O
    assert O.opposite() is X
    assert Mark.EMPTY.opposite() is Mark.EMPTY


def test_format_board_numbers_empty_cells():
    board = [X, _, _,
             _, O, _,
             _, _, _]
    text = format_board(board)
    assert text.splitlines()[0] == " X | 2 | 3"
    assert text.splitlines()[2] == " 4 | O | 6"
