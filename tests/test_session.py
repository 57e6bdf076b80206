"""
Tests for MatchSession: human/AI turn flow, undo, and one-shot reporting.
"""

import random

import pytest

from tictactoe.ai_player import Difficulty
from tictactoe.board import Mark
from tictactoe.match_stats import StatsRecorder
from tictactoe.session import MatchSession


class FakeSink:
    def __init__(self):
        self.calls = []

    def record_game(self, outcome, moves):
        self.calls.append((outcome, moves))


def make_session(**kwargs):
    kwargs.setdefault("rng", random.Random(0))
    kwargs.setdefault("sink", FakeSink())
    return MatchSession(**kwargs)


def test_ai_replies_to_human():
    session = make_session(difficulty=Difficulty.MEDIUM)

    assert session.play_human(0)
    state = session.state
    assert state.board[0] is Mark.X
    assert state.board[4] is Mark.O  # medium takes the centre
    assert state.current_player is Mark.X
    assert len(state.moves) == 2


def test_ai_opens_when_it_plays_x():
    session = make_session(difficulty=Difficulty.MEDIUM, human_player=Mark.O)

    assert session.state.moves[0].player is Mark.X
    assert session.state.board[4] is Mark.X
    assert session.state.current_player is Mark.O


def test_illegal_human_move_is_rejected():
    session = make_session()
    session.play_human(0)
    before = session.state.snapshot()

    assert not session.play_human(0)
    assert not session.play_human(42)
    assert session.state.board == before


def test_play_ai_out_of_turn():
    session = make_session()
    assert not session.play_ai()
    assert session.state.move_count == 0


def test_undo_takes_back_human_and_ai_moves():
    session = make_session()
    session.play_human(0)
    session.play_human(8)

    assert session.undo()
    assert session.state.move_count == 2
    assert session.state.current_player is Mark.X

    assert session.undo()
    assert session.state.move_count == 0
    assert not session.undo()


def test_undo_keeps_ai_opening():
    session = make_session(human_player=Mark.O)

    assert not session.undo()
    assert session.state.move_count == 1


def test_undo_disabled():
    session = make_session(undo_enabled=False)
    session.play_human(0)

    assert not session.undo()
    assert session.state.move_count == 2


def test_two_player_undo_is_one_move():
    session = make_session(vs_ai=False)
    session.play_human(0)
    session.play_human(4)

    assert session.undo()
    assert session.state.move_count == 1
    assert session.state.current_player is Mark.O


def test_result_reported_once():
    sink = FakeSink()
    session = make_session(vs_ai=False, sink=sink)
    for index in (0, 3, 1, 4, 2):
        session.play_human(index)

    assert sink.calls == [(Mark.X, 5)]

    # Undo and win again: still the same match
    session.undo()
    session.play_human(2)
    assert sink.calls == [(Mark.X, 5)]

    session.new_game()
    for index in (0, 1, 2, 5, 3, 6, 4, 8, 7):
        session.play_human(index)
    assert sink.calls == [(Mark.X, 5), (Mark.EMPTY, 9)]


def test_no_moves_after_game_over():
    session = make_session(vs_ai=False)
    for index in (0, 3, 1, 4, 2):
        session.play_human(index)

    assert not session.play_human(8)
    assert session.suggest_move() is None


def test_new_game_resets():
    session = make_session()
    session.play_human(0)
    session.new_game()

    assert session.state.move_count == 0
    assert session.state.current_player is Mark.X


def test_set_difficulty():
    session = make_session(difficulty="easy")
    assert session.difficulty is Difficulty.EASY

    session.set_difficulty("hard")
    assert session.difficulty is Difficulty.HARD

    with pytest.raises(ValueError):
        session.set_difficulty("brutal")
    assert session.difficulty is Difficulty.HARD


def test_human_must_be_a_player():
    with pytest.raises(ValueError):
        MatchSession(human_player=Mark.EMPTY)


def test_suggest_move():
    session = make_session(difficulty=Difficulty.HARD, vs_ai=False)
    session.play_human(0)
    assert session.suggest_move() == 4
    assert session.state.move_count == 1


@pytest.mark.parametrize("seed", range(8))
def test_random_human_never_beats_hard(seed):
    rng = random.Random(seed)
    recorder = StatsRecorder()
    session = MatchSession(
        difficulty=Difficulty.HARD,
        human_player=Mark.X if seed % 2 else Mark.O,
        sink=recorder,
        rng=random.Random(seed),
    )

    while not session.state.is_game_over:
        session.play_human(rng.choice(session.state.get_empty_cells()))

    assert session.state.winner is not session.human_player
    assert recorder.stats.games == 1
