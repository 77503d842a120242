from __future__ import annotations

import logging

import pytest

from tictactoe.core.board import Board, Marker
from tictactoe.core import rules
from tictactoe.core.game import GameSession
from tictactoe.core.move import ErrorKind
from tictactoe.core.rules import GameStatus, StatusKind, compute_winner, is_full


def play(session: GameSession, *cells: int) -> None:
    for c in cells:
        assert session.attempt_move(c).success, f"move at {c} failed"


def numbers(session: GameSession):
    return [d.move_number for d in session.move_list()]


def test_new_session_starts_empty_with_x_to_move() -> None:
    session = GameSession()
    assert session.history == (Board.empty(),)
    assert session.pointer == 0
    assert not session.is_reversed
    assert session.current_status() == GameStatus.ongoing(Marker.X)


@pytest.mark.parametrize("cell", range(9))
def test_each_cell_playable_once_from_start(cell: int) -> None:
    session = GameSession()
    first = session.attempt_move(cell)
    assert first.success
    assert first.state is not None and first.state.board.get(cell) == Marker.X

    second = session.attempt_move(cell)
    assert not second.success
    assert second.error == ErrorKind.REJECTED


def test_markers_alternate() -> None:
    session = GameSession()
    play(session, 0, 1, 2)
    board = session.current_snapshot()
    assert [board.get(i) for i in (0, 1, 2)] == [Marker.X, Marker.O, Marker.X]
    assert session.current_status() == GameStatus.ongoing(Marker.O)


def test_rejected_move_leaves_state_identical() -> None:
    session = GameSession()
    play(session, 4)
    before = (session.history, session.pointer, session.is_reversed)

    result = session.attempt_move(4)

    assert not result.success
    assert result.error_message == "Cell is already occupied."
    assert (session.history, session.pointer, session.is_reversed) == before


@pytest.mark.parametrize("cell", [-1, 9, 100, True, "3", None])
def test_bad_cell_is_rejected(cell) -> None:
    session = GameSession()
    result = session.attempt_move(cell)
    assert not result.success
    assert result.error == ErrorKind.REJECTED
    assert len(session.history) == 1


def test_diagonal_win_end_to_end() -> None:
    session = GameSession()
    play(session, 0, 1, 4, 2, 8)

    assert compute_winner(session.current_snapshot()) == Marker.X
    assert session.current_status() == GameStatus.won(Marker.X)
    assert len(session.history) == 6
    assert session.is_game_over()

    result = session.attempt_move(3)
    assert not result.success
    assert result.error_message == "Game is already over."
    assert len(session.history) == 6


def test_draw_end_to_end() -> None:
    session = GameSession()
    # X O X / X O O / O X X
    play(session, 0, 1, 2, 4, 3, 5, 7, 6, 8)

    board = session.current_snapshot()
    assert is_full(board)
    assert compute_winner(board) is None
    assert session.current_status().kind == StatusKind.DRAW

    for cell in range(9):
        assert session.attempt_move(cell).error == ErrorKind.REJECTED
    assert len(session.history) == 10


def test_move_after_jump_truncates_future() -> None:
    session = GameSession()
    play(session, 0, 1, 2, 3, 4)
    assert len(session.history) == 6
    old = session.history

    assert session.jump_to(3).success
    assert session.current_snapshot() == old[3]
    assert session.current_snapshot().is_empty(8)

    assert session.attempt_move(8).success
    assert len(session.history) == 5
    assert session.pointer == 4
    assert session.history[:4] == old[:4]
    # pointer 3 is odd, so O played
    assert session.current_snapshot().get(8) == Marker.O


def test_jump_does_not_change_history() -> None:
    session = GameSession()
    play(session, 0, 1, 2)
    before = session.history
    for i in (0, 2, 1, 3):
        assert session.jump_to(i).success
        assert session.pointer == i
        assert session.history == before


@pytest.mark.parametrize("index", [-1, 4, 99, True, 1.0])
def test_jump_out_of_range_is_invalid_index(index) -> None:
    session = GameSession()
    play(session, 0, 1, 2)
    session.jump_to(2)

    result = session.jump_to(index)

    assert not result.success
    assert result.error == ErrorKind.INVALID_INDEX
    assert session.pointer == 2
    assert len(session.history) == 4


def test_jump_to_start_undoes_a_win() -> None:
    session = GameSession()
    play(session, 0, 1, 4, 2, 8)
    assert session.current_status().is_terminal

    result = session.jump_to(0)

    assert result.success
    assert session.current_snapshot() == Board.empty()
    assert session.current_status() == GameStatus.ongoing(Marker.X)
    # a new game branch is now possible from the start
    assert session.attempt_move(4).success
    assert len(session.history) == 2


def test_move_list_ascending_and_current_flag() -> None:
    session = GameSession()
    play(session, 0, 1, 2)
    session.jump_to(1)

    moves = list(session.move_list())
    assert [m.move_number for m in moves] == [0, 1, 2, 3]
    assert [m.is_current for m in moves] == [False, True, False, False]
    assert [m.describe() for m in moves] == [
        "Go to game start",
        "You are at move # 1",
        "Go to move #2",
        "Go to move #3",
    ]


def test_start_entry_stays_jumpable_when_current() -> None:
    session = GameSession()
    (start,) = list(session.move_list())
    assert start.is_current
    assert start.is_jumpable
    assert start.describe() == "Go to game start"


def test_toggle_display_order_reverses_only_ordering() -> None:
    session = GameSession()
    play(session, 0, 1, 2, 3)
    ascending = list(session.move_list())

    assert session.toggle_display_order() is True
    descending = list(session.move_list())
    assert descending == ascending[::-1]
    assert session.pointer == 4
    assert len(session.history) == 5

    assert session.toggle_display_order() is False
    assert list(session.move_list()) == ascending


def test_move_list_is_recomputed_each_call() -> None:
    session = GameSession(reversed_order=True)
    assert numbers(session) == [0]
    play(session, 4)
    assert numbers(session) == [1, 0]


def test_get_state_bundles_render_data() -> None:
    session = GameSession()
    play(session, 0, 4)
    session.jump_to(1)

    state = session.get_state()

    assert state.board == session.history[1]
    assert state.status == GameStatus.ongoing(Marker.O)
    assert state.pointer == 1
    assert state.history_length == 3
    assert not state.is_latest
    assert isinstance(state.moves, tuple)
    assert len(state.moves) == 3
    assert hash(state) == hash(session.get_state())


def test_reset_restores_initial_session() -> None:
    session = GameSession()
    play(session, 0, 1)
    session.toggle_display_order()

    session.reset()

    assert session.history == (Board.empty(),)
    assert session.pointer == 0
    assert not session.is_reversed


def test_rejections_are_logged(caplog) -> None:
    session = GameSession()
    play(session, 0)
    with caplog.at_level(logging.INFO, logger="tictactoe.core.game"):
        session.attempt_move(0)
        session.jump_to(5)
    messages = [r.getMessage() for r in caplog.records]
    assert any("occupied" in m for m in messages)
    assert any("jump rejected" in m for m in messages)


def test_attempt_move_asks_rules_for_legality(monkeypatch) -> None:
    session = GameSession()
    asked = []

    def refuse(board, index):
        asked.append(index)
        return False

    monkeypatch.setattr(rules, "can_play", refuse)
    result = session.attempt_move(4)

    assert asked == [4]
    assert not result.success
    assert result.error == ErrorKind.REJECTED
    assert len(session.history) == 1


def test_rejection_messages_name_the_reason() -> None:
    session = GameSession()
    assert session.attempt_move(9).error_message == "Cell is out of range."
    play(session, 0)
    assert session.attempt_move(0).error_message == "Cell is already occupied."
    play(session, 3, 1, 4, 2)
    assert session.attempt_move(8).error_message == "Game is already over."
