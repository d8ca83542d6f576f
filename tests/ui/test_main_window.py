"""Tests for MainWindow move handling."""

from __future__ import annotations

from coordchess.core.board import Board
from coordchess.core.types import E2, E4
from coordchess.game.session import GameSession
from coordchess.ui.main_window import FORMAT_ERROR_TEXT, READY_TEXT, MainWindow


class TestMainWindow:
    def test_starts_with_initial_board(self) -> None:
        window = MainWindow()
        assert window.status_text == READY_TEXT
        assert window.board_view.symbol_at(E2) == "P"
        assert window.board_view.symbol_at(E4) == ""

    def test_legal_move_updates_board(self) -> None:
        window = MainWindow()
        assert window.submit_move("e2e4")

        assert window.board_view.symbol_at(E2) == ""
        assert window.board_view.symbol_at(E4) == "P"
        assert window.status_text == "Played P e2e4"
        assert len(window.session.history) == 1

    def test_bad_format_reports_error(self) -> None:
        window = MainWindow()
        assert not window.submit_move("e2")
        assert window.status_text == FORMAT_ERROR_TEXT
        assert window.session.snapshot() == Board.initial()

    def test_illegal_move_reports_reason(self) -> None:
        window = MainWindow()
        assert not window.submit_move("e2e5")
        assert window.status_text == "Invalid move: pawns cannot move that way."
        assert window.board_view.symbol_at(E2) == "P"

    def test_entry_signal_plays_move(self) -> None:
        window = MainWindow()
        window._move_entry.set_text("g1f3")
        window._move_entry._submit()
        assert window.status_text == "Played Kn g1f3"

    def test_new_game_resets(self) -> None:
        session = GameSession()
        window = MainWindow(session)
        window.submit_move("e2e4")

        window._act_new_game.trigger()

        assert session.history == ()
        assert window.board_view.symbol_at(E2) == "P"
        assert window.status_text == READY_TEXT
