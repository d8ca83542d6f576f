"""MainWindow — board view, move entry and status bar over a GameSession."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from coordchess.core.errors import IllegalMoveError, NotationError, OutOfBoundsError
from coordchess.core.move import Move
from coordchess.game.session import GameSession
from coordchess.ui.board_view import BoardView
from coordchess.ui.move_entry import MoveEntry

_LOGGER = logging.getLogger(__name__)

FORMAT_ERROR_TEXT = "Invalid move format. Use format 'e2e4'."
READY_TEXT = "Ready"


class MainWindow(QMainWindow):
    """Top-level window: type a move, see the board."""

    def __init__(self, session: GameSession | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Coordinate Chess")
        self._session = session if session is not None else GameSession()

        self._setup_ui()
        self._setup_menu()
        self._refresh(None)

    # ── UI construction ──────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._move_entry = MoveEntry()
        self._move_entry.move_submitted.connect(self._on_move_submitted)
        root.addWidget(self._move_entry)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(READY_TEXT)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("&New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        menu_game.addAction(self._act_new_game)

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        menu_game.addAction(self._act_quit)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def submit_move(self, text: str) -> bool:
        """Play *text* on the session; returns whether the move was applied."""
        try:
            record = self._session.play(text)
        except (NotationError, OutOfBoundsError):
            _LOGGER.info("Rejected move text %r", text)
            self._status_label.setText(FORMAT_ERROR_TEXT)
            return False
        except IllegalMoveError as exc:
            _LOGGER.info("Illegal move %r: %s", text, exc)
            self._status_label.setText(f"Invalid move: {exc}.")
            return False

        self._refresh(record.move)
        self._status_label.setText(f"Played {record}")
        return True

    def _on_move_submitted(self, text: str) -> None:
        self.submit_move(text)

    def _on_new_game(self) -> None:
        self._session.reset()
        self._refresh(None)
        self._status_label.setText(READY_TEXT)

    def _refresh(self, last_move: Move | None) -> None:
        self._board_view.set_board(self._session.snapshot())
        self._board_view.highlight_last_move(last_move)
