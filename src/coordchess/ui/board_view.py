"""BoardView — 8x8 table widget showing piece symbols."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QFont
from PyQt6.QtWidgets import QAbstractItemView, QTableWidget, QTableWidgetItem, QWidget

from coordchess.core.board import Board
from coordchess.core.move import Move
from coordchess.core.types import BOARD_SIZE, FILE_NAMES, Coordinate
from coordchess.ui.theme import BoardTheme


class BoardView(QTableWidget):
    """Read-only grid; row 0 is the eighth rank, column 0 the a-file."""

    TILE = 50  # px per square

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(BOARD_SIZE, BOARD_SIZE, parent)
        self._theme = BoardTheme.default()
        self._last_move: Move | None = None

        self.setHorizontalHeaderLabels(list(FILE_NAMES))
        self.setVerticalHeaderLabels([str(BOARD_SIZE - r) for r in range(BOARD_SIZE)])
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        for i in range(BOARD_SIZE):
            self.setColumnWidth(i, self.TILE)
            self.setRowHeight(i, self.TILE)

        self._font = QFont()
        self._font.setPointSize(16)
        self._font.setBold(True)

        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                item = QTableWidgetItem("")
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                item.setFont(self._font)
                self.setItem(rank, file, item)
        self._paint_squares()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Redraw every square from *board*."""
        for rank, row in enumerate(board.rows()):
            for file, piece in enumerate(row):
                self._cell(file, rank).setText(piece.symbol if piece else "")

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._paint_squares()

    def highlight_last_move(self, move: Move | None) -> None:
        """Tint origin/destination of the last played move."""
        self._last_move = move
        self._paint_squares()

    def symbol_at(self, coord: Coordinate) -> str:
        return self._cell(coord.file, coord.rank).text()

    # ── Internals ────────────────────────────────────────────────────────

    def _cell(self, file: int, rank: int) -> QTableWidgetItem:
        item = self.item(rank, file)
        assert item is not None
        return item

    def _paint_squares(self) -> None:
        marked = set(self._last_move) if self._last_move is not None else set()
        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                item = self._cell(file, rank)
                if Coordinate(file, rank) in marked:
                    background = self._theme.last_move
                else:
                    background = self._theme.square_color(file, rank)
                item.setBackground(QBrush(background))
                item.setForeground(QBrush(self._theme.text_color(file, rank)))
