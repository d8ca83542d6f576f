"""Visual theme constants and QSS styles for the board window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    light_text: QColor  # piece text on light squares
    dark_text: QColor  # piece text on dark squares
    last_move: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor("#eee"),
            dark_square=QColor("#333"),
            light_text=QColor("#000"),
            dark_text=QColor("#fff"),
            last_move=QColor(155, 199, 0),
        )

    @classmethod
    def brown(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),
            dark_square=QColor(181, 136, 99),
            light_text=QColor(0, 0, 0),
            dark_text=QColor(0, 0, 0),
            last_move=QColor(155, 199, 0),
        )

    def square_color(self, file: int, rank: int) -> QColor:
        """Background for the square; (0, 0) is a light square."""
        return self.light_square if (file + rank) % 2 == 0 else self.dark_square

    def text_color(self, file: int, rank: int) -> QColor:
        return self.light_text if (file + rank) % 2 == 0 else self.dark_text


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLineEdit {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    padding: 4px;
    font-family: "Consolas", monospace;
    font-size: 14px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
"""
