"""MoveEntry — text field and button for typing coordinate moves."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLineEdit, QPushButton, QWidget


class MoveEntry(QWidget):
    """Emits the typed move text when the user presses Enter or the button."""

    move_submitted = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._edit = QLineEdit()
        self._edit.setPlaceholderText("Enter move (e.g., e2e4)")
        self._edit.setMaxLength(8)
        self._edit.returnPressed.connect(self._submit)
        layout.addWidget(self._edit, stretch=1)

        self._btn_move = QPushButton("Make Move")
        self._btn_move.setMinimumHeight(32)
        self._btn_move.clicked.connect(self._submit)
        layout.addWidget(self._btn_move)

    @property
    def text(self) -> str:
        return self._edit.text()

    def set_text(self, text: str) -> None:
        self._edit.setText(text)

    def _submit(self) -> None:
        text = self._edit.text().strip()
        if not text:
            return
        self._edit.clear()
        self.move_submitted.emit(text)
