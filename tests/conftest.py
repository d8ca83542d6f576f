"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from coordchess.core.board import Board
from coordchess.core.piece import Piece

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


def _board_from_rows(rows: list[str]) -> Board:
    assert len(rows) == 8
    board = Board()
    for rank, row in enumerate(rows):
        cells = row.split()
        assert len(cells) == 8, row
        for file, cell in enumerate(cells):
            if cell != ".":
                board[file, rank] = Piece.from_symbol(cell)
    return board


@pytest.fixture
def board_from_rows() -> Callable[[list[str]], Board]:
    """Build a board from 8 rows of space-separated symbols, eighth rank first.

    ``.`` marks an empty square, e.g. ``"R . . . . . . ."``.
    """
    return _board_from_rows
