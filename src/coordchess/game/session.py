"""GameSession — the single owner of a shared board.

Validation and execution are separate core calls. The session runs the
pair under one lock so that concurrent callers cannot both validate
against the same position and then both execute.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from coordchess.core.board import Board
from coordchess.core.executor import execute_move
from coordchess.core.move import Move
from coordchess.core.notation import parse_move
from coordchess.core.piece import Piece
from coordchess.core.rules import MoveRules, RulesPolicy

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        text = f"{self.piece.symbol} {self.move}"
        if self.captured is not None:
            text += f" x{self.captured.symbol}"
        return text


class GameSession:
    """Board + rules + history, with every mutation serialized.

    Errors from parsing and validation propagate unchanged; the board is
    only touched once a move has passed validation.
    """

    __slots__ = ("_board", "_rules", "_history", "_lock")

    def __init__(
        self,
        board: Board | None = None,
        policy: RulesPolicy | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._rules = MoveRules(policy)
        self._history: list[MoveRecord] = []
        self._lock = threading.Lock()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        with self._lock:
            return tuple(self._history)

    @property
    def rules(self) -> MoveRules:
        return self._rules

    def snapshot(self) -> Board:
        """Copy of the current board for read-only rendering."""
        with self._lock:
            return self._board.copy()

    @contextmanager
    def locked(self) -> Iterator[Board]:
        """Hold the session lock and expose the live board."""
        with self._lock:
            yield self._board

    # ── Moves ────────────────────────────────────────────────────────────

    def play(self, text: str) -> MoveRecord:
        """Parse, validate and apply a move given in coordinate notation."""
        return self.apply(parse_move(text))

    def apply(self, move: Move) -> MoveRecord:
        """Validate and apply *move*; raises if it is illegal."""
        with self._lock:
            self._rules.validate(self._board, move)
            piece = self._board[move.from_sq]
            assert piece is not None
            captured = execute_move(self._board, move)
            record = MoveRecord(move=move, piece=piece, captured=captured)
            self._history.append(record)
        _LOGGER.debug("Applied %s", record)
        return record

    def check(self, move: Move) -> None:
        """Validate *move* against the current board without applying it."""
        with self._lock:
            self._rules.validate(self._board, move)

    def reset(self) -> None:
        """Back to the initial position with an empty history."""
        with self._lock:
            self._board = Board.initial()
            self._history.clear()
        _LOGGER.debug("Session reset")
