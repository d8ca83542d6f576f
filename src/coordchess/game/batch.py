"""Batch replay of a move list, one coordinate-notation move per line.

Usage::

    coordchess-replay moves.txt
    cat moves.txt | coordchess-replay -
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from coordchess.core.board import Board
from coordchess.core.errors import ChessError, NotationError
from coordchess.core.move import Move
from coordchess.core.notation import parse_move
from coordchess.core.rules import RulesPolicy
from coordchess.game.session import GameSession

_LOGGER = logging.getLogger(__name__)


class LineStatus(IntEnum):
    """Outcome of one processed line."""

    APPLIED = auto()
    PARSE_ERROR = auto()
    ILLEGAL_MOVE = auto()


@dataclass(frozen=True, slots=True)
class LineResult:
    line_number: int
    text: str
    status: LineStatus
    move: Move | None = None
    error: ChessError | None = None

    @property
    def ok(self) -> bool:
        return self.status == LineStatus.APPLIED

    def describe(self) -> str:
        prefix = f"{self.line_number:>4}: {self.text}"
        if self.status == LineStatus.APPLIED:
            return f"{prefix} -> ok"
        if self.status == LineStatus.PARSE_ERROR:
            return f"{prefix} -> parse error: {self.error}"
        return f"{prefix} -> illegal move: {self.error}"


@dataclass(slots=True)
class BatchReport:
    """Per-line results plus the board they were played on."""

    board: Board
    results: list[LineResult] = field(default_factory=list)

    @property
    def applied(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return len(self.results) - self.applied

    def format(self) -> str:
        lines = [r.describe() for r in self.results]
        lines.append(f"{self.applied} applied, {self.failed} failed")
        lines.append(repr(self.board))
        return "\n".join(lines)


def replay(
    lines: Iterable[str],
    session: GameSession | None = None,
    *,
    stop_on_error: bool = False,
) -> BatchReport:
    """Play every move in *lines* in order against one running board.

    Blank lines and ``#`` comments are skipped. A failing line is reported
    and replay continues with the next one unless *stop_on_error* is set.
    """
    session = session or GameSession()
    results: list[LineResult] = []

    for number, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text or text.startswith("#"):
            continue

        try:
            move = parse_move(text)
        except NotationError as exc:
            _LOGGER.warning("Line %d: cannot parse %r: %s", number, text, exc)
            results.append(LineResult(number, text, LineStatus.PARSE_ERROR, error=exc))
            if stop_on_error:
                break
            continue

        try:
            session.apply(move)
        except ChessError as exc:
            _LOGGER.warning("Line %d: illegal move %s: %s", number, move, exc)
            results.append(
                LineResult(number, text, LineStatus.ILLEGAL_MOVE, move=move, error=exc)
            )
            if stop_on_error:
                break
            continue

        results.append(LineResult(number, text, LineStatus.APPLIED, move=move))

    return BatchReport(board=session.snapshot(), results=results)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coordchess-replay",
        description="Replay a list of coordinate-notation moves (e.g. e2e4).",
    )
    parser.add_argument(
        "moves",
        type=argparse.FileType("r", encoding="utf-8"),
        help="File with one move per line, or '-' for stdin",
    )
    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Stop at the first line that fails",
    )
    parser.add_argument(
        "--strict-rook",
        action="store_true",
        help="Forbid rooks from landing on their own pieces",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns 0 when every move was applied."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    session = GameSession(policy=RulesPolicy(rook_captures_own=not args.strict_rook))
    with args.moves as fh:
        report = replay(fh, session, stop_on_error=args.stop_on_error)

    print(report.format())
    return 0 if report.failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
