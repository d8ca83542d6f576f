"""Core domain layer — board model and move legality, no external dependencies.

Quick start::

    from coordchess.core import Board, parse_move, validate_move, execute_move

    board = Board.initial()
    move = parse_move("e2e4")
    validate_move(board, move)
    execute_move(board, move)
"""

from coordchess.core.board import Board
from coordchess.core.enums import Color, MoveErrorKind, PieceType
from coordchess.core.errors import (
    ChessError,
    IllegalMoveError,
    NotationError,
    OutOfBoundsError,
)
from coordchess.core.executor import execute_move
from coordchess.core.move import Move
from coordchess.core.notation import (
    coordinate_name,
    move_to_text,
    parse_coordinate,
    parse_move,
)
from coordchess.core.piece import Piece
from coordchess.core.rules import (
    MoveRules,
    RulesPolicy,
    is_legal_move,
    validate_move,
)
from coordchess.core.types import Coordinate, all_coordinates

__all__ = [
    # Enums
    "Color",
    "MoveErrorKind",
    "PieceType",
    # Types / helpers
    "Coordinate",
    "all_coordinates",
    # Errors
    "ChessError",
    "IllegalMoveError",
    "NotationError",
    "OutOfBoundsError",
    # Domain objects
    "Board",
    "Move",
    "MoveRules",
    "Piece",
    "RulesPolicy",
    # Operations
    "execute_move",
    "is_legal_move",
    "validate_move",
    # Notation
    "coordinate_name",
    "move_to_text",
    "parse_coordinate",
    "parse_move",
]
