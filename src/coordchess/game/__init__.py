"""Game layer — serialized session over the core, and batch replay.

Quick start::

    from coordchess.game import GameSession

    session = GameSession()
    session.play("e2e4")
"""

from coordchess.game.batch import BatchReport, LineResult, LineStatus, replay
from coordchess.game.session import GameSession, MoveRecord

__all__ = [
    "BatchReport",
    "GameSession",
    "LineResult",
    "LineStatus",
    "MoveRecord",
    "replay",
]
