"""Move value object (coordinate notation)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from coordchess.core.types import Coordinate


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: a source and a destination square."""

    from_sq: Coordinate
    to_sq: Coordinate

    def __post_init__(self) -> None:
        # Plain (file, rank) tuples are accepted and normalised.
        object.__setattr__(self, "from_sq", Coordinate(*self.from_sq))
        object.__setattr__(self, "to_sq", Coordinate(*self.to_sq))

    def __iter__(self) -> Iterator[Coordinate]:
        yield self.from_sq
        yield self.to_sq

    @property
    def is_null(self) -> bool:
        """Whether source and destination are the same square."""
        return self.from_sq == self.to_sq

    @property
    def delta(self) -> tuple[int, int]:
        """(file delta, rank-index delta) from source to destination."""
        return (
            self.to_sq.file - self.from_sq.file,
            self.to_sq.rank - self.from_sq.rank,
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_sq.name}{self.to_sq.name}"
