"""Position: an immutable board coordinate.

Grid layout (row 0 is the black back rank)::

    row 0 -> rank 8   a8 b8 ... h8
    row 1 -> rank 7
    ...
    row 7 -> rank 1   a1 b1 ... h1
"""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.errors import FormatError

BOARD_SIZE = 8
_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Position:
    """Square on the board addressed by ``(row, col)``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise ValueError(f"Position out of range: ({self.row}, {self.col})")

    # ── Algebraic notation ───────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Position:
        """Parse an algebraic square, e.g. ``'a8'`` → ``Position(0, 0)``."""
        if len(text) != 2 or text[0] not in _FILES or text[1] not in _RANKS:
            raise FormatError(f"Invalid square name: {text!r}")
        return cls(BOARD_SIZE - int(text[1]), _FILES.index(text[0]))

    def to_algebraic(self) -> str:
        return f"{_FILES[self.col]}{BOARD_SIZE - self.row}"

    def __str__(self) -> str:
        return self.to_algebraic()

    # ── Geometry ─────────────────────────────────────────────────────────

    def offset(self, drow: int, dcol: int) -> Position | None:
        """Shifted position, or ``None`` when it falls off the board."""
        row = self.row + drow
        col = self.col + dcol
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return Position(row, col)
        return None


def all_positions() -> list[Position]:
    """Every square in scan order (row 0 first, col 0 first)."""
    return [Position(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
