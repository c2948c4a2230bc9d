"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @property
    def kingside(self) -> dict[Color, bool]:
        """Per-color kingside availability, e.g. ``{WHITE: True, BLACK: False}``."""
        return {
            Color.WHITE: bool(self & CastlingRights.WHITE_KINGSIDE),
            Color.BLACK: bool(self & CastlingRights.BLACK_KINGSIDE),
        }

    @property
    def queenside(self) -> dict[Color, bool]:
        """Per-color queenside availability."""
        return {
            Color.WHITE: bool(self & CastlingRights.WHITE_QUEENSIDE),
            Color.BLACK: bool(self & CastlingRights.BLACK_QUEENSIDE),
        }
