"""Notation package: FEN parsing and serialization."""

from chesslet.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_fen,
    pieces_to_fen,
    record_to_fen,
)
from chesslet.core.notation.models import FenRecord, PlacedPiece

__all__ = [
    "STARTING_FEN",
    "FenRecord",
    "PlacedPiece",
    "parse_fen",
    "pieces_to_fen",
    "record_to_fen",
    "board_from_fen",
    "board_to_fen",
]
