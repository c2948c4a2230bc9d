"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from chesslet.core.enums import CastlingRights, Color
from chesslet.core.piece import Piece
from chesslet.core.position import Position


class PlacedPiece(NamedTuple):
    """A piece paired with the square it stands on."""

    piece: Piece
    position: Position


@dataclass(slots=True)
class FenRecord:
    """All six FEN fields in structured form."""

    pieces: list[PlacedPiece]
    active_color: Color
    castling_rights: CastlingRights
    en_passant_square: Position | None
    halfmove_clock: int
    fullmove_no: int
