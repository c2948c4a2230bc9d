"""Check detection built on top of ordinary move generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chesslet.core.enums import PieceType
from chesslet.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesslet.core.board import Board
    from chesslet.core.enums import Color
    from chesslet.core.move import Move
    from chesslet.core.piece import Piece
    from chesslet.core.position import Position

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    A king is in check when any move the opponent's pieces generate would
    capture it. King moves never consult this class, so there is no
    recursion between the two.
    """

    @staticmethod
    def opponent_pieces(color: Color, board: Board) -> dict[Piece, Position]:
        return board.player_pieces(color.opposite)

    @staticmethod
    def opponent_moves(color: Color, board: Board) -> list[Move]:
        """Every move generated by the pieces of *color*'s opponent."""
        return MoveGenerator(board).generate_moves(color.opposite)

    @staticmethod
    def is_in_check(color: Color, board: Board) -> bool:
        for move in Rules.opponent_moves(color, board):
            if move.removed is None:
                continue
            target = board[move.removed]
            if (
                target is not None
                and target.piece_type == PieceType.KING
                and target.color == color
            ):
                _LOGGER.debug("%s king on %s is in check", color, move.removed)
                return True
        return False
