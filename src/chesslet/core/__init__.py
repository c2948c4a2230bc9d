"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chesslet.core import Board, Color, Move, Position, Rules

    board = Board()
    board = board.update(Move.step(Position.parse("e2"), Position.parse("e4")))
    Rules.is_in_check(Color.BLACK, board)
"""

from chesslet.core.board import Board
from chesslet.core.enums import CastlingRights, Color, PieceType
from chesslet.core.errors import FormatError
from chesslet.core.move import Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.notation import (
    STARTING_FEN,
    FenRecord,
    PlacedPiece,
    board_from_fen,
    board_to_fen,
    parse_fen,
    pieces_to_fen,
    record_to_fen,
)
from chesslet.core.piece import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from chesslet.core.position import Position, all_positions
from chesslet.core.rules import Rules

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Errors
    "FormatError",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Position",
    "Rules",
    "all_positions",
    # Pieces
    "Piece",
    "Pawn",
    "Knight",
    "Bishop",
    "Rook",
    "Queen",
    "King",
    # Notation
    "STARTING_FEN",
    "FenRecord",
    "PlacedPiece",
    "board_from_fen",
    "board_to_fen",
    "parse_fen",
    "pieces_to_fen",
    "record_to_fen",
]
