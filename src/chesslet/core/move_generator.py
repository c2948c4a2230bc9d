"""Move generation primitives and per-color move enumeration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslet.core.move import Move

if TYPE_CHECKING:
    from chesslet.core.board import Board
    from chesslet.core.enums import Color
    from chesslet.core.piece import Piece
    from chesslet.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Shared generators ------------------------------------------------------


def step_moves(
    piece: Piece,
    board: Board,
    current: Position,
    offsets: tuple[tuple[int, int], ...],
) -> list[Move]:
    """Single jumps to each offset that is empty or holds an enemy piece."""
    moves: list[Move] = []
    for drow, dcol in offsets:
        to_pos = current.offset(drow, dcol)
        if to_pos is None:
            continue
        target = board[to_pos]
        if target is None:
            moves.append(Move.step(current, to_pos))
        elif target.color != piece.color:
            moves.append(Move.step(current, to_pos, capture=True))
    return moves


def ray_moves(
    piece: Piece,
    board: Board,
    current: Position,
    directions: tuple[tuple[int, int], ...],
) -> list[Move]:
    """Sliding moves; each ray ends at the first occupied square."""
    moves: list[Move] = []
    for drow, dcol in directions:
        to_pos = current.offset(drow, dcol)
        while to_pos is not None:
            target = board[to_pos]
            if target is None:
                moves.append(Move.step(current, to_pos))
                to_pos = to_pos.offset(drow, dcol)
                continue
            if target.color != piece.color:
                moves.append(Move.step(current, to_pos, capture=True))
            break
    return moves


class MoveGenerator:
    """Enumerates the moves every piece of one color generates on a board.

    Moves are pseudo-legal: nothing is filtered for leaving the own king
    in check.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def generate_moves(self, color: Color) -> list[Move]:
        """All moves for *color*, grouped by piece in board scan order."""
        board = self._board
        moves: list[Move] = []
        for piece, position in board.player_pieces(color).items():
            moves.extend(piece.possible_moves(board, position))
        return moves

    def capture_squares(self, color: Color) -> set[Position]:
        """Squares holding a piece that *color* could capture."""
        return {
            move.removed
            for move in self.generate_moves(color)
            if move.removed is not None
        }
