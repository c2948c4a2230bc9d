"""Piece hierarchy; each variant generates its own candidate moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Move
from chesslet.core.move_generator import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    ray_moves,
    step_moves,
)

if TYPE_CHECKING:
    from chesslet.core.board import Board
    from chesslet.core.position import Position

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(eq=False, slots=True)
class Piece:
    """A single piece instance.

    Pieces compare and hash by identity: two white pawns are different
    pieces. The square a piece stands on is tracked by the board, never by
    the piece itself.
    """

    color: Color
    has_moved: bool = False

    piece_type: ClassVar[PieceType]

    def possible_moves(self, board: Board, current: Position) -> list[Move]:
        """Candidate moves from *current*; must not mutate *board* or pieces.

        Every concrete piece class overrides this.
        """
        raise NotImplementedError

    def copy(self) -> Piece:
        """Independent clone carrying the same color and ``has_moved`` flag."""
        return type(self)(self.color, self.has_moved)

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def fen_char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    def __str__(self) -> str:
        return self.fen_char

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return _PIECE_CLASSES[ptype](color)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]


class Pawn(Piece):
    """Pushes forward, captures diagonally forward.

    White advances toward row 0, black toward row 7. En passant capture and
    promotion are not generated.
    """

    __slots__ = ()
    piece_type = PieceType.PAWN

    _DIRECTION: ClassVar[dict[Color, int]] = {Color.WHITE: -1, Color.BLACK: 1}
    _START_ROW: ClassVar[dict[Color, int]] = {Color.WHITE: 6, Color.BLACK: 1}

    def possible_moves(self, board: Board, current: Position) -> list[Move]:
        direction = self._DIRECTION[self.color]
        moves: list[Move] = []

        one_step = current.offset(direction, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(Move.step(current, one_step))
            if not self.has_moved and current.row == self._START_ROW[self.color]:
                two_step = current.offset(2 * direction, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move.step(current, two_step))

        for dcol in (-1, 1):
            cap_pos = current.offset(direction, dcol)
            if cap_pos is None:
                continue
            target = board[cap_pos]
            if target is not None and target.color != self.color:
                moves.append(Move.step(current, cap_pos, capture=True))
        return moves


class Knight(Piece):
    __slots__ = ()
    piece_type = PieceType.KNIGHT

    def possible_moves(self, board: Board, current: Position) -> list[Move]:
        return step_moves(self, board, current, KNIGHT_OFFSETS)


class Bishop(Piece):
    __slots__ = ()
    piece_type = PieceType.BISHOP

    def possible_moves(self, board: Board, current: Position) -> list[Move]:
        return ray_moves(self, board, current, BISHOP_DIRS)


class Rook(Piece):
    __slots__ = ()
    piece_type = PieceType.ROOK

    def possible_moves(self, board: Board, current: Position) -> list[Move]:
        return ray_moves(self, board, current, ROOK_DIRS)


class Queen(Piece):
    __slots__ = ()
    piece_type = PieceType.QUEEN

    def possible_moves(self, board: Board, current: Position) -> list[Move]:
        return ray_moves(self, board, current, QUEEN_DIRS)


class King(Piece):
    """One square in any direction; no castling and no check safety."""

    __slots__ = ()
    piece_type = PieceType.KING

    def possible_moves(self, board: Board, current: Position) -> list[Move]:
        return step_moves(self, board, current, KING_OFFSETS)


_PIECE_CLASSES: dict[PieceType, type[Piece]] = {
    cls.piece_type: cls for cls in (Pawn, Knight, Bishop, Rook, Queen, King)
}
