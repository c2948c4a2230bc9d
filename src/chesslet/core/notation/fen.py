"""FEN parsing and serialization."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from chesslet.core.board import Board
from chesslet.core.enums import CastlingRights, Color
from chesslet.core.errors import FormatError
from chesslet.core.notation.models import FenRecord, PlacedPiece
from chesslet.core.piece import Piece
from chesslet.core.position import BOARD_SIZE, Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_RUN_DIGITS = "12345678"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def parse_fen(fen: str) -> FenRecord:
    """Parse a six-field FEN string into a :class:`FenRecord`."""
    fields = fen.split(" ")
    if len(fields) != 6:
        raise FormatError(f"Invalid FEN (need 6 space-separated fields): {fen!r}")

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = (
        fields
    )

    # 1. Piece placement
    pieces = _parse_placement(placement, fen)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FormatError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if not castling_part:
        raise FormatError(f"Invalid FEN castling field: {castling_part!r}")
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise FormatError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Position | None = None
    if ep_part != "-":
        try:
            ep = Position.parse(ep_part)
        except FormatError as err:
            raise FormatError(f"Invalid FEN en-passant square: {ep_part!r}") from err

    # 5-6. Clocks
    halfmove = _parse_counter(halfmove_part, "halfmove clock")
    fullmove = _parse_counter(fullmove_part, "fullmove number")

    return FenRecord(pieces, side, castling, ep, halfmove, fullmove)


def _parse_placement(placement: str, fen: str) -> list[PlacedPiece]:
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise FormatError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    pieces: list[PlacedPiece] = []
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch in _RUN_DIGITS:
                col += int(ch)
            elif ch.isdigit():
                raise FormatError(f"Invalid FEN digit {ch!r}: {fen!r}")
            else:
                if col >= BOARD_SIZE:
                    raise FormatError(f"Invalid FEN rank width: {fen!r}")
                try:
                    piece = Piece.from_char(ch)
                except ValueError as err:
                    raise FormatError(f"Invalid FEN piece {ch!r}: {fen!r}") from err
                pieces.append(PlacedPiece(piece, Position(row, col)))
                col += 1
            if col > BOARD_SIZE:
                raise FormatError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise FormatError(f"Invalid FEN rank width: {fen!r}")
    return pieces


def _parse_counter(text: str, name: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise FormatError(f"Invalid FEN {name}: {text!r}")
    return int(text)


# ── Serialisation ────────────────────────────────────────────────────────


def _rows_to_placement(rows: Sequence[Sequence[Piece | None]]) -> str:
    ranks: list[str] = []
    for row in rows:
        empty = 0
        rank = ""
        for piece in row:
            if piece is None:
                empty += 1
            else:
                if empty:
                    rank += str(empty)
                    empty = 0
                rank += piece.fen_char
        if empty:
            rank += str(empty)
        ranks.append(rank)
    return "/".join(ranks)


def pieces_to_fen(pieces: Iterable[tuple[Piece, Position]]) -> str:
    """Serialise ``(piece, position)`` pairs to the FEN placement field.

    Ranks are emitted in row order, row 0 first.
    """
    rows: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for piece, position in pieces:
        if rows[position.row][position.col] is not None:
            raise ValueError(f"Square {position} is occupied twice")
        rows[position.row][position.col] = piece
    return _rows_to_placement(rows)


def board_to_fen(board: Board) -> str:
    """Placement field for *board*."""
    return _rows_to_placement(board.grid)


def board_from_fen(fen: str) -> Board:
    """Build a :class:`Board` from the placement field of a full FEN string."""
    return Board.from_pieces(parse_fen(fen).pieces)


def record_to_fen(record: FenRecord) -> str:
    """Serialise a :class:`FenRecord` back to a six-field FEN string."""
    board_str = pieces_to_fen(record.pieces)

    side_str = "w" if record.active_color == Color.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if record.castling_rights & right
    )
    if not castling_str:
        castling_str = "-"

    ep = record.en_passant_square
    ep_str = ep.to_algebraic() if ep is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{record.halfmove_clock} {record.fullmove_no}"
    )
