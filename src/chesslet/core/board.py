"""Board - immutable snapshot of piece placement on an 8x8 grid."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Move
from chesslet.core.piece import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from chesslet.core.position import BOARD_SIZE, Position

_LOGGER = logging.getLogger(__name__)

Grid = tuple[tuple[Piece | None, ...], ...]

_BACK_RANK: tuple[type[Piece], ...] = (
    Rook,
    Knight,
    Bishop,
    Queen,
    King,
    Bishop,
    Knight,
    Rook,
)


def _empty_rows() -> list[list[Piece | None]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def _initial_rows() -> list[list[Piece | None]]:
    rows = _empty_rows()
    rows[0] = [cls(Color.BLACK) for cls in _BACK_RANK]
    rows[1] = [Pawn(Color.BLACK) for _ in range(BOARD_SIZE)]
    rows[6] = [Pawn(Color.WHITE) for _ in range(BOARD_SIZE)]
    rows[7] = [cls(Color.WHITE) for cls in _BACK_RANK]
    return rows


def _freeze(rows: Sequence[Sequence[Piece | None]]) -> Grid:
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError(f"Board grid must be {BOARD_SIZE}x{BOARD_SIZE}")
    if isinstance(rows, tuple) and all(isinstance(row, tuple) for row in rows):
        return rows
    return tuple(tuple(row) for row in rows)


class Board:
    """Read-only board snapshot with a per-color piece index.

    A board is never changed after construction. :meth:`update` builds the
    next snapshot from clones of every piece, so flags set on the new
    snapshot never leak into older ones.
    """

    __slots__ = ("_grid", "_previous_grid", "_pieces")

    def __init__(
        self,
        grid: Sequence[Sequence[Piece | None]] | None = None,
        previous_grid: Sequence[Sequence[Piece | None]] | None = None,
    ) -> None:
        self._grid: Grid = _freeze(grid if grid is not None else _initial_rows())
        self._previous_grid: Grid | None = (
            _freeze(previous_grid) if previous_grid is not None else None
        )
        self._pieces: dict[Color, dict[Piece, Position]] = {
            Color.WHITE: {},
            Color.BLACK: {},
        }
        self._index_pieces()

    def _index_pieces(self) -> None:
        for row_idx, row in enumerate(self._grid):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    self._pieces[piece.color][piece] = Position(row_idx, col_idx)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls()

    @classmethod
    def empty(cls) -> Board:
        return cls(_empty_rows())

    @classmethod
    def from_pieces(cls, pieces: Iterable[tuple[Piece, Position]]) -> Board:
        """Board holding exactly *pieces*, each on its paired position."""
        rows = _empty_rows()
        for piece, position in pieces:
            if rows[position.row][position.col] is not None:
                raise ValueError(f"Square {position} is occupied twice")
            rows[position.row][position.col] = piece
        return cls(rows)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: Position) -> Piece | None:
        return self._grid[position.row][position.col]

    def is_empty(self, position: Position) -> bool:
        return self._grid[position.row][position.col] is None

    @property
    def grid(self) -> Grid:
        """Rows of the board, row 0 (rank 8) first."""
        return self._grid

    @property
    def previous_grid(self) -> Grid | None:
        """Grid of the snapshot this board was derived from, if any."""
        return self._previous_grid

    # -- Query helpers ------------------------------------------------------

    def player_pieces(self, color: Color) -> dict[Piece, Position]:
        """Live pieces of *color* mapped to the squares they stand on."""
        return dict(self._pieces[color])

    def king_position(self, color: Color) -> Position | None:
        for piece, position in self._pieces[color].items():
            if piece.piece_type == PieceType.KING:
                return position
        return None

    # -- Snapshots ----------------------------------------------------------

    def update(self, move: Move) -> Board:
        """Return the board that results from applying *move*.

        The captured square is cleared before any relocation. Legality is
        not checked; relocating from an empty square raises ``ValueError``.
        """
        rows = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._grid
        ]

        if move.removed is not None:
            rows[move.removed.row][move.removed.col] = None

        for source, destination in move.moved:
            piece = rows[source.row][source.col]
            if piece is None:
                raise ValueError(f"No piece on {source}")
            rows[source.row][source.col] = None
            rows[destination.row][destination.col] = piece
            piece.has_moved = True

        _LOGGER.debug("Applied move %s", move)
        return Board(rows, previous_grid=self._grid)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p is not None else "." for p in row]
            lines.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
