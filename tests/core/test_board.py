"""Tests for Board setup, indexing and snapshot updates."""

from collections import Counter
from collections.abc import Callable

import pytest

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Move
from chesslet.core.piece import King, Pawn, Rook
from chesslet.core.position import Position

P = Position.parse

BACK_RANK = [
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
]


class TestBoardInitial:
    @pytest.mark.parametrize("color", list(Color))
    def test_sixteen_pieces_per_color(self, initial_board: Board, color: Color) -> None:
        pieces = initial_board.player_pieces(color)
        counts = Counter(piece.piece_type for piece in pieces)
        assert len(pieces) == 16
        assert counts == {
            PieceType.PAWN: 8,
            PieceType.ROOK: 2,
            PieceType.KNIGHT: 2,
            PieceType.BISHOP: 2,
            PieceType.QUEEN: 1,
            PieceType.KING: 1,
        }

    def test_white_back_rank(self, initial_board: Board) -> None:
        for file, pt in zip("abcdefgh", BACK_RANK):
            piece = initial_board[P(f"{file}1")]
            assert piece is not None
            assert piece.piece_type == pt, f"Mismatch at {file}1"
            assert piece.color == Color.WHITE

    def test_black_back_rank(self, initial_board: Board) -> None:
        for file, pt in zip("abcdefgh", BACK_RANK):
            piece = initial_board[P(f"{file}8")]
            assert piece is not None
            assert piece.piece_type == pt, f"Mismatch at {file}8"
            assert piece.color == Color.BLACK

    def test_pawn_ranks(self, initial_board: Board) -> None:
        for file in "abcdefgh":
            white = initial_board[P(f"{file}2")]
            black = initial_board[P(f"{file}7")]
            assert isinstance(white, Pawn) and white.color == Color.WHITE
            assert isinstance(black, Pawn) and black.color == Color.BLACK

    def test_empty_middle(self, initial_board: Board) -> None:
        for row in initial_board.grid[2:6]:
            assert all(piece is None for piece in row)

    def test_every_piece_is_distinct(self, initial_board: Board) -> None:
        pieces = [p for row in initial_board.grid for p in row if p is not None]
        assert len({id(p) for p in pieces}) == 32

    def test_no_previous_grid(self, initial_board: Board) -> None:
        assert initial_board.previous_grid is None

    def test_initial_factory(self) -> None:
        assert Board.initial().player_pieces(Color.WHITE)


class TestBoardIndex:
    def test_index_agrees_with_grid(self, initial_board: Board) -> None:
        for color in Color:
            for piece, pos in initial_board.player_pieces(color).items():
                assert initial_board[pos] is piece

    def test_player_pieces_is_a_copy(self, initial_board: Board) -> None:
        initial_board.player_pieces(Color.WHITE).clear()
        assert len(initial_board.player_pieces(Color.WHITE)) == 16

    def test_king_position(self, initial_board: Board) -> None:
        assert initial_board.king_position(Color.WHITE) == P("e1")
        assert initial_board.king_position(Color.BLACK) == P("e8")

    def test_king_position_missing(self, empty_board: Board) -> None:
        assert empty_board.king_position(Color.WHITE) is None

    def test_wraps_given_grid(self) -> None:
        rows = [[None] * 8 for _ in range(8)]
        king = King(Color.BLACK)
        rows[0][4] = king
        board = Board(rows)
        assert board.player_pieces(Color.BLACK) == {king: P("e8")}
        assert board.player_pieces(Color.WHITE) == {}

    def test_previous_grid_keeps_frozen_grid(self, initial_board: Board) -> None:
        board = Board(previous_grid=initial_board.grid)
        assert board.previous_grid is initial_board.grid

    def test_list_grid_is_frozen(self) -> None:
        board = Board([[None] * 8 for _ in range(8)])
        assert isinstance(board.grid, tuple)
        assert all(isinstance(row, tuple) for row in board.grid)

    def test_bad_grid_shape_raises(self) -> None:
        with pytest.raises(ValueError, match="8x8"):
            Board([[None] * 8 for _ in range(7)])

    def test_from_pieces_duplicate_square_raises(self) -> None:
        with pytest.raises(ValueError, match="occupied twice"):
            Board.from_pieces(
                [(Rook(Color.WHITE), P("a1")), (King(Color.WHITE), P("a1"))]
            )

    def test_is_empty(self, initial_board: Board) -> None:
        assert initial_board.is_empty(P("e4"))
        assert not initial_board.is_empty(P("e2"))


class TestBoardUpdate:
    def test_pawn_push(self, initial_board: Board) -> None:
        old_pawn = initial_board[P("e2")]
        board = initial_board.update(Move.step(P("e2"), P("e4")))

        assert board.is_empty(P("e2"))
        moved = board[P("e4")]
        assert isinstance(moved, Pawn)
        assert moved.color == Color.WHITE
        assert moved.has_moved is True
        assert moved is not old_pawn

    def test_previous_snapshot_untouched(self, initial_board: Board) -> None:
        initial_board.update(Move.step(P("e2"), P("e4")))

        pawn = initial_board[P("e2")]
        assert pawn is not None
        assert pawn.has_moved is False
        assert initial_board.is_empty(P("e4"))

    def test_previous_grid_is_back_reference(self, initial_board: Board) -> None:
        board = initial_board.update(Move.step(P("g1"), P("f3")))
        assert board.previous_grid is initial_board.grid

    def test_unmoved_pieces_are_cloned(self, initial_board: Board) -> None:
        board = initial_board.update(Move.step(P("e2"), P("e4")))
        assert board[P("a1")] is not initial_board[P("a1")]
        assert board[P("a1")].has_moved is False

    def test_index_follows_update(self, initial_board: Board) -> None:
        board = initial_board.update(Move.step(P("e2"), P("e4")))
        positions = set(board.player_pieces(Color.WHITE).values())
        assert P("e4") in positions
        assert P("e2") not in positions

    def test_capture_on_destination(self, board_at: Callable[[str], Board]) -> None:
        board = board_at("8/8/8/3p4/4P3/8/8/8")
        after = board.update(Move.step(P("e4"), P("d5"), capture=True))

        assert after.is_empty(P("e4"))
        captor = after[P("d5")]
        assert captor is not None and captor.color == Color.WHITE
        assert after.player_pieces(Color.BLACK) == {}

    def test_removed_square_differs_from_destination(
        self, board_at: Callable[[str], Board]
    ) -> None:
        # White pawn e5 takes the black pawn on d5 by landing on d6
        board = board_at("8/8/8/3pP3/8/8/8/8")
        after = board.update(Move(P("d5"), ((P("e5"), P("d6")),)))

        assert after.is_empty(P("d5"))
        assert after.is_empty(P("e5"))
        assert isinstance(after[P("d6")], Pawn)
        assert after.player_pieces(Color.BLACK) == {}

    def test_multi_piece_relocation(self, board_at: Callable[[str], Board]) -> None:
        board = board_at("8/8/8/8/8/8/8/4K2R")
        after = board.update(Move(None, ((P("e1"), P("g1")), (P("h1"), P("f1")))))

        king = after[P("g1")]
        rook = after[P("f1")]
        assert isinstance(king, King) and king.has_moved
        assert isinstance(rook, Rook) and rook.has_moved
        assert after.is_empty(P("e1"))
        assert after.is_empty(P("h1"))

    def test_move_from_empty_square_raises(self, empty_board: Board) -> None:
        with pytest.raises(ValueError, match="No piece on e2"):
            empty_board.update(Move.step(P("e2"), P("e4")))

    def test_chain_of_snapshots(self, initial_board: Board) -> None:
        first = initial_board.update(Move.step(P("e2"), P("e4")))
        second = first.update(Move.step(P("e7"), P("e5")))
        assert second.previous_grid is first.grid
        assert first.is_empty(P("e5"))
        assert second[P("e4")].has_moved


class TestBoardRepr:
    def test_repr(self, initial_board: Board) -> None:
        text = repr(initial_board)
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[-1] == "  a b c d e f g h"
