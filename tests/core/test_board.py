"""Tests for Board and Piece."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[7, 4] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[0, 4] == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert board[7, col] == Piece(Color.WHITE, pt), f"Mismatch at col {col}"
            assert board[0, col] == Piece(Color.BLACK, pt), f"Mismatch at col {col}"

    def test_pawns(self) -> None:
        board = Board.initial()
        white_pawn = Piece(Color.WHITE, PieceType.PAWN)
        black_pawn = Piece(Color.BLACK, PieceType.PAWN)
        white = [sq for sq, p in board.pieces() if p == white_pawn]
        black = [sq for sq, p in board.pieces() if p == black_pawn]
        assert white == [Square(6, c) for c in range(8)]
        assert black == [Square(1, c) for c in range(8)]

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board.is_empty((row, col))


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[4, 4] = piece
        assert board[Square(4, 4)] == piece
        assert board.is_empty((6, 4))

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[7, 4] = None
        assert board != copy
        assert board[7, 4] == Piece(Color.WHITE, PieceType.KING)

    def test_move_piece(self) -> None:
        board = Board.initial()
        board.move_piece((6, 4), (4, 4))
        assert board.is_empty((6, 4))
        assert board[4, 4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == (7, 4)
        assert board.find_king(Color.BLACK) == (0, 4)

    def test_find_king_missing_returns_none(self) -> None:
        assert Board().find_king(Color.WHITE) is None

    def test_occupied_count(self) -> None:
        board = Board.initial()
        assert len(board.occupied(Color.WHITE)) == 16
        assert len(board.occupied(Color.BLACK)) == 16

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.pieces()) == []

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "K" in text
        assert "0 1 2 3 4 5 6 7" in text


class TestBoardFactories:
    def test_from_placement_matches_initial(self) -> None:
        board = Board.from_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        assert board == Board.initial()

    def test_from_placement_sparse(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/8/4K2R")
        assert board[0, 4] == Piece(Color.BLACK, PieceType.KING)
        assert board[7, 4] == Piece(Color.WHITE, PieceType.KING)
        assert board[7, 7] == Piece(Color.WHITE, PieceType.ROOK)
        assert len(list(board.pieces())) == 3

    @pytest.mark.parametrize(
        "placement",
        [
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "8k/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
        ],
    )
    def test_from_placement_rejects_bad_shape(self, placement: str) -> None:
        with pytest.raises(ValueError):
            Board.from_placement(placement)

    def test_from_placement_rejects_bad_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_placement("4x3/8/8/8/8/8/8/8")

    def test_from_grid_copies_rows(self) -> None:
        rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        rows[3][3] = Piece(Color.BLACK, PieceType.QUEEN)
        board = Board.from_grid(rows)
        rows[3][3] = None
        assert board[3, 3] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_from_grid_rejects_wrong_size(self) -> None:
        with pytest.raises(ValueError, match="8 rows of 8 cells"):
            Board.from_grid([[None] * 8] * 7)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    def test_structural_equality(self) -> None:
        assert Piece(Color.WHITE, PieceType.ROOK) == Piece.from_char("R")
        assert Piece(Color.WHITE, PieceType.ROOK) != Piece(Color.BLACK, PieceType.ROOK)
