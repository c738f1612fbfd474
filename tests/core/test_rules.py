"""Tests for Rules: check, checkmate, game result."""

from chessrules.core.board import Board
from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, GameResult
from chessrules.core.rules import Rules, is_checkmate
from chessrules.core.types import Square

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"


class TestCheck:
    def test_starting_not_in_check(self, initial_board: Board) -> None:
        assert not Rules.is_in_check(initial_board, Color.WHITE)

    def test_fools_mate_in_check(self) -> None:
        assert Rules.is_in_check(Board.from_placement(FOOLS_MATE), Color.WHITE)


class TestCheckmate:
    def test_fools_mate(self, fresh_rights: CastlingRights) -> None:
        board = Board.from_placement(FOOLS_MATE)
        assert is_checkmate(board, Color.WHITE, None, fresh_rights)
        assert Rules.game_result(board, Color.WHITE) == GameResult.BLACK_WINS

    def test_two_rooks_on_the_back_rank(self) -> None:
        board = Board.from_placement("R6k/R7/8/8/8/8/8/4K3")
        assert is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.WHITE_WINS

    def test_removing_one_attacker_frees_the_king(self) -> None:
        board = Board.from_placement("R6k/8/8/8/8/8/8/4K3")
        assert Rules.is_in_check(board, Color.BLACK)
        assert not is_checkmate(board, Color.BLACK)

    def test_rook_and_king_opposition(self) -> None:
        # R on row 0 checks the black king; the white king covers row 1.
        board = Board.from_placement("R2k4/8/3K4/8/8/8/8/8")
        assert is_checkmate(board, Color.BLACK)

    def test_capturing_the_checker_saves(self) -> None:
        board = Board.from_placement("R6k/R7/1n6/8/8/8/8/4K3")
        assert Rules.is_in_check(board, Color.BLACK)
        assert not is_checkmate(board, Color.BLACK)

    def test_not_checkmate_when_can_escape(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert not is_checkmate(board, Color.WHITE)

    def test_stalemate_is_not_checkmate(self) -> None:
        board = Board.from_placement("7k/8/5KQ1/8/8/8/8/8")
        assert not Rules.has_legal_move(board, Color.BLACK)
        assert not is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.IN_PROGRESS

    def test_missing_king_is_treated_as_mated(self) -> None:
        board = Board.from_placement("8/8/8/8/8/8/8/4K3")
        assert is_checkmate(board, Color.BLACK)


class TestLegalMoves:
    def test_starting_position_movers(self, initial_board: Board) -> None:
        moves = Rules.legal_moves(initial_board, Color.WHITE)
        assert set(moves) == {Square(6, c) for c in range(8)} | {
            Square(7, 1),
            Square(7, 6),
        }
        assert sum(len(v) for v in moves.values()) == 20

    def test_only_king_can_move_in_check(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/7P/r3K3")
        moves = Rules.legal_moves(board, Color.WHITE)
        assert list(moves) == [Square(7, 4)]
        assert moves[Square(7, 4)] == [(6, 4), (6, 3), (6, 5)]
