"""High-level chess rules: check, checkmate, game result."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, GameResult
from chessrules.core.move import LastMove
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    The side to move is never stored on the board; every query names the
    color it is about.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def legal_moves(
        board: Board,
        color: Color,
        last_move: LastMove | None = None,
        castling_rights: CastlingRights | None = None,
    ) -> dict[Square, list[Square]]:
        """Origin → legal destinations for every piece of *color* that can move."""
        gen = MoveGenerator(board, last_move, castling_rights)
        result: dict[Square, list[Square]] = {}
        for sq in board.occupied(color):
            moves = gen.valid_moves(sq)
            if moves:
                result[sq] = moves
        return result

    @staticmethod
    def has_legal_move(
        board: Board,
        color: Color,
        last_move: LastMove | None = None,
        castling_rights: CastlingRights | None = None,
    ) -> bool:
        gen = MoveGenerator(board, last_move, castling_rights)
        return any(gen.valid_moves(sq) for sq in board.occupied(color))

    @staticmethod
    def is_checkmate(
        board: Board,
        color: Color,
        last_move: LastMove | None = None,
        castling_rights: CastlingRights | None = None,
    ) -> bool:
        """In check, and no piece of *color* has a single legal move."""
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color, last_move, castling_rights)

    @staticmethod
    def game_result(
        board: Board,
        side_to_move: Color,
        last_move: LastMove | None = None,
        castling_rights: CastlingRights | None = None,
    ) -> GameResult:
        """Determine the current game result (checkmate only)."""
        if Rules.is_checkmate(board, side_to_move, last_move, castling_rights):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.IN_PROGRESS


def is_checkmate(
    board: Board,
    color: Color,
    last_move: LastMove | None = None,
    castling_rights: CastlingRights | None = None,
) -> bool:
    return Rules.is_checkmate(board, color, last_move, castling_rights)
