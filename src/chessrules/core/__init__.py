"""Core domain layer — pure chess move legality with zero external dependencies.

Quick start::

    from chessrules.core import Board, CastlingRights, get_valid_moves

    board = Board.initial()
    for sq in get_valid_moves(board, 6, 4, None, CastlingRights()):
        print(sq)
"""

from chessrules.core.board import Board
from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, GameResult, MoveFlag, PieceType
from chessrules.core.move import LastMove
from chessrules.core.move_generator import (
    MoveGenerator,
    get_valid_moves,
    is_in_check,
    is_square_attacked,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules, is_checkmate
from chessrules.core.types import (
    BOARD_SIZE,
    Square,
    back_rank,
    is_valid_square,
    pawn_direction,
    pawn_start_row,
    promotion_row,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "back_rank",
    "is_valid_square",
    "pawn_direction",
    "pawn_start_row",
    "promotion_row",
    # Domain objects
    "Board",
    "CastlingRights",
    "LastMove",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Entry points
    "get_valid_moves",
    "is_checkmate",
    "is_in_check",
    "is_square_attacked",
]
