"""Chess move legality and checkmate detection."""

from chessrules.core import (
    Board,
    CastlingRights,
    Color,
    LastMove,
    Piece,
    PieceType,
    Square,
    get_valid_moves,
    is_checkmate,
)

__all__ = [
    "Board",
    "CastlingRights",
    "Color",
    "LastMove",
    "Piece",
    "PieceType",
    "Square",
    "get_valid_moves",
    "is_checkmate",
]
