"""Last-move record consumed by en-passant detection."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class LastMove:
    """The most recently applied move: where a piece came from and went to."""

    origin: Square
    destination: Square
    piece: Piece

    @property
    def is_double_pawn_push(self) -> bool:
        """Did a pawn just advance two ranks?"""
        return (
            self.piece.piece_type == PieceType.PAWN
            and abs(self.origin[0] - self.destination[0]) == 2
        )
