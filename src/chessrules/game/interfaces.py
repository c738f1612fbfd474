"""Game-layer phase enum and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from chessrules.core.enums import PieceType

_PROMOTION_TYPES: frozenset[PieceType] = frozenset(
    (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)
)


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    AWAITING_MOVE = auto()
    GAME_OVER = auto()


@dataclass(slots=True, frozen=True)
class GameConfig:
    """Options for applying moves.

    Args:
        promotion_type: Piece a pawn becomes on reaching the far rank.
    """

    promotion_type: PieceType = PieceType.QUEEN

    def __post_init__(self) -> None:
        if self.promotion_type not in _PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.promotion_type.name}")
