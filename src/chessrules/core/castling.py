"""Castling-rights flags."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import Color


@dataclass(frozen=True, slots=True)
class CastlingRights:
    """Six independent "has moved" flags, all ``False`` at the start of a game.

    Flags only ever go from ``False`` to ``True``; the ``with_*`` helpers
    return a new value and never clear a flag.
    """

    white_king_moved: bool = False
    white_kingside_rook_moved: bool = False
    white_queenside_rook_moved: bool = False
    black_king_moved: bool = False
    black_kingside_rook_moved: bool = False
    black_queenside_rook_moved: bool = False

    def king_moved(self, color: Color) -> bool:
        return self.white_king_moved if color == Color.WHITE else self.black_king_moved

    def rook_moved(self, color: Color, kingside: bool) -> bool:
        if color == Color.WHITE:
            return (
                self.white_kingside_rook_moved
                if kingside
                else self.white_queenside_rook_moved
            )
        return (
            self.black_kingside_rook_moved
            if kingside
            else self.black_queenside_rook_moved
        )

    def may_castle(self, color: Color, kingside: bool) -> bool:
        """Neither the king nor the rook on that wing has moved yet."""
        return not self.king_moved(color) and not self.rook_moved(color, kingside)

    # ── Monotonic updates ────────────────────────────────────────────────

    def with_king_moved(self, color: Color) -> CastlingRights:
        field = "white_king_moved" if color == Color.WHITE else "black_king_moved"
        return replace(self, **{field: True})

    def with_rook_moved(self, color: Color, kingside: bool) -> CastlingRights:
        wing = "kingside" if kingside else "queenside"
        return replace(self, **{f"{color.name.lower()}_{wing}_rook_moved": True})
