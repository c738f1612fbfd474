"""Square type and coordinate helpers.

Board layout (row, col):
    row 0 = black back rank, row 7 = white back rank
    col 0 = a-file, col 7 = h-file

White pawns therefore advance towards row 0 and black pawns towards row 7.
"""

from __future__ import annotations

from typing import NamedTuple

from chessrules.core.enums import Color

BOARD_SIZE = 8


class Square(NamedTuple):
    """A board coordinate. Compares equal to a plain ``(row, col)`` tuple."""

    row: int
    col: int


def is_valid_square(row: int, col: int) -> bool:
    """Check whether (*row*, *col*) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def back_rank(color: Color) -> int:
    """Row holding *color*'s king and rooks at the start."""
    return 7 if color == Color.WHITE else 0


def pawn_direction(color: Color) -> int:
    """Row delta of a single pawn step for *color*."""
    return -1 if color == Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


def promotion_row(color: Color) -> int:
    """Far rank on which *color*'s pawns promote."""
    return 0 if color == Color.WHITE else 7
