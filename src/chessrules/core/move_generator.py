"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import LastMove
from chessrules.core.piece import Piece
from chessrules.core.types import (
    Square,
    back_rank,
    is_valid_square,
    pawn_direction,
    pawn_start_row,
)

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

KING_HOME_COL = 4

# wing -> (rook column, columns strictly between king and rook,
#          columns the king stands on / crosses / lands on)
_CASTLING_LANES: dict[bool, tuple[int, tuple[int, ...], tuple[int, ...]]] = {
    True: (7, (5, 6), (4, 5, 6)),
    False: (0, (1, 2, 3), (4, 3, 2)),
}


class MoveGenerator:
    """Generates moves for single pieces of a caller-owned :class:`Board`.

    The generator only reads the board. King-safety checks run on scratch
    copies made by :meth:`_leaves_king_in_check`.

    ``castling_rights=None`` means there are no rights to consult, so no
    castling destinations are ever produced.
    """

    __slots__ = ("_board", "_last_move", "_rights")

    def __init__(
        self,
        board: Board,
        last_move: LastMove | None = None,
        castling_rights: CastlingRights | None = None,
    ) -> None:
        self._board = board
        self._last_move = last_move
        self._rights = castling_rights

    # -- Public API ---------------------------------------------------------

    def valid_moves(
        self, origin: tuple[int, int], check_king_safety: bool = True
    ) -> list[Square]:
        """Destinations for the piece on *origin*.

        With *check_king_safety* the result is strictly legal (including
        castling for kings). Without it the result is pseudo-legal, which is
        what attack probing works from.
        """
        piece = self._board[origin]
        if piece is None:
            return []
        origin = Square(*origin)

        if piece.piece_type == PieceType.KING:
            return self._gen_king(origin, piece, check_king_safety)

        moves = self._pseudo_legal(origin, piece)
        if not check_king_safety:
            return moves
        return [
            to_sq
            for to_sq in moves
            if not self._leaves_king_in_check(origin, to_sq, piece)
        ]

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without that king counts as check.
        """
        king_sq = self._board.find_king(color)
        if king_sq is None:
            _LOGGER.debug("No %s king on board; treating as in check", color)
            return True
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: tuple[int, int], by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Every probe runs with king safety disabled, so this never re-enters
        the legality filter.
        """
        for from_sq, piece in self._board.pieces():
            if piece.color != by_color:
                continue
            if sq in self._attack_probe(from_sq, piece):
                return True
        return False

    # -- Dispatch -----------------------------------------------------------

    def _pseudo_legal(self, origin: Square, piece: Piece) -> list[Square]:
        color = piece.color
        match piece.piece_type:
            case PieceType.PAWN:
                return self._gen_pawn(origin, color)
            case PieceType.KNIGHT:
                return self._gen_steps(origin, color, KNIGHT_OFFSETS)
            case PieceType.BISHOP:
                return self._gen_sliding(origin, color, BISHOP_DIRS)
            case PieceType.ROOK:
                return self._gen_sliding(origin, color, ROOK_DIRS)
            case PieceType.QUEEN:
                return self._gen_sliding(origin, color, QUEEN_DIRS)
            case PieceType.KING:
                return self._gen_steps(origin, color, KING_OFFSETS)
        return []

    def _attack_probe(self, origin: Square, piece: Piece) -> list[Square]:
        if piece.piece_type == PieceType.PAWN:
            return self._pawn_attacks(origin, piece.color)
        return self._pseudo_legal(origin, piece)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        row, col = sq
        direction = pawn_direction(color)
        next_row = row + direction

        if not 0 <= next_row < 8:
            return moves

        if board.is_empty((next_row, col)):
            moves.append(Square(next_row, col))
            two_step = row + 2 * direction
            if row == pawn_start_row(color) and board.is_empty((two_step, col)):
                moves.append(Square(two_step, col))

        for cap_col in (col - 1, col + 1):
            if not 0 <= cap_col < 8:
                continue
            target = board[next_row, cap_col]
            if target is not None and target.color != color:
                moves.append(Square(next_row, cap_col))

        last = self._last_move
        if (
            last is not None
            and last.is_double_pawn_push
            and last.piece.color != color
            and last.destination[0] == row
            and abs(last.destination[1] - col) == 1
        ):
            moves.append(Square(next_row, last.destination[1]))

        return moves

    def _pawn_attacks(self, sq: Square, color: Color) -> list[Square]:
        row, col = sq
        next_row = row + pawn_direction(color)
        return [
            Square(next_row, c)
            for c in (col - 1, col + 1)
            if is_valid_square(next_row, c)
        ]

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for dr, dc in offsets:
            r = sq.row + dr
            c = sq.col + dc
            if not is_valid_square(r, c):
                continue
            target = board[r, c]
            if target is None or target.color != color:
                moves.append(Square(r, c))
        return moves

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for dr, dc in directions:
            r = sq.row + dr
            c = sq.col + dc
            while is_valid_square(r, c):
                target = board[r, c]
                if target is None:
                    moves.append(Square(r, c))
                else:
                    if target.color != color:
                        moves.append(Square(r, c))
                    break
                r += dr
                c += dc
        return moves

    def _gen_king(
        self, sq: Square, king: Piece, check_king_safety: bool
    ) -> list[Square]:
        steps = self._gen_steps(sq, king.color, KING_OFFSETS)
        if not check_king_safety:
            return steps

        moves = [
            to_sq for to_sq in steps if not self._leaves_king_in_check(sq, to_sq, king)
        ]
        self._gen_castling(sq, king.color, moves)
        return moves

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Square]) -> None:
        rights = self._rights
        if rights is None:
            return

        board = self._board
        home_row = back_rank(color)
        if king_sq != (home_row, KING_HOME_COL):
            return

        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)
        for kingside in (True, False):
            if not rights.may_castle(color, kingside):
                continue
            rook_col, between, king_path = _CASTLING_LANES[kingside]
            if board[home_row, rook_col] != rook:
                continue
            if any(not board.is_empty((home_row, c)) for c in between):
                continue
            if any(
                self.is_square_attacked((home_row, c), opponent) for c in king_path
            ):
                continue
            moves.append(Square(home_row, king_path[-1]))

    # -- Legality simulation -------------------------------------------------

    def _leaves_king_in_check(
        self, origin: Square, destination: Square, piece: Piece
    ) -> bool:
        """Play origin → destination on a scratch board and test for check.

        Only relocates the piece: en-passant removal and promotion are not
        modelled here.
        """
        scratch = self._board.copy()
        scratch[destination] = piece
        scratch[origin] = None
        return MoveGenerator(scratch).is_in_check(piece.color)


# ── Module-level entry points ────────────────────────────────────────────────


def get_valid_moves(
    board: Board,
    row: int,
    col: int,
    last_move: LastMove | None = None,
    castling_rights: CastlingRights | None = None,
    check_king_safety: bool = True,
) -> list[Square]:
    """Destinations for the piece on (*row*, *col*); ``[]`` for an empty square."""
    gen = MoveGenerator(board, last_move, castling_rights)
    return gen.valid_moves((row, col), check_king_safety)


def is_square_attacked(board: Board, sq: tuple[int, int], by_color: Color) -> bool:
    return MoveGenerator(board).is_square_attacked(sq, by_color)


def is_in_check(board: Board, color: Color) -> bool:
    return MoveGenerator(board).is_in_check(color)
