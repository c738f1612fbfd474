"""Game state machine — applies moves and tracks turn, rights and result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, GameResult, MoveFlag, PieceType
from chessrules.core.move import LastMove
from chessrules.core.move_generator import KING_HOME_COL, MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, back_rank, promotion_row
from chessrules.game.interfaces import GameConfig, GamePhase

_LOGGER = logging.getLogger(__name__)

# king destination column -> (rook origin column, rook destination column)
_ROOK_HOPS: dict[int, tuple[int, int]] = {6: (7, 5), 2: (0, 3)}


def _corner_wing(sq: Square, color: Color) -> bool | None:
    """``True``/``False`` for *color*'s kingside/queenside rook corner."""
    if sq.row != back_rank(color):
        return None
    if sq.col == 7:
        return True
    if sq.col == 0:
        return False
    return None


class IllegalMoveError(ValueError):
    """Raised when a submitted move is not legal in the current state."""


@dataclass
class MoveRecord:
    """What a single applied move did to the board."""

    origin: Square
    destination: Square
    piece: Piece
    captured: Piece | None = None
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None
    gives_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Owns the board and everything the move engine reads but never writes.

    This is a pure data/logic class — no threading, no UI. Each applied move
    replaces :attr:`board` with a new :class:`Board`, so boards handed out
    earlier stay valid snapshots.
    """

    config: GameConfig = field(default_factory=GameConfig)
    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    last_move: LastMove | None = field(default=None, init=False)
    castling_rights: CastlingRights = field(default_factory=CastlingRights, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
        castling_rights: CastlingRights | None = None,
    ) -> None:
        """Initialise (or restart) the game.

        Without *castling_rights* every flag starts unset.
        """
        self.board = (
            Board.from_placement(placement)
            if placement is not None
            else Board.initial()
        )
        self.side_to_move = side_to_move
        self.last_move = None
        self.castling_rights = (
            castling_rights if castling_rights is not None else CastlingRights()
        )
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self, origin: tuple[int, int], destination: tuple[int, int]
    ) -> MoveRecord:
        """Validate and play origin → destination for the side to move."""
        origin = Square(*origin)
        destination = Square(*destination)

        if self.is_game_over:
            raise IllegalMoveError("Game is over")
        piece = self.board[origin]
        if piece is None or piece.color != self.side_to_move:
            _LOGGER.warning(
                "Rejected move from %s: no %s piece there", origin, self.side_to_move
            )
            side = self.side_to_move.name.lower()
            raise IllegalMoveError(f"No {side} piece on {origin}")
        if destination not in self.legal_moves(origin):
            _LOGGER.warning("Rejected illegal move %s -> %s", origin, destination)
            raise IllegalMoveError(f"Illegal move {origin} -> {destination}")

        board = self.board.copy()
        record = MoveRecord(origin, destination, piece, captured=board[destination])

        if piece.piece_type == PieceType.PAWN:
            self._apply_pawn_effects(board, record)
        elif (
            piece.piece_type == PieceType.KING
            and abs(destination.col - origin.col) == 2
        ):
            rook_from, rook_to = _ROOK_HOPS[destination.col]
            board.move_piece((origin.row, rook_from), (origin.row, rook_to))
            record.flag = (
                MoveFlag.CASTLE_KINGSIDE
                if destination.col == 6
                else MoveFlag.CASTLE_QUEENSIDE
            )

        board.move_piece(origin, destination)
        if record.promotion is not None:
            board[destination] = Piece(piece.color, record.promotion)

        self.castling_rights = self._updated_rights(record)
        self.board = board
        self.last_move = LastMove(origin, destination, piece)
        self.side_to_move = self.side_to_move.opposite
        record.gives_check = self.is_in_check

        _LOGGER.debug(
            "%s %s %s -> %s (%s)",
            piece.color,
            piece.piece_type.name.lower(),
            origin,
            destination,
            record.flag.name,
        )
        self._check_game_over()
        return record

    def _apply_pawn_effects(self, board: Board, record: MoveRecord) -> None:
        origin, destination = record.origin, record.destination
        color = record.piece.color

        if abs(destination.row - origin.row) == 2:
            record.flag = MoveFlag.DOUBLE_PAWN
        elif destination.col != origin.col and board.is_empty(destination):
            # The captured pawn sits beside the origin, on the destination file.
            victim_sq = (origin.row, destination.col)
            record.captured = board[victim_sq]
            board[victim_sq] = None
            record.flag = MoveFlag.EN_PASSANT

        if destination.row == promotion_row(color):
            record.promotion = self.config.promotion_type
            record.flag = MoveFlag.PROMOTION

    def _updated_rights(self, record: MoveRecord) -> CastlingRights:
        rights = self.castling_rights
        origin, piece = record.origin, record.piece
        if piece.piece_type == PieceType.KING:
            if origin == (back_rank(piece.color), KING_HOME_COL):
                rights = rights.with_king_moved(piece.color)
        elif piece.piece_type == PieceType.ROOK:
            wing = _corner_wing(origin, piece.color)
            if wing is not None:
                rights = rights.with_rook_moved(piece.color, kingside=wing)

        # A rook taken on its corner can never castle again.
        captured = record.captured
        if captured is not None and captured.piece_type == PieceType.ROOK:
            wing = _corner_wing(record.destination, captured.color)
            if wing is not None:
                rights = rights.with_rook_moved(captured.color, kingside=wing)
        return rights

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_in_check(self) -> bool:
        """Is the side to move in check?"""
        return Rules.is_in_check(self.board, self.side_to_move)

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    def legal_moves(self, square: tuple[int, int]) -> list[Square]:
        """Legal destinations for the piece on *square*.

        Empty unless that piece belongs to the side to move.
        """
        origin = Square(*square)
        piece = self.board[origin]
        if piece is None or piece.color != self.side_to_move:
            return []
        gen = MoveGenerator(self.board, self.last_move, self.castling_rights)
        moves = gen.valid_moves(origin)
        if piece.piece_type == PieceType.PAWN:
            moves = [
                dest
                for dest in moves
                if not self._en_passant_exposes_king(origin, dest, piece.color)
            ]
        return moves

    # ── Internal ─────────────────────────────────────────────────────────

    def _en_passant_exposes_king(
        self, origin: Square, destination: Square, color: Color
    ) -> bool:
        """Does this en passant capture leave *color*'s king attacked?

        The engine's own safety test keeps the captured pawn on the board, so
        a pawn pinned along its rank only shows up once the victim is lifted.
        """
        if destination.col == origin.col or not self.board.is_empty(destination):
            return False
        after = self.board.copy()
        after[origin.row, destination.col] = None
        after.move_piece(origin, destination)
        return Rules.is_in_check(after, color)

    def _check_game_over(self) -> None:
        side = self.side_to_move
        if not self.is_in_check:
            return
        if any(self.legal_moves(sq) for sq in self.board.occupied(side)):
            return
        _LOGGER.info("%s is checkmated", side)
        self.result = (
            GameResult.BLACK_WINS if side == Color.WHITE else GameResult.WHITE_WINS
        )
        self.phase = GamePhase.GAME_OVER
