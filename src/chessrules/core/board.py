"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by ``(row, col)``.

    The move engine only ever reads a caller's board. Simulations run on
    :meth:`copy`, which duplicates the row lists and shares the (immutable)
    pieces.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: tuple[int, int], piece: Piece | None) -> None:
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: tuple[int, int]) -> bool:
        row, col = sq
        return self._grid[row][col] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(row, col), piece

    def occupied(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in row-major order."""
        return [sq for sq, piece in self.pieces() if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if absent."""
        for sq, piece in self.pieces():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def move_piece(self, origin: tuple[int, int], destination: tuple[int, int]) -> None:
        """Relocate the occupant of *origin* onto *destination*, clearing *origin*."""
        self[destination] = self[origin]
        self[origin] = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on row 0, white on row 7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[0, col] = Piece(Color.BLACK, pt)
            b[1, col] = Piece(Color.BLACK, PieceType.PAWN)
            b[6, col] = Piece(Color.WHITE, PieceType.PAWN)
            b[7, col] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        """Build a board from a FEN piece-placement field.

        The first ``/``-separated group is row 0 (black's back rank), e.g.
        ``"4k3/8/8/8/8/8/8/4K2R"``.
        """
        groups = placement.strip().split("/")
        if len(groups) != BOARD_SIZE:
            raise ValueError(
                f"Placement needs {BOARD_SIZE} rows, got {len(groups)}: {placement!r}"
            )

        b = cls()
        for row, group in enumerate(groups):
            col = 0
            for char in group:
                if char.isdigit():
                    col += int(char)
                    continue
                if col >= BOARD_SIZE:
                    raise ValueError(f"Row {row} overflows 8 columns: {group!r}")
                b[row, col] = Piece.from_char(char)
                col += 1
            if col != BOARD_SIZE:
                raise ValueError(f"Row {row} does not span 8 columns: {group!r}")
        return b

    @classmethod
    def from_grid(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        """Wrap an 8x8 nested sequence of pieces (copied, not aliased)."""
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Grid must be 8 rows of 8 cells")
        b = cls()
        b._grid = [list(r) for r in rows]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        lines: list[str] = []
        for row, cells in enumerate(self._grid):
            text = " ".join(str(p) if p else "." for p in cells)
            lines.append(f"{row} {text}")
        lines.append("  0 1 2 3 4 5 6 7")
        return "\n".join(lines)
