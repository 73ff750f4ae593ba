"""Board representation: pieces, squares, moves and the grid that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterator, NamedTuple, Optional, Tuple


class PieceType(enum.Enum):
    """Kinds of chess pieces; the value is the white symbol used when rendering."""

    KING = "K"
    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"


class Color(enum.Enum):
    """Side a piece belongs to."""

    WHITE = "white"
    BLACK = "black"

    def opponent(self) -> "Color":
        """Return the other side."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE


@dataclass(frozen=True)
class Piece:
    """A piece on the board."""

    kind: PieceType
    color: Color
    has_moved: bool = False

    @property
    def symbol(self) -> str:
        letter = self.kind.value
        return letter if self.color is Color.WHITE else letter.lower()


class Position(NamedTuple):
    """A square, counted from the top-left corner (row 0 is rank 8)."""

    row: int
    col: int


class Move(NamedTuple):
    """A move of the piece on ``origin`` to ``target``."""

    origin: Position
    target: Position


Square = Tuple[int, int]

EMPTY_SYMBOL = "."

_BACK_RANK = (
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
    """A rectangular grid of squares, each empty (``None``) or holding a Piece."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("board dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._grid: list[list[Optional[Piece]]] = [
            [None] * cols for _ in range(rows)
        ]

    def _checked(self, pos: Square) -> Tuple[int, int]:
        if not self.is_on_board(pos):
            raise IndexError(f"square {tuple(pos)} is off the board")
        row, col = pos
        return row, col

    def __getitem__(self, pos: Square) -> Optional[Piece]:
        row, col = self._checked(pos)
        return self._grid[row][col]

    def __setitem__(self, pos: Square, piece: Optional[Piece]) -> None:
        row, col = self._checked(pos)
        self._grid[row][col] = piece

    def __iter__(self) -> Iterator[Tuple[Position, Optional[Piece]]]:
        """Yield every square with its content, row by row."""
        for row, line in enumerate(self._grid):
            for col, piece in enumerate(line):
                yield Position(row, col), piece

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and self._grid == other._grid
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board({self.rows}, {self.cols})"

    def __str__(self) -> str:
        return self.render()

    def is_on_board(self, pos: Square) -> bool:
        """Tell whether ``pos`` lies inside the board."""
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def copy(self) -> "Board":
        """Return an independent copy of the board."""
        duplicate = Board(self.rows, self.cols)
        duplicate._grid = [list(line) for line in self._grid]
        return duplicate

    def apply_move(self, move: Move) -> None:
        """Move a piece without any legality check.

        Moves that leave the board or start on an empty square are ignored.
        """
        origin, target = move
        if not (self.is_on_board(origin) and self.is_on_board(target)):
            return
        piece = self[origin]
        if piece is None:
            return
        self[target] = replace(piece, has_moved=True)
        self[origin] = None

    def render(self) -> str:
        """Return the board as text, file letters on top and rank numbers left."""
        header = "  " + "".join(f"{chr(ord('a') + col)} " for col in range(self.cols))
        lines = [header]
        for index, line in enumerate(self._grid):
            cells = "".join(
                f"{EMPTY_SYMBOL if piece is None else piece.symbol} " for piece in line
            )
            lines.append(f"{self.rows - index} {cells}")
        return "\n".join(lines) + "\n"


def create_board(rows: int, cols: int) -> Board:
    """Create an empty board of the given size."""
    return Board(rows, cols)


def init_standard_board(board: Board) -> None:
    """Place the pieces of the standard starting position on ``board``."""
    for col in range(board.cols):
        board[1, col] = Piece(PieceType.PAWN, Color.BLACK)
        board[6, col] = Piece(PieceType.PAWN, Color.WHITE)
    for col, kind in enumerate(_BACK_RANK):
        board[0, col] = Piece(kind, Color.BLACK)
        board[7, col] = Piece(kind, Color.WHITE)


def standard_board() -> Board:
    """Return a new 8x8 board in the starting position."""
    board = Board(8, 8)
    init_standard_board(board)
    return board