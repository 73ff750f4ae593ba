"""Pseudo-legal move generation for each kind of piece."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Tuple

from pawnstorm.board import Board, Color, Move, Piece, PieceType, Position

Delta = Tuple[int, int]

_ROOK_DIRECTIONS: Tuple[Delta, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
_BISHOP_DIRECTIONS: Tuple[Delta, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_QUEEN_DIRECTIONS = _ROOK_DIRECTIONS + _BISHOP_DIRECTIONS
_KNIGHT_DELTAS: Tuple[Delta, ...] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1),
)
_KING_DELTAS: Tuple[Delta, ...] = (
    (-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1),
)


def _own_piece(board: Board, origin: Tuple[int, int], kind: PieceType) -> Optional[Piece]:
    if not board.is_on_board(origin):
        return None
    piece = board[origin]
    if piece is None or piece.kind is not kind:
        return None
    return piece


def _slide(
    board: Board, origin: Tuple[int, int], kind: PieceType, directions: Iterable[Delta]
) -> list[Move]:
    piece = _own_piece(board, origin, kind)
    if piece is None:
        return []
    start = Position(*origin)
    moves = []
    for dr, dc in directions:
        square = Position(start.row + dr, start.col + dc)
        while board.is_on_board(square):
            target = board[square]
            if target is None or target.color is not piece.color:
                moves.append(Move(start, square))
            if target is not None:
                break
            square = Position(square.row + dr, square.col + dc)
    return moves


def _step(
    board: Board, origin: Tuple[int, int], kind: PieceType, deltas: Iterable[Delta]
) -> list[Move]:
    piece = _own_piece(board, origin, kind)
    if piece is None:
        return []
    start = Position(*origin)
    moves = []
    for dr, dc in deltas:
        square = Position(start.row + dr, start.col + dc)
        if not board.is_on_board(square):
            continue
        target = board[square]
        if target is None or target.color is not piece.color:
            moves.append(Move(start, square))
    return moves


def pawn_moves(board: Board, origin: Tuple[int, int]) -> list[Move]:
    """Forward steps (double on a pawn's first move) and diagonal captures."""
    pawn = _own_piece(board, origin, PieceType.PAWN)
    if pawn is None:
        return []
    start = Position(*origin)
    direction = -1 if pawn.color is Color.WHITE else 1
    moves = []

    one = Position(start.row + direction, start.col)
    if board.is_on_board(one) and board[one] is None:
        moves.append(Move(start, one))
        two = Position(start.row + 2 * direction, start.col)
        if not pawn.has_moved and board.is_on_board(two) and board[two] is None:
            moves.append(Move(start, two))

    for dc in (-1, 1):
        diagonal = Position(start.row + direction, start.col + dc)
        if not board.is_on_board(diagonal):
            continue
        target = board[diagonal]
        if target is not None and target.color is not pawn.color:
            moves.append(Move(start, diagonal))
    return moves


def rook_moves(board: Board, origin: Tuple[int, int]) -> list[Move]:
    """Moves along ranks and files until blocked."""
    return _slide(board, origin, PieceType.ROOK, _ROOK_DIRECTIONS)


def bishop_moves(board: Board, origin: Tuple[int, int]) -> list[Move]:
    """Moves along diagonals until blocked."""
    return _slide(board, origin, PieceType.BISHOP, _BISHOP_DIRECTIONS)


def queen_moves(board: Board, origin: Tuple[int, int]) -> list[Move]:
    """Moves along ranks, files and diagonals until blocked."""
    return _slide(board, origin, PieceType.QUEEN, _QUEEN_DIRECTIONS)


def knight_moves(board: Board, origin: Tuple[int, int]) -> list[Move]:
    """The eight L-shaped jumps that stay on the board."""
    return _step(board, origin, PieceType.KNIGHT, _KNIGHT_DELTAS)


def king_moves(board: Board, origin: Tuple[int, int]) -> list[Move]:
    """One step in any direction."""
    return _step(board, origin, PieceType.KING, _KING_DELTAS)


_GENERATORS: dict[PieceType, Callable[[Board, Tuple[int, int]], list[Move]]] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def piece_moves(board: Board, origin: Tuple[int, int]) -> list[Move]:
    """Pseudo-legal moves of whatever piece stands on ``origin``."""
    if not board.is_on_board(origin):
        return []
    piece = board[origin]
    if piece is None:
        return []
    return _GENERATORS[piece.kind](board, origin)