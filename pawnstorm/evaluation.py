"""Static evaluation of a position, positive when White stands better."""

from __future__ import annotations

from typing import Optional

from pawnstorm.board import Board, Color, Piece, PieceType
from pawnstorm.rules import is_in_check

PAWN_VALUE = 100
KNIGHT_VALUE = 320
BISHOP_VALUE = 330
ROOK_VALUE = 500
QUEEN_VALUE = 900
KING_VALUE = 20000

CENTER_CONTROL_PAWN = 10
CENTER_CONTROL_PIECE = 3
KING_SAFETY_PENALTY = -10
DOUBLED_PAWN_PENALTY = -15
ISOLATED_PAWN_PENALTY = -20
PASSED_PAWN_BONUS = 25
BISHOP_PAIR_BONUS = 30
UNDEVELOPED_PENALTY = -10
ROOK_BLOCKED_PENALTY = -15
ROOK_OPEN_FILE_BONUS = 15

ENDGAME_MATERIAL = 2400

PIECE_VALUES = {
    PieceType.PAWN: PAWN_VALUE,
    PieceType.KNIGHT: KNIGHT_VALUE,
    PieceType.BISHOP: BISHOP_VALUE,
    PieceType.ROOK: ROOK_VALUE,
    PieceType.QUEEN: QUEEN_VALUE,
    PieceType.KING: KING_VALUE,
}

_FILES = 8
_CENTER = (3, 4)
_HOME_ROW = {Color.WHITE: 7, Color.BLACK: 0}
_PAWN_ROW = {Color.WHITE: 6, Color.BLACK: 1}
_SIGN = {Color.WHITE: 1, Color.BLACK: -1}


def _is_pawn_of(board: Board, row: int, col: int, color: Color) -> bool:
    if not board.is_on_board((row, col)):
        return False
    piece: Optional[Piece] = board[row, col]
    return piece is not None and piece.kind is PieceType.PAWN and piece.color is color


def _is_passed(board: Board, row: int, col: int, color: Color) -> bool:
    enemy = color.opponent()
    rows = range(row + 1, board.rows) if color is Color.WHITE else range(row)
    for k in rows:
        if _is_pawn_of(board, k, col, enemy):
            return False
        if col > 0 and _is_pawn_of(board, k, col - 1, enemy):
            return False
        if col < board.cols - 1 and _is_pawn_of(board, k, col + 1, enemy):
            return False
    return True


def evaluate_board(board: Board) -> int:
    """Score ``board`` in centipawns: material plus positional terms."""
    score = 0
    material = {Color.WHITE: 0, Color.BLACK: 0}
    bishops = {Color.WHITE: 0, Color.BLACK: 0}
    pawns_in_file = {Color.WHITE: [0] * _FILES, Color.BLACK: [0] * _FILES}
    in_check = {Color.WHITE: False, Color.BLACK: False}

    for (row, col), piece in board:
        if piece is None:
            continue
        color = piece.color
        sign = _SIGN[color]
        value = PIECE_VALUES[piece.kind]
        material[color] += value
        score += sign * value

        if piece.kind is PieceType.BISHOP:
            bishops[color] += 1

        if row in _CENTER and col in _CENTER:
            bonus = CENTER_CONTROL_PAWN if piece.kind is PieceType.PAWN else CENTER_CONTROL_PIECE
            score += sign * bonus

        if piece.kind is PieceType.PAWN and col < _FILES:
            pawns_in_file[color][col] += 1

        if piece.kind is PieceType.KING:
            in_check[color] = is_in_check(board, color)

        if piece.kind in (PieceType.KNIGHT, PieceType.BISHOP) and row == _HOME_ROW[color]:
            score += sign * UNDEVELOPED_PENALTY

        if piece.kind is PieceType.ROOK and col < _FILES:
            if row == _HOME_ROW[color] and _is_pawn_of(board, _PAWN_ROW[color], col, color):
                score += sign * ROOK_BLOCKED_PENALTY
            # Only pawns already scanned count towards an open file.
            if not pawns_in_file[Color.WHITE][col] and not pawns_in_file[Color.BLACK][col]:
                score += sign * ROOK_OPEN_FILE_BONUS

    for color, sign in _SIGN.items():
        if bishops[color] >= 2:
            score += sign * BISHOP_PAIR_BONUS

    for color, sign in _SIGN.items():
        counts = pawns_in_file[color]
        for col, count in enumerate(counts):
            if count > 1:
                score += sign * DOUBLED_PAWN_PENALTY
            isolated = (
                count > 0
                and not (col > 0 and counts[col - 1])
                and not (col < _FILES - 1 and counts[col + 1])
            )
            if isolated:
                score += sign * ISOLATED_PAWN_PENALTY

    for (row, col), piece in board:
        if piece is not None and piece.kind is PieceType.PAWN:
            if _is_passed(board, row, col, piece.color):
                score += _SIGN[piece.color] * PASSED_PAWN_BONUS

    endgame = (
        material[Color.WHITE] <= ENDGAME_MATERIAL or material[Color.BLACK] <= ENDGAME_MATERIAL
    )
    if endgame:
        for (row, col), piece in board:
            if piece is not None and piece.kind is PieceType.KING:
                distance = abs(row - 3) + abs(col - 3)
                score -= _SIGN[piece.color] * distance * 2

    for color, sign in _SIGN.items():
        if in_check[color]:
            score += sign * KING_SAFETY_PENALTY * 2

    return score