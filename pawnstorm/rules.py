"""Rules on top of move generation: check, legality and game state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pawnstorm.board import Board, Color, Move, PieceType, Position
from pawnstorm.movegen import piece_moves


class IllegalMoveError(ValueError):
    """Raised when a move cannot be played in the current game."""


def _find_king(board: Board, color: Color) -> Optional[Position]:
    for pos, piece in board:
        if piece is not None and piece.kind is PieceType.KING and piece.color is color:
            return pos
    return None


def _simulate(board: Board, move: Move) -> Board:
    """Return a copy of ``board`` with the piece moved, state flags untouched."""
    origin, target = move
    simulated = board.copy()
    simulated[target] = simulated[origin]
    simulated[origin] = None
    return simulated


def is_in_check(board: Board, color: Color) -> bool:
    """Tell whether the king of ``color`` can be reached by an enemy piece.

    A side without a king is never in check.
    """
    king = _find_king(board, color)
    if king is None:
        return False
    enemy = color.opponent()
    return any(
        move.target == king
        for pos, piece in board
        if piece is not None and piece.color is enemy
        for move in piece_moves(board, pos)
    )


def is_move_legal(board: Board, move: Move, color: Color) -> bool:
    """Tell whether ``color`` may play ``move`` without leaving its king in check."""
    origin, target = move
    if not (board.is_on_board(origin) and board.is_on_board(target)):
        return False
    piece = board[origin]
    if piece is None or piece.color is not color:
        return False
    if not any(candidate.target == tuple(target) for candidate in piece_moves(board, origin)):
        return False
    return not is_in_check(_simulate(board, Move(Position(*origin), Position(*target))), color)


def filter_legal_moves(board: Board, moves: Iterable[Move], color: Color) -> list[Move]:
    """Keep the moves after which the king of ``color`` is not in check."""
    return [move for move in moves if not is_in_check(_simulate(board, move), color)]


def legal_moves(board: Board, color: Color) -> list[Move]:
    """Every legal move of ``color``, in board order."""
    candidates = [
        move
        for pos, piece in board
        if piece is not None and piece.color is color
        for move in piece_moves(board, pos)
    ]
    return filter_legal_moves(board, candidates, color)


@dataclass
class Game:
    """A game in progress: the board, whose turn it is and how it ended."""

    board: Board
    turn: Color = Color.WHITE
    last_move: Optional[Move] = None
    game_over: bool = False
    winner: Optional[Color] = None

    def current_color(self) -> Color:
        """The side to move."""
        return self.turn

    def make_move(self, move: Move) -> None:
        """Play ``move`` for the side to move and update the game state.

        Raises IllegalMoveError if the game is over or the move is not legal.
        """
        if self.game_over:
            raise IllegalMoveError("the game is over")
        mover = self.current_color()
        if not is_move_legal(self.board, move, mover):
            raise IllegalMoveError(f"illegal move {move!r} for {mover.value}")
        self.board.apply_move(move)
        self.last_move = move
        self.turn = mover.opponent()
        if self.is_checkmate():
            self.game_over = True
            self.winner = mover
        elif self.is_stalemate():
            self.game_over = True
            self.winner = None

    def is_checkmate(self) -> bool:
        """The side to move is in check and has no legal move."""
        if self.game_over:
            return False
        color = self.current_color()
        if not is_in_check(self.board, color):
            return False
        return not legal_moves(self.board, color)

    def is_stalemate(self) -> bool:
        """The side to move is not in check but has no legal move."""
        if self.game_over:
            return False
        color = self.current_color()
        if is_in_check(self.board, color):
            return False
        return not legal_moves(self.board, color)