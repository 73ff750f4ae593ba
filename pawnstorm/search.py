"""Alpha-beta search for the engine's move choice."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional

from pawnstorm.board import Color, Move
from pawnstorm.evaluation import evaluate_board
from pawnstorm.rules import Game, legal_moves


def _child(game: Game, move: Move) -> Game:
    board = game.board.copy()
    board.apply_move(move)
    return replace(game, board=board)


def _alphabeta(game: Game, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
    if depth == 0 or game.is_checkmate() or game.is_stalemate():
        return evaluate_board(game.board)

    color = Color.WHITE if maximizing else Color.BLACK
    moves = legal_moves(game.board, color)
    if not moves:
        return evaluate_board(game.board)

    best = -math.inf if maximizing else math.inf
    for move in moves:
        value = _alphabeta(_child(game, move), depth - 1, alpha, beta, not maximizing)
        if maximizing:
            best = max(best, value)
            alpha = max(alpha, value)
        else:
            best = min(best, value)
            beta = min(beta, value)
        if beta <= alpha:
            break
    return best


def get_best_move(game: Game, depth: int) -> Optional[Move]:
    """Pick the move for the side to move, searching ``depth`` plies.

    Returns None when the side to move has no legal move.
    """
    if depth < 1:
        raise ValueError("search depth must be at least 1")
    mover = game.current_color()
    white = mover is Color.WHITE
    best_move: Optional[Move] = None
    best_value = -math.inf if white else math.inf

    for move in legal_moves(game.board, mover):
        child = replace(_child(game, move), turn=mover.opponent())
        value = _alphabeta(child, depth - 1, -math.inf, math.inf, not white)
        if (white and value > best_value) or (not white and value < best_value):
            best_value = value
            best_move = move
    return best_move