import pytest

from pawnstorm.board import Board, Color, Move, Piece, PieceType, Position
from pawnstorm.rules import Game, is_move_legal
from pawnstorm.search import get_best_move

W, B = Color.WHITE, Color.BLACK


def _board(*placements):
    board = Board(8, 8)
    for kind, color, square in placements:
        board[square] = Piece(kind, color)
    return board


@pytest.mark.parametrize("depth", [1, 2])
def test_white_captures_hanging_queen(depth):
    board = _board(
        (PieceType.KING, W, (7, 4)),
        (PieceType.KING, B, (0, 4)),
        (PieceType.ROOK, W, (4, 0)),
        (PieceType.QUEEN, B, (4, 6)),
    )
    move = get_best_move(Game(board), depth)
    assert move == Move(Position(4, 0), Position(4, 6))


def test_black_captures_hanging_queen():
    board = _board(
        (PieceType.KING, W, (7, 4)),
        (PieceType.KING, B, (0, 4)),
        (PieceType.ROOK, B, (3, 0)),
        (PieceType.QUEEN, W, (3, 6)),
    )
    move = get_best_move(Game(board, turn=B), 1)
    assert move == Move(Position(3, 0), Position(3, 6))


def test_best_move_is_legal_and_board_untouched():
    board = _board(
        (PieceType.KING, W, (7, 4)),
        (PieceType.KING, B, (0, 4)),
        (PieceType.KNIGHT, W, (5, 2)),
        (PieceType.PAWN, B, (1, 3)),
    )
    snapshot = board.copy()
    game = Game(board)
    move = get_best_move(game, 2)
    assert is_move_legal(board, move, W)
    assert board == snapshot


def test_no_legal_move_returns_none():
    board = _board(
        (PieceType.KING, B, (0, 0)),
        (PieceType.QUEEN, W, (2, 1)),
        (PieceType.KING, W, (7, 7)),
    )
    assert get_best_move(Game(board, turn=B), 1) is None


@pytest.mark.parametrize("depth", [0, -1])
def test_depth_must_be_positive(depth):
    board = _board((PieceType.KING, W, (7, 4)), (PieceType.KING, B, (0, 4)))
    with pytest.raises(ValueError):
        get_best_move(Game(board), depth)