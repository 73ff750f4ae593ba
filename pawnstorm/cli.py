"""Interactive console game of a human against the engine."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from pawnstorm.board import Color, Move, Position, standard_board
from pawnstorm.rules import Game, is_move_legal
from pawnstorm.search import get_best_move

ENGINE_DEPTH = 3

_COLOR_NAMES = {Color.WHITE: "Blancas", Color.BLACK: "Negras"}


def parse_move_input(text: str) -> Move:
    """Parse coordinate notation such as ``e2e4`` into a Move.

    Raises ValueError when the text is not a move in that form.
    """
    if len(text) < 4:
        raise ValueError(f"move too short: {text!r}")
    trimmed = text[:5]
    if trimmed.endswith("\n"):
        trimmed = trimmed[:-1]
    if len(trimmed) != 4:
        raise ValueError(f"move must have four characters: {text!r}")

    from_col, from_row, to_col, to_row = (
        trimmed[0].lower(),
        trimmed[1],
        trimmed[2].lower(),
        trimmed[3],
    )
    if not all("a" <= c <= "h" for c in (from_col, to_col)) or not all(
        "1" <= r <= "8" for r in (from_row, to_row)
    ):
        raise ValueError(f"square out of range in move: {text!r}")

    return Move(
        Position(8 - int(from_row), ord(from_col) - ord("a")),
        Position(8 - int(to_row), ord(to_col) - ord("a")),
    )


def _square_name(pos: Position) -> str:
    return f"{chr(pos.col + ord('a'))}{8 - pos.row}"


def format_move(move: Move) -> str:
    """Describe a move as ``e2 -> e4``."""
    return f"{_square_name(move.origin)} -> {_square_name(move.target)}"


def play_game(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run a game on the console until it ends or input runs out."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    game = Game(standard_board())

    stdout.write("¿Quieres jugar con blancas o negras? (b/n): ")
    stdout.flush()
    player_color = Color.WHITE if stdin.readline()[:1] in ("b", "B") else Color.BLACK

    while True:
        stdout.write(game.board.render())
        color = game.current_color()
        player_turn = color is player_color

        if player_turn:
            stdout.write(f"Tu turno ({_COLOR_NAMES[color]}). Ingresa tu movimiento (e.g., e2e4): ")
            stdout.flush()
            line = stdin.readline()
            if not line:
                stdout.write("Entrada inválida.\n")
                return
            try:
                move = parse_move_input(line)
            except ValueError:
                stdout.write("Formato inválido. Usa formato como e2e4.\n")
                continue
            if not is_move_legal(game.board, move, color):
                stdout.write("Movimiento ilegal.\n")
                continue
            game.board.apply_move(move)
        else:
            stdout.write(f"Turno de la máquina ({_COLOR_NAMES[color]})...\n")
            stdout.flush()
            best = get_best_move(game, ENGINE_DEPTH)
            if best is None:
                return
            game.board.apply_move(best)
            stdout.write(f"La máquina juega: {format_move(best)}\n")

        game.last_move = move if player_turn else best
        game.turn = color.opponent()
        if game.is_checkmate():
            stdout.write(game.board.render())
            stdout.write(f"¡Jaque mate! Ganador: {'Jugador' if player_turn else 'Máquina'}\n")
            return
        if game.is_stalemate():
            stdout.write(game.board.render())
            stdout.write("¡Empate por ahogado!\n")
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive game on the console."""
    play_game()
    return 0


if __name__ == "__main__":
    sys.exit(main())