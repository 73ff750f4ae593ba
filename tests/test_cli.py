import io
import sys

import pytest

from pawnstorm.board import Move, Position, standard_board
from pawnstorm.cli import format_move, main, parse_move_input, play_game


def test_parse_corner_to_corner():
    assert parse_move_input("a8h1") == Move(Position(0, 0), Position(7, 7))


def test_parse_format_round_trip():
    assert format_move(parse_move_input("e2e4")) == "e2 -> e4"
    assert format_move(parse_move_input("g8f6")) == "g8 -> f6"


@pytest.mark.parametrize("text", ["E2E4", "e2e4\n", "e2E4", "e2e4\nextra"])
def test_parse_accepts_variants(text):
    assert parse_move_input(text) == parse_move_input("e2e4")


@pytest.mark.parametrize(
    "text", ["", "e2e", "e2e4 ", "e2e4e5", "i2e4", "e9e4", "e0e4", "e2e", "22e4", "e2ex"]
)
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_move_input(text)


def test_play_game_reports_bad_and_illegal_input():
    stdin = io.StringIO("b\nzz\ne2e5\n")
    stdout = io.StringIO()
    play_game(stdin, stdout)
    output = stdout.getvalue()
    assert output.startswith("¿Quieres jugar con blancas o negras? (b/n): ")
    assert standard_board().render() in output
    assert "Formato inválido. Usa formato como e2e4." in output
    assert "Movimiento ilegal." in output
    assert output.endswith("Entrada inválida.\n")
    assert output.count("Tu turno (Blancas)") == 3


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("B\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Tu turno (Blancas)" in output
    assert output.endswith("Entrada inválida.\n")