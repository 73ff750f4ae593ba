# pawnstorm

A small chess game for the terminal. You play one side and the computer
plays the other. The computer picks its moves with an alpha-beta search,
three plies deep, over a hand-tuned evaluation function.

The package needs nothing beyond the Python standard library.

## Installing

```
pip install .
```

## Playing

```
pawnstorm
```

The prompts are in Spanish. The game first asks which side you want. Answer
`b` or `B` for white (blancas). Any other answer gives you black. White
always moves first, so if you chose black the computer opens.

After every move the board is printed. File letters run along the top and
rank numbers down the left:

```
  a b c d e f g h 
8 r n b q k b n r 
7 p p p p p p p p 
...
```

Uppercase letters are white pieces and lowercase letters are black ones:
`K` king, `Q` queen, `R` rook, `B` bishop, `N` knight, `P` pawn. A dot marks
an empty square.

### Entering moves

Enter a move as the starting square followed by the target square, for
example `e2e4`. Files run `a` to `h` and ranks run `1` to `8`. File letters
may be upper or lower case.

- A move that is badly formed is rejected with a format message, and you are
  asked again.
- A move that is not legal is rejected with "Movimiento ilegal.", and you are
  asked again.
- If input ends during your turn, the game stops.

The computer's replies are shown in the form `e7 -> e5`.

### How a game ends

The game ends at checkmate, when it names the winner (player or machine),
or at stalemate.

## What is not supported

- Castling, en passant and pawn promotion. A pawn that reaches the last rank
  stays a pawn.
- Draws other than stalemate: no fifty-move rule, no repetition and no
  insufficient material.
- Saving or loading games, time controls, and choosing the search depth from
  the command line.

## Using the library

```python
from pawnstorm.board import Color, standard_board
from pawnstorm.rules import Game, legal_moves
from pawnstorm.search import get_best_move
from pawnstorm.evaluation import evaluate_board
from pawnstorm.cli import parse_move_input, format_move

board = standard_board()
print(board.render())
print(len(legal_moves(board, Color.WHITE)))   # 20

game = Game(board)
game.make_move(parse_move_input("e2e4"))
reply = get_best_move(game, 2)
if reply is not None:
    print(format_move(reply), evaluate_board(game.board))
```

### Modules

`pawnstorm.board`: the board and what stands on it.

- `PieceType`, `Color` (with `opponent()`) and `Piece`, a frozen dataclass
  of `kind`, `color` and `has_moved`.
- `Position(row, col)` and `Move(origin, target)`, both named tuples. Row 0
  is rank 8.
- `Board(rows, cols)` is indexed by `(row, col)` and holds `None` on empty
  squares. Iterating it yields `(Position, piece)` pairs.
- `Board` methods: `is_on_board`, `copy`, `apply_move` and `render`.
  `apply_move` moves a piece with no legality check and marks it as moved.
- `create_board`, `init_standard_board` and `standard_board`.

`pawnstorm.movegen`: the moves each piece can make, before checks are taken
into account.

- `pawn_moves`, `knight_moves`, `bishop_moves`, `rook_moves`,
  `queen_moves` and `king_moves`.
- `piece_moves`, for whatever piece stands on a square.

`pawnstorm.rules`: check, legality and the game state.

- `is_in_check(board, color)`. A side without a king is never in check.
- `is_move_legal`, `filter_legal_moves` and `legal_moves`.
- `Game`, a dataclass of `board`, `turn`, `last_move`, `game_over` and
  `winner`.
  - `Game.make_move` plays a move for the side to move and records
    checkmate (`winner` is the mover) or stalemate (`winner` is `None`).
    It raises `IllegalMoveError`, a `ValueError`, when the move is illegal
    or the game is over.
  - `Game.is_checkmate` and `Game.is_stalemate` test the side to move.

`pawnstorm.evaluation`: `evaluate_board(board)` returns a score in
centipawns, positive when white stands better. Besides material it counts:

- centre control, bishop pair, undeveloped minor pieces;
- rooks blocked by their own pawn, rooks on open files;
- doubled, isolated and passed pawns;
- king centralisation in the endgame, and kings in check.

`pawnstorm.search`: `get_best_move(game, depth)` returns the best move for
the side to move, or `None` if it has none. It raises `ValueError` if
`depth` is less than 1.

`pawnstorm.cli`: the interactive game.

- `parse_move_input(text)` turns `e2e4` into a `Move`, and raises
  `ValueError` otherwise.
- `format_move(move)` turns a `Move` into text like `e2 -> e4`.
- `play_game(stdin, stdout)` runs a game over the given streams. They
  default to the console.
- `main()` is what the `pawnstorm` command runs.

## Running the tests

```
pip install .[test]
pytest
```