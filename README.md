# qwirkle

Qwirkle in the terminal. Lay tiles on a 20 x 20 board (rows A-T, columns
1-20) so that every line of touching tiles shares either a colour or a shape,
with no tile repeated in a line. Play with two to four people at one
keyboard, or alone against the computer player "AI Arty".

## Installing

    pip install .

## Playing

    qwirkle

The main menu offers:

1. New multi-player game (2-4 players)
2. New single-player game (you against the computer)
3. Load a saved game
4. Credits (read from `credits.txt` in the current directory, three lines
   per person: name, student ID, e-mail)
5. Exit

Player names must be made of upper-case letters only. Running out of input
(end of file) leaves the program.

### Tiles

A tile is written as a colour letter followed by a shape number:

| Colour | Letter | Shape   | Number |
|--------|--------|---------|--------|
| red    | R      | circle  | 1      |
| orange | O      | 4-star  | 2      |
| yellow | Y      | diamond | 3      |
| green  | G      | square  | 4      |
| blue   | B      | 6-star  | 5      |
| purple | P      | clover  | 6      |

The bag holds two of each of the 36 tiles, shuffled; each player is dealt six.

### Commands on your turn

    place <tile> at <location>    e.g.  place R1 at C5
    replace <tile>                e.g.  replace G4
    hint <tile>                   e.g.  hint B2
    save <filename>
    quit

A location is a row letter followed by a column number. After placing a tile
you draw a new one from the bag, if any are left. `replace` swaps a tile from
your hand with one from the bag and is refused when the bag is empty. `hint`
shows where that tile would score most and does not use up your turn; `save`
writes the game to a plain-text file you can load later from the menu and
also leaves your turn open. `quit` ends the game and returns to the menu.

### Scoring

A placement scores one point per tile in each line it joins, counting itself.
Completing a line of six (a Qwirkle) scores six extra. The game ends when a
player empties their hand; that player gets a six-point bonus, and the final
scores and the winner (or a tie) are shown.

## Using the package

The game pieces can also be used from Python:

```python
import random

from qwirkle.tiles import Tile
from qwirkle.tilebag import TileBag, Hand
from qwirkle.board import GameBoard, InvalidPlacement

bag = TileBag()
bag.fill(random.Random(1))
hand = Hand.deal(bag)

board = GameBoard()
tile = hand[0]
board.validate_set_tile(0, 0, tile, True)   # raises InvalidPlacement if not allowed
points = board.set_tile(0, 0, tile)
print(board.render())
```

- `qwirkle.tiles` – `Tile` (with `Tile.parse("R1")`), `to_colour`, `to_shape`.
- `qwirkle.tilebag` – `TileBag` (draw from the front, return to the back) and `Hand`.
- `qwirkle.players` – `Player` and `Players`, which keeps the turn order.
- `qwirkle.board` – `GameBoard`: placement rules, scoring, `state()` / `set_state()`
  and `render()`; `row_index` turns a row letter into an index.
- `qwirkle.ai` – `AIPlayer.choose_command(board, empty_bag)` returns
  `P<tile><location>` to place a tile or `R<tile>` to replace one.
- `qwirkle.state` – `GameState.save(path)` and `GameState.load(path)`; problems
  with a file raise `GameFileError`.
- `qwirkle.gameplay` – `Game`, which runs turns reading from any prompt
  function and writing to any text stream, and `create_new_game`,
  `create_ai_game` and `load_game`.
- `qwirkle.cli` – the main menu behind the `qwirkle` command.

## Running the tests

    pip install .[test]
    pytest