"""The playing grid: placement rules, scoring and the saved board format."""

from __future__ import annotations

import string
from typing import Iterable, Optional, Sequence

from .tiles import NO_SHAPE, Tile

BOARD_SIZE = 20
QWIRKLE_LENGTH = 6
QWIRKLE_BONUS = 6
NOT_A_ROW = 26


class InvalidPlacement(ValueError):
    """A tile placement that breaks the rules of the game."""


def _fits_line(line: Iterable[Tile], tile: Tile) -> bool:
    """True if ``tile`` shares a colour or a shape with every tile of ``line``
    and duplicates none of them."""
    colour_match = True
    shape_match = True
    for other in line:
        if colour_match and other.colour != tile.colour:
            colour_match = False
        if shape_match and other.shape != tile.shape:
            shape_match = False
        if other == tile:
            return False
        if not colour_match and not shape_match:
            return False
    return True


def row_index(letter: str) -> int:
    """Return the board row named by a letter (A is 0); 26 for anything else."""
    if len(letter) != 1 or letter not in string.ascii_letters:
        return NOT_A_ROW
    return ord(letter.upper()) - ord("A")


class GameBoard:
    """A grid of tiles indexed by row (x) and column (y)."""

    def __init__(self, grid: Optional[Sequence[Sequence[Tile]]] = None) -> None:
        if grid is None:
            self._grid = [
                [Tile.empty() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
            ]
        else:
            self._grid = [list(row) for row in grid]

    @property
    def height(self) -> int:
        return len(self._grid)

    @property
    def width(self) -> int:
        return len(self._grid[0]) if self._grid else 0

    def valid_space(self, x: int, y: int) -> bool:
        """True if the coordinates lie within the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Tile:
        """Return the tile at the coordinates, or an empty tile outside the board."""
        if self.valid_space(x, y):
            return self._grid[x][y]
        return Tile.empty()

    def _tiles_on_axis(self, x: int, y: int, along_rows: bool) -> list[Tile]:
        tiles: list[Tile] = []
        for step in (-1, 1):
            cx, cy = x, y
            while self.valid_space(cx, cy):
                if along_rows:
                    cx += step
                else:
                    cy += step
                if not self.valid_space(cx, cy):
                    break
                tile = self.get_tile(cx, cy)
                if tile.is_empty():
                    break
                tiles.append(tile)
        return tiles

    def tiles_on_row(self, x: int, y: int) -> list[Tile]:
        """Tiles in an unbroken run through (x, y) along the row letters, nearest first."""
        return self._tiles_on_axis(x, y, True)

    def tiles_on_col(self, x: int, y: int) -> list[Tile]:
        """Tiles in an unbroken run through (x, y) along the column numbers, nearest first."""
        return self._tiles_on_axis(x, y, False)

    def validate_set_tile(self, x: int, y: int, tile: Tile, first_turn: bool) -> None:
        """Raise InvalidPlacement unless ``tile`` may be put at (x, y)."""
        row = self.tiles_on_row(x, y)
        col = self.tiles_on_col(x, y)

        if not self.valid_space(x, y):
            raise InvalidPlacement("Tile space must be within the bounds of the board")
        if not self.get_tile(x, y).is_empty():
            raise InvalidPlacement("A tile already exists in this space")
        if not row and not col and not first_turn:
            raise InvalidPlacement("Unable to place a tile without any adjacent tiles")
        if not first_turn and not (_fits_line(row, tile) and _fits_line(col, tile)):
            raise InvalidPlacement(
                "Either shape or colour must match the row and column "
                "& no duplicate tiles"
            )

    def validate_adjacent(self, x: int, y: int) -> bool:
        """True if (x, y) is empty and touches at least one tile."""
        if not self.tiles_on_row(x, y) and not self.tiles_on_col(x, y):
            return False
        return self.get_tile(x, y).is_empty()

    def validate_valid_placement(self, x: int, y: int, tile: Tile) -> bool:
        """True if ``tile`` fits both the row and the column through (x, y)."""
        return _fits_line(self.tiles_on_row(x, y), tile) and _fits_line(
            self.tiles_on_col(x, y), tile
        )

    def score(self, x: int, y: int, tile: Tile) -> int:
        """Points that putting ``tile`` at (x, y) would earn."""
        row = len(self.tiles_on_row(x, y))
        if row:
            row += 1
        col = len(self.tiles_on_col(x, y))
        if col:
            col += 1
        points = row + col
        if row >= QWIRKLE_LENGTH or col >= QWIRKLE_LENGTH:
            points += QWIRKLE_BONUS
        return points

    def set_tile(self, x: int, y: int, tile: Tile) -> int:
        """Put ``tile`` at (x, y) and return the points it earns."""
        if not self.valid_space(x, y):
            raise IndexError(f"space ({x}, {y}) is outside the board")
        self._grid[x][y] = tile
        return self.score(x, y, tile)

    def state(self) -> str:
        """The placed tiles as ``<tile>@<location>`` entries joined by commas."""
        return ",".join(
            f"{tile}@{chr(ord('A') + i)}{j + 1}"
            for i, row in enumerate(self._grid)
            for j, tile in enumerate(row)
            if not tile.is_empty()
        )

    def set_state(self, state: str, height: int, width: int) -> None:
        """Replace the board with an empty one of the given size holding the
        tiles listed in ``state``; raise ValueError on a malformed entry."""
        grid = [[Tile.empty() for _ in range(width)] for _ in range(height)]
        for entry in state.split(","):
            if not entry:
                continue
            code, sep, location = entry.partition("@")
            if not sep or len(location) < 2:
                raise ValueError(f"invalid board entry: {entry!r}")
            tile = Tile.parse(code)
            x = ord(location[0]) - ord("A")
            try:
                y = int(location[1:]) - 1
            except ValueError:
                raise ValueError(f"invalid board location: {entry!r}") from None
            if not (0 <= x < height and 0 <= y < width):
                raise ValueError(f"board location out of range: {entry!r}")
            grid[x][y] = tile
        self._grid = grid

    def _column_numbers(self) -> str:
        return "".join(
            f" {i}" + (" " if i < 10 else "") for i in range(1, self.width + 1)
        )

    def render(self) -> str:
        """The board drawn as text, with row letters and column numbers."""
        divider = " " + "---" * self.width + "-\n"
        parts = [" ", self._column_numbers(), "\n", divider]
        for i, row in enumerate(self._grid):
            letter = chr(ord("A") + i)
            cells = "".join(
                "|"
                + (" " if tile.is_empty() else tile.colour)
                + (" " if tile.shape == NO_SHAPE else str(tile.shape))
                for tile in row
            )
            parts.append(f"{letter}{cells}|{letter}\n")
        parts.extend([divider, " ", self._column_numbers(), "\n"])
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()