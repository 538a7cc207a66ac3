"""The tile bag and the players' hands."""

from __future__ import annotations

import random
from collections import deque
from typing import Iterable, Iterator, List, Optional

from .tiles import COLOURS, SHAPES, Tile

HAND_SIZE = 6


def _parse_codes(text: str) -> List[Tile]:
    return [Tile.parse(code) for code in text.split(",") if code]


def _join_codes(tiles: Iterable[Tile]) -> str:
    return ",".join(str(tile) for tile in tiles)


class TileBag:
    """Tiles waiting to be drawn; drawn from the front, returned to the back."""

    def __init__(self, tiles: Iterable[Tile] = ()) -> None:
        self._tiles: deque[Tile] = deque(tiles)

    @classmethod
    def from_string(cls, text: str) -> TileBag:
        """Build a bag from comma separated tile codes such as ``R1,B4``."""
        return cls(_parse_codes(text))

    def fill(self, rng=None) -> TileBag:
        """Add two of every tile, each at a random position. Returns the bag."""
        rng = rng if rng is not None else random
        for _ in range(2):
            for shape in SHAPES:
                for colour in COLOURS:
                    self._insert_at_random(Tile(colour, shape), rng)
        return self

    def _insert_at_random(self, tile: Tile, rng) -> None:
        size = len(self._tiles)
        index = rng.randrange(max(size, 1))
        if index == 0:
            self._tiles.appendleft(tile)
        elif index == size - 1:
            self._tiles.append(tile)
        else:
            self._tiles.insert(index, tile)

    def add(self, tile: Tile) -> None:
        """Put a tile at the back of the bag."""
        self._tiles.append(tile)

    def draw(self) -> Optional[Tile]:
        """Remove and return the front tile, or None when the bag is empty."""
        if not self._tiles:
            return None
        return self._tiles.popleft()

    def replace(self, tile: Tile) -> Optional[Tile]:
        """Return a tile to the back of the bag and draw one from the front."""
        self.add(tile)
        return self.draw()

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __getitem__(self, index: int) -> Tile:
        return self._tiles[index]

    def __str__(self) -> str:
        return _join_codes(self._tiles)

    def __repr__(self) -> str:
        return f"TileBag({str(self)!r})"


class Hand:
    """The tiles a player holds."""

    SIZE = HAND_SIZE

    def __init__(self, tiles: Iterable[Tile] = ()) -> None:
        self._tiles: List[Tile] = list(tiles)

    @classmethod
    def deal(cls, bag: TileBag) -> Hand:
        """Draw a full hand from the bag, or as many tiles as it still holds."""
        hand = cls()
        for _ in range(HAND_SIZE):
            tile = bag.draw()
            if tile is None:
                break
            hand.add(tile)
        return hand

    @classmethod
    def from_string(cls, text: str) -> Hand:
        """Build a hand from comma separated tile codes such as ``R1,B4``."""
        return cls(_parse_codes(text))

    def add(self, tile: Tile) -> None:
        """Put a tile at the back of the hand."""
        self._tiles.append(tile)

    def remove(self, tile: Tile) -> None:
        """Remove the first tile equal to ``tile``; ValueError if none is held."""
        try:
            self._tiles.remove(tile)
        except ValueError:
            raise ValueError(f"tile {tile} is not in the hand") from None

    def __contains__(self, tile: object) -> bool:
        return tile in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __getitem__(self, index: int) -> Tile:
        return self._tiles[index]

    def __str__(self) -> str:
        return _join_codes(self._tiles)

    def __repr__(self) -> str:
        return f"Hand({str(self)!r})"