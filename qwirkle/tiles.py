"""Tile values and the one- or two-character codes that name them."""

from __future__ import annotations

from dataclasses import dataclass

NO_COLOUR = "X"
RED = "R"
ORANGE = "O"
YELLOW = "Y"
GREEN = "G"
BLUE = "B"
PURPLE = "P"

COLOURS = (RED, ORANGE, YELLOW, GREEN, BLUE, PURPLE)

NO_SHAPE = 0
CIRCLE = 1
STAR_4 = 2
DIAMOND = 3
SQUARE = 4
STAR_6 = 5
CLOVER = 6

SHAPES = (CIRCLE, STAR_4, DIAMOND, SQUARE, STAR_6, CLOVER)

_SHAPE_CODES = {str(shape): shape for shape in SHAPES}


@dataclass(frozen=True)
class Tile:
    """A tile with a colour letter and a shape number; the default is an empty space."""

    colour: str = NO_COLOUR
    shape: int = NO_SHAPE

    @classmethod
    def parse(cls, code: str) -> Tile:
        """Build a tile from a code such as ``R1``: a colour letter then a shape number."""
        if len(code) < 2:
            raise ValueError(f"tile code too short: {code!r}")
        try:
            shape = int(code[1:])
        except ValueError:
            raise ValueError(f"invalid shape in tile code {code!r}") from None
        return cls(code[0], shape)

    @classmethod
    def empty(cls) -> Tile:
        """Return the tile that marks an empty board space."""
        return cls(NO_COLOUR, NO_SHAPE)

    def is_empty(self) -> bool:
        return self.colour == NO_COLOUR

    def __str__(self) -> str:
        return f"{self.colour}{self.shape}"


def to_colour(text: str) -> str:
    """Return the colour named by a one-letter code, or raise ValueError."""
    if text in COLOURS:
        return text
    raise ValueError(f"unknown colour code: {text!r}")


def to_shape(text: str) -> int:
    """Return the shape named by a one-digit code, or raise ValueError."""
    try:
        return _SHAPE_CODES[text]
    except KeyError:
        raise ValueError(f"unknown shape code: {text!r}") from None