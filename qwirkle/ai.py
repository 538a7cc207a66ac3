"""A computer player that picks its own placements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

from .board import GameBoard
from .players import Player
from .tilebag import Hand
from .tiles import Tile

PLACE_CMD = "P"
REPLACE_CMD = "R"
AI_NAME = "AI Arty"
MIN_QWIRKLE_SCORE = 12
_LINE_BEFORE_FIVE = 4


@dataclass(frozen=True)
class Placement:
    """A tile that can go at board row ``x``, column ``y`` for ``score`` points."""

    tile: Tile
    x: int
    y: int
    score: int

    @property
    def location(self) -> str:
        """The board location written as a row letter and a column number."""
        return f"{chr(ord('A') + self.x)}{self.y + 1}"


def order_placements(moves: Iterable[Placement]) -> list[Placement]:
    """Placements from highest to lowest score; equal scores keep their order."""
    return sorted(moves, key=lambda move: move.score, reverse=True)


def duplicate_index(hand: Hand) -> int:
    """Index of the last tile that has an identical tile later in the hand, or 0."""
    tiles = list(hand)
    index = 0
    for i, tile in enumerate(tiles):
        if tile in tiles[i + 1:]:
            index = i
    return index


def _line_lengths(board: GameBoard, move: Placement) -> tuple[int, int]:
    return (
        len(board.tiles_on_row(move.x, move.y)),
        len(board.tiles_on_col(move.x, move.y)),
    )


@dataclass
class AIPlayer(Player):
    """A player whose moves are chosen by the program."""

    name: str = AI_NAME
    is_ai: ClassVar[bool] = True

    def _valid_moves(self, board: GameBoard) -> list[Placement]:
        return [
            Placement(tile, x, y, board.score(x, y, tile))
            for x in range(board.height)
            for y in range(board.width)
            if board.validate_adjacent(x, y)
            for tile in self.hand
            if board.validate_valid_placement(x, y, tile)
        ]

    def _choose_placement(self, board: GameBoard, moves: list[Placement]) -> Placement:
        ordered = order_placements(moves)

        # A qwirkle, or a hand holding a duplicate, takes the best move at once.
        if ordered[0].score >= MIN_QWIRKLE_SCORE or duplicate_index(self.hand) > 0:
            return ordered[0]

        # Avoid making a line of five, which hands the next player a qwirkle.
        index = 0
        row, col = _line_lengths(board, ordered[index])
        while (row == _LINE_BEFORE_FIVE or col == _LINE_BEFORE_FIVE) and index < len(ordered) - 1:
            index += 1
            row, col = _line_lengths(board, ordered[index])

        # Prefer an equally scoring corner, which blocks opponents better.
        if (row == 0 or col == 0) and index < len(ordered) - 2:
            following = ordered[index + 1]
            if ordered[index].score == following.score:
                next_row, next_col = _line_lengths(board, following)
                if next_row > 0 and next_col > 0:
                    index += 1

        return ordered[index]

    def _replace_command(self) -> str:
        if len(self.hand) == 0:
            raise ValueError("no tiles in hand to replace")
        tile = self.hand[duplicate_index(self.hand)]
        return f"{REPLACE_CMD}{tile}"

    def choose_command(self, board: GameBoard, empty_bag: bool = False) -> str:
        """Return ``P<tile><location>`` to place a tile, or ``R<tile>`` to replace one.

        A playable tile is always placed, whether or not the bag is empty.
        """
        moves = self._valid_moves(board)
        if not moves:
            return self._replace_command()
        choice = self._choose_placement(board, moves)
        return f"{PLACE_CMD}{choice.tile}{choice.location}"