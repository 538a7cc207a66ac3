"""Saving and loading a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .ai import AIPlayer
from .board import GameBoard
from .players import Player, Players
from .tilebag import Hand, TileBag

PathLike = Union[str, Path]


class GameFileError(ValueError):
    """A saved game that cannot be read or written."""


@dataclass
class GameState:
    """Everything needed to carry on a game: players, board and tile bag.

    The saved file holds, one item per line: the number of players; for each
    player the name, 1 or 0 for a computer player, the score and the hand;
    the board height and width; the placed tiles; the bag; and the index of
    the player whose turn it is.
    """

    players: Players = field(default_factory=Players)
    board: GameBoard = field(default_factory=GameBoard)
    bag: TileBag = field(default_factory=TileBag)

    def save(self, path: PathLike) -> None:
        """Write the game to ``path``; GameFileError if the file cannot be written."""
        lines = [str(len(self.players))]
        for player in self.players:
            lines.extend(
                [player.name, str(int(player.is_ai)), str(player.score), str(player.hand)]
            )
        lines.append(f"{self.board.height},{self.board.width}")
        lines.append(self.board.state())
        lines.append(str(self.bag))
        lines.append(str(self.players.current_index))
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as file:
                file.write("\n".join(lines) + "\n")
        except OSError as exc:
            raise GameFileError(f"cannot write game file {path}") from exc

    @classmethod
    def load(cls, path: PathLike) -> GameState:
        """Read a game saved by :meth:`save`; GameFileError if it is missing or malformed."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise GameFileError("File Not Found.") from exc

        lines = iter(text.splitlines())

        def next_line() -> str:
            return next(lines, "")

        try:
            players = Players()
            for _ in range(int(next_line())):
                name = next_line()
                is_ai = int(next_line())
                score = int(next_line())
                hand = Hand.deal(TileBag.from_string(next_line()))
                player = AIPlayer(hand=hand) if is_ai else Player(name, hand)
                player.add_score(score)
                players.add(player)

            dimensions = next_line()
            board_state = next_line()
            bag_line = next_line()
            current = int(next_line())

            height_text, _, width_text = dimensions.partition(",")
            board = GameBoard()
            board.set_state(board_state, int(height_text), int(width_text))
            bag = TileBag.from_string(bag_line)
        except ValueError as exc:
            raise GameFileError("Invalid file format.") from exc

        if not 0 <= current < len(players):
            raise GameFileError("Invalid file format.")
        players.current_index = current
        return cls(players, board, bag)