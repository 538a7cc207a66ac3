"""Players and the turn order between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator

from .tilebag import Hand


@dataclass
class Player:
    """A named player with a hand of tiles and a running score."""

    name: str
    hand: Hand = field(default_factory=Hand)
    score: int = 0
    is_ai: ClassVar[bool] = False

    def add_score(self, points: int) -> None:
        self.score += points


class Players:
    """The players of a game, in turn order, with the index of whose turn it is."""

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: list[Player] = list(players)
        self.current_index = 0

    def add(self, player: Player) -> None:
        self._players.append(player)

    def next_player(self) -> Player:
        """Move the turn on to the next player, wrapping round, and return them."""
        if not self._players:
            raise IndexError("no players")
        if self.current_index >= len(self._players) - 1:
            self.current_index = 0
        else:
            self.current_index += 1
        return self._players[self.current_index]

    def current(self) -> Player:
        return self._players[self.current_index]

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __getitem__(self, index: int) -> Player:
        return self._players[index]