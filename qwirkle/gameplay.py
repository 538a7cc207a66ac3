"""Running a game turn by turn at a text console."""

from __future__ import annotations

import re
import string
from typing import Callable, Optional, TextIO

from .ai import PLACE_CMD, REPLACE_CMD, AIPlayer
from .board import QWIRKLE_LENGTH, GameBoard, row_index
from .players import Player, Players
from .state import GameFileError, GameState
from .tilebag import Hand, TileBag
from .tiles import Tile, to_colour, to_shape

Prompt = Callable[[], str]

MIN_PLAYERS = 2
MAX_PLAYERS = 4
END_GAME_BONUS = 6

_LEADING_INT = re.compile(r"\s*[+-]?\d+")
_BANNER = "*" * 42
_INVALID_INPUT = "\n*** Invalid input ***\n"


def _leading_int(text: str) -> int:
    """Read the whole number at the start of ``text``, ignoring what follows."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group())


def _parse_tile(code: str) -> Optional[Tile]:
    """The tile named by a two-character code, or None if the code names none."""
    try:
        return Tile(to_colour(code[:1]), to_shape(code[1:2]))
    except ValueError:
        return None


class Game:
    """A game in progress, read from ``prompt`` and reported to ``output``."""

    def __init__(
        self,
        state: GameState,
        prompt: Prompt,
        output: TextIO,
        first_turn: bool = True,
    ) -> None:
        self.state = state
        self.prompt = prompt
        self.output = output
        self.first_turn = first_turn

    @property
    def current(self) -> Player:
        return self.state.players.current()

    def _say(self, text: str = "") -> None:
        self.output.write(text + "\n")

    def _complain(self, error: Exception) -> None:
        self._say(f"\n*** {error} ***\n")

    def play(self) -> None:
        """Take turns until a player empties their hand or quits."""
        players = self.state.players
        player = players.current()
        while True:
            self._say(f"\n{_BANNER}\n{player.name}, it's your turn{self.status()}")
            end = self.ai_turn() if player.is_ai else self.human_turn()
            self.output.write("Press <Enter> to continue...")
            self.prompt()
            if end:
                return
            player = players.next_player()

    def human_turn(self) -> bool:
        """Read commands until the turn is over. True if the game has ended."""
        while True:
            self._say(
                f"{self.current.name} - What would you like to do?\n"
                "\tplace <tile> at <location>\n"
                "\treplace <tile>\n"
                "\thint <tile>\n"
                "\tsave <filename>\n"
                "\tquit"
            )
            text = self.prompt()
            command, space, _ = text.partition(" ")
            if not space:
                if text == "quit":
                    self._say("\nQuiting game")
                    return True
                self._say(_INVALID_INPUT)
                continue

            pos = len(command)
            length = len(text)
            try:
                if command == "place" and length >= 14:
                    tile = text[pos + 1:pos + 3]
                    location = text[pos + 7:]
                    self._say(f"Tile: {tile}  Place: {location}")
                    self.place_tile(location, tile)
                    break
                if command == "replace" and length == 10:
                    tile = text[pos + 1:pos + 3]
                    self._say(f"Replace:{tile}")
                    self.replace_tile(tile)
                    break
                if command == "hint" and length == 7:
                    self._say(f"\n{self.hint(text[pos + 1:pos + 3])}\n")
                elif command == "save" and length >= 7:
                    filename = text[pos + 1:]
                    self._say(f"Saving game to: {filename}")
                    try:
                        self.state.save(filename)
                    except GameFileError:
                        self._say("Error: File Not Found.")
                    else:
                        self._say(f"\nGame saved successfully to {filename}\n")
                else:
                    self._say(_INVALID_INPUT)
            except ValueError as error:
                self._complain(error)

        return self._finish_turn()

    def ai_turn(self) -> bool:
        """Let the computer player take its turn. True if the game has ended."""
        player = self.current
        if not isinstance(player, AIPlayer):
            raise TypeError(f"{player.name} is not a computer player")
        command = player.choose_command(self.state.board, len(self.state.bag) == 0)
        self.output.write(f"{player.name} will ")
        try:
            if command.startswith(PLACE_CMD):
                tile = command[1:3]
                location = command[3:]
                self._say(f"place a tile\nTile: {tile}  Place: {location}")
                self.place_tile(location, tile)
            elif command.startswith(REPLACE_CMD):
                tile = command[1:]
                self._say(f"replace: {tile}")
                self.replace_tile(tile)
        except ValueError as error:
            self._complain(error)
        return self._finish_turn()

    def _finish_turn(self) -> bool:
        end = self.check_end_game()
        if end:
            self._say(self.end_game_summary())
        return end

    def place_tile(self, location: str, tile: str) -> int:
        """Put a tile from the current hand on the board and return its points.

        Raises ValueError for a tile not in the hand or an unreadable location,
        and InvalidPlacement when the rules forbid the placement.
        """
        held = _parse_tile(tile)
        hand = self.current.hand
        if held is None or held not in hand:
            raise ValueError("Invalid tile")
        x = row_index(location[:1])
        try:
            y = _leading_int(location[1:]) - 1
        except ValueError:
            raise ValueError("Invalid location") from None

        board = self.state.board
        board.validate_set_tile(x, y, held, self.first_turn)
        self.first_turn = False
        lines = (board.tiles_on_row(x, y), board.tiles_on_col(x, y))
        points = board.set_tile(x, y, held)
        if any(line and len(line) + 1 >= QWIRKLE_LENGTH for line in lines):
            self._say("\n*** QWIRKLE!!! ***")
        self.current.add_score(points)
        self._say(f"Score for this placement: {points}")

        hand.remove(held)
        drawn = self.state.bag.draw()
        if drawn is not None:
            hand.add(drawn)
        return points

    def replace_tile(self, tile: str) -> Tile:
        """Swap a tile from the current hand with one from the bag; return the new tile."""
        held = _parse_tile(tile)
        bag = self.state.bag
        hand = self.current.hand
        if len(bag) == 0:
            raise ValueError("The tile bag is empty")
        if held is None or held not in hand:
            raise ValueError("No such tile in your hand")
        hand.remove(held)
        drawn = bag.replace(held)
        hand.add(drawn)
        return drawn

    def hint(self, tile: str) -> str:
        """Describe the best scoring place for a tile in the current hand."""
        held = _parse_tile(tile)
        if held is None or held not in self.current.hand:
            raise ValueError("No such tile in your hand")
        board = self.state.board
        top_score = 0
        location = ""
        for x in range(board.height):
            for y in range(board.width):
                if board.validate_adjacent(x, y) and board.validate_valid_placement(x, y, held):
                    points = board.score(x, y, held)
                    if points > top_score:
                        top_score = points
                        location = f"{chr(ord('A') + x)}{y + 1}"
        if top_score > 0:
            return f"Hint: place {held} at {location} to score {top_score}"
        return f"Hint: cannot place {held} at the moment"

    def check_end_game(self) -> bool:
        """True, with the end bonus awarded, once the current hand is empty."""
        if len(self.current.hand) > 0:
            return False
        self.current.add_score(END_GAME_BONUS)
        return True

    def status(self) -> str:
        """Scores, bag size, board and the current player's hand."""
        parts = [f"\nScore for {player.name}: {player.score}" for player in self.state.players]
        parts.append(f"\nTiles left in Tile Bag: {len(self.state.bag)}\n")
        parts.append(f"\n{self.state.board.render()}\n")
        player = self.current
        if player.is_ai:
            parts.append(f"Tiles in hand: {len(player.hand)}\n")
        else:
            parts.append(f"Your hand is:\n{player.hand}\n")
        return "".join(parts)

    def end_game_summary(self) -> str:
        """Final scores and the winner, or a tie."""
        top_score = 0
        winner = ""
        tied = False
        parts = ["\n\tGAME OVER"]
        for player in self.state.players:
            if player.score > top_score:
                top_score = player.score
                winner = player.name
                tied = False
            elif player.score == top_score:
                tied = True
            parts.append(f"\nScore for {player.name}: {player.score}")
        if tied:
            parts.append("\nThe game is a tie!\n")
        else:
            parts.append(f"\nPlayer {winner} has won!\n")
        return "".join(parts)


def ask_player_count(prompt: Prompt, output: TextIO) -> int:
    """Ask until a player count between 2 and 4 is given."""
    output.write(f"\nHow many players are there? ({MIN_PLAYERS} - {MAX_PLAYERS})\n")
    while True:
        try:
            count = _leading_int(prompt())
        except ValueError:
            output.write("Invalid input\n")
            continue
        if MIN_PLAYERS <= count <= MAX_PLAYERS:
            return count
        output.write("Invalid input\n")


def ask_player_name(prompt: Prompt, output: TextIO) -> str:
    """Ask until a name made only of upper case letters is given."""
    while True:
        name = prompt()
        if all(char in string.ascii_uppercase for char in name):
            return name
        output.write("Invalid name format\n")


def create_new_game(prompt: Prompt, output: TextIO, rng=None) -> Game:
    """Set up a game for 2 to 4 people, play it, and return it."""
    output.write("\nStarting a new multi-player game.\n")
    output.write("Randomising Tile Bag...\n")
    bag = TileBag().fill(rng)
    count = ask_player_count(prompt, output)

    players = Players()
    for number in range(1, count + 1):
        output.write(f"\nEnter a name for Player {number} (Uppercase characters only)\n")
        name = ask_player_name(prompt, output)
        output.write("Assigning player hand...\n")
        players.add(Player(name, Hand.deal(bag)))

    names = ", ".join(player.name for player in players)
    output.write(f"\nWelcome, {names}\n\tLets Play!\n")

    game = Game(GameState(players, GameBoard(), bag), prompt, output)
    game.play()
    return game


def create_ai_game(prompt: Prompt, output: TextIO, rng=None) -> Game:
    """Set up a game of one person against the computer, play it, and return it."""
    output.write("\nStarting a new single-player game.\n")
    output.write("\nEnter your player name (Uppercase characters only)\n")
    name = ask_player_name(prompt, output)
    output.write(f"\nWelcome, {name}\n\tLets Play!\n")

    output.write("Randomising Tile Bag...\n")
    bag = TileBag().fill(rng)
    players = Players()
    output.write("Assigning player hand...\n")
    players.add(Player(name, Hand.deal(bag)))
    output.write("Assigning player hand...\n")
    players.add(AIPlayer(hand=Hand.deal(bag)))

    game = Game(GameState(players, GameBoard(), bag), prompt, output)
    game.play()
    return game


def load_game(prompt: Prompt, output: TextIO) -> Optional[Game]:
    """Ask for a saved game file, play it, and return it; None if it cannot be read."""
    output.write("\nLoad a saved game\n")
    output.write("\nEnter the filename from which to load a save game\n")
    filename = prompt()
    output.write(f"\nLoading game from : {filename}\n")
    try:
        state = GameState.load(filename)
    except GameFileError as error:
        output.write(f"Error: {error}\n")
        return None
    output.write("Game loaded successfully\n")
    game = Game(state, prompt, output)
    game.play()
    return game