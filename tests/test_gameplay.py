import io
import random

import pytest

from qwirkle.ai import AIPlayer
from qwirkle.board import GameBoard, InvalidPlacement
from qwirkle.gameplay import (
    Game,
    ask_player_count,
    ask_player_name,
    create_ai_game,
    create_new_game,
    load_game,
)
from qwirkle.players import Player, Players
from qwirkle.state import GameState
from qwirkle.tilebag import Hand, TileBag
from qwirkle.tiles import Tile

NAMES = ["ANN", "BOB", "CAT", "DAN"]


def _script(*lines):
    feed = iter(lines)

    def prompt():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return prompt


def _make_game(hands, bag="", board_state="", current=0, first_turn=True,
               ai_last=False, script=()):
    players = Players()
    for i, text in enumerate(hands):
        hand = Hand.from_string(text)
        if ai_last and i == len(hands) - 1:
            players.add(AIPlayer(hand=hand))
        else:
            players.add(Player(NAMES[i], hand))
    players.current_index = current
    board = GameBoard()
    if board_state:
        board.set_state(board_state, 20, 20)
    output = io.StringIO()
    state = GameState(players, board, TileBag.from_string(bag))
    game = Game(state, _script(*script), output, first_turn=first_turn)
    return game, output


def test_place_tile_on_first_turn():
    game, _ = _make_game(["R1,B2", "G1"], bag="G3")
    points = game.place_tile("A1", "R1")
    assert points == 0
    assert game.state.board.get_tile(0, 0) == Tile("R", 1)
    assert str(game.current.hand) == "B2,G3"
    assert len(game.state.bag) == 0
    assert game.first_turn is False


def test_place_tile_next_to_another_scores_line():
    game, output = _make_game(["R2,B3"], bag="G4", board_state="R1@A1", first_turn=False)
    points = game.place_tile("A2", "R2")
    assert points == 2
    assert game.current.score == 2
    assert "Score for this placement: 2" in output.getvalue()


def test_place_tile_not_in_hand():
    game, _ = _make_game(["R1"])
    with pytest.raises(ValueError, match="Invalid tile"):
        game.place_tile("A1", "B6")


def test_place_tile_bad_location():
    game, _ = _make_game(["R1"])
    with pytest.raises(ValueError, match="Invalid location"):
        game.place_tile("Ax", "R1")


def test_place_tile_without_neighbours_after_first_turn():
    game, _ = _make_game(["R1"], first_turn=False)
    with pytest.raises(InvalidPlacement):
        game.place_tile("C3", "R1")
    assert str(game.current.hand) == "R1"


def test_replace_tile_swaps_with_bag():
    game, _ = _make_game(["R1,B2"], bag="G3,Y4")
    drawn = game.replace_tile("R1")
    assert drawn == Tile("G", 3)
    assert str(game.current.hand) == "B2,G3"
    assert str(game.state.bag) == "Y4,R1"


def test_replace_tile_with_empty_bag():
    game, _ = _make_game(["R1"])
    with pytest.raises(ValueError, match="empty"):
        game.replace_tile("R1")


def test_replace_tile_not_held():
    game, _ = _make_game(["R1"], bag="G3")
    with pytest.raises(ValueError, match="No such tile"):
        game.replace_tile("B2")


def test_hint_finds_best_location():
    game, _ = _make_game(["R2,B3"], board_state="R1@A1")
    assert game.hint("R2") == "Hint: place R2 at A2 to score 2"


def test_hint_on_empty_board():
    game, _ = _make_game(["R2"])
    assert game.hint("R2") == "Hint: cannot place R2 at the moment"


def test_hint_for_tile_not_held():
    game, _ = _make_game(["R2"])
    with pytest.raises(ValueError):
        game.hint("B1")


def test_check_end_game_awards_bonus():
    game, _ = _make_game([""])
    assert game.check_end_game() is True
    assert game.current.score == 6


def test_check_end_game_with_tiles_left():
    game, _ = _make_game(["R1"])
    assert game.check_end_game() is False
    assert game.current.score == 0


def test_end_game_summary_winner():
    game, _ = _make_game(["R1", "B1"])
    game.state.players[0].add_score(5)
    game.state.players[1].add_score(3)
    summary = game.end_game_summary()
    assert "Player ANN has won!" in summary
    assert "Score for BOB: 3" in summary


def test_end_game_summary_tie():
    game, _ = _make_game(["R1", "B1"])
    assert "The game is a tie!" in game.end_game_summary()


def test_status_shows_hand_and_bag():
    game, _ = _make_game(["R1,B2", "G1"], bag="Y1,Y2,Y3")
    status = game.status()
    assert "Tiles left in Tile Bag: 3" in status
    assert "Your hand is:\nR1,B2" in status
    assert "Score for BOB: 0" in status


def test_status_hides_ai_hand():
    game, _ = _make_game(["R1", "G1,G2"], current=1, ai_last=True)
    assert "Tiles in hand: 2" in game.status()


def test_human_turn_quit():
    game, output = _make_game(["R1"], script=("quit",))
    assert game.human_turn() is True
    assert "Quiting game" in output.getvalue()


def test_human_turn_invalid_then_quit():
    game, output = _make_game(["R1"], script=("foo", "place", "quit"))
    assert game.human_turn() is True
    assert output.getvalue().count("Invalid input") == 2


def test_human_turn_place():
    game, _ = _make_game(["R1,B2"], bag="G3", script=("place R1 at A1",))
    assert game.human_turn() is False
    assert game.state.board.get_tile(0, 0) == Tile("R", 1)
    assert str(game.current.hand) == "B2,G3"


def test_human_turn_rejected_placement_retries():
    game, output = _make_game(["R1"], first_turn=False, script=("place R1 at A1", "quit"))
    assert game.human_turn() is True
    assert "Unable to place a tile without any adjacent tiles" in output.getvalue()
    assert game.state.board.get_tile(0, 0).is_empty()


def test_human_turn_hint_then_quit():
    game, output = _make_game(["R2"], board_state="R1@A1", script=("hint R2", "quit"))
    game.human_turn()
    assert "Hint: place R2 at A2 to score 2" in output.getvalue()


def test_human_turn_save_round_trip(tmp_path):
    path = tmp_path / "game.txt"
    game, _ = _make_game(["R1,B2", "G1"], bag="Y1", script=(f"save {path}", "quit"))
    game.human_turn()
    loaded = GameState.load(path)
    assert [p.name for p in loaded.players] == ["ANN", "BOB"]
    assert str(loaded.players[0].hand) == "R1,B2"
    assert str(loaded.bag) == "Y1"


def test_ai_turn_places_tile():
    game, _ = _make_game(["B1", "R2,B3,G4,Y5,P6,O6"], bag="B1,B2",
                         board_state="R1@A1", current=1, ai_last=True)
    assert game.ai_turn() is False
    assert game.state.board.state().count("@") == 2
    assert game.current.score == 2
    assert len(game.current.hand) == 6
    assert len(game.state.bag) == 1


def test_ai_turn_replaces_on_empty_board():
    game, _ = _make_game(["B1", "R1,B3"], bag="G5", current=1, ai_last=True)
    assert game.ai_turn() is False
    assert str(game.current.hand) == "B3,G5"
    assert str(game.state.bag) == "R1"


def test_play_until_hand_empty():
    game, output = _make_game(["R1", "B1"], script=("place R1 at A1", ""))
    game.play()
    assert game.state.players[0].score == 6
    assert "Player ANN has won!" in output.getvalue()


def test_play_moves_to_next_player():
    game, output = _make_game(["R1,R2", "B1"], script=("place R1 at A1", "", "quit", ""))
    game.play()
    assert game.state.players.current_index == 1
    assert "BOB, it's your turn" in output.getvalue()


def test_ask_player_count_retries():
    output = io.StringIO()
    assert ask_player_count(_script("1", "x", "3"), output) == 3
    assert output.getvalue().count("Invalid input") == 2


def test_ask_player_name_requires_upper_case():
    output = io.StringIO()
    assert ask_player_name(_script("bob", "BOB"), output) == "BOB"
    assert "Invalid name format" in output.getvalue()


def test_create_new_game_deals_hands():
    output = io.StringIO()
    game = create_new_game(_script("2", "ANN", "BOB", "quit", ""), output, random.Random(1))
    players = game.state.players
    assert [p.name for p in players] == ["ANN", "BOB"]
    assert all(len(p.hand) == 6 for p in players)
    assert len(game.state.bag) == 72 - 12
    assert "Welcome, ANN, BOB" in output.getvalue()


def test_create_ai_game_adds_computer_player():
    output = io.StringIO()
    game = create_ai_game(_script("ANN", "quit", ""), output, random.Random(2))
    players = game.state.players
    assert players[0].name == "ANN"
    assert players[1].is_ai is True
    assert len(game.state.bag) == 72 - 12


def test_load_game_missing_file(tmp_path):
    output = io.StringIO()
    result = load_game(_script(str(tmp_path / "missing.txt")), output)
    assert result is None
    assert "Error: File Not Found." in output.getvalue()


def test_load_game_plays_saved_game(tmp_path):
    path = tmp_path / "saved.txt"
    players = Players([Player("ANN", Hand.from_string("R1")), Player("BOB", Hand.from_string("B1"))])
    GameState(players, GameBoard(), TileBag()).save(path)
    output = io.StringIO()
    game = load_game(_script(str(path), "quit", ""), output)
    assert game.state.players[1].name == "BOB"
    assert "Game loaded successfully" in output.getvalue()