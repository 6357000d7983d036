import random
from collections import Counter

import pytest

from helpers import across, game_snapshot, give_rack, tiles

from scrabengine.core.coords import Coord
from scrabengine.core.errors import (
    InsufficientTilesError,
    InvalidPlacementError,
    InvalidPlacementReason,
    InvalidTileExchangeError,
    InvalidTileExchangeReason,
    InvalidWordError,
    NotEnoughPlayersError,
    OutOfPhaseError,
)
from scrabengine.core.dictionary import WordList
from scrabengine.core.game import Game
from scrabengine.core.history import EntryType
from scrabengine.core.phase import GamePhase
from scrabengine.core.ruleset import Rules
from scrabengine.core.tiles import Tile, TileBag
from scrabengine.core.types import Placement


def _started(dictionary, players=2, seed=42) -> Game:
    game = Game.with_defaults(Rules(dictionary=dictionary))
    for _ in range(players):
        game.add_player()
    game.start(random.Random(seed))
    game.current_seat_index = 0
    return game


def _all_tiles(game: Game) -> Counter:
    found = list(game.bag)
    for seat in game.seats:
        found.extend(seat.rack)
    # žolík na doske nesie zvolené písmeno
    found.extend(Tile("?", 0) if t.is_wildcard else t for t in game.board.occupied().values())
    return Counter(found)


def test_new_game_is_in_setup():
    game = Game.with_defaults()
    assert game.phase is GamePhase.SETUP
    assert game.seats == []
    assert game.bag.remaining() == 100
    assert game.board.is_empty()


def test_start_requires_players(rng):
    game = Game.with_defaults()
    with pytest.raises(NotEnoughPlayersError):
        game.start(rng)
    assert game.phase is GamePhase.SETUP


def test_start_fills_racks(dictionary):
    game = _started(dictionary, players=3)
    assert game.phase is GamePhase.MAIN
    assert [len(s.rack) for s in game.seats] == [7, 7, 7]
    assert game.bag.remaining() == 100 - 21
    assert _all_tiles(game) == Counter(TileBag.standard_english().tiles)


def test_start_is_reproducible():
    a, b = Game.with_defaults(), Game.with_defaults()
    for g in (a, b):
        for _ in range(4):
            g.add_player()
        g.start(random.Random(3))
    assert a.current_seat_index == b.current_seat_index
    assert [s.rack for s in a.seats] == [s.rack for s in b.seats]


def test_setup_actions_are_rejected_after_start(dictionary):
    game = _started(dictionary)
    before = game_snapshot(game)
    with pytest.raises(OutOfPhaseError) as excinfo:
        game.add_player()
    assert excinfo.value.required is GamePhase.SETUP
    assert excinfo.value.actual is GamePhase.MAIN
    with pytest.raises(OutOfPhaseError):
        game.remove_player(0)
    assert game_snapshot(game) == before


def test_main_actions_are_rejected_in_setup(rng):
    game = Game.with_defaults()
    game.add_player()
    before = game_snapshot(game)
    with pytest.raises(OutOfPhaseError):
        game.play(across("DOG", 7, 5))
    with pytest.raises(OutOfPhaseError):
        game.pass_turn()
    with pytest.raises(OutOfPhaseError):
        game.exchange_tiles(tiles("A"), rng)
    assert game_snapshot(game) == before


def test_remove_player():
    game = Game.with_defaults()
    game.add_player()
    game.add_player()
    game.remove_player(5)
    assert len(game.seats) == 2
    game.remove_player(0)
    assert len(game.seats) == 1


def test_play_scores_and_advances(dictionary):
    game = _started(dictionary)
    give_rack(game, 0, "DOGSAXE")
    bag_before = game.bag.remaining()

    words = game.play(across("DOG", 7, 5))

    assert [(w.word, w.score) for w in words] == [("DOG", 10)]
    seat = game.seats[0]
    assert seat.score == 10
    assert len(seat.rack) == 7
    assert game.bag.remaining() == bag_before - 3
    assert game.board.position(Coord(7, 6)).tile == Tile("O", 1)
    assert game.current_seat_index == 1

    entry = game.history.last()
    assert entry.type is EntryType.PLAY
    assert entry.seat_index == 0
    assert entry.score == 10
    assert Counter(entry.tiles_spent) == Counter(tiles("DOG"))
    assert len(entry.tiles_drawn) == 3
    assert [w.word for w in entry.words_formed] == ["DOG"]


def test_second_play_hooks_existing_word(dictionary):
    game = _started(dictionary)
    give_rack(game, 0, "DOGEEEE")
    give_rack(game, 1, "ASEEEEE")
    game.play(across("DOG", 7, 5))
    words = game.play([Placement.at(6, 8, "A", 1), Placement.at(7, 8, "S", 1)])
    assert [w.word for w in words] == ["DOGS", "AS"]
    assert game.seats[1].score == 9


def test_failed_play_leaves_state_unchanged(dictionary):
    game = _started(dictionary)
    give_rack(game, 0, "QXJDOGA")
    before = game_snapshot(game)

    with pytest.raises(InvalidPlacementError) as excinfo:
        game.play(across("DOG", 0, 0))
    assert excinfo.value.reason is InvalidPlacementReason.PLACEMENT_NOT_CONNECTED
    assert game_snapshot(game) == before

    with pytest.raises(InvalidWordError) as excinfo:
        game.play(across("QXJ", 7, 6))
    assert [w.word for w in excinfo.value.words] == ["QXJ"]
    assert game_snapshot(game) == before


def test_play_with_tiles_not_on_rack(dictionary):
    game = _started(dictionary)
    give_rack(game, 0, "DOGSAXE")
    before = game_snapshot(game)
    with pytest.raises(InsufficientTilesError) as excinfo:
        game.play(across("CAT", 7, 6))
    assert Counter(excinfo.value.missing) == Counter(tiles("CT"))
    assert game_snapshot(game) == before


def test_play_with_wildcard(dictionary):
    game = _started(dictionary)
    give_rack(game, 0, "D?GSAXE")
    blank = Tile("?", 0)
    words = game.play([
        Placement.at(7, 5, "D", 2),
        Placement(blank.as_letter("O"), Coord(7, 6)),
        Placement.at(7, 7, "G", 2),
    ])
    assert words[0].score == 8
    assert blank in game.history.last().tiles_spent
    assert game.board.position(Coord(7, 6)).tile == Tile("O", 0)


def test_six_scoreless_turns_end_the_game(dictionary):
    game = _started(dictionary)
    for _ in range(5):
        game.pass_turn()
    assert game.phase is GamePhase.MAIN
    penalties = [-s.rack_points() for s in game.seats]

    game.pass_turn()

    assert game.phase is GamePhase.END
    assert [s.score for s in game.seats] == penalties
    # penalizácia sa do histórie nezapisuje
    assert game.history.last().score == 0
    with pytest.raises(OutOfPhaseError):
        game.pass_turn()


def test_exchange_validation(dictionary, rng):
    game = _started(dictionary)
    give_rack(game, 0, "DOGSAXE")
    before = game_snapshot(game)

    with pytest.raises(InvalidTileExchangeError) as excinfo:
        game.exchange_tiles([], rng)
    assert excinfo.value.reason is InvalidTileExchangeReason.NO_TILES_EXCHANGED

    with pytest.raises(InsufficientTilesError):
        game.exchange_tiles(tiles("Q"), rng)
    assert game_snapshot(game) == before

    game.bag.tiles = game.bag.tiles[:6]
    before = game_snapshot(game)
    with pytest.raises(InvalidTileExchangeError) as excinfo:
        game.exchange_tiles(tiles("D"), rng)
    assert excinfo.value.reason is InvalidTileExchangeReason.INSUFFICIENT_TILES_IN_BAG
    assert game_snapshot(game) == before


def test_exchange_swaps_tiles(dictionary, rng):
    game = _started(dictionary)
    give_rack(game, 0, "DOGSAXE")
    total = _all_tiles(game)
    bag_before = game.bag.remaining()

    game.exchange_tiles(tiles("XE"), rng)

    seat = game.seats[0]
    assert len(seat.rack) == 7
    assert game.bag.remaining() == bag_before
    assert _all_tiles(game) == total
    assert seat.score == 0
    assert game.current_seat_index == 1
    entry = game.history.last()
    assert entry.type is EntryType.EXCHANGE_TILES
    assert Counter(entry.tiles_spent) == Counter(tiles("XE"))
    assert len(entry.tiles_drawn) == 2


def test_playing_out_ends_game_with_bonus(dictionary):
    game = _started(dictionary)
    game.bag.tiles.clear()
    game.seats[0].rack[:] = tiles("DOG")
    game.seats[1].rack[:] = tiles("QZ")

    game.play(across("DOG", 7, 5))

    assert game.phase is GamePhase.END
    assert game.seats[0].score == 10 + 2 * 20
    assert game.seats[1].score == 0
    assert game.history.last().score == 50
    assert game.history.last().tiles_drawn == ()


def test_tiles_are_conserved_through_a_game(dictionary, rng):
    game = _started(dictionary, players=3)
    total = _all_tiles(game)
    give_rack(game, 0, "DOGSAXE")
    give_rack(game, 1, "ASEEEEE")
    game.play(across("DOG", 7, 5))
    assert game.challenge(1, rng) is False
    game.exchange_tiles(tiles("EE"), rng)
    game.pass_turn()
    assert _all_tiles(game) == total


def test_score_plus_tile_points_is_conserved(dictionary, rng):
    game = _started(dictionary)
    give_rack(game, 0, "DOGSAXE")

    def total_points():
        return sum(s.score for s in game.seats) + sum(s.rack_points() for s in game.seats) + game.bag.points()

    before = total_points()
    words = game.play(across("DOG", 7, 5))
    played = sum(t.points for t in game.history.last().tiles_spent)
    assert total_points() == before + words[0].score - played
    game.pass_turn()
    game.exchange_tiles(game.seats[0].rack[:2], rng)
    assert total_points() == before + words[0].score - played


def test_unassigned_wildcard_is_not_a_letter():
    game = _started(WordList(["DO"]))
    give_rack(game, 0, "DO?EEEE")
    before = game_snapshot(game)

    with pytest.raises(InvalidWordError) as excinfo:
        game.play(across("DO", 7, 5) + [Placement(Tile("?", 0), Coord(7, 7))])

    assert [w.word for w in excinfo.value.words] == ["DO?"]
    assert game_snapshot(game) == before
