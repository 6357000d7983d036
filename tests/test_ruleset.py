import random

import pytest

from helpers import across, tiles

from scrabengine.core.errors import InvalidPlacementError, InvalidPlacementReason, InvalidWordError
from scrabengine.core.game import Game
from scrabengine.core.phase import GamePhase
from scrabengine.core.ruleset import Rules


def test_explicit_dictionary_wins(dictionary):
    assert Rules(dictionary=dictionary).resolve_dictionary() is dictionary


def test_with_methods_return_copies(dictionary):
    base = Rules()
    changed = base.with_dictionary(dictionary).with_dictionary_for_scoring(False)
    assert base.dictionary is None
    assert base.dictionary_for_scoring is True
    assert changed.dictionary is dictionary
    assert changed.dictionary_for_scoring is False


def test_scoring_without_dictionary_accepts_any_word(board, dictionary):
    strict = Rules(dictionary=dictionary)
    lenient = strict.with_dictionary_for_scoring(False)
    with pytest.raises(InvalidWordError):
        strict.score_words(across("DGO", 7, 5), board)
    score, words = lenient.score_words(across("DGO", 7, 5), board)
    assert score == 10
    assert [w.word for w in words] == ["DGO"]


def test_custom_word_scorer(board):
    calls = []

    def scorer(placements, board, is_word_valid):
        calls.append(len(placements))
        return 42, []

    rules = Rules().with_word_scorer(scorer)
    assert rules.score_words(across("DOG", 7, 5), board) == (42, [])
    assert calls == [3]


def test_custom_placement_validator(board):
    def reject_all(placements, board):
        raise InvalidPlacementError(InvalidPlacementReason.UNKNOWN)

    rules = Rules().with_placement_validator(reject_all)
    with pytest.raises(InvalidPlacementError) as excinfo:
        rules.validate_placements(across("DOG", 7, 5), board)
    assert excinfo.value.reason is InvalidPlacementReason.UNKNOWN


def test_custom_phase_controller_and_end_game_scorer(dictionary):
    rules = (
        Rules(dictionary=dictionary)
        .with_phase_controller(lambda game: GamePhase.END)
        .with_end_game_scorer(lambda last, seats: [100] * len(seats))
    )
    game = Game.with_defaults(rules)
    game.add_player()
    game.start(random.Random(0))
    game.pass_turn()
    assert game.phase is GamePhase.END
    assert game.seats[0].score == 100


def test_custom_rack_and_challenge_validators(dictionary):
    rules = (
        Rules(dictionary=dictionary)
        .with_rack_validator(lambda rack, wanted: (list(wanted), list(rack)))
        .with_challenge_validator(lambda last, is_word_valid: True)
    )
    used, remaining = rules.validate_tiles_from_rack([], tiles("DOG"))
    assert len(used) == 3 and remaining == []
    assert rules.validate_challenge(None) is True


def test_from_env(monkeypatch):
    monkeypatch.setenv("SCRABENGINE_DICTIONARY_FOR_SCORING", "0")
    assert Rules.from_env().dictionary_for_scoring is False
    monkeypatch.setenv("SCRABENGINE_DICTIONARY_FOR_SCORING", "maybe")
    assert Rules.from_env().dictionary_for_scoring is True
