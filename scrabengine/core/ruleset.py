"""Nemenné pravidlá hry so zameniteľnými stratégiami.

Každá stratégia je voliteľná; ak chýba, použije sa predvolená
implementácia. Metódy `with_*` vracajú upravenú kópiu.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .. import config
from .board import Board
from .challenge import ChallengeValidator, validate_challenge
from .dictionary import Dictionary, accept_all, default_dictionary
from .history import HistoryEntry
from .phase import GamePhase, PhaseController, next_phase
from .rack import RackValidator, validate_tiles_from_rack
from .rules import PlacementValidator, validate_placements
from .scoring import EndGameScorer, WordScorer, score_end_game, score_words
from .tiles import Tile
from .types import Placement, PlayedWord

if TYPE_CHECKING:
    from .game import Game, Seat


@dataclass(frozen=True)
class Rules:
    dictionary: Dictionary | None = None
    # False = slová sa pri ťahu neoverujú, rozhodne až námietka
    dictionary_for_scoring: bool = True
    placement_validator: PlacementValidator | None = None
    rack_validator: RackValidator | None = None
    word_scorer: WordScorer | None = None
    end_game_scorer: EndGameScorer | None = None
    phase_controller: PhaseController | None = None
    challenge_validator: ChallengeValidator | None = None

    @classmethod
    def from_env(cls) -> Rules:
        """Pravidlá podľa premenných prostredia (.env)."""
        return cls(dictionary_for_scoring=config.dictionary_for_scoring())

    # --- Rozhodovanie -----------------------------------------------------

    def resolve_dictionary(self) -> Dictionary:
        return self.dictionary if self.dictionary is not None else default_dictionary()

    def validate_placements(self, placements: Sequence[Placement], board: Board) -> None:
        validator = self.placement_validator or validate_placements
        validator(placements, board)

    def validate_tiles_from_rack(
        self,
        rack: Sequence[Tile],
        tiles: Sequence[Tile],
    ) -> tuple[list[Tile], list[Tile]]:
        validator = self.rack_validator or validate_tiles_from_rack
        return validator(rack, tiles)

    def score_words(
        self,
        placements: Sequence[Placement],
        board: Board,
    ) -> tuple[int, list[PlayedWord]]:
        dictionary = self.resolve_dictionary() if self.dictionary_for_scoring else accept_all
        scorer = self.word_scorer or score_words
        return scorer(placements, board, dictionary)

    def score_end_game(self, last_entry: HistoryEntry, seats: Sequence[Seat]) -> list[int]:
        scorer = self.end_game_scorer or score_end_game
        return scorer(last_entry, seats)

    def next_phase(self, game: Game) -> GamePhase:
        controller = self.phase_controller or next_phase
        return controller(game)

    def validate_challenge(self, last_play: HistoryEntry | None) -> bool:
        # námietka vždy overuje skutočným slovníkom
        validator = self.challenge_validator or validate_challenge
        return validator(last_play, self.resolve_dictionary())

    # --- Kópie s úpravou --------------------------------------------------

    def with_dictionary(self, dictionary: Dictionary) -> Rules:
        return replace(self, dictionary=dictionary)

    def with_dictionary_for_scoring(self, enabled: bool) -> Rules:
        return replace(self, dictionary_for_scoring=enabled)

    def with_placement_validator(self, validator: PlacementValidator) -> Rules:
        return replace(self, placement_validator=validator)

    def with_rack_validator(self, validator: RackValidator) -> Rules:
        return replace(self, rack_validator=validator)

    def with_word_scorer(self, scorer: WordScorer) -> Rules:
        return replace(self, word_scorer=scorer)

    def with_end_game_scorer(self, scorer: EndGameScorer) -> Rules:
        return replace(self, end_game_scorer=scorer)

    def with_phase_controller(self, controller: PhaseController) -> Rules:
        return replace(self, phase_controller=controller)

    def with_challenge_validator(self, validator: ChallengeValidator) -> Rules:
        return replace(self, challenge_validator=validator)
