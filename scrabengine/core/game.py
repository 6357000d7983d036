from __future__ import annotations

import logging
import random
import uuid
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from itertools import count

from ..logging_setup import TRACE_ID_VAR
from .board import Board
from .errors import (
    GameError,
    InvalidChallengeError,
    InvalidChallengeReason,
    InvalidTileExchangeError,
    InvalidTileExchangeReason,
    NotEnoughPlayersError,
    OutOfPhaseError,
)
from .history import EntryType, History
from .phase import GamePhase
from .rack import fill_rack, remove_tiles
from .ruleset import Rules
from .tiles import MAX_RACK_TILES, Tile, TileBag, tile_points
from .types import Placement, PlayedWord, placement_tiles

log = logging.getLogger("scrabengine")

MIN_PLAYERS = 1
CHALLENGE_FAIL_PENALTY_POINTS = 5


@dataclass
class Seat:
    """Miesto pri stole: skóre a rack hráča."""

    score: int = 0
    rack: list[Tile] = field(default_factory=list)

    def rack_points(self) -> int:
        """Súčet bodov dlaždíc, ktoré ostali na racku."""
        return tile_points(self.rack)


class Game:
    """Stav jednej partie a prechody medzi jej fázami.

    Nová hra je vo fáze Setup bez hráčov. Každá akcia buď prebehne celá,
    alebo vyvolá `GameError` a stav ostane nezmenený. Hra nie je
    vláknovo bezpečná; volajúci serializuje prístup k jednej inštancii.
    """

    def __init__(
        self,
        bag: TileBag | None = None,
        board: Board | None = None,
        rules: Rules | None = None,
    ) -> None:
        self.phase = GamePhase.SETUP
        self.seats: list[Seat] = []
        self.bag = bag if bag is not None else TileBag.standard_english()
        self.board = board if board is not None else Board.standard()
        self.current_seat_index = 0
        self.rules = rules if rules is not None else Rules()
        self.history = History()
        self.game_id = uuid.uuid4().hex[:8]
        self._call_counter = count(1)

    @classmethod
    def with_defaults(cls, rules: Rules | None = None) -> Game:
        """Hra so štandardnou anglickou taškou a doskou 15x15."""
        return cls(TileBag.standard_english(), Board.standard(), rules)

    # --- Setup ------------------------------------------------------------

    def add_player(self) -> Seat:
        """Pridá miesto pre nového hráča (len vo fáze Setup)."""
        with self._trace_scope("add_player"):
            self._require_phase(GamePhase.SETUP)
            seat = Seat()
            self.seats.append(seat)
            log.debug("player_added seats=%s", len(self.seats))
            return seat

    def remove_player(self, seat_index: int) -> None:
        """Odoberie miesto; neexistujúci index nemá žiadny efekt."""
        with self._trace_scope("remove_player"):
            self._require_phase(GamePhase.SETUP)
            if 0 <= seat_index < len(self.seats):
                del self.seats[seat_index]
                log.debug("player_removed index=%s seats=%s", seat_index, len(self.seats))

    def start(self, rng: random.Random) -> None:
        """Začne partiu: náhodný prvý hráč, zamiešanie tašky, naplnenie rackov.

        Generátor `rng` určuje poradie aj zamiešanie; hra si vlastný
        generátor nikdy nevytvára.
        """
        with self._trace_scope("start"):
            self._require_phase(GamePhase.SETUP)
            if len(self.seats) < MIN_PLAYERS:
                raise NotEnoughPlayersError(MIN_PLAYERS, len(self.seats))

            self.current_seat_index = rng.randrange(len(self.seats))
            self.bag.shuffle(rng)
            for seat in self.seats:
                fill_rack(seat.rack, self.bag)

            self.phase = GamePhase.MAIN
            log.info(
                "game_started seats=%s first=%s bag=%s",
                len(self.seats),
                self.current_seat_index,
                self.bag.remaining(),
            )

    # --- Main -------------------------------------------------------------

    def current_seat(self) -> Seat:
        return self.seats[self.current_seat_index]

    def play(self, placements: Sequence[Placement]) -> list[PlayedWord]:
        """Položí dlaždice z racku aktuálneho hráča a vráti vytvorené slová.

        Žolíka hráč položí ako dlaždicu s nula bodmi a želaným písmenom
        (`Tile.as_letter`); z racku sa odpočíta žolík.

        Chyby: `OutOfPhaseError`, `InsufficientTilesError`,
        `InvalidPlacementError`, `InvalidWordError`.
        """
        with self._trace_scope("play"):
            self._require_phase(GamePhase.MAIN)
            placements = list(placements)
            seat = self.current_seat()

            used, remaining = self.rules.validate_tiles_from_rack(
                seat.rack, placement_tiles(placements)
            )
            self.rules.validate_placements(placements, self.board)
            score, words = self.rules.score_words(placements, self.board)

            seat.rack[:] = remaining
            self.board.place_tiles(placements)
            log.info(
                "play_accepted seat=%s score=%s words=%s",
                self.current_seat_index,
                score,
                ",".join(w.word for w in words),
            )
            self._end_turn(score, used, placements, words)
            return words

    def pass_turn(self) -> None:
        """Hráč vynechá ťah."""
        with self._trace_scope("pass"):
            self._require_phase(GamePhase.MAIN)
            log.info("pass seat=%s", self.current_seat_index)
            self._end_turn(0, [], [], [])

    def exchange_tiles(self, tiles: Sequence[Tile], rng: random.Random) -> None:
        """Vymení dlaždice z racku za rovnaký počet z tašky a ukončí ťah.

        Výmena nie je povolená, ak je v taške menej než MAX_RACK_TILES dlaždíc.
        Vrátené dlaždice sa zamiešajú do tašky generátorom `rng`.
        """
        with self._trace_scope("exchange"):
            self._require_phase(GamePhase.MAIN)
            if not tiles:
                raise InvalidTileExchangeError(InvalidTileExchangeReason.NO_TILES_EXCHANGED)
            if self.bag.remaining() < MAX_RACK_TILES:
                raise InvalidTileExchangeError(InvalidTileExchangeReason.INSUFFICIENT_TILES_IN_BAG)

            seat = self.current_seat()
            used, remaining = self.rules.validate_tiles_from_rack(seat.rack, list(tiles))

            seat.rack[:] = remaining
            drawn: list[Tile] = []
            for _ in used:
                t = self.bag.draw_tile()
                if t is not None:
                    drawn.append(t)
            seat.rack.extend(drawn)
            self.bag.put_back(used)
            self.bag.shuffle(rng)

            log.info("exchange seat=%s tiles=%s", self.current_seat_index, len(used))
            self._end_turn(0, used, [], [], drawn)

    def challenge(self, challenger_seat_index: int, rng: random.Random) -> bool:
        """Námietka voči poslednému ťahu; vráti True, ak uspela.

        Pri úspechu sa ťah vezme späť: z dosky zmiznú jeho dlaždice,
        napadnutý hráč vráti potiahnuté dlaždice do tašky, dostane späť
        položené dlaždice a stratí body za ťah. Partia pokračuje vo fáze Main.
        Pri neúspechu stratí namietajúci CHALLENGE_FAIL_PENALTY_POINTS.
        """
        with self._trace_scope("challenge"):
            last_play = self.history.last()
            success = self.rules.validate_challenge(last_play)
            if not 0 <= challenger_seat_index < len(self.seats):
                raise InvalidChallengeError(InvalidChallengeReason.INVALID_CHALLENGER)
            assert last_play is not None

            if success:
                challenged = self._prev_seat()
                remove_tiles(challenged.rack, last_play.tiles_drawn)
                challenged.rack.extend(last_play.tiles_spent)
                challenged.score -= last_play.score

                self.board.clear_tiles([p.coord for p in last_play.tiles_played])

                self.bag.put_back(last_play.tiles_drawn)
                self.bag.shuffle(rng)

                self.history.append_challenge_success(challenger_seat_index)
                self.phase = GamePhase.MAIN
                log.info(
                    "challenge_success challenger=%s withdrawn_score=%s",
                    challenger_seat_index,
                    last_play.score,
                )
            else:
                self.seats[challenger_seat_index].score -= CHALLENGE_FAIL_PENALTY_POINTS
                self.history.append_challenge_fail(challenger_seat_index)
                log.info(
                    "challenge_fail challenger=%s penalty=%s",
                    challenger_seat_index,
                    CHALLENGE_FAIL_PENALTY_POINTS,
                )
            return success

    # --- Interné helpery --------------------------------------------------

    def _end_turn(
        self,
        score: int,
        tiles_spent: Sequence[Tile],
        tiles_played: Sequence[Placement],
        words_formed: Sequence[PlayedWord],
        exchanged_for: Sequence[Tile] = (),
    ) -> None:
        seat = self.current_seat()
        seat.score += score
        tiles_drawn = [*exchanged_for, *fill_rack(seat.rack, self.bag)]

        if tiles_played:
            self.history.append_play(
                self.current_seat_index, score, tiles_spent, tiles_played, tiles_drawn, words_formed
            )
        elif tiles_spent:
            self.history.append_exchange(self.current_seat_index, tiles_spent, tiles_drawn)
        else:
            self.history.append_pass(self.current_seat_index)

        self.current_seat_index = self._next_seat_index()
        self.phase = self.rules.next_phase(self)

        if self.phase is GamePhase.END:
            self._score_end_game()

    def _score_end_game(self) -> None:
        last = self.history.last()
        assert last is not None
        adjustments = self.rules.score_end_game(last, self.seats)
        for i, points in enumerate(adjustments):
            self.seats[i].score += points
            # bonus za dohranie sa zapíše aj k ťahu, ktorý partiu ukončil
            if i == last.seat_index and last.type is EntryType.PLAY and points:
                self.history.award_end_game_points(points)
        log.info(
            "game_ended scores=%s adjustments=%s",
            [s.score for s in self.seats],
            adjustments,
        )

    def _next_seat_index(self) -> int:
        return (self.current_seat_index + 1) % len(self.seats)

    def _prev_seat_index(self) -> int:
        return (self.current_seat_index + len(self.seats) - 1) % len(self.seats)

    def _prev_seat(self) -> Seat:
        return self.seats[self._prev_seat_index()]

    def _require_phase(self, phase: GamePhase) -> None:
        if self.phase is not phase:
            raise OutOfPhaseError(phase, self.phase)

    @contextmanager
    def _trace_scope(self, action: str) -> Iterator[str]:
        call_id = f"{self.game_id}-{action}-{next(self._call_counter)}"
        token = TRACE_ID_VAR.set(call_id)
        try:
            yield call_id
        except GameError as exc:
            log.info("action_rejected action=%s error=%s", action, exc)
            raise
        finally:
            TRACE_ID_VAR.reset(token)
