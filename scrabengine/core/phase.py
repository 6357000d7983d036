from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING

from .history import EntryType

if TYPE_CHECKING:
    from .game import Game

MAX_SCORELESS_TURNS = 6


class GamePhase(Enum):
    """Fáza partie."""

    SETUP = auto()
    MAIN = auto()
    END = auto()
    UNKNOWN = auto()

    @property
    def label(self) -> str:
        return self.name.capitalize()


PhaseController = Callable[["Game"], GamePhase]


def next_phase(game: Game) -> GamePhase:
    """Predvolené rozhodnutie o fáze po skončení ťahu.

    Partia končí, ak hráč, ktorý práve hral, ostal s prázdnym rackom
    (dohral), alebo po MAX_SCORELESS_TURNS ťahoch bez bodov za sebou.
    Úspešná námietka sa počíta ako jeden ťah bez bodov a preskočí sa
    pritom aj napadnutý ťah pred ňou.
    """
    last = game.history.last()
    if last is None:
        return GamePhase.MAIN

    if not game.seats[last.seat_index].rack:
        return GamePhase.END

    scoreless = 0
    i = len(game.history) - 1
    while i >= 0:
        entry = game.history[i]
        if entry.type is EntryType.CHALLENGE_SUCCESS:
            i -= 1
        elif entry.score > 0:
            break

        scoreless += 1
        if scoreless >= MAX_SCORELESS_TURNS:
            return GamePhase.END
        i -= 1

    return GamePhase.MAIN
