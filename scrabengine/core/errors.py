"""Chyby hernej logiky.

Každá chyba sa vyvolá ešte pred akoukoľvek zmenou stavu hry, takže
neúspešná akcia nechá partiu presne v pôvodnom stave.
"""
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .phase import GamePhase
    from .tiles import Tile
    from .types import PlayedWord


class _Reason(Enum):
    """Spoločný predok pre dôvody chýb s textovým menom."""

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


class InvalidPlacementReason(_Reason):
    UNKNOWN = auto()
    NO_TILES_PLACED = auto()
    PLACEMENT_NOT_LINEAR = auto()
    PLACEMENT_OUT_OF_BOUNDS = auto()
    POSITION_OCCUPIED = auto()
    PLACEMENT_NOT_CONTIGUOUS = auto()
    PLACEMENT_OVERLAP = auto()
    PLACEMENT_NOT_CONNECTED = auto()


class InvalidTileExchangeReason(_Reason):
    UNKNOWN = auto()
    NO_TILES_EXCHANGED = auto()
    INSUFFICIENT_TILES_IN_BAG = auto()


class InvalidChallengeReason(_Reason):
    UNKNOWN = auto()
    NO_PLAY_TO_CHALLENGE = auto()
    PLAY_ALREADY_CHALLENGED = auto()
    INVALID_CHALLENGER = auto()


class GameError(Exception):
    """Základ všetkých chýb, ktoré hra hlási volajúcemu."""


class OutOfPhaseError(GameError):
    def __init__(self, required: GamePhase, actual: GamePhase) -> None:
        super().__init__(f"Akcia vyžaduje fázu {required.label}, hra je vo fáze {actual.label}")
        self.required = required
        self.actual = actual


class NotEnoughPlayersError(GameError):
    def __init__(self, required: int, actual: int) -> None:
        super().__init__(f"Treba aspoň {required} hráčov, je ich {actual}")
        self.required = required
        self.actual = actual


class InsufficientTilesError(GameError):
    """Rack neobsahuje dlaždice potrebné na ťah alebo výmenu."""

    def __init__(self, missing: Sequence[Tile]) -> None:
        super().__init__("Chýbajúce dlaždice: " + ", ".join(str(t) for t in missing))
        self.missing = list(missing)


class InvalidPlacementError(GameError):
    def __init__(self, reason: InvalidPlacementReason) -> None:
        super().__init__(f"Neplatné položenie: {reason.label}")
        self.reason = reason


class InvalidWordError(GameError):
    """Slovník odmietol jedno alebo viac vytvorených slov."""

    def __init__(self, words: Sequence[PlayedWord]) -> None:
        super().__init__("Neplatné slová: " + ", ".join(w.word for w in words))
        self.words = list(words)


class InvalidTileExchangeError(GameError):
    def __init__(self, reason: InvalidTileExchangeReason) -> None:
        super().__init__(f"Neplatná výmena: {reason.label}")
        self.reason = reason


class InvalidChallengeError(GameError):
    def __init__(self, reason: InvalidChallengeReason) -> None:
        super().__init__(f"Neplatná námietka: {reason.label}")
        self.reason = reason
