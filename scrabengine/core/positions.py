"""Typy políčok na doske (štart, prémie DL/TL/DW/TW)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Multipliers:
    """Násobiteľ písmena, násobiteľ slova a príznak spojenia."""

    letter: int = 1
    word: int = 1
    counts_as_connected: bool = False


class PositionType(Enum):
    """Uzavretá množina typov políčok.

    Hodnota každého člena je značka používaná v layoutoch (JSON / kód).
    """

    NORMAL = ""
    START = "ST"
    DL = "DL"  # Double Letter
    TL = "TL"  # Triple Letter
    DW = "DW"  # Double Word
    TW = "TW"  # Triple Word

    @classmethod
    def from_tag(cls, tag: str) -> PositionType:
        """Prevedie značku z layoutu na typ políčka ('.' a '' = NORMAL)."""
        norm = tag.strip().upper()
        if norm in ("", "."):
            return cls.NORMAL
        try:
            return cls(norm)
        except ValueError:
            raise ValueError(f"Neznámy typ políčka: {tag!r}") from None

    @property
    def multipliers(self) -> Multipliers:
        return _MULTIPLIERS[self]

    @property
    def counts_as_connected(self) -> bool:
        return self.multipliers.counts_as_connected

    def modify_tile_score(self, points: int) -> int:
        return points * self.multipliers.letter

    def modify_word_score(self, score: int) -> int:
        return score * self.multipliers.word


_MULTIPLIERS: dict[PositionType, Multipliers] = {
    PositionType.NORMAL: Multipliers(),
    PositionType.START: Multipliers(word=2, counts_as_connected=True),
    PositionType.DL: Multipliers(letter=2),
    PositionType.TL: Multipliers(letter=3),
    PositionType.DW: Multipliers(word=2),
    PositionType.TW: Multipliers(word=3),
}
