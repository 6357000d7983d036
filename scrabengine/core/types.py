from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .coords import Coord, CoordRange
from .tiles import Tile

# Pozn.: Typy zdieľané validátorom, skórovaním a históriou.


@dataclass(frozen=True)
class Placement:
    """Jedna dlaždica položená v tomto ťahu na súradnicu."""

    tile: Tile
    coord: Coord

    @classmethod
    def at(cls, row: int, col: int, letter: str, points: int) -> Placement:
        return cls(Tile(letter, points), Coord(row, col))


@dataclass(frozen=True)
class PlayedWord:
    """Slovo vytvorené ťahom: text, skóre a rozsah buniek na doske."""

    word: str
    score: int
    span: CoordRange


def placement_bounds(placements: Iterable[Placement]) -> CoordRange:
    """Najmenší rozsah pokrývajúci všetky súradnice ťahu."""
    bounds = CoordRange.empty()
    for p in placements:
        bounds = bounds.include(p.coord)
    return bounds


def find_placement(placements: Sequence[Placement], coord: Coord) -> Placement | None:
    """Prvé placement na danej súradnici, alebo None."""
    for p in placements:
        if p.coord == coord:
            return p
    return None


def take_placement(placements: list[Placement], coord: Coord) -> Placement | None:
    """Odoberie a vráti placement na danej súradnici (mení zoznam)."""
    for i, p in enumerate(placements):
        if p.coord == coord:
            return placements.pop(i)
    return None


def placement_tiles(placements: Iterable[Placement]) -> list[Tile]:
    return [p.tile for p in placements]
