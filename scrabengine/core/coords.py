"""Súradnice na doske a obdĺžnikové rozsahy súradníc.

Riadky aj stĺpce sa indexujú od nuly, počiatok je v ľavom hornom rohu.
"""
from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coord:
    """Jedna pozícia (row, col) na doske."""

    row: int
    col: int

    def north(self) -> Coord:
        return Coord(self.row - 1, self.col)

    def south(self) -> Coord:
        return Coord(self.row + 1, self.col)

    def east(self) -> Coord:
        return Coord(self.row, self.col + 1)

    def west(self) -> Coord:
        return Coord(self.row, self.col - 1)

    def min(self, other: Coord) -> Coord:
        """Po zložkách menšia súradnica."""
        return Coord(min(self.row, other.row), min(self.col, other.col))

    def max(self, other: Coord) -> Coord:
        """Po zložkách väčšia súradnica."""
        return Coord(max(self.row, other.row), max(self.col, other.col))

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class CoordRange:
    """Ohraničený obdĺžnik súradníc `min`..`max` (vrátane oboch koncov)."""

    min: Coord
    max: Coord

    @classmethod
    def empty(cls) -> CoordRange:
        """Prázdny rozsah; prvé `include()` ho zúži na jednu bunku."""
        return cls(Coord(sys.maxsize, sys.maxsize), Coord(-sys.maxsize, -sys.maxsize))

    @classmethod
    def of(cls, coord: Coord) -> CoordRange:
        return cls(coord, coord)

    def include(self, coord: Coord) -> CoordRange:
        """Vráti nový rozsah rozšírený tak, aby obsahoval `coord`."""
        return CoordRange(self.min.min(coord), self.max.max(coord))

    def includes(self, coord: Coord) -> bool:
        return (
            self.min.row <= coord.row <= self.max.row
            and self.min.col <= coord.col <= self.max.col
        )

    def is_linear(self) -> bool:
        """Či rozsah tvorí priamku (jeden riadok alebo jeden stĺpec)."""
        return self.min.row == self.max.row or self.min.col == self.max.col

    def is_single(self) -> bool:
        return self.min == self.max

    def __iter__(self) -> Iterator[Coord]:
        # po riadkoch, zľava doprava
        for row in range(self.min.row, self.max.row + 1):
            for col in range(self.min.col, self.max.col + 1):
                yield Coord(row, col)

    def __len__(self) -> int:
        rows = self.max.row - self.min.row + 1
        cols = self.max.col - self.min.col + 1
        if rows <= 0 or cols <= 0:
            return 0
        return rows * cols
