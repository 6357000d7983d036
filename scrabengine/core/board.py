from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .coords import Coord
from .positions import PositionType
from .tiles import Tile
from .types import Placement

BOARD_SIZE = 15

Layout = Sequence[Sequence[PositionType]]

# Štandardné rozloženie 15x15, stred (7,7) je štartové políčko
STANDARD_LAYOUT_TAGS: tuple[tuple[str, ...], ...] = tuple(
    tuple(row.split()) for row in (
        "TW .  .  DL .  .  .  TW .  .  .  DL .  .  TW",
        ".  DW .  .  .  TL .  .  .  TL .  .  .  DW .",
        ".  .  DW .  .  .  DL .  DL .  .  .  DW .  .",
        "DL .  .  DW .  .  .  DL .  .  .  DW .  .  DL",
        ".  .  .  .  DW .  .  .  .  .  DW .  .  .  .",
        ".  TL .  .  .  TL .  .  .  TL .  .  .  TL .",
        ".  .  DL .  .  .  DL .  DL .  .  .  DL .  .",
        "TW .  .  DL .  .  .  ST .  .  .  DL .  .  TW",
        ".  .  DL .  .  .  DL .  DL .  .  .  DL .  .",
        ".  TL .  .  .  TL .  .  .  TL .  .  .  TL .",
        ".  .  .  .  DW .  .  .  .  .  DW .  .  .  .",
        "DL .  .  DW .  .  .  DL .  .  .  DW .  .  DL",
        ".  .  DW .  .  .  DL .  DL .  .  .  DW .  .",
        ".  DW .  .  .  TL .  .  .  TL .  .  .  DW .",
        "TW .  .  DL .  .  .  TW .  .  .  DL .  .  TW",
    )
)


def layout_from_tags(tags: Sequence[Sequence[str]]) -> list[list[PositionType]]:
    """Prevedie riadky značiek ('TW', 'DL', '.', ...) na layout typov políčok."""
    return [[PositionType.from_tag(tag) for tag in row] for row in tags]


@dataclass
class Position:
    """Bunka na doske: typ políčka a prípadne položená dlaždica."""

    type: PositionType = PositionType.NORMAL
    tile: Tile | None = None


class Board:
    """Mriežka políčok; rozmer je po vytvorení pevný.

    Súradnice mimo dosky nevyvolávajú chybu – `position()` vráti None.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.cells: list[list[Position]] = [
            [Position() for _ in range(cols)] for _ in range(rows)
        ]

    @classmethod
    def from_layout(cls, layout: Layout) -> Board:
        """Prázdna doska podľa layoutu; kratšie riadky sa doplnia NORMAL políčkami."""
        rows = len(layout)
        cols = max((len(row) for row in layout), default=0)
        board = cls(rows, cols)
        for r, row in enumerate(layout):
            for c, ptype in enumerate(row):
                board.cells[r][c].type = ptype
        return board

    @classmethod
    def standard(cls) -> Board:
        return cls.from_layout(layout_from_tags(STANDARD_LAYOUT_TAGS))

    @classmethod
    def from_json(cls, path: str | Path) -> Board:
        """Načíta layout zo súboru: JSON pole riadkov so značkami políčok."""
        p = Path(path)
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_layout(layout_from_tags(data))

    def inside(self, coord: Coord) -> bool:
        return 0 <= coord.row < self.rows and 0 <= coord.col < self.cols

    def position(self, coord: Coord) -> Position | None:
        if not self.inside(coord):
            return None
        return self.cells[coord.row][coord.col]

    def neighbours(self, coord: Coord) -> tuple[Position | None, ...]:
        """Susedia v poradí sever, juh, východ, západ (None mimo dosky)."""
        return (
            self.position(coord.north()),
            self.position(coord.south()),
            self.position(coord.east()),
            self.position(coord.west()),
        )

    def neighbour_has_tile(self, coord: Coord) -> bool:
        return any(n is not None and n.tile is not None for n in self.neighbours(coord))

    def place_tiles(self, placements: Sequence[Placement]) -> None:
        """Položí dlaždice na dosku (bez validácie pravidiel)."""
        for p in placements:
            position = self.position(p.coord)
            if position is None:
                raise IndexError(f"Súradnica {p.coord} je mimo dosky")
            position.tile = p.tile

    def clear_tiles(self, coords: Sequence[Coord]) -> None:
        """Odstráni dlaždice z daných súradníc (použité pri úspešnej námietke)."""
        for c in coords:
            position = self.position(c)
            if position is not None:
                position.tile = None

    def occupied(self) -> dict[Coord, Tile]:
        """Mapa všetkých obsadených súradníc na ich dlaždice."""
        return {
            Coord(r, c): cell.tile
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell.tile is not None
        }

    def is_empty(self) -> bool:
        return not any(cell.tile for row in self.cells for cell in row)
