from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

MAX_RACK_TILES = 7
WILDCARD_LETTER = "?"


@dataclass(frozen=True)
class Tile:
    """Dlaždica s písmenom a bodovou hodnotou.

    Dlaždica s nula bodmi je žolík (blank). Pri kladení sa jej písmeno
    nahradí zvoleným písmenom, body ostávajú nulové.
    """

    letter: str
    points: int

    @property
    def is_wildcard(self) -> bool:
        return self.points == 0

    def as_letter(self, letter: str) -> Tile:
        """Vráti žolíka s priradeným písmenom (pre položenie na dosku)."""
        if not self.is_wildcard:
            raise ValueError(f"Dlaždica {self} nie je žolík")
        return Tile(letter.upper(), 0)

    def __str__(self) -> str:
        return f"{self.letter}({self.points})"


@dataclass(frozen=True)
class TileFrequency:
    """Koľkokrát sa má daná dlaždica nachádzať v taške."""

    tile: Tile
    count: int


def _english(letters: Iterable[tuple[str, int, int]]) -> tuple[TileFrequency, ...]:
    return tuple(TileFrequency(Tile(letter, points), count) for letter, count, points in letters)


# (písmeno, počet, body) – štandardná anglická sada 100 dlaždíc
ENGLISH_DISTRIBUTION: tuple[TileFrequency, ...] = _english([
    (WILDCARD_LETTER, 2, 0),
    ("A", 9, 1), ("B", 2, 3), ("C", 2, 3), ("D", 4, 2), ("E", 12, 1),
    ("F", 2, 4), ("G", 3, 2), ("H", 2, 4), ("I", 9, 1), ("J", 1, 8),
    ("K", 1, 5), ("L", 4, 1), ("M", 2, 3), ("N", 6, 1), ("O", 8, 1),
    ("P", 2, 3), ("Q", 1, 10), ("R", 6, 1), ("S", 4, 1), ("T", 6, 1),
    ("U", 4, 1), ("V", 2, 4), ("W", 2, 4), ("X", 1, 8), ("Y", 2, 4),
    ("Z", 1, 10),
])


def tile_points(tiles: Iterable[Tile]) -> int:
    """Súčet bodových hodnôt dlaždíc."""
    return sum(t.points for t in tiles)


@dataclass
class TileBag:
    """Taška s dlaždicami.

    Pozn.: Taška si nikdy sama neseeduje generátor; miešanie vždy dostane
    `random.Random` od volajúceho, aby bola partia reprodukovateľná.
    """

    tiles: list[Tile] = field(default_factory=list)

    @classmethod
    def with_distribution(cls, distribution: Iterable[TileFrequency]) -> TileBag:
        tiles: list[Tile] = []
        for freq in distribution:
            tiles.extend([freq.tile] * freq.count)
        return cls(tiles)

    @classmethod
    def standard_english(cls) -> TileBag:
        return cls.with_distribution(ENGLISH_DISTRIBUTION)

    def draw_tile(self) -> Tile | None:
        """Potiahne jednu dlaždicu z konca tašky; None ak je taška prázdna."""
        if not self.tiles:
            return None
        return self.tiles.pop()

    def put_back(self, tiles: Iterable[Tile]) -> None:
        """Vráti dlaždice do tašky (bez miešania)."""
        self.tiles.extend(tiles)

    def shuffle(self, rng: random.Random) -> None:
        # random.shuffle je Fisher–Yates
        rng.shuffle(self.tiles)

    def remaining(self) -> int:
        return len(self.tiles)

    def points(self) -> int:
        return tile_points(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)
