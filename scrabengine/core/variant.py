"""Varianty hry: rozloženie dosky a distribúcia dlaždíc v JSON súbore.

Formát súboru:

    {
      "name": "English",
      "layout": [["TW", ".", ...], ...],
      "letters": [{"letter": "A", "count": 9, "points": 1}, ...]
    }

Chýbajúci `layout` znamená štandardnú dosku 15x15.

Poznámka (SK): Používame Pydantic v2, preto `field_validator` namiesto
historického `validator`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .board import STANDARD_LAYOUT_TAGS, Board, layout_from_tags
from .game import Game
from .positions import PositionType
from .ruleset import Rules
from .tiles import ENGLISH_DISTRIBUTION, WILDCARD_LETTER, Tile, TileBag, TileFrequency

log = logging.getLogger("scrabengine.variants")

_WILDCARD_ALIASES = {"?", "BLANK", "JOKER", "WILDCARD", "ŽOLÍK", "_"}


class LetterModel(BaseModel):
    """Jedna dlaždica variantu."""

    letter: str
    count: int = Field(..., ge=0)
    points: int = Field(..., ge=0)

    @field_validator("letter", mode="before")
    @classmethod
    def _norm_letter(cls, v: object) -> str:
        """UPPERCASE písmeno; aliasy žolíka sa prevedú na '?'."""
        s = str(v or "").strip().upper()
        if s in _WILDCARD_ALIASES:
            return WILDCARD_LETTER
        if len(s) != 1:
            raise ValueError("letter_len_must_be_1")
        return s


class VariantModel(BaseModel):
    name: str = "Unnamed"
    layout: list[list[str]] | None = None
    letters: list[LetterModel] = Field(..., min_length=1)

    @field_validator("layout")
    @classmethod
    def _known_tags(cls, v: list[list[str]] | None) -> list[list[str]] | None:
        """Každá značka musí zodpovedať typu políčka; doska nesmie byť prázdna."""
        if v is None:
            return v
        if not v or not any(v):
            raise ValueError("layout_empty")
        for row in v:
            for tag in row:
                PositionType.from_tag(tag)
        return v

    @field_validator("letters")
    @classmethod
    def _unique_letters(cls, v: list[LetterModel]) -> list[LetterModel]:
        seen: set[str] = set()
        for item in v:
            if item.letter in seen:
                raise ValueError(f"letter_duplicate:{item.letter}")
            seen.add(item.letter)
        return v


@dataclass(frozen=True)
class Variant:
    """Overený variant, z ktorého sa stavajú nové dosky a tašky."""

    name: str
    layout_tags: tuple[tuple[str, ...], ...]
    distribution: tuple[TileFrequency, ...]

    @property
    def total_tiles(self) -> int:
        return sum(f.count for f in self.distribution)

    def new_board(self) -> Board:
        return Board.from_layout(layout_from_tags(self.layout_tags))

    def new_bag(self) -> TileBag:
        return TileBag.with_distribution(self.distribution)

    def new_game(self, rules: Rules | None = None) -> Game:
        return Game(self.new_bag(), self.new_board(), rules)


STANDARD_ENGLISH = Variant("English", STANDARD_LAYOUT_TAGS, ENGLISH_DISTRIBUTION)


def variant_from_model(model: VariantModel) -> Variant:
    layout = (
        tuple(tuple(row) for row in model.layout)
        if model.layout is not None
        else STANDARD_LAYOUT_TAGS
    )
    distribution = tuple(
        TileFrequency(Tile(item.letter, item.points), item.count) for item in model.letters
    )
    return Variant(model.name, layout, distribution)


def load_variant(path: str | Path) -> Variant:
    """Načíta a overí variant zo súboru.

    Neplatný obsah vyvolá `pydantic.ValidationError`.
    """
    p = Path(path)
    model = VariantModel.model_validate_json(p.read_text(encoding="utf-8"))
    variant = variant_from_model(model)
    log.info(
        "variant_loaded path=%s name=%s tiles=%s size=%sx%s",
        p,
        variant.name,
        variant.total_tiles,
        len(variant.layout_tags),
        max((len(r) for r in variant.layout_tags), default=0),
    )
    return variant
