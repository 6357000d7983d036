from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from .board import Board
from .coords import Coord, CoordRange
from .dictionary import Dictionary
from .errors import InvalidWordError
from .history import EntryType, HistoryEntry
from .positions import PositionType
from .tiles import MAX_RACK_TILES, Tile, tile_points
from .types import Placement, PlayedWord, find_placement, take_placement

if TYPE_CHECKING:
    from .game import Seat

# Bonus za položenie celého racku v jednom ťahu
MAX_RACK_TILES_BONUS = 50

WordScorer = Callable[[Sequence[Placement], Board, Dictionary], tuple[int, list[PlayedWord]]]
EndGameScorer = Callable[[HistoryEntry, Sequence["Seat"]], list[int]]

Step = Callable[[Coord], Coord]


def score_words(
    placements: Sequence[Placement],
    board: Board,
    is_word_valid: Dictionary,
) -> tuple[int, list[PlayedWord]]:
    """Nájde slová vytvorené ťahom, ich skóre a overí ich slovníkom.

    Predpoklad: ťah už prešiel validáciou položenia a dlaždice ešte nie sú
    na doske. Prémie políčok sa uplatnia len na nových dlaždiciach:
    najprv násobitele písmen, potom násobitele slova (viac DW v jednom
    slove sa násobí, 2× DW = ×4).

    Ak je niektoré slovo neplatné (alebo nová dlaždica netvorí žiadne
    viacpísmenové slovo), vyvolá `InvalidWordError` so všetkými neplatnými
    slovami. Inak vráti (celkové skóre, slová).
    """
    spans: list[CoordRange] = []
    _find_spans(Coord.west, Coord.east, placements, spans, board)
    _find_spans(Coord.north, Coord.south, placements, spans, board)

    score, words = _spans_to_words(spans, placements, board)

    # nové dlaždice mimo všetkých slov = jednopísmenové "slová"
    single_spans = [
        CoordRange.of(p.coord)
        for p in placements
        if not any(s.includes(p.coord) for s in spans)
    ]
    _, invalid = _spans_to_words(single_spans, placements, board)
    invalid.extend(w for w in words if not is_word_valid(w.word))

    if invalid:
        raise InvalidWordError(invalid)

    if len(placements) >= MAX_RACK_TILES:
        score += MAX_RACK_TILES_BONUS
    return score, words


def _find_spans(
    grow_min: Step,
    grow_max: Step,
    placements: Sequence[Placement],
    results: list[CoordRange],
    board: Board,
) -> None:
    unspanned = list(placements)
    while unspanned:
        p = unspanned.pop()
        lo = _grow(p.coord, grow_min, unspanned, board)
        hi = _grow(p.coord, grow_max, unspanned, board)
        span = CoordRange(lo, hi)
        if not span.is_single():
            results.append(span)


def _grow(coord: Coord, step: Step, unspanned: list[Placement], board: Board) -> Coord:
    while True:
        nxt = step(coord)
        position = board.position(nxt)
        if position is None:
            return coord
        if position.tile is not None or take_placement(unspanned, nxt) is not None:
            coord = nxt
        else:
            return coord


def _spans_to_words(
    spans: Sequence[CoordRange],
    placements: Sequence[Placement],
    board: Board,
) -> tuple[int, list[PlayedWord]]:
    total = 0
    words: list[PlayedWord] = []
    for span in spans:
        letters: list[str] = []
        word_score = 0
        word_modifiers: list[PositionType] = []

        for c in span:
            position = board.position(c)
            assert position is not None
            tile: Tile
            if position.tile is not None:
                tile = position.tile
                word_score += tile.points
            else:
                placement = find_placement(placements, c)
                assert placement is not None
                tile = placement.tile
                word_score += position.type.modify_tile_score(tile.points)
                word_modifiers.append(position.type)
            letters.append(tile.letter)

        for m in word_modifiers:
            word_score = m.modify_word_score(word_score)

        total += word_score
        words.append(PlayedWord("".join(letters), word_score, span))
    return total, words


def score_end_game(last_entry: HistoryEntry, seats: Sequence[Seat]) -> list[int]:
    """Koncové úpravy skóre pre každé miesto pri stole.

    Ak partiu ukončil ťah s položením dlaždíc, hráč, ktorý dohral, dostane
    dvojnásobok súčtu bodov na rackoch ostatných. Inak (partia skončila
    ťahmi bez bodov) každý stratí súčet bodov na vlastnom racku.
    """
    final = [0] * len(seats)
    if last_entry.type is EntryType.PLAY:
        bonus = sum(
            tile_points(s.rack) for i, s in enumerate(seats) if i != last_entry.seat_index
        )
        final[last_entry.seat_index] = bonus * 2
    else:
        for i, s in enumerate(seats):
            final[i] = -tile_points(s.rack)
    return final
