from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import overload

from .tiles import Tile
from .types import Placement, PlayedWord


class EntryType(Enum):
    """Druh záznamu v histórii ťahov."""

    UNKNOWN = auto()
    PLAY = auto()
    PASS = auto()
    EXCHANGE_TILES = auto()
    CHALLENGE_FAIL = auto()
    CHALLENGE_SUCCESS = auto()

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True)
class HistoryEntry:
    """Jeden ťah v histórii partie; po pridaní sa nemení."""

    type: EntryType
    seat_index: int
    score: int = 0
    tiles_spent: tuple[Tile, ...] = ()
    tiles_played: tuple[Placement, ...] = ()
    tiles_drawn: tuple[Tile, ...] = ()
    words_formed: tuple[PlayedWord, ...] = ()


class History(Sequence[HistoryEntry]):
    """Iba-na-pridávanie zoznam záznamov; čítať sa dá len posledný ťah.

    Jediná výnimka z nemennosti je `award_end_game_points()`, ktorú hra volá
    presne raz pri prechode do fázy End.
    """

    def __init__(self, entries: Iterable[HistoryEntry] = ()) -> None:
        self._entries: list[HistoryEntry] = list(entries)

    def append_play(
        self,
        seat_index: int,
        score: int,
        tiles_spent: Sequence[Tile],
        tiles_played: Sequence[Placement],
        tiles_drawn: Sequence[Tile],
        words_formed: Sequence[PlayedWord],
    ) -> HistoryEntry:
        return self._append(HistoryEntry(
            type=EntryType.PLAY,
            seat_index=seat_index,
            score=score,
            tiles_spent=tuple(tiles_spent),
            tiles_played=tuple(tiles_played),
            tiles_drawn=tuple(tiles_drawn),
            words_formed=tuple(words_formed),
        ))

    def append_pass(self, seat_index: int) -> HistoryEntry:
        return self._append(HistoryEntry(EntryType.PASS, seat_index))

    def append_exchange(
        self,
        seat_index: int,
        tiles_spent: Sequence[Tile],
        tiles_drawn: Sequence[Tile],
    ) -> HistoryEntry:
        return self._append(HistoryEntry(
            type=EntryType.EXCHANGE_TILES,
            seat_index=seat_index,
            tiles_spent=tuple(tiles_spent),
            tiles_drawn=tuple(tiles_drawn),
        ))

    def append_challenge_fail(self, challenger_seat_index: int) -> HistoryEntry:
        return self._append(HistoryEntry(EntryType.CHALLENGE_FAIL, challenger_seat_index))

    def append_challenge_success(self, challenger_seat_index: int) -> HistoryEntry:
        return self._append(HistoryEntry(EntryType.CHALLENGE_SUCCESS, challenger_seat_index))

    def last(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def award_end_game_points(self, points: int) -> HistoryEntry:
        """Pripočíta koncové body k skóre posledného záznamu.

        Volá sa len pri ukončení partie (bonus za dohranie sa zapíše k ťahu,
        ktorý partiu ukončil). Staršie záznamy sa nikdy nemenia.
        """
        if not self._entries:
            raise IndexError("História je prázdna")
        patched = replace(self._entries[-1], score=self._entries[-1].score + points)
        self._entries[-1] = patched
        return patched

    def _append(self, entry: HistoryEntry) -> HistoryEntry:
        self._entries.append(entry)
        return entry

    @overload
    def __getitem__(self, index: int) -> HistoryEntry: ...

    @overload
    def __getitem__(self, index: slice) -> list[HistoryEntry]: ...

    def __getitem__(self, index: int | slice) -> HistoryEntry | list[HistoryEntry]:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)
