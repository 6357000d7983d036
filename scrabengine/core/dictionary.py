"""Slovník: predikát `(slovo) -> bool` a jeho implementácia nad wordlistom.

Poznámky:
- Wordlist sa načítava do pamäte ako množina slov v UPPERCASE (len písmená,
  vrátane diakritiky variantov).
- Overovanie je case-insensitive.
- Predvolený slovník sa načíta z cesty v `SCRABENGINE_WORDLIST`; ak nie je
  nastavená, použije sa slovník, ktorý prijme každé slovo.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import lru_cache
from pathlib import Path

from .. import config

log = logging.getLogger("scrabengine")

Dictionary = Callable[[str], bool]


def accept_all(word: str) -> bool:
    """Slovník, ktorý prijme každé slovo (hra bez kontroly pri ťahu)."""
    return True


class WordList:
    """Slovník nad množinou povolených slov."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words: frozenset[str] = frozenset(
            w for w in (self._normalize(word) for word in words) if w
        )

    @staticmethod
    def _normalize(word: str) -> str:
        # slová s inými znakmi než písmenami sa do zoznamu nedostanú
        w = word.strip().upper()
        return w if w.isalpha() else ""

    @classmethod
    def from_path(cls, path: str | Path) -> WordList:
        """Načíta wordlist zo súboru; jeden riadok = jedno slovo.

        Prázdne riadky a riadky začínajúce '#' sa ignorujú.
        """
        with Path(path).open(encoding="utf-8", errors="ignore") as f:
            words = [line.strip() for line in f if line.strip() and not line.startswith("#")]
        log.info("wordlist_loaded path=%s words=%s", path, len(words))
        return cls(words)

    def contains(self, word: str) -> bool:
        """Presná zhoda (bez ohľadu na veľkosť písmen).

        Slovo sa pred hľadaním nečistí: nepriradený žolík '?' alebo iný
        nepísmenový znak znamená neplatné slovo.
        """
        return word.upper() in self.words

    __call__ = contains

    def __len__(self) -> int:
        return len(self.words)


@lru_cache(maxsize=1)
def default_dictionary() -> Dictionary:
    """Slovník podľa konfigurácie (načíta sa raz za beh procesu)."""
    path = config.wordlist_path()
    if path is None:
        log.warning("wordlist_missing env=SCRABENGINE_WORDLIST -> accept_all")
        return accept_all
    return WordList.from_path(path)
