"""Pytest konfigurácia a zdieľané fixtures.

- Načítanie premenných prostredia z .env (ak existuje)
- Deterministický generátor, štandardná doska a malý slovník
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from dotenv import load_dotenv

from scrabengine.core.board import Board
from scrabengine.core.dictionary import WordList

WORDS = ["DOG", "DOGS", "GOD", "AS", "CAT", "READING", "AXE", "DO", "GO", "OD"]


def pytest_configure(config):
    """Načíta .env pred spustením testov (bez prepisu existujúcich premenných)."""
    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def board() -> Board:
    return Board.standard()


@pytest.fixture
def dictionary() -> WordList:
    return WordList(WORDS)
