"""Konfigurácia enginu z premenných prostredia (.env).

Premenné:
- SCRABENGINE_WORDLIST – cesta k wordlistu (jedno slovo na riadok).
- SCRABENGINE_DICTIONARY_FOR_SCORING – '1' = slová sa overujú už pri ťahu,
  '0' = overí ich až námietka. Predvolene zapnuté.
- SCRABENGINE_VARIANT – cesta k JSON súboru s variantom (doska + dlaždice).
- SCRABENGINE_LOG_PATH – cesta k log súboru.
"""
from __future__ import annotations

import os

from dotenv import load_dotenv

# Načítaj .env veľmi skoro, ale nenahrádzaj už existujúce OS premenné
if os.getenv("PYTEST_CURRENT_TEST") is None:
    load_dotenv(override=False)

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """Tolerantné parsovanie boolean reťazcov; None ak hodnota nie je známa."""
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def _path_from_env(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


def wordlist_path() -> str | None:
    return _path_from_env("SCRABENGINE_WORDLIST")


def variant_path() -> str | None:
    return _path_from_env("SCRABENGINE_VARIANT")


def log_path() -> str | None:
    return _path_from_env("SCRABENGINE_LOG_PATH")


def dictionary_for_scoring(default: bool = True) -> bool:
    """Či sa má slovník použiť už pri skórovaní ťahu.

    Neznáma alebo chýbajúca hodnota -> `default`.
    """
    env_val = _parse_bool(os.getenv("SCRABENGINE_DICTIONARY_FOR_SCORING"))
    if env_val is None:
        return default
    return env_val
