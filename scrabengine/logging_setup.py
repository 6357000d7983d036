"""Centralizovaná inicializácia logovania.

- Konfiguruje Rich konzolový handler a rotujúci súborový handler.
- Zabráni duplicitným handlerom pri opakovanom volaní.
- Poskytuje `TRACE_ID_VAR` pre propagáciu trace-id cez ContextVar
  (hra ho nastavuje pre každú akciu hráča).
"""
from __future__ import annotations

import logging
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

from . import config

TRACE_ID_VAR: ContextVar[str] = ContextVar("trace_id", default="-")


class _TraceIdFilter(logging.Filter):
    """Doplní `trace_id` do každého záznamu z ContextVar."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = TRACE_ID_VAR.get()
        return True


def default_log_path() -> str:
    """Predvolená cesta k log súboru (`SCRABENGINE_LOG_PATH` alebo koreň repozitára)."""
    env = config.log_path()
    if env:
        return env
    root_dir = Path(__file__).resolve().parents[1]
    return str(root_dir / "scrabengine.log")


def configure_logging(*, log_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Inicializuje logging iba raz a vráti projektový logger.

    - Rich na konzolu
    - rotujúci súborový handler (≈1 MB, 5 záloh), formát s `trace_id`
    """
    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger("scrabengine")

    root.setLevel(logging.DEBUG)
    trace_filter = _TraceIdFilter()

    ch = RichHandler(rich_tracebacks=True)
    ch.setLevel(level)
    ch.addFilter(trace_filter)
    ch.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(ch)

    path = log_path or default_log_path()
    try:
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    except OSError as exc:
        # bez súboru pokračuj aspoň s konzolou
        logging.getLogger("scrabengine").warning("log_file_unavailable path=%s error=%s", path, exc)
    else:
        fh.setLevel(logging.DEBUG)
        fh.addFilter(trace_filter)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s [trace=%(trace_id)s] %(message)s"
            )
        )
        root.addHandler(fh)

    return logging.getLogger("scrabengine")
