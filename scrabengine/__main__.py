"""Vstupný bod: `python -m scrabengine`.

Vypíše efektívnu konfiguráciu (slovník, variant, kontrola slov pri ťahu)
a voliteľne overí zadané slová slovníkom.
"""
from __future__ import annotations

import argparse
import sys

from . import config
from .core.dictionary import default_dictionary
from .core.variant import STANDARD_ENGLISH, load_variant
from .logging_setup import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="scrabengine")
    parser.add_argument("words", nargs="*", help="slová na overenie slovníkom")
    parser.add_argument("--variant", default=config.variant_path(), help="JSON súbor variantu")
    args = parser.parse_args(argv)

    log = configure_logging()

    variant = load_variant(args.variant) if args.variant else STANDARD_ENGLISH
    log.info(
        "config variant=%s tiles=%s dictionary_for_scoring=%s wordlist=%s",
        variant.name,
        variant.total_tiles,
        config.dictionary_for_scoring(),
        config.wordlist_path() or "-",
    )

    dictionary = default_dictionary()
    invalid = [w for w in args.words if not dictionary(w)]
    for word in args.words:
        log.info("word=%s valid=%s", word.upper(), word not in invalid)
    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main())
