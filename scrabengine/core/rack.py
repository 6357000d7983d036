"""Pomocné funkcie pre manipuláciu s rackom hráča.

Validácia je čistá (bez vedľajších účinkov), aby ju hra mohla zavolať
pred akoukoľvek zmenou stavu a aby sa dala testovať samostatne.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .errors import InsufficientTilesError
from .tiles import MAX_RACK_TILES, Tile, TileBag

Rack = list[Tile]
RackValidator = Callable[[Sequence[Tile], Sequence[Tile]], tuple[list[Tile], list[Tile]]]


def tiles_match(rack_tile: Tile, wanted: Tile) -> bool:
    """Či dlaždica z racku môže poslúžiť ako `wanted`.

    Žolíky sa porovnávajú podľa nulových bodov, nie podľa písmena: nula-bodová
    dlaždica v ťahu (s už priradeným písmenom) sa zhoduje s ľubovoľným žolíkom
    v racku. Ostatné dlaždice sa musia zhodovať presne.
    """
    if rack_tile.points == 0 and wanted.points == 0:
        return True
    return rack_tile == wanted


def validate_tiles_from_rack(
    rack: Sequence[Tile],
    to_play: Sequence[Tile],
) -> tuple[list[Tile], list[Tile]]:
    """Overí, že rack obsahuje požadované dlaždice (multiset).

    Vráti dvojicu (použité, zvyšok): použité sú konkrétne dlaždice z racku
    (žolík teda ostane žolíkom), zvyšok zachová pôvodné poradie racku.
    Ak niečo chýba, vyvolá `InsufficientTilesError` so zoznamom chýbajúcich.
    """
    used: list[Tile] = []
    remaining = list(rack)
    missing: list[Tile] = []

    for wanted in to_play:
        for i, t in enumerate(remaining):
            if tiles_match(t, wanted):
                used.append(remaining.pop(i))
                break
        else:
            missing.append(wanted)

    if missing:
        raise InsufficientTilesError(missing)
    return used, remaining


def fill_rack(rack: Rack, bag: TileBag) -> list[Tile]:
    """Doplní rack z tašky na MAX_RACK_TILES; vráti potiahnuté dlaždice."""
    drawn: list[Tile] = []
    while len(rack) + len(drawn) < MAX_RACK_TILES:
        t = bag.draw_tile()
        if t is None:
            break
        drawn.append(t)
    rack.extend(drawn)
    return drawn


def remove_tiles(rack: Rack, tiles: Iterable[Tile]) -> None:
    """Odstráni dlaždice z racku; tie, ktoré v racku nie sú, ignoruje."""
    for t in tiles:
        if t in rack:
            rack.remove(t)
