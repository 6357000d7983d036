from __future__ import annotations

from scrabengine.core.coords import Coord
from scrabengine.core.tiles import ENGLISH_DISTRIBUTION, Tile
from scrabengine.core.types import Placement

POINTS: dict[str, int] = {f.tile.letter: f.tile.points for f in ENGLISH_DISTRIBUTION}


def tiles(letters: str) -> list[Tile]:
    """Dlaždice so štandardnými anglickými bodmi ('?' = žolík)."""
    return [Tile(ch, POINTS[ch]) for ch in letters]


def across(word: str, row: int, col: int) -> list[Placement]:
    return [Placement(t, Coord(row, col + i)) for i, t in enumerate(tiles(word))]


def down(word: str, row: int, col: int) -> list[Placement]:
    return [Placement(t, Coord(row + i, col)) for i, t in enumerate(tiles(word))]


def give_rack(game, seat_index: int, letters: str) -> None:
    """Nahradí rack hráča konkrétnymi dlaždicami z tašky (počty dlaždíc ostanú)."""
    seat = game.seats[seat_index]
    game.bag.put_back(seat.rack)
    seat.rack.clear()
    for t in tiles(letters):
        if t in game.bag.tiles:
            game.bag.tiles.remove(t)
        else:
            # dlaždicu drží iný hráč; dostane náhradu z tašky
            holder = next(s for s in game.seats if s is not seat and t in s.rack)
            holder.rack.remove(t)
            holder.rack.append(game.bag.tiles.pop(0))
        seat.rack.append(t)


def game_snapshot(game):
    """Celý pozorovateľný stav partie na porovnanie pred a po akcii."""
    return (
        game.phase,
        game.current_seat_index,
        [(s.score, list(s.rack)) for s in game.seats],
        list(game.bag.tiles),
        game.board.occupied(),
        list(game.history),
    )
