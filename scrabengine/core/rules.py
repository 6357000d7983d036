from __future__ import annotations

from collections.abc import Callable, Sequence

from .board import Board
from .errors import InvalidPlacementError, InvalidPlacementReason
from .types import Placement, find_placement, placement_bounds

PlacementValidator = Callable[[Sequence[Placement], Board], None]


def validate_placements(placements: Sequence[Placement], board: Board) -> None:
    """Overí, či sa dajú dlaždice legálne položiť na dosku.

    Kontroly v poradí priority:
    - aspoň jedna dlaždica,
    - všetky v jednom riadku alebo stĺpci,
    - každá bunka rozsahu je na doske, nová dlaždica nejde na obsadené pole
      a medzi novými dlaždicami nie je diera (prázdna bunka),
    - žiadna nová dlaždica neostala mimo prejdeného rozsahu (duplicity),
    - ťah sa dotýka štartu alebo už položenej dlaždice.

    Pri porušení vyvolá `InvalidPlacementError` s dôvodom; inak nič nemení,
    položenie na dosku robí volajúci.
    """
    placements_left = len(placements)
    if placements_left == 0:
        raise InvalidPlacementError(InvalidPlacementReason.NO_TILES_PLACED)

    bounds = placement_bounds(placements)
    if not bounds.is_linear():
        raise InvalidPlacementError(InvalidPlacementReason.PLACEMENT_NOT_LINEAR)

    connected = False
    for c in bounds:
        position = board.position(c)
        if position is None:
            raise InvalidPlacementError(InvalidPlacementReason.PLACEMENT_OUT_OF_BOUNDS)

        if find_placement(placements, c) is not None:
            if position.tile is not None:
                raise InvalidPlacementError(InvalidPlacementReason.POSITION_OCCUPIED)
            connected = (
                connected
                or position.type.counts_as_connected
                or board.neighbour_has_tile(c)
            )
            placements_left -= 1
        elif position.tile is None:
            raise InvalidPlacementError(InvalidPlacementReason.PLACEMENT_NOT_CONTIGUOUS)

    if placements_left != 0:
        raise InvalidPlacementError(InvalidPlacementReason.PLACEMENT_OVERLAP)
    if not connected:
        raise InvalidPlacementError(InvalidPlacementReason.PLACEMENT_NOT_CONNECTED)
