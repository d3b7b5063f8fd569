"""Direction helpers for agents walking an orthogonal maze.

A typical wandering agent, once per tile it enters:

    options = valid_directions(ghost_position, floor_layer, 0, grid)
    if can_change_direction(options):
        heading = random_direction(options)

``closest_direction`` gives a greedy chase heading instead of a random one.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Union

from .errors import InvalidIndexError
from .grid import cell_at, cell_index, validate_map
from .schemas import Grid, Point


class Direction(str, Enum):
    """Orthogonal movement direction. Compares equal to its plain string value."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


TRAPPED = "trapped"

# (direction, column delta, row delta), in the order results are reported
_PROBES = (
    (Direction.UP, 0, -1),
    (Direction.LEFT, -1, 0),
    (Direction.RIGHT, 1, 0),
    (Direction.DOWN, 0, 1),
)


def valid_directions(
    position: Point,
    map_array: Sequence[int],
    walkable_gid: int,
    grid: Grid,
) -> List[Direction]:
    """Return the directions whose neighboring cell holds ``walkable_gid``.

    The cell is the one containing ``position``. Results come in the fixed
    order up, left, right, down. Neighbors beyond any grid edge are never
    valid (there is no wrap-around onto the adjacent row).

    Raises:
        InvalidIndexError: If ``position`` itself is off the grid.
        MalformedGridError: If ``map_array`` does not fit ``grid``.
    """

    validate_map(map_array, grid)
    index = cell_at(position.x, position.y, grid)
    if index is None:
        raise InvalidIndexError(
            cell_index(position.x, position.y, grid),
            grid.cell_count,
            detail=f"position ({position.x}, {position.y}) is off the grid",
        )

    column = index % grid.width_in_tiles
    row = index // grid.width_in_tiles
    directions: List[Direction] = []
    for direction, d_col, d_row in _PROBES:
        n_col, n_row = column + d_col, row + d_row
        if not (0 <= n_col < grid.width_in_tiles and 0 <= n_row < grid.height_in_tiles):
            continue
        if map_array[n_col + n_row * grid.width_in_tiles] == walkable_gid:
            directions.append(direction)
    return directions


def can_change_direction(valid: Iterable[str] = ()) -> bool:
    """Return True at a dead end, when trapped, or at an intersection.

    In a straight corridor (only up/down, or only left/right) an agent should
    keep going, so this returns False there.
    """

    # Plain strings and Direction members hash differently, compare by value
    values = {Direction(direction).value for direction in valid}
    if len(values) <= 1:
        return True
    vertical = Direction.UP.value in values or Direction.DOWN.value in values
    horizontal = Direction.LEFT.value in values or Direction.RIGHT.value in values
    return vertical and horizontal


def random_direction(
    valid: Iterable[str] = (),
    rng: Optional[random.Random] = None,
) -> Union[Direction, str]:
    """Pick one of ``valid`` uniformly at random, or ``"trapped"`` if it is empty.

    Pass a seeded ``random.Random`` as ``rng`` for reproducible choices.
    """

    # Fixed probe order, so a seeded rng picks the same member for a set input
    members = {Direction(direction) for direction in valid}
    ordered = [direction for direction, _, _ in _PROBES if direction in members]
    if not ordered:
        return TRAPPED
    return (rng or random).choice(ordered)


def closest_direction(point_a: Point, point_b: Point) -> Direction:
    """Return the direction from ``point_a`` that heads most directly to ``point_b``.

    The axis with the larger displacement wins, ties going to the X axis.
    Zero displacement along the winning axis counts as left/up.
    """

    vx = point_b.x - point_a.x
    vy = point_b.y - point_a.y
    if abs(vx) >= abs(vy):
        return Direction.LEFT if vx <= 0 else Direction.RIGHT
    return Direction.UP if vy <= 0 else Direction.DOWN
