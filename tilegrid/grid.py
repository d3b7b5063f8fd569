"""Grid index math: pixel/cell conversion and neighbor enumeration.

Cells are addressed by a single row-major index, ``column + row * width``,
which is also the position of the cell's gid in a map array. Everything else
in tilegrid is built on these helpers.

Two flavours of lookup exist on purpose:

- ``cell_index`` and the ``neighbors*`` helpers are raw arithmetic and never
  check bounds. They may return indexes outside the map.
- ``cell_at`` and ``gid_at`` are the guarded versions used by the probes.
  They return ``None`` for anything off the grid, so a point past the right
  edge never aliases onto the next row and a negative index never wraps
  around the end of a Python list.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidIndexError, MalformedGridError
from .schemas import Grid, Shape, TileRect


def cell_index(x: float, y: float, grid: Grid) -> int:
    """Return the map index of the cell containing pixel ``(x, y)``.

    Coordinates are relative to the grid's origin. No bounds validation is
    performed; use ``cell_at`` when the point may be off the grid.
    """

    return math.floor(x / grid.tile_width) + math.floor(y / grid.tile_height) * grid.width_in_tiles


def cell_at(x: float, y: float, grid: Grid) -> Optional[int]:
    """Return the map index of the cell containing ``(x, y)``, or ``None`` if off-grid."""

    column = math.floor(x / grid.tile_width)
    row = math.floor(y / grid.tile_height)
    if not (0 <= column < grid.width_in_tiles and 0 <= row < grid.height_in_tiles):
        return None
    return column + row * grid.width_in_tiles


def cell_coordinates(index: int, width_in_tiles: int) -> Tuple[int, int]:
    """Return ``(column, row)`` for a map index."""

    return index % width_in_tiles, index // width_in_tiles


def require_index(index: int, cell_count: int) -> int:
    """Return ``index`` unchanged, or raise ``InvalidIndexError`` if out of range."""

    if not 0 <= index < cell_count:
        raise InvalidIndexError(index, cell_count)
    return index


def gid_at(map_array: Sequence[int], index: Optional[int]) -> Optional[int]:
    """Return the gid stored at ``index``, or ``None`` when there is no such cell."""

    if index is None or not 0 <= index < len(map_array):
        return None
    return map_array[index]


def validate_map(map_array: Sequence[int], grid: Grid) -> None:
    """Raise ``MalformedGridError`` unless ``map_array`` has one gid per grid cell."""

    if len(map_array) != grid.cell_count:
        raise MalformedGridError(
            f"Map array has {len(map_array)} cells but the grid is "
            f"{grid.width_in_tiles}x{grid.height_in_tiles} ({grid.cell_count} cells)"
        )


def validate_map_width(map_array: Sequence[int], width_in_tiles: int) -> int:
    """Check that ``map_array`` holds whole rows of ``width_in_tiles`` cells.

    Returns the number of rows. Used where only the width is known (path
    search), so the height has to be inferred from the array length.
    """

    if width_in_tiles <= 0:
        raise MalformedGridError(f"width_in_tiles must be positive, got {width_in_tiles}")
    if not map_array:
        raise MalformedGridError("Map array is empty")
    if len(map_array) % width_in_tiles:
        raise MalformedGridError(
            f"Map array length {len(map_array)} is not a whole number of rows "
            f"of width {width_in_tiles}"
        )
    return len(map_array) // width_in_tiles


def cell_rect(index: int, grid: Grid, map_array: Optional[Sequence[int]] = None) -> TileRect:
    """Convert a map index back into the cell's pixel rectangle.

    The returned position includes the grid origin. When ``map_array`` is
    given, the cell's gid is attached so the result can be fed straight into
    rectangle collision code.

    Raises:
        InvalidIndexError: If ``index`` is not a cell of ``grid``.
    """

    require_index(index, grid.cell_count)
    column, row = cell_coordinates(index, grid.width_in_tiles)
    x = column * grid.tile_width + grid.origin_x
    y = row * grid.tile_height + grid.origin_y
    half_width = grid.tile_width / 2
    half_height = grid.tile_height / 2
    gid = None
    if map_array is not None:
        validate_map(map_array, grid)
        gid = map_array[index]
    return TileRect(
        index=index,
        column=column,
        row=row,
        x=x,
        y=y,
        width=grid.tile_width,
        height=grid.tile_height,
        half_width=half_width,
        half_height=half_height,
        center_x=x + half_width,
        center_y=y + half_height,
        gid=gid,
    )


def neighbors8(index: int, width_in_tiles: int) -> List[int]:
    """Return the 3x3 block of indexes centred on ``index``, row by row.

    The centre cell is included (9 values). Nothing is bounds-checked, which
    makes this a cheap broad phase for narrow-phase collision checks.
    """

    w = width_in_tiles
    return [
        index - w - 1,
        index - w,
        index - w + 1,
        index - 1,
        index,
        index + 1,
        index + w - 1,
        index + w,
        index + w + 1,
    ]


def neighbors_cross(index: int, width_in_tiles: int) -> List[int]:
    """Return the orthogonal neighbors in the order up, left, right, down."""

    w = width_in_tiles
    return [index - w, index - 1, index + 1, index + w]


def neighbors_diagonal(index: int, width_in_tiles: int) -> List[int]:
    """Return the diagonal neighbors: up-left, up-right, down-left, down-right."""

    w = width_in_tiles
    return [index - w - 1, index - w + 1, index + w - 1, index + w + 1]


def update_map(
    map_array: Sequence[int],
    occupants: Iterable[Tuple[Shape, int]],
    grid: Grid,
) -> List[int]:
    """Build a fresh map array that marks where each occupant currently is.

    The result has the same length as ``map_array`` and is all zeros except
    for the cells under each occupant's center, which hold that occupant's
    gid. Later occupants overwrite earlier ones in a shared cell. The input map
    is left untouched.

    Typical use is to refresh a layer of moving things once per tick and then
    run the cheap index-based collision checks against it.

    Raises:
        InvalidIndexError: If an occupant's center is off the grid.
    """

    validate_map(map_array, grid)
    updated = [0] * len(map_array)
    for shape, gid in occupants:
        center = shape.center
        index = cell_at(center.x, center.y, grid)
        if index is None:
            raise InvalidIndexError(
                cell_index(center.x, center.y, grid),
                grid.cell_count,
                detail=f"occupant centre ({center.x}, {center.y}) is off the grid",
            )
        updated[index] = gid
    return updated
