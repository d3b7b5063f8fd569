"""Tile collision probing for axis-aligned shapes.

A shape collides with a tile type when its probe points land in cells holding
that gid. Three probe modes are supported:

- ``"some"`` (default): any of the four corners is over the gid.
- ``"every"``: all four corners are over the gid. Useful for "standing
  entirely on floor" checks.
- ``"center"``: only the shape's center point counts.

Usage:
    result = hit_test_tile(player, wall_layer, 1, grid)
    if result.hit:
        bounce_off(result.index)
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .errors import InvalidCollisionModeError
from .grid import cell_at, gid_at, validate_map
from .schemas import CollisionResult, CornerPoints, Grid, Point, Shape

COLLISION_MODES = ("every", "some", "center")


def corner_points(shape: Shape) -> CornerPoints:
    """Return the corner points of ``shape`` (or of its collision area).

    Without a collision area, the right and bottom edges are pulled in by one
    pixel so a 32px shape sitting exactly on a 32px tile does not also claim
    the tile to its right or below. A collision area is taken at face value.
    """

    area = shape.collision_area
    if area is not None:
        left = shape.x + area.x
        top = shape.y + area.y
        right = left + area.width
        bottom = top + area.height
    else:
        left = shape.x
        top = shape.y
        right = shape.x + shape.width - 1
        bottom = shape.y + shape.height - 1

    return CornerPoints(
        top_left=Point(x=left, y=top),
        top_right=Point(x=right, y=top),
        bottom_left=Point(x=left, y=bottom),
        bottom_right=Point(x=right, y=bottom),
    )


def _probe_points(shape: Shape, mode: str) -> Iterable[Tuple[str, Point]]:
    if mode == "center":
        return [("center", shape.center)]
    return corner_points(shape).points()


def hit_test_tile(
    shape: Shape,
    map_array: Sequence[int],
    target_gid: int,
    grid: Grid,
    mode: str = "some",
) -> CollisionResult:
    """Check whether ``shape`` overlaps cells holding ``target_gid``.

    Points are evaluated in order (top-left, top-right, bottom-left,
    bottom-right) and evaluation stops as soon as the outcome is decided:
    ``"some"`` and ``"center"`` stop at the first matching point, ``"every"``
    stops at the first point that does not match. The returned ``index`` and
    ``gid`` belong to that deciding point, i.e. the last point evaluated. For
    a ``"some"`` hit this is the first matching corner; for an ``"every"``
    miss it is the first corner that failed.

    Points that fall off the grid have no gid and never match.

    Raises:
        InvalidCollisionModeError: If ``mode`` is not one of ``COLLISION_MODES``.
        MalformedGridError: If ``map_array`` does not fit ``grid``.
    """

    if mode not in COLLISION_MODES:
        raise InvalidCollisionModeError(mode, COLLISION_MODES)
    validate_map(map_array, grid)

    # The outcome is whatever the deciding point reported: "every" is decided
    # by the first miss, the others by the first match.
    require_all = mode == "every"
    result = CollisionResult(hit=False)

    for _, point in _probe_points(shape, mode):
        index = cell_at(point.x, point.y, grid)
        gid = gid_at(map_array, index)
        matched = gid is not None and gid == target_gid
        result = CollisionResult(hit=matched, index=index, gid=gid)
        if matched != require_all:
            break

    return result
