"""Tile-based line of sight between two points.

The ray from A to B is sampled every ``sample_spacing`` pixels and each
sample's cell is looked up in the map. The two points can see each other when
every sampled cell is empty. The spacing should not exceed the tile size, or
thin walls can slip between samples.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .grid import cell_at, gid_at, validate_map
from .schemas import Grid, Point


def sample_points(point_a: Point, point_b: Point, sample_spacing: float = 32) -> List[Point]:
    """Return the points tested along the ray from ``point_a`` to ``point_b``.

    There are ``ceil(distance / sample_spacing)`` samples, spaced
    ``sample_spacing`` apart starting one step from A. A itself is not
    sampled. The last sample is clamped to B so no sample lands beyond the
    target.
    """

    if sample_spacing <= 0:
        raise ValueError(f"sample_spacing must be positive, got {sample_spacing}")

    vx = point_b.x - point_a.x
    vy = point_b.y - point_a.y
    magnitude = math.hypot(vx, vy)
    if magnitude == 0:
        return []

    dx = vx / magnitude
    dy = vy / magnitude
    count = math.ceil(magnitude / sample_spacing)
    samples = []
    for i in range(1, count + 1):
        distance = min(sample_spacing * i, magnitude)
        samples.append(Point(x=point_a.x + dx * distance, y=point_a.y + dy * distance))
    return samples


def is_visible(
    point_a: Point,
    point_b: Point,
    map_array: Sequence[int],
    grid: Grid,
    empty_gid: int = 0,
    sample_spacing: float = 32,
    allowed_angles: Sequence[float] = (),
) -> bool:
    """Return True if ``point_b`` can be seen from ``point_a``.

    Every sampled cell must hold ``empty_gid``; samples off the grid count as
    blocked. When ``allowed_angles`` is non-empty, the A->B angle in degrees
    (``atan2`` convention, so right is 0, down is 90 in screen space, and left
    is 180) must also equal one of them. Pass ``(0, 90, 180, -90)`` to
    restrict sight to straight corridors.

    Raises:
        MalformedGridError: If ``map_array`` does not fit ``grid``.
        ValueError: If ``sample_spacing`` is not positive.
    """

    validate_map(map_array, grid)
    samples = sample_points(point_a, point_b, sample_spacing)

    if allowed_angles:
        angle = math.degrees(math.atan2(point_b.y - point_a.y, point_b.x - point_a.x))
        if not any(math.isclose(angle, allowed, abs_tol=1e-9) for allowed in allowed_angles):
            return False

    for sample in samples:
        gid = gid_at(map_array, cell_at(sample.x, sample.y, grid))
        if gid is None or gid != empty_gid:
            return False
    return True
