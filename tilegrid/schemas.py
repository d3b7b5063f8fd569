"""Pydantic schemas for grid descriptions and probe results.

All geometry passed into or returned from tilegrid is described here. The
models are frozen: a ``Grid`` is an immutable description of a tile layer,
and results such as ``CollisionResult`` are snapshots that callers may keep,
compare, or serialize with ``model_dump()``.

Map arrays themselves are NOT modelled. They stay plain sequences of ints
owned by the caller (typically a Tiled layer's ``data`` list), and the core
only ever reads them.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Grid(BaseModel):
    """Immutable description of a rectangular tile grid.

    ``origin_x``/``origin_y`` place the grid inside its parent space. They are
    applied when converting a cell back to pixel coordinates (``cell_rect``)
    but not when converting pixels to a cell (``cell_index``), which expects
    coordinates already relative to the grid.
    """

    model_config = ConfigDict(frozen=True)

    tile_width: float = Field(..., gt=0, description="Width of one tile in pixels")
    tile_height: float = Field(..., gt=0, description="Height of one tile in pixels")
    width_in_tiles: int = Field(..., gt=0, description="Number of columns")
    height_in_tiles: int = Field(..., gt=0, description="Number of rows")
    origin_x: float = Field(0, description="X position of the grid's top-left corner")
    origin_y: float = Field(0, description="Y position of the grid's top-left corner")

    @property
    def cell_count(self) -> int:
        """Number of cells, i.e. the required length of a map array."""
        return self.width_in_tiles * self.height_in_tiles

    @property
    def pixel_width(self) -> float:
        return self.width_in_tiles * self.tile_width

    @property
    def pixel_height(self) -> float:
        return self.height_in_tiles * self.tile_height


class Point(BaseModel):
    """A 2D point in pixel space."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Rect(BaseModel):
    """Axis-aligned rectangle. Used for collision sub-areas."""

    model_config = ConfigDict(frozen=True)

    x: float = 0
    y: float = 0
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)


class Shape(BaseModel):
    """Axis-aligned shape probed against a tile grid.

    ``collision_area`` optionally narrows the part of the shape that collides.
    Its ``x``/``y`` are offsets from the shape's own ``x``/``y`` (so an area at
    ``(22, 44)`` on a shape at ``(100, 100)`` starts at ``(122, 144)``).
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    collision_area: Optional[Rect] = None

    @property
    def center(self) -> Point:
        return Point(x=self.x + self.width / 2, y=self.y + self.height / 2)


class CornerPoints(BaseModel):
    """The four corner points used for tile collision checks."""

    model_config = ConfigDict(frozen=True)

    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point

    def points(self) -> Iterator[Tuple[str, Point]]:
        """Yield ``(name, point)`` pairs in evaluation order."""
        yield "top_left", self.top_left
        yield "top_right", self.top_right
        yield "bottom_left", self.bottom_left
        yield "bottom_right", self.bottom_right


class TileRect(BaseModel):
    """Pixel rectangle of one grid cell, as returned by ``cell_rect``.

    ``gid`` is only populated when a map array was supplied.
    """

    model_config = ConfigDict(frozen=True)

    index: int
    column: int
    row: int
    x: float
    y: float
    width: float
    height: float
    half_width: float
    half_height: float
    center_x: float
    center_y: float
    gid: Optional[int] = None


class CollisionResult(BaseModel):
    """Outcome of ``hit_test_tile``.

    ``index``/``gid`` describe the point at which the test was decided (see
    ``hit_test_tile``). Both are ``None`` when that point fell off the grid.
    """

    model_config = ConfigDict(frozen=True)

    hit: bool
    index: Optional[int] = None
    gid: Optional[int] = None
