"""Tests for sampled tile line of sight."""

import pytest

from tilegrid import Grid, MalformedGridError, Point, is_visible, sample_points

ROW = Grid(tile_width=32, tile_height=32, width_in_tiles=5, height_in_tiles=1)
SQUARE = Grid(tile_width=32, tile_height=32, width_in_tiles=5, height_in_tiles=5)

# Centres of cells 0 and 2 in the single-row grid
A = Point(x=16, y=16)
B = Point(x=80, y=16)


def test_blocked_by_the_cell_in_between():
    assert is_visible(A, B, [0, 1, 0, 0, 0], ROW) is False
    assert is_visible(A, B, [0, 0, 0, 0, 0], ROW) is True


def test_cells_beyond_the_target_do_not_matter():
    assert is_visible(A, B, [0, 0, 0, 1, 1], ROW) is True


def test_custom_empty_gid():
    assert is_visible(A, B, [5, 5, 5, 0, 0], ROW, empty_gid=5) is True
    assert is_visible(A, B, [5, 0, 5, 0, 0], ROW, empty_gid=5) is False


def test_samples_off_the_grid_block_sight():
    narrow = Grid(tile_width=32, tile_height=32, width_in_tiles=3, height_in_tiles=1)
    assert is_visible(A, Point(x=112, y=16), [0, 0, 0], narrow) is False


def test_sample_points_count_and_clamp():
    samples = sample_points(Point(x=0, y=0), Point(x=40, y=0), sample_spacing=32)
    # ceil(40 / 32) == 2 samples; the second is clamped onto the target
    assert [(p.x, p.y) for p in samples] == [(32, 0), (40, 0)]

    exact = sample_points(Point(x=0, y=0), Point(x=0, y=64), sample_spacing=32)
    assert [(p.x, p.y) for p in exact] == [(0, 32), (0, 64)]


def test_coincident_points_are_visible():
    assert sample_points(A, A) == []
    assert is_visible(A, A, [1, 1, 1, 1, 1], ROW) is True


def test_allowed_angles_restrict_direction():
    open_map = [0] * 25
    right_angles = (0, 90, 180, -90)
    start = Point(x=16, y=16)

    # Straight right and straight down pass the filter
    assert is_visible(start, Point(x=144, y=16), open_map, SQUARE, allowed_angles=right_angles)
    assert is_visible(start, Point(x=16, y=144), open_map, SQUARE, allowed_angles=right_angles)
    # Straight left from the far side is 180 degrees
    assert is_visible(Point(x=144, y=16), start, open_map, SQUARE, allowed_angles=right_angles)

    # A diagonal ray is clear but rejected by the filter
    diagonal_target = Point(x=80, y=80)
    assert is_visible(start, diagonal_target, open_map, SQUARE) is True
    assert is_visible(start, diagonal_target, open_map, SQUARE, allowed_angles=right_angles) is False
    assert is_visible(start, diagonal_target, open_map, SQUARE, allowed_angles=[45]) is True


def test_invalid_spacing_and_map():
    with pytest.raises(ValueError):
        is_visible(A, B, [0] * 5, ROW, sample_spacing=0)
    with pytest.raises(MalformedGridError):
        is_visible(A, B, [0] * 4, ROW)
