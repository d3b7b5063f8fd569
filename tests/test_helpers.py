"""Tests for move validation and ASCII map rendering."""

import pytest

from tilegrid import Config, InvalidIndexError, render_ascii_map, validate_move

# 5x5 map with a wall in the centre cell (index 12)
WALLED = [0] * 25
WALLED[12] = 1


def test_validate_move():
    # Valid move: adjacent cell, walkable
    assert validate_move(6, 7, WALLED, 5, {1}) is True

    # Invalid: target is an obstacle
    assert validate_move(6, 12, WALLED, 5, {1}) is False

    # Invalid: out of bounds
    assert validate_move(6, 30, WALLED, 5, {1}) is False
    assert validate_move(6, -1, WALLED, 5, {1}) is False

    # Valid path exists going around obstacle
    assert validate_move(7, 17, WALLED, 5, {1}) is True

    # Invalid: max_distance constraint violated (path too long)
    # Path from 0 to 24 requires 8 orthogonal steps
    assert validate_move(0, 24, WALLED, 5, {1}, max_distance=4) is False
    # Same path allowed without distance constraint
    assert validate_move(0, 24, WALLED, 5, {1}) is True
    assert validate_move(0, 24, WALLED, 5, {1}, max_distance=8) is True

    # Staying put is always a zero-step move
    assert validate_move(3, 3, WALLED, 5, {1}, max_distance=0) is True


def test_validate_move_diagonal_single_step():
    assert validate_move(0, 6, WALLED, 5, {1}, max_distance=1) is False
    assert validate_move(0, 6, WALLED, 5, {1}, max_distance=1, allow_diagonal_movement=True) is True


def test_validate_move_unreachable_target():
    boxed = [0] * 25
    for index in (7, 11, 13, 17):
        boxed[index] = 1
    assert validate_move(0, 12, boxed, 5, {1}) is False


def test_validate_move_uses_configured_heuristic(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_HEURISTIC", "euclidean")
    assert validate_move(0, 24, WALLED, 5, {1}) is True

    monkeypatch.setattr(Config, "DEFAULT_HEURISTIC", "bogus")
    with pytest.raises(ValueError):
        validate_move(0, 24, WALLED, 5, {1})


def test_validate_move_rejects_bad_start():
    with pytest.raises(InvalidIndexError):
        validate_move(99, 0, WALLED, 5, {1})


def test_render_ascii_map_with_path():
    map_array = [
        0, 1, 0,
        0, 0, 0,
    ]
    rendered = render_ascii_map(map_array, 3, path=[3, 4, 5])
    assert rendered == "  ██  \nS · E "

    custom = render_ascii_map(map_array, 3, symbols={1: "##"})
    assert custom == "  ##  \n      "


def test_render_ascii_map_of_found_path():
    from tilegrid import find_path

    path = find_path(0, 24, WALLED, 5, {1}, allow_diagonal_movement=False)
    rendered = render_ascii_map(WALLED, 5, path=path)
    lines = rendered.split("\n")
    assert len(lines) == 5
    assert lines[0].startswith("S ")
    assert lines[4].endswith("E ")
    assert lines[2][4:6] == "██"
    assert rendered.count("· ") == len(path) - 2
