"""Utilities layered on the search and grid helpers.

Move validation for rule engines that accept or reject agent moves, and an
ASCII renderer for debugging maps and paths in a terminal or test output.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .config import Config
from .grid import validate_map_width
from .pathfinding import find_path


def validate_move(
    start_index: int,
    target_index: int,
    map_array: Sequence[int],
    width_in_tiles: int,
    obstacle_gids: Iterable[int] = (),
    *,
    max_distance: Optional[int] = None,
    allow_diagonal_movement: bool = False,
) -> bool:
    """Validate whether an agent can move from ``start_index`` to ``target_index``.

    Checks, in order:
    1. Target index is on the map
    2. Target cell is not an obstacle
    3. A path exists from start to target (respecting obstacles)
    4. Optional: path length in steps <= max_distance (single-tick movement limit)

    The search uses ``Config.DEFAULT_HEURISTIC`` and is orthogonal-only by
    default, which suits tile-by-tile maze movement.

    Returns:
        True if the move is valid and reachable, False otherwise

    Usage in a rule engine:
        if not validate_move(agent_index, action.target, walls, 16, {1}, max_distance=1):
            return False  # reject action
    """
    validate_map_width(map_array, width_in_tiles)
    blocked = frozenset(obstacle_gids)

    # Bounds first - an off-map target is a rejected move, not an error
    if not 0 <= target_index < len(map_array):
        return False

    if map_array[target_index] in blocked:
        return False

    path = find_path(
        start_index,
        target_index,
        map_array,
        width_in_tiles,
        blocked,
        Config.DEFAULT_HEURISTIC,
        allow_diagonal_movement,
    )
    if not path:
        return False  # target walled off

    # Path length includes both start and end, so subtract 1 for actual steps
    if max_distance is not None and len(path) - 1 > max_distance:
        return False

    return True


_DEFAULT_GID_SYMBOLS: Dict[int, str] = {
    0: "  ",
}
_DEFAULT_OBSTACLE_SYMBOL = "██"
_PATH_SYMBOL = "· "
_START_SYMBOL = "S "
_END_SYMBOL = "E "


def render_ascii_map(
    map_array: Sequence[int],
    width_in_tiles: int,
    *,
    path: Optional[Sequence[int]] = None,
    symbols: Optional[Dict[int, str]] = None,
) -> str:
    """Render a map array (and optionally a path over it) as text.

    Each cell takes two characters so the output keeps a square-ish aspect.
    gid 0 is blank and any gid without a symbol draws as a solid block;
    ``symbols`` overrides or extends the gid table. Path cells draw as dots,
    with ``S`` and ``E`` marking the ends.
    """

    rows = validate_map_width(map_array, width_in_tiles)

    mapping = {**_DEFAULT_GID_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    overlay: Dict[int, str] = {}
    if path:
        for index in path:
            overlay[index] = _PATH_SYMBOL
        overlay[path[0]] = _START_SYMBOL
        overlay[path[-1]] = _END_SYMBOL

    lines: List[str] = []
    for row in range(rows):
        cells: List[str] = []
        for column in range(width_in_tiles):
            index = column + row * width_in_tiles
            if index in overlay:
                cells.append(overlay[index])
            else:
                cells.append(mapping.get(map_array[index], _DEFAULT_OBSTACLE_SYMBOL))
        lines.append("".join(cells))

    return "\n".join(lines)
