"""A* shortest-path search over a flat tile map.

Costs are fixed-point: an orthogonal step costs 10 and a diagonal step 14
(an integer stand-in for 10 * sqrt(2)), so all g/h/f values stay integers and
comparisons are exact.

Usage:
    path = find_path(
        start_index=12,
        destination_index=87,
        map_array=wall_layer,
        width_in_tiles=16,
        obstacle_gids={1, 2},
        heuristic="diagonal",
    )
    # path == [12, 29, 46, ..., 87], or [] when the destination is unreachable

Search state lives in a per-call arena: a list with one optional
``SearchNode`` slot per cell, filled only for cells the search touches. Nothing
survives the call, so concurrent searches over the same map are safe.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .config import VALID_BUDGET_POLICIES, Config
from .errors import InvalidHeuristicError, MalformedGridError, SearchAbortedError
from .grid import cell_coordinates, require_index, validate_map_width
from .logging_utils import debug_enabled, log_deterministic, log_error, log_info

STRAIGHT_COST = 10
DIAGONAL_COST = 14

# (column delta, row delta). Cross order is up, left, right, down.
_CROSS_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))
_ALL_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


def manhattan(vx: int, vy: int) -> int:
    """Orthogonal-only distance estimate from absolute column/row deltas."""
    return (vx + vy) * STRAIGHT_COST


def euclidean(vx: int, vy: int) -> int:
    """Straight-line distance estimate, floored to an integer cost."""
    return math.floor(math.sqrt(vx * vx + vy * vy) * STRAIGHT_COST)


def diagonal(vx: int, vy: int) -> int:
    """Octile distance: diagonal steps for the shared span, straight for the rest."""
    return math.floor(DIAGONAL_COST * min(vx, vy) + STRAIGHT_COST * abs(vx - vy))


HEURISTICS: Dict[str, Callable[[int, int], int]] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "diagonal": diagonal,
}


def _require_width(width_in_tiles: int) -> None:
    if width_in_tiles <= 0:
        raise MalformedGridError(f"width_in_tiles must be positive, got {width_in_tiles}")


def _resolve_heuristic(name: str) -> Callable[[int, int], int]:
    try:
        return HEURISTICS[name]
    except (KeyError, TypeError):
        raise InvalidHeuristicError(name, HEURISTICS) from None


def heuristic_cost(name: str, from_index: int, to_index: int, width_in_tiles: int) -> int:
    """Evaluate heuristic ``name`` between two cells of a map ``width_in_tiles`` wide."""

    estimate = _resolve_heuristic(name)
    _require_width(width_in_tiles)
    from_col, from_row = cell_coordinates(from_index, width_in_tiles)
    to_col, to_row = cell_coordinates(to_index, width_in_tiles)
    return estimate(abs(to_col - from_col), abs(to_row - from_row))


@dataclass
class SearchNode:
    """Per-cell search record. Only valid for the duration of one search."""

    index: int
    row: int
    column: int
    g: int = 0
    h: int = 0
    f: int = 0
    # Back-pointer for path reconstruction; not part of equality or repr
    # to avoid walking the whole chain.
    parent: Optional["SearchNode"] = field(default=None, repr=False, compare=False)
    closed: bool = False


def _reconstruct(node: SearchNode) -> List[int]:
    path: List[int] = []
    current: Optional[SearchNode] = node
    while current is not None:
        path.append(current.index)
        current = current.parent
    path.reverse()
    return path


def find_path(
    start_index: int,
    destination_index: int,
    map_array: Sequence[int],
    width_in_tiles: int,
    obstacle_gids: Iterable[int] = (),
    heuristic: str = "manhattan",
    allow_diagonal_movement: bool = True,
    *,
    max_steps: Optional[int] = None,
    on_budget_exhausted: Optional[str] = None,
) -> List[int]:
    """Return the shortest path between two cells as a list of map indexes.

    The path runs from ``start_index`` to ``destination_index`` inclusive.
    An empty list means no path exists; that is a normal outcome, not an
    error. When start and destination coincide the result is ``[start]``
    whatever the cell holds.

    Neighbor rules:
    - Up to 8 neighbors (4 when ``allow_diagonal_movement`` is False).
    - A neighbor never wraps across the left/right edge onto another row,
      and rows above the first or below the last do not exist.
    - Cells whose gid is in ``obstacle_gids`` are impassable. A diagonal step
      between two obstacles that only touch at a corner is allowed.

    Expansion always takes the open node with the lowest f. Equal f values
    are broken by lower h (closer to the goal), then by lower index, so the
    same inputs always give the same path.

    Search budget:
        ``max_steps`` caps how many nodes are expanded. ``None`` falls back to
        ``Config.MAX_SEARCH_STEPS`` and ``0`` means unlimited. When the budget
        runs out, ``on_budget_exhausted`` (default
        ``Config.ON_BUDGET_EXHAUSTED``) chooses between ``"partial"``, which
        returns the path to the expanded node closest to the destination, and
        ``"raise"``, which raises ``SearchAbortedError``.

    Raises:
        InvalidHeuristicError: Unknown ``heuristic``; raised before any search work.
        MalformedGridError: ``map_array`` is empty or not whole rows of ``width_in_tiles``.
        InvalidIndexError: ``start_index`` or ``destination_index`` is off the map.
        SearchAbortedError: Budget exhausted under the ``"raise"`` policy.
    """

    estimate = _resolve_heuristic(heuristic)
    height_in_tiles = validate_map_width(map_array, width_in_tiles)
    cell_count = len(map_array)
    require_index(start_index, cell_count)
    require_index(destination_index, cell_count)

    budget = Config.MAX_SEARCH_STEPS if max_steps is None else max_steps
    if budget < 0:
        raise ValueError(f"max_steps must be >= 0 (0 means unlimited), got {budget}")
    policy = Config.ON_BUDGET_EXHAUSTED if on_budget_exhausted is None else on_budget_exhausted
    if policy not in VALID_BUDGET_POLICIES:
        raise ValueError(
            f"on_budget_exhausted must be one of {', '.join(VALID_BUDGET_POLICIES)}, got {policy!r}"
        )

    if start_index == destination_index:
        return [start_index]

    debug = debug_enabled("DEBUG_PATHFINDING")
    blocked = frozenset(obstacle_gids)
    offsets = _ALL_OFFSETS if allow_diagonal_movement else _CROSS_OFFSETS
    dest_col, dest_row = cell_coordinates(destination_index, width_in_tiles)

    arena: List[Optional[SearchNode]] = [None] * cell_count

    start_col, start_row = cell_coordinates(start_index, width_in_tiles)
    start = SearchNode(index=start_index, row=start_row, column=start_col)
    start.h = estimate(abs(dest_col - start_col), abs(dest_row - start_row))
    start.f = start.h
    arena[start_index] = start

    open_heap: List[Tuple[int, int, int]] = [(start.f, start.h, start_index)]
    closest = start
    steps = 0

    while open_heap:
        f, _, index = heapq.heappop(open_heap)
        current = arena[index]
        # Skip entries superseded by a cheaper route or already expanded
        if current.closed or f != current.f:
            continue

        if index == destination_index:
            path = _reconstruct(current)
            if debug:
                log_deterministic(
                    f"A* {start_index}->{destination_index} ({heuristic}): "
                    f"expanded {steps} nodes, path of {len(path)} cells, cost {current.g}"
                )
            return path

        if budget and steps >= budget:
            if policy == "raise":
                raise SearchAbortedError(
                    steps=steps, start_index=start_index, destination_index=destination_index
                )
            log_error(
                f"A* {start_index}->{destination_index} hit its budget of {budget} expansions; "
                f"returning partial path to {closest.index}"
            )
            return _reconstruct(closest)

        current.closed = True
        steps += 1
        if (current.h, current.g, current.index) < (closest.h, closest.g, closest.index):
            closest = current

        for d_col, d_row in offsets:
            column = current.column + d_col
            row = current.row + d_row
            if not (0 <= column < width_in_tiles and 0 <= row < height_in_tiles):
                continue
            neighbor_index = column + row * width_in_tiles
            if map_array[neighbor_index] in blocked:
                continue

            cost = STRAIGHT_COST if d_col == 0 or d_row == 0 else DIAGONAL_COST
            g = current.g + cost
            neighbor = arena[neighbor_index]

            if neighbor is None:
                neighbor = SearchNode(index=neighbor_index, row=row, column=column)
                neighbor.h = estimate(abs(dest_col - column), abs(dest_row - row))
                neighbor.g = g
                neighbor.f = g + neighbor.h
                neighbor.parent = current
                arena[neighbor_index] = neighbor
                heapq.heappush(open_heap, (neighbor.f, neighbor.h, neighbor_index))
            elif g + neighbor.h < neighbor.f:
                # Cheaper route to a known node: re-parent it. Closed nodes
                # keep their closed status and are not expanded again.
                neighbor.g = g
                neighbor.f = g + neighbor.h
                neighbor.parent = current
                if not neighbor.closed:
                    heapq.heappush(open_heap, (neighbor.f, neighbor.h, neighbor_index))

    if debug:
        log_info(
            f"A* {start_index}->{destination_index} ({heuristic}): "
            f"no path after expanding {steps} nodes"
        )
    return []


def path_cost(path: Sequence[int], width_in_tiles: int) -> int:
    """Total movement cost of ``path`` using the search's 10/14 step costs.

    Raises:
        MalformedGridError: If ``width_in_tiles`` is not positive.
        ValueError: If two consecutive cells are not neighbors.
    """

    _require_width(width_in_tiles)
    total = 0
    for previous, current in zip(path, path[1:]):
        prev_col, prev_row = cell_coordinates(previous, width_in_tiles)
        col, row = cell_coordinates(current, width_in_tiles)
        d_col, d_row = abs(col - prev_col), abs(row - prev_row)
        if max(d_col, d_row) != 1:
            raise ValueError(f"Cells {previous} and {current} are not adjacent")
        total += DIAGONAL_COST if d_col and d_row else STRAIGHT_COST
    return total
