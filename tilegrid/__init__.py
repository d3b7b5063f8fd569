"""
tilegrid - spatial reasoning for tile-based 2D worlds.

Grid index math, tile collision probes, A* pathfinding, line of sight and
maze direction helpers over flat (Tiled-style) map arrays.

Pure and synchronous.
No rendering engine, no file I/O, no global state.
Map arrays are owned by the caller and never mutated.
"""

__version__ = "0.1.0"

# Data model
from .schemas import (
    Grid,
    Point,
    Rect,
    Shape,
    CornerPoints,
    TileRect,
    CollisionResult,
)

# Errors
from .errors import (
    TileGridError,
    InvalidHeuristicError,
    InvalidIndexError,
    MalformedGridError,
    InvalidCollisionModeError,
    SearchAbortedError,
)

# Grid index math
from .grid import (
    cell_index,
    cell_at,
    cell_coordinates,
    cell_rect,
    gid_at,
    neighbors8,
    neighbors_cross,
    neighbors_diagonal,
    require_index,
    update_map,
    validate_map,
)

# Probes and search
from .collision import COLLISION_MODES, corner_points, hit_test_tile
from .pathfinding import (
    DIAGONAL_COST,
    HEURISTICS,
    STRAIGHT_COST,
    SearchNode,
    find_path,
    heuristic_cost,
    path_cost,
)
from .line_of_sight import is_visible, sample_points
from .directions import (
    TRAPPED,
    Direction,
    can_change_direction,
    closest_direction,
    random_direction,
    valid_directions,
)
from .helpers import render_ascii_map, validate_move
from .config import Config

__all__ = [
    # Data model
    "Grid",
    "Point",
    "Rect",
    "Shape",
    "CornerPoints",
    "TileRect",
    "CollisionResult",
    # Errors
    "TileGridError",
    "InvalidHeuristicError",
    "InvalidIndexError",
    "MalformedGridError",
    "InvalidCollisionModeError",
    "SearchAbortedError",
    # Grid index math
    "cell_index",
    "cell_at",
    "cell_coordinates",
    "cell_rect",
    "gid_at",
    "neighbors8",
    "neighbors_cross",
    "neighbors_diagonal",
    "require_index",
    "update_map",
    "validate_map",
    # Collision
    "COLLISION_MODES",
    "corner_points",
    "hit_test_tile",
    # Pathfinding
    "DIAGONAL_COST",
    "HEURISTICS",
    "STRAIGHT_COST",
    "SearchNode",
    "find_path",
    "heuristic_cost",
    "path_cost",
    # Line of sight
    "is_visible",
    "sample_points",
    # Directions
    "TRAPPED",
    "Direction",
    "can_change_direction",
    "closest_direction",
    "random_direction",
    "valid_directions",
    # Helpers
    "render_ascii_map",
    "validate_move",
    # Configuration
    "Config",
]
