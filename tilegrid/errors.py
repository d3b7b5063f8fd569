"""Exception types raised by tilegrid.

Every failure the library raises derives from ``TileGridError`` so callers can
catch the whole family at once. Where a failure is also a plain value or index
problem, the class additionally inherits the matching builtin so existing
``except ValueError`` / ``except IndexError`` handlers keep working.

A missing path is not an error: ``find_path`` returns an empty list.
"""

from __future__ import annotations

from typing import Iterable, Optional


class TileGridError(Exception):
    """Base class for all tilegrid errors."""


class InvalidHeuristicError(TileGridError, ValueError):
    """Raised when a search is asked to use an unknown heuristic name."""

    def __init__(self, name: str, valid: Iterable[str]) -> None:
        self.name = name
        self.valid = sorted(valid)
        super().__init__(
            f"Unknown heuristic {name!r}. Expected one of: {', '.join(self.valid)}"
        )


class InvalidIndexError(TileGridError, IndexError):
    """Raised when a caller-supplied cell index or coordinate is off the grid."""

    def __init__(self, index: Optional[int], cell_count: int, *, detail: str = "") -> None:
        self.index = index
        self.cell_count = cell_count
        message = f"Cell index {index} is outside the grid (valid range 0..{cell_count - 1})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedGridError(TileGridError, ValueError):
    """Raised when a map array does not fit the grid it is used with."""


class InvalidCollisionModeError(TileGridError, ValueError):
    """Raised when ``hit_test_tile`` receives an unknown points mode."""

    def __init__(self, mode: str, valid: Iterable[str]) -> None:
        self.mode = mode
        self.valid = sorted(valid)
        super().__init__(
            f"Unknown collision mode {mode!r}. Expected one of: {', '.join(self.valid)}"
        )


class SearchAbortedError(TileGridError):
    """Raised when a path search runs out of its step budget.

    Only raised under the ``"raise"`` budget policy. The default ``"partial"``
    policy returns the best partial path instead.
    """

    def __init__(self, *, steps: int, start_index: int, destination_index: int) -> None:
        self.steps = steps
        self.start_index = start_index
        self.destination_index = destination_index
        message = (
            f"Path search from {start_index} to {destination_index} aborted after "
            f"{steps} expansions.\n\n"
            "Remediation tips:\n"
            "  - Raise max_steps (or TILEGRID_MAX_SEARCH_STEPS), 0 means unlimited\n"
            "  - Use on_budget_exhausted='partial' to accept the closest partial path\n"
            "  - DEBUG_PATHFINDING=true to inspect search statistics"
        )
        super().__init__(message)
