"""
tilegrid Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

VALID_BUDGET_POLICIES = ("partial", "raise")


class Config:
    """Library configuration loaded from environment variables."""

    # Search budget
    # Maximum node expansions per find_path call; 0 disables the budget
    MAX_SEARCH_STEPS: int = int(os.getenv("TILEGRID_MAX_SEARCH_STEPS", "0"))
    # What to do when the budget runs out: "partial" or "raise"
    ON_BUDGET_EXHAUSTED: str = os.getenv("TILEGRID_ON_BUDGET_EXHAUSTED", "partial")

    # Heuristic used by helpers that do not take one explicitly
    DEFAULT_HEURISTIC: str = os.getenv("TILEGRID_DEFAULT_HEURISTIC", "manhattan")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        # Imported here to keep config importable on its own
        from .pathfinding import HEURISTICS

        if cls.MAX_SEARCH_STEPS < 0:
            raise ValueError(
                "TILEGRID_MAX_SEARCH_STEPS must be >= 0 (0 means unlimited), "
                f"got {cls.MAX_SEARCH_STEPS}"
            )

        if cls.ON_BUDGET_EXHAUSTED not in VALID_BUDGET_POLICIES:
            raise ValueError(
                "TILEGRID_ON_BUDGET_EXHAUSTED must be one of "
                f"{', '.join(VALID_BUDGET_POLICIES)}, got {cls.ON_BUDGET_EXHAUSTED!r}"
            )

        if cls.DEFAULT_HEURISTIC not in HEURISTICS:
            raise ValueError(
                "TILEGRID_DEFAULT_HEURISTIC must be one of "
                f"{', '.join(sorted(HEURISTICS))}, got {cls.DEFAULT_HEURISTIC!r}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        budget = cls.MAX_SEARCH_STEPS or "unlimited"
        lines = [
            "tilegrid Configuration:",
            f"  Search Budget: {budget}",
            f"  On Budget Exhausted: {cls.ON_BUDGET_EXHAUSTED}",
            f"  Default Heuristic: {cls.DEFAULT_HEURISTIC}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
