"""Services for scheduling logic."""

from .fairness import imbalance_threshold, is_imbalanced, rank_scouters, suggested_max_matches
from .positions import get_positions, positions_per_match
from .turns import build_shift_config, calculate_turns

__all__ = [
    "build_shift_config",
    "calculate_turns",
    "get_positions",
    "imbalance_threshold",
    "is_imbalanced",
    "positions_per_match",
    "rank_scouters",
    "suggested_max_matches",
]
