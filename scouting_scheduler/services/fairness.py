"""Fairness ordering and workload-balance checks for scouters."""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Sequence


def rank_scouters(scouters: Sequence[str], turn_counts: Mapping[str, int]) -> List[str]:
    """
    Order scouters by how many turns they have worked so far.

    The sort is stable: scouters with equal counts keep roster order, which
    keeps generation deterministic.
    """
    return sorted(scouters, key=lambda name: turn_counts.get(name, 0))


def imbalance_threshold(total_matches: int, scouter_count: int, slack_factor: int) -> int:
    """Largest tolerated spread between the busiest and idlest scouter."""
    if scouter_count <= 0:
        return 0
    return math.ceil(total_matches / scouter_count) * slack_factor


def workload_spread(match_counts: Mapping[str, int]) -> tuple[int, int]:
    """Return (min, max) of match counts; (0, 0) for an empty mapping."""
    if not match_counts:
        return 0, 0
    values = list(match_counts.values())
    return min(values), max(values)


def is_imbalanced(
    match_counts: Mapping[str, int],
    total_matches: int,
    scouter_count: int,
    slack_factor: int,
) -> bool:
    low, high = workload_spread(match_counts)
    return high - low > imbalance_threshold(total_matches, scouter_count, slack_factor)


def suggested_max_matches(total_matches: int, positions: int, scouter_count: int) -> int:
    """Smallest per-scouter cap that can still cover every assignment."""
    if scouter_count <= 0:
        return 0
    return math.ceil(total_matches * positions / scouter_count)


def empty_counts(scouters: Sequence[str]) -> Dict[str, int]:
    return {name: 0 for name in scouters}
