"""Round-robin rotation for turn-scoped roles. Pure computation, no side effects."""

from __future__ import annotations

from typing import Sequence


def pick_round_robin(roster: Sequence[str], rotation_index: int) -> str:
    """Return the roster member on duty for ``rotation_index``; '' for an empty roster."""
    if not roster:
        return ""
    return roster[rotation_index % len(roster)]
