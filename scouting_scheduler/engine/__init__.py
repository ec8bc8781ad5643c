"""Schedule generation engine."""

from .generator import generate_from_config, generate_schedule
from .rotation import pick_round_robin

__all__ = [
    "generate_from_config",
    "generate_schedule",
    "pick_round_robin",
]
