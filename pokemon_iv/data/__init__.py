"""Static game data bundled with pokemon_iv."""

from __future__ import annotations

from .stardust import STARDUST_LEVEL_LOOKUP, possible_levels, stardust_costs

__all__ = [
    "STARDUST_LEVEL_LOOKUP",
    "possible_levels",
    "stardust_costs",
]
