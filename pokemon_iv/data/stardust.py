"""Stardust power-up costs and the Pokémon levels that charge them."""

from __future__ import annotations

from typing import Final

# Ascending by cost. Rows are kept exactly as observed in game data,
# including the irregular 1000, 1600, and 4000 entries.
STARDUST_LEVEL_LOOKUP: Final[tuple[tuple[int, tuple[float, ...]], ...]] = (
    (200, (1.0, 1.5, 2.0, 2.5)),
    (400, (3.0, 3.5, 4.0, 4.5)),
    (600, (5.0, 5.5, 6.0, 6.5)),
    (800, (7.0, 7.5, 8.0, 8.5)),
    (1_000, (9.0, 9.5, 10.0, 11.5)),
    (1_300, (11.0, 11.5, 12.0, 12.5)),
    (1_600, (13.0, 13.5, 14.5, 15.0)),
    (1_900, (15.0, 15.5, 16.0, 16.5)),
    (2_200, (17.0, 17.5, 18.0, 18.5)),
    (2_500, (19.0, 19.5, 20.0, 20.5)),
    (3_000, (21.0, 21.5, 22.0, 22.5)),
    (3_500, (23.0, 23.5, 24.0, 24.5)),
    (4_000, (25.0, 25.5, 26.5, 27.0)),
    (4_500, (27.0, 27.5, 28.0, 28.5)),
    (5_000, (29.0, 29.5, 30.0, 30.5)),
    (6_000, (31.0, 31.5, 32.0, 32.5)),
    (7_000, (33.0, 33.5, 34.0, 34.5)),
    (8_000, (35.0, 35.5, 36.0, 36.5)),
    (9_000, (37.0, 37.5, 38.0, 38.5)),
    (10_000, (39.0, 39.5, 40.0)),
)


def possible_levels(cost_to_powerup: int) -> tuple[float, ...] | None:
    """Return the levels whose next power-up costs *cost_to_powerup* stardust.

    Only exact costs from :data:`STARDUST_LEVEL_LOOKUP` are recognised; any
    other amount returns ``None``. The highest level returned is ``40.0``.

    >>> possible_levels(2_200)
    (17.0, 17.5, 18.0, 18.5)
    >>> possible_levels(2_100) is None
    True
    """

    for cost, levels in STARDUST_LEVEL_LOOKUP:
        if cost == cost_to_powerup:
            return levels
    return None


def stardust_costs() -> tuple[int, ...]:
    """Return every known power-up cost in ascending order."""

    return tuple(cost for cost, _ in STARDUST_LEVEL_LOOKUP)


__all__ = ["STARDUST_LEVEL_LOOKUP", "possible_levels", "stardust_costs"]
