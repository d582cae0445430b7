"""Legal numeric domain for a single individual value stat."""

from __future__ import annotations

from typing import Any, Final

IV_MIN: Final = 0
IV_MAX: Final = 15

STAT_NAMES: Final = ("attack", "defense", "stamina")


def valid_stat(value: Any) -> bool:
    """Return ``True`` when *value* is an integer within ``[IV_MIN, IV_MAX]``."""

    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return IV_MIN <= value <= IV_MAX


__all__ = ["IV_MAX", "IV_MIN", "STAT_NAMES", "valid_stat"]
