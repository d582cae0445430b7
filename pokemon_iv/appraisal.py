"""Coarse appraisal classifications derived from an IV spread."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .ivs import IndividualValue

# Inclusive upper stat-sum limits for the first three overall buckets.
BAD_TOTAL_MAX: Final = 22
OKAY_TOTAL_MAX: Final = 29
GOOD_TOTAL_MAX: Final = 36

# Inclusive upper limits on the highest single stat.
LOW_HIGHEST_MAX: Final = 7
AVERAGE_HIGHEST_MAX: Final = 12
HIGH_HIGHEST_MAX: Final = 14


class _RankedEnum(Enum):
    """Enum whose members order by value, only against the same enum."""

    def __lt__(self, other: object) -> bool:
        if self.__class__ is other.__class__:
            return self.value < other.value  # type: ignore[attr-defined]
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if self.__class__ is other.__class__:
            return self.value <= other.value  # type: ignore[attr-defined]
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if self.__class__ is other.__class__:
            return self.value > other.value  # type: ignore[attr-defined]
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if self.__class__ is other.__class__:
            return self.value >= other.value  # type: ignore[attr-defined]
        return NotImplemented


class OverallAppraisal(_RankedEnum):
    """Team leader verdict on the sum of all three stats."""

    BAD = 0
    OKAY = 1
    GOOD = 2
    GREAT = 3

    @classmethod
    def from_total(cls, total: int) -> "OverallAppraisal":
        """Classify a stat sum in ``0..45``."""

        if total <= BAD_TOTAL_MAX:
            return cls.BAD
        if total <= OKAY_TOTAL_MAX:
            return cls.OKAY
        if total <= GOOD_TOTAL_MAX:
            return cls.GOOD
        return cls.GREAT

    def min_stats(self) -> "IndividualValue":
        """Return a componentwise lower bound for spreads with this verdict.

        The bound does not reproduce :meth:`from_total`: ``GREAT`` needs a sum
        of at least 37 but its bound of ``7/7/7`` only implies 21. ``GOOD``
        uses ``1/1/1`` even though ``0/15/15`` sums to 30 and classifies as
        ``GOOD``.
        """

        from .ivs import IndividualValue

        return IndividualValue(*_MIN_STATS[self])


class StatRange(_RankedEnum):
    """Team leader verdict on the highest single stat."""

    LOW = 0
    AVERAGE = 1
    HIGH = 2
    PERFECT = 3

    @classmethod
    def from_highest(cls, highest: int) -> "StatRange":
        """Classify the highest stat value in ``0..15``."""

        if highest <= LOW_HIGHEST_MAX:
            return cls.LOW
        if highest <= AVERAGE_HIGHEST_MAX:
            return cls.AVERAGE
        if highest <= HIGH_HIGHEST_MAX:
            return cls.HIGH
        return cls.PERFECT

    def max_stats(self) -> "IndividualValue":
        """Return a componentwise upper bound for spreads in this range."""

        from .ivs import IndividualValue

        return IndividualValue(*_MAX_STATS[self])


_MIN_STATS: Final = {
    OverallAppraisal.BAD: (0, 0, 0),
    OverallAppraisal.OKAY: (0, 0, 0),
    OverallAppraisal.GOOD: (1, 1, 1),
    OverallAppraisal.GREAT: (7, 7, 7),
}

_MAX_STATS: Final = {
    StatRange.LOW: (7, 7, 7),
    StatRange.AVERAGE: (12, 12, 12),
    StatRange.HIGH: (14, 14, 14),
    StatRange.PERFECT: (15, 15, 15),
}


__all__ = [
    "AVERAGE_HIGHEST_MAX",
    "BAD_TOTAL_MAX",
    "GOOD_TOTAL_MAX",
    "HIGH_HIGHEST_MAX",
    "LOW_HIGHEST_MAX",
    "OKAY_TOTAL_MAX",
    "OverallAppraisal",
    "StatRange",
]
