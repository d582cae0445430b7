"""Recorded in-game appraisal of a single Pokémon."""

from __future__ import annotations

from dataclasses import dataclass

from .appraisal import OverallAppraisal, StatRange
from .ivs import IndividualValue, TopStat


@dataclass(frozen=True)
class PokeEvaluation:
    """Overall verdict, stat range, and top stat reported by the team leader.

    The evaluation is a passive claim; pass it to
    :meth:`IndividualValue.matches_evaluation` to test a candidate spread.
    """

    overall: OverallAppraisal
    stat_range: StatRange
    top_stat: TopStat

    def bounds(self) -> tuple[IndividualValue, IndividualValue]:
        """Return ``(lower, upper)`` componentwise bounds for pre-filtering.

        The bounds come straight from :meth:`OverallAppraisal.min_stats` and
        :meth:`StatRange.max_stats` and are coarser than the matching rules.
        A spread inside them may still fail to match.
        """

        return self.overall.min_stats(), self.stat_range.max_stats()


__all__ = ["PokeEvaluation"]
