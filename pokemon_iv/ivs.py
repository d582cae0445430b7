"""Validated individual value spreads and top-stat predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .appraisal import OverallAppraisal, StatRange
from .errors import EmptyTopStatError, StatOutOfRangeError
from .observability import get_logger
from .stats import IV_MAX, IV_MIN, STAT_NAMES, valid_stat

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .evaluation import PokeEvaluation

LOGGER = get_logger(__name__)

IVSpread = tuple[int, int, int]


@dataclass(frozen=True)
class TopStat:
    """The set of stats tied for the highest value in a spread."""

    attack_hi: bool
    defense_hi: bool
    stamina_hi: bool

    def __post_init__(self) -> None:
        for name in ("attack_hi", "defense_hi", "stamina_hi"):
            object.__setattr__(self, name, bool(getattr(self, name)))
        if not (self.attack_hi or self.defense_hi or self.stamina_hi):
            raise EmptyTopStatError(
                "TopStat requires at least one flagged stat.",
                remediation="Flag the stat (or stats) the appraisal called out as best.",
            )

    @classmethod
    def new(cls, attack_hi: bool, defense_hi: bool, stamina_hi: bool) -> "TopStat | None":
        """Return a :class:`TopStat`, or ``None`` when no flag is set."""

        if not (attack_hi or defense_hi or stamina_hi):
            return None
        return cls(attack_hi, defense_hi, stamina_hi)

    def stat_names(self) -> tuple[str, ...]:
        """Return the flagged stat names in ``attack``/``defense``/``stamina`` order."""

        flags = (self.attack_hi, self.defense_hi, self.stamina_hi)
        return tuple(name for name, flag in zip(STAT_NAMES, flags) if flag)

    def matches(self, value: "IndividualValue") -> bool:
        """Return ``True`` when the flags equal exactly the stats tied for highest."""

        highest = value.highest_stat_value()
        return (
            self.attack_hi == (value.attack == highest)
            and self.defense_hi == (value.defense == highest)
            and self.stamina_hi == (value.stamina == highest)
        )


@dataclass(frozen=True)
class IndividualValue:
    """Hidden attack, defence, and stamina IVs, each between 0 and 15."""

    attack: int
    defense: int
    stamina: int

    def __post_init__(self) -> None:
        """Reject spreads outside the legal stat domain."""

        invalid = {
            name: value
            for name, value in zip(STAT_NAMES, (self.attack, self.defense, self.stamina))
            if not valid_stat(value)
        }
        if invalid:
            raise StatOutOfRangeError(
                f"IV stats must be integers between {IV_MIN} and {IV_MAX} inclusive.",
                remediation="Use IndividualValue.new() to receive None for invalid spreads.",
                context=invalid,
            )

    @classmethod
    def new(cls, attack: int, defense: int, stamina: int) -> "IndividualValue | None":
        """Return a validated spread, or ``None`` when any stat is out of range."""

        if not (valid_stat(attack) and valid_stat(defense) and valid_stat(stamina)):
            LOGGER.debug(
                "Rejected out-of-range IV spread",
                extra={"event": "iv_rejected", "ivs": [attack, defense, stamina]},
            )
            return None
        return cls(attack, defense, stamina)

    @classmethod
    def from_tuple(cls, ivs: IVSpread) -> "IndividualValue | None":
        """Tuple-accepting variant of :meth:`new`; ``None`` unless given exactly three stats."""

        if len(ivs) != 3:
            LOGGER.debug(
                "Rejected malformed IV spread",
                extra={"event": "iv_rejected", "ivs": list(ivs)},
            )
            return None
        attack, defense, stamina = ivs
        return cls.new(attack, defense, stamina)

    valid_stat = staticmethod(valid_stat)

    def as_tuple(self) -> IVSpread:
        return self.attack, self.defense, self.stamina

    def total(self) -> int:
        return self.attack + self.defense + self.stamina

    def highest_stat_value(self) -> int:
        return max(self.attack, self.defense, self.stamina)

    def top_stat(self) -> TopStat:
        """Return the stats tied for the highest value; ties are preserved."""

        highest = self.highest_stat_value()
        flags = (self.attack == highest, self.defense == highest, self.stamina == highest)
        assert any(flags), "a spread always has at least one highest stat"
        return TopStat(*flags)

    def overall_appraisal(self) -> OverallAppraisal:
        return OverallAppraisal.from_total(self.total())

    def stat_range(self) -> StatRange:
        return StatRange.from_highest(self.highest_stat_value())

    def is_perfect(self) -> bool:
        """Return ``True`` only for a ``15/15/15`` spread."""

        return self.attack == IV_MAX and self.defense == IV_MAX and self.stamina == IV_MAX

    def matches_evaluation(self, evaluation: "PokeEvaluation") -> bool:
        """Return ``True`` when every part of *evaluation* agrees with this spread.

        The overall verdict, the stat range, and the top-stat set must all
        match. A top stat naming only attack does not match a spread whose
        attack and defence are tied for highest.
        """

        return (
            self.overall_appraisal() == evaluation.overall
            and self.stat_range() == evaluation.stat_range
            and evaluation.top_stat.matches(self)
        )

    def is_within(self, lower: "IndividualValue", upper: "IndividualValue") -> bool:
        """Return ``True`` when each stat lies between *lower* and *upper* inclusive."""

        return all(
            low <= stat <= high
            for low, stat, high in zip(lower.as_tuple(), self.as_tuple(), upper.as_tuple())
        )

    def __str__(self) -> str:
        """Render the spread in ``Atk/Def/Sta`` order."""

        return f"{self.attack}/{self.defense}/{self.stamina}"


__all__ = ["IVSpread", "IndividualValue", "TopStat"]
