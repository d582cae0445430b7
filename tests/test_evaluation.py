"""Tests for matching recorded appraisals against candidate spreads."""

from __future__ import annotations

import pytest

from pokemon_iv import IndividualValue, OverallAppraisal, PokeEvaluation, StatRange, TopStat


@pytest.fixture
def hundo_evaluation() -> PokeEvaluation:
    return PokeEvaluation(OverallAppraisal.GREAT, StatRange.PERFECT, TopStat(True, True, True))


def test_accessors_return_stored_values() -> None:
    top_stat = TopStat(False, True, False)
    evaluation = PokeEvaluation(OverallAppraisal.OKAY, StatRange.HIGH, top_stat)
    assert evaluation.overall is OverallAppraisal.OKAY
    assert evaluation.stat_range is StatRange.HIGH
    assert evaluation.top_stat is top_stat


def test_matches_only_the_perfect_spread(
    hundo_evaluation: PokeEvaluation, all_ivs: list[IndividualValue]
) -> None:
    matches = [iv for iv in all_ivs if iv.matches_evaluation(hundo_evaluation)]
    assert matches == [IndividualValue(15, 15, 15)]


def test_all_three_parts_are_required() -> None:
    iv = IndividualValue(13, 9, 9)  # sum 31, max 13, attack alone
    assert iv.matches_evaluation(
        PokeEvaluation(OverallAppraisal.GOOD, StatRange.HIGH, TopStat(True, False, False))
    )
    assert not iv.matches_evaluation(
        PokeEvaluation(OverallAppraisal.OKAY, StatRange.HIGH, TopStat(True, False, False))
    )
    assert not iv.matches_evaluation(
        PokeEvaluation(OverallAppraisal.GOOD, StatRange.AVERAGE, TopStat(True, False, False))
    )
    assert not iv.matches_evaluation(
        PokeEvaluation(OverallAppraisal.GOOD, StatRange.HIGH, TopStat(True, True, False))
    )


def test_every_spread_matches_its_own_evaluation(all_ivs: list[IndividualValue]) -> None:
    for iv in all_ivs:
        evaluation = PokeEvaluation(iv.overall_appraisal(), iv.stat_range(), iv.top_stat())
        assert iv.matches_evaluation(evaluation)


def test_bounds_pair() -> None:
    evaluation = PokeEvaluation(OverallAppraisal.GREAT, StatRange.HIGH, TopStat(True, False, False))
    lower, upper = evaluation.bounds()
    assert lower == IndividualValue(7, 7, 7)
    assert upper == IndividualValue(14, 14, 14)


def test_evaluation_is_hashable_value() -> None:
    first = PokeEvaluation(OverallAppraisal.BAD, StatRange.LOW, TopStat(True, False, False))
    second = PokeEvaluation(OverallAppraisal.BAD, StatRange.LOW, TopStat(True, False, False))
    assert first == second
    assert hash(first) == hash(second)


def test_raw_ints_and_swapped_fields_do_not_match() -> None:
    iv = IndividualValue(13, 9, 9)
    typed = PokeEvaluation(OverallAppraisal.GOOD, StatRange.HIGH, TopStat(True, False, False))
    raw = PokeEvaluation(2, 2, TopStat(True, False, False))  # type: ignore[arg-type]
    swapped = PokeEvaluation(
        StatRange.HIGH, OverallAppraisal.GOOD, TopStat(True, False, False)  # type: ignore[arg-type]
    )
    assert iv.matches_evaluation(typed)
    assert not iv.matches_evaluation(raw)
    assert not iv.matches_evaluation(swapped)
    assert raw != typed
    assert swapped != typed
