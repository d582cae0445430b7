"""Shared fixtures for the pokemon_iv test suite."""

from __future__ import annotations

import itertools

import pytest

from pokemon_iv.ivs import IndividualValue


@pytest.fixture(scope="session")
def all_spreads() -> list[tuple[int, int, int]]:
    """Every legal ``(attack, defense, stamina)`` combination."""

    return list(itertools.product(range(16), repeat=3))


@pytest.fixture(scope="session")
def all_ivs(all_spreads: list[tuple[int, int, int]]) -> list[IndividualValue]:
    return [IndividualValue(*spread) for spread in all_spreads]
