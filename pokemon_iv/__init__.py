"""Individual value modelling and appraisal matching for Pokémon GO."""

from __future__ import annotations

import re
from importlib import metadata as _metadata
from pathlib import Path

from .appraisal import OverallAppraisal, StatRange
from .data.stardust import STARDUST_LEVEL_LOOKUP, possible_levels, stardust_costs
from .errors import (
    EmptyTopStatError,
    InputValidationError,
    PokemonIVError,
    StatOutOfRangeError,
)
from .evaluation import PokeEvaluation
from .ivs import IndividualValue, IVSpread, TopStat
from .observability import configure_logging, get_logger
from .stats import IV_MAX, IV_MIN, valid_stat


def _read_local_version() -> str:
    """Return the project version from ``pyproject.toml`` when not installed."""

    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    if pyproject.is_file():
        match = re.search(
            r'^version\s*=\s*"([^"]+)"', pyproject.read_text(), re.MULTILINE
        )
        if match:
            return match.group(1)
    return "0.0.0"


try:
    __version__ = _metadata.version("pokemon-iv")
except _metadata.PackageNotFoundError:
    __version__ = _read_local_version()

__all__ = [
    "IV_MAX",
    "IV_MIN",
    "IVSpread",
    "IndividualValue",
    "TopStat",
    "OverallAppraisal",
    "StatRange",
    "PokeEvaluation",
    "STARDUST_LEVEL_LOOKUP",
    "possible_levels",
    "stardust_costs",
    "valid_stat",
    "PokemonIVError",
    "InputValidationError",
    "StatOutOfRangeError",
    "EmptyTopStatError",
    "configure_logging",
    "get_logger",
    "__version__",
]
