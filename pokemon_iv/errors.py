"""Centralised error taxonomy for pokemon_iv."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

__all__ = [
    "PokemonIVError",
    "InputValidationError",
    "StatOutOfRangeError",
    "EmptyTopStatError",
    "sanitize_context",
]


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return sanitize_context(value)
    if isinstance(value, (list, tuple)):
        return [_sanitize_value(item) for item in value]
    if isinstance(value, Enum):
        return value.name
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def sanitize_context(context: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a JSON-safe copy of contextual logging or error data.

    Enum members become their names and other unknown objects their ``str``.
    """

    return {str(key): _sanitize_value(value) for key, value in context.items()}


@dataclass
class PokemonIVError(Exception):
    """Base class for structured, actionable errors raised by the package."""

    message: str
    remediation: str | None = None
    context: Dict[str, Any] | None = None
    category: str = "internal_error"

    def __post_init__(self) -> None:  # pragma: no cover - trivial
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "category": self.category,
            "message": self.message,
        }
        if self.remediation:
            payload["remediation"] = self.remediation
        if self.context:
            payload["context"] = sanitize_context(self.context)
        return payload


@dataclass
class InputValidationError(PokemonIVError):
    category: str = "input_error"


@dataclass
class StatOutOfRangeError(InputValidationError):
    category: str = "stat_out_of_range"


@dataclass
class EmptyTopStatError(InputValidationError):
    category: str = "empty_top_stat"
