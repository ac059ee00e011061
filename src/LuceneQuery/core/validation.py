"""Argument assertions shared by every query primitive.

Each assertion either returns ``None`` or raises. ``TypeError`` signals a value
of the wrong shape; ``ValueError`` signals a number outside its permitted
bounds. When ``position`` is given (1-based), messages read
``start (argument 1) must be a string``.
"""

from __future__ import annotations

import math
from typing import Any, Final

MAX_SAFE_INTEGER: Final[int] = 2**53 - 1


def _describe(argument_name: str, position: int | None) -> str:
    if position is None:
        return argument_name
    return f"{argument_name} (argument {position})"


def assert_string(value: Any, argument_name: str, position: int | None = None) -> None:
    """Require ``value`` to be text."""
    if not isinstance(value, str):
        raise TypeError(f"{_describe(argument_name, position)} must be a string, got {type(value).__name__}")


def assert_range(
    minimum: float,
    maximum: float,
    value: Any,
    argument_name: str,
    position: int | None = None,
) -> None:
    """Require ``value`` to be a number within ``[minimum, maximum]``.

    Args:
        minimum: Inclusive lower bound.
        maximum: Inclusive upper bound; ``math.inf`` for no upper bound.
        value: Value under test.
        argument_name: Name used in error messages.
        position: Optional 1-based argument position used in error messages.

    Raises:
        TypeError: If value is not an int or float (bool excluded).
        ValueError: If value is NaN, exceeds ``MAX_SAFE_INTEGER`` in magnitude,
            or falls outside the bounds.
    """
    name = _describe(argument_name, position)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if math.isnan(value):
        raise ValueError(f"{name} must be a number, got NaN")
    if abs(value) > MAX_SAFE_INTEGER:
        raise ValueError(f"{name} must not exceed {MAX_SAFE_INTEGER} in magnitude. It was {value}")
    if not minimum <= value <= maximum:
        raise ValueError(f"{name} must be between {minimum} and {maximum}. It was {value}")


def assert_function(value: Any, argument_name: str, position: int | None = None) -> None:
    """Require ``value`` to be callable."""
    if not callable(value):
        raise TypeError(f"{_describe(argument_name, position)} must be a function, got {type(value).__name__}")
