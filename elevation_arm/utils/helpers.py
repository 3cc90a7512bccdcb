"""
Small stateless helpers used across the elevation_arm package.

Provides numerical clamping, display rounding, and finiteness checks.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from elevation_arm.utils.errors import InvalidInputError


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* clamped to the closed interval [*lo*, *hi*].

    Args:
        value: The scalar to clamp.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The clamped scalar.
    """
    return max(lo, min(hi, value))


def round_display(value: float, decimals: int = 1) -> float:
    """Round *value* to *decimals* places, ties away from zero.

    Works on the exact decimal expansion of the float, so ``0.25`` becomes
    ``0.3`` and ``-0.25`` becomes ``-0.3``.  Negative zero is returned as
    ``0.0``.

    Args:
        value: Finite scalar to round.
        decimals: Number of digits after the decimal point.

    Returns:
        The rounded scalar.
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0


def ensure_finite(value: Any, name: str = "value") -> float:
    """Convert *value* to ``float`` and reject NaN, infinities and non-numbers.

    Args:
        value: Candidate number.
        name: Name used in the error message.

    Returns:
        *value* as a ``float``.

    Raises:
        InvalidInputError: If *value* is not a finite real number.
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be finite, got {number}")
    return number
