from __future__ import annotations

"""Tolerance-aware numeric helpers shared by every colorkit color type.

All predicates compare against a single fixed epsilon, ``COLOR_TOLERANCE``
(``1e-4``). It is a constant, not a setting; callers that need a different
epsilon pass ``tolerance=`` explicitly.
"""

from typing import Iterable


COLOR_TOLERANCE: float = 1e-4


def near_zero(value: float, tolerance: float = COLOR_TOLERANCE) -> bool:
    """Return True if ``value`` is within ``tolerance`` of 0."""
    return abs(value) <= tolerance


def near_zero_or_less(value: float, tolerance: float = COLOR_TOLERANCE) -> bool:
    """Return True if ``value`` is negative or within ``tolerance`` of 0."""
    return value < 0.0 or near_zero(value, tolerance)


def near_one(value: float, tolerance: float = COLOR_TOLERANCE) -> bool:
    """Return True if ``value`` is within ``tolerance`` of 1."""
    return near_zero(value - 1.0, tolerance)


def near_one_or_more(value: float, tolerance: float = COLOR_TOLERANCE) -> bool:
    """Return True if ``value`` is greater than 1 or within ``tolerance`` of 1."""
    return value > 1.0 or near_one(value, tolerance)


def near(x: float, y: float, tolerance: float = COLOR_TOLERANCE) -> bool:
    return abs(x - y) <= tolerance


def normalize(value: float, tolerance: float = COLOR_TOLERANCE) -> float:
    """Clamp ``value`` into [0, 1], snapping values near either end onto it."""
    if near_zero_or_less(value, tolerance):
        return 0.0
    if near_one_or_more(value, tolerance):
        return 1.0
    return value


def equivalent(
    a: Iterable[float],
    b: Iterable[float],
    tolerance: float = COLOR_TOLERANCE,
) -> bool:
    """Return True if two component sequences match pairwise within ``tolerance``.

    Sequences of different length are never equivalent.
    """
    xs = list(a)
    ys = list(b)
    if len(xs) != len(ys):
        return False
    return all(near(x, y, tolerance) for x, y in zip(xs, ys))


__all__ = [
    "COLOR_TOLERANCE",
    "near_zero",
    "near_zero_or_less",
    "near_one",
    "near_one_or_more",
    "near",
    "normalize",
    "equivalent",
]
