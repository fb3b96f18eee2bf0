from __future__ import annotations

"""HSL to RGB conversion algorithms.

Three historically divergent formulas are offered as interchangeable
strategies selected by :class:`HSLToRGBMode`. Every strategy is a pure
function with the same contract: fractional ``(h, s, l)`` in, fractional
``(r, g, b, alpha)`` out, with alpha always 1.0.

- ``foley``: Foley and van Dam as historically shipped by this library,
  with short cuts at the edges of the lightness/saturation space and
  tolerance-aware region boundaries on the hue circle.
- ``foley_alt``: the textbook Foley and van Dam variant, computed in
  degrees with exact comparisons and modulo hue wrapping.
- ``wikipedia``: the chroma/sector form (C, X, m).
"""

import logging
from enum import Enum
from typing import Callable, Dict, Tuple

from .tolerance import near_one_or_more, near_zero, near_zero_or_less


logger = logging.getLogger(__name__)

RGBA = Tuple[float, float, float, float]

_BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)
_WHITE: RGBA = (1.0, 1.0, 1.0, 1.0)

_ONE_THIRD = 1.0 / 3.0
_TWO_THIRDS = 2.0 / 3.0


class HSLToRGBMode(Enum):
    """Selectable HSL to RGB algorithms."""

    FOLEY = "foley"
    FOLEY_ALT = "foley_alt"
    WIKIPEDIA = "wikipedia"

    @classmethod
    def from_value(cls, value: str) -> "HSLToRGBMode":
        for mode in cls:
            if mode.value == value:
                return mode
        raise ValueError(f"Unknown HSL to RGB mode: {value!r}")


def resolve_mode(mode: HSLToRGBMode | str) -> HSLToRGBMode:
    """Return the :class:`HSLToRGBMode` for an enum member or its string value."""
    if isinstance(mode, HSLToRGBMode):
        return mode
    if isinstance(mode, str):
        return HSLToRGBMode.from_value(mode)
    raise ValueError(f"Unknown HSL to RGB mode: {mode!r}")


# --- foley ------------------------------------------------------------------


def hsl_to_rgb_foley(h: float, s: float, l: float) -> RGBA:
    """Foley and van Dam conversion with edge short cuts.

    Lightness at or below zero is black, at or above one is white, and zero
    saturation is a gray of the given lightness. Only the remaining cases
    enter the main calculation.
    """
    if near_zero_or_less(l):
        return _BLACK
    if near_one_or_more(l):
        return _WHITE
    if near_zero(s):
        return (l, l, l, 1.0)

    t1, t2 = _foley_mix_sat_lum(s, l)
    r, g, b = (
        _hue_to_rgb(_rotate_hue(v), t1, t2)
        for v in (h + _ONE_THIRD, h, h - _ONE_THIRD)
    )
    return (r, g, b, 1.0)


def _foley_mix_sat_lum(s: float, l: float) -> Tuple[float, float]:
    # The base value differs on either side of 50% lightness.
    if near_zero_or_less(l - 0.5):
        t = l * (1.0 + s)
    else:
        t = l + s - (l * s)
    return (2.0 * l - t, t)


def _rotate_hue(h: float) -> float:
    # Offsets stay within 1/3 of [0, 1), so one step is enough.
    if near_zero_or_less(h):
        h += 1.0
    if near_one_or_more(h):
        h -= 1.0
    return h


def _hue_to_rgb(h: float, t1: float, t2: float) -> float:
    """Map a rotated hue onto one channel.

    The hue circle is split into four regions: [0, 60], (60, 180],
    (180, 240] and (240, 360) degrees, expressed here as fractions of 1.
    Boundaries are tolerance-aware so values a rounding error away from a
    region edge do not flip regions.
    """
    if near_zero_or_less((6.0 * h) - 1.0):
        return t1 + ((t2 - t1) * h * 6.0)
    if near_zero_or_less((2.0 * h) - 1.0):
        return t2
    if near_zero_or_less((3.0 * h) - 2.0):
        return t1 + (t2 - t1) * (_TWO_THIRDS - h) * 6.0
    return t1


# --- foley_alt --------------------------------------------------------------


def hsl_to_rgb_foley_alt(h: float, s: float, l: float) -> RGBA:
    """Textbook Foley and van Dam, computed on a 360 degree circle."""
    if l <= 0.0:
        return _BLACK
    if l >= 1.0:
        return _WHITE
    if near_zero(s):
        return (l, l, l, 1.0)

    if l <= 0.5:
        m2 = l * (1.0 + s)
    else:
        m2 = l + s - l * s
    m1 = 2.0 * l - m2
    hue = h * 360.0
    return (
        _foley_alt_value(m1, m2, hue + 120.0),
        _foley_alt_value(m1, m2, hue),
        _foley_alt_value(m1, m2, hue - 120.0),
        1.0,
    )


def _foley_alt_value(n1: float, n2: float, hue: float) -> float:
    hue = hue % 360.0
    if hue < 60.0:
        return n1 + (n2 - n1) * hue / 60.0
    if hue < 180.0:
        return n2
    if hue < 240.0:
        return n1 + (n2 - n1) * (240.0 - hue) / 60.0
    return n1


# --- wikipedia --------------------------------------------------------------


def hsl_to_rgb_wikipedia(h: float, s: float, l: float) -> RGBA:
    """Chroma based conversion: C = (1 - |2L - 1|) * S, then hue sectors."""
    if l <= 0.0:
        return _BLACK
    if l >= 1.0:
        return _WHITE

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    hp = (h % 1.0) * 6.0
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    sector = int(hp) % 6
    if sector == 0:
        r1, g1, b1 = c, x, 0.0
    elif sector == 1:
        r1, g1, b1 = x, c, 0.0
    elif sector == 2:
        r1, g1, b1 = 0.0, c, x
    elif sector == 3:
        r1, g1, b1 = 0.0, x, c
    elif sector == 4:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x
    m = l - c / 2.0
    return (r1 + m, g1 + m, b1 + m, 1.0)


# --- dispatch ---------------------------------------------------------------


_CONVERTERS: Dict[HSLToRGBMode, Callable[[float, float, float], RGBA]] = {
    HSLToRGBMode.FOLEY: hsl_to_rgb_foley,
    HSLToRGBMode.FOLEY_ALT: hsl_to_rgb_foley_alt,
    HSLToRGBMode.WIKIPEDIA: hsl_to_rgb_wikipedia,
}


def hsl_to_rgb(
    h: float,
    s: float,
    l: float,
    mode: HSLToRGBMode | str = HSLToRGBMode.FOLEY,
) -> RGBA:
    """Convert fractional HSL into fractional ``(r, g, b, alpha)``.

    Raises
    ------
    ValueError
        If ``mode`` is not one of the known algorithms. No conversion is
        attempted and no default is substituted.
    """
    try:
        resolved = resolve_mode(mode)
    except ValueError:
        logger.debug("rejected HSL to RGB mode %r", mode)
        raise
    return _CONVERTERS[resolved](h, s, l)


__all__ = [
    "HSLToRGBMode",
    "resolve_mode",
    "hsl_to_rgb",
    "hsl_to_rgb_foley",
    "hsl_to_rgb_foley_alt",
    "hsl_to_rgb_wikipedia",
]
