from __future__ import annotations

"""HSL color value type.

Hue, saturation and lightness are stored as fractions: ``h`` in [0, 1)
covers the full 360 degree circle, ``s`` and ``l`` lie in [0, 1]. Degree
and percentage accessors are derived views over the same fields.

Construction does not validate; the property setters are the only place
the canonical ranges are enforced. Hue wraps around the circle, saturation
and lightness clamp.
"""

import logging
from typing import List

from common import settings

from .color_types import CMYK, YIQ, GrayScale
from .conversions import HSLToRGBMode, hsl_to_rgb
from .rgb import RGBColor
from .tolerance import equivalent, normalize


logger = logging.getLogger(__name__)


def _fold_hue(h: float) -> float:
    # 360 degrees is 0 degrees.
    return 0.0 if h >= 1.0 else h


class HSLColor:
    """HSL color.

    Parameters
    ----------
    h, s, l:
        Hue in degrees, saturation and lightness in percent (by default).
    hue_radix, other_radix:
        Divisors applied to ``h`` and to ``s``/``l`` before storing. Pass a
        different ``hue_radix`` to construct from other angular units, e.g.
        ``2 * math.pi`` for radians.

    Notes
    -----
    Equality is approximate (every component within the color tolerance
    after converting the right operand with ``to_hsl()``), so instances are
    unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        h: float = 0,
        s: float = 0,
        l: float = 0,
        hue_radix: float = 360.0,
        other_radix: float = 100.0,
    ) -> None:
        self._h = h / hue_radix
        self._s = s / other_radix
        self._l = l / other_radix

    @classmethod
    def from_fraction(cls, h: float = 0.0, s: float = 0.0, l: float = 0.0) -> "HSLColor":
        """Create from fractional values, stored as given (no wrap or clamp)."""
        return cls(h, s, l, 1.0, 1.0)

    @classmethod
    def from_degrees_percent(
        cls,
        h: float = 0,
        s: float = 0,
        l: float = 0,
        hue_radix: float = 360.0,
        other_radix: float = 100.0,
    ) -> "HSLColor":
        """Create from degrees and percentages, e.g. ``(145, 30, 50)``."""
        return cls(h, s, l, hue_radix, other_radix)

    # --- hue ----------------------------------------------------------------

    @property
    def h(self) -> float:
        """Hue in the range [0, 1)."""
        return self._h

    @h.setter
    def h(self, value: float) -> None:
        self._h = _fold_hue(normalize(value))

    @property
    def hue(self) -> float:
        """Hue in degrees."""
        return self._h * 360.0

    @hue.setter
    def hue(self, degrees: float) -> None:
        # Single step around the wheel: inputs are expected within one turn
        # of [0, 360].
        hh = degrees / 360.0
        if hh < 0.0:
            hh += 1.0
        if hh > 1.0:
            hh -= 1.0
        self._h = _fold_hue(normalize(hh))

    # --- saturation ---------------------------------------------------------

    @property
    def s(self) -> float:
        return self._s

    @s.setter
    def s(self, value: float) -> None:
        self._s = normalize(value)

    @property
    def saturation(self) -> float:
        """Saturation in percent."""
        return self._s * 100.0

    @saturation.setter
    def saturation(self, percent: float) -> None:
        self._s = normalize(percent / 100.0)

    # --- lightness ----------------------------------------------------------

    @property
    def l(self) -> float:
        return self._l

    @l.setter
    def l(self, value: float) -> None:
        self._l = normalize(value)

    @property
    def luminosity(self) -> float:
        """Lightness in percent."""
        return self._l * 100.0

    @luminosity.setter
    def luminosity(self, percent: float) -> None:
        self._l = normalize(percent / 100.0)

    lightness = luminosity

    @property
    def brightness(self) -> float:
        return self._l

    # --- conversions --------------------------------------------------------

    def to_rgb(self, mode: HSLToRGBMode | str | None = None) -> RGBColor:
        """Convert to RGB with the given algorithm.

        ``mode`` is an :class:`HSLToRGBMode` or its string value
        (``"foley"``, ``"foley_alt"``, ``"wikipedia"``). ``None`` uses the
        configured default, ``foley`` unless overridden.

        Raises
        ------
        ValueError
            For an unknown mode.
        """
        if mode is None:
            mode = settings.get().DEFAULT_HSL_MODE
        return RGBColor(*hsl_to_rgb(self._h, self._s, self._l, mode))

    def to_hsl(self) -> "HSLColor":
        return self

    def to_yiq(self) -> YIQ:
        return self.to_rgb().to_yiq()

    def to_cmyk(self) -> CMYK:
        return self.to_rgb().to_cmyk()

    def to_greyscale(self) -> GrayScale:
        return GrayScale.from_fraction(self._l)

    to_grayscale = to_greyscale

    def to_array(self) -> List[float]:
        """Return ``[h, s, l]``."""
        return [self._h, self._s, self._l]

    # --- strings ------------------------------------------------------------

    def html(self) -> str:
        return self.to_rgb().html()

    def css_rgb(self) -> str:
        return self.to_rgb().css_rgb()

    def css_rgba(self) -> str:
        return self.to_rgb().css_rgba()

    def css_hsl(self) -> str:
        """Return e.g. ``"hsl(180.00, 25.00%, 35.00%)"``."""
        return "hsl(%3.2f, %3.2f%%, %3.2f%%)" % (self.hue, self.saturation, self.luminosity)

    def css_hsla(self) -> str:
        return "hsla(%3.2f, %3.2f%%, %3.2f%%, %3.2f)" % (
            self.hue,
            self.saturation,
            self.luminosity,
            1,
        )

    def __repr__(self) -> str:
        return "HSL [%.2f deg, %.2f%%, %.2f%%]" % (self.hue, self.saturation, self.luminosity)

    # --- algebra ------------------------------------------------------------

    def coerce(self, other: object) -> "HSLColor":
        """Return ``other`` as HSL via its ``to_hsl()``.

        Raises
        ------
        TypeError
            If ``other`` has no HSL conversion.
        """
        if isinstance(other, HSLColor):
            return other
        to_hsl = getattr(other, "to_hsl", None)
        if to_hsl is None:
            logger.debug("cannot coerce %s to HSLColor", type(other).__name__)
            raise TypeError(f"cannot coerce {type(other).__name__} to HSLColor")
        return to_hsl()

    def __eq__(self, other: object) -> bool:
        return equivalent(self.to_array(), self.coerce(other).to_array())

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def mix_with(self, color: object, mix_percent: float = 0.5) -> "HSLColor":
        """Mix ``color`` into this one at ``mix_percent`` (0.0 to 1.0).

        Each of h, s and l is interpolated linearly and independently. Hue is
        not taken around the shorter arc: mixing h=0.0 with h=0.9 at 0.5 gives
        0.45. The result is not wrapped or clamped, so ratios outside [0, 1]
        extrapolate. This differs from :meth:`RGBColor.mix_with`.
        """
        other = self.coerce(color)
        v = [((y - x) * mix_percent) + x for x, y in zip(self.to_array(), other.to_array())]
        return type(self).from_fraction(*v)

    mix = mix_with


__all__ = ["HSLColor"]
