from __future__ import annotations

"""RGB color value type.

:class:`RGBColor` is the target of :meth:`colorkit.HSLColor.to_rgb`. It
stores red, green, blue and alpha as fractions in [0, 1] and renders
HTML/CSS strings.
"""

import logging
from typing import TYPE_CHECKING, List

from .color_types import CMYK, YIQ, GrayScale
from .tolerance import equivalent, near_zero, near_zero_or_less

if TYPE_CHECKING:
    from .hsl import HSLColor


logger = logging.getLogger(__name__)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


class RGBColor:
    """RGB color with fractional channels and alpha.

    Equality is approximate: the right operand is converted with its
    ``to_rgb()`` and every channel must lie within the color tolerance.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        r: float = 0.0,
        g: float = 0.0,
        b: float = 0.0,
        alpha: float = 1.0,
    ) -> None:
        self._r = float(r)
        self._g = float(g)
        self._b = float(b)
        self._alpha = float(alpha)

    @classmethod
    def from_fraction(
        cls, r: float = 0.0, g: float = 0.0, b: float = 0.0, alpha: float = 1.0
    ) -> "RGBColor":
        return cls(r, g, b, alpha)

    @classmethod
    def from_values(cls, r: int = 0, g: int = 0, b: int = 0, alpha: int = 255) -> "RGBColor":
        """Create from 0-255 channel values."""
        return cls(r / 255.0, g / 255.0, b / 255.0, alpha / 255.0)

    # --- channels -----------------------------------------------------------

    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def red(self) -> float:
        return self._r * 255.0

    @property
    def green(self) -> float:
        return self._g * 255.0

    @property
    def blue(self) -> float:
        return self._b * 255.0

    @property
    def red_p(self) -> float:
        return self._r * 100.0

    @property
    def green_p(self) -> float:
        return self._g * 100.0

    @property
    def blue_p(self) -> float:
        return self._b * 100.0

    @property
    def brightness(self) -> float:
        """Perceived brightness, weighted towards green."""
        return 0.2 * self._r + 0.6 * self._g + 0.2 * self._b

    # --- strings ------------------------------------------------------------

    def html(self) -> str:
        """Return ``#rrggbb``."""
        r, g, b = (int(round(_clamp01(c) * 255)) for c in (self._r, self._g, self._b))
        return f"#{r:02x}{g:02x}{b:02x}"

    def css_rgb(self) -> str:
        return "rgb(%3.2f%%, %3.2f%%, %3.2f%%)" % (self.red_p, self.green_p, self.blue_p)

    def css_rgba(self) -> str:
        return "rgba(%3.2f%%, %3.2f%%, %3.2f%%, %3.2f)" % (
            self.red_p,
            self.green_p,
            self.blue_p,
            self._alpha,
        )

    def __repr__(self) -> str:
        return "RGB [%s]" % self.html()

    # --- conversions --------------------------------------------------------

    def to_rgb(self) -> "RGBColor":
        return self

    def to_hsl(self) -> "HSLColor":
        """Convert to HSL.

        A channel spread within tolerance is a gray (hue and saturation 0).
        Otherwise saturation depends on which side of 50% lightness the color
        is, and hue is measured from whichever channel dominates.
        """
        from .hsl import HSLColor  # circular

        r, g, b = self._r, self._g, self._b
        lo = min(r, g, b)
        hi = max(r, g, b)
        delta = hi - lo
        lum = (hi + lo) / 2.0

        if near_zero(delta):
            return HSLColor.from_fraction(0.0, 0.0, lum)

        if near_zero_or_less(lum - 0.5):
            sat = delta / (hi + lo)
        else:
            sat = delta / (2.0 - hi - lo)

        sixth = 1.0 / 6.0
        if r == hi:
            hue = sixth * ((g - b) / delta)
            if g < b:
                hue += 1.0
        elif g == hi:
            hue = sixth * ((b - r) / delta) + (1.0 / 3.0)
        else:
            hue = sixth * ((r - g) / delta) + (2.0 / 3.0)

        if hue < 0.0:
            hue += 1.0
        if hue > 1.0:
            hue -= 1.0
        return HSLColor.from_fraction(hue, sat, lum)

    def to_yiq(self) -> YIQ:
        r, g, b = self._r, self._g, self._b
        y = (r * 0.299) + (g * 0.587) + (b * 0.114)
        i = (r * 0.596) + (g * -0.275) + (b * -0.321)
        q = (r * 0.212) + (g * -0.523) + (b * 0.311)
        return YIQ(y, i, q)

    def to_cmyk(self) -> CMYK:
        c = 1.0 - self._r
        m = 1.0 - self._g
        y = 1.0 - self._b
        k = min(c, m, y)
        return CMYK(c - k, m - k, y - k, k)

    def to_greyscale(self) -> GrayScale:
        return GrayScale.from_fraction(self.to_hsl().l)

    to_grayscale = to_greyscale

    def to_array(self) -> List[float]:
        return [self._r, self._g, self._b]

    # --- algebra ------------------------------------------------------------

    def coerce(self, other: object) -> "RGBColor":
        if isinstance(other, RGBColor):
            return other
        to_rgb = getattr(other, "to_rgb", None)
        if to_rgb is None:
            logger.debug("cannot coerce %s to RGBColor", type(other).__name__)
            raise TypeError(f"cannot coerce {type(other).__name__} to RGBColor")
        return to_rgb()

    def __eq__(self, other: object) -> bool:
        return equivalent(self.to_array(), self.coerce(other).to_array())

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def mix_with(self, color: object, mix_percent: float = 0.5) -> "RGBColor":
        """Mix channel-wise in RGB space."""
        other = self.coerce(color)
        r, g, b = (
            ((y - x) * mix_percent) + x for x, y in zip(self.to_array(), other.to_array())
        )
        return type(self)(r, g, b, self._alpha)


__all__ = ["RGBColor"]
