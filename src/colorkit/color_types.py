from __future__ import annotations

"""Thin color types reached through RGB conversions.

These exist so that :class:`colorkit.HSLColor` and
:class:`colorkit.RGBColor` have concrete targets for their grayscale, YIQ
and CMYK conversions. Components are fractions in [0, 1].
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .hsl import HSLColor
    from .rgb import RGBColor


@dataclass(frozen=True)
class GrayScale:
    """A shade of gray; ``g`` is 0.0 (black) to 1.0 (white)."""

    g: float

    @classmethod
    def from_fraction(cls, g: float = 0.0) -> "GrayScale":
        return cls(g=float(g))

    @property
    def gray(self) -> float:
        """Gray level as a percentage."""
        return self.g * 100.0

    @property
    def brightness(self) -> float:
        return self.g

    def to_rgb(self) -> "RGBColor":
        from .rgb import RGBColor  # circular

        return RGBColor(self.g, self.g, self.g)

    def to_hsl(self) -> "HSLColor":
        from .hsl import HSLColor  # circular

        return HSLColor.from_fraction(0.0, 0.0, self.g)

    def to_array(self) -> List[float]:
        return [self.g]


@dataclass(frozen=True)
class YIQ:
    """NTSC YIQ: luma ``y`` and the two chrominance components ``i``, ``q``."""

    y: float
    i: float
    q: float

    @property
    def brightness(self) -> float:
        return self.y

    def to_grayscale(self) -> GrayScale:
        return GrayScale.from_fraction(self.y)

    to_greyscale = to_grayscale

    def to_array(self) -> List[float]:
        return [self.y, self.i, self.q]


@dataclass(frozen=True)
class CMYK:
    """Subtractive CMYK with a black (``k``) component."""

    c: float
    m: float
    y: float
    k: float

    def to_rgb(self) -> "RGBColor":
        from .rgb import RGBColor  # circular

        return RGBColor(
            1.0 - min(1.0, self.c + self.k),
            1.0 - min(1.0, self.m + self.k),
            1.0 - min(1.0, self.y + self.k),
        )

    def to_hsl(self) -> "HSLColor":
        return self.to_rgb().to_hsl()

    def to_array(self) -> List[float]:
        return [self.c, self.m, self.y, self.k]


__all__ = ["GrayScale", "YIQ", "CMYK"]
