"""Public entrypoint for the colorkit library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``colorkit`` instead of individual
submodules.
"""

from .color_types import CMYK, YIQ, GrayScale
from .conversions import HSLToRGBMode, hsl_to_rgb
from .hsl import HSLColor
from .rgb import RGBColor
from .batch import hsl_to_rgb_array
from .tolerance import COLOR_TOLERANCE

__all__ = [
    "HSLColor",
    "RGBColor",
    "GrayScale",
    "YIQ",
    "CMYK",
    "HSLToRGBMode",
    "hsl_to_rgb",
    "hsl_to_rgb_array",
    "COLOR_TOLERANCE",
]
