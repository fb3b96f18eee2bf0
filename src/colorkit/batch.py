from __future__ import annotations

"""Vectorised HSL to RGB conversion with NumPy.

:func:`hsl_to_rgb_array` applies the ``foley`` algorithm to whole arrays of
fractional HSL triples. Edge handling and the tolerance-aware region
boundaries match :func:`colorkit.conversions.hsl_to_rgb_foley` element for
element.
"""

import numpy as np

from .tolerance import COLOR_TOLERANCE


def _near_zero_or_less(x: np.ndarray, tol: float) -> np.ndarray:
    return (x < 0.0) | (np.abs(x) <= tol)


def _near_one_or_more(x: np.ndarray, tol: float) -> np.ndarray:
    return (x > 1.0) | (np.abs(x - 1.0) <= tol)


def _rotate_hue(h: np.ndarray, tol: float) -> np.ndarray:
    h = np.where(_near_zero_or_less(h, tol), h + 1.0, h)
    return np.where(_near_one_or_more(h, tol), h - 1.0, h)


def _hue_to_channel(h: np.ndarray, t1: np.ndarray, t2: np.ndarray, tol: float) -> np.ndarray:
    rising = t1 + (t2 - t1) * h * 6.0
    falling = t1 + (t2 - t1) * (2.0 / 3.0 - h) * 6.0
    return np.select(
        [
            _near_zero_or_less(6.0 * h - 1.0, tol),
            _near_zero_or_less(2.0 * h - 1.0, tol),
            _near_zero_or_less(3.0 * h - 2.0, tol),
        ],
        [rising, t2, falling],
        default=t1,
    )


def hsl_to_rgb_array(hsl: np.ndarray, tolerance: float = COLOR_TOLERANCE) -> np.ndarray:
    """Convert an array of HSL fractions to RGBA fractions.

    Parameters
    ----------
    hsl : np.ndarray, shape (..., 3)
        ``h`` in [0, 1), ``s`` and ``l`` in [0, 1].
    tolerance : float
        Epsilon for the near-zero / near-one comparisons.

    Returns
    -------
    np.ndarray, shape (..., 4)
        ``(r, g, b, alpha)`` as float64 with alpha 1.0.
    """
    arr = np.asarray(hsl, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"hsl must have last dimension 3, got shape {arr.shape}")

    h = arr[..., 0]
    s = arr[..., 1]
    l = arr[..., 2]

    low = _near_zero_or_less(l - 0.5, tolerance)
    t2 = np.where(low, l * (1.0 + s), l + s - l * s)
    t1 = 2.0 * l - t2

    channels = [
        _hue_to_channel(_rotate_hue(h + offset, tolerance), t1, t2, tolerance)
        for offset in (1.0 / 3.0, 0.0, -1.0 / 3.0)
    ]
    rgb = np.stack(channels, axis=-1)

    gray = np.abs(s) <= tolerance
    rgb = np.where(gray[..., None], l[..., None], rgb)
    rgb = np.where(_near_one_or_more(l, tolerance)[..., None], 1.0, rgb)
    rgb = np.where(_near_zero_or_less(l, tolerance)[..., None], 0.0, rgb)

    alpha = np.ones(rgb.shape[:-1] + (1,), dtype=np.float64)
    return np.concatenate([rgb, alpha], axis=-1)


__all__ = ["hsl_to_rgb_array"]
