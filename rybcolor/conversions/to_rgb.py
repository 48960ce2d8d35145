"""
RYB → RGB inverse transform.

Two formulas are available:

- reference (default): the historical formula. It uses ``2 * min(y, b)`` for
  green, divides by ``max(ryb) / max(rgb)`` and takes the black term from the
  *de-whitened* blue channel. It is not the inverse of the forward
  transform.
- balanced (``use_balanced_algo=True``): the exact inverse of
  ``np_unit_rgb_to_ryb`` for non-gray colors, so RGB → RYB → RGB and
  RYB → RGB → RYB round trip.
"""
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from .helpers import peak, trough, normalization_factor, rescale
from ..types.color_types import DegeneratePolicy, validate_policy


def np_ryb_to_unit_rgb(
    r: NDArray,
    y: NDArray,
    b: NDArray,
    use_balanced_algo: bool = False,
    degenerate: DegeneratePolicy = "propagate",
) -> NDArray:
    """
    Vectorized: convert normalized RYB to normalized RGB.

    Returns:
        Array with a trailing axis of length 3 holding (r, g, b)
    """
    validate_policy(degenerate)
    r0 = np.asarray(r, dtype=np.float64)
    y0 = np.asarray(y, dtype=np.float64)
    b0 = np.asarray(b, dtype=np.float64)

    i_w = trough(r0, y0, b0)
    r_ryb = r0 - i_w
    y_ryb = y0 - i_w
    b_ryb = b0 - i_w

    min_yb = np.minimum(y_ryb, b_ryb)
    r_rgb = r_ryb + y_ryb - min_yb
    if use_balanced_algo:
        g_rgb = y_ryb + min_yb
    else:
        g_rgb = y_ryb + 2.0 * min_yb
    b_rgb = 2.0 * (b_ryb - min_yb)

    ryb_peak = peak(r_ryb, y_ryb, b_ryb)
    rgb_peak = peak(r_rgb, g_rgb, b_rgb)
    if use_balanced_algo:
        n = normalization_factor(rgb_peak, ryb_peak, degenerate, "RYB to RGB")
    else:
        n = normalization_factor(ryb_peak, rgb_peak, degenerate, "RYB to RGB")
    r_rgb, g_rgb, b_rgb = rescale((r_rgb, g_rgb, b_rgb), n)

    if use_balanced_algo:
        i_b = trough(1.0 - r0, 1.0 - y0, 1.0 - b0)
    else:
        i_b = trough(1.0 - r0, 1.0 - y0, 1.0 - b_ryb)

    return np.stack([r_rgb + i_b, g_rgb + i_b, b_rgb + i_b], axis=-1)


def ryb_to_unit_rgb(
    r: float,
    y: float,
    b: float,
    use_balanced_algo: bool = False,
    degenerate: DegeneratePolicy = "propagate",
) -> Tuple[float, float, float]:
    """Scalar RYB → RGB on normalized floats."""
    rgb = np_ryb_to_unit_rgb(r, y, b, use_balanced_algo=use_balanced_algo, degenerate=degenerate)
    return float(rgb[0]), float(rgb[1]), float(rgb[2])
