"""RGB → RYB forward transform."""
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from .helpers import peak, trough, normalization_factor, rescale
from ..types.color_types import DegeneratePolicy, validate_policy


def np_unit_rgb_to_ryb(
    r: NDArray,
    g: NDArray,
    b: NDArray,
    degenerate: DegeneratePolicy = "propagate",
) -> NDArray:
    """
    Vectorized: convert normalized RGB to normalized RYB.

    The shared white component is removed, the remaining chroma is
    decomposed into red, yellow and blue, rescaled so its peak matches the
    de-whitened RGB peak, and the black component is added back.

    Args:
        r, g, b: Channel arrays in [0, 1] (not validated)
        degenerate: ``"propagate"`` or ``"neutral"``, see
            ``normalization_factor``

    Returns:
        Array with a trailing axis of length 3 holding (r, y, b)
    """
    validate_policy(degenerate)
    r0 = np.asarray(r, dtype=np.float64)
    g0 = np.asarray(g, dtype=np.float64)
    b0 = np.asarray(b, dtype=np.float64)

    i_w = trough(r0, g0, b0)
    r_rgb = r0 - i_w
    g_rgb = g0 - i_w
    b_rgb = b0 - i_w

    min_rg = np.minimum(r_rgb, g_rgb)
    r_ryb = r_rgb - min_rg
    y_ryb = (g_rgb + min_rg) / 2.0
    b_ryb = (b_rgb + g_rgb - min_rg) / 2.0

    n = normalization_factor(
        peak(r_ryb, y_ryb, b_ryb), peak(r_rgb, g_rgb, b_rgb), degenerate, "RGB to RYB"
    )
    r_ryb, y_ryb, b_ryb = rescale((r_ryb, y_ryb, b_ryb), n)

    i_b = trough(1.0 - r0, 1.0 - g0, 1.0 - b0)

    return np.stack([r_ryb + i_b, y_ryb + i_b, b_ryb + i_b], axis=-1)


def unit_rgb_to_ryb(
    r: float,
    g: float,
    b: float,
    degenerate: DegeneratePolicy = "propagate",
) -> Tuple[float, float, float]:
    """Scalar RGB → RYB on normalized floats."""
    ryb = np_unit_rgb_to_ryb(r, g, b, degenerate=degenerate)
    return float(ryb[0]), float(ryb[1]), float(ryb[2])
