import warnings
import numpy as np
from numpy import ndarray as NDArray

from ..exceptions import DegenerateConversionWarning
from ..types.color_types import DegeneratePolicy


def peak(a: NDArray, b: NDArray, c: NDArray) -> NDArray:
    """Element-wise maximum of three channels."""
    return np.maximum(np.maximum(a, b), c)


def trough(a: NDArray, b: NDArray, c: NDArray) -> NDArray:
    """Element-wise minimum of three channels."""
    return np.minimum(np.minimum(a, b), c)


def normalization_factor(
    numerator: NDArray,
    denominator: NDArray,
    degenerate: DegeneratePolicy,
    direction: str,
) -> NDArray:
    """
    Compute ``numerator / denominator`` for the intensity rescaling step.

    A zero denominator means the de-whitened input has no chromatic content.
    With ``"propagate"`` the division happens anyway (0 / 0 -> NaN) and a
    ``DegenerateConversionWarning`` is issued; with ``"neutral"`` the factor
    is 1 so the rescaling step is skipped.
    """
    zero = denominator == 0
    if degenerate == "neutral":
        safe = np.where(zero, 1.0, denominator)
        return np.where(zero, 1.0, numerator / safe)

    with np.errstate(divide="ignore", invalid="ignore"):
        n = numerator / denominator
    if np.any(zero):
        warnings.warn(
            f"{direction} conversion of a gray input divided by a zero peak; "
            f"result contains non-finite values",
            DegenerateConversionWarning,
            stacklevel=3,
        )
    return n


def rescale(channels: tuple, n: NDArray) -> tuple:
    with np.errstate(divide="ignore", invalid="ignore"):
        return tuple(c / n for c in channels)
