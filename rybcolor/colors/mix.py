"""
Weighted mixing of RYB colors.

Mixing is the per-channel weighted arithmetic mean in the normalized RYB
domain::

    mixed = sum(w_i * c_i) / sum(w_i)

Weights only matter relative to each other, so they need not sum to 1.
Because RYB is subtractive, averaging pigment amounts behaves like mixing
paint: equal parts of red ``(1, 0, 0)`` and yellow ``(0, 1, 0)`` give the
orange ``(0.5, 0.5, 0)``.
"""
from __future__ import annotations
import math
from numbers import Real
from typing import Iterable, Tuple
import numpy as np

from .color_base import ColorBase
from ..types.color_types import ColorSpace


def mix(colors: Iterable[Tuple[Real, ColorBase]]) -> ColorBase:
    """
    Mix a collection of weighted RYB colors.

    Args:
        colors: ``(weight, color)`` pairs. Colors may use different storage
            types; array colors must share a shape.

    Returns:
        Color of the same class as the first color in ``colors``

    Raises:
        ValueError: Empty input, a negative or non-finite weight, or weights
            summing to zero
        TypeError: A color that is not an RYB color
    """
    pairs = list(colors)
    if not pairs:
        raise ValueError("mix requires at least one weighted color")

    weights = []
    channels = []
    for weight, color in pairs:
        if not isinstance(color, ColorBase) or color.mode != ColorSpace.RYB:
            raise TypeError(f"mix expects RYB colors, got {color!r}")
        w = float(weight)
        if not math.isfinite(w) or w < 0:
            raise ValueError(f"Mix weights must be finite and non-negative, got {weight!r}")
        weights.append(w)
        channels.append(np.asarray(color.normalized, dtype=np.float64))

    total = math.fsum(weights)
    if total == 0:
        raise ValueError("Mix weights sum to zero")

    mixed = np.tensordot(np.asarray(weights), np.stack(channels), axes=1) / total

    first = pairs[0][1]
    stored = first.component.from_normalized(mixed)
    if not first.is_array:
        stored = tuple(stored)
    return first.__class__(stored)
