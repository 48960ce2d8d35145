from __future__ import annotations
from enum import Enum
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarTriple = Tuple[Scalar, Scalar, Scalar]
ColorElement = Union[ScalarTriple, Tuple[Scalar, ...]]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
DegeneratePolicy = Literal["propagate", "neutral"]
DEGENERATE_POLICIES = ("propagate", "neutral")


class ColorSpace(str, Enum):
    RGB = "rgb"
    RYB = "ryb"


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a numpy array.

    Args:
        element: Tuple, list or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    return np.array(element)


def validate_policy(degenerate: str) -> DegeneratePolicy:
    if degenerate not in DEGENERATE_POLICIES:
        raise ValueError(
            f"Unknown degenerate policy: {degenerate!r}, expected one of {DEGENERATE_POLICIES}"
        )
    return degenerate  # type: ignore[return-value]
