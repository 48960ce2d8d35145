"""
Component normalization contract.

Every channel of a color is stored in some numeric type. All conversion
arithmetic happens on float64 values in the normalized range [0, 1]; a
``Component`` bridges between the storage type and that domain.

- Float storage is assumed to already be normalized and passes through.
- Unsigned integer storage is divided by its maximum value on the way in and
  multiplied by it (then truncated toward zero) on the way out.

Neither direction validates its input. Out-of-range floats stay out of
range; integer results saturate to ``[0, maximum]`` with NaN mapped to 0.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional, Union
import numpy as np
from numpy import ndarray

Normalized = Union[np.floating, ndarray]


def _unwrap(arr: ndarray) -> Any:
    """Return a numpy scalar for 0-d arrays, the array otherwise."""
    return arr[()] if arr.ndim == 0 else arr


class Component(ABC):
    """
    Capability every channel storage type has to provide.

    Subclasses must set ``dtype`` and implement ``to_normalized`` and
    ``from_normalized``. Both accept numpy scalars, Python numbers or arrays
    and operate element wise.
    """

    dtype: np.dtype

    @property
    def is_float(self) -> bool:
        return self.dtype.kind == "f"

    @abstractmethod
    def to_normalized(self, value: Any) -> Normalized:
        """Convert stored value(s) to float64 in the range [0, 1]."""

    @abstractmethod
    def from_normalized(self, x: Any) -> Any:
        """Convert float value(s) in the range [0, 1] to the storage type."""

    def coerce(self, value: Any) -> Any:
        """Cast raw input into the storage type without rescaling."""
        with np.errstate(invalid="ignore", over="ignore"):
            return _unwrap(np.asarray(value).astype(self.dtype))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def _key(self) -> tuple:
        return (self.dtype.str,)


class FloatComponent(Component):
    """Float storage, interpreted as already normalized."""

    def __init__(self, dtype: Any = np.float64) -> None:
        dtype = np.dtype(dtype)
        if dtype.kind != "f":
            raise TypeError(f"FloatComponent expects a floating dtype, got {dtype}")
        self.dtype = dtype

    def to_normalized(self, value: Any) -> Normalized:
        return _unwrap(np.asarray(value, dtype=np.float64))

    def from_normalized(self, x: Any) -> Any:
        # float32 overflows to inf, which is the intended pass-through
        with np.errstate(over="ignore"):
            return _unwrap(np.asarray(x, dtype=np.float64).astype(self.dtype))

    def __repr__(self) -> str:
        return f"FloatComponent({self.dtype.name})"


class ScalingComponent(Component):
    """
    Unsigned integer storage scaled by a maximum value.

    Args:
        dtype: Unsigned integer dtype used for storage.
        maximum: Value that maps to 1.0. Defaults to the largest value the
            dtype can represent; a smaller maximum models narrower formats,
            e.g. 12-bit samples kept in ``uint16``.
    """

    def __init__(self, dtype: Any, maximum: Optional[int] = None) -> None:
        dtype = np.dtype(dtype)
        if dtype.kind != "u":
            raise TypeError(f"ScalingComponent expects an unsigned integer dtype, got {dtype}")
        limit = int(np.iinfo(dtype).max)
        maximum = limit if maximum is None else int(maximum)
        if not 0 < maximum <= limit:
            raise ValueError(f"maximum must be in (0, {limit}] for {dtype}, got {maximum}")
        self.dtype = dtype
        self.maximum = maximum
        self._scale = float(maximum)
        # largest float strictly below the scale; always castable to dtype
        self._safe_limit = float(np.nextafter(self._scale, 0.0))

    def to_normalized(self, value: Any) -> Normalized:
        return _unwrap(np.asarray(value, dtype=np.float64) / self._scale)

    def from_normalized(self, x: Any) -> Any:
        scaled = np.asarray(x, dtype=np.float64) * self._scale
        scaled = np.nan_to_num(scaled, nan=0.0, posinf=self._scale, neginf=0.0)
        scaled = np.clip(np.trunc(scaled), 0.0, self._scale)
        below = np.minimum(scaled, self._safe_limit).astype(self.dtype)
        result = np.where(scaled >= self._scale, self.dtype.type(self.maximum), below)
        return _unwrap(np.asarray(result, dtype=self.dtype))

    def _key(self) -> tuple:
        return (self.dtype.str, self.maximum)

    def __repr__(self) -> str:
        return f"ScalingComponent({self.dtype.name}, maximum={self.maximum})"
