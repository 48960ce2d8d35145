from __future__ import annotations
from typing import Callable, ClassVar, Tuple, Union
from ..components import Component, component_for
from ..conversions import convert, np_convert
from ..types.color_types import ColorSpace, ColorValue, DegeneratePolicy
from numpy import ndarray
import numpy as np


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:           ClassVar[ColorSpace]
    component_type: ClassVar[str]
    component:      ClassVar[Component]
    # def color_convert(self, to_space, to_component=None, *, use_balanced_algo=False, degenerate="propagate")
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorValue, ColorBase]) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.component == self.component:
                value = value.value
            else:
                value = value.converted_value(self.mode, self.component)

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            arr = value

            # Validate dtype
            valid_kinds = "f" if self.component.is_float else "iu"
            if arr.dtype.kind not in valid_kinds:
                raise TypeError(
                    f"{self.__class__.__name__} with {self.component_type} components expects "
                    f"dtype kind in {valid_kinds!r}, got {arr.dtype}"
                )

            # Validate shape: last dimension should match num_channels
            if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
                raise ValueError(
                    f"{self.mode.value} expects last dimension to be {self.num_channels}, "
                    f"got shape {arr.shape}"
                )

            arr = np.array(self.component.coerce(arr), dtype=self.component.dtype)
            arr.flags.writeable = False
            value = arr

        # ---- Handle tuple input ----
        else:
            try:
                values = tuple(value)
            except TypeError:
                raise TypeError(
                    f"{self.__class__.__name__} expects a {self.num_channels}-tuple, an ndarray "
                    f"or a color, got {type(value).__name__}"
                ) from None
            if len(values) != self.num_channels:
                raise ValueError(
                    f"{self.mode.value} expects {self.num_channels} components, got {len(values)}"
                )
            for v in values:
                if isinstance(v, (bool, np.bool_)) or np.asarray(v).dtype.kind not in "fiu" or np.ndim(v) != 0:
                    raise TypeError(f"Color components must be real numbers, got {v!r}")

            # type enforcement, no clamping
            value = tuple(self.component.coerce(v) for v in values)

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def normalized(self) -> Union[Tuple[float, float, float], ndarray]:
        """Components as float64 in the normalized [0, 1] domain."""
        if isinstance(self._value, ndarray):
            return np.asarray(self.component.to_normalized(self._value), dtype=np.float64)
        return tuple(float(self.component.to_normalized(v)) for v in self._value)

    def converted_value(
        self,
        to_space: Union[ColorSpace, str],
        to_component: Union[Component, str, None] = None,
        *,
        use_balanced_algo: bool = False,
        degenerate: DegeneratePolicy = "propagate",
    ) -> ColorValue:
        """
        Return this color's value converted to another space and storage type,
        without wrapping it in a color class.
        """
        output = component_for(to_component) if to_component is not None else self.component
        if isinstance(self._value, ndarray):
            return np_convert(
                color=self._value,
                from_space=self.mode,
                to_space=to_space,
                input_type=self.component,
                output_type=output,
                use_balanced_algo=use_balanced_algo,
                degenerate=degenerate,
            )
        return convert(
            color=self._value,
            from_space=self.mode,
            to_space=to_space,
            input_type=self.component,
            output_type=output,
            use_balanced_algo=use_balanced_algo,
            degenerate=degenerate,
        )

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if self.mode != other.mode or self.component != other.component:
            return False
        if self.is_array or other.is_array:
            return self.is_array and other.is_array and np.array_equal(self._value, other._value)
        return self._value == other._value

    def __hash__(self) -> int:
        if isinstance(self._value, ndarray):
            raise TypeError(f"unhashable array color: {self.__class__.__name__}")
        return hash((self.mode, self.component, self._value))

    def __repr__(self) -> str:
        if isinstance(self._value, ndarray):
            return f"{self.__class__.__name__}(array(shape={self._value.shape}))"
        return f"{self.__class__.__name__}({tuple(v.item() for v in self._value)!r})"


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode.value, cls.component_type): cls
        for cls in classes
    }
