"""
RYB Color Classes
=================

Immutable color classes for the RGB and RYB color spaces, one class per
component storage type.

Scalar Usage
-----------
>>> from rybcolor.colors import ColorRGB8, ColorUnitRYB
>>>
>>> orange = ColorRGB8((255, 128, 0))
>>> ryb = orange.convert("ryb", "float64")
>>> isinstance(ryb, ColorUnitRYB)
True

Array Usage
-----------
>>> import numpy as np
>>> colors = ColorRGB8(np.array([[255, 128, 0], [0, 0, 255]], dtype=np.uint8))
>>> colors.is_array
True
>>> colors.convert("ryb").shape
(2, 3)

Color Classes
-------------
RGB (``RGBColor``) and RYB (``RYBColor``) variants:
    - ColorRGBF32 / ColorRYBF32: float32 storage
    - ColorUnitRGB / ColorUnitRYB: float64 storage
    - ColorRGB8 / ColorRYB8: uint8
    - ColorRGB16 / ColorRYB16: uint16
    - ColorRGB32 / ColorRYB32: uint32
    - ColorRGB64 / ColorRYB64: uint64
    - ColorRGBSize / ColorRYBSize: pointer-sized unsigned integer

Notes
-----
- Values are never clamped on construction or conversion
- Array dtypes must match the storage kind (float or integer)
- Arrays must have last dimension equal to 3
"""

from .color_base import ColorBase
from .rgb import (
    RGBColor,
    ColorRGBF32,
    ColorUnitRGB,
    ColorRGB8,
    ColorRGB16,
    ColorRGB32,
    ColorRGB64,
    ColorRGBSize,
)
from .ryb import (
    RYBColor,
    ColorRYBF32,
    ColorUnitRYB,
    ColorRYB8,
    ColorRYB16,
    ColorRYB32,
    ColorRYB64,
    ColorRYBSize,
)
from .color import color_convert, get_color_class, register_color_class, unified_tuple_to_class
from .arithmetic import make_arithmetic
from .mix import mix

__all__ = [
    'ColorBase',
    'RGBColor',
    'RYBColor',
    'ColorRGBF32',
    'ColorUnitRGB',
    'ColorRGB8',
    'ColorRGB16',
    'ColorRGB32',
    'ColorRGB64',
    'ColorRGBSize',
    'ColorRYBF32',
    'ColorUnitRYB',
    'ColorRYB8',
    'ColorRYB16',
    'ColorRYB32',
    'ColorRYB64',
    'ColorRYBSize',
    'color_convert',
    'get_color_class',
    'register_color_class',
    'unified_tuple_to_class',
    'make_arithmetic',
    'mix',
]
