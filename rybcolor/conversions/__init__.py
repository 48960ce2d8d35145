"""
RYB Color Space Conversions
===========================

Bidirectional conversions between additive RGB and subtractive RYB, with
scalar and vectorized (numpy) implementations.

Conversion Functions
-------------------

RGB → RYB:
    unit_rgb_to_ryb(r, g, b, degenerate="propagate")
        Scalar conversion on normalized floats
    np_unit_rgb_to_ryb(r, g, b, degenerate="propagate")
        Vectorized conversion

RYB → RGB:
    ryb_to_unit_rgb(r, y, b, use_balanced_algo=False, degenerate="propagate")
        Scalar conversion on normalized floats
    np_ryb_to_unit_rgb(r, y, b, use_balanced_algo=False, degenerate="propagate")
        Vectorized conversion

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type, ...)
        Converter with storage type handling
    np_convert(color, from_space, to_space, input_type, output_type, ...)
        Vectorized converter
    rgb_to_ryb(color, component), ryb_to_rgb(color, component)
        Triple-level shortcuts keeping the storage type

Algorithm Selection
------------------
``use_balanced_algo=True`` selects the exact inverse of the forward
transform for RYB → RGB. The default reproduces the reference formula.

Gray inputs leave nothing to rescale once the white component is removed.
``degenerate="propagate"`` (default) lets the zero division produce NaN and
warns with ``DegenerateConversionWarning``; ``degenerate="neutral"`` skips
the rescaling step so grays convert to grays.

Examples
--------
>>> from rybcolor.conversions import unit_rgb_to_ryb, ryb_to_unit_rgb
>>> r, y, b = unit_rgb_to_ryb(0.2, 0.5, 0.7)
>>> [round(c, 6) for c in ryb_to_unit_rgb(r, y, b, use_balanced_algo=True)]
[0.2, 0.5, 0.7]
"""

from .to_ryb import unit_rgb_to_ryb, np_unit_rgb_to_ryb
from .to_rgb import ryb_to_unit_rgb, np_ryb_to_unit_rgb
from .wrapper import convert, np_convert, rgb_to_ryb, ryb_to_rgb

from ..types.component_type import ComponentType
from ..types.color_types import ColorSpace

__all__ = [
    # RGB → RYB
    'unit_rgb_to_ryb',
    'np_unit_rgb_to_ryb',

    # RYB → RGB
    'ryb_to_unit_rgb',
    'np_ryb_to_unit_rgb',

    # High-level API
    'convert',
    'np_convert',
    'rgb_to_ryb',
    'ryb_to_rgb',

    # Types
    'ComponentType',
    'ColorSpace',
]
