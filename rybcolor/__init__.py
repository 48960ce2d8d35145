"""rybcolor: RGB ↔ RYB color conversion and subtractive color mixing."""

from .colors.color_base import ColorBase
from .colors.rgb import (
    RGBColor,
    ColorRGBF32,
    ColorUnitRGB,
    ColorRGB8,
    ColorRGB16,
    ColorRGB32,
    ColorRGB64,
    ColorRGBSize,
)
from .colors.ryb import (
    RYBColor,
    ColorRYBF32,
    ColorUnitRYB,
    ColorRYB8,
    ColorRYB16,
    ColorRYB32,
    ColorRYB64,
    ColorRYBSize,
)
from .colors.color import color_convert, get_color_class, register_color_class

# Friendly aliases for the common 8-bit variants
ColorRGB = ColorRGB8
ColorRYB = ColorRYB8

from .colors.arithmetic import make_arithmetic
from .colors.mix import mix
from .components import (
    Component,
    FloatComponent,
    ScalingComponent,
    component_for,
    register_component,
)
from .conversions import (
    unit_rgb_to_ryb,
    np_unit_rgb_to_ryb,
    ryb_to_unit_rgb,
    np_ryb_to_unit_rgb,
    convert,
    np_convert,
    rgb_to_ryb,
    ryb_to_rgb,
)
from .exceptions import DegenerateConversionWarning
from .palette import BLACK, BLUE, CYAN, GREEN, PURPLE, RED, WHITE, YELLOW, PALETTE
from .types import ColorSpace, ComponentType

__version__ = "0.1.0"

__all__ = [
    # core color types
    "ColorBase",
    "RGBColor",
    "RYBColor",
    "ColorRGBF32",
    "ColorUnitRGB",
    "ColorRGB8",
    "ColorRGB16",
    "ColorRGB32",
    "ColorRGB64",
    "ColorRGBSize",
    "ColorRYBF32",
    "ColorUnitRYB",
    "ColorRYB8",
    "ColorRYB16",
    "ColorRYB32",
    "ColorRYB64",
    "ColorRYBSize",
    "ColorRGB",
    "ColorRYB",
    "color_convert",
    "get_color_class",
    "register_color_class",
    # arithmetic and mixing
    "make_arithmetic",
    "mix",
    # components
    "Component",
    "FloatComponent",
    "ScalingComponent",
    "component_for",
    "register_component",
    "ComponentType",
    "ColorSpace",
    # conversions
    "unit_rgb_to_ryb",
    "np_unit_rgb_to_ryb",
    "ryb_to_unit_rgb",
    "np_ryb_to_unit_rgb",
    "convert",
    "np_convert",
    "rgb_to_ryb",
    "ryb_to_rgb",
    "DegenerateConversionWarning",
    # palette
    "BLACK",
    "BLUE",
    "CYAN",
    "GREEN",
    "PURPLE",
    "RED",
    "WHITE",
    "YELLOW",
    "PALETTE",
    "__version__",
]
