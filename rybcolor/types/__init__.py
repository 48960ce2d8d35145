from .component_type import ComponentType, component_dtypes, FLOAT_TYPES
from .color_types import ColorSpace, ColorElement, ColorValue, DegeneratePolicy, element_to_array

__all__ = [
    "ComponentType",
    "component_dtypes",
    "FLOAT_TYPES",
    "ColorSpace",
    "ColorElement",
    "ColorValue",
    "DegeneratePolicy",
    "element_to_array",
]
