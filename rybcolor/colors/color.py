from __future__ import annotations
from typing import Dict, Optional, Tuple, Union
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .ryb import ryb_tuple_to_class
from ..components import Component
from ..types.color_types import ColorSpace, DegeneratePolicy

unified_tuple_to_class: Dict[Tuple[str, str], type[ColorBase]] = {**rgb_tuple_to_class, **ryb_tuple_to_class}


def _component_name(component: Union[Component, str]) -> str:
    if isinstance(component, Component):
        for cls in unified_tuple_to_class.values():
            if cls.component == component:
                return cls.component_type
        raise ValueError(f"No color class registered for component {component!r}")
    return str(getattr(component, "value", component))


def get_color_class(color_space: Union[ColorSpace, str], component_type: Union[Component, str]) -> type[ColorBase]:
    space = ColorSpace(str(getattr(color_space, "value", color_space)).lower()).value
    color_class = unified_tuple_to_class.get((space, _component_name(component_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/component combination: {space}/{component_type}"
        )
    return color_class


def register_color_class(cls: type[ColorBase]) -> type[ColorBase]:
    """
    Register a custom color class so ``convert`` can produce it.
    Usable as a class decorator.
    """
    key = (cls.mode.value, cls.component_type)
    existing = unified_tuple_to_class.get(key)
    if existing is not None and existing is not cls:
        raise ValueError(f"A color class is already registered for {key[0]}/{key[1]}: {existing.__name__}")
    unified_tuple_to_class[key] = cls
    return cls


def color_convert(
    self: ColorBase,
    to_space: Optional[Union[ColorSpace, str]] = None,
    to_component: Optional[Union[Component, str]] = None,
    *,
    use_balanced_algo: bool = False,
    degenerate: DegeneratePolicy = "propagate",
) -> ColorBase:
    """
    Convert this color to a different color space and/or storage type.

    Automatically detects whether the value is a scalar or array and uses
    the appropriate conversion function (convert for scalars, np_convert for arrays).

    Args:
        to_space: Target color space ("rgb" or "ryb"). Defaults to the current space.
        to_component: Target storage type. Defaults to the current one.
        use_balanced_algo: Use the exact inverse formula for RYB → RGB
        degenerate: "propagate" (NaN plus a warning) or "neutral" for gray inputs

    Returns:
        New ColorBase instance in the target space/storage type
    """
    to_space = to_space or self.mode
    cls = get_color_class(to_space, to_component if to_component is not None else self.component_type)
    value = self.converted_value(
        cls.mode,
        cls.component,
        use_balanced_algo=use_balanced_algo,
        degenerate=degenerate,
    )
    return cls(value)

ColorBase.convert = color_convert
