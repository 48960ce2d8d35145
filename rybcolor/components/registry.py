from typing import Dict, Union
from .component import Component, FloatComponent, ScalingComponent
from ..types.component_type import ComponentType, component_dtypes, FLOAT_TYPES

_components: Dict[str, Component] = {}
_BUILTIN_NAMES = frozenset(ctype.value for ctype in ComponentType)


def _key(name: Union[ComponentType, str]) -> str:
    return name.value if isinstance(name, ComponentType) else str(name)


def register_component(name: str, component: Component) -> Component:
    """
    Register a custom component under ``name`` so colors and conversions can
    refer to it by name. Built-in names cannot be replaced.
    """
    if not isinstance(component, Component):
        raise TypeError(f"Expected a Component instance, got {type(component).__name__}")
    key = _key(name)
    if key in _BUILTIN_NAMES:
        raise ValueError(f"Cannot replace built-in component {key!r}")
    _components[key] = component
    return component


def component_for(name: Union[ComponentType, str, Component]) -> Component:
    if isinstance(name, Component):
        return name
    component = _components.get(_key(name))
    if component is None:
        raise ValueError(f"Unknown component type: {name!r}")
    return component


for _ctype, _dtype in component_dtypes.items():
    if _ctype in FLOAT_TYPES:
        _components[_ctype.value] = FloatComponent(_dtype)
    else:
        _components[_ctype.value] = ScalingComponent(_dtype)
