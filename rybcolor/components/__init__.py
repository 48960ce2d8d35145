from .component import Component, FloatComponent, ScalingComponent
from .registry import component_for, register_component

__all__ = [
    "Component",
    "FloatComponent",
    "ScalingComponent",
    "component_for",
    "register_component",
]
