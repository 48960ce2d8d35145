from __future__ import annotations
from typing import ClassVar
from ..components import Component, component_for
from ..types.component_type import ComponentType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class RGBColor(ColorBase):
    """Additive red-green-blue color."""
    mode: ClassVar[ColorSpace] = ColorSpace.RGB

    def ryb(self, **kwargs) -> ColorBase:
        """Convert to the RYB class with the same storage type."""
        return self.convert(ColorSpace.RYB, **kwargs)


class ColorRGBF32(RGBColor):
    component_type: ClassVar[str] = ComponentType.F32.value
    component: ClassVar[Component] = component_for(ComponentType.F32)


class ColorUnitRGB(RGBColor):
    component_type: ClassVar[str] = ComponentType.F64.value
    component: ClassVar[Component] = component_for(ComponentType.F64)


class ColorRGB8(RGBColor):
    component_type: ClassVar[str] = ComponentType.U8.value
    component: ClassVar[Component] = component_for(ComponentType.U8)


class ColorRGB16(RGBColor):
    component_type: ClassVar[str] = ComponentType.U16.value
    component: ClassVar[Component] = component_for(ComponentType.U16)


class ColorRGB32(RGBColor):
    component_type: ClassVar[str] = ComponentType.U32.value
    component: ClassVar[Component] = component_for(ComponentType.U32)


class ColorRGB64(RGBColor):
    component_type: ClassVar[str] = ComponentType.U64.value
    component: ClassVar[Component] = component_for(ComponentType.U64)


class ColorRGBSize(RGBColor):
    component_type: ClassVar[str] = ComponentType.USIZE.value
    component: ClassVar[Component] = component_for(ComponentType.USIZE)


rgb_tuple_to_class = build_registry(
    ColorRGBF32,
    ColorUnitRGB,
    ColorRGB8,
    ColorRGB16,
    ColorRGB32,
    ColorRGB64,
    ColorRGBSize,
)
