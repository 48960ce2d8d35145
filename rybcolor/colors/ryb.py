from __future__ import annotations
from typing import ClassVar
from ..components import Component, component_for
from ..types.component_type import ComponentType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class RYBColor(ColorBase):
    """
    Subtractive red-yellow-blue color.

    ``(0, 0, 0)`` is white and ``(1, 1, 1)`` is black, the way paint
    behaves: adding pigment darkens.
    """
    mode: ClassVar[ColorSpace] = ColorSpace.RYB

    @classmethod
    def from_rgb(cls, rgb: ColorBase, **kwargs) -> RYBColor:
        """
        Create an RYB color from an RGB color.

        The result keeps this class's storage type; ``kwargs`` are passed on
        to the conversion (``degenerate``).
        """
        if rgb.mode != ColorSpace.RGB:
            raise TypeError(f"from_rgb expects an RGB color, got {rgb.mode.value}")
        return cls(rgb.converted_value(ColorSpace.RYB, cls.component, **kwargs))

    def rgb(self, **kwargs) -> ColorBase:
        """Convert to the RGB class with the same storage type."""
        return self.convert(ColorSpace.RGB, **kwargs)


class ColorRYBF32(RYBColor):
    component_type: ClassVar[str] = ComponentType.F32.value
    component: ClassVar[Component] = component_for(ComponentType.F32)


class ColorUnitRYB(RYBColor):
    component_type: ClassVar[str] = ComponentType.F64.value
    component: ClassVar[Component] = component_for(ComponentType.F64)


class ColorRYB8(RYBColor):
    component_type: ClassVar[str] = ComponentType.U8.value
    component: ClassVar[Component] = component_for(ComponentType.U8)


class ColorRYB16(RYBColor):
    component_type: ClassVar[str] = ComponentType.U16.value
    component: ClassVar[Component] = component_for(ComponentType.U16)


class ColorRYB32(RYBColor):
    component_type: ClassVar[str] = ComponentType.U32.value
    component: ClassVar[Component] = component_for(ComponentType.U32)


class ColorRYB64(RYBColor):
    component_type: ClassVar[str] = ComponentType.U64.value
    component: ClassVar[Component] = component_for(ComponentType.U64)


class ColorRYBSize(RYBColor):
    component_type: ClassVar[str] = ComponentType.USIZE.value
    component: ClassVar[Component] = component_for(ComponentType.USIZE)


ryb_tuple_to_class = build_registry(
    ColorRYBF32,
    ColorUnitRYB,
    ColorRYB8,
    ColorRYB16,
    ColorRYB32,
    ColorRYB64,
    ColorRYBSize,
)
