import math
from typing import ClassVar
import numpy as np
import pytest

from rybcolor.colors import (
    ColorBase,
    ColorRGB8,
    ColorRGB16,
    ColorRGBF32,
    ColorUnitRGB,
    ColorRYB8,
    ColorRYB16,
    ColorUnitRYB,
    ColorRYBSize,
    RGBColor,
    RYBColor,
    get_color_class,
    register_color_class,
)
from rybcolor.components import Component, ScalingComponent, register_component
from rybcolor.exceptions import DegenerateConversionWarning
from samples import samples_rgb_ryb, samples_ryb_rgb_balanced


def test_construct_scalar():
    rgb = ColorRGB8((255, 128, 0))
    assert rgb.value == (255, 128, 0)
    assert all(v.dtype == np.uint8 for v in rgb.value)
    assert not rgb.is_array
    assert rgb.shape is None
    assert rgb.mode == "rgb"


def test_construct_does_not_clamp():
    rgb = ColorUnitRGB((1.5, -0.2, 0.3))
    assert rgb.value == pytest.approx((1.5, -0.2, 0.3))


def test_normalized():
    assert ColorRGB8((255, 0, 51)).normalized == pytest.approx((1.0, 0.0, 0.2))
    assert ColorRYB16((65535, 0, 0)).normalized == pytest.approx((1.0, 0.0, 0.0))


def test_construct_array():
    arr = np.array([[255, 0, 0], [0, 0, 255]], dtype=np.uint8)
    rgb = ColorRGB8(arr)
    assert rgb.is_array
    assert rgb.shape == (2, 3)
    assert rgb.value.dtype == np.uint8
    # stored arrays are read-only copies
    arr[0, 0] = 1
    assert rgb.value[0, 0] == 255
    with pytest.raises(ValueError):
        rgb.value[0, 0] = 3


def test_array_integer_dtype_is_widened():
    rgb = ColorRGB16(np.array([[1, 2, 3]], dtype=np.uint8))
    assert rgb.value.dtype == np.uint16


def test_immutable():
    rgb = ColorUnitRGB((0.1, 0.2, 0.3))
    with pytest.raises(AttributeError):
        rgb._value = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        rgb.extra = 1


def test_invalid_construction():
    with pytest.raises(ValueError):
        ColorUnitRGB((0.1, 0.2))
    with pytest.raises(ValueError):
        ColorUnitRGB(np.zeros((2, 4)))
    with pytest.raises(TypeError):
        ColorRGB8(np.zeros((2, 3), dtype=np.float64))
    with pytest.raises(TypeError):
        ColorUnitRGB(np.zeros((2, 3), dtype=np.uint8))
    with pytest.raises(TypeError):
        ColorUnitRGB(("a", 0.0, 0.0))
    with pytest.raises(TypeError):
        ColorUnitRGB((True, 0.0, 0.0))
    with pytest.raises(TypeError):
        ColorUnitRGB(0.5)  # type: ignore[arg-type]


def test_equality_and_hash():
    assert ColorRGB8((1, 2, 3)) == ColorRGB8((1, 2, 3))
    assert ColorRGB8((1, 2, 3)) != ColorRGB8((1, 2, 4))
    assert ColorRGB8((1, 2, 3)) != ColorRYB8((1, 2, 3))
    assert ColorRGB8((1, 2, 3)) != ColorRGB16((1, 2, 3))
    assert len({ColorRGB8((1, 2, 3)), ColorRGB8((1, 2, 3)), ColorRYB8((1, 2, 3))}) == 2

    arr = np.array([[1, 2, 3]], dtype=np.uint8)
    assert ColorRGB8(arr) == ColorRGB8(arr.copy())
    with pytest.raises(TypeError):
        hash(ColorRGB8(arr))


def test_repr():
    assert repr(ColorRGB8((255, 0, 0))) == "ColorRGB8((255, 0, 0))"
    assert repr(ColorUnitRGB(np.zeros((4, 3)))) == "ColorUnitRGB(array(shape=(4, 3)))"


def test_convert_rgb_to_ryb():
    for rgb, ryb_expected in samples_rgb_ryb.items():
        ryb = ColorUnitRGB(rgb).convert("ryb")
        assert isinstance(ryb, ColorUnitRYB)
        assert ryb.value == pytest.approx(ryb_expected)


def test_convert_with_storage_change():
    ryb = ColorRGB8((255, 255, 0)).convert("ryb", "float64")
    assert isinstance(ryb, ColorUnitRYB)
    assert ryb.value == pytest.approx((0.0, 1.0, 0.0))

    rgb = ColorUnitRGB((1.0, 0.0, 0.0)).convert(to_component="uint8")
    assert isinstance(rgb, ColorRGB8)
    assert rgb.value == (255, 0, 0)


def test_convert_ryb_to_rgb_balanced():
    for ryb, rgb_expected in samples_ryb_rgb_balanced.items():
        rgb = ColorUnitRYB(ryb).rgb(use_balanced_algo=True)
        assert isinstance(rgb, ColorUnitRGB)
        assert rgb.value == pytest.approx(rgb_expected)


def test_from_rgb_and_back():
    rgb = ColorUnitRGB((0.2, 0.5, 0.7))
    ryb = ColorUnitRYB.from_rgb(rgb)
    assert ryb.value == pytest.approx((0.3, 0.4875, 0.8))
    assert ryb.rgb(use_balanced_algo=True).value == pytest.approx((0.2, 0.5, 0.7))
    assert rgb.ryb() == ryb

    ryb8 = ColorRYB8.from_rgb(ColorRGB8((255, 0, 0)))
    assert ryb8 == ColorRYB8((255, 0, 0))
    assert ryb8.rgb() == ColorRGB8((255, 0, 0))

    with pytest.raises(TypeError):
        ColorUnitRYB.from_rgb(ryb)


def test_construct_from_other_color():
    ryb = ColorUnitRYB(ColorRGB8((255, 255, 0)))
    assert ryb.value == pytest.approx((0.0, 1.0, 0.0))
    same = ColorRGB8(ColorRGB8((1, 2, 3)))
    assert same.value == (1, 2, 3)


def test_convert_array():
    arr = np.array([[0.2, 0.5, 0.7], [1.0, 0.0, 0.0]])
    ryb = ColorUnitRGB(arr).convert("ryb")
    assert ryb.is_array
    np.testing.assert_allclose(ryb.value, [[0.3, 0.4875, 0.8], [1.0, 0.0, 0.0]])
    back = ryb.rgb(use_balanced_algo=True)
    np.testing.assert_allclose(back.value, arr)


def test_float32_storage():
    ryb = ColorRGBF32((0.2, 0.5, 0.7)).convert("ryb")
    assert all(v.dtype == np.float32 for v in ryb.value)
    assert [float(v) for v in ryb.value] == pytest.approx((0.3, 0.4875, 0.8), abs=1e-6)


def test_degenerate_colors():
    with pytest.warns(DegenerateConversionWarning):
        ryb = ColorUnitRGB((0.0, 0.0, 0.0)).convert("ryb")
    assert all(math.isnan(v) for v in ryb.value)

    ryb = ColorUnitRGB((0.0, 0.0, 0.0)).convert("ryb", degenerate="neutral")
    assert ryb == ColorUnitRYB((1.0, 1.0, 1.0))

    with pytest.warns(DegenerateConversionWarning):
        ryb8 = ColorRGB8((0, 0, 0)).ryb()
    assert ryb8.value == (0, 0, 0)


def test_get_color_class():
    assert get_color_class("ryb", "uint16") is ColorRYB16
    assert get_color_class("RGB", "float32") is ColorRGBF32
    assert get_color_class("ryb", "usize") is ColorRYBSize
    with pytest.raises(ValueError):
        get_color_class("ryb", "int8")
    with pytest.raises(ValueError):
        get_color_class("hsl", "uint8")


def test_custom_color_classes():
    u12 = register_component("test-u12", ScalingComponent(np.uint16, maximum=4095))

    @register_color_class
    class ColorRGB12(RGBColor):
        component_type: ClassVar[str] = "test-u12"
        component: ClassVar[Component] = u12

    @register_color_class
    class ColorRYB12(RYBColor):
        component_type: ClassVar[str] = "test-u12"
        component: ClassVar[Component] = u12

    ryb = ColorRGB12((4095, 0, 0)).ryb()
    assert isinstance(ryb, ColorRYB12)
    assert ryb.value == (4095, 0, 0)
    assert ColorRGB12((4095, 0, 0)).convert("rgb", "uint8") == ColorRGB8((255, 0, 0))

    with pytest.raises(ValueError, match="already registered"):
        @register_color_class
        class Duplicate(RGBColor):
            component_type: ClassVar[str] = "test-u12"
            component: ClassVar[Component] = u12


def test_base_class_is_abstract_over_space():
    assert issubclass(ColorRGB8, ColorBase)
    assert issubclass(ColorRYB8, RYBColor)
