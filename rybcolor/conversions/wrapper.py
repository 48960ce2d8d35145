import numpy as np
from typing import Callable, Dict, Optional, Tuple, Union, cast

from .to_ryb import np_unit_rgb_to_ryb
from .to_rgb import np_ryb_to_unit_rgb
from ..components import Component, component_for
from ..types.component_type import ComponentType
from ..types.color_types import ColorElement, ColorSpace, DegeneratePolicy, element_to_array, validate_policy

ComponentLike = Union[ComponentType, str, Component]

CONVERT_NUMPY: Dict[Tuple[str, str], Callable[..., np.ndarray]] = {
    ("rgb", "ryb"): lambda r, g, b, balanced, degenerate: np_unit_rgb_to_ryb(
        r, g, b, degenerate=degenerate
    ),
    ("ryb", "rgb"): lambda r, y, b, balanced, degenerate: np_ryb_to_unit_rgb(
        r, y, b, use_balanced_algo=balanced, degenerate=degenerate
    ),
}


def _space(space: Union[ColorSpace, str]) -> str:
    value = ColorSpace(str(getattr(space, "value", space)).lower())
    return value.value


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_component: Component,
    output_component: Component,
    use_balanced_algo: bool = False,
    degenerate: DegeneratePolicy = "propagate",
) -> np.ndarray:
    if color.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {color.shape}")

    # normalize → convert → scale
    base_norm = np.asarray(input_component.to_normalized(color), dtype=np.float64)

    if from_space == to_space:
        converted = base_norm
    else:
        converted = CONVERT_NUMPY[(from_space, to_space)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
            use_balanced_algo,
            degenerate,
        )

    return np.asarray(output_component.from_normalized(converted))


def convert(
    color: ColorElement,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
    input_type: ComponentLike = ComponentType.F64,
    output_type: Optional[ComponentLike] = None,
    use_balanced_algo: bool = False,
    degenerate: DegeneratePolicy = "propagate",
) -> ColorElement:
    """
    Convert a single color triple between RGB and RYB.

    Args:
        color: Three components stored in ``input_type``
        from_space: Source space, ``"rgb"`` or ``"ryb"``
        to_space: Target space, ``"rgb"`` or ``"ryb"``
        input_type: Storage type of ``color``
        output_type: Storage type of the result. Defaults to ``input_type``
        use_balanced_algo: Use the exact inverse for RYB → RGB
        degenerate: How to handle gray inputs, ``"propagate"`` or ``"neutral"``

    Returns:
        Tuple of three values in the output storage type
    """
    validate_policy(degenerate)
    fs, ts = _space(from_space), _space(to_space)
    input_component = component_for(input_type)
    output_component = component_for(output_type if output_type is not None else input_type)
    if fs == ts and input_component == output_component:
        return color  # No conversion needed
    color_array = element_to_array(color)
    result = _convert_core(
        color_array,
        fs,
        ts,
        input_component,
        output_component,
        use_balanced_algo,
        degenerate,
    )
    # Convert back to tuple for scalar output
    return tuple(result.flat) if result.ndim == 1 else cast(ColorElement, result)


def np_convert(
    color: np.ndarray,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
    input_type: ComponentLike = ComponentType.F64,
    output_type: Optional[ComponentLike] = None,
    use_balanced_algo: bool = False,
    degenerate: DegeneratePolicy = "propagate",
) -> np.ndarray:
    """Vectorized ``convert`` for arrays whose last axis holds the channels."""
    validate_policy(degenerate)
    fs, ts = _space(from_space), _space(to_space)
    input_component = component_for(input_type)
    output_component = component_for(output_type if output_type is not None else input_type)
    if fs == ts and input_component == output_component:
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color),
        fs,
        ts,
        input_component,
        output_component,
        use_balanced_algo,
        degenerate,
    )


def rgb_to_ryb(
    color: ColorElement,
    component: ComponentLike = ComponentType.F64,
    degenerate: DegeneratePolicy = "propagate",
) -> ColorElement:
    """RGB triple → RYB triple in the same storage type."""
    return convert(color, "rgb", "ryb", component, component, degenerate=degenerate)


def ryb_to_rgb(
    color: ColorElement,
    component: ComponentLike = ComponentType.F64,
    use_balanced_algo: bool = False,
    degenerate: DegeneratePolicy = "propagate",
) -> ColorElement:
    """RYB triple → RGB triple in the same storage type."""
    return convert(
        color,
        "ryb",
        "rgb",
        component,
        component,
        use_balanced_algo=use_balanced_algo,
        degenerate=degenerate,
    )
