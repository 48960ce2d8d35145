"""Basic rybcolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from rybcolor import (
    ColorRGB,
    ColorUnitRGB,
    ColorUnitRYB,
    mix,
    rgb_to_ryb,
    RED,
    YELLOW,
    BLUE,
)


def demonstrate_colors() -> None:
    # Construct typed colors and convert between spaces.
    accent = ColorRGB((255, 128, 64))
    print("RGB as floats:", accent.normalized)

    converted = rgb_to_ryb(accent.value, "uint8")
    print("RGB -> RYB (uint8):", converted)

    ryb_color = ColorUnitRYB.from_rgb(ColorUnitRGB(accent))
    print("RYB -> RGB (balanced):", ryb_color.rgb(use_balanced_algo=True).value)

    # Grays have no chroma to rescale; "neutral" keeps them gray.
    print("RGB white -> RYB:", ColorUnitRGB((1.0, 1.0, 1.0)).ryb(degenerate="neutral").value)


def demonstrate_mixing() -> None:
    # Mix paint-like in RYB space.
    orange = mix([(1, RED), (1, YELLOW)])
    print("Red + yellow:", orange.value)

    brown = mix([(2, RED), (1, YELLOW), (1, BLUE)])
    print("Brown-ish as RGB:", brown.rgb(use_balanced_algo=True).value)

    strip = ColorUnitRGB(np.linspace([1.0, 0.0, 0.0], [0.0, 0.0, 1.0], 5))
    print("Array RGB -> RYB:", strip.ryb().value)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_mixing()
