"""Named RYB reference colors (palette anchors) in normalized float64."""
from .colors.ryb import ColorUnitRYB

BLACK = ColorUnitRYB((1.0, 1.0, 1.0))
BLUE = ColorUnitRYB((0.0, 0.0, 1.0))
CYAN = ColorUnitRYB((0.0, 0.5, 1.0))
GREEN = ColorUnitRYB((0.0, 1.0, 1.0))
PURPLE = ColorUnitRYB((1.0, 0.0, 0.5))
RED = ColorUnitRYB((1.0, 0.0, 0.0))
WHITE = ColorUnitRYB((0.0, 0.0, 0.0))
YELLOW = ColorUnitRYB((0.0, 1.0, 0.0))

PALETTE = {
    "black": BLACK,
    "blue": BLUE,
    "cyan": CYAN,
    "green": GREEN,
    "purple": PURPLE,
    "red": RED,
    "white": WHITE,
    "yellow": YELLOW,
}
