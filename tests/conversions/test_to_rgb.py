import math
import numpy as np
import pytest

from rybcolor.conversions import ryb_to_unit_rgb, np_ryb_to_unit_rgb
from rybcolor.exceptions import DegenerateConversionWarning
from samples import samples_ryb_rgb_balanced, samples_ryb_rgb_reference

rgb_tolerance = 1e-9


def test_reference_formula_samples():
    for (r, y, b), expected in samples_ryb_rgb_reference.items():
        out = ryb_to_unit_rgb(r, y, b)
        assert out == pytest.approx(expected, abs=rgb_tolerance)


def test_balanced_formula_samples():
    for (r, y, b), expected in samples_ryb_rgb_balanced.items():
        out = ryb_to_unit_rgb(r, y, b, use_balanced_algo=True)
        assert out == pytest.approx(expected, abs=rgb_tolerance)


def test_reference_black_term_uses_dewhitened_blue():
    # iw = 0.2, de-whitened blue = 0.4: black term min(0.5, 0.8, 1 - 0.4) = 0.5
    # the normalized blue would give min(0.5, 0.8, 1 - 0.6) = 0.4
    ref = ryb_to_unit_rgb(0.5, 0.2, 0.6)
    bal = ryb_to_unit_rgb(0.5, 0.2, 0.6, use_balanced_algo=True)
    assert ref != pytest.approx(bal)
    assert min(ref) == pytest.approx(0.5)
    assert min(bal) == pytest.approx(0.4)


def test_numpy_matches_scalar():
    ryb = np.array(list(samples_ryb_rgb_reference.keys()))
    for balanced in (False, True):
        rgb = np_ryb_to_unit_rgb(ryb[..., 0], ryb[..., 1], ryb[..., 2], use_balanced_algo=balanced)
        assert rgb.shape == ryb.shape
        for row, (r, y, b) in zip(rgb, ryb):
            np.testing.assert_allclose(row, ryb_to_unit_rgb(r, y, b, use_balanced_algo=balanced))


@pytest.mark.parametrize("balanced", [False, True])
def test_gray_is_degenerate(balanced):
    with pytest.warns(DegenerateConversionWarning):
        out = ryb_to_unit_rgb(0.0, 0.0, 0.0, use_balanced_algo=balanced)
    assert all(math.isnan(v) for v in out)


@pytest.mark.parametrize("balanced", [False, True])
def test_neutral_grays(balanced):
    white = ryb_to_unit_rgb(0.0, 0.0, 0.0, use_balanced_algo=balanced, degenerate="neutral")
    black = ryb_to_unit_rgb(1.0, 1.0, 1.0, use_balanced_algo=balanced, degenerate="neutral")
    assert white == pytest.approx((1.0, 1.0, 1.0))
    assert black == pytest.approx((0.0, 0.0, 0.0))
