"""
Unit tests for stackscape.scale
"""

import pytest

from stackscape.scale import LinearScale


def test_convert_and_invert():
    scale = LinearScale(domain=(0, 50), range=(300, 0))
    assert scale.convert(25) == 150
    assert scale.convert(0) == 300
    assert scale.invert(150) == 25
    assert scale.invert(scale.convert(12.5)) == pytest.approx(12.5)


def test_default_is_identity():
    scale = LinearScale()
    assert scale.convert(0.3) == 0.3
    assert scale.range == (0, 1)


def test_degenerate_domain():
    scale = LinearScale(domain=(2, 2), range=(0, 10))
    assert scale.convert(2) == 5


def test_nice():
    assert LinearScale(domain=(-3.2, 47.9)).nice().domain == (-10, 50)
    assert LinearScale(domain=(0.13, 0.87)).nice().domain == pytest.approx((0.1, 0.9))
    assert LinearScale(domain=(10, -1)).nice().domain == (10, -2)


def test_from_extremes():
    scale = LinearScale.from_extremes((0, 0), range=(100, 0))
    assert scale.domain == (0, 1)
    assert scale.convert(1) == 0

    scale = LinearScale.from_extremes((-3.2, 47.9), range=(0, 1), nice=False)
    assert scale.domain == (-3.2, 47.9)
