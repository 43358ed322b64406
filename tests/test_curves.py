"""
Unit tests for stackscape.curves
"""

import pytest

from stackscape.curves import CURVES, get_curve, linear, monotone_x, step
from stackscape.path import CubicTo, LineTo, MoveTo, SubPath


@pytest.mark.parametrize("curve", [linear, step, monotone_x])
def test_empty_and_single_point(curve):
    assert curve([]) == SubPath()
    assert curve([(1, 2)]).commands == (MoveTo(1, 2),)


def test_linear():
    assert linear([(0, 0), (1, 2), (2, 1)]).commands == (
        MoveTo(0, 0), LineTo(1, 2), LineTo(2, 1))


def test_step():
    assert step([(0, 0), (2, 4)]).commands == (
        MoveTo(0, 0), LineTo(1, 0), LineTo(1, 4), LineTo(2, 4))


def test_monotone_two_points_is_linear():
    assert monotone_x([(0, 0), (3, 3)]) == linear([(0, 0), (3, 3)])


def test_monotone_passes_through_points():
    points = [(0, 0), (1, 2), (2, 2.5), (3, 5)]
    commands = monotone_x(points).commands
    assert commands[0] == MoveTo(0, 0)
    assert [(c.x, c.y) for c in commands[1:]] == points[1:]
    assert all(isinstance(c, CubicTo) for c in commands[1:])


def test_monotone_flat_at_extremum():
    commands = monotone_x([(0, 0), (1, 4), (2, 0)]).commands
    # Control points either side of the peak are level with it.
    assert commands[1].y2 == 4
    assert commands[2].y1 == 4


def test_monotone_no_overshoot():
    points = [(0, 0), (1, 0), (2, 10), (3, 10), (4, 10)]
    xs, ys = monotone_x(points).to_polygon(samples=20)
    assert ys.min() >= 0
    assert ys.max() <= 10


def test_monotone_decreasing_x():
    points = [(3, 1), (2, 4), (1, 6), (0, 7)]
    xs, ys = monotone_x(points).to_polygon(samples=10)
    assert all(b <= a for a, b in zip(xs, xs[1:]))
    assert ys.max() <= 7


def test_monotone_repeated_x():
    commands = monotone_x([(0, 0), (0, 1), (1, 2)]).commands
    assert commands[-1].x == 1
    assert commands[-1].y == 2


def test_curve_lookup():
    assert get_curve("monotone") is monotone_x
    assert set(CURVES) == {"linear", "step", "monotone"}
    with pytest.raises(ValueError, match="linear"):
        get_curve("bumpy")
