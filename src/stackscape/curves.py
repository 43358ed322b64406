"""
curves
------
Curve functions turning an ordered point sequence into a subpath

Every curve accepts a sequence of `(x, y)` points and returns a
`SubPath`.  An empty sequence gives an empty subpath, and a single point
gives a bare `MoveTo`.

Functions
---------
linear
    Straight segments between successive points

step
    Horizontal-vertical steps, changing level halfway between points

monotone_x
    Smooth cubic curve that preserves monotonicity in y

get_curve
    Look up a curve function by name
"""

#%%

import math

from stackscape.dutils import pairwise
from stackscape.path import CubicTo, LineTo, MoveTo, SubPath

#%%

def linear(points):
    """Straight segments between successive points"""
    return SubPath.from_points(points)


def step(points):
    """
    Horizontal-vertical steps, changing level halfway between points
    """
    points = list(points)
    if len(points) < 2:
        return SubPath.from_points(points)

    commands = [MoveTo(*points[0])]
    for (x0, y0), (x1, y1) in pairwise(points):
        x_mid = (x0 + x1) / 2
        commands.extend([LineTo(x_mid, y0),
                         LineTo(x_mid, y1),
                         LineTo(x1, y1)])
    return SubPath(commands)


def _sign(value):
    return (value > 0) - (value < 0)


def _secant(x0, y0, x1, y1):
    dx = x1 - x0
    return (y1 - y0) / dx if dx else 0.0


def _interior_tangent(p0, p1, p2):
    """
    Fritsch-Carlson tangent at p1, zero at local extrema

    See Steffen, "A simple method for monotonic interpolation in one
    dimension", 1990.
    """
    (x0, y0), (x1, y1), (x2, y2) = p0, p1, p2
    h0 = x1 - x0
    h1 = x2 - x1
    s0 = _secant(x0, y0, x1, y1)
    s1 = _secant(x1, y1, x2, y2)
    if h0 + h1 == 0:
        return 0.0
    p = (s0 * h1 + s1 * h0) / (h0 + h1)
    tangent = (_sign(s0) + _sign(s1)) * min(abs(s0), abs(s1), 0.5 * abs(p))
    return tangent if math.isfinite(tangent) else 0.0


def _end_tangent(p0, p1, neighbour_tangent):
    """One-sided tangent at an end point, from the secant and its neighbour"""
    return (3 * _secant(*p0, *p1) - neighbour_tangent) / 2


def monotone_x(points):
    """
    Smooth cubic curve that preserves monotonicity in y

    The curve passes through every point and never overshoots between
    points, so stacked band boundaries stay inside their data range.
    Assumes points are ordered in x (ascending or descending).  With
    fewer than three points the curve is linear.
    """
    points = list(points)
    n_points = len(points)
    if n_points < 3:
        return linear(points)

    tangents = [0.0] * n_points
    for i in range(1, n_points - 1):
        tangents[i] = _interior_tangent(*points[i - 1:i + 2])
    tangents[0] = _end_tangent(points[0], points[1], tangents[1])
    tangents[-1] = _end_tangent(points[-2], points[-1], tangents[-2])

    commands = [MoveTo(*points[0])]
    for i, ((x0, y0), (x1, y1)) in enumerate(pairwise(points)):
        dx = (x1 - x0) / 3
        commands.append(CubicTo(x0 + dx, y0 + dx * tangents[i],
                                x1 - dx, y1 - dx * tangents[i + 1],
                                x1, y1))
    return SubPath(commands)


CURVES = {
    "linear": linear,
    "step": step,
    "monotone": monotone_x,
}


def get_curve(name):
    """
    Look up a curve function by name

    Raises
    ------
    ValueError
        If `name` is not one of the keys of `CURVES`.
    """
    try:
        return CURVES[name]
    except KeyError:
        raise ValueError(f"Expected curve in {sorted(CURVES)}, not '{name}'") from None
