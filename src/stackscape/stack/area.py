"""
Closed area outlines for stacked bands

Functions
---------
to_area
    Build a closed path outlining one stacked band
"""

#%%

# Imports from this package.
from stackscape.dutils import evenly_spaced
from stackscape.path import Path

#%%

def to_area(curve, scales, values):
    """
    Build a closed path outlining one stacked band

    The outline runs along the lower boundary, across to the far end of
    the upper boundary, back along the upper boundary, and closes on the
    first lower point.

    Parameters
    ----------
    curve : callable
        Curve function mapping a list of `(x, y)` points to a `SubPath`,
        like `stackscape.curves.linear`.
    scales : (x_scale, y_scale)
        `x_scale.range` gives the horizontal extent covered by the band;
        samples are evenly spaced across it.  `y_scale.convert()` maps
        band values to vertical positions.
    values : sequence of (float, float)
        Band value pairs, one per sample.  Each pair may be given as
        `(lower, upper)` or `(upper, lower)`.

    Returns
    -------
    Path with a single closed subpath, or an empty `Path` if `values`
    is empty.

    Examples
    --------
    from stackscape.curves import linear
    from stackscape.scale import LinearScale
    scales = (LinearScale((0, 1), (0, 10)), LinearScale((0, 4), (0, 4)))
    to_area(linear, scales, [(0, 1), (1, 3)]).to_svg()
    # 'M0,0L10,1L10,3L0,1Z'
    """
    values = list(values)
    if not values:
        return Path()

    x_scale, y_scale = scales
    lows = [y_scale.convert(min(pair)) for pair in values]
    highs = [y_scale.convert(max(pair)) for pair in values]
    xs = evenly_spaced(len(values) - 1, x_scale.range)

    low_points = list(zip(xs, lows))
    high_points = list(zip(xs, highs))[::-1]

    outline = curve(low_points).connect(curve(high_points)).close()
    return Path([outline])
