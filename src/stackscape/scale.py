"""
scale
-----
Continuous numeric scales

Classes
-------
LinearScale
    Map a numeric domain interval linearly onto a range interval
"""

#%%

import math

#%%

class LinearScale:
    """
    Map a numeric domain interval linearly onto a range interval

    The scale is invertible, and either interval may run in either
    direction (e.g. a screen y range of `(height, 0)`).

    Parameters
    ----------
    domain : (float, float)
        Input interval.
    range : (float, float)
        Output interval.

    Examples
    --------
    y_scale = LinearScale(domain=(0, 50), range=(300, 0))
    y_scale.convert(25)
    # 150.0
    y_scale.invert(150)
    # 25.0
    """

    def __init__(self, domain=(0, 1), range=(0, 1)):
        self.domain = tuple(domain)
        self.range = tuple(range)

    def __repr__(self):
        return f"LinearScale(domain={self.domain}, range={self.range})"

    @classmethod
    def from_extremes(cls, extremes, range=(0, 1), nice=True):
        """
        Make a scale whose domain is a (min, max) pair of data extremes

        A degenerate extent like `(0, 0)` is widened to `(0, 1)` so the
        scale remains invertible.
        """
        low, high = extremes
        if low == high:
            high = low + 1
        scale = cls(domain=(low, high), range=range)
        return scale.nice() if nice else scale

    def convert(self, value):
        """Map a domain value to the range"""
        d0, d1 = self.domain
        r0, r1 = self.range
        if d0 == d1:
            # Degenerate domain maps everything to the middle of the range.
            return (r0 + r1) / 2
        return r0 + (value - d0) * (r1 - r0) / (d1 - d0)

    def invert(self, value):
        """Map a range value back to the domain"""
        return LinearScale(domain=self.range, range=self.domain).convert(value)

    def nice(self, count=10):
        """
        Return a copy of the scale with domain extended to round numbers

        The domain bounds are extended outward to multiples of a tick step
        of 1, 2 or 5 times a power of ten, for roughly `count` ticks.
        """
        d0, d1 = self.domain
        reverse = d1 < d0
        low, high = (d1, d0) if reverse else (d0, d1)
        span = high - low
        if span <= 0 or not math.isfinite(span):
            return LinearScale(self.domain, self.range)

        raw_step = span / count
        power = 10 ** math.floor(math.log10(raw_step))
        step = next(mult * power for mult in (1, 2, 5, 10)
                    if mult * power >= raw_step)
        low = math.floor(low / step) * step
        high = math.ceil(high / step) * step
        domain = (high, low) if reverse else (low, high)
        return LinearScale(domain, self.range)
