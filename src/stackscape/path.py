"""
path
----
Vector path descriptions produced by curves and area builders

A `SubPath` is one continuous pen stroke: a `MoveTo` followed by drawing
commands, optionally ending with `ClosePath`.  A `Path` is an ordered list
of subpaths.  Paths can be written as an SVG `d` attribute, or flattened
to polygon vertices for polygon glyphs like Bokeh `patch`.

Classes
-------
MoveTo, LineTo, CubicTo, ClosePath
    Path commands

SubPath
    One continuous stroke of path commands

Path
    Sequence of subpaths
"""

#%%

from typing import NamedTuple

import numpy as np

#%%

class MoveTo(NamedTuple):
    x: float
    y: float


class LineTo(NamedTuple):
    x: float
    y: float


class CubicTo(NamedTuple):
    """Cubic Bezier segment with two control points, ending at (x, y)"""
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


class ClosePath(NamedTuple):
    pass


def _fmt(value):
    """Format a coordinate compactly for SVG"""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


#%%

class SubPath:
    """
    One continuous stroke of path commands

    An empty subpath has no commands.  Otherwise the first command is
    a `MoveTo`.

    Examples
    --------
    sub = SubPath.from_points([(0, 0), (1, 1)])
    sub.connect(SubPath.from_points([(1, 2), (0, 2)])).close().to_svg()
    # 'M0,0L1,1L1,2L0,2Z'
    """

    def __init__(self, commands=()):
        commands = tuple(commands)
        if commands and not isinstance(commands[0], MoveTo):
            raise ValueError(f"SubPath must start with MoveTo, not {commands[0]!r}")
        self.commands = commands

    @classmethod
    def from_points(cls, points):
        """Polyline through points"""
        points = list(points)
        if not points:
            return cls()
        (x0, y0), *rest = points
        return cls([MoveTo(x0, y0), *(LineTo(x, y) for x, y in rest)])

    def __bool__(self):
        return bool(self.commands)

    def __len__(self):
        return len(self.commands)

    def __eq__(self, other):
        return isinstance(other, SubPath) and self.commands == other.commands

    def __repr__(self):
        return f"SubPath({list(self.commands)!r})"

    @property
    def is_closed(self):
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)

    @property
    def start(self):
        """Point of the initial `MoveTo`"""
        move = self.commands[0]
        return (move.x, move.y)

    def connect(self, other):
        """
        Join another subpath onto the end of this one

        A straight segment runs from the end of this subpath to the start
        of `other`, and the drawing commands of `other` follow.  Either
        subpath may be empty.
        """
        if not self:
            return other
        if not other:
            return self
        return SubPath([*self.commands,
                        LineTo(*other.start),
                        *other.commands[1:]])

    def close(self):
        """Return the subpath with a closing segment back to its start"""
        if not self or self.is_closed:
            return self
        return SubPath([*self.commands, ClosePath()])

    def to_svg(self):
        parts = []
        for command in self.commands:
            if isinstance(command, MoveTo):
                parts.append(f"M{_fmt(command.x)},{_fmt(command.y)}")
            elif isinstance(command, LineTo):
                parts.append(f"L{_fmt(command.x)},{_fmt(command.y)}")
            elif isinstance(command, CubicTo):
                coords = ",".join(_fmt(v) for v in command)
                parts.append(f"C{coords}")
            else:
                parts.append("Z")
        return "".join(parts)

    def to_polygon(self, samples=8):
        """
        Flatten to polygon vertices

        Cubic segments are sampled at `samples` points each.

        Returns
        -------
        Tuple of two numpy arrays `(xs, ys)`.
        """
        xs, ys = [], []
        for command in self.commands:
            if isinstance(command, (MoveTo, LineTo)):
                xs.append(command.x)
                ys.append(command.y)
            elif isinstance(command, CubicTo):
                x0, y0 = xs[-1], ys[-1]
                t = np.linspace(0, 1, samples + 1)[1:]
                mt = 1 - t
                weights = (mt ** 3, 3 * mt ** 2 * t, 3 * mt * t ** 2, t ** 3)
                xs.extend(weights[0] * x0 + weights[1] * command.x1
                          + weights[2] * command.x2 + weights[3] * command.x)
                ys.extend(weights[0] * y0 + weights[1] * command.y1
                          + weights[2] * command.y2 + weights[3] * command.y)
        return np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)


class Path:
    """
    Sequence of subpaths

    Examples
    --------
    Path([SubPath.from_points([(0, 0), (1, 0), (1, 1)]).close()]).to_svg()
    # 'M0,0L1,0L1,1Z'
    """

    def __init__(self, subpaths=()):
        # Empty subpaths draw nothing, so are not kept.
        self.subpaths = [sub for sub in subpaths if sub]

    def __len__(self):
        return len(self.subpaths)

    def __iter__(self):
        return iter(self.subpaths)

    def __eq__(self, other):
        return isinstance(other, Path) and self.subpaths == other.subpaths

    def __repr__(self):
        return f"Path({self.subpaths!r})"

    def to_svg(self):
        """SVG path `d` attribute"""
        return "".join(sub.to_svg() for sub in self.subpaths)

    def to_polygons(self, samples=8):
        """List of `(xs, ys)` vertex arrays, one per subpath"""
        return [sub.to_polygon(samples=samples) for sub in self.subpaths]
