"""
The stackscape package contains tools to lay out stacked data series
and make standalone interactive HTML stacked area charts and streamgraphs.

Once created, the HTML documents can be used with any web browser.
They do not need an active internet connection.

The layout engine works with any parallel numeric series: it orders the
series, offsets them into stacked (lower, upper) bands, finds the vertical
extent needed to show them, and outlines each band as a closed path.

stackscape uses the [Bokeh](https://bokeh.org) interactive visualization
library for charts.

Command line interface entrypoints
----------------------------------
stacks
    Create a stacked area chart or streamgraph showing several data
    series, optionally with a split factor.  A widget selects one split
    factor category at a time.


Modules (exported by the package)
---------------------------------
base
    Miscellaneous helpers for Bokeh figures.

curves
    Curve functions turning point sequences into subpaths.

dutils
    Miscellaneous data manipulation helpers, including interval sampling.

path
    Vector path descriptions, with SVG output and polygon flattening.

scale
    Continuous numeric scales.

stack
    Stacked series layout engine: offset and order policies, stacking
    pipeline, extremes and area outlines.

stacks
    Modify a Bokeh Figure by adding stacked area patches.


Subpackages (not exported)
--------------------------
utils
    Logging helpers.
"""

import logging

from . import curves, dutils, path, scale
# Export API modules within sub-packages.
from . import stack
from .stacks import stacks
from . import base

# Library logging stays silent until an application configures it.
_logger = logging.getLogger("stackscape")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = ["base", "curves", "dutils", "path", "scale",
           "stack", "stacks"]
