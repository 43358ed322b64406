"""
Stacked series layout engine

Orders and offsets parallel data series into stacked `(lower, upper)`
bands, sizes them for a scale, and outlines each band as a closed path.


Application program interface
-----------------------------
>>> from stackscape.stack import stack, to_area
>>> result = stack("silhouette", "inside_out", [("a", [1, 2]), ("b", [3, 1])])
"""

# Export names from modules of this sub-package.
from .area import to_area
from .offsets import (OFFSETS, ORDERS, Offset, Order, get_offset, get_order,
                      offset_diverging, offset_expand, offset_none,
                      offset_silhouette, offset_wiggle,
                      order_ascending, order_descending, order_inside_out,
                      order_none, order_reverse)
from .stack import (ShapeMismatch, StackConfig, StackResult,
                    calculate_extremes, stack, stack_config)

__all__ = ["OFFSETS", "ORDERS", "Offset", "Order",
           "ShapeMismatch", "StackConfig", "StackResult",
           "calculate_extremes", "get_offset", "get_order",
           "offset_diverging", "offset_expand", "offset_none",
           "offset_silhouette", "offset_wiggle",
           "order_ascending", "order_descending", "order_inside_out",
           "order_none", "order_reverse",
           "stack", "stack_config", "to_area"]
