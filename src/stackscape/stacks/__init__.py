"""
Make standalone interactive stacked area charts for categorical data

This sub-package provides a module that can be imported as a Python
module, and a command line interface entry point.


Application program interface
-----------------------------
>>> import stackscape.stacks


Command line interface
----------------------
> python -m stackscape.stacks --help
"""

# Export names from .stacks.stacks.
from .stacks import link_widget_to_bands, stack_frame, stacked_areas

__all__ = ["link_widget_to_bands", "stack_frame", "stacked_areas"]
