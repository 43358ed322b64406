"""
dutils
---------
Miscellaneous data manipulation helpers

Functions
---------
dict_fill
    Map keys to values, recycling values as necessary.

evenly_spaced
    Evenly spaced samples across an interval, including both bounds.

repeat_first
    Duplicate the first item of a sequence.

series_from_frame
    Extract (label, values) series from dataframe columns.
"""

#%%

from itertools import cycle, pairwise

import pandas as pd

__all__ = ["dict_fill", "evenly_spaced", "pairwise",
           "repeat_first", "series_from_frame"]

#%%

def dict_fill(keys, values):
    """
    Map keys to values, recycling values as necessary
    """

    return dict(zip(keys, cycle(values)))


def evenly_spaced(n, interval):
    """
    Evenly spaced samples across an interval, including both bounds

    Parameters
    ----------
    n : int
        Number of steps between samples.  For `n` of 0 or 1 just the
        two bounds are returned.
    interval : (float, float)
        Bounds of the interval.  The interval may run in either direction.

    Returns
    -------
    List of `n + 1` numbers (2 when `n <= 1`).  The first and last items
    are exactly the bounds of `interval`, so geometry built on them lines
    up with axis extents.

    Examples
    --------
    evenly_spaced(4, (0, 100))
    # [0, 25.0, 50.0, 75.0, 100]

    evenly_spaced(0, (0, 100))
    # [0, 100]
    """
    start, end = interval
    if n <= 1:
        return [start, end]

    # Map positions 1..n-1 linearly, and pin the final position to `end`.
    interior = [start + (end - start) * i / n for i in range(1, n)]
    return [start, *interior, end]


def repeat_first(items):
    """
    Duplicate the first item of a sequence

    Used to close a cyclic domain, like a full-circle polar stack.

    Examples
    --------
    repeat_first(["a", "b"])
    # ['a', 'a', 'b']

    repeat_first([])
    # []
    """
    items = list(items)
    if not items:
        return items
    return [items[0], *items]


def series_from_frame(data, columns):
    """
    Extract (label, values) series from dataframe columns

    Parameters
    ----------
    data : DataFrame
        Data with one row per sample.
    columns : str or list of str
        Names of numeric columns, one series per column.  Values are
        coerced to float; missing values become 0.

    Returns
    -------
    List of `(column name, list of float)` tuples, in the order of
    `columns`.
    """
    # Wrap single column name in a list, for convenience.
    columns = [columns] if isinstance(columns, str) else list(columns)

    numeric = data[columns].apply(pd.to_numeric).fillna(0.0).astype(float)
    return [(column, numeric[column].tolist()) for column in columns]
