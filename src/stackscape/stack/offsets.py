"""
Offset and order policies for stacked series

An order policy permutes the `(label, values)` series before stacking.
An offset policy turns index-tagged values `(index, value)` into stacked
`(lower, upper)` bands.  Both kinds are wrapped as named strategy objects,
so a stack can be configured by name from the command line and a faulty
policy can be identified in error messages.

Classes
-------
Offset
    Named offset policy

Order
    Named order policy

Functions
---------
offset_none, offset_diverging, offset_expand, offset_silhouette, offset_wiggle
    Offset policies

order_none, order_reverse, order_ascending, order_descending, order_inside_out
    Order policies

get_offset, get_order
    Look up a policy by name

Acknowledgements
----------------
The offsets and orders follow the definitions of the d3-shape stack
offsets and orders.  The wiggle offset is the streamgraph baseline of
Byron & Wattenberg, "Stacked Graphs - Geometry & Aesthetics", 2008.
"""

#%%

import numpy as np

#%%

class Offset:
    """
    Named offset policy

    Wraps a function from a list of series of `(index, value)` pairs to
    a list of series of `(lower, upper)` pairs.  The function must keep
    the number of series and the number of pairs in each series.
    """

    def __init__(self, function, name=None):
        self.function = function
        self.name = name or function.__name__

    def __call__(self, series):
        return self.function(series)

    def __repr__(self):
        return f"Offset({self.name!r})"


class Order:
    """
    Named order policy

    Wraps a function from a list of `(label, values)` series to a
    permutation of that list.
    """

    def __init__(self, function, name=None):
        self.function = function
        self.name = name or function.__name__

    def __call__(self, items):
        return self.function(items)

    def __repr__(self):
        return f"Order({self.name!r})"


def offset(name):
    """Decorator registering a function as a named `Offset`"""
    def wrap(function):
        policy = Offset(function, name=name)
        OFFSETS[name] = policy
        return policy
    return wrap


def order(name):
    """Decorator registering a function as a named `Order`"""
    def wrap(function):
        policy = Order(function, name=name)
        ORDERS[name] = policy
        return policy
    return wrap


OFFSETS = {}
ORDERS = {}

#%%
## Helpers working on a (series, samples) matrix of values.

def _value_matrix(series):
    """Values of index-tagged series as a float array of shape (k, n)"""
    n_samples = len(series[0]) if series else 0
    matrix = np.zeros((len(series), n_samples), dtype=float)
    for i, pairs in enumerate(series):
        matrix[i, :] = [value for _, value in pairs]
    if np.isinf(matrix).any():
        series_index, sample_index = np.argwhere(np.isinf(matrix))[0]
        raise ValueError(f"Cannot stack infinite value {matrix[series_index, sample_index]}"
                         f" in series {series_index} at sample {sample_index}")
    # Missing values count as zero.
    return np.nan_to_num(matrix, nan=0.0)


def _bands(lower, upper):
    """Pack lower and upper (k, n) arrays as lists of (lower, upper) tuples"""
    return [list(zip(low_row.tolist(), high_row.tolist()))
            for low_row, high_row in zip(lower, upper)]


def _stack_on(values, baseline):
    """Stack rows of `values` successively on top of `baseline`"""
    below = np.cumsum(values, axis=0) - values
    lower = baseline + below
    return _bands(lower, lower + values)


#%%
## Offsets

@offset("none")
def offset_none(series):
    """
    Stack on a zero baseline

    For series `k` at sample `i`, lower is the sum of values of series
    `0..k-1` at `i`, and upper is lower plus the value of series `k`.
    """
    values = _value_matrix(series)
    return _stack_on(values, np.zeros(values.shape[1]))


@offset("diverging")
def offset_diverging(series):
    """
    Stack positive values up from zero and negative values down from zero

    Each band is still given as `(lower, upper)` with lower <= upper.
    """
    values = _value_matrix(series)
    positive = np.clip(values, 0, None)
    negative = np.clip(values, None, 0)
    top = np.cumsum(positive, axis=0)
    bottom = np.cumsum(negative, axis=0)

    is_positive = values >= 0
    lower = np.where(is_positive, top - positive, bottom)
    upper = np.where(is_positive, top, bottom - negative)
    return _bands(lower, upper)


@offset("expand")
def offset_expand(series):
    """
    Stack on a zero baseline, normalized so each sample totals 1

    Samples where all values are zero stay at zero.
    """
    values = _value_matrix(series)
    totals = values.sum(axis=0)
    safe_totals = np.where(totals == 0, 1.0, totals)
    return _stack_on(values / safe_totals, np.zeros(values.shape[1]))


@offset("silhouette")
def offset_silhouette(series):
    """
    Stack centred on zero, as for a symmetric streamgraph
    """
    values = _value_matrix(series)
    return _stack_on(values, -values.sum(axis=0) / 2)


@offset("wiggle")
def offset_wiggle(series):
    """
    Stack on a baseline that minimises weighted wiggle

    The baseline starts at zero and moves at each sample to minimise the
    change in slope of all bands, weighted by band thickness.  Best used
    with `order_inside_out`.
    """
    values = _value_matrix(series)
    n_samples = values.shape[1]
    if n_samples < 2:
        return _stack_on(values, np.zeros(n_samples))

    change = np.diff(values, axis=1)
    # Change in the midline of each band: half its own change plus the
    # whole change of every band beneath it.
    midline_change = change / 2 + (np.cumsum(change, axis=0) - change)
    current = values[:, 1:]
    weight = current.sum(axis=0)
    moment = (midline_change * current).sum(axis=0)
    safe_weight = np.where(weight == 0, 1.0, weight)
    step = np.where(weight == 0, 0.0, -moment / safe_weight)

    baseline = np.concatenate([[0.0], np.cumsum(step)])
    return _stack_on(values, baseline)


#%%
## Orders

def _sums(items):
    return [float(np.nansum(np.asarray(values, dtype=float)))
            for _, values in items]


@order("none")
def order_none(items):
    """Keep the given order, first series at the bottom"""
    return list(items)


@order("reverse")
def order_reverse(items):
    """Reverse the given order"""
    return list(items)[::-1]


@order("ascending")
def order_ascending(items):
    """Smallest series (by sum of values) at the bottom"""
    items = list(items)
    sums = _sums(items)
    ranking = sorted(range(len(items)), key=lambda i: sums[i])
    return [items[i] for i in ranking]


@order("descending")
def order_descending(items):
    """Largest series (by sum of values) at the bottom"""
    return order_ascending(items)[::-1]


@order("inside_out")
def order_inside_out(items):
    """
    Earliest peaking series in the middle, later peaks towards the edges

    Series are taken in order of the sample index of their peak value and
    added alternately above and below the middle, keeping the two sides
    about equally heavy.  Suited to streamgraphs with the wiggle offset.
    """
    items = list(items)
    sums = _sums(items)
    peaks = [int(np.argmax(values)) if len(values) else 0
             for _, values in items]
    appearance = sorted(range(len(items)), key=lambda i: peaks[i])

    top, bottom = 0.0, 0.0
    tops, bottoms = [], []
    for i in appearance:
        if top < bottom:
            top += sums[i]
            tops.append(i)
        else:
            bottom += sums[i]
            bottoms.append(i)
    return [items[i] for i in bottoms[::-1] + tops]


#%%

def get_offset(name):
    """
    Return an offset policy given its name or the policy itself

    Raises
    ------
    ValueError
        If `name` is not one of the keys of `OFFSETS`.
    """
    if isinstance(name, Offset):
        return name
    try:
        return OFFSETS[name]
    except KeyError:
        raise ValueError(f"Expected offset in {sorted(OFFSETS)}, not '{name}'") from None


def get_order(name):
    """
    Return an order policy given its name or the policy itself

    Raises
    ------
    ValueError
        If `name` is not one of the keys of `ORDERS`.
    """
    if isinstance(name, Order):
        return name
    try:
        return ORDERS[name]
    except KeyError:
        raise ValueError(f"Expected order in {sorted(ORDERS)}, not '{name}'") from None
