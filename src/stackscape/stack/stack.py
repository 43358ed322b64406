"""
Stacked series layout

Turns several parallel data series into stacked `(lower, upper)` bands,
using pluggable order and offset policies from `stackscape.stack.offsets`.

Classes
-------
ShapeMismatch
    Error raised when series shapes are inconsistent

StackConfig
    Series to stack, with the offset and order policies to apply

StackResult
    Stacked bands and their labels

Functions
---------
calculate_extremes
    Minimum and maximum over stacked bands, always including zero

stack
    Order and offset a sequence of labelled series

stack_config
    Stack the series of a `StackConfig`
"""

#%%

from dataclasses import dataclass, field
from typing import Generic, List, Sequence, Tuple, TypeVar

# Imports from this package.
from stackscape.stack.offsets import Offset, Order, get_offset, get_order
from stackscape.utils.logging import get_logger

logger = get_logger(__name__)

L = TypeVar("L")

Band = List[Tuple[float, float]]

#%%

class ShapeMismatch(ValueError):
    """
    Error raised when series shapes are inconsistent

    Raised when input series have unequal lengths, or when an order or
    offset policy changes the number of series or the number of samples
    in a series.

    Attributes
    ----------
    expected : int
        Expected count.
    actual : int
        Count found.
    policy : str
        Name of the policy (or "input") responsible.
    """

    def __init__(self, message, expected, actual, policy):
        super().__init__(
            f"{message} from {policy}: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual
        self.policy = policy


@dataclass
class StackConfig(Generic[L]):
    """
    Series to stack, with the offset and order policies to apply

    All series in `data` must have the same number of values.
    """
    data: Sequence[Tuple[L, Sequence[float]]]
    offset: Offset = field(default_factory=lambda: get_offset("none"))
    order: Order = field(default_factory=lambda: get_order("none"))


@dataclass
class StackResult(Generic[L]):
    """
    Stacked bands and their labels

    `labels[i]` is the label of the series stacked as `values[i]`, in
    the order emitted by the order policy.
    """
    values: List[Band]
    labels: List[L]

    @property
    def extent(self):
        """(min, max) of all bands, including zero"""
        return calculate_extremes(self.values)

    def bands(self):
        """Iterate over `(label, band)` pairs"""
        return zip(self.labels, self.values)


#%%

def _policy_name(policy):
    if isinstance(policy, str):
        return policy
    return getattr(policy, "name", getattr(policy, "__name__", repr(policy)))


def _check_lengths(sequences, n_expected, message, policy):
    for values in sequences:
        if len(values) != n_expected:
            raise ShapeMismatch(message, n_expected, len(values),
                                _policy_name(policy))


def stack(offset, order, items):
    """
    Order and offset a sequence of labelled series

    Parameters
    ----------
    offset : Offset, callable, or str
        Offset policy, or its name in `OFFSETS`.  Receives one list of
        `(index, value)` pairs per series, and returns one list of
        `(lower, upper)` pairs per series.
    order : Order, callable, or str
        Order policy, or its name in `ORDERS`.  Receives and returns a
        list of `(label, values)` pairs.
    items : sequence of (label, sequence of float)
        Series to stack.  Labels are passed through untouched.  All value
        sequences must have the same length.

    Returns
    -------
    StackResult

    Raises
    ------
    ShapeMismatch
        If the value sequences of `items` differ in length, if `order`
        does not return a permutation of `items`, or if `order` or
        `offset` changes the number of series or samples.

    Examples
    --------
    result = stack("none", "none", [("A", [1, 2]), ("B", [3, 4])])
    result.labels
    # ['A', 'B']
    result.values
    # [[(0.0, 1.0), (0.0, 2.0)], [(1.0, 4.0), (2.0, 6.0)]]
    """
    if isinstance(offset, str):
        offset = get_offset(offset)
    if isinstance(order, str):
        order = get_order(order)

    items = list(items)
    n_series = len(items)
    n_samples = len(items[0][1]) if items else 0
    _check_lengths([values for _, values in items], n_samples,
                   "Unequal series length", "input")

    ordered = list(order(items))
    if len(ordered) != n_series:
        raise ShapeMismatch("Series count changed", n_series, len(ordered),
                            _policy_name(order))
    _check_lengths([values for _, values in ordered], n_samples,
                   "Series length changed", order)
    # Same items in any order.  Compared by identity, so labels need not
    # be hashable or comparable.
    if sorted(map(id, ordered)) != sorted(map(id, items)):
        n_kept = len({id(item) for item in ordered} & {id(item) for item in items})
        raise ShapeMismatch("Order is not a permutation", n_series, n_kept,
                            _policy_name(order))

    labels = [label for label, _ in ordered]
    tagged = [list(enumerate(values)) for _, values in ordered]
    logger.debug("stacking %d series of %d samples with %s, %s",
                 n_series, n_samples,
                 _policy_name(offset), _policy_name(order))

    stacked = [list(band) for band in offset(tagged)]
    if len(stacked) != n_series:
        raise ShapeMismatch("Series count changed", n_series, len(stacked),
                            _policy_name(offset))
    _check_lengths(stacked, n_samples, "Series length changed", offset)

    return StackResult(values=stacked, labels=labels)


def stack_config(config):
    """Stack the series of a `StackConfig`"""
    return stack(config.offset, config.order, config.data)


def calculate_extremes(bands):
    """
    Minimum and maximum over stacked bands, always including zero

    The fold is seeded with `(0, 0)`, so stacks of all-positive or
    all-negative data still extend to the zero baseline.

    Examples
    --------
    calculate_extremes([[(2, 5), (1, 3)]])
    # (0, 5)

    calculate_extremes([[(-3, -1)]])
    # (-3, 0)

    calculate_extremes([])
    # (0, 0)
    """
    low, high = 0, 0
    for band in bands:
        for pair in band:
            low = min(low, *pair)
            high = max(high, *pair)
    return (low, high)
