"""
Unit tests for stackscape.stack.stack
"""

import pytest

from stackscape.stack import (Offset, Order, ShapeMismatch, StackConfig,
                              StackResult, calculate_extremes, offset_none,
                              order_none, order_reverse, stack, stack_config)


SERIES = [("A", [1, 2]), ("B", [3, 4])]


def test_baseline_stack():
    result = stack(offset_none, order_none, SERIES)
    assert result.labels == ["A", "B"]
    assert result.values == [[(0, 1), (0, 2)],
                             [(1, 4), (2, 6)]]


def test_stack_by_policy_name():
    assert stack("none", "none", SERIES) == stack(offset_none, order_none, SERIES)


def test_stack_config():
    config = StackConfig(data=SERIES)
    result = stack_config(config)
    assert isinstance(result, StackResult)
    assert result.values == [[(0, 1), (0, 2)], [(1, 4), (2, 6)]]


def test_stack_is_repeatable():
    first = stack("wiggle", "inside_out", SERIES)
    second = stack("wiggle", "inside_out", SERIES)
    assert first == second


def test_labels_follow_bands_under_permutation():
    # Labels are arbitrary objects, passed through without comparison.
    a, b, c = object(), object(), object()
    items = [(a, [1, 1]), (b, [2, 2]), (c, [3, 3])]

    rotate = Order(lambda items: items[1:] + items[:1], name="rotate")
    result = stack(offset_none, rotate, items)
    assert result.labels == [b, c, a]
    # Band thickness identifies the series.
    thickness = [upper - lower for lower, upper in
                 (band[0] for band in result.values)]
    assert thickness == [2, 3, 1]


def test_reverse_order():
    result = stack(offset_none, order_reverse, SERIES)
    assert result.labels == ["B", "A"]
    assert result.values == [[(0, 3), (0, 4)], [(3, 4), (4, 6)]]


def test_offset_receives_index_tagged_values():
    seen = []

    def spy(series):
        seen.extend(series)
        return offset_none(series)

    stack(Offset(spy), order_none, SERIES)
    assert seen == [[(0, 1), (1, 2)], [(0, 3), (1, 4)]]


def test_plain_functions_as_policies():
    result = stack(offset_none, lambda items: list(items), SERIES)
    assert result.labels == ["A", "B"]


def test_empty_input():
    result = stack(offset_none, order_none, [])
    assert result.labels == []
    assert result.values == []
    assert result.extent == (0, 0)


def test_series_without_samples():
    result = stack(offset_none, order_none, [("A", []), ("B", [])])
    assert result.labels == ["A", "B"]
    assert result.values == [[], []]


def test_unequal_series_lengths():
    with pytest.raises(ShapeMismatch) as excinfo:
        stack(offset_none, order_none, [("A", [1, 2]), ("B", [1])])
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 1
    assert excinfo.value.policy == "input"


def test_order_dropping_series():
    drop_last = Order(lambda items: items[:-1], name="drop_last")
    with pytest.raises(ShapeMismatch) as excinfo:
        stack(offset_none, drop_last, SERIES)
    assert (excinfo.value.expected, excinfo.value.actual) == (2, 1)
    assert "drop_last" in str(excinfo.value)


def test_order_duplicating_series():
    first_twice = Order(lambda items: [items[0], items[0]], name="first_twice")
    with pytest.raises(ShapeMismatch) as excinfo:
        stack(offset_none, first_twice, SERIES)
    assert excinfo.value.policy == "first_twice"
    assert (excinfo.value.expected, excinfo.value.actual) == (2, 1)


def test_order_substituting_equal_series():
    # Equal but different items are not a permutation of the input.
    copies = Order(lambda items: [(label, list(values)) for label, values in items],
                   name="copies")
    with pytest.raises(ShapeMismatch, match="copies"):
        stack(offset_none, copies, SERIES)


def test_offset_dropping_sample():
    truncate = Offset(lambda series: [band[:-1] for band in offset_none(series)],
                      name="truncate")
    with pytest.raises(ShapeMismatch) as excinfo:
        stack(truncate, order_none, SERIES)
    assert (excinfo.value.expected, excinfo.value.actual) == (2, 1)
    assert excinfo.value.policy == "truncate"


def test_offset_adding_series():
    extra = Offset(lambda series: offset_none(series) * 2, name="extra")
    with pytest.raises(ShapeMismatch, match="extra"):
        stack(extra, order_none, SERIES)


def test_shape_mismatch_is_value_error():
    assert issubclass(ShapeMismatch, ValueError)


def test_extremes_empty():
    assert calculate_extremes([]) == (0, 0)


def test_extremes_include_zero():
    assert calculate_extremes([[(2, 5), (1, 3)]]) == (0, 5)
    assert calculate_extremes([[(-3, -1)]]) == (-3, 0)


def test_extremes_across_bands():
    bands = [[(0, 1), (0, 2)], [(1, 4), (-2, 6)]]
    assert calculate_extremes(bands) == (-2, 6)


def test_result_extent():
    assert stack(offset_none, order_none, SERIES).extent == (0, 6)
