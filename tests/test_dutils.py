"""
Unit tests for stackscape.dutils
"""

import pandas as pd
import pytest

from stackscape.dutils import dict_fill, evenly_spaced, repeat_first, series_from_frame


@pytest.mark.parametrize("n", [0, 1, 2, 3, 7, 100])
@pytest.mark.parametrize("interval", [(0, 100), (100, 0), (-2.5, 0.3), (0.1, 0.7)])
def test_evenly_spaced_bounds(n, interval):
    samples = evenly_spaced(n, interval)
    assert len(samples) == max(n, 1) + 1
    # Bounds are exact, not approximate.
    assert samples[0] == interval[0]
    assert samples[-1] == interval[1]


@pytest.mark.parametrize("interval", [(0, 100), (100, 0), (-2.5, 0.3)])
def test_evenly_spaced_monotonic(interval):
    samples = evenly_spaced(9, interval)
    steps = [b - a for a, b in zip(samples, samples[1:])]
    if interval[1] > interval[0]:
        assert all(step > 0 for step in steps)
    else:
        assert all(step < 0 for step in steps)
    assert steps == pytest.approx([steps[0]] * len(steps))


def test_evenly_spaced_degenerate():
    assert evenly_spaced(0, (0, 100)) == [0, 100]
    assert evenly_spaced(1, (0, 100)) == [0, 100]
    assert evenly_spaced(-3, (5, 1)) == [5, 1]


def test_evenly_spaced_values():
    assert evenly_spaced(4, (0, 100)) == [0, 25, 50, 75, 100]


def test_repeat_first():
    assert repeat_first([]) == []
    assert repeat_first(["x", "y"]) == ["x", "x", "y"]
    assert repeat_first(iter([3])) == [3, 3]


def test_repeat_first_leaves_input():
    items = [1, 2]
    repeat_first(items)
    assert items == [1, 2]


def test_dict_fill_recycles():
    assert dict_fill("abc", ["red", "blue"]) == {"a": "red", "b": "blue", "c": "red"}


def test_series_from_frame():
    df = pd.DataFrame({"year": ["2001", "2002"],
                       "coal": ["10", None],
                       "wind": [1, 3]})
    series = series_from_frame(df, ["wind", "coal"])
    assert series == [("wind", [1.0, 3.0]), ("coal", [10.0, 0.0])]
    assert series_from_frame(df, "wind") == [("wind", [1.0, 3.0])]
