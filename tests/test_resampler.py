import math

import numpy as np
import pytest

from conftest import spiral_stroke
from sketchauth.core.geometry import path_length
from sketchauth.core.resampler import resample


def regular_polygon(count, radius=100.0):
    return [(radius * math.cos(2 * math.pi * i / count), radius * math.sin(2 * math.pi * i / count))
            for i in range(count)]


def test_straight_line_is_split_evenly():
    line = [(100.0 * i / 19, 0.0) for i in range(20)]
    result = resample(line, 4)
    np.testing.assert_allclose(result[:, 0], [0.0, 100.0 / 3, 200.0 / 3, 100.0], atol=1e-6)
    np.testing.assert_allclose(result[:, 1], 0.0, atol=1e-12)


@pytest.mark.parametrize("n", [1, 2, 5, 64, 200])
def test_always_returns_exactly_n_points(n):
    assert resample(spiral_stroke(), n).shape == (n, 2)


def test_more_points_than_input():
    result = resample([(0, 0), (10, 0)], 11)
    np.testing.assert_allclose(result[:, 0], np.arange(11.0), atol=1e-9)


def test_samples_are_evenly_spaced_along_a_line():
    # Uneven input density must not leak into the output.
    xs = [0, 1, 2, 3, 40, 41, 90, 100]
    result = resample([(x, 2 * x) for x in xs], 9)
    gaps = np.hypot(*np.diff(result, axis=0).T)
    np.testing.assert_allclose(gaps, gaps[0], rtol=1e-6)


def test_points_lie_on_the_input_path():
    stroke = [(0, 0), (10, 0), (10, 10)]
    for x, y in resample(stroke, 7):
        on_first = abs(y) < 1e-9 and -1e-9 <= x <= 10 + 1e-9
        on_second = abs(x - 10) < 1e-9 and -1e-9 <= y <= 10 + 1e-9
        assert on_first or on_second


def test_starts_at_first_point():
    stroke = spiral_stroke()
    np.testing.assert_array_equal(resample(stroke, 16)[0], stroke[0])


def test_idempotent_on_canonical_input():
    once = resample(regular_polygon(32), 32)
    twice = resample(once, 32)
    np.testing.assert_allclose(twice, once, atol=1e-6)


def test_idempotent_on_resampled_line():
    xs = [0.0, 0.5, 7.0, 7.5, 30.0, 64.0, 65.0, 99.0]
    once = resample([(x, -x) for x in xs], 12)
    np.testing.assert_allclose(resample(once, 12), once, atol=1e-6)


def test_is_deterministic():
    stroke = spiral_stroke()
    assert np.array_equal(resample(stroke, 64), resample(list(stroke), 64))


def test_keeps_path_length_of_a_line():
    line = [(0, 0), (3, 4), (6, 8), (9, 12)]
    assert path_length(resample(line, 6)) == pytest.approx(path_length(line))


def test_empty_input_gives_empty_output():
    assert resample([], 10).shape == (0, 2)


def test_single_point_is_repeated():
    result = resample([(4.0, -2.0)], 5)
    np.testing.assert_array_equal(result, [(4.0, -2.0)] * 5)


def test_zero_length_path_is_repeated():
    result = resample([(1.0, 1.0), (1.0, 1.0), (1.0, 1.0)], 4)
    np.testing.assert_array_equal(result, [(1.0, 1.0)] * 4)


def test_n_of_one_is_the_start_point():
    np.testing.assert_array_equal(resample([(3, 3), (9, 9), (20, 1)], 1), [(3.0, 3.0)])


def test_rejects_non_positive_count():
    with pytest.raises(ValueError):
        resample([(0, 0), (1, 1)], 0)
