from itertools import permutations

import numpy as np
import pytest

from numstats import (
    EmptyInputError,
    InvalidValueError,
    maximum,
    mean,
    median,
    minimum,
    mode,
    standard_deviation,
    variance,
)

SAMPLE = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


class TestMean:
    def test_mean(self):
        assert mean(SAMPLE) == pytest.approx(5.0)

    def test_default_precision_is_single(self):
        assert mean([1.0, 2.0]).dtype == np.float32

    def test_integer_dtype_gives_float_result(self):
        result = mean([1, 2], dtype=np.int64)
        assert result == 1.5
        assert result.dtype == np.float64

    @pytest.mark.parametrize("n", [2, 7, 11, 1000])
    @pytest.mark.parametrize("value", [-3.5, 0.0, 0.1, 0.7, 3.3, 1e6])
    def test_identical_values(self, value, n):
        assert mean([value] * n) == np.float32(value)

    def test_empty_is_zero_with_warning(self):
        # Convention rather than an error, so it must stay visible.
        with pytest.warns(RuntimeWarning, match="empty"):
            assert mean([]) == 0

    def test_accepts_numpy_and_tuples(self):
        assert mean(np.arange(5)) == pytest.approx(2.0)
        assert mean((1.0, 3.0)) == pytest.approx(2.0)

    def test_rejects_2d_input(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            mean([[1.0, 2.0], [3.0, 4.0]])


class TestVariance:
    def test_sample_variance_uses_bessel_correction(self):
        # Sum of squared deviations is 32 over 8 values.
        assert variance(SAMPLE, mean(SAMPLE)) == pytest.approx(32 / 7, rel=1e-6)

    @pytest.mark.parametrize("values", [[3.3] * 10, [0.1] * 7, [0.7] * 11], ids=["3.3", "0.1", "0.7"])
    def test_identical_values_have_zero_variance(self, values):
        assert variance(values, mean(values)) == 0.0

    @pytest.mark.parametrize("values", [[], [42.0]], ids=["empty", "single"])
    def test_fewer_than_two_values_is_zero_with_warning(self, values):
        with pytest.warns(RuntimeWarning, match="Degrees of freedom"):
            assert variance(values, 42.0) == 0

    def test_uses_supplied_mean(self):
        # About 0 rather than the true mean of 2: (1 + 4 + 9) / 2.
        assert variance([1.0, 2.0, 3.0], 0.0) == pytest.approx(7.0)

    def test_standard_deviation_squared_is_variance(self):
        m = mean(SAMPLE)
        assert standard_deviation(SAMPLE, m) ** 2 == pytest.approx(variance(SAMPLE, m), rel=1e-5)

    def test_standard_deviation_matches_numpy(self):
        rng = np.random.default_rng(3)
        values = rng.normal(10.0, 2.0, size=200)
        assert standard_deviation(values, mean(values)) == pytest.approx(
            np.std(values, ddof=1), rel=1e-4
        )


class TestMinMax:
    def test_bounds_every_element(self):
        rng = np.random.default_rng(0)
        for _ in range(20):
            values = rng.uniform(-100, 100, size=rng.integers(1, 50)).astype(np.float32)
            lo, hi = minimum(values), maximum(values)
            assert np.all(lo <= values)
            assert np.all(values <= hi)
            assert lo in values and hi in values

    def test_negative_values(self):
        assert minimum([-1.0, -5.0, -2.0]) == -5.0
        assert maximum([-1.0, -5.0, -2.0]) == -1.0

    def test_integer_dtype(self):
        result = maximum([3, 9, 2], dtype=np.uint32)
        assert result == 9
        assert result.dtype == np.uint32

    @pytest.mark.parametrize("func", [minimum, maximum])
    def test_empty_raises(self, func):
        with pytest.raises(EmptyInputError):
            func([])

    @pytest.mark.parametrize("func", [minimum, maximum])
    def test_nan_raises(self, func):
        with pytest.raises(InvalidValueError):
            func([1.0, np.nan, 3.0])


class TestMedian:
    @pytest.mark.parametrize(
        "values, expected",
        [
            ([5.0], 5.0),
            ([3.0, 1.0, 2.0], 2.0),
            ([4.0, 1.0, 3.0, 2.0], 2.5),
            ([-1.0, -1.0, 10.0, 10.0], 4.5),
        ],
        ids=["single", "odd", "even", "even_duplicates"],
    )
    def test_median(self, values, expected):
        assert median(values) == pytest.approx(expected)

    def test_invariant_under_permutation(self):
        values = [5.0, 1.0, 4.0, 2.0, 3.0, 0.5]
        results = {float(median(p)) for p in permutations(values)}
        assert results == {2.5}

    def test_does_not_modify_input(self):
        values = np.array([3.0, 1.0, 2.0], dtype=np.float32)
        median(values)
        assert values.tolist() == [3.0, 1.0, 2.0]

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            median([])

    def test_nan_raises(self):
        with pytest.raises(InvalidValueError, match="NaN"):
            median([1.0, 2.0, np.nan])

    def test_infinities_are_ordered(self):
        assert median([np.inf, -np.inf, 0.0]) == 0.0


class TestMode:
    def test_mode(self):
        assert mode([1.0, 2.0, 2.0, 3.0]) == 2.0

    def test_matches_scipy_without_ties(self):
        stats = pytest.importorskip("scipy.stats")
        values = [4.0, 1.0, 4.0, 2.0, 7.0, 4.0, 2.0]
        assert mode(values) == stats.mode(values).mode

    @pytest.mark.parametrize(
        "values, expected",
        [
            ([3.0, 1.0, 1.0, 3.0], 3.0),
            ([1.0, 3.0, 3.0, 1.0], 1.0),
            ([9.0, 8.0, 7.0], 9.0),
            ([2.0, 5.0, 5.0, 2.0, 0.0, 0.0], 2.0),
        ],
        ids=["larger_first", "smaller_first", "all_unique", "three_way"],
    )
    def test_ties_go_to_first_occurrence(self, values, expected):
        assert mode(values) == expected

    def test_single_value(self):
        assert mode([6.5]) == 6.5

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            mode([])

    def test_nan_raises(self):
        with pytest.raises(InvalidValueError):
            mode([np.nan, np.nan, 1.0])
