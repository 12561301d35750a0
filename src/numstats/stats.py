"""
Descriptive statistics over a single sequence of numbers. Everything is
computed in single precision (`np.float32`) unless a different `dtype` is
requested.

Some of these deliberately depart from the textbook definitions so that the
formulas built on top of them stay total: the mean of an empty sequence is 0,
and the variance of fewer than two values is 0. Both cases raise a
`RuntimeWarning` rather than an error. Order-based statistics (`minimum`,
`maximum`, `median`, `mode`) refuse empty input and NaN outright.
"""
__all__ = [
    "maximum",
    "mean",
    "median",
    "minimum",
    "mode",
    "standard_deviation",
    "variance",
]

import numpy as np
import warnings

from ._helpers import as_sequence, check_no_nan, check_not_empty, float_type


def mean(seq, dtype=np.float32):
    """
    Arithmetic mean of `seq`.

    Parameters
    ----------
    seq : array_like (N,)
        Input values.
    dtype : data-type, optional
        Precision the mean is computed in. The default is `np.float32`.

    Returns
    -------
    float
        Mean of `seq`, or 0 if `seq` is empty.

    Notes
    -----
    The mean of an empty sequence is mathematically undefined. It is taken to
    be 0 here (with a `RuntimeWarning`) so that `variance`, `covariance` and
    the regression model never have to special-case it.

    """
    arr = as_sequence(seq, dtype)
    if arr.size == 0:
        warnings.warn("Mean of empty sequence, returning 0.", RuntimeWarning, stacklevel=2)
        return float_type(arr)(0)
    # Accumulate in double precision so that n copies of v average to exactly v.
    return float_type(arr)(arr.mean(dtype=np.float64))


def variance(seq, mean, dtype=np.float32):
    """
    Sample variance of `seq` about a precomputed `mean`, using Bessel's
    correction (denominator `n - 1`).

    Parameters
    ----------
    seq : array_like (N,)
        Input values.
    mean : float
        Mean of `seq`, usually the result of `mean(seq)`.
    dtype : data-type, optional
        Precision the variance is computed in. The default is `np.float32`.

    Returns
    -------
    float
        Sample variance. 0 if `seq` has fewer than two values.

    Notes
    -----
    A return value of 0 for `N <= 1` does not mean that the data has no
    spread: the variance is simply undefined there. Check `len(seq)` if the
    difference matters.

    """
    arr = as_sequence(seq, dtype)
    n = arr.shape[0]
    if n <= 1:
        warnings.warn(
            "Degrees of freedom <= 0 for variance, returning 0.",
            RuntimeWarning,
            stacklevel=2,
        )
        return float_type(arr)(0)
    deviations = arr - mean
    return np.sum(deviations * deviations) / (n - 1)


def standard_deviation(seq, mean, dtype=np.float32):
    """
    Square root of `variance(seq, mean)`, so it shares the same `n - 1`
    denominator and the same 0 result for fewer than two values.
    """
    return np.sqrt(variance(seq, mean, dtype=dtype))


def minimum(seq, dtype=np.float32):
    """
    Smallest value in `seq`. Raises `EmptyInputError` if `seq` is empty and
    `InvalidValueError` if it contains NaN.
    """
    arr = as_sequence(seq, dtype)
    check_not_empty(arr)
    check_no_nan(arr)
    return arr.min()


def maximum(seq, dtype=np.float32):
    """
    Largest value in `seq`. Raises `EmptyInputError` if `seq` is empty and
    `InvalidValueError` if it contains NaN.
    """
    arr = as_sequence(seq, dtype)
    check_not_empty(arr)
    check_no_nan(arr)
    return arr.max()


def median(seq, dtype=np.float32):
    """
    Middle value of `seq` once sorted into ascending order. For an even number
    of values, the mean of the two central values is returned.

    Parameters
    ----------
    seq : array_like (N,)
        Input values. Not modified; a private copy is sorted.
    dtype : data-type, optional
        Precision to compute in. The default is `np.float32`.

    Returns
    -------
    float
        Median of `seq`.

    Raises
    ------
    EmptyInputError
        If `seq` is empty.
    InvalidValueError
        If `seq` contains NaN, as there is no meaningful place for it in the
        sorted order.

    """
    arr = as_sequence(seq, dtype)
    check_not_empty(arr)
    check_no_nan(arr)

    arr.sort()
    mid = arr.shape[0] // 2
    if arr.shape[0] % 2:
        return arr[mid]
    return (arr[mid - 1] + arr[mid]) / 2


def mode(seq, dtype=np.float32):
    """
    Most frequent value in `seq`, grouping values by exact equality.

    When several values share the highest count, the one which appears first
    in `seq` is returned, e.g. `mode([3, 1, 1, 3])` is 3.

    Parameters
    ----------
    seq : array_like (N,)
        Input values.
    dtype : data-type, optional
        Precision to compare values in. The default is `np.float32`, so
        values which only differ beyond single precision are counted as equal.

    Returns
    -------
    float
        The modal value.

    Raises
    ------
    EmptyInputError
        If `seq` is empty.
    InvalidValueError
        If `seq` contains NaN (NaN never compares equal to itself).

    """
    arr = as_sequence(seq, dtype)
    check_not_empty(arr)
    check_no_nan(arr)

    # `first` holds the index of the first occurrence of each unique value.
    values, first, counts = np.unique(arr, return_index=True, return_counts=True)
    tied = np.flatnonzero(counts == counts.max())
    return values[tied[np.argmin(first[tied])]]
