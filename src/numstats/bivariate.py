"""
Statistics over two paired sequences.
"""
__all__ = ["covariance"]

import numpy as np
import warnings

from ._helpers import as_sequence, check_same_length, float_type
from .stats import mean


def covariance(x, y, dtype=np.float32):
    """
    Population covariance of `x` and `y`, i.e. the mean of the products of
    their deviations from their respective means:
        Cov[x, y] = 1/N Σ (x - x̄)(y - ȳ)

    Parameters
    ----------
    x : array_like (N,)
        First variable.
    y : array_like (N,)
        Second variable, paired element-wise with `x`.
    dtype : data-type, optional
        Precision to compute in. The default is `np.float32`.

    Returns
    -------
    float
        Covariance of `x` and `y`. 0 if both are empty.

    Raises
    ------
    LengthMismatchError
        If `x` and `y` have different lengths.

    Notes
    -----
    The denominator is `N`, unlike `variance` which uses `N - 1`. Hence for
    any `x` with more than one value,
        covariance(x, x) == variance(x, mean(x)) * (N - 1) / N
    to within floating point error.

    """
    x, y = as_sequence(x, dtype, "x"), as_sequence(y, dtype, "y")
    check_same_length(x, y)
    if x.size == 0:
        warnings.warn("Covariance of empty sequences, returning 0.", RuntimeWarning, stacklevel=2)
        return float_type(x)(0)

    dx = x - mean(x, dtype=dtype)
    dy = y - mean(y, dtype=dtype)
    return np.mean(dx * dy)
