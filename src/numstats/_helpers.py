"""
Input coercion and validation shared by the public modules.
"""
__all__ = [
    "as_sequence", "check_no_nan", "check_not_empty", "check_same_length",
    "float_type",
]

import numpy as np

from .exceptions import EmptyInputError, InvalidValueError, LengthMismatchError


def as_sequence(seq, dtype=np.float32, name="seq"):
    """
    Convert `seq` into a new 1D array of `dtype`. The caller's object is never
    returned, so in-place operations on the result are safe.

    Parameters
    ----------
    seq : array_like (N,)
        Input values.
    dtype : data-type, optional
        Precision to compute in. The default is `np.float32`.
    name : str, optional
        Name of the argument, used in error messages.

    Returns
    -------
    ndarray (N,)

    """
    arr = np.array(seq, dtype=dtype, ndmin=1, copy=True)
    if arr.ndim != 1:
        raise ValueError(
            "`{}` should be one-dimensional; found shape {}.".format(name, arr.shape)
        )
    return arr


def float_type(arr):
    """
    Scalar type for results computed from `arr`: its own type if it is
    floating point, otherwise `np.float64` (as `np.mean` does for integers).
    """
    if np.issubdtype(arr.dtype, np.inexact):
        return arr.dtype.type
    return np.float64


def check_not_empty(arr, name="seq"):
    if arr.size == 0:
        raise EmptyInputError("`{}` is empty; at least one value is required.".format(name))


def check_same_length(arr1, arr2, names=("x", "y")):
    if arr1.shape[0] != arr2.shape[0]:
        raise LengthMismatchError(arr1.shape[0], arr2.shape[0], names=names)


def check_no_nan(arr, name="seq"):
    # Integer arrays cannot hold NaN.
    if np.issubdtype(arr.dtype, np.inexact) and np.isnan(arr).any():
        raise InvalidValueError(
            "`{}` contains NaN, which is not a usable value here.".format(name)
        )
