"""
Simple (one variable) linear regression by ordinary least squares, and the
root-mean-squared error used to score it.

A `LinearRegression` is either unfit or fit. Its parameters only exist once
`fit` has succeeded, and are stored together as a single `FitResult`, so the
model can never hold an intercept without a coefficient or vice versa.
```
>>> model = LinearRegression()
>>> intercept, coefficient = model.fit([1, 2, 3, 4], [3, 5, 7, 9])
>>> float(intercept), float(coefficient)
(1.0, 2.0)
>>> model.predict_list([5, 6])
array([11., 13.], dtype=float32)
```
"""
__all__ = ["FitResult", "LinearRegression", "root_mean_squared_error"]

from collections import namedtuple

import numpy as np
import warnings

from ._helpers import (
    as_sequence, check_no_nan, check_not_empty, check_same_length, float_type,
)
from .bivariate import covariance
from .exceptions import DegenerateInputError, ModelNotFitError
from .stats import mean, variance

FitResult = namedtuple("FitResult", ["intercept", "coefficient"])
FitResult.__doc__ = """Parameters of a fitted line `y = intercept + coefficient * x`."""


def root_mean_squared_error(actual, predicted, dtype=np.float32):
    """
    Root-mean-squared error between `actual` and `predicted`:
        RMSE = √(1/N Σ (actual - predicted)²)

    Parameters
    ----------
    actual : array_like (N,)
        Observed values.
    predicted : array_like (N,)
        Predicted values, paired element-wise with `actual`.
    dtype : data-type, optional
        Precision to compute in. The default is `np.float32`.

    Returns
    -------
    float
        The RMSE, in the units of `actual`. Empty inputs give 0, following
        `mean`.

    Raises
    ------
    LengthMismatchError
        If `actual` and `predicted` have different lengths.

    """
    actual = as_sequence(actual, dtype, "actual")
    predicted = as_sequence(predicted, dtype, "predicted")
    check_same_length(actual, predicted, names=("actual", "predicted"))

    return _rmse(actual, predicted, dtype, stacklevel=3)


def _rmse(actual, predicted, dtype, stacklevel):
    # `stacklevel` counts from this frame.
    if actual.size == 0:
        warnings.warn(
            "RMSE of empty sequences, returning 0.", RuntimeWarning, stacklevel=stacklevel
        )
        return float_type(actual)(0)
    residuals = actual - predicted
    return np.sqrt(mean(residuals * residuals, dtype=dtype))


class LinearRegression:
    """
    Least-squares fit of `y = intercept + coefficient * x` to paired data.

    Parameters
    ----------
    dtype : data-type, optional
        Precision the model is fit and evaluated in. The default is
        `np.float32`.

    Notes
    -----
    Not safe to `fit` from one thread while another predicts with the same
    instance.

    """

    def __init__(self, dtype=np.float32):
        self.dtype = np.dtype(dtype)
        self._params = None

    def __repr__(self):
        if self._params is None:
            return "LinearRegression(<unfit>)"
        return "LinearRegression(intercept={}, coefficient={})".format(*self._params)

    @property
    def is_fit(self):
        return self._params is not None

    @property
    def params(self):
        """The fitted `FitResult`. Raises `ModelNotFitError` before `fit`."""
        if self._params is None:
            raise ModelNotFitError("Model has not been fit; call `fit` first.")
        return self._params

    @property
    def intercept(self):
        return self.params.intercept

    @property
    def coefficient(self):
        return self.params.coefficient

    def fit(self, x, y):
        """
        Fit the model to the observations `(x, y)`, replacing any previous fit.

        The coefficient is the ratio of the covariance of `x` and `y` to the
        variance of `x`, and the intercept places the line through the point
        of means:
            coefficient = Cov[x, y] / Var[x]
            intercept = ȳ - coefficient * x̄

        Parameters
        ----------
        x : array_like (N,)
            Independent variable.
        y : array_like (N,)
            Dependent variable.

        Returns
        -------
        FitResult
            The fitted `(intercept, coefficient)`.

        Raises
        ------
        LengthMismatchError
            If `x` and `y` have different lengths.
        EmptyInputError
            If `x` and `y` are empty.
        InvalidValueError
            If `x` or `y` contains NaN.
        DegenerateInputError
            If all values of `x` are equal (including a single observation),
            in which case the slope is undefined. The model is left as it was.

        Notes
        -----
        `covariance` divides by N while `variance` divides by N - 1. The
        sample variance is rescaled by (N - 1) / N here so that both use N,
        otherwise the slope would be biased towards zero by that factor.

        """
        x = as_sequence(x, self.dtype, "x")
        y = as_sequence(y, self.dtype, "y")
        check_same_length(x, y)
        check_not_empty(x, "x")
        check_no_nan(x, "x")
        check_no_nan(y, "y")

        n = x.shape[0]
        if n < 2:
            raise DegenerateInputError(
                "At least two observations are needed to fit a slope; found 1."
            )
        if np.all(x == x[0]):
            raise DegenerateInputError(
                "`x` has zero variance (all values equal {}); slope is undefined.".format(x[0])
            )
        x_mean, y_mean = mean(x, dtype=self.dtype), mean(y, dtype=self.dtype)
        x_var = variance(x, x_mean, dtype=self.dtype) * self.dtype.type((n - 1) / n)

        coefficient = covariance(x, y, dtype=self.dtype) / x_var
        intercept = y_mean - coefficient * x_mean
        self._params = FitResult(intercept, coefficient)
        return self._params

    def predict(self, x):
        """Predict `y` at a single value `x`."""
        intercept, coefficient = self.params
        return intercept + coefficient * self.dtype.type(x)

    def predict_list(self, xs):
        """
        Predict `y` at every value in `xs`, keeping their order.

        Parameters
        ----------
        xs : array_like (N,)
            Values of the independent variable.

        Returns
        -------
        ndarray (N,)
            Predicted values.

        """
        intercept, coefficient = self.params
        return intercept + coefficient * as_sequence(xs, self.dtype, "xs")

    def evaluate(self, x_test, y_test):
        """
        Score the model on held-out data: the root-mean-squared error between
        `y_test` and the predictions at `x_test`.

        Raises `LengthMismatchError` if `x_test` and `y_test` have different
        lengths, and `ModelNotFitError` before `fit`.
        """
        x_test = as_sequence(x_test, self.dtype, "x_test")
        y_test = as_sequence(y_test, self.dtype, "y_test")
        check_same_length(x_test, y_test, names=("x_test", "y_test"))
        return _rmse(y_test, self.predict_list(x_test), self.dtype, stacklevel=3)
