# SPDX-FileCopyrightText: 2025-present Matt Chandler <mc16535@bristol.ac.uk>
#
# SPDX-License-Identifier: MIT

__version__ = "0.1.0"

from .bivariate import covariance
from .exceptions import (
    DegenerateInputError,
    EmptyInputError,
    InvalidValueError,
    LengthMismatchError,
    MalformedCoordinateError,
    ModelNotFitError,
    NumstatsError,
)
from .geo import EARTH_RADIUS_KM, haversine_distance
from .regression import FitResult, LinearRegression, root_mean_squared_error
from .stats import maximum, mean, median, minimum, mode, standard_deviation, variance

__all__ = [
    'covariance', 'maximum', 'mean', 'median', 'minimum', 'mode',
    'standard_deviation', 'variance',
    'EARTH_RADIUS_KM', 'haversine_distance',
    'FitResult', 'LinearRegression', 'root_mean_squared_error',
    'DegenerateInputError', 'EmptyInputError', 'InvalidValueError',
    'LengthMismatchError', 'MalformedCoordinateError', 'ModelNotFitError',
    'NumstatsError',
]
