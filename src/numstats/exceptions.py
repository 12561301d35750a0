"""
Exceptions raised when the inputs to a `numstats` function break one of its
preconditions. All of them derive from `ValueError` (via `NumstatsError`), so
code which already catches `ValueError` from numpy or scipy will catch these
too.
"""
__all__ = [
    "NumstatsError",
    "DegenerateInputError",
    "EmptyInputError",
    "InvalidValueError",
    "LengthMismatchError",
    "MalformedCoordinateError",
    "ModelNotFitError",
]


class NumstatsError(ValueError):
    """Base class for every recoverable input error in `numstats`."""


class EmptyInputError(NumstatsError):
    """The operation needs at least one element."""


class LengthMismatchError(NumstatsError):
    """
    Two sequences which should correspond element-wise have different lengths.
    The offending lengths are kept on the instance.
    """

    def __init__(self, len1, len2, names=("x", "y")):
        self.len1, self.len2 = len1, len2
        super().__init__(
            "`{}` and `{}` should have the same length; found {} and {}.".format(
                names[0], names[1], len1, len2
            )
        )


class ModelNotFitError(NumstatsError):
    """A prediction or evaluation was requested before `fit` succeeded."""


class DegenerateInputError(NumstatsError):
    """The independent variable has zero variance, so the slope is undefined."""


class MalformedCoordinateError(NumstatsError):
    """A coordinate does not supply a usable (latitude, longitude) pair."""


class InvalidValueError(NumstatsError):
    """A value (usually NaN) has no place in a total ordering."""
