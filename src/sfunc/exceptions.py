"""Errors raised by the special functions.

Saturation at domain boundaries (e.g. ``inc_beta`` at ``x >= 1``) is not an
error, the limiting value is returned.
"""


class DomainError(ValueError):
    """an argument lies outside the domain on which the function is defined"""


class ConvergenceError(ArithmeticError):
    """an iteration did not meet its tolerance within the allowed budget

    Parameters
    ----------
    msg
        description of the failure
    estimate
        the best value available when the iteration stopped
    iterations
        the number of iterations performed
    """

    def __init__(self, msg, estimate=None, iterations=None):
        super().__init__(msg)
        self.estimate = estimate
        self.iterations = iterations


def check_shape(name, value):
    """returns value as a float after checking it is a finite positive number

    Raises
    ------
    DomainError
        if value is NaN, infinite or not positive
    """
    value = float(value)
    if not 0 < value < float("inf"):
        raise DomainError(f"{name} must be finite and > 0, got {value!r}")
    return value
