"""The gamma function family: log-gamma with sign, gamma, digamma and the
regularized lower incomplete gamma function.
"""
import logging
import math

from sfunc.exceptions import ConvergenceError, DomainError, check_shape
from sfunc.gamma_numba import (
    ELIMIT,
    OFLO,
    TOL,
    digamma_inner,
    inc_gamma_continued_fraction,
    inc_gamma_series,
)
from sfunc.primitive import F64, primitive_for
from sfunc.util import warning as sf_warn


__copyright__ = "Copyright 2014-date, The sfunc Project"
__license__ = "BSD-3"
__status__ = "Production"

__all__ = [
    "ELIMIT",
    "OFLO",
    "TOL",
    "XBIG",
    "MAX_ITERATIONS",
    "ln_gamma",
    "gamma",
    "digamma",
    "inc_gamma",
]

logger = logging.getLogger(__name__)

# the incomplete gamma saturates to 1 beyond this
XBIG = 1.0e8
# cap on the terms of either incomplete gamma expansion
MAX_ITERATIONS = 1_000_000


def ln_gamma(x):
    """returns LnGamma(value, sign), the natural log of |Gamma(x)| and the
    sign of Gamma(x)"""
    prim = primitive_for(x)
    return prim.ln_gamma(x)


def gamma(x):
    """returns the gamma function, a generalization of the factorial"""
    prim = primitive_for(x)
    return prim.tgamma(x)


def digamma(x):
    """returns the digamma function, the derivative of ln(Gamma(x))

    Notes
    -----
    For x <= 8 the recurrence psi(x) = psi(x + 1) - 1/x is applied until the
    argument exceeds 8, where the asymptotic expansion is used. See M. J.
    Beal, Variational algorithms for approximate Bayesian inference,
    University of London, 2003, pp. 265-266. Negative arguments use the
    reflection formula. Returns NaN at the poles (non-positive integers).
    """
    prim = primitive_for(x)
    x = float(x)
    if x == math.inf:
        return prim.cast(math.inf)

    if not math.isfinite(x) or (x <= 0 and x == math.floor(x)):
        return prim.cast(math.nan)

    if x < 0:
        # reflection, psi(1 - x) - psi(x) = pi cot(pi x)
        return prim.cast(digamma_inner(1 - x) - math.pi / math.tan(math.pi * x))

    return prim.cast(digamma_inner(x))


def inc_gamma(x, p, max_iterations=MAX_ITERATIONS):
    """returns the regularized lower incomplete gamma function P(x, p)

    This is the cumulative distribution function of the Gamma(p, 1)
    distribution evaluated at x. Algorithm AS 239 (Shea, 1988).

    Parameters
    ----------
    x
        upper limit of integration, must be >= 0
    p
        positive shape parameter
    max_iterations
        maximum number of series terms or continued fraction convergents

    Raises
    ------
    DomainError
        if x < 0, or p is not a finite positive number
    ConvergenceError
        if the expansion has not converged after max_iterations steps

    Notes
    -----
    A power series is used when x <= 1 or x < p, otherwise Legendre's
    continued fraction. Both stop at a tolerance of TOL. Results whose log
    is below ELIMIT saturate to 0 (series) or 1 (continued fraction), and
    x > XBIG returns 1.
    """
    prim = primitive_for(x, p)
    p = check_shape("p", p)
    x = float(x)
    if math.isnan(x):
        return prim.cast(x)

    if x < 0:
        raise DomainError(f"x must be >= 0, got {x!r}")

    if x == 0:
        return prim.cast(0.0)

    if x > XBIG:
        return prim.cast(1.0)

    if x <= 1 or x < p:
        lg, _ = F64.ln_gamma(p + 1.0)
        value, converged = inc_gamma_series(x, p, float(lg), max_iterations)
        method = "series"
    else:
        lg, _ = F64.ln_gamma(p)
        value, converged = inc_gamma_continued_fraction(
            x, p, float(lg), max_iterations
        )
        method = "continued fraction"

    if not converged:
        msg = (
            f"inc_gamma(x={x}, p={p}) {method} did not converge in "
            f"{max_iterations} iterations"
        )
        logger.debug(msg)
        raise ConvergenceError(
            msg, estimate=prim.cast(value), iterations=max_iterations
        )

    return prim.cast(value)


@sf_warn.deprecated_callable(version="2027.1", reason="renamed", new="ln_gamma")
def lgamma(x):
    """deprecated, returns ln_gamma(x).value"""
    return ln_gamma(x).value
