import math

from numba import boolean, float64, int64, njit
from numba.core.types.containers import Tuple


__copyright__ = "Copyright 2014-date, The sfunc Project"
__license__ = "BSD-3"
__status__ = "Production"

# Algorithm AS 239 constants
ELIMIT = -88.0
OFLO = 1.0e37
TOL = 1.0e-14


@njit(
    Tuple(types=(float64, boolean))(float64, float64, float64, int64), cache=True
)
def inc_gamma_series(x, p, ln_gamma_p1, max_iterations):
    """returns (P(x, p), converged) from the power series

    ln_gamma_p1 is lnGamma(p + 1). Use when x <= 1 or x < p.
    """
    arg = p * math.log(x) - x - ln_gamma_p1
    c = 1.0
    value = 1.0
    a = p
    converged = False
    for _ in range(max_iterations):
        a += 1.0
        c *= x / a
        value += c
        if c <= TOL:
            converged = True
            break

    arg += math.log(value)
    if arg >= ELIMIT:
        return math.exp(arg), converged
    return 0.0, converged


@njit(
    Tuple(types=(float64, boolean))(float64, float64, float64, int64), cache=True
)
def inc_gamma_continued_fraction(x, p, ln_gamma_p, max_iterations):
    """returns (P(x, p), converged) from Legendre's continued fraction

    ln_gamma_p is lnGamma(p). Use when x > 1 and x >= p.
    """
    arg = p * math.log(x) - x - ln_gamma_p
    a = 1.0 - p
    b = a + x + 1.0
    c = 0.0
    pn1 = 1.0
    pn2 = x
    pn3 = x + 1.0
    pn4 = x * b
    value = pn3 / pn4
    converged = False
    for _ in range(max_iterations):
        a += 1.0
        b += 2.0
        c += 1.0
        an = a * c
        pn5 = b * pn3 - an * pn1
        pn6 = b * pn4 - an * pn2
        if pn6 != 0.0:
            rn = pn5 / pn6
            if abs(value - rn) <= min(TOL, TOL * rn):
                converged = True
                break
            value = rn

        pn1 = pn3
        pn2 = pn4
        pn3 = pn5
        pn4 = pn6
        # rescale to keep the recurrence finite
        if abs(pn5) >= OFLO:
            pn1 /= OFLO
            pn2 /= OFLO
            pn3 /= OFLO
            pn4 /= OFLO

    arg += math.log(value)
    if arg >= ELIMIT:
        return 1.0 - math.exp(arg), converged
    return 1.0, converged


@njit(float64(float64), cache=True)
def digamma_inner(x):
    """returns psi(x) for x that is not a non-positive integer"""
    shift = 0.0
    while x <= 8.0:
        shift += 1.0 / x
        x += 1.0

    inv_x = 1.0 / x
    inv_x_2 = inv_x * inv_x
    # M. J. Beal (2003), asymptotic expansion coefficients, highest order first
    series = -3617.0 / 8160.0
    series = series * inv_x_2 + 1.0 / 12.0
    series = series * inv_x_2 - 691.0 / 32760.0
    series = series * inv_x_2 + 5.0 / 660.0
    series = series * inv_x_2 - 1.0 / 240.0
    series = series * inv_x_2 + 1.0 / 252.0
    series = series * inv_x_2 - 1.0 / 120.0
    series = series * inv_x_2 + 1.0 / 12.0
    return math.log(x) - 0.5 * inv_x - inv_x_2 * series - shift
