import math

from numba import boolean, float64, int64, njit
from numba.core.types.containers import Tuple


__copyright__ = "Copyright 2014-date, The sfunc Project"
__license__ = "BSD-3"
__status__ = "Production"

# Algorithm AS 63 relative accuracy
ACU = 0.1e-14
# Remark AS R83, smallest attainable accuracy is 10**SAE
SAE = -30
FPU = 1e-30


@njit(
    Tuple(types=(float64, boolean))(float64, float64, float64, float64, int64),
    cache=True,
)
def inc_beta_inner(x, p, q, ln_beta, max_iterations):
    """returns (I_x(p, q), converged) for 0 < x < 1

    Soper's reduction, reductions are made "by parts" up to
    int(q + (1 - x)(p + q)) times, then continued by "raising p". If
    p < (p + q)x the complement I_(1-x)(q, p) is evaluated instead.
    """
    psq = p + q
    flip = p < psq * x
    if flip:
        pbase = 1.0 - x
        qbase = x
        p, q = q, p
    else:
        pbase = x
        qbase = 1.0 - x

    term = 1.0
    ai = 1.0
    ns = int(q + qbase * psq)
    if ns == 0:
        rx = pbase
    else:
        rx = pbase / qbase

    alpha = 1.0
    temp = q - ai
    converged = False
    for _ in range(max_iterations):
        term = term * temp * rx / (p + ai)
        alpha += term

        temp = abs(term)
        if temp <= ACU and temp <= ACU * alpha:
            converged = True
            break

        ai += 1.0
        ns -= 1
        if ns > 0:
            temp = q - ai
        elif ns == 0:
            temp = q - ai
            rx = pbase
        else:
            temp = psq
            psq += 1.0

    # Remark AS R19 and Algorithm AS 109
    alpha = (
        alpha
        * math.exp(p * math.log(pbase) + (q - 1.0) * math.log(qbase) - ln_beta)
        / p
    )
    if flip:
        alpha = 1.0 - alpha
    return alpha, converged


@njit(
    Tuple(types=(float64, int64, boolean))(
        float64, float64, float64, float64, int64, int64
    ),
    cache=True,
)
def inv_inc_beta_inner(alpha, p, q, ln_beta, max_iterations, max_series_iterations):
    """returns (x, iterations, converged) such that I_x(p, q) = alpha

    alpha must lie in (0, 1). x is the best estimate when not converged.
    """
    flip = alpha > 0.5
    if flip:
        p, q = q, p
        alpha = 1.0 - alpha

    # Hastings' approximation to the upper alpha point of the standard normal
    r = math.sqrt(-2.0 * math.log(alpha))
    y = r - (2.30753 + 0.27061 * r) / (1.0 + (0.99229 + 0.04481 * r) * r)

    if p > 1.0 and q > 1.0:
        # Carter (1947), Remark AS R19
        r = (y * y - 3.0) / 6.0
        s = 1.0 / (2.0 * p - 1.0)
        t = 1.0 / (2.0 * q - 1.0)
        h = 2.0 / (s + t)
        w = y * math.sqrt(h + r) / h - (t - s) * (r + 5.0 / 6.0 - 2.0 / (3.0 * h))
        x = p / (p + q * math.exp(2.0 * w))
    else:
        # Wilson and Hilferty's chi-squared with 2q degrees of freedom
        t = 1.0 / (9.0 * q)
        t = 2.0 * q * math.pow(1.0 - t + y * math.sqrt(t), 3.0)
        if t <= 0.0:
            x = 1.0 - math.exp((math.log((1.0 - alpha) * q) + ln_beta) / q)
        else:
            t = 2.0 * (2.0 * p + q - 1.0) / t
            if t <= 1.0:
                x = math.exp((math.log(alpha * p) + ln_beta) / p)
            else:
                x = 1.0 - 2.0 / (t + 1.0)

    if x < 0.0001:
        x = 0.0001
    elif x > 0.9999:
        x = 0.9999

    # Remark AS R83
    # truncated only when above SAE, tiny alpha gives exponents beyond int64
    e = -5.0 / p / p - 1.0 / math.pow(alpha, 0.2) - 13.0
    if e > SAE:
        acu = math.pow(10.0, float(int(e)))
    else:
        acu = FPU

    tx = x
    yprev = 0.0
    sq = 1.0
    prev = 1.0
    iterations = 0
    converged = False
    while iterations < max_iterations:
        iterations += 1
        y, series_converged = inc_beta_inner(x, p, q, ln_beta, max_series_iterations)
        if not series_converged:
            break

        y = (y - alpha) * math.exp(
            ln_beta + (1.0 - p) * math.log(x) + (1.0 - q) * math.log(1.0 - x)
        )
        if not math.isfinite(y):
            break

        if y * yprev <= 0.0:
            prev = max(sq, FPU)

        g = 1.0
        while True:
            while True:
                adj = g * y
                sq = adj * adj
                if sq < prev:
                    tx = x - adj
                    if 0.0 <= tx <= 1.0:
                        break
                g /= 3.0

            if prev <= acu or y * y <= acu:
                converged = True
                break

            if tx != 0.0 and tx != 1.0:
                break

            g /= 3.0

        if converged:
            x = tx
            break

        if tx == x:
            converged = True
            break

        x = tx
        yprev = y

    if flip:
        x = 1.0 - x
    return x, iterations, converged
