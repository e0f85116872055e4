"""Real branches of the Lambert W function, the inverse of f(w) = w exp(w).

The values come from ``scipy.special.lambertw``.

References
----------
T. Fukushima, Precise and fast computation of Lambert W function by
piecewise minimax rational function approximation with variable
transformation, https://doi.org/10.13140/RG.2.2.30264.37128
"""
import math

from scipy import special

from sfunc.primitive import primitive_for


# the branch point, -1/e. The rounded value lies just below the true one,
# where scipy returns NaN, so both branches special case it.
BRANCH_POINT = -math.exp(-1.0)


def _real_branch(x, k):
    return special.lambertw(x, k=k).real


def lambert_w0(x):
    """returns the principal branch W0(x), where W0(x) >= -1

    Defined for x >= -1/e, NaN otherwise.
    """
    prim = primitive_for(x)
    x = float(x)
    if math.isnan(x) or x < BRANCH_POINT:
        return prim.cast(math.nan)
    if x == BRANCH_POINT:
        return prim.cast(-1.0)
    return prim.cast(_real_branch(x, 0))


def lambert_wm1(x):
    """returns the secondary branch W-1(x), where W-1(x) < -1

    Defined for -1/e <= x < 0, NaN otherwise.
    """
    prim = primitive_for(x)
    x = float(x)
    if math.isnan(x) or not BRANCH_POINT <= x < 0:
        return prim.cast(math.nan)
    if x == BRANCH_POINT:
        return prim.cast(-1.0)
    return prim.cast(_real_branch(x, -1))
