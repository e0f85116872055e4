"""Elliptic integrals: complete and incomplete Legendre forms, and Carlson's
symmetric forms. Each delegates to the corresponding ``scipy.special``
function, results are rounded to the precision of the arguments.

Legendre forms take the parameter m = k**2. The third kind, Legendre's D,
Jacobi's zeta, Heuman's lambda and Bulirsch's integrals have no direct scipy
counterpart, they are composed from Carlson's forms and the Legendre
integrals (DLMF 19.25).
"""
import math

from scipy import special

from sfunc.primitive import primitive_for


__copyright__ = "Copyright 2014-date, The sfunc Project"
__license__ = "BSD-3"
__status__ = "Production"


def _delegate(func, *args):
    prim = primitive_for(*args)
    return prim.cast(func(*(float(arg) for arg in args)))


def ellipk(m):
    """returns the complete elliptic integral of the first kind K(m)"""
    return _delegate(special.ellipk, m)


def ellipe(m):
    """returns the complete elliptic integral of the second kind E(m)"""
    return _delegate(special.ellipe, m)


def ellipf(phi, m):
    """returns the incomplete elliptic integral of the first kind F(phi, m)"""
    return _delegate(special.ellipkinc, phi, m)


def ellipeinc(phi, m):
    """returns the incomplete elliptic integral of the second kind E(phi, m)"""
    return _delegate(special.ellipeinc, phi, m)


def elliprf(x, y, z):
    """returns Carlson's symmetric integral of the first kind RF(x, y, z)"""
    return _delegate(special.elliprf, x, y, z)


def elliprg(x, y, z):
    """returns Carlson's completely symmetric integral of the second kind
    RG(x, y, z)"""
    return _delegate(special.elliprg, x, y, z)


def elliprj(x, y, z, p):
    """returns Carlson's symmetric integral of the third kind RJ(x, y, z, p)"""
    return _delegate(special.elliprj, x, y, z, p)


def elliprc(x, y):
    """returns Carlson's degenerate symmetric integral RC(x, y)"""
    return _delegate(special.elliprc, x, y)


def elliprd(x, y, z):
    """returns Carlson's symmetric integral of the second kind RD(x, y, z)"""
    return _delegate(special.elliprd, x, y, z)


def _reduce_amplitude(phi):
    """returns (phi - k pi, k) with the reduced amplitude in [-pi/2, pi/2]"""
    k = round(phi / math.pi)
    return phi - k * math.pi, k


def _ellippi(n, m):
    return special.elliprf(0.0, 1.0 - m, 1.0) + n / 3.0 * special.elliprj(
        0.0, 1.0 - m, 1.0, 1.0 - n
    )


def _ellipd(m):
    return special.elliprd(0.0, 1.0 - m, 1.0) / 3.0


def _ellippiinc(n, phi, m):
    if not math.isfinite(phi):
        return math.nan

    phi, k = _reduce_amplitude(phi)
    s = math.sin(phi)
    c2 = math.cos(phi) ** 2
    s2 = s * s
    value = s * special.elliprf(c2, 1.0 - m * s2, 1.0) + n * s * s2 / 3.0 * (
        special.elliprj(c2, 1.0 - m * s2, 1.0, 1.0 - n * s2)
    )
    if k:
        value += 2 * k * _ellippi(n, m)
    return value


def _ellipdinc(phi, m):
    if not math.isfinite(phi):
        return math.nan

    phi, k = _reduce_amplitude(phi)
    s = math.sin(phi)
    c2 = math.cos(phi) ** 2
    value = s**3 / 3.0 * special.elliprd(c2, 1.0 - m * s * s, 1.0)
    if k:
        value += 2 * k * _ellipd(m)
    return value


def _jacobi_zeta(phi, m):
    ratio = special.ellipe(m) / special.ellipk(m)
    return special.ellipeinc(phi, m) - ratio * special.ellipkinc(phi, m)


def _heuman_lambda(phi, m):
    if not 0.0 <= m < 1.0:
        return math.nan

    mc = 1.0 - m
    return special.ellipkinc(phi, mc) / special.ellipk(mc) + (
        2.0 / math.pi * special.ellipk(m) * _jacobi_zeta(phi, mc)
    )


def ellippi(n, m):
    """returns the complete elliptic integral of the third kind Pi(n, m)

    The Cauchy principal value is returned for n > 1.
    """
    return _delegate(_ellippi, n, m)


def ellipd(m):
    """returns the complete elliptic integral of Legendre's type D(m),
    (K(m) - E(m)) / m"""
    return _delegate(_ellipd, m)


def ellippiinc(n, phi, m):
    """returns the incomplete elliptic integral of the third kind
    Pi(n, phi, m)

    The Cauchy principal value is returned for n sin(phi)**2 > 1.
    """
    return _delegate(_ellippiinc, n, phi, m)


def ellippiinc_bulirsch(n, phi, m):
    """returns the incomplete elliptic integral of the third kind
    Pi(n, phi, m)

    Retained for callers of Bulirsch's formulation, evaluated as
    ``ellippiinc``.
    """
    return _delegate(_ellippiinc, n, phi, m)


def ellipdinc(phi, m):
    """returns the incomplete elliptic integral of Legendre's type D(phi, m)"""
    return _delegate(_ellipdinc, phi, m)


def jacobi_zeta(phi, m):
    """returns Jacobi's zeta function Z(phi, m) = E(phi, m) - E(m) F(phi, m) / K(m)"""
    return _delegate(_jacobi_zeta, phi, m)


def heuman_lambda(phi, m):
    """returns Heuman's lambda function Lambda0(phi, m)

    Defined for 0 <= m < 1, NaN otherwise.
    """
    return _delegate(_heuman_lambda, phi, m)


def _cel(p, a, b, m):
    mc = 1.0 - m
    return a * special.elliprf(0.0, mc, 1.0) + (b - p * a) / 3.0 * special.elliprj(
        0.0, mc, 1.0, p
    )


def _el2(x, a, b, m):
    phi = math.atan(x)
    return a * special.ellipkinc(phi, m) + (b - a) * _ellipdinc(phi, m)


def cel(p, a, b, m):
    """returns Bulirsch's complete elliptic integral cel(kc, p, a, b)

    Parameters
    ----------
    p
        the characteristic, non-zero
    a, b
        coefficients
    m
        the parameter, Bulirsch's complementary modulus is kc = sqrt(1 - m)
    """
    return _delegate(_cel, p, a, b, m)


def cel1(m):
    """returns Bulirsch's cel1(kc), equal to K(m)"""
    return _delegate(_cel, 1.0, 1.0, 1.0, m)


def cel2(a, b, m):
    """returns Bulirsch's cel2(kc, a, b), equal to cel(kc, 1, a, b)"""
    return _delegate(_cel, 1.0, a, b, m)


def el1(x, m):
    """returns Bulirsch's el1(x, kc), F(arctan(x), m)"""
    return _delegate(lambda x, m: special.ellipkinc(math.atan(x), m), x, m)


def el2(x, a, b, m):
    """returns Bulirsch's el2(x, kc, a, b),
    a F(arctan(x), m) + (b - a) D(arctan(x), m)"""
    return _delegate(_el2, x, a, b, m)


def el3(x, p, m):
    """returns Bulirsch's el3(x, kc, p), Pi(1 - p, arctan(x), m)"""
    return _delegate(lambda x, p, m: _ellippiinc(1.0 - p, math.atan(x), m), x, p, m)
