import math

import numpy
import pytest

from numpy.testing import assert_allclose

from sfunc import elliptic


def test_complete_legendre():
    """K and E at m = 0 are pi/2"""
    assert_allclose(elliptic.ellipk(0.0), math.pi / 2, rtol=1e-14)
    assert_allclose(elliptic.ellipe(0.0), math.pi / 2, rtol=1e-14)
    assert_allclose(elliptic.ellipe(1.0), 1.0, rtol=1e-14)
    assert math.isinf(elliptic.ellipk(1.0))


def test_incomplete_legendre():
    """incomplete integrals reduce to the complete ones at phi = pi/2"""
    m = 0.3
    assert_allclose(elliptic.ellipf(math.pi / 2, m), elliptic.ellipk(m), rtol=1e-13)
    assert_allclose(
        elliptic.ellipeinc(math.pi / 2, m), elliptic.ellipe(m), rtol=1e-13
    )
    assert_allclose(elliptic.ellipf(0.4, 0.0), 0.4, rtol=1e-14)


@pytest.mark.parametrize(
    "func,args",
    [
        (elliptic.elliprf, (1.0, 1.0, 1.0)),
        (elliptic.elliprg, (1.0, 1.0, 1.0)),
        (elliptic.elliprj, (1.0, 1.0, 1.0, 1.0)),
        (elliptic.elliprc, (1.0, 1.0)),
        (elliptic.elliprd, (1.0, 1.0, 1.0)),
    ],
)
def test_carlson_unit(func, args):
    """Carlson's integrals are 1 when all arguments are 1"""
    assert_allclose(func(*args), 1.0, rtol=1e-14)


def test_carlson_relations():
    """RF relates to K, RC to elementary functions"""
    m = 0.5
    assert_allclose(
        elliptic.elliprf(0.0, 1 - m, 1.0), elliptic.ellipk(m), rtol=1e-13
    )
    # RC(0, 1/4) = pi
    assert_allclose(elliptic.elliprc(0.0, 0.25), math.pi, rtol=1e-14)


def test_elliptic_precision():
    """the result precision follows the arguments"""
    assert isinstance(elliptic.ellipk(numpy.float32(0.5)), numpy.float32)
    assert isinstance(elliptic.ellipf(0.5, 0.5), numpy.float64)


@pytest.mark.parametrize(
    "func,args,expect",
    [
        (elliptic.ellippi, (0.5, 0.5), 2.7012877620953506),
        (elliptic.ellipd, (0.5,), 1.0068615925073927),
        (elliptic.ellippiinc, (0.5, math.pi / 4, 0.5), 0.9190227391656969),
        (elliptic.ellippiinc_bulirsch, (0.5, math.pi / 4, 0.5), 0.9190227391656969),
        (elliptic.ellipdinc, (math.pi / 4, 0.5), 0.15566274414316758),
        (elliptic.jacobi_zeta, (math.pi / 4, 0.5), 0.146454543836188),
        (elliptic.heuman_lambda, (math.pi / 4, 0.5), 0.6183811341833665),
        (elliptic.ellipf, (math.pi / 4, 0.5), 0.826017876249245),
        (elliptic.ellipeinc, (math.pi / 4, 0.5), 0.7481865041776612),
    ],
)
def test_legendre_values(func, args, expect):
    """tabulated values at m = 0.5"""
    assert_allclose(func(*args), expect, rtol=1e-13)


def test_third_kind_relations():
    """Pi(0, m) is K(m), D relates K and E, the incomplete forms complete at pi/2"""
    m = 0.3
    k, e = elliptic.ellipk(m), elliptic.ellipe(m)
    assert_allclose(elliptic.ellippi(0.0, m), k, rtol=1e-13)
    assert_allclose(elliptic.ellipd(m), (k - e) / m, rtol=1e-12)
    assert_allclose(
        elliptic.ellippiinc(0.4, math.pi / 2, m), elliptic.ellippi(0.4, m), rtol=1e-13
    )
    assert_allclose(
        elliptic.ellipdinc(math.pi / 2, m), elliptic.ellipd(m), rtol=1e-13
    )


def test_amplitude_beyond_half_period():
    """the incomplete forms are quasi-periodic in phi"""
    n, m, phi = 0.4, 0.3, 0.7
    assert_allclose(
        elliptic.ellippiinc(n, phi + math.pi, m),
        elliptic.ellippiinc(n, phi, m) + 2 * elliptic.ellippi(n, m),
        rtol=1e-13,
    )
    assert_allclose(
        elliptic.ellipdinc(-phi, m), -elliptic.ellipdinc(phi, m), rtol=1e-14
    )
    assert math.isnan(elliptic.ellipdinc(math.inf, m))


def test_zeta_and_lambda_limits():
    """Z vanishes at phi = pi/2, Lambda0 is sin(phi) at m = 0"""
    assert_allclose(elliptic.jacobi_zeta(math.pi / 2, 0.5), 0.0, atol=1e-14)
    assert_allclose(
        elliptic.heuman_lambda(0.6, 0.0), math.sin(0.6), rtol=1e-13
    )
    assert math.isnan(elliptic.heuman_lambda(0.6, 1.0))


@pytest.mark.parametrize(
    "func,args,expect",
    [
        (elliptic.cel, (1.0, 1.0, 1.0, 0.5), 1.8540746773013717),
        (elliptic.cel1, (0.5,), 1.8540746773013717),
        (elliptic.cel2, (1.0, 1.0, 0.5), 1.8540746773013717),
        (elliptic.el1, (math.tan(math.pi / 4), 0.5), 0.826017876249245),
        (elliptic.el2, (math.tan(math.pi / 4), 1.0, 1.0, 0.5), 0.826017876249245),
        (elliptic.el3, (math.tan(math.pi / 4), 1.0, 0.5), 0.826017876249245),
    ],
)
def test_bulirsch_values(func, args, expect):
    """tabulated values at m = 0.5"""
    assert_allclose(func(*args), expect, rtol=1e-13)


def test_bulirsch_relations():
    """Bulirsch's integrals reproduce the Legendre forms"""
    m, phi, n = 0.3, 0.9, 0.4
    x = math.tan(phi)
    mc = 1.0 - m
    assert_allclose(elliptic.cel(1.0, 1.0, mc, m), elliptic.ellipe(m), rtol=1e-13)
    assert_allclose(elliptic.cel(1.0 - n, 1.0, 1.0, m), elliptic.ellippi(n, m), rtol=1e-13)
    assert_allclose(elliptic.el2(x, 1.0, mc, m), elliptic.ellipeinc(phi, m), rtol=1e-13)
    assert_allclose(
        elliptic.el3(x, 1.0 - n, m), elliptic.ellippiinc(n, phi, m), rtol=1e-13
    )
