import math
import pickle

import numpy
import pytest

from numpy.testing import assert_allclose

from sfunc.primitive import F32, F64, LnGamma, Primitive, primitive_for


def test_primitive_dtype():
    """instances are bound to a floating point type"""
    assert F32.dtype == numpy.float32
    assert F64.dtype == numpy.float64
    assert isinstance(F32.cast(1), numpy.float32)
    assert F64.eps == numpy.finfo(numpy.float64).eps
    assert repr(F32) == "Primitive(float32)"
    assert Primitive(numpy.float64) == F64
    assert F32 != F64


def test_primitive_rejects_non_float():
    with pytest.raises(TypeError):
        Primitive(numpy.int64)


@pytest.mark.parametrize(
    "args,expect",
    [
        ((0.5,), F64),
        ((1, 2), F64),
        ((numpy.float64(0.5), 2.0), F64),
        ((numpy.float32(0.5),), F32),
        ((numpy.float32(0.5), 2.0, 3), F32),
        ((numpy.float16(0.5), 2.0), F32),
        ((numpy.float32(0.5), numpy.float64(2.0)), F64),
    ],
)
def test_primitive_for(args, expect):
    """precision follows the numpy arguments"""
    assert primitive_for(*args) is expect


def test_primitive_for_complex():
    with pytest.raises(TypeError):
        primitive_for(1 + 2j)


@pytest.mark.parametrize("prim", [F32, F64])
def test_elementary(prim):
    """elementary functions return values of the instance precision"""
    rtol = 1e-6 if prim is F32 else 1e-15
    for name, args, expect in [
        ("ln", (math.e,), 1.0),
        ("exp", (1.0,), math.e),
        ("sqrt", (2.0,), math.sqrt(2)),
        ("powf", (2.0, 0.5), math.sqrt(2)),
        ("powi", (2.0, 10), 1024.0),
        ("sin", (math.pi / 2,), 1.0),
        ("atan", (1.0,), math.pi / 4),
        ("abs", (-3.0,), 3.0),
        ("floor", (2.7,), 2.0),
        ("ln_1p", (1e-10,), math.log1p(1e-10)),
        ("exp_m1", (1e-10,), math.expm1(1e-10)),
        ("tgamma", (4.0,), 6.0),
        ("erf", (1.0,), 0.8427007929497149),
        ("erfc", (1.0,), 0.1572992070502851),
    ]:
        got = getattr(prim, name)(*args)
        assert got.dtype == prim.dtype, name
        assert_allclose(got, expect, rtol=rtol, err_msg=name)


def test_ln_gamma_sign():
    """ln_gamma returns a two field result"""
    got = F64.ln_gamma(-1.5)
    assert isinstance(got, LnGamma)
    # Gamma(-1.5) = 4 sqrt(pi) / 3
    assert_allclose(got.value, math.log(4 * math.sqrt(math.pi) / 3), rtol=1e-14)
    assert got.sign == 1
    assert F64.ln_gamma(-0.5).sign == -1
    assert F32.ln_gamma(3.0).value.dtype == numpy.float32


def test_ln_gamma_pickles():
    got = F64.ln_gamma(2.5)
    assert pickle.loads(pickle.dumps(got)) == got
