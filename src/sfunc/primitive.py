"""Elementary functions consumed by the special functions.

One ``Primitive`` instance exists per supported float type. The special
functions evaluate in double precision via ``F64`` and round their results
with the instance matching their arguments, see ``primitive_for``.

The compiled kernels use ``math`` directly. Elementary methods such as
``ln``, ``exp``, ``sqrt``, ``powf`` or ``sin`` are public API for
evaluating in a chosen precision, the package itself only relies on
``cast``, ``ln_gamma``, ``tgamma`` and the error functions.
"""
from collections import namedtuple

import numpy

from scipy import special


__copyright__ = "Copyright 2014-date, The sfunc Project"
__license__ = "BSD-3"
__status__ = "Production"


LnGamma = namedtuple("LnGamma", ("value", "sign"))
LnGamma.__doc__ = """natural log of |Gamma(x)| and the sign (+1 or -1) of Gamma(x)"""


class Primitive:
    """elementary functions evaluated in a fixed floating point precision

    Parameters
    ----------
    dtype
        a numpy floating point type, arguments are converted to it before
        evaluation and results are returned as scalars of this type

    Notes
    -----
    Edge inputs (NaN, +/-inf, log of zero) follow numpy's IEEE-754
    conventions, they are not redefined here.
    """

    def __init__(self, dtype):
        self.dtype = numpy.dtype(dtype)
        if self.dtype.kind != "f":
            raise TypeError(f"{self.dtype} is not a floating point type")
        info = numpy.finfo(self.dtype)
        self.eps = self.cast(info.eps)
        self.tiny = self.cast(info.tiny)
        self.max = self.cast(info.max)
        self.PI = self.cast(numpy.pi)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.dtype.name})"

    def __eq__(self, other):
        return isinstance(other, Primitive) and other.dtype == self.dtype

    def __hash__(self):
        return hash(self.dtype)

    def cast(self, value):
        """returns value as a scalar of this precision"""
        return self.dtype.type(value)

    def abs(self, x):
        return numpy.abs(self.cast(x))

    def atan(self, x):
        return numpy.arctan(self.cast(x))

    def erf(self, x):
        return self.cast(special.erf(self.cast(x)))

    def erfc(self, x):
        return self.cast(special.erfc(self.cast(x)))

    def erfinv(self, y):
        return self.cast(special.erfinv(self.cast(y)))

    def erfcinv(self, y):
        return self.cast(special.erfcinv(self.cast(y)))

    def exp(self, x):
        return numpy.exp(self.cast(x))

    def exp_m1(self, x):
        return numpy.expm1(self.cast(x))

    def floor(self, x):
        return numpy.floor(self.cast(x))

    def ln(self, x):
        return numpy.log(self.cast(x))

    def ln_1p(self, x):
        return numpy.log1p(self.cast(x))

    def powf(self, x, y):
        return numpy.power(self.cast(x), self.cast(y))

    def powi(self, x, n):
        return numpy.power(self.cast(x), self.cast(int(n)))

    def sin(self, x):
        return numpy.sin(self.cast(x))

    def sqrt(self, x):
        return numpy.sqrt(self.cast(x))

    def tgamma(self, x):
        return self.cast(special.gamma(self.cast(x)))

    def ln_gamma(self, x):
        """returns LnGamma(value, sign) for Gamma(x)"""
        x = self.cast(x)
        value = self.cast(special.gammaln(x))
        sign = -1 if special.gammasgn(x) < 0 else 1
        return LnGamma(value, sign)


F32 = Primitive(numpy.float32)
F64 = Primitive(numpy.float64)


def primitive_for(*values):
    """returns the Primitive matching the precision of values

    Python floats and ints adopt the precision of any numpy arguments, so
    ``primitive_for(numpy.float32(0.5), 2.0)`` is ``F32``. Anything that is
    not single precision or lower evaluates as ``F64``.
    """
    dtype = numpy.result_type(*values)
    if dtype.kind == "c":
        raise TypeError("complex arguments are not supported")

    if dtype.kind == "f" and dtype.itemsize <= 4:
        return F32
    return F64
