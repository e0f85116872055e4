"""Error functions, delegated to the elementary-function provider."""
from sfunc.primitive import primitive_for


def erf(x):
    """returns the error function of x"""
    return primitive_for(x).erf(x)


def erfc(x):
    """returns the complementary error function of x, 1 - erf(x)"""
    return primitive_for(x).erfc(x)


def inv_erf(y):
    """returns x such that erf(x) == y, for -1 <= y <= 1"""
    return primitive_for(y).erfinv(y)


def inv_erfc(y):
    """returns x such that erfc(x) == y, for 0 <= y <= 2"""
    return primitive_for(y).erfcinv(y)
