"""Special functions over IEEE-754 floats: incomplete beta and its inverse,
incomplete gamma, digamma, error functions, Lambert W and elliptic integrals.
Each call evaluates a single scalar in single or double precision."""
import logging
import os
import typing
import warnings

from importlib import import_module

from sfunc._version import __version__


__copyright__ = "Copyright 2014-date, The sfunc Project"
__credits__ = "https://github.com/sfunc/sfunc/graphs/contributors"
__license__ = "BSD-3"


def __getattr__(name: str) -> typing.Any:
    if (attr := globals().get(name)) is not None:
        return attr

    if name not in _import_mapping:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name = _import_mapping[name]
    module = import_module(f".{module_name}", package=__name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


_import_mapping = {
    "ln_beta": "beta",
    "inc_beta": "beta",
    "inv_inc_beta": "beta",
    "log_beta": "beta",
    "lbeta": "beta",
    "inc_gamma": "gamma",
    "ln_gamma": "gamma",
    "lgamma": "gamma",
    "digamma": "gamma",
    "erf": "error",
    "erfc": "error",
    "inv_erf": "error",
    "inv_erfc": "error",
    "lambert_w0": "lambert_w",
    "lambert_wm1": "lambert_w",
    "ellipk": "elliptic",
    "ellipe": "elliptic",
    "ellipf": "elliptic",
    "ellipeinc": "elliptic",
    "elliprf": "elliptic",
    "elliprg": "elliptic",
    "elliprj": "elliptic",
    "elliprc": "elliptic",
    "elliprd": "elliptic",
    "ellippi": "elliptic",
    "ellipd": "elliptic",
    "ellippiinc": "elliptic",
    "ellippiinc_bulirsch": "elliptic",
    "ellipdinc": "elliptic",
    "jacobi_zeta": "elliptic",
    "heuman_lambda": "elliptic",
    "cel": "elliptic",
    "cel1": "elliptic",
    "cel2": "elliptic",
    "el1": "elliptic",
    "el2": "elliptic",
    "el3": "elliptic",
    "DomainError": "exceptions",
    "ConvergenceError": "exceptions",
    "Primitive": "primitive",
    "LnGamma": "primitive",
    "F32": "primitive",
    "F64": "primitive",
}


def __dir__() -> list[str]:
    return list(_import_mapping.keys()) + list(globals().keys())


__all__ = list(_import_mapping.keys())

version = __version__
version_info = tuple(int(v) for v in version.split(".") if v.isdigit())

warn_env = "SFUNC_WARNINGS"

if warn := os.environ.get(warn_env):
    warnings.simplefilter(warn)

# the iteration kernels are jit compiled, suppress numba chatter
__numba_logger = logging.getLogger("numba")
__numba_logger.setLevel(logging.WARNING)
