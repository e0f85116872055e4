"""Deprecation support for renamed functions."""
import functools
import inspect

from typing import Any, Callable
from warnings import catch_warnings, simplefilter
from warnings import warn as _warn


def deprecated(_type, old, new, version, reason=None, stack_level=3):
    """warns that old is deprecated in favour of new

    Parameters
    ----------
    _type
        should be one of class, method, function, argument
    old, new
        the old and new names
    version
        the version by which support for the old name will be
        discontinued
    reason
        why, and what choices users have
    stack_level
        as per warnings.warn
    """
    msg = f"{_type} {old} which will be removed in version {version}, use {new} instead"
    if reason is not None:
        msg = f"{msg}\nreason={reason!r}"

    with catch_warnings():
        simplefilter("always")
        _warn(msg, DeprecationWarning, stacklevel=stack_level)


def deprecated_callable(
    version: str,
    reason: str,
    new: str,
    stack_level=2,
) -> Callable:
    """marks a function or method as renamed

    Parameters
    ----------
    version : str
        The version when it will be removed in calver format, e.g. 'YYYY.MM'
    reason : str
        Reason for deprecation or guidance on what to do
    new : str
        The replacement, e.g. 'ln_beta'
    stack_level
        as per warnings.warn

    Returns
    -------
    Callable
        The decorated callable, which warns every time it is called.

    Warnings
    --------
    DeprecationWarning

    Examples
    --------
    >>> @deprecated_callable(version='2027.1', reason='renamed', new='ln_beta')
    ... def log_beta(p, q): ...
    """

    def decorator(func: Callable) -> Callable:
        sig = set(inspect.signature(func).parameters)
        _type = "method" if sig & {"self", "cls", "klass"} else "function"

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            deprecated(
                _type,
                func.__name__,
                new,
                version,
                reason=reason,
                stack_level=stack_level + 1,
            )
            return func(*args, **kwargs)

        return wrapper

    return decorator
