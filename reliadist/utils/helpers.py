"""
Various small helper functions.
"""
import os
import inspect
import numpy
from numbers import Number
from typing import Any, Callable, Iterable, Type, Union, Tuple


def is_number(value: Any) -> bool:
    """Test if a value is a real number or a 0d numerical array.

    Currently type considered as numerical are:

    - int; but not bool
    - float; including numpy.inf and numpy.nan
    - numpy scalars and numpy.ndarray of real dtype with ndim == 0

    Complex numbers are rejected, as no distribution is defined on them.

    Parameters
    ----------
    value : Any
        Value to test

    Returns
    -------
    bool
        Is the value a real number?
    """
    if isinstance(value, (bool, numpy.bool_)):
        # to avoid bool being considered as int
        return False
    if isinstance(value, complex):
        return False
    if isinstance(value, Number):
        return not numpy.iscomplexobj(value)
    if isinstance(value, numpy.ndarray) and value.ndim == 0:
        return numpy.issubdtype(value.dtype, numpy.integer) or numpy.issubdtype(
            value.dtype, numpy.floating
        )
    return False


def get_typename(dtype: Union[Type, Tuple[Type]], multiformat="({})") -> str:
    if inspect.isclass(dtype):
        return dtype.__qualname__
    return multiformat.format(", ".join(sorted(set(t.__qualname__ for t in dtype))))


def check_arg(
    arg: Any,
    argname: str,
    dtype: Union[Type, Iterable[Type]],
    value_ok: Callable[[Any], bool] = None,
    stack_shift: int = 0,
):
    """
    Utility function for argument type and value validation.
    Raises a TypeError exception if type(arg) is not in type list given by 'dtype'.
    Raises a ValueError exception if value_ok(arg) is False, where 'value_ok' is a
    boolean function defining a validity criterion.

    For example:
    >>> check_arg(3, 'tag', int)
    does not raise any exception, as 3 is an int

    >>> check_arg(-0.12, 'tag', (int, str))
    raises TypeError, as first argument is neither an int, not a str

    >>> check_arg(-2, 'tag', int, value_ok = lambda x: x > 0)
    raises ValueError, as first argument is not strictly positive
    """
    def get_caller():
        level = 3 + max(0, stack_shift)
        stack = inspect.stack()
        return stack[level] if len(stack) > level else stack[-1]

    def get_context(caller):
        try:
            context = caller.code_context[0]
        except (IndexError, TypeError):
            context = ""
        return os.path.basename(caller.filename), caller.lineno, context

    # Check type
    if not isinstance(arg, dtype):
        valid = get_typename(dtype, multiformat="one of ({})")
        caller = get_caller()
        raise TypeError("argument '{}' should be {}; got {} {!r}\nIn {}, line #{}: \n{}".format(
            argname, valid, type(arg).__qualname__, arg, *get_context(caller)))
    # Check value
    if isinstance(value_ok, Callable) and not value_ok(arg):
        caller = get_caller()
        raise ValueError("argument {!r} was given invalid value {!r}\nIn {}, line #{}: \n{}".format(
            argname, arg, *get_context(caller)))


def check_number(arg: Any, argname: str, stack_shift: int = 0) -> float:
    """Check that `arg` is a real number and return it as a float.

    Raises
    ------
    TypeError
        If `arg` is not a real number (see :py:func:`is_number`).
    """
    if not is_number(arg):
        check_arg(arg, argname, (int, float), stack_shift=stack_shift + 1)
        # bool and complex pass the isinstance test above
        raise TypeError(
            f"argument {argname!r} should be a real number; got {type(arg).__qualname__} {arg!r}"
        )
    return float(arg)
